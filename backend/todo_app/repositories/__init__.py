"""Repositories — storage adapter over the async SQLAlchemy session.

Invariants:
    - Every method builds its own statement (no shared mutable query state)
    - Repositories flush but never commit: the calling service owns the transaction
    - No business rules beyond referential lookups
"""
