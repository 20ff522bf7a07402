"""Pydantic Schemas — request bodies and narrow response projections.

Invariants:
    - Request bodies accept null/missing fields: presence is enforced by the
      services so the caller gets the domain error message, not a schema error
    - Response projections never include the password field

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
