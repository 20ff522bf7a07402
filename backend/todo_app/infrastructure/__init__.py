"""Infrastructure Layer — database engine, password hashing and logging.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Thin wrappers over third-party clients (SQLAlchemy, bcrypt)
"""
