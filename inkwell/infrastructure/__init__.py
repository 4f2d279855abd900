"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are translated to core/errors.py types before leaving this layer
"""
