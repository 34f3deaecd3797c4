"""Infrastructure Layer - database access, security primitives and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - SQLAlchemy and token library errors are mapped to core/errors.py types here
"""
