"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; handlers only see typed objects
    - JSON field names are camelCase, Python attributes snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
