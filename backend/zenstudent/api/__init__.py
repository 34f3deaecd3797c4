"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Every /api route except auth and health requires a bearer token

Design Decisions:
    - Thin routes: reductions live in core/, multi-step writes in services/
"""
