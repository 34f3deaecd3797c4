"""ZenStudent Application Package - student wellness tracker API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
