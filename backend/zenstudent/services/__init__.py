"""Services Layer - async operations that need more than one DB round trip.

Invariants:
    - Services receive their AsyncSession from the caller, never open one
    - Domain rules stay in core/; services only sequence IO around them
"""
