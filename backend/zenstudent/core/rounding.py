"""Rounding helpers - half-up rounding for percentages and money."""

from decimal import Decimal, ROUND_HALF_UP

_CENT = Decimal("0.01")


def _quantize(value: float | Decimal, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def round_half_up(value: float | Decimal, places: int) -> float:
    """Round halves away from zero (4.25 -> 4.3 at one place), unlike built-in round()."""
    return float(_quantize(value, places))


def round_half_up_int(value: float | Decimal) -> int:
    """Nearest whole number, halves away from zero (2.5 -> 3)."""
    return int(_quantize(value, 0))


def to_cents(value: Decimal) -> float:
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))
