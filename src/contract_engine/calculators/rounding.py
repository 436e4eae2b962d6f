"""Rounding discipline for wage outputs.

Rules:
- Currency is the integer won; round only when a named output field is produced
- Intermediate values keep full Decimal precision
- Ties go to the even neighbour (ROUND_HALF_EVEN)
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

WON = Decimal("1")
TENTH = Decimal("0.1")


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a numeric input to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_won(amount: Decimal) -> int:
    """Round an amount to a whole won."""
    return int(amount.quantize(WON, rounding=ROUND_HALF_EVEN))


def round_tenth(value: Decimal) -> Decimal:
    """Round a quantity (usually hours) to one decimal place."""
    return value.quantize(TENTH, rounding=ROUND_HALF_EVEN)
