"""Statutory rate tables.

Versioned constants consulted by the calculators. Nothing here is mutated at
runtime; a year missing from the minimum wage table is a configuration error
and is never defaulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from contract_engine.calculators.rounding import round_won

# Minimum hourly wage (won) by calendar year, as published by the Minimum Wage Commission
MINIMUM_WAGE_BY_YEAR = MappingProxyType({
    2024: 9_860,
    2025: 10_030,
    2026: 10_320,
})

# Full-time rule of thumb: hourly wage including weekly holiday pay (48h / 40h)
HOLIDAY_PAY_MULTIPLIER = Decimal("1.2")

# Premium for overtime and holiday work
OVERTIME_PREMIUM = Decimal("1.5")

STANDARD_DAILY_HOURS = Decimal("8")
WEEKLY_HOLIDAY_THRESHOLD_HOURS = Decimal("15")
HOLIDAY_HOURS_DAILY_CAP = Decimal("8")

# Average weeks per month, fixed at 365 / 12 / 7 rounded to three places
WEEKS_PER_MONTH = Decimal("4.345")


class UnknownRateYearError(LookupError):
    """Raised when the minimum wage table has no entry for a year."""

    def __init__(self, year: int):
        self.year = year
        known = ", ".join(str(y) for y in sorted(MINIMUM_WAGE_BY_YEAR))
        super().__init__(f"No minimum wage configured for {year} (known years: {known})")


def minimum_wage(year: int) -> int:
    """Look up the statutory minimum hourly wage for a year."""
    try:
        return MINIMUM_WAGE_BY_YEAR[year]
    except KeyError:
        raise UnknownRateYearError(year) from None


def known_years() -> list[int]:
    """Years with a configured minimum wage, ascending."""
    return sorted(MINIMUM_WAGE_BY_YEAR)


@dataclass(frozen=True)
class MinimumWageCheck:
    """Outcome of comparing a quoted hourly wage to the statutory minimum."""

    year: int
    minimum_wage: int
    required_hourly_wage: int
    hourly_wage: int
    includes_weekly_holiday_pay: bool

    @property
    def shortfall(self) -> int:
        return max(0, self.required_hourly_wage - self.hourly_wage)

    @property
    def is_compliant(self) -> bool:
        return self.hourly_wage >= self.required_hourly_wage


def check_minimum_wage(
    hourly_wage: int,
    year: int,
    includes_weekly_holiday_pay: bool = False,
) -> MinimumWageCheck:
    """Check an hourly wage against the minimum wage for a year.

    When the quoted wage already bundles weekly holiday pay, the floor is the
    minimum wage scaled by HOLIDAY_PAY_MULTIPLIER.
    """
    floor = minimum_wage(year)
    required = floor
    if includes_weekly_holiday_pay:
        required = round_won(Decimal(floor) * HOLIDAY_PAY_MULTIPLIER)

    return MinimumWageCheck(
        year=year,
        minimum_wage=floor,
        required_hourly_wage=required,
        hourly_wage=hourly_wage,
        includes_weekly_holiday_pay=includes_weekly_holiday_pay,
    )
