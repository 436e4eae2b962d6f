"""Weekly holiday pay (weekly paid-rest allowance) calculator."""

from __future__ import annotations

from decimal import Decimal

from contract_engine.calculators.rate_tables import (
    HOLIDAY_HOURS_DAILY_CAP,
    WEEKLY_HOLIDAY_THRESHOLD_HOURS,
)
from contract_engine.calculators.rounding import round_won, to_decimal
from contract_engine.calculators.types import WeeklyHolidayPayResult


def is_weekly_holiday_eligible(weekly_work_hours: Decimal) -> bool:
    """The allowance is owed from 15 scheduled hours a week, inclusive."""
    return weekly_work_hours >= WEEKLY_HOLIDAY_THRESHOLD_HOURS


def calculate_weekly_holiday_pay(
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
) -> WeeklyHolidayPayResult:
    """Calculate the weekly holiday allowance for a schedule.

    Credited holiday hours equal one scheduled day, capped at 8 hours.
    Below the weekly threshold there is no partial credit: the allowance is
    zero and the effective hourly wage equals the base wage.

    Only the three money outputs are rounded; each is derived from the
    unrounded value of the previous step.
    """
    daily_hours = to_decimal(daily_work_hours)
    weekly_work_hours = work_days_per_week * daily_hours

    if not is_weekly_holiday_eligible(weekly_work_hours):
        return WeeklyHolidayPayResult(
            is_eligible=False,
            weekly_work_hours=weekly_work_hours,
            daily_work_hours=daily_hours,
            weekly_holiday_hours=Decimal("0"),
            base_hourly_wage=hourly_wage,
            weekly_holiday_pay_per_hour=0,
            weekly_holiday_pay_per_week=0,
            effective_hourly_wage=hourly_wage,
        )

    holiday_hours = min(daily_hours, HOLIDAY_HOURS_DAILY_CAP)
    pay_per_week = holiday_hours * hourly_wage
    pay_per_hour = pay_per_week / weekly_work_hours
    effective_hourly_wage = hourly_wage + pay_per_hour

    return WeeklyHolidayPayResult(
        is_eligible=True,
        weekly_work_hours=weekly_work_hours,
        daily_work_hours=daily_hours,
        weekly_holiday_hours=holiday_hours,
        base_hourly_wage=hourly_wage,
        weekly_holiday_pay_per_hour=round_won(pay_per_hour),
        weekly_holiday_pay_per_week=round_won(pay_per_week),
        effective_hourly_wage=round_won(effective_hourly_wage),
    )
