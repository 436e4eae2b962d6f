"""Weekly and monthly wage breakdowns."""

from __future__ import annotations

from decimal import Decimal

from contract_engine.calculators.rate_tables import WEEKS_PER_MONTH
from contract_engine.calculators.rounding import round_won, to_decimal
from contract_engine.calculators.types import PayPeriod, WageBreakdown
from contract_engine.calculators.weekly_holiday import calculate_weekly_holiday_pay


def _breakdown(
    period: PayPeriod,
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
    weeks: Decimal,
) -> WageBreakdown:
    holiday = calculate_weekly_holiday_pay(hourly_wage, work_days_per_week, daily_work_hours)

    base_wage = round_won(hourly_wage * holiday.weekly_work_hours * weeks)
    holiday_pay = (
        round_won(holiday.weekly_holiday_pay_per_week * weeks) if holiday.is_eligible else 0
    )

    return WageBreakdown(
        period=period,
        base_wage=base_wage,
        weekly_holiday_pay=holiday_pay,
        total_wage=base_wage + holiday_pay,
        weekly_work_hours=holiday.weekly_work_hours,
        is_weekly_holiday_eligible=holiday.is_eligible,
    )


def monthly_breakdown(
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
    weeks_per_month: Decimal | float = WEEKS_PER_MONTH,
) -> WageBreakdown:
    """Monthly base wage, weekly holiday pay and total.

    base = hourly wage x weekly hours x weeks per month
    holiday = weekly holiday pay per week x weeks per month
    """
    return _breakdown(
        PayPeriod.MONTHLY,
        hourly_wage,
        work_days_per_week,
        daily_work_hours,
        to_decimal(weeks_per_month),
    )


def weekly_breakdown(
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
) -> WageBreakdown:
    """Weekly base wage, weekly holiday pay and total."""
    return _breakdown(
        PayPeriod.WEEKLY,
        hourly_wage,
        work_days_per_week,
        daily_work_hours,
        Decimal("1"),
    )


def wage_breakdown(
    period: PayPeriod,
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
) -> WageBreakdown:
    """Dispatch to the breakdown for a pay period."""
    if period == PayPeriod.MONTHLY:
        return monthly_breakdown(hourly_wage, work_days_per_week, daily_work_hours)
    if period == PayPeriod.WEEKLY:
        return weekly_breakdown(hourly_wage, work_days_per_week, daily_work_hours)
    raise ValueError(f"Unsupported pay period: {period!r}")
