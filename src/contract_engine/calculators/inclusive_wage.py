"""Inclusive (comprehensive) wage allowances for over5 worksites.

Allowance classification:
- Overtime: scheduled, so it is pre-paid as a fixed monthly amount
- Holiday work: unplannable, settled per actual occurrence at the day rate
- Annual leave cash-out: disclosed at the day rate and flagged, since
  pre-paying it can be read as buying out the right to take leave
"""

from __future__ import annotations

from decimal import Decimal

from contract_engine.calculators.rate_tables import (
    OVERTIME_PREMIUM,
    STANDARD_DAILY_HOURS,
    WEEKS_PER_MONTH,
)
from contract_engine.calculators.rounding import round_tenth, round_won, to_decimal
from contract_engine.calculators.types import (
    AllowanceKind,
    AllowanceTreatment,
    BusinessSize,
    InclusiveAllowance,
    InclusiveWageResult,
    UnitRateSuggestion,
)

ALLOWANCE_TREATMENTS: dict[AllowanceKind, AllowanceTreatment] = {
    AllowanceKind.OVERTIME: AllowanceTreatment.INCLUDED_IN_FIXED_PAY,
    AllowanceKind.HOLIDAY_WORK: AllowanceTreatment.SETTLED_ON_OCCURRENCE,
    AllowanceKind.ANNUAL_LEAVE: AllowanceTreatment.COMPLIANCE_RISK_FLAGGED,
}

HOLIDAY_WORK_NOTE = "Settled per actual holiday worked; not part of the fixed monthly pay"
ANNUAL_LEAVE_NOTE = (
    "Pre-paying unused annual leave may be treated as restricting the right to take leave"
)


class InclusiveWageNotApplicableError(ValueError):
    """Raised when inclusive wage allowances are requested for an under5 worksite."""

    def __init__(self, business_size: BusinessSize):
        self.business_size = business_size
        super().__init__(
            f"Inclusive wage disclosure applies to over5 worksites, not {business_size.value!r}"
        )


def is_inclusive_wage_applicable(business_size: BusinessSize | str) -> bool:
    return BusinessSize(business_size) == BusinessSize.OVER5


def calculate_inclusive_wage(
    hourly_wage: int,
    work_days_per_week: int,
    daily_work_hours: Decimal | float | int,
    business_size: BusinessSize | str,
    overtime_rate_per_hour: int,
    holiday_rate_per_day: int | None = None,
    annual_leave_rate_per_day: int | None = None,
) -> InclusiveWageResult:
    """Derive the fixed monthly overtime allowance and classify every allowance.

    Overtime is the scheduled time beyond 8 hours a day. Holiday work and
    annual leave are reported as day rates only and never enter the fixed
    monthly total.

    Raises:
        InclusiveWageNotApplicableError: If the worksite is not over5
    """
    size = BusinessSize(business_size)
    if not is_inclusive_wage_applicable(size):
        raise InclusiveWageNotApplicableError(size)

    daily_hours = to_decimal(daily_work_hours)
    daily_overtime_hours = max(Decimal("0"), daily_hours - STANDARD_DAILY_HOURS)
    monthly_overtime_hours = round_tenth(
        daily_overtime_hours * work_days_per_week * WEEKS_PER_MONTH
    )
    monthly_overtime_pay = round_won(overtime_rate_per_hour * monthly_overtime_hours)

    allowances = [
        InclusiveAllowance(
            kind=AllowanceKind.OVERTIME,
            unit="hour",
            unit_rate=overtime_rate_per_hour,
            treatment=ALLOWANCE_TREATMENTS[AllowanceKind.OVERTIME],
            monthly_amount=monthly_overtime_pay,
        )
    ]
    if holiday_rate_per_day is not None:
        allowances.append(
            InclusiveAllowance(
                kind=AllowanceKind.HOLIDAY_WORK,
                unit="day",
                unit_rate=holiday_rate_per_day,
                treatment=ALLOWANCE_TREATMENTS[AllowanceKind.HOLIDAY_WORK],
                note=HOLIDAY_WORK_NOTE,
            )
        )
    if annual_leave_rate_per_day is not None:
        allowances.append(
            InclusiveAllowance(
                kind=AllowanceKind.ANNUAL_LEAVE,
                unit="day",
                unit_rate=annual_leave_rate_per_day,
                treatment=ALLOWANCE_TREATMENTS[AllowanceKind.ANNUAL_LEAVE],
                note=ANNUAL_LEAVE_NOTE,
            )
        )

    return InclusiveWageResult(
        daily_overtime_hours=daily_overtime_hours,
        monthly_overtime_hours=monthly_overtime_hours,
        monthly_overtime_pay=monthly_overtime_pay,
        allowances=tuple(allowances),
    )


def suggest_unit_rates(
    hourly_wage: int,
    daily_work_hours: Decimal | float | int,
) -> UnitRateSuggestion:
    """Default unit rates to pre-fill a form. Callers must confirm them."""
    daily_hours = to_decimal(daily_work_hours)
    return UnitRateSuggestion(
        overtime_per_hour=round_won(hourly_wage * OVERTIME_PREMIUM),
        holiday_per_day=round_won(hourly_wage * OVERTIME_PREMIUM * daily_hours),
        annual_leave_per_day=round_won(hourly_wage * daily_hours),
    )
