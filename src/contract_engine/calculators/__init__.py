"""Wage compliance calculators."""

from contract_engine.calculators.engine import WageEngine, WageSummary
from contract_engine.calculators.inclusive_wage import (
    InclusiveWageNotApplicableError,
    calculate_inclusive_wage,
    suggest_unit_rates,
)
from contract_engine.calculators.rate_tables import (
    HOLIDAY_PAY_MULTIPLIER,
    WEEKS_PER_MONTH,
    UnknownRateYearError,
    check_minimum_wage,
    minimum_wage,
)
from contract_engine.calculators.time_utils import (
    InvalidClockTimeError,
    InvalidScheduleError,
    elapsed_work_hours,
)
from contract_engine.calculators.types import (
    AllowanceTreatment,
    BusinessSize,
    ContractTerms,
    PayPeriod,
    WageBreakdown,
    WageType,
    WeeklyHolidayPayResult,
)
from contract_engine.calculators.wage_breakdown import monthly_breakdown, weekly_breakdown
from contract_engine.calculators.weekly_holiday import calculate_weekly_holiday_pay

__all__ = [
    "WageEngine",
    "WageSummary",
    "InclusiveWageNotApplicableError",
    "calculate_inclusive_wage",
    "suggest_unit_rates",
    "HOLIDAY_PAY_MULTIPLIER",
    "WEEKS_PER_MONTH",
    "UnknownRateYearError",
    "check_minimum_wage",
    "minimum_wage",
    "InvalidClockTimeError",
    "InvalidScheduleError",
    "elapsed_work_hours",
    "AllowanceTreatment",
    "BusinessSize",
    "ContractTerms",
    "PayPeriod",
    "WageBreakdown",
    "WageType",
    "WeeklyHolidayPayResult",
    "monthly_breakdown",
    "weekly_breakdown",
    "calculate_weekly_holiday_pay",
]
