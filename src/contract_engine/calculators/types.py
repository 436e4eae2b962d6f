"""Type definitions for the wage calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from contract_engine.calculators.time_utils import (
    elapsed_work_hours,
    parse_clock_time,
    validate_schedule,
)


class BusinessSize(str, Enum):
    """Worksite headcount class used for statutory disclosure rules."""

    UNDER5 = "under5"
    OVER5 = "over5"


class WageType(str, Enum):
    """How the wage is quoted on the contract."""

    HOURLY = "hourly"
    MONTHLY = "monthly"


class PayPeriod(str, Enum):
    """Periodization of a wage breakdown."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


class AllowanceTreatment(str, Enum):
    """How an inclusive-wage allowance may be paid."""

    INCLUDED_IN_FIXED_PAY = "included_in_fixed_pay"
    SETTLED_ON_OCCURRENCE = "settled_on_occurrence"
    COMPLIANCE_RISK_FLAGGED = "compliance_risk_flagged"


class AllowanceKind(str, Enum):
    """Allowances disclosed under an inclusive wage agreement."""

    OVERTIME = "overtime"
    HOLIDAY_WORK = "holiday_work"
    ANNUAL_LEAVE = "annual_leave"


@dataclass(frozen=True)
class ContractTerms:
    """Wage and schedule terms of one contract, validated on construction."""

    hourly_wage: int
    work_days_per_week: int
    work_start_time: str
    work_end_time: str
    break_minutes: int = 0
    business_size: BusinessSize = BusinessSize.UNDER5
    wage_type: WageType = WageType.HOURLY

    # Inclusive wage unit rates (over5 worksites only)
    overtime_rate_per_hour: int | None = None
    holiday_rate_per_day: int | None = None
    annual_leave_rate_per_day: int | None = None

    def __post_init__(self) -> None:
        if self.hourly_wage < 0:
            raise ValueError(f"hourly_wage must not be negative, got {self.hourly_wage}")
        validate_schedule(self.work_days_per_week, self.break_minutes)
        parse_clock_time(self.work_start_time)
        parse_clock_time(self.work_end_time)
        # Accept raw string tags from callers, store the enum
        object.__setattr__(self, "business_size", BusinessSize(self.business_size))
        object.__setattr__(self, "wage_type", WageType(self.wage_type))

    @property
    def daily_work_hours(self) -> Decimal:
        return elapsed_work_hours(
            self.work_start_time, self.work_end_time, self.break_minutes
        )

    @property
    def has_inclusive_rates(self) -> bool:
        return self.overtime_rate_per_hour is not None


@dataclass(frozen=True)
class WeeklyHolidayPayResult:
    """Weekly paid-rest allowance for one schedule."""

    is_eligible: bool
    weekly_work_hours: Decimal
    daily_work_hours: Decimal
    weekly_holiday_hours: Decimal
    base_hourly_wage: int
    weekly_holiday_pay_per_hour: int
    weekly_holiday_pay_per_week: int
    effective_hourly_wage: int


@dataclass(frozen=True)
class WageBreakdown:
    """Compensation summary for one pay period."""

    period: PayPeriod
    base_wage: int
    weekly_holiday_pay: int
    total_wage: int
    weekly_work_hours: Decimal
    is_weekly_holiday_eligible: bool


@dataclass(frozen=True)
class InclusiveAllowance:
    """One allowance line of an inclusive wage disclosure.

    monthly_amount is set only for allowances included in the fixed pay.
    """

    kind: AllowanceKind
    unit: str  # "hour" or "day"
    unit_rate: int
    treatment: AllowanceTreatment
    monthly_amount: int | None = None
    note: str | None = None


@dataclass(frozen=True)
class InclusiveWageResult:
    """Fixed monthly allowances for an over5 worksite."""

    daily_overtime_hours: Decimal
    monthly_overtime_hours: Decimal
    monthly_overtime_pay: int
    allowances: tuple[InclusiveAllowance, ...]

    @property
    def fixed_monthly_total(self) -> int:
        return sum(
            a.monthly_amount or 0
            for a in self.allowances
            if a.treatment == AllowanceTreatment.INCLUDED_IN_FIXED_PAY
        )

    def by_treatment(self, treatment: AllowanceTreatment) -> list[InclusiveAllowance]:
        return [a for a in self.allowances if a.treatment == treatment]


@dataclass(frozen=True)
class UnitRateSuggestion:
    """Pre-fill values for inclusive wage unit rates. Never binding."""

    overtime_per_hour: int
    holiday_per_day: int
    annual_leave_per_day: int
