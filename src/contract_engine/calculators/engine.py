"""Wage engine - composes the calculators for one set of contract terms."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from contract_engine.calculators.inclusive_wage import (
    calculate_inclusive_wage,
    is_inclusive_wage_applicable,
    suggest_unit_rates,
)
from contract_engine.calculators.types import (
    ContractTerms,
    InclusiveWageResult,
    PayPeriod,
    UnitRateSuggestion,
    WageBreakdown,
    WeeklyHolidayPayResult,
)
from contract_engine.calculators.wage_breakdown import wage_breakdown
from contract_engine.calculators.weekly_holiday import calculate_weekly_holiday_pay


@dataclass(frozen=True)
class WageSummary:
    """Everything a document or UI needs to show the wage section."""

    terms: ContractTerms
    daily_work_hours: Decimal
    weekly_holiday: WeeklyHolidayPayResult
    breakdown: WageBreakdown
    inclusive: InclusiveWageResult | None = None
    suggested_rates: UnitRateSuggestion | None = None


class WageEngine:
    """Wage calculation pipeline.

    Pipeline (stable order):
    1) Elapsed daily hours from the clock fields and break
    2) Weekly holiday pay eligibility and amounts
    3) Periodized breakdown (weekly or monthly)
    4) Inclusive wage allowances, over5 worksites with an explicit overtime rate
    5) Unit rate suggestions, over5 worksites that have not set one
    """

    @staticmethod
    def summarize(
        terms: ContractTerms,
        period: PayPeriod = PayPeriod.MONTHLY,
    ) -> WageSummary:
        daily_hours = terms.daily_work_hours

        weekly_holiday = calculate_weekly_holiday_pay(
            terms.hourly_wage, terms.work_days_per_week, daily_hours
        )
        breakdown = wage_breakdown(
            PayPeriod(period), terms.hourly_wage, terms.work_days_per_week, daily_hours
        )

        inclusive: InclusiveWageResult | None = None
        suggested: UnitRateSuggestion | None = None
        if is_inclusive_wage_applicable(terms.business_size):
            if terms.has_inclusive_rates:
                inclusive = calculate_inclusive_wage(
                    hourly_wage=terms.hourly_wage,
                    work_days_per_week=terms.work_days_per_week,
                    daily_work_hours=daily_hours,
                    business_size=terms.business_size,
                    overtime_rate_per_hour=terms.overtime_rate_per_hour,
                    holiday_rate_per_day=terms.holiday_rate_per_day,
                    annual_leave_rate_per_day=terms.annual_leave_rate_per_day,
                )
            else:
                suggested = suggest_unit_rates(terms.hourly_wage, daily_hours)

        return WageSummary(
            terms=terms,
            daily_work_hours=daily_hours,
            weekly_holiday=weekly_holiday,
            breakdown=breakdown,
            inclusive=inclusive,
            suggested_rates=suggested,
        )
