"""Tests for inclusive wage allowances."""

from decimal import Decimal

import pytest

from contract_engine.calculators.inclusive_wage import (
    InclusiveWageNotApplicableError,
    calculate_inclusive_wage,
    is_inclusive_wage_applicable,
    suggest_unit_rates,
)
from contract_engine.calculators.types import (
    AllowanceKind,
    AllowanceTreatment,
    BusinessSize,
)


class TestCalculateInclusiveWage:
    """Test the fixed overtime allowance and allowance classification."""

    def test_ten_hour_days(self):
        """2 overtime hours x 5 days x 4.345 = 43.45h, rounded half-even to 43.4."""
        result = calculate_inclusive_wage(
            hourly_wage=10_000,
            work_days_per_week=5,
            daily_work_hours=10,
            business_size=BusinessSize.OVER5,
            overtime_rate_per_hour=15_000,
        )

        assert result.daily_overtime_hours == 2
        assert result.monthly_overtime_hours == Decimal("43.4")
        assert result.monthly_overtime_pay == 651_000
        assert result.fixed_monthly_total == 651_000

    def test_no_overtime_at_eight_hours(self):
        result = calculate_inclusive_wage(
            hourly_wage=10_000,
            work_days_per_week=5,
            daily_work_hours=8,
            business_size="over5",
            overtime_rate_per_hour=15_000,
        )

        assert result.daily_overtime_hours == 0
        assert result.monthly_overtime_hours == 0
        assert result.monthly_overtime_pay == 0

    def test_only_overtime_enters_fixed_pay(self):
        """Holiday work and annual leave are day rates, never part of the fixed total."""
        result = calculate_inclusive_wage(
            hourly_wage=10_000,
            work_days_per_week=5,
            daily_work_hours=10,
            business_size=BusinessSize.OVER5,
            overtime_rate_per_hour=15_000,
            holiday_rate_per_day=150_000,
            annual_leave_rate_per_day=100_000,
        )

        assert [a.kind for a in result.allowances] == [
            AllowanceKind.OVERTIME,
            AllowanceKind.HOLIDAY_WORK,
            AllowanceKind.ANNUAL_LEAVE,
        ]
        assert result.fixed_monthly_total == result.monthly_overtime_pay

        holiday = result.by_treatment(AllowanceTreatment.SETTLED_ON_OCCURRENCE)
        assert len(holiday) == 1
        assert holiday[0].unit == "day"
        assert holiday[0].unit_rate == 150_000
        assert holiday[0].monthly_amount is None

        flagged = result.by_treatment(AllowanceTreatment.COMPLIANCE_RISK_FLAGGED)
        assert [a.kind for a in flagged] == [AllowanceKind.ANNUAL_LEAVE]
        assert flagged[0].note

    def test_optional_rates_omitted(self):
        result = calculate_inclusive_wage(
            hourly_wage=10_000,
            work_days_per_week=5,
            daily_work_hours=9,
            business_size=BusinessSize.OVER5,
            overtime_rate_per_hour=15_000,
        )

        assert len(result.allowances) == 1

    def test_under5_rejected(self):
        with pytest.raises(InclusiveWageNotApplicableError) as exc_info:
            calculate_inclusive_wage(
                hourly_wage=10_000,
                work_days_per_week=5,
                daily_work_hours=10,
                business_size=BusinessSize.UNDER5,
                overtime_rate_per_hour=15_000,
            )

        assert exc_info.value.business_size == BusinessSize.UNDER5
        assert isinstance(exc_info.value, ValueError)

    def test_applicability(self):
        assert is_inclusive_wage_applicable("over5") is True
        assert is_inclusive_wage_applicable(BusinessSize.UNDER5) is False


class TestSuggestUnitRates:
    def test_defaults(self):
        suggestion = suggest_unit_rates(10_000, 8)

        assert suggestion.overtime_per_hour == 15_000
        assert suggestion.holiday_per_day == 120_000
        assert suggestion.annual_leave_per_day == 80_000

    def test_half_even_rounding(self):
        """10,031 x 1.5 = 15,046.5, rounded to the even neighbour."""
        assert suggest_unit_rates(10_031, 8).overtime_per_hour == 15_046
