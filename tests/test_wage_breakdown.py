"""Tests for weekly and monthly wage breakdowns."""

from decimal import Decimal

import pytest

from contract_engine.calculators.types import PayPeriod
from contract_engine.calculators.wage_breakdown import (
    monthly_breakdown,
    wage_breakdown,
    weekly_breakdown,
)


class TestMonthlyBreakdown:
    """Test monthly breakdowns at 4.345 weeks per month."""

    def test_round_numbers(self):
        result = monthly_breakdown(10_000, 5, 8)

        assert result.period == PayPeriod.MONTHLY
        assert result.base_wage == 1_738_000
        assert result.weekly_holiday_pay == 347_600
        assert result.total_wage == 2_085_600
        assert result.is_weekly_holiday_eligible is True

    def test_full_time_schedule(self):
        """Holiday pay is 82,880 x 4.345 = 360,113.6, rounded to 360,114."""
        result = monthly_breakdown(10_360, 5, 8)

        assert result.base_wage == 1_800_568
        assert result.weekly_holiday_pay == 360_114
        assert result.total_wage == 2_160_682

    def test_ineligible_schedule_has_no_holiday_pay(self):
        result = monthly_breakdown(10_360, 2, 4)

        assert result.is_weekly_holiday_eligible is False
        assert result.base_wage == 360_114
        assert result.weekly_holiday_pay == 0
        assert result.total_wage == result.base_wage

    def test_total_is_sum_of_parts(self):
        result = monthly_breakdown(12_345, 6, Decimal("6.5"))

        assert result.total_wage == result.base_wage + result.weekly_holiday_pay

    def test_custom_weeks_per_month(self):
        result = monthly_breakdown(10_000, 5, 8, weeks_per_month=4)

        assert result.base_wage == 1_600_000
        assert result.weekly_holiday_pay == 320_000


class TestWeeklyBreakdown:
    def test_full_time_schedule(self):
        result = weekly_breakdown(10_360, 5, 8)

        assert result.period == PayPeriod.WEEKLY
        assert result.base_wage == 414_400
        assert result.weekly_holiday_pay == 82_880
        assert result.total_wage == 497_280
        assert result.weekly_work_hours == 40


class TestWageBreakdownDispatch:
    @pytest.mark.parametrize(
        "period,expected_total",
        [(PayPeriod.WEEKLY, 497_280), (PayPeriod.MONTHLY, 2_160_682)],
    )
    def test_dispatch(self, period, expected_total):
        assert wage_breakdown(period, 10_360, 5, 8).total_wage == expected_total

    def test_unknown_period(self):
        with pytest.raises(ValueError):
            wage_breakdown("daily", 10_000, 5, 8)  # type: ignore[arg-type]
