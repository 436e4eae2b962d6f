"""Tests for the weekly holiday pay calculator."""

from decimal import Decimal

from contract_engine.calculators.weekly_holiday import (
    calculate_weekly_holiday_pay,
    is_weekly_holiday_eligible,
)


class TestWeeklyHolidayPay:
    """Test weekly holiday pay eligibility and amounts."""

    def test_full_time_week(self):
        """10,360/h, 5 days x 8h."""
        result = calculate_weekly_holiday_pay(10_360, 5, 8)

        assert result.weekly_work_hours == 40
        assert result.is_eligible is True
        assert result.weekly_holiday_hours == 8
        assert result.weekly_holiday_pay_per_week == 82_880
        assert result.weekly_holiday_pay_per_hour == 2_072
        assert result.effective_hourly_wage == 12_432
        assert result.base_hourly_wage == 10_360

    def test_below_threshold_is_ineligible(self):
        """2 days x 4h is 8 hours a week."""
        result = calculate_weekly_holiday_pay(10_360, 2, 4)

        assert result.weekly_work_hours == 8
        assert result.is_eligible is False
        assert result.weekly_holiday_hours == 0
        assert result.weekly_holiday_pay_per_week == 0
        assert result.weekly_holiday_pay_per_hour == 0
        assert result.effective_hourly_wage == 10_360

    def test_fourteen_hours_is_ineligible(self):
        result = calculate_weekly_holiday_pay(10_000, 2, 7)

        assert result.is_eligible is False
        assert result.weekly_holiday_pay_per_week == 0

    def test_fifteen_hours_is_eligible(self):
        """The 15-hour threshold is inclusive."""
        result = calculate_weekly_holiday_pay(10_000, 3, 5)

        assert result.weekly_work_hours == 15
        assert result.is_eligible is True
        assert result.weekly_holiday_hours == 5
        assert result.weekly_holiday_pay_per_week == 50_000
        assert result.weekly_holiday_pay_per_hour == 3_333
        assert result.effective_hourly_wage == 13_333

    def test_fifteen_hours_from_float_input(self):
        result = calculate_weekly_holiday_pay(10_000, 2, 7.5)

        assert result.weekly_work_hours == Decimal("15.0")
        assert result.is_eligible is True

    def test_holiday_hours_capped_at_eight(self):
        """A 9-hour day credits 8 holiday hours."""
        result = calculate_weekly_holiday_pay(10_000, 5, 9)

        assert result.weekly_holiday_hours == 8
        assert result.weekly_holiday_pay_per_week == 80_000

    def test_long_days_few_days(self):
        """2 days x 10h credits one capped day."""
        result = calculate_weekly_holiday_pay(10_000, 2, 10)

        assert result.weekly_holiday_hours == 8
        assert result.weekly_holiday_pay_per_week == 80_000
        assert result.weekly_holiday_pay_per_hour == 4_000
        assert result.effective_hourly_wage == 14_000

    def test_rounding_is_half_even_on_unrounded_inputs(self):
        """Per-hour pay of 2,500.5 rounds to 2,500; effective 12,502.5 to 12,502."""
        result = calculate_weekly_holiday_pay(10_002, 4, 4)

        assert result.weekly_holiday_pay_per_week == 40_008
        assert result.weekly_holiday_pay_per_hour == 2_500
        assert result.effective_hourly_wage == 12_502

    def test_zero_hours(self):
        result = calculate_weekly_holiday_pay(10_000, 5, 0)

        assert result.is_eligible is False
        assert result.effective_hourly_wage == 10_000

    def test_is_weekly_holiday_eligible(self):
        assert is_weekly_holiday_eligible(Decimal("15")) is True
        assert is_weekly_holiday_eligible(Decimal("14.99")) is False
