"""Tests for clock-time parsing and elapsed work hours."""

from decimal import Decimal

import pytest

from contract_engine.calculators.time_utils import (
    InvalidClockTimeError,
    InvalidScheduleError,
    elapsed_work_hours,
    parse_clock_time,
    validate_schedule,
)


class TestElapsedWorkHours:
    """Test elapsed hours between wall-clock times."""

    def test_standard_shift(self):
        """A 09:00-18:00 shift with an hour break is 8 hours."""
        assert elapsed_work_hours("09:00", "18:00", 60) == 8

    def test_overnight_shift(self):
        """An end time before the start time crosses midnight."""
        assert elapsed_work_hours("22:00", "06:00", 60) == 7.0

    def test_half_hours(self):
        assert elapsed_work_hours("09:00", "17:30", 30) == Decimal("8")
        assert elapsed_work_hours("09:30", "14:00") == Decimal("4.5")

    def test_identical_times_are_zero(self):
        """Identical clock fields describe no shift."""
        assert elapsed_work_hours("10:00", "10:00", 0) == 0

    def test_break_longer_than_shift_is_floored(self):
        """Negative elapsed time is clamped to zero."""
        assert elapsed_work_hours("09:00", "09:30", 60) == 0

    def test_no_break_by_default(self):
        assert elapsed_work_hours("13:00", "17:00") == 4


class TestParseClockTime:
    """Test HH:MM parsing at the input boundary."""

    def test_valid_values(self):
        assert parse_clock_time("00:00") == 0
        assert parse_clock_time("9:05") == 545
        assert parse_clock_time("23:59") == 1439

    @pytest.mark.parametrize("value", ["24:00", "12:60", "9am", "", "12:3", "12-30"])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidClockTimeError) as exc_info:
            parse_clock_time(value)
        assert exc_info.value.value == value

    def test_invalid_time_is_value_error(self):
        with pytest.raises(ValueError):
            elapsed_work_hours("25:00", "18:00")


class TestValidateSchedule:
    """Test schedule range checks."""

    def test_accepts_one_to_seven_days(self):
        for days in range(1, 8):
            validate_schedule(days, 0)

    @pytest.mark.parametrize("days", [0, -1, 8])
    def test_rejects_out_of_range_days(self, days):
        with pytest.raises(InvalidScheduleError) as exc_info:
            validate_schedule(days)
        assert exc_info.value.field_name == "work_days_per_week"

    def test_rejects_missing_break(self):
        with pytest.raises(InvalidScheduleError) as exc_info:
            validate_schedule(5, None)  # type: ignore[arg-type]
        assert exc_info.value.field_name == "break_minutes"

    def test_rejects_negative_break(self):
        with pytest.raises(InvalidScheduleError) as exc_info:
            validate_schedule(5, -10)
        assert exc_info.value.field_name == "break_minutes"
