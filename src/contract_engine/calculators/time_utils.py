"""Clock-time parsing and elapsed work hours."""

from __future__ import annotations

import re
from decimal import Decimal

from contract_engine.calculators.rounding import to_decimal

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

MINUTES_PER_DAY = 24 * 60


class InvalidClockTimeError(ValueError):
    """Raised when a wall-clock value is not a valid HH:MM string."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid clock time {value!r}, expected HH:MM")


class InvalidScheduleError(ValueError):
    """Raised when schedule figures are outside their allowed range."""

    def __init__(self, field_name: str, value: object, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")


def parse_clock_time(value: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    if not isinstance(value, str):
        raise InvalidClockTimeError(str(value))
    match = _CLOCK_RE.match(value.strip())
    if match is None:
        raise InvalidClockTimeError(value)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidClockTimeError(value)
    return hours * 60 + minutes


def validate_schedule(work_days_per_week: int, break_minutes: int = 0) -> None:
    """Reject schedule values the numeric pipeline must never see."""
    if isinstance(work_days_per_week, bool) or not isinstance(work_days_per_week, int):
        raise InvalidScheduleError(
            "work_days_per_week", work_days_per_week, "must be an integer"
        )
    if not 1 <= work_days_per_week <= 7:
        raise InvalidScheduleError(
            "work_days_per_week", work_days_per_week, "must be between 1 and 7"
        )
    if isinstance(break_minutes, bool) or not isinstance(break_minutes, (int, Decimal)):
        raise InvalidScheduleError("break_minutes", break_minutes, "must be a number")
    if break_minutes < 0:
        raise InvalidScheduleError("break_minutes", break_minutes, "must not be negative")


def elapsed_work_hours(start: str, end: str, break_minutes: int | Decimal = 0) -> Decimal:
    """Hours worked between two wall-clock times, net of the break.

    An end time before the start time is an overnight shift, so 24h is added
    to the end. Identical start and end times describe no shift at all and
    yield zero. The result is floored at zero.
    """
    start_minutes = parse_clock_time(start)
    end_minutes = parse_clock_time(end)

    if end_minutes == start_minutes:
        return Decimal("0")
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY

    worked_minutes = Decimal(end_minutes - start_minutes) - to_decimal(break_minutes)
    return max(Decimal("0"), worked_minutes / Decimal("60"))
