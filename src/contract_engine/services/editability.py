"""Editability window for contract content.

Content fields (wage, schedule, location, job description) may be amended
for a fixed number of whole days after creation. Signatures and status
transitions are never gated here.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

DEFAULT_EDIT_GRACE_PERIOD_DAYS = 7

CONTENT_FIELDS = frozenset({
    "worker_name",
    "employer_name",
    "hourly_wage",
    "monthly_wage",
    "wage_type",
    "start_date",
    "work_days",
    "work_start_time",
    "work_end_time",
    "break_minutes",
    "work_location",
    "business_name",
    "job_description",
    "business_size",
    "overtime_rate_per_hour",
    "holiday_rate_per_day",
    "annual_leave_rate_per_day",
})


class EditWindowClosedError(Exception):
    """Raised when content fields are changed after the edit window closed."""

    def __init__(self, fields: Iterable[str], deadline: datetime):
        self.fields = sorted(fields)
        self.deadline = deadline
        super().__init__(
            f"Contract content can no longer be edited (window closed {deadline.isoformat()}): "
            f"{', '.join(self.fields)}"
        )


def elapsed_days(created_at: datetime, now: datetime) -> int:
    """Whole days since creation, never negative."""
    return max(0, (now - created_at).days)


def is_editable(
    created_at: datetime,
    now: datetime,
    grace_period_days: int = DEFAULT_EDIT_GRACE_PERIOD_DAYS,
) -> bool:
    """Content is editable through the last whole day of the grace period."""
    return elapsed_days(created_at, now) <= grace_period_days


def remaining_edit_days(
    created_at: datetime,
    now: datetime,
    grace_period_days: int = DEFAULT_EDIT_GRACE_PERIOD_DAYS,
) -> int:
    """Days left to edit, for countdowns. Never negative."""
    return max(0, grace_period_days - elapsed_days(created_at, now))


def edit_deadline(
    created_at: datetime,
    grace_period_days: int = DEFAULT_EDIT_GRACE_PERIOD_DAYS,
) -> datetime:
    return created_at + timedelta(days=grace_period_days)


def ensure_content_editable(
    created_at: datetime,
    now: datetime,
    changed_fields: Iterable[str],
    grace_period_days: int = DEFAULT_EDIT_GRACE_PERIOD_DAYS,
) -> None:
    """Reject content changes outside the window.

    Only fields in CONTENT_FIELDS are gated.
    """
    gated = CONTENT_FIELDS.intersection(changed_fields)
    if gated and not is_editable(created_at, now, grace_period_days):
        raise EditWindowClosedError(gated, edit_deadline(created_at, grace_period_days))
