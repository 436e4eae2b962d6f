"""Immutable contract draft accumulated across the creation wizard."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Any

from contract_engine.calculators.types import BusinessSize, ContractTerms, WageType

WORK_DAYS = ("월", "화", "수", "목", "금", "토", "일")

REQUIRED_FIELDS = (
    "employer_name",
    "worker_name",
    "hourly_wage",
    "start_date",
    "work_days",
    "work_start_time",
    "work_end_time",
    "work_location",
)

# Fields with a non-null default; a draft never holds None for them
DEFAULTED_FIELDS = frozenset({"work_days", "break_minutes", "business_size", "wage_type"})

# Fields a stored contract always carries
NON_NULLABLE_FIELDS = DEFAULTED_FIELDS | frozenset(REQUIRED_FIELDS)


class IncompleteDraftError(ValueError):
    """Raised when a draft is committed with required fields missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Draft is missing required fields: {', '.join(missing)}")


@dataclass(frozen=True)
class ContractDraft:
    """Content of a contract being drafted. Every step returns a new draft."""

    employer_name: str | None = None
    worker_name: str | None = None
    hourly_wage: int | None = None
    start_date: date | None = None
    work_days: tuple[str, ...] = ()
    work_start_time: str | None = None
    work_end_time: str | None = None
    break_minutes: int = 0
    work_location: str | None = None
    business_name: str | None = None
    job_description: str | None = None
    business_size: BusinessSize = BusinessSize.UNDER5
    wage_type: WageType = WageType.HOURLY
    monthly_wage: int | None = None
    overtime_rate_per_hour: int | None = None
    holiday_rate_per_day: int | None = None
    annual_leave_rate_per_day: int | None = None

    def __post_init__(self) -> None:
        unknown = [d for d in self.work_days if d not in WORK_DAYS]
        if unknown:
            raise ValueError(f"Unknown work days: {unknown}")
        # Keep weekday order stable regardless of selection order
        ordered = tuple(d for d in WORK_DAYS if d in self.work_days)
        object.__setattr__(self, "work_days", ordered)
        object.__setattr__(self, "business_size", BusinessSize(self.business_size))
        object.__setattr__(self, "wage_type", WageType(self.wage_type))

    def with_updates(self, **changes: Any) -> ContractDraft:
        """Return a new draft with the given fields replaced.

        Raises:
            ValueError: If a field that has a non-null default is set to None
        """
        nulled = sorted(
            name for name, value in changes.items()
            if value is None and name in DEFAULTED_FIELDS
        )
        if nulled:
            raise ValueError(f"Fields cannot be cleared: {', '.join(nulled)}")
        if "work_days" in changes:
            changes["work_days"] = tuple(changes["work_days"])
        return replace(self, **changes)

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    @property
    def work_days_per_week(self) -> int:
        return len(self.work_days)

    def to_terms(self) -> ContractTerms:
        """Validate the draft and return the wage terms it describes."""
        missing = self.missing_fields()
        if missing:
            raise IncompleteDraftError(missing)

        return ContractTerms(
            hourly_wage=self.hourly_wage,
            work_days_per_week=self.work_days_per_week,
            work_start_time=self.work_start_time,
            work_end_time=self.work_end_time,
            break_minutes=self.break_minutes,
            business_size=self.business_size,
            wage_type=self.wage_type,
            overtime_rate_per_hour=self.overtime_rate_per_hour,
            holiday_rate_per_day=self.holiday_rate_per_day,
            annual_leave_rate_per_day=self.annual_leave_rate_per_day,
        )

    def to_record(self) -> dict[str, Any]:
        """Column values for a new contract record."""
        self.to_terms()
        record = {f.name: getattr(self, f.name) for f in fields(self)}
        record["work_days"] = list(self.work_days)
        record["business_size"] = self.business_size.value
        record["wage_type"] = self.wage_type.value
        return record
