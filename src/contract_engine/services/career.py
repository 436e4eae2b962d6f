"""Career history aggregation over completed contracts.

Per-contract durations use calendar months; the aggregate total uses fixed
365-day years and 30-day months. The two labelling rules are intentionally
separate.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Protocol

from contract_engine.calculators.rounding import TENTH


class CareerContract(Protocol):
    """Fields of a completed contract the aggregator reads."""

    id: Any
    start_date: date
    signed_at: datetime | None
    employer_name: str
    business_name: str | None
    job_description: str | None


class CareerReview(Protocol):
    contract_id: Any
    rating: int


@dataclass(frozen=True)
class CareerItem:
    """One completed contract with its review and duration."""

    contract: CareerContract
    review: CareerReview | None
    duration_days: int
    duration_text: str


@dataclass(frozen=True)
class CareerSummary:
    """A worker's career totals."""

    total_contracts: int
    total_work_days: int
    total_work_days_text: str
    average_rating: Decimal
    rating_count: int
    workplaces: list[str]
    job_types: list[str]
    careers: list[CareerItem]


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def months_between(start: date, end: date) -> int:
    """Full calendar months from start to end."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(0, months)


def contract_duration(
    start_date: date,
    signed_at: date | datetime | None,
    now: datetime,
) -> tuple[int, str]:
    """Duration of one contract in days plus its display label.

    An unsigned contract runs until now. Short durations are floored at one
    day so a same-day completion reads "1일".
    """
    end = _as_date(signed_at if signed_at is not None else now)
    days = (end - start_date).days
    months = months_between(start_date, end)

    if months >= 12:
        years, remaining_months = divmod(months, 12)
        if remaining_months:
            return days, f"{years}년 {remaining_months}개월"
        return days, f"{years}년"
    if months >= 1:
        return days, f"{months}개월"
    if days >= 7:
        return days, f"{days // 7}주"

    days = max(days, 1)
    return days, f"{days}일"


def total_duration_text(total_days: int) -> str:
    """Label for summed work days, using 365-day years and 30-day months."""
    if total_days >= 365:
        years = total_days // 365
        months = (total_days % 365) // 30
        return f"{years}년 {months}개월" if months else f"{years}년"
    if total_days >= 30:
        return f"{total_days // 30}개월"
    return f"{total_days}일"


def average_rating(ratings: Iterable[int]) -> tuple[Decimal, int]:
    """Mean rating to one decimal, halves rounded up, and the number of ratings."""
    values = list(ratings)
    if not values:
        return Decimal("0"), 0
    mean = Decimal(sum(values)) / len(values)
    return mean.quantize(TENTH, rounding=ROUND_HALF_UP), len(values)


def _unique(values: Iterable[str | None]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def summarize_career(
    contracts: Sequence[CareerContract],
    reviews: Sequence[CareerReview],
    now: datetime,
) -> CareerSummary:
    """Build a worker's career summary.

    Args:
        contracts: The worker's completed contracts, already fetched
        reviews: All reviews received by the worker
        now: End date for contracts without signed_at
    """
    review_by_contract = {review.contract_id: review for review in reviews}

    careers: list[CareerItem] = []
    for contract in contracts:
        days, text = contract_duration(contract.start_date, contract.signed_at, now)
        careers.append(
            CareerItem(
                contract=contract,
                review=review_by_contract.get(contract.id),
                duration_days=days,
                duration_text=text,
            )
        )

    total_days = sum(item.duration_days for item in careers)
    rating, rating_count = average_rating(review.rating for review in reviews)

    return CareerSummary(
        total_contracts=len(contracts),
        total_work_days=total_days,
        total_work_days_text=total_duration_text(total_days),
        average_rating=rating,
        rating_count=rating_count,
        workplaces=_unique(c.business_name or c.employer_name for c in contracts),
        job_types=_unique(c.job_description for c in contracts),
        careers=careers,
    )


def format_contract_period(start_date: date, signed_at: date | datetime | None) -> str:
    """Display period such as "2025.01.15 ~ 2025.06.30"."""
    start = start_date.strftime("%Y.%m.%d")
    if signed_at is None:
        return f"{start} ~"
    return f"{start} ~ {_as_date(signed_at).strftime('%Y.%m.%d')}"
