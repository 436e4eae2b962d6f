"""Tests for career history aggregation."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from contract_engine.services.career import (
    average_rating,
    contract_duration,
    format_contract_period,
    months_between,
    summarize_career,
    total_duration_text,
)

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@dataclass
class CompletedContract:
    start_date: date
    signed_at: datetime | None
    employer_name: str = "김사장"
    business_name: str | None = None
    job_description: str | None = None
    id: UUID = None  # type: ignore[assignment]

    def __post_init__(self):
        if self.id is None:
            self.id = uuid4()


@dataclass
class Review:
    contract_id: UUID
    rating: int
    comment: str | None = None


def signed(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 18, 0, tzinfo=timezone.utc)


class TestMonthsBetween:
    def test_calendar_months(self):
        assert months_between(date(2025, 1, 15), date(2025, 3, 20)) == 2
        assert months_between(date(2025, 1, 15), date(2025, 3, 14)) == 1

    def test_end_of_month(self):
        assert months_between(date(2025, 1, 31), date(2025, 2, 28)) == 0

    def test_never_negative(self):
        assert months_between(date(2025, 5, 1), date(2025, 1, 1)) == 0


class TestContractDuration:
    """Test per-contract duration labels."""

    def test_same_day(self):
        """A same-day completion reads as one day."""
        assert contract_duration(date(2025, 1, 15), signed(2025, 1, 15), NOW) == (1, "1일")

    def test_days(self):
        assert contract_duration(date(2025, 1, 15), signed(2025, 1, 19), NOW) == (4, "4일")

    def test_weeks(self):
        assert contract_duration(date(2025, 1, 15), signed(2025, 1, 25), NOW) == (10, "1주")

    def test_short_month_is_weeks(self):
        assert contract_duration(date(2025, 1, 31), signed(2025, 2, 28), NOW) == (28, "4주")

    def test_months(self):
        assert contract_duration(date(2025, 1, 15), signed(2025, 3, 20), NOW)[1] == "2개월"

    def test_whole_year(self):
        assert contract_duration(date(2024, 1, 15), signed(2025, 1, 15), NOW) == (366, "1년")

    def test_years_and_months(self):
        days, text = contract_duration(date(2024, 1, 15), signed(2025, 4, 20), NOW)

        assert text == "1년 3개월"
        assert days == 461

    def test_unsigned_runs_until_now(self):
        days, text = contract_duration(date(2026, 2, 1), None, NOW)

        assert days == 29
        assert text == "1개월"


class TestTotalDurationText:
    """Test the summed-days label with 365-day years and 30-day months."""

    def test_buckets(self):
        assert total_duration_text(0) == "0일"
        assert total_duration_text(29) == "29일"
        assert total_duration_text(30) == "1개월"
        assert total_duration_text(364) == "12개월"
        assert total_duration_text(365) == "1년"
        assert total_duration_text(400) == "1년 1개월"
        assert total_duration_text(730) == "2년"


class TestAverageRating:
    def test_empty(self):
        assert average_rating([]) == (Decimal("0"), 0)

    def test_one_decimal(self):
        assert average_rating([4, 5]) == (Decimal("4.5"), 2)
        assert average_rating([5, 4, 4]) == (Decimal("4.3"), 3)

    def test_halves_round_up(self):
        """A mean of 4.25 shows as 4.3."""
        assert average_rating([4, 4, 4, 5]) == (Decimal("4.3"), 4)
        assert average_rating([2, 2, 2, 3]) == (Decimal("2.3"), 4)


class TestSummarizeCareer:
    """Test the aggregated career summary."""

    def test_empty_career(self):
        summary = summarize_career([], [], NOW)

        assert summary.total_contracts == 0
        assert summary.total_work_days == 0
        assert summary.total_work_days_text == "0일"
        assert summary.average_rating == 0
        assert summary.rating_count == 0
        assert summary.careers == []

    def test_summary(self):
        cafe = CompletedContract(
            start_date=date(2025, 1, 15),
            signed_at=signed(2025, 3, 20),
            business_name="테헤란 카페",
            job_description="홀 서빙",
        )
        store = CompletedContract(
            start_date=date(2025, 6, 1),
            signed_at=signed(2025, 6, 1),
            employer_name="박점장",
            job_description="홀 서빙",
        )
        cafe_again = CompletedContract(
            start_date=date(2025, 9, 1),
            signed_at=signed(2025, 9, 11),
            business_name="테헤란 카페",
            job_description="바리스타",
        )
        reviews = [Review(cafe.id, 5, "성실함"), Review(store.id, 4)]

        summary = summarize_career([cafe, store, cafe_again], reviews, NOW)

        assert summary.total_contracts == 3
        assert summary.total_work_days == 64 + 1 + 10
        assert summary.total_work_days_text == "2개월"
        assert summary.average_rating == Decimal("4.5")
        assert summary.rating_count == 2
        assert summary.workplaces == ["테헤란 카페", "박점장"]
        assert summary.job_types == ["홀 서빙", "바리스타"]

        first = summary.careers[0]
        assert first.review.rating == 5
        assert first.duration_text == "2개월"
        assert summary.careers[2].review is None


class TestFormatContractPeriod:
    def test_signed(self):
        assert (
            format_contract_period(date(2025, 1, 15), signed(2025, 6, 30))
            == "2025.01.15 ~ 2025.06.30"
        )

    def test_open(self):
        assert format_contract_period(date(2025, 1, 15), None) == "2025.01.15 ~"
