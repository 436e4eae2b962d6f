"""Contract and worker review models."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contract_engine.models.base import Base, TimestampMixin


class Contract(Base, TimestampMixin):
    """Labor contract record."""

    __tablename__ = "contract"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    employer_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    worker_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, index=True)

    employer_name: Mapped[str] = mapped_column(String, nullable=False)
    worker_name: Mapped[str] = mapped_column(String, nullable=False)
    business_name: Mapped[str | None] = mapped_column(String, nullable=True)
    business_size: Mapped[str] = mapped_column(String, nullable=False, default="under5")

    # Wage
    wage_type: Mapped[str] = mapped_column(String, nullable=False, default="hourly")
    hourly_wage: Mapped[int] = mapped_column(Integer, nullable=False)
    monthly_wage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overtime_rate_per_hour: Mapped[int | None] = mapped_column(Integer, nullable=True)
    holiday_rate_per_day: Mapped[int | None] = mapped_column(Integer, nullable=True)
    annual_leave_rate_per_day: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Schedule
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    work_days: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    work_start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    work_end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    break_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    work_location: Mapped[str] = mapped_column(String, nullable=False)
    job_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Lifecycle
    status: Mapped[str] = mapped_column(String, nullable=False, default="draft")
    employer_signature: Mapped[str | None] = mapped_column(Text, nullable=True)
    worker_signature: Mapped[str | None] = mapped_column(Text, nullable=True)
    signed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Per-party soft delete
    employer_deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    worker_deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'pending', 'signed', 'completed')",
            name="contract_status_check",
        ),
        CheckConstraint(
            "business_size IN ('under5', 'over5')",
            name="contract_business_size_check",
        ),
        CheckConstraint("hourly_wage >= 0", name="contract_hourly_wage_check"),
    )

    reviews: Mapped[list[WorkerReview]] = relationship(back_populates="contract")

    @property
    def work_days_per_week(self) -> int:
        return len(self.work_days or [])


class WorkerReview(Base, TimestampMixin):
    """Employer's rating of a worker for one completed contract."""

    __tablename__ = "worker_review"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    contract_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("contract.id", ondelete="CASCADE"),
        nullable=False,
    )
    employer_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    worker_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("contract_id", name="worker_review_contract_unique"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="worker_review_rating_check"),
    )

    contract: Mapped[Contract] = relationship(back_populates="reviews")
