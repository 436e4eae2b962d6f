"""SQLAlchemy ORM models."""

from contract_engine.models.base import Base, TimestampMixin
from contract_engine.models.contract import Contract, WorkerReview

__all__ = [
    "Base",
    "TimestampMixin",
    "Contract",
    "WorkerReview",
]
