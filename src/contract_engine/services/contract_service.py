"""Contract service - write path around the lifecycle and editability rules."""

from __future__ import annotations

import logging
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contract_engine.calculators.types import ContractTerms
from contract_engine.models import Contract, WorkerReview
from contract_engine.services.career import CareerSummary, summarize_career
from contract_engine.services.draft import NON_NULLABLE_FIELDS, ContractDraft
from contract_engine.services.editability import (
    CONTENT_FIELDS,
    DEFAULT_EDIT_GRACE_PERIOD_DAYS,
    EditWindowClosedError,
    ensure_content_editable,
)
from contract_engine.services.state_machine import (
    ContractStateMachine,
    ContractStatus,
    Party,
    TransitionResult,
)

logger = logging.getLogger(__name__)


class ContractNotFoundError(LookupError):
    """Raised when a contract does not exist."""

    def __init__(self, contract_id: UUID):
        self.contract_id = contract_id
        super().__init__(f"Contract {contract_id} not found")


class NotContractPartyError(PermissionError):
    """Raised when the acting user is not the party an operation requires."""

    def __init__(self, contract_id: UUID, actor_id: UUID, reason: str):
        self.contract_id = contract_id
        self.actor_id = actor_id
        self.reason = reason
        super().__init__(f"User {actor_id} cannot act on contract {contract_id}: {reason}")


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps from the store as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def terms_for(contract: Contract) -> ContractTerms:
    """Wage terms of a stored contract."""
    return ContractTerms(
        hourly_wage=contract.hourly_wage,
        work_days_per_week=contract.work_days_per_week,
        work_start_time=contract.work_start_time,
        work_end_time=contract.work_end_time,
        break_minutes=contract.break_minutes,
        business_size=contract.business_size,
        wage_type=contract.wage_type,
        overtime_rate_per_hour=contract.overtime_rate_per_hour,
        holiday_rate_per_day=contract.holiday_rate_per_day,
        annual_leave_rate_per_day=contract.annual_leave_rate_per_day,
    )


class ContractService:
    """Service for the contract record lifecycle.

    Operations:
    - create_draft: Persist a completed wizard draft in draft status
    - update_content: Amend content fields inside the edit window
    - sign: Apply the state machine for the acting party
    - soft_delete: Hide a contract from one party only
    - record_review: Rate the worker of a completed contract
    - career_summary: Aggregate a worker's completed contracts

    Every time-dependent operation takes `now` from the caller.
    """

    def __init__(
        self,
        session: AsyncSession,
        grace_period_days: int = DEFAULT_EDIT_GRACE_PERIOD_DAYS,
    ):
        self.session = session
        self.grace_period_days = grace_period_days

    async def get_contract(self, contract_id: UUID) -> Contract | None:
        return await self.session.get(Contract, contract_id)

    async def require_contract(self, contract_id: UUID) -> Contract:
        contract = await self.get_contract(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)
        return contract

    async def create_draft(
        self,
        employer_id: UUID,
        draft: ContractDraft,
        now: datetime,
    ) -> Contract:
        """Commit a wizard draft as a new contract in draft status."""
        record = draft.to_record()
        contract = Contract(
            employer_id=employer_id,
            status=ContractStatus.DRAFT.value,
            created_at=now,
            updated_at=now,
            **record,
        )
        self.session.add(contract)
        await self.session.flush()

        logger.info("Created contract %s for employer %s", contract.id, employer_id)
        return contract

    async def list_for_employer(self, employer_id: UUID) -> list[Contract]:
        """Employer's contracts, newest first, hiding ones the employer deleted."""
        result = await self.session.execute(
            select(Contract)
            .where(
                Contract.employer_id == employer_id,
                Contract.employer_deleted_at.is_(None),
            )
            .order_by(Contract.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_for_worker(self, worker_id: UUID) -> list[Contract]:
        """Worker's contracts, newest first, hiding ones the worker deleted."""
        result = await self.session.execute(
            select(Contract)
            .where(
                Contract.worker_id == worker_id,
                Contract.worker_deleted_at.is_(None),
            )
            .order_by(Contract.created_at.desc())
        )
        return list(result.scalars().all())

    async def update_content(
        self,
        contract_id: UUID,
        actor_id: UUID,
        changes: dict[str, Any],
        now: datetime,
    ) -> Contract:
        """Amend content fields.

        Raises:
            ContractNotFoundError: If the contract does not exist
            NotContractPartyError: If the actor is not the employer
            ValueError: If a change names a non-content field, clears a required
                field or yields invalid terms
            EditWindowClosedError: If the edit window has closed
        """
        contract = await self.require_contract(contract_id)
        if contract.employer_id != actor_id:
            raise NotContractPartyError(contract_id, actor_id, "only the employer edits content")

        unknown = set(changes) - CONTENT_FIELDS
        if unknown:
            raise ValueError(f"Not editable content fields: {', '.join(sorted(unknown))}")
        cleared = sorted(
            name for name in NON_NULLABLE_FIELDS.intersection(changes) if changes[name] is None
        )
        if cleared:
            raise ValueError(f"Required content fields cannot be cleared: {', '.join(cleared)}")

        try:
            ensure_content_editable(
                as_utc(contract.created_at), now, changes, self.grace_period_days
            )
        except EditWindowClosedError:
            logger.warning(
                "Rejected edit of contract %s after edit window: %s",
                contract_id,
                sorted(changes),
            )
            raise

        draft = ContractDraft(
            **{f.name: getattr(contract, f.name) for f in fields(ContractDraft)}
        ).with_updates(**changes)

        for name, value in draft.to_record().items():
            setattr(contract, name, value)
        contract.updated_at = now
        await self.session.flush()

        logger.info("Updated contract %s fields %s", contract_id, sorted(changes))
        return contract

    async def sign(
        self,
        contract_id: UUID,
        actor_id: UUID,
        signature: str,
        now: datetime,
    ) -> Contract:
        """Record the acting party's signature.

        The employer signs a draft; any other user signs a pending contract
        as its worker and is bound to it on first signature.
        """
        contract = await self.require_contract(contract_id)
        party = self._signing_party(contract, actor_id)

        result: TransitionResult = ContractStateMachine.sign(contract, party, signature, now)

        for column, value in result.as_update().items():
            setattr(contract, column, value)
        if party == Party.WORKER and contract.worker_id is None:
            contract.worker_id = actor_id
        contract.updated_at = now
        await self.session.flush()

        logger.info(
            "Contract %s signed by %s: %s -> %s",
            contract_id,
            party.value,
            result.previous_status.value,
            result.new_status.value,
        )
        return contract

    async def soft_delete(self, contract_id: UUID, actor_id: UUID, now: datetime) -> Contract:
        """Hide the contract for the acting party without touching the other's view."""
        contract = await self.require_contract(contract_id)
        if contract.employer_id == actor_id:
            contract.employer_deleted_at = now
        elif contract.worker_id == actor_id:
            contract.worker_deleted_at = now
        else:
            raise NotContractPartyError(contract_id, actor_id, "not a party to this contract")

        contract.updated_at = now
        await self.session.flush()
        logger.info("Contract %s deleted for user %s", contract_id, actor_id)
        return contract

    async def record_review(
        self,
        contract_id: UUID,
        employer_id: UUID,
        rating: int,
        comment: str | None,
        now: datetime,
    ) -> WorkerReview:
        """Rate the worker of a completed contract."""
        contract = await self.require_contract(contract_id)
        if contract.employer_id != employer_id:
            raise NotContractPartyError(contract_id, employer_id, "only the employer reviews")
        if not ContractStateMachine.is_final(contract.status) or contract.worker_id is None:
            raise ValueError("Only completed contracts can be reviewed")
        if not 1 <= rating <= 5:
            raise ValueError(f"rating must be between 1 and 5, got {rating}")

        review = WorkerReview(
            contract_id=contract.id,
            employer_id=employer_id,
            worker_id=contract.worker_id,
            rating=rating,
            comment=comment,
            created_at=now,
            updated_at=now,
        )
        self.session.add(review)
        await self.session.flush()
        return review

    async def career_summary(self, worker_id: UUID, now: datetime) -> CareerSummary:
        """Career summary over all completed contracts, including soft-deleted ones."""
        contracts_result = await self.session.execute(
            select(Contract)
            .where(
                Contract.worker_id == worker_id,
                Contract.status == ContractStatus.COMPLETED.value,
            )
            .order_by(Contract.start_date.desc())
        )
        reviews_result = await self.session.execute(
            select(WorkerReview).where(WorkerReview.worker_id == worker_id)
        )
        return summarize_career(
            list(contracts_result.scalars().all()),
            list(reviews_result.scalars().all()),
            now,
        )

    @staticmethod
    def _signing_party(contract: Contract, actor_id: UUID) -> Party:
        if contract.employer_id == actor_id:
            return Party.EMPLOYER
        if contract.worker_id is None or contract.worker_id == actor_id:
            return Party.WORKER
        raise NotContractPartyError(
            contract.id, actor_id, "another worker is bound to this contract"
        )
