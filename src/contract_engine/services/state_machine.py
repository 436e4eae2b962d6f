"""Contract lifecycle state machine with transition validation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class ContractStatus(str, Enum):
    """Contract status values."""

    DRAFT = "draft"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: str | ContractStatus) -> ContractStatus:
        """Parse a stored status, mapping legacy values onto current ones."""
        if isinstance(value, ContractStatus):
            return value
        if value in LEGACY_STATUS_ALIASES:
            return LEGACY_STATUS_ALIASES[value]
        return cls(value)


# "signed" was written by older clients for an employer-signed contract
LEGACY_STATUS_ALIASES: dict[str, ContractStatus] = {
    "signed": ContractStatus.PENDING,
}


class Party(str, Enum):
    """Contract parties. The employer initiates, the worker counter-signs."""

    EMPLOYER = "employer"
    WORKER = "worker"


class InvalidTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_status: str, to_status: str | None, reason: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Invalid transition from '{from_status}' to '{to_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class AlreadyFinalizedError(InvalidTransitionError):
    """Raised when a completed contract is signed again."""

    def __init__(self, party: str | None = None):
        self.party = party
        super().__init__(
            ContractStatus.COMPLETED.value,
            None,
            "contract is already completed and cannot be signed again",
        )


class SignatureSnapshot(Protocol):
    """Fields of a contract record the state machine reads."""

    status: str
    employer_signature: str | None
    worker_signature: str | None
    signed_at: datetime | None


@dataclass(frozen=True)
class TransitionResult:
    """Proposed next state for the persistence layer to write."""

    previous_status: ContractStatus
    new_status: ContractStatus
    employer_signature: str | None
    worker_signature: str | None
    signed_at: datetime | None

    def as_update(self) -> dict[str, object]:
        """Column values to persist."""
        return {
            "status": self.new_status.value,
            "employer_signature": self.employer_signature,
            "worker_signature": self.worker_signature,
            "signed_at": self.signed_at,
        }


class ContractStateMachine:
    """State machine for contract signing.

    Allowed transitions:
    - draft → pending (employer signs)
    - pending → completed (worker signs)

    Completed is terminal. Signatures are never removed once set.
    """

    VALID_TRANSITIONS: dict[ContractStatus, list[ContractStatus]] = {
        ContractStatus.DRAFT: [ContractStatus.PENDING],
        ContractStatus.PENDING: [ContractStatus.COMPLETED],
        ContractStatus.COMPLETED: [],  # Terminal state
    }

    # Which party's signature drives each transition
    SIGNING_PARTY: dict[ContractStatus, Party] = {
        ContractStatus.DRAFT: Party.EMPLOYER,
        ContractStatus.PENDING: Party.WORKER,
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(ContractStatus.parse(from_status), [])
        return ContractStatus.parse(to_status) in allowed

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """Validate a transition, raising if it is not allowed."""
        if cls.is_final(from_status):
            raise AlreadyFinalizedError()
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(
                ContractStatus.parse(from_status).value,
                ContractStatus.parse(to_status).value,
            )

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[ContractStatus]:
        """Get list of valid next statuses from current status."""
        return list(cls.VALID_TRANSITIONS.get(ContractStatus.parse(current_status), []))

    @classmethod
    def is_final(cls, status: str) -> bool:
        return ContractStatus.parse(status) == ContractStatus.COMPLETED

    @classmethod
    def expected_signer(cls, status: str) -> Party | None:
        """The party whose signature advances the contract, if any."""
        return cls.SIGNING_PARTY.get(ContractStatus.parse(status))

    @classmethod
    def sign(
        cls,
        contract: SignatureSnapshot,
        party: Party | str,
        signature: str,
        now: datetime,
    ) -> TransitionResult:
        """Record a party's signature and return the resulting state.

        Raises:
            ValueError: If the signature is empty
            AlreadyFinalizedError: If the contract is already completed
            InvalidTransitionError: If it is not this party's turn to sign
        """
        party = Party(party)
        if not signature or not signature.strip():
            raise ValueError("signature must not be empty")

        from_status = ContractStatus.parse(contract.status)
        if from_status == ContractStatus.COMPLETED:
            raise AlreadyFinalizedError(party.value)

        expected = cls.expected_signer(from_status)
        if party != expected:
            raise InvalidTransitionError(
                from_status.value,
                None,
                f"{party.value} cannot sign a contract in '{from_status.value}' status",
            )

        to_status = cls.VALID_TRANSITIONS[from_status][0]
        cls.validate_transition(from_status, to_status)

        employer_signature = contract.employer_signature
        worker_signature = contract.worker_signature
        signed_at = contract.signed_at
        if party == Party.EMPLOYER:
            employer_signature = signature
        else:
            worker_signature = signature
            signed_at = now

        return TransitionResult(
            previous_status=from_status,
            new_status=to_status,
            employer_signature=employer_signature,
            worker_signature=worker_signature,
            signed_at=signed_at,
        )
