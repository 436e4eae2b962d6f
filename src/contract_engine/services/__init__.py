"""Contract lifecycle services."""

from contract_engine.services.career import CareerItem, CareerSummary, summarize_career
from contract_engine.services.contract_service import (
    ContractNotFoundError,
    ContractService,
    NotContractPartyError,
)
from contract_engine.services.draft import ContractDraft, IncompleteDraftError
from contract_engine.services.editability import (
    EditWindowClosedError,
    is_editable,
    remaining_edit_days,
)
from contract_engine.services.state_machine import (
    AlreadyFinalizedError,
    ContractStateMachine,
    ContractStatus,
    InvalidTransitionError,
    Party,
)

__all__ = [
    "CareerItem",
    "CareerSummary",
    "summarize_career",
    "ContractNotFoundError",
    "ContractService",
    "NotContractPartyError",
    "ContractDraft",
    "IncompleteDraftError",
    "EditWindowClosedError",
    "is_editable",
    "remaining_edit_days",
    "AlreadyFinalizedError",
    "ContractStateMachine",
    "ContractStatus",
    "InvalidTransitionError",
    "Party",
]
