"""Contract endpoints."""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from contract_engine.api.dependencies import Contracts, Now, UserId
from contract_engine.api.schemas import (
    ContractCreate,
    ContractDetailResponse,
    ContractListResponse,
    ContractResponse,
    ContractUpdate,
    ErrorResponse,
    ReviewCreate,
    ReviewResponse,
    SignRequest,
)
from contract_engine.api.serializers import contract_detail_response
from contract_engine.services.contract_service import NotContractPartyError
from contract_engine.services.draft import ContractDraft

router = APIRouter(prefix="/contracts", tags=["contracts"])


# ============================================================================
# Contract CRUD
# ============================================================================


@router.post(
    "",
    response_model=ContractDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_contract(
    service: Contracts,
    user_id: UserId,
    now: Now,
    payload: ContractCreate,
) -> ContractDetailResponse:
    """Create a contract in draft status; the caller is the employer."""
    draft = ContractDraft(**payload.model_dump())
    contract = await service.create_draft(user_id, draft, now)
    await service.session.commit()
    return contract_detail_response(contract, now, service.grace_period_days)


@router.get(
    "",
    response_model=ContractListResponse,
)
async def list_contracts(
    service: Contracts,
    user_id: UserId,
    role: Annotated[Literal["employer", "worker"], Query()] = "employer",
) -> ContractListResponse:
    """List the caller's contracts, excluding ones the caller deleted."""
    if role == "employer":
        contracts = await service.list_for_employer(user_id)
    else:
        contracts = await service.list_for_worker(user_id)

    return ContractListResponse(
        items=[ContractResponse.model_validate(c) for c in contracts],
        total=len(contracts),
    )


@router.get(
    "/{contract_id}",
    response_model=ContractDetailResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_contract(
    service: Contracts,
    user_id: UserId,
    now: Now,
    contract_id: Annotated[UUID, Path()],
) -> ContractDetailResponse:
    """Get a contract with its wage section and edit window."""
    contract = await service.require_contract(contract_id)
    # An unbound contract is readable by the worker it was shared with
    if contract.employer_id != user_id and contract.worker_id not in (None, user_id):
        raise NotContractPartyError(contract_id, user_id, "not a party to this contract")
    return contract_detail_response(contract, now, service.grace_period_days)


@router.patch(
    "/{contract_id}",
    response_model=ContractDetailResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        423: {"model": ErrorResponse},
    },
)
async def update_contract(
    service: Contracts,
    user_id: UserId,
    now: Now,
    contract_id: Annotated[UUID, Path()],
    payload: ContractUpdate,
) -> ContractDetailResponse:
    """Amend content fields while the edit window is open."""
    changes = payload.model_dump(exclude_unset=True)
    contract = await service.update_content(contract_id, user_id, changes, now)
    await service.session.commit()
    return contract_detail_response(contract, now, service.grace_period_days)


@router.delete(
    "/{contract_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_contract(
    service: Contracts,
    user_id: UserId,
    now: Now,
    contract_id: Annotated[UUID, Path()],
) -> None:
    """Remove the contract from the caller's view only."""
    await service.soft_delete(contract_id, user_id, now)
    await service.session.commit()


# ============================================================================
# Signing and reviews
# ============================================================================


@router.post(
    "/{contract_id}/sign",
    response_model=ContractDetailResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def sign_contract(
    service: Contracts,
    user_id: UserId,
    now: Now,
    contract_id: Annotated[UUID, Path()],
    payload: SignRequest,
) -> ContractDetailResponse:
    """Sign as employer (draft) or as worker (pending)."""
    contract = await service.sign(contract_id, user_id, payload.signature, now)
    await service.session.commit()
    return contract_detail_response(contract, now, service.grace_period_days)


@router.post(
    "/{contract_id}/review",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def review_worker(
    service: Contracts,
    user_id: UserId,
    now: Now,
    contract_id: Annotated[UUID, Path()],
    payload: ReviewCreate,
) -> ReviewResponse:
    """Rate the worker of a completed contract."""
    review = await service.record_review(
        contract_id, user_id, payload.rating, payload.comment, now
    )
    await service.session.commit()
    return ReviewResponse.model_validate(review)
