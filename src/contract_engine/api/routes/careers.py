"""Worker career endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from contract_engine.api.dependencies import Contracts, Now
from contract_engine.api.schemas import CareerSummaryResponse
from contract_engine.api.serializers import career_response

router = APIRouter(prefix="/workers", tags=["careers"])


@router.get(
    "/{worker_id}/career",
    response_model=CareerSummaryResponse,
)
async def worker_career(
    service: Contracts,
    now: Now,
    worker_id: Annotated[UUID, Path()],
) -> CareerSummaryResponse:
    """Career history over the worker's completed contracts."""
    summary = await service.career_summary(worker_id, now)
    return career_response(summary)
