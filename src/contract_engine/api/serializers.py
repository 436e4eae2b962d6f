"""Conversions from engine results and records to API schemas."""

from __future__ import annotations

from datetime import datetime

from contract_engine.api.schemas import (
    CareerItemResponse,
    CareerSummaryResponse,
    ContractDetailResponse,
    ContractResponse,
    EditabilityResponse,
    InclusiveWageResponse,
    MinimumWageResponse,
    WageSummaryResponse,
)
from contract_engine.calculators.engine import WageEngine, WageSummary
from contract_engine.calculators.rate_tables import MinimumWageCheck
from contract_engine.calculators.types import InclusiveWageResult
from contract_engine.models import Contract
from contract_engine.services.career import CareerSummary, format_contract_period
from contract_engine.services.contract_service import as_utc, terms_for
from contract_engine.services.editability import (
    edit_deadline,
    is_editable,
    remaining_edit_days,
)


def wage_summary_response(summary: WageSummary) -> WageSummaryResponse:
    return WageSummaryResponse.model_validate(summary, from_attributes=True)


def inclusive_response(result: InclusiveWageResult) -> InclusiveWageResponse:
    return InclusiveWageResponse.model_validate(result)


def minimum_wage_response(check: MinimumWageCheck) -> MinimumWageResponse:
    return MinimumWageResponse.model_validate(check)


def editability_response(
    contract: Contract, now: datetime, grace_period_days: int
) -> EditabilityResponse:
    created_at = as_utc(contract.created_at)
    return EditabilityResponse(
        is_editable=is_editable(created_at, now, grace_period_days),
        remaining_edit_days=remaining_edit_days(created_at, now, grace_period_days),
        edit_deadline=edit_deadline(created_at, grace_period_days),
    )


def contract_detail_response(
    contract: Contract, now: datetime, grace_period_days: int
) -> ContractDetailResponse:
    """Contract with its edit window and wage section."""
    base = ContractResponse.model_validate(contract)
    return ContractDetailResponse(
        **base.model_dump(),
        editability=editability_response(contract, now, grace_period_days),
        wage_summary=wage_summary_response(WageEngine.summarize(terms_for(contract))),
    )


def career_response(summary: CareerSummary) -> CareerSummaryResponse:
    items = [
        CareerItemResponse(
            contract_id=item.contract.id,
            workplace=item.contract.business_name or item.contract.employer_name,
            job_description=item.contract.job_description,
            period=format_contract_period(item.contract.start_date, item.contract.signed_at),
            duration_days=item.duration_days,
            duration_text=item.duration_text,
            rating=item.review.rating if item.review else None,
            review_comment=getattr(item.review, "comment", None),
        )
        for item in summary.careers
    ]
    return CareerSummaryResponse(
        total_contracts=summary.total_contracts,
        total_work_days=summary.total_work_days,
        total_work_days_text=summary.total_work_days_text,
        average_rating=summary.average_rating,
        rating_count=summary.rating_count,
        workplaces=summary.workplaces,
        job_types=summary.job_types,
        careers=items,
    )
