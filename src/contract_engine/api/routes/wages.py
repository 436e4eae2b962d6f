"""Wage calculation endpoints. Stateless; nothing is persisted."""

from fastapi import APIRouter, Query

from contract_engine.api.schemas import (
    ContractTermsPayload,
    ErrorResponse,
    InclusiveWageRequest,
    InclusiveWageResponse,
    MinimumWageResponse,
    WageBreakdownRequest,
    WageBreakdownResponse,
    WageSummaryResponse,
    WeeklyHolidayPayRequest,
    WeeklyHolidayPayResponse,
)
from contract_engine.api.serializers import (
    inclusive_response,
    minimum_wage_response,
    wage_summary_response,
)
from contract_engine.calculators.engine import WageEngine
from contract_engine.calculators.inclusive_wage import calculate_inclusive_wage
from contract_engine.calculators.rate_tables import check_minimum_wage
from contract_engine.calculators.types import ContractTerms
from contract_engine.calculators.wage_breakdown import wage_breakdown
from contract_engine.calculators.weekly_holiday import calculate_weekly_holiday_pay

router = APIRouter(prefix="/wages", tags=["wages"])


def _terms(payload: ContractTermsPayload) -> ContractTerms:
    return ContractTerms(
        **payload.model_dump(include=set(ContractTermsPayload.model_fields))
    )


@router.post(
    "/weekly-holiday-pay",
    response_model=WeeklyHolidayPayResponse,
)
async def weekly_holiday_pay(payload: WeeklyHolidayPayRequest) -> WeeklyHolidayPayResponse:
    """Weekly holiday pay for a schedule."""
    result = calculate_weekly_holiday_pay(
        payload.hourly_wage, payload.work_days_per_week, payload.daily_work_hours
    )
    return WeeklyHolidayPayResponse.model_validate(result)


@router.post(
    "/breakdown",
    response_model=WageBreakdownResponse,
    responses={422: {"model": ErrorResponse}},
)
async def breakdown(payload: WageBreakdownRequest) -> WageBreakdownResponse:
    """Weekly or monthly wage breakdown from clock-time terms."""
    terms = _terms(payload)
    result = wage_breakdown(
        payload.period, terms.hourly_wage, terms.work_days_per_week, terms.daily_work_hours
    )
    return WageBreakdownResponse.model_validate(result)


@router.post(
    "/summary",
    response_model=WageSummaryResponse,
    responses={422: {"model": ErrorResponse}},
)
async def summary(payload: WageBreakdownRequest) -> WageSummaryResponse:
    """Full wage section for a set of terms."""
    return wage_summary_response(WageEngine.summarize(_terms(payload), payload.period))


@router.post(
    "/inclusive",
    response_model=InclusiveWageResponse,
    responses={422: {"model": ErrorResponse}},
)
async def inclusive(payload: InclusiveWageRequest) -> InclusiveWageResponse:
    """Inclusive wage allowances for an over5 worksite."""
    result = calculate_inclusive_wage(**payload.model_dump())
    return inclusive_response(result)


@router.get(
    "/minimum-wage/{year}",
    response_model=MinimumWageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def minimum_wage_check(
    year: int,
    hourly_wage: int = Query(default=0, ge=0),
    includes_weekly_holiday_pay: bool = False,
) -> MinimumWageResponse:
    """Statutory minimum wage for a year, checked against an hourly wage."""
    return minimum_wage_response(
        check_minimum_wage(hourly_wage, year, includes_weekly_holiday_pay)
    )
