"""Pydantic schemas for API request/response models."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract_engine.calculators.types import (
    AllowanceKind,
    AllowanceTreatment,
    BusinessSize,
    PayPeriod,
    WageType,
)
from contract_engine.services.state_machine import ContractStatus


# ============================================================================
# Wage calculation schemas
# ============================================================================


class WeeklyHolidayPayRequest(BaseModel):
    """Schema for a weekly holiday pay calculation."""

    hourly_wage: int = Field(ge=0)
    work_days_per_week: int = Field(ge=1, le=7)
    daily_work_hours: Decimal = Field(ge=0, le=24)


class WeeklyHolidayPayResponse(BaseModel):
    """Schema for weekly holiday pay results."""

    model_config = ConfigDict(from_attributes=True)

    is_eligible: bool
    weekly_work_hours: Decimal
    daily_work_hours: Decimal
    weekly_holiday_hours: Decimal
    base_hourly_wage: int
    weekly_holiday_pay_per_hour: int
    weekly_holiday_pay_per_week: int
    effective_hourly_wage: int


class ContractTermsPayload(BaseModel):
    """Wage and schedule terms as entered on a contract."""

    hourly_wage: int = Field(ge=0)
    work_days_per_week: int = Field(ge=1, le=7)
    work_start_time: str = Field(examples=["09:00"])
    work_end_time: str = Field(examples=["18:00"])
    break_minutes: int = Field(default=0, ge=0)
    business_size: BusinessSize = BusinessSize.UNDER5
    wage_type: WageType = WageType.HOURLY
    overtime_rate_per_hour: int | None = Field(default=None, ge=0)
    holiday_rate_per_day: int | None = Field(default=None, ge=0)
    annual_leave_rate_per_day: int | None = Field(default=None, ge=0)


class WageBreakdownRequest(ContractTermsPayload):
    """Schema for a periodized wage breakdown."""

    period: PayPeriod = PayPeriod.MONTHLY


class WageBreakdownResponse(BaseModel):
    """Schema for a wage breakdown."""

    model_config = ConfigDict(from_attributes=True)

    period: PayPeriod
    base_wage: int
    weekly_holiday_pay: int
    total_wage: int
    weekly_work_hours: Decimal
    is_weekly_holiday_eligible: bool


class InclusiveWageRequest(BaseModel):
    """Schema for an inclusive wage calculation."""

    hourly_wage: int = Field(ge=0)
    work_days_per_week: int = Field(ge=1, le=7)
    daily_work_hours: Decimal = Field(ge=0, le=24)
    business_size: BusinessSize
    overtime_rate_per_hour: int = Field(ge=0)
    holiday_rate_per_day: int | None = Field(default=None, ge=0)
    annual_leave_rate_per_day: int | None = Field(default=None, ge=0)


class InclusiveAllowanceResponse(BaseModel):
    """Schema for one inclusive wage allowance."""

    model_config = ConfigDict(from_attributes=True)

    kind: AllowanceKind
    unit: str
    unit_rate: int
    treatment: AllowanceTreatment
    monthly_amount: int | None = None
    note: str | None = None


class InclusiveWageResponse(BaseModel):
    """Schema for inclusive wage results."""

    model_config = ConfigDict(from_attributes=True)

    daily_overtime_hours: Decimal
    monthly_overtime_hours: Decimal
    monthly_overtime_pay: int
    fixed_monthly_total: int
    allowances: list[InclusiveAllowanceResponse]


class UnitRateSuggestionResponse(BaseModel):
    """Schema for suggested inclusive wage unit rates."""

    model_config = ConfigDict(from_attributes=True)

    overtime_per_hour: int
    holiday_per_day: int
    annual_leave_per_day: int


class WageSummaryResponse(BaseModel):
    """Schema for the full wage section of a contract."""

    daily_work_hours: Decimal
    weekly_holiday: WeeklyHolidayPayResponse
    breakdown: WageBreakdownResponse
    inclusive: InclusiveWageResponse | None = None
    suggested_rates: UnitRateSuggestionResponse | None = None


class MinimumWageResponse(BaseModel):
    """Schema for a minimum wage check."""

    model_config = ConfigDict(from_attributes=True)

    year: int
    minimum_wage: int
    required_hourly_wage: int
    hourly_wage: int
    includes_weekly_holiday_pay: bool
    shortfall: int
    is_compliant: bool


# ============================================================================
# Contract schemas
# ============================================================================


class ContractCreate(BaseModel):
    """Schema for creating a contract from a completed draft."""

    employer_name: str = Field(min_length=1)
    worker_name: str = Field(min_length=1)
    hourly_wage: int = Field(ge=0)
    start_date: date
    work_days: list[str] = Field(min_length=1, max_length=7)
    work_start_time: str
    work_end_time: str
    break_minutes: int = Field(default=0, ge=0)
    work_location: str = Field(min_length=1)
    business_name: str | None = None
    job_description: str | None = None
    business_size: BusinessSize = BusinessSize.UNDER5
    wage_type: WageType = WageType.HOURLY
    monthly_wage: int | None = Field(default=None, ge=0)
    overtime_rate_per_hour: int | None = Field(default=None, ge=0)
    holiday_rate_per_day: int | None = Field(default=None, ge=0)
    annual_leave_rate_per_day: int | None = Field(default=None, ge=0)


class ContractUpdate(BaseModel):
    """Schema for amending contract content. Only sent fields change."""

    employer_name: str | None = None
    worker_name: str | None = None
    hourly_wage: int | None = Field(default=None, ge=0)
    start_date: date | None = None
    work_days: list[str] | None = None
    work_start_time: str | None = None
    work_end_time: str | None = None
    break_minutes: int | None = Field(default=None, ge=0)
    work_location: str | None = None
    business_name: str | None = None
    job_description: str | None = None
    business_size: BusinessSize | None = None
    wage_type: WageType | None = None
    monthly_wage: int | None = Field(default=None, ge=0)
    overtime_rate_per_hour: int | None = Field(default=None, ge=0)
    holiday_rate_per_day: int | None = Field(default=None, ge=0)
    annual_leave_rate_per_day: int | None = Field(default=None, ge=0)


class SignRequest(BaseModel):
    """Schema for signing a contract."""

    signature: str = Field(min_length=1)


class ReviewCreate(BaseModel):
    """Schema for reviewing the worker of a completed contract."""

    rating: int = Field(ge=1, le=5)
    comment: str | None = None


class ReviewResponse(BaseModel):
    """Schema for a worker review."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    contract_id: UUID
    employer_id: UUID
    worker_id: UUID
    rating: int
    comment: str | None = None
    created_at: datetime


class EditabilityResponse(BaseModel):
    """Schema for the content edit window of a contract."""

    is_editable: bool
    remaining_edit_days: int
    edit_deadline: datetime


class ContractResponse(BaseModel):
    """Schema for contract response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employer_id: UUID
    worker_id: UUID | None = None
    employer_name: str
    worker_name: str
    business_name: str | None = None
    business_size: BusinessSize
    wage_type: WageType
    hourly_wage: int
    monthly_wage: int | None = None
    overtime_rate_per_hour: int | None = None
    holiday_rate_per_day: int | None = None
    annual_leave_rate_per_day: int | None = None
    start_date: date
    work_days: list[str]
    work_start_time: str
    work_end_time: str
    break_minutes: int
    work_location: str
    job_description: str | None = None
    status: str
    employer_signature: str | None = None
    worker_signature: str | None = None
    signed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("status")
    @classmethod
    def normalize_status(cls, value: str) -> str:
        """Report legacy statuses under their current name."""
        return ContractStatus.parse(value).value


class ContractDetailResponse(ContractResponse):
    """Schema for a contract with derived wage and edit window values."""

    editability: EditabilityResponse
    wage_summary: WageSummaryResponse


class ContractListResponse(BaseModel):
    """Schema for listing contracts."""

    items: list[ContractResponse]
    total: int


# ============================================================================
# Career schemas
# ============================================================================


class CareerItemResponse(BaseModel):
    """Schema for one completed contract in a career history."""

    contract_id: UUID
    workplace: str
    job_description: str | None = None
    period: str
    duration_days: int
    duration_text: str
    rating: int | None = None
    review_comment: str | None = None


class CareerSummaryResponse(BaseModel):
    """Schema for a worker's career summary."""

    total_contracts: int
    total_work_days: int
    total_work_days_text: str
    average_rating: Decimal
    rating_count: int
    workplaces: list[str]
    job_types: list[str]
    careers: list[CareerItemResponse]


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None
