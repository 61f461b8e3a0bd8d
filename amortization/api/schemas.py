"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class AmortizationRequest(BaseModel):
    principal: Decimal = Field(..., description="Amount borrowed")
    annual_rate: Decimal = Field(..., description="APR as a percentage, 3.5 = 3.5%")
    periods: int = Field(..., description="Number of payment periods")
    start_date: date | None = Field(None, description="Payment N falls N periods after this date")
    frequency: str | None = Field(None, description="weekly, biweekly, monthly, quarterly, semiannual, annual")
    include_schedule: bool = True


# ---- Response schemas ----

class ScheduleRowResponse(BaseModel):
    period: int
    due_date: date | None = None
    payment: Decimal
    interest: Decimal
    principal: Decimal
    beginning_balance: Decimal
    balance: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class AmortizationResponse(BaseModel):
    principal: Decimal
    annual_rate: Decimal
    periods: int
    frequency: str
    start_date: date | None = None
    end_date: date | None = None

    periodic_rate: Decimal
    periodic_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal

    schedule: list[ScheduleRowResponse] = []
    yearly_summary: list[YearlySummaryResponse] = []
