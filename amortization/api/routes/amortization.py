"""Amortization routes."""

import logging
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, HTTPException

from amortization.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    ScheduleRowResponse,
    YearlySummaryResponse,
)
from amortization.engine.schedule import amortize, yearly_summary
from amortization.exceptions import InvalidParameter
from amortization.models.loan import Amortization

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["amortization"])

TWO_PLACES = Decimal("0.01")
RATE_PLACES = Decimal("0.00000001")


def _cents(v: Decimal) -> Decimal:
    return v.quantize(TWO_PLACES, ROUND_HALF_UP)


def _result_to_response(result: Amortization, include_schedule: bool) -> AmortizationResponse:
    """Convert engine Amortization to API response, rounded to cents."""
    params = result.parameters

    schedule = []
    yearly = []
    if include_schedule:
        schedule = [
            ScheduleRowResponse(
                period=p.period,
                due_date=p.date,
                payment=_cents(p.payment),
                interest=_cents(p.interest),
                principal=_cents(p.principal),
                beginning_balance=_cents(p.beginning_balance),
                balance=abs(_cents(p.balance)),
            )
            for p in result.payments
        ]
        yearly = [
            YearlySummaryResponse(
                year=y.year,
                principal=_cents(y.principal),
                interest=_cents(y.interest),
                debt_service=_cents(y.debt_service),
                ending_balance=abs(_cents(y.ending_balance)),
            )
            for y in yearly_summary(result)
        ]

    return AmortizationResponse(
        principal=params.principal,
        annual_rate=params.annual_rate,
        periods=params.periods,
        frequency=params.frequency.value,
        start_date=params.start_date,
        end_date=result.end_date,
        periodic_rate=result.periodic_rate.quantize(RATE_PLACES, ROUND_HALF_UP),
        periodic_payment=_cents(result.periodic_payment),
        total_payment=_cents(result.total_payment),
        total_interest=_cents(result.total_interest),
        schedule=schedule,
        yearly_summary=yearly,
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def create_amortization(req: AmortizationRequest):
    """Loan terms → fixed payment, totals and per-period schedule."""
    try:
        result = amortize(
            req.principal,
            req.annual_rate,
            req.periods,
            start_date=req.start_date,
            frequency=req.frequency,
        )
    except InvalidParameter as e:
        logger.info("Rejected amortization request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return _result_to_response(result, req.include_schedule)
