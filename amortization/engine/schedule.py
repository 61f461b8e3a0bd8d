"""Amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from collections.abc import Iterator
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from amortization.config import settings
from amortization.engine.dates import advance
from amortization.engine.payment import periodic_payment, periodic_rate
from amortization.exceptions import InvalidParameter
from amortization.models.loan import (
    Amortization,
    LoanParameters,
    PaymentFrequency,
    ScheduleRow,
    YearlySummary,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _to_decimal(parameter: str, value) -> Decimal:
    if isinstance(value, bool):
        raise InvalidParameter(parameter, value, "a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidParameter(parameter, value, "a number") from e
    if not result.is_finite():
        raise InvalidParameter(parameter, value, "a finite number")
    return result


def _to_frequency(value) -> PaymentFrequency:
    if value is None:
        value = settings.default_frequency
    if isinstance(value, PaymentFrequency):
        return value
    try:
        return PaymentFrequency(str(value).lower())
    except ValueError as e:
        choices = ", ".join(f.value for f in PaymentFrequency)
        raise InvalidParameter("frequency", value, f"one of {choices}") from e


def loan_parameters(
    principal,
    annual_rate,
    periods: int,
    start_date: date | None = None,
    frequency: PaymentFrequency | str | None = None,
) -> LoanParameters:
    """Validate raw inputs and build immutable loan parameters.

    Args:
        principal: Amount borrowed, > 0
        annual_rate: APR as a percentage (e.g. 3.5 for 3.5%), >= 0
        periods: Number of payments, >= 1
        start_date: If given, row N is dated start_date + N periods
        frequency: Payment period; defaults to settings.default_frequency

    Raises:
        InvalidParameter: naming the offending parameter and its constraint.
    """
    principal = _to_decimal("principal", principal)
    if principal <= 0:
        raise InvalidParameter("principal", principal, "greater than 0")

    annual_rate = _to_decimal("annual_rate", annual_rate)
    if annual_rate < 0:
        raise InvalidParameter("annual_rate", annual_rate, "greater than or equal to 0")

    if isinstance(periods, bool) or not isinstance(periods, int):
        raise InvalidParameter("periods", periods, "an integer")
    if periods < 1:
        raise InvalidParameter("periods", periods, "at least 1")

    if isinstance(start_date, datetime):
        start_date = start_date.date()
    elif start_date is not None and not isinstance(start_date, date):
        raise InvalidParameter("start_date", start_date, "a date")

    return LoanParameters(
        principal=principal,
        annual_rate=annual_rate,
        periods=periods,
        start_date=start_date,
        frequency=_to_frequency(frequency),
    )


def iter_schedule(params: LoanParameters) -> Iterator[ScheduleRow]:
    """Yield one row per period, in order.

    The last row pays off whatever balance is left, so rounding drift
    lands in the final payment and the closing balance is exactly zero.
    """
    rate = periodic_rate(params.annual_rate, params.frequency)
    pmt = periodic_payment(params.principal, rate, params.periods)
    balance = params.principal

    for period in range(1, params.periods + 1):
        interest = balance * rate
        if period == params.periods:
            principal_paid = balance
            payment = interest + principal_paid
        else:
            principal_paid = pmt - interest
            payment = pmt

        beginning_balance = balance
        balance -= principal_paid

        yield ScheduleRow(
            period=period,
            date=(
                advance(params.start_date, params.frequency, period)
                if params.start_date is not None
                else None
            ),
            payment=payment,
            interest=interest,
            principal=principal_paid,
            beginning_balance=beginning_balance,
            balance=balance,
        )


def amortize(
    principal,
    annual_rate,
    periods: int,
    start_date: date | None = None,
    frequency: PaymentFrequency | str | None = None,
) -> Amortization:
    """Build a loan and its full amortization schedule."""
    params = loan_parameters(principal, annual_rate, periods, start_date, frequency)
    return schedule_for(params)


def schedule_for(params: LoanParameters) -> Amortization:
    """Materialize the schedule for already-validated parameters."""
    rate = periodic_rate(params.annual_rate, params.frequency)
    pmt = periodic_payment(params.principal, rate, params.periods)
    payments = tuple(iter_schedule(params))

    logger.debug(
        "Amortized %s at %s%% over %d %s periods: payment %s",
        params.principal, params.annual_rate, params.periods,
        params.frequency.value, pmt,
    )

    return Amortization(
        parameters=params,
        periodic_rate=rate,
        periodic_payment=pmt,
        payments=payments,
        total_payment=sum((p.payment for p in payments), ZERO),
        total_interest=sum((p.interest for p in payments), ZERO),
        total_principal=sum((p.principal for p in payments), ZERO),
    )


def yearly_summary(amortization: Amortization) -> list[YearlySummary]:
    """Aggregate an amortization schedule by loan year.

    A trailing partial year (e.g. 30 monthly payments) gets its own entry.
    """
    per_year = amortization.parameters.frequency.periods_per_year
    last_period = len(amortization.payments)

    yearly: list[YearlySummary] = []
    year_principal = ZERO
    year_interest = ZERO
    year_debt_service = ZERO

    for p in amortization.payments:
        year_principal += p.principal
        year_interest += p.interest
        year_debt_service += p.payment

        if p.period % per_year == 0 or p.period == last_period:
            yearly.append(YearlySummary(
                year=(p.period - 1) // per_year + 1,
                principal=year_principal,
                interest=year_interest,
                debt_service=year_debt_service,
                ending_balance=p.balance,
            ))
            year_principal = ZERO
            year_interest = ZERO
            year_debt_service = ZERO

    return yearly
