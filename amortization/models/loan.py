"""Loan and amortization schedule data types."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class PaymentFrequency(Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.BIWEEKLY: 26,
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.SEMIANNUAL: 2,
    PaymentFrequency.ANNUAL: 1,
}


@dataclass(frozen=True)
class LoanParameters:
    principal: Decimal
    annual_rate: Decimal  # Percent, 3.5 = 3.5% APR
    periods: int
    start_date: Optional[date] = None
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY


@dataclass(frozen=True)
class ScheduleRow:
    period: int
    date: Optional[date]
    payment: Decimal
    interest: Decimal
    principal: Decimal
    beginning_balance: Decimal
    balance: Decimal  # Remaining after this payment


@dataclass(frozen=True)
class Amortization:
    parameters: LoanParameters
    periodic_rate: Decimal
    periodic_payment: Decimal
    payments: tuple[ScheduleRow, ...]
    total_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal

    @property
    def end_date(self) -> Optional[date]:
        if not self.payments:
            return None
        return self.payments[-1].date

    def __str__(self) -> str:
        from amortization.report import render_amortization

        return render_amortization(self)


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal
