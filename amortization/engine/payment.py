"""Fixed-payment annuity math.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from amortization.models.loan import PaymentFrequency

HUNDRED = Decimal("100")


def periodic_rate(annual_rate: Decimal, frequency: PaymentFrequency) -> Decimal:
    """Interest rate applied per payment period.

    annual_rate is a percentage (3.5 for 3.5% APR), compounded once per period.
    """
    return annual_rate / HUNDRED / frequency.periods_per_year


def periodic_payment(principal: Decimal, rate: Decimal, periods: int) -> Decimal:
    """Fixed payment that retires ``principal`` in ``periods`` payments.

    Not rounded; callers quantize for display.
    """
    if rate == 0:
        return principal / periods
    # PMT = P * r / (1 - (1 + r)^-n)
    return principal * rate / (1 - (1 + rate) ** -periods)
