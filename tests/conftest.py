"""Canonical loans used across tests.

Fixture: $280,350 at 3.5% APR over 60 monthly payments (the documented
example), plus a 30yr mortgage and a zero-rate loan.
"""

import pytest
from datetime import date
from decimal import Decimal

from amortization.engine.schedule import amortize
from amortization.models.loan import Amortization


@pytest.fixture
def five_year_loan() -> Amortization:
    return amortize(Decimal("280350"), Decimal("3.5"), 60)


@pytest.fixture
def dated_loan() -> Amortization:
    """$10K at 5% for 12 months, starting Jan 1 2024."""
    return amortize(Decimal("10000"), Decimal("5"), 12, start_date=date(2024, 1, 1))


@pytest.fixture
def mortgage() -> Amortization:
    """$400K at 7% for 30 years."""
    return amortize(Decimal("400000"), Decimal("7"), 360)


@pytest.fixture
def zero_rate_loan() -> Amortization:
    return amortize(Decimal("36000"), Decimal("0"), 36)
