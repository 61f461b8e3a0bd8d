"""Payment date arithmetic.

Calendar rules (month-end clamping, leap years) come from dateutil.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from amortization.models.loan import PaymentFrequency

# Step per period: (months, weeks)
_STEPS = {
    PaymentFrequency.WEEKLY: (0, 1),
    PaymentFrequency.BIWEEKLY: (0, 2),
    PaymentFrequency.MONTHLY: (1, 0),
    PaymentFrequency.QUARTERLY: (3, 0),
    PaymentFrequency.SEMIANNUAL: (6, 0),
    PaymentFrequency.ANNUAL: (12, 0),
}


def advance(start: date, frequency: PaymentFrequency, count: int) -> date:
    """Return ``start`` moved forward by ``count`` payment periods.

    Always offset from ``start`` rather than from the previous payment date,
    so Jan 31 -> Feb 29 -> Mar 31 instead of drifting to the 29th.
    """
    months, weeks = _STEPS[frequency]
    return start + relativedelta(months=months * count, weeks=weeks * count)
