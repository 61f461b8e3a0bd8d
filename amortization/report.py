"""Plain-text rendering of an amortization and its schedule."""

from decimal import Decimal, ROUND_HALF_UP

from amortization.config import settings
from amortization.models.loan import Amortization, YearlySummary

WIDTH = 114


def _places() -> Decimal:
    return Decimal(1).scaleb(-settings.display_places)


def _money(v: Decimal) -> str:
    q = v.quantize(_places(), ROUND_HALF_UP)
    # -0.00 shows up when a balance is a hair below zero
    if q == 0:
        q = abs(q)
    return f"{settings.currency_symbol}{q:,}"


def _header(title: str) -> list[str]:
    return ["=" * WIDTH, f"  {title}", "=" * WIDTH]


def render_summary(amortization: Amortization) -> str:
    params = amortization.parameters
    rate_pct = f"{float(amortization.periodic_rate) * 100:.4f}%"
    lines = _header("Amortization")
    lines += [
        f"  Loan Amount:            {_money(params.principal)}",
        f"  Annual Rate:            {params.annual_rate}%",
        f"  Periodic Rate:          {rate_pct} ({params.frequency.value})",
        f"  Total Periods:          {params.periods}",
        f"  Periodic Payment:       {_money(amortization.periodic_payment)}",
        f"  Total Payment:          {_money(amortization.total_payment)}",
        f"  Total Interest:         {_money(amortization.total_interest)}",
    ]
    if params.start_date is not None:
        lines.append(f"  Start Date:             {params.start_date.isoformat()}")
        lines.append(f"  End Date:               {amortization.end_date.isoformat()}")
    return "\n".join(lines)


def render_schedule(amortization: Amortization) -> str:
    lines = _header("Amortization Schedule")
    lines.append(
        f"  {'#':>4}  {'Date':<10}  {'Beginning':>16}  {'Payment':>14}  {'Interest':>14}"
        f"  {'Principal':>14}  {'Balance':>16}"
    )
    lines.append("  " + "-" * (WIDTH - 2))
    for p in amortization.payments:
        when = p.date.isoformat() if p.date is not None else "-"
        lines.append(
            f"  {p.period:>4}  {when:<10}  {_money(p.beginning_balance):>16}"
            f"  {_money(p.payment):>14}  {_money(p.interest):>14}"
            f"  {_money(p.principal):>14}  {_money(p.balance):>16}"
        )
    return "\n".join(lines)


def render_yearly(summary: list[YearlySummary]) -> str:
    lines = _header("Yearly Summary")
    lines.append(
        f"  {'Year':>4}  {'Principal':>16}  {'Interest':>16}"
        f"  {'Debt Service':>16}  {'Ending Balance':>16}"
    )
    lines.append("  " + "-" * (WIDTH - 2))
    for y in summary:
        lines.append(
            f"  {y.year:>4}  {_money(y.principal):>16}  {_money(y.interest):>16}"
            f"  {_money(y.debt_service):>16}  {_money(y.ending_balance):>16}"
        )
    return "\n".join(lines)


def render_amortization(amortization: Amortization) -> str:
    """Summary block followed by the full per-period table."""
    return render_summary(amortization) + "\n\n" + render_schedule(amortization) + "\n"
