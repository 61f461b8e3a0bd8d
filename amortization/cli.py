"""CLI for amortization schedules.

Usage:
    python -m amortization.cli 280350 3.5 60
    python -m amortization.cli 280350 3.5 60 --start 2024-01-01 --yearly
    python -m amortization.cli 10000 5 26 --frequency biweekly
    python -m amortization.cli 280350 3.5 60 --api http://localhost:8000
"""

import argparse
import asyncio
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation

import httpx

from amortization.config import settings
from amortization.engine.schedule import amortize, yearly_summary
from amortization.exceptions import InvalidParameter
from amortization.models.loan import PaymentFrequency
from amortization.report import render_amortization, render_yearly

logger = logging.getLogger(__name__)


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def _dollar(v) -> str:
    return f"{settings.currency_symbol}{Decimal(str(v)):,}"


def print_remote_report(data: dict, yearly: bool = False) -> None:
    """Print an API AmortizationResponse payload."""
    print(f"\n{'=' * 64}")
    print("  Amortization")
    print(f"{'=' * 64}")
    print(f"  Loan Amount:       {_dollar(data['principal'])}")
    print(f"  Annual Rate:       {data['annual_rate']}% ({data['frequency']})")
    print(f"  Total Periods:     {data['periods']}")
    print(f"  Periodic Payment:  {_dollar(data['periodic_payment'])}")
    print(f"  Total Payment:     {_dollar(data['total_payment'])}")
    print(f"  Total Interest:    {_dollar(data['total_interest'])}")
    if data.get("end_date"):
        print(f"  End Date:          {data['end_date']}")
    print()

    for row in data.get("schedule", []):
        when = row.get("due_date") or "-"
        print(
            f"  {row['period']:>4}  {when:<10}  {_dollar(row['beginning_balance']):>16}"
            f"  {_dollar(row['payment']):>14}"
            f"  {_dollar(row['interest']):>14}  {_dollar(row['principal']):>14}"
            f"  {_dollar(row['balance']):>16}"
        )
    print()

    if yearly:
        print(f"{'=' * 64}")
        print("  Yearly Summary")
        print(f"{'=' * 64}")
        print(
            f"  {'Year':>4}  {'Principal':>16}  {'Interest':>16}"
            f"  {'Debt Service':>16}  {'Ending Balance':>16}"
        )
        for y in data.get("yearly_summary", []):
            print(
                f"  {y['year']:>4}  {_dollar(y['principal']):>16}  {_dollar(y['interest']):>16}"
                f"  {_dollar(y['debt_service']):>16}  {_dollar(y['ending_balance']):>16}"
            )
        print()


async def fetch_remote(payload: dict, api_url: str, transport: httpx.AsyncBaseTransport | None = None) -> dict:
    """POST loan terms to a running API and return the decoded response."""
    url = f"{api_url}/api/v1/amortization"
    logger.debug("POST %s %s", url, payload)
    async with httpx.AsyncClient(timeout=settings.request_timeout, transport=transport) as client:
        resp = await client.post(url, json=payload)
        resp.raise_for_status()
        return resp.json()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan amortization schedule")
    parser.add_argument("principal", type=_decimal, help="Amount borrowed")
    parser.add_argument("annual_rate", type=_decimal, help="APR as a percentage (3.5 = 3.5%%)")
    parser.add_argument("periods", type=int, help="Number of payment periods")
    parser.add_argument("--start", type=date.fromisoformat, help="Start date, YYYY-MM-DD")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in PaymentFrequency],
        default=settings.default_frequency,
        help=f"Payment period (default: {settings.default_frequency})",
    )
    parser.add_argument("--yearly", action="store_true", help="Also print a per-year summary")
    parser.add_argument(
        "--api",
        nargs="?",
        const=settings.api_url,
        default=None,
        metavar="URL",
        help=f"Compute through the HTTP API (default URL: {settings.api_url})",
    )
    return parser


async def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.api:
        payload = {
            "principal": str(args.principal),
            "annual_rate": str(args.annual_rate),
            "periods": args.periods,
            "frequency": args.frequency,
        }
        if args.start is not None:
            payload["start_date"] = args.start.isoformat()

        try:
            data = await fetch_remote(payload, args.api, transport=transport)
        except httpx.HTTPStatusError as e:
            try:
                detail = e.response.json().get("detail", e.response.text)
            except ValueError:
                detail = e.response.text
            print(f"Error: API returned {e.response.status_code}: {detail}", file=sys.stderr)
            return 1
        except httpx.RequestError as e:
            print(f"Error: Could not reach API at {args.api}: {e}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn amortization.api.app:app", file=sys.stderr)
            return 1
        print_remote_report(data, yearly=args.yearly)
        return 0

    try:
        result = amortize(
            args.principal,
            args.annual_rate,
            args.periods,
            start_date=args.start,
            frequency=args.frequency,
        )
    except InvalidParameter as e:
        parser.error(str(e))

    print(render_amortization(result))
    if args.yearly:
        print(render_yearly(yearly_summary(result)))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
