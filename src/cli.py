"""CLI for the mortgage payment engine.

Usage:
    python -m src.cli 300000 40000 3.5 25
    python -m src.cli 300000 40000 3.5 25 --schedule "accelerated bi-weekly"
    python -m src.cli 300000 40000 3.5 25 --compare
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from src.config import settings
from src.engine.debt import compare_schedules, mortgage_breakdown
from src.engine.validation import ValidationError
from src.models.loan import PAYMENT_SCHEDULES, LoanRequest, PaymentSchedule
from src.models.results import MortgageBreakdown, PaymentResult


def print_breakdown(request: LoanRequest, breakdown: MortgageBreakdown) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {request.payment_schedule.title()} payment: ${breakdown.payment:,.2f}")
    print(f"{'=' * 60}")
    print(f"  Property price:     ${request.property_price:,.2f}")
    print(f"  Down payment:       ${request.down_payment:,.2f} ({request.down_payment_pct:.1%})")
    print(f"  Loan amount:        ${breakdown.loan_amount:,.2f}")
    print(f"  CMHC premium:       ${breakdown.insurance_premium:,.2f} ({breakdown.insurance_rate:.1%})")
    print(f"  Principal:          ${breakdown.principal:,.2f}")
    print(f"  Payments:           {breakdown.number_of_payments}")
    print()


def print_comparison(comparison: dict[PaymentSchedule, PaymentResult]) -> None:
    print("  Payment by schedule:")
    for schedule, result in comparison.items():
        print(f"    {schedule.value:>22}: ${result.payment:,.2f}")
    print()


def finite_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"must be a finite number: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Canadian mortgage payment calculator (CMHC rules)")
    parser.add_argument("property_price", type=finite_decimal, help="Property price ($)")
    parser.add_argument("down_payment", type=finite_decimal, help="Down payment ($)")
    parser.add_argument("annual_interest_rate", type=finite_decimal, help="Annual interest rate in percent, e.g. 3.5")
    parser.add_argument("amortization_period", type=int, help="Amortization period in years (5-30, step 5)")
    parser.add_argument(
        "--schedule",
        default=PaymentSchedule.MONTHLY.value,
        help=f"Payment schedule: {', '.join(PAYMENT_SCHEDULES)} (default: monthly)",
    )
    parser.add_argument("--compare", action="store_true", help="Also show the payment under every schedule")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)

    request = LoanRequest.from_values(
        property_price=args.property_price,
        down_payment=args.down_payment,
        annual_interest_rate=args.annual_interest_rate,
        amortization_period=args.amortization_period,
        payment_schedule=args.schedule,
    )

    try:
        breakdown = mortgage_breakdown(request)
        comparison = compare_schedules(request) if args.compare else None
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print_breakdown(request, breakdown)
    if comparison:
        print_comparison(comparison)
    return 0


if __name__ == "__main__":
    sys.exit(main())
