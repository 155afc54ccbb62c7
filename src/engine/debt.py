"""Periodic mortgage payment computation.

Pure functions: LoanRequest in, dataclass out. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

from src.engine.insurance import insurance_premium, insurance_rate
from src.engine.validation import ensure_valid
from src.models.loan import LoanRequest, PaymentSchedule
from src.models.results import MortgageBreakdown, PaymentResult

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Per-period rates below 1e-60 are treated as interest-free
NEGLIGIBLE_RATE_DIGITS = 60
GUARD_DIGITS = 10

# Accelerated bi-weekly amortizes like monthly, then halves the payment
PERIODS_PER_YEAR: dict[PaymentSchedule, int] = {
    PaymentSchedule.MONTHLY: 12,
    PaymentSchedule.BI_WEEKLY: 26,
    PaymentSchedule.ACCELERATED_BI_WEEKLY: 12,
}


def periodic_payment(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    periods_per_year: int,
) -> Decimal:
    """Fixed payment per period for a fully amortizing loan. Unrounded.

    Args:
        principal: Amount financed, including any insurance premium
        annual_rate_pct: Annual interest rate in percent (e.g. 3.5 for 3.5%)
        term_years: Amortization period in years
        periods_per_year: Payments per year
    """
    r = annual_rate_pct / 100 / periods_per_year
    n = term_years * periods_per_year
    if r <= 0 or r.adjusted() < -NEGLIGIBLE_RATE_DIGITS:
        # Interest this small moves nothing at cent precision
        return principal / n

    # 1 + r must keep every digit of r, or (1+r)^n - 1 collapses toward 0
    with localcontext() as ctx:
        ctx.prec += -min(r.adjusted(), 0) + GUARD_DIGITS
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        factor = (1 + r) ** n
        payment = principal * (r * factor) / (factor - 1)
    return +payment


def mortgage_breakdown(request: LoanRequest) -> MortgageBreakdown:
    """Validate a request and return the payment with every intermediate value.

    Raises:
        ValidationError: the first down-payment/input rule the request breaks
    """
    ensure_valid(request)

    schedule = request.schedule
    premium = insurance_premium(request)
    principal = request.loan_amount + premium
    periods = PERIODS_PER_YEAR[schedule]
    term_years = int(request.amortization_period)

    payment = periodic_payment(principal, request.annual_interest_rate, term_years, periods)
    if schedule is PaymentSchedule.ACCELERATED_BI_WEEKLY:
        payment = payment / 2
    payment = payment.quantize(TWO_PLACES, ROUND_HALF_UP)

    logger.debug(
        "Computed %s payment %s on principal %s (premium %s)",
        schedule.value, payment, principal, premium,
    )

    return MortgageBreakdown(
        loan_amount=request.loan_amount,
        insurance_rate=insurance_rate(request.down_payment_pct),
        insurance_premium=premium,
        principal=principal,
        periods_per_year=periods,
        number_of_payments=term_years * periods,
        schedule_rate=request.annual_interest_rate / 100 / periods,
        payment=payment,
    )


def calculate_mortgage(request: LoanRequest) -> PaymentResult:
    """Periodic payment for a loan request, rounded to cents.

    Raises:
        ValidationError: the first down-payment/input rule the request breaks
    """
    return PaymentResult(payment=mortgage_breakdown(request).payment)


def compare_schedules(request: LoanRequest) -> dict[PaymentSchedule, PaymentResult]:
    """Payment under each schedule, all other loan terms unchanged.

    The request's own schedule must still be valid; it is checked first.
    """
    ensure_valid(request)
    return {
        schedule: calculate_mortgage(request.with_schedule(schedule))
        for schedule in PaymentSchedule
    }
