"""Down-payment and input validation for Canadian insured mortgages.

Rules run in a fixed order and stop at the first failure, so a request that
breaks several rules always reports the same message.

Pure functions: LoanRequest in, ValidationOutcome out. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from src.models.loan import AMORTIZATION_PERIODS, PAYMENT_SCHEDULES, LoanRequest
from src.models.results import ValidationOutcome

logger = logging.getLogger(__name__)

# CMHC insurance is unavailable past these limits
MAX_INSURED_AMORTIZATION_YEARS = 25
MAX_INSURED_PRICE = Decimal("1000000")
UNINSURED_MIN_DOWN_PCT = Decimal("0.2")

# Tiered minimum above $500K: 5% of the first $500K, 10% of the rest
TIER_THRESHOLD = Decimal("500000")
FIRST_TIER_PCT = Decimal("0.05")
SECOND_TIER_PCT = Decimal("0.10")

MAX_DOWN_PCT = Decimal("0.8")  # Exclusive
MIN_DOWN_PCT = Decimal("0.05")


class ValidationError(ValueError):
    """A loan request broke one of the down-payment/input rules."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ValidationRule:
    name: str
    fails: Callable[[LoanRequest], bool]
    message: Callable[[LoanRequest], str]


def _plain(amount: Decimal) -> str:
    """Render an amount like a plain number: 240000, 246.9 (no trailing zeros)."""
    return format(amount.normalize(), "f")


def _requires_uninsured_minimum(req: LoanRequest) -> bool:
    return (
        req.amortization_period > MAX_INSURED_AMORTIZATION_YEARS
        or req.property_price > MAX_INSURED_PRICE
    )


def tiered_minimum_down_payment(property_price: Decimal) -> Decimal:
    """Minimum down payment for a property priced above $500K."""
    return (
        TIER_THRESHOLD * FIRST_TIER_PCT
        + (property_price - TIER_THRESHOLD) * SECOND_TIER_PCT
    )


RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        name="amortization_period",
        fails=lambda r: r.amortization_period not in AMORTIZATION_PERIODS,
        message=lambda r: (
            "Invalid amortization period. Must be one of 5, 10, 15, 20, 25, 30 years."
        ),
    ),
    ValidationRule(
        name="payment_schedule",
        fails=lambda r: r.payment_schedule not in PAYMENT_SCHEDULES,
        message=lambda r: (
            "Invalid payment schedule. Must be one of "
            "'monthly', 'bi-weekly', 'accelerated bi-weekly'."
        ),
    ),
    ValidationRule(
        name="uninsured_minimum",
        fails=lambda r: (
            _requires_uninsured_minimum(r)
            and r.down_payment < r.property_price * UNINSURED_MIN_DOWN_PCT
        ),
        message=lambda r: (
            "if amortization period exceeds 25 years or property price is more than "
            "$1,000,000 CMHC insurance is not available. Therefore, the down payment "
            "must be at least 20%. Minimum required down payment is "
            f"${_plain(r.property_price * UNINSURED_MIN_DOWN_PCT)}."
        ),
    ),
    ValidationRule(
        name="tiered_minimum",
        fails=lambda r: (
            r.property_price > TIER_THRESHOLD
            and r.down_payment < tiered_minimum_down_payment(r.property_price)
        ),
        message=lambda r: (
            "For properties over $500,000, the minimum down payment is 5% of the "
            "first $500,000 and 10% of any amount over $500,000. Minimum required "
            f"down payment is ${tiered_minimum_down_payment(r.property_price):.2f}."
        ),
    ),
    ValidationRule(
        name="maximum_down_payment",
        fails=lambda r: r.down_payment >= r.property_price * MAX_DOWN_PCT,
        message=lambda r: (
            "Down payment must be less than 80% of the property price. Your down "
            f"payment should be smaller than ${_plain(r.property_price * MAX_DOWN_PCT)}."
        ),
    ),
    ValidationRule(
        name="minimum_down_payment",
        fails=lambda r: r.down_payment < r.property_price * MIN_DOWN_PCT,
        message=lambda r: (
            "Down payment must be at least 5% of the property price. Minimum required "
            f"down payment is ${_plain(r.property_price * MIN_DOWN_PCT)}."
        ),
    ),
    ValidationRule(
        name="interest_rate",
        fails=lambda r: r.annual_interest_rate <= 0,
        message=lambda r: "Annual interest rate must be greater than 0",
    ),
)


def validate(request: LoanRequest) -> ValidationOutcome:
    """Check a request against every rule, in order, stopping at the first failure."""
    for rule in RULES:
        if rule.fails(request):
            message = rule.message(request)
            logger.debug("Loan request failed rule %s: %s", rule.name, message)
            return ValidationOutcome(error=message)
    return ValidationOutcome.ok()


def ensure_valid(request: LoanRequest) -> None:
    """Raise ValidationError with the first failing rule's message."""
    outcome = validate(request)
    if not outcome.is_valid:
        raise ValidationError(outcome.error)
