"""CMHC mortgage default insurance premium.

Required when the down payment is under 20% of the purchase price. The premium
is a percentage of the loan amount, tiered by down-payment percentage, and is
financed into the mortgage rather than paid up front.

Tier rates follow the simplified CMHC table published by ratehub.ca.
"""

from decimal import Decimal

from src.models.loan import LoanRequest

INSURANCE_FREE_DOWN_PCT = Decimal("0.2")

# (exclusive upper bound on down-payment %, premium rate as % of loan amount)
PREMIUM_TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("0.10"), Decimal("0.04")),   # 5% - 9.99% down
    (Decimal("0.15"), Decimal("0.031")),  # 10% - 14.99% down
    (Decimal("0.20"), Decimal("0.028")),  # 15% - 19.99% down
)


def insurance_rate(down_payment_pct: Decimal) -> Decimal:
    """Premium rate for a down-payment percentage (0 at 20% or more)."""
    if down_payment_pct >= INSURANCE_FREE_DOWN_PCT:
        return Decimal("0")
    for upper_bound, rate in PREMIUM_TIERS:
        if down_payment_pct < upper_bound:
            return rate
    return Decimal("0")


def insurance_premium(request: LoanRequest) -> Decimal:
    """CMHC premium added to the principal. Unrounded."""
    rate = insurance_rate(request.down_payment_pct)
    if rate == 0:
        return Decimal("0")
    return request.loan_amount * rate
