from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ValidationOutcome:
    error: str | None = None  # First failing rule's message

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls()

    @property
    def is_valid(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class PaymentResult:
    payment: Decimal  # Per-period amount, 2 decimal places


@dataclass(frozen=True)
class MortgageBreakdown:
    """Intermediate values behind a single periodic payment."""

    loan_amount: Decimal  # Price - down payment
    insurance_rate: Decimal  # CMHC tier rate, 0 at 20%+ down
    insurance_premium: Decimal
    principal: Decimal  # Loan amount + premium

    periods_per_year: int
    number_of_payments: int
    schedule_rate: Decimal  # Interest rate per period (fraction)

    payment: Decimal
