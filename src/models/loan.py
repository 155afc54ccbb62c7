"""Loan request data types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentSchedule(Enum):
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"
    ACCELERATED_BI_WEEKLY = "accelerated bi-weekly"


AMORTIZATION_PERIODS: tuple[int, ...] = (5, 10, 15, 20, 25, 30)  # Years

PAYMENT_SCHEDULES: tuple[str, ...] = tuple(s.value for s in PaymentSchedule)

MISSING_FIELDS_ERROR = "Missing required fields"


def has_required_fields(*values) -> bool:
    """True when every input is present and truthy (0, "" and None count as missing)."""
    return all(values)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so 3.5 becomes Decimal("3.5"), not its binary expansion
    return Decimal(str(value))


@dataclass(frozen=True)
class LoanRequest:
    """Five loan parameters for one payment calculation.

    Out-of-range periods and unknown schedules are accepted here on purpose:
    the engine reports them through the ordered validation rules.
    """
    property_price: Decimal
    down_payment: Decimal
    annual_interest_rate: Decimal  # Percent, e.g. Decimal("3.5")
    amortization_period: int  # Years
    payment_schedule: str

    @classmethod
    def from_values(
        cls,
        property_price: Decimal | int | float | str,
        down_payment: Decimal | int | float | str,
        annual_interest_rate: Decimal | int | float | str,
        amortization_period: int | float | Decimal,
        payment_schedule: str | PaymentSchedule,
    ) -> "LoanRequest":
        """Build a request from plain numbers/strings (JSON, form or CLI input)."""
        period = _to_decimal(amortization_period)
        if period == period.to_integral_value():
            period = int(period)
        if isinstance(payment_schedule, PaymentSchedule):
            payment_schedule = payment_schedule.value
        return cls(
            property_price=_to_decimal(property_price),
            down_payment=_to_decimal(down_payment),
            annual_interest_rate=_to_decimal(annual_interest_rate),
            amortization_period=period,
            payment_schedule=payment_schedule,
        )

    @property
    def loan_amount(self) -> Decimal:
        """Amount borrowed before any insurance premium is financed."""
        return self.property_price - self.down_payment

    @property
    def down_payment_pct(self) -> Decimal:
        return self.down_payment / self.property_price

    @property
    def schedule(self) -> PaymentSchedule:
        return PaymentSchedule(self.payment_schedule)

    def with_schedule(self, schedule: PaymentSchedule) -> "LoanRequest":
        return LoanRequest(
            property_price=self.property_price,
            down_payment=self.down_payment,
            annual_interest_rate=self.annual_interest_rate,
            amortization_period=self.amortization_period,
            payment_schedule=schedule.value,
        )
