"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.loan import has_required_fields


# ---- Request schemas ----

class CalculateRequest(BaseModel):
    """Loan parameters as posted by the calculator form.

    Every field is optional here so a missing one is reported as
    "Missing required fields" instead of a schema error.
    """
    model_config = ConfigDict(populate_by_name=True)

    property_price: Decimal | None = Field(None, alias="propertyPrice", allow_inf_nan=False)
    down_payment: Decimal | None = Field(None, alias="downPayment", allow_inf_nan=False)
    annual_interest_rate: Decimal | None = Field(
        None, alias="annualInterestRate", allow_inf_nan=False, description="Percent, e.g. 3.5"
    )
    amortization_period: Decimal | None = Field(
        None,
        alias="amortizationPeriod",
        allow_inf_nan=False,
        description="Years: 5, 10, 15, 20, 25 or 30",
    )
    payment_schedule: str | None = Field(
        None,
        alias="paymentSchedule",
        description="'monthly', 'bi-weekly' or 'accelerated bi-weekly'",
    )

    @field_validator("payment_schedule", mode="before")
    @classmethod
    def schedule_as_text(cls, value):
        # A numeric schedule is reported by the schedule rule, not as a schema error
        if isinstance(value, (bool, int, float)):
            return str(value) if value else None
        return value

    def has_all_fields(self) -> bool:
        return has_required_fields(
            self.property_price,
            self.down_payment,
            self.annual_interest_rate,
            self.amortization_period,
            self.payment_schedule,
        )


# ---- Response schemas ----

class CalculateResponse(BaseModel):
    payment: float


class ErrorResponse(BaseModel):
    error: str
