"""Tests for the ordered down-payment/input validation rules."""

from decimal import Decimal

import pytest

from src.engine.validation import (
    RULES,
    ValidationError,
    ensure_valid,
    tiered_minimum_down_payment,
    validate,
)

AMORTIZATION_ERROR = "Invalid amortization period. Must be one of 5, 10, 15, 20, 25, 30 years."
SCHEDULE_ERROR = (
    "Invalid payment schedule. Must be one of 'monthly', 'bi-weekly', 'accelerated bi-weekly'."
)
UNINSURED_PREFIX = (
    "if amortization period exceeds 25 years or property price is more than $1,000,000 "
    "CMHC insurance is not available. Therefore, the down payment must be at least 20%."
)


class TestValidRequests:
    def test_standard_request_is_valid(self, standard_request):
        outcome = validate(standard_request)
        assert outcome.is_valid
        assert outcome.error is None

    def test_ensure_valid_returns_none(self, standard_request):
        assert ensure_valid(standard_request) is None

    @pytest.mark.parametrize("period", [5, 10, 15, 20, 25])
    def test_every_insured_period_accepted(self, make_request, period):
        assert validate(make_request(amortization_period=period)).is_valid

    @pytest.mark.parametrize("schedule", ["monthly", "bi-weekly", "accelerated bi-weekly"])
    def test_every_schedule_accepted(self, make_request, schedule):
        assert validate(make_request(payment_schedule=schedule)).is_valid

    def test_exactly_five_percent_down(self, make_request):
        assert validate(make_request(down_payment="15000")).is_valid

    def test_thirty_years_with_twenty_percent_down(self, make_request):
        """20% down lifts the 25-year cap on uninsured loans."""
        outcome = validate(make_request(down_payment="60000", amortization_period=30))
        assert outcome.is_valid

    def test_over_one_million_with_exactly_twenty_percent(self, make_request):
        outcome = validate(make_request(property_price="1200000", down_payment="240000", amortization_period=30))
        assert outcome.is_valid

    def test_tiered_minimum_met_exactly(self, make_request):
        # 5% of 500K + 10% of 100K = 35,000
        outcome = validate(make_request(property_price="600000", down_payment="35000"))
        assert outcome.is_valid


class TestRuleMessages:
    def test_invalid_amortization_period(self, make_request):
        outcome = validate(make_request(amortization_period=40))
        assert outcome.error == AMORTIZATION_ERROR

    def test_fractional_amortization_period(self, make_request):
        outcome = validate(make_request(amortization_period=7.5))
        assert outcome.error == AMORTIZATION_ERROR

    def test_invalid_payment_schedule(self, make_request):
        outcome = validate(make_request(payment_schedule="weekly"))
        assert outcome.error == SCHEDULE_ERROR

    def test_below_five_percent(self, make_request):
        outcome = validate(make_request(down_payment="12000", amortization_period=20))
        assert outcome.error == (
            "Down payment must be at least 5% of the property price. "
            "Minimum required down payment is $15000."
        )

    def test_at_eighty_percent(self, make_request):
        outcome = validate(make_request(down_payment="240000", amortization_period=20))
        assert outcome.error == (
            "Down payment must be less than 80% of the property price. "
            "Your down payment should be smaller than $240000."
        )

    def test_below_tiered_minimum_over_500k(self, make_request):
        outcome = validate(make_request(property_price="600000", down_payment="30000"))
        assert outcome.error == (
            "For properties over $500,000, the minimum down payment is 5% of the first "
            "$500,000 and 10% of any amount over $500,000. "
            "Minimum required down payment is $35000.00."
        )

    def test_over_one_million_below_twenty_percent(self, make_request):
        outcome = validate(make_request(property_price="1200000", down_payment="200000", amortization_period=30))
        assert outcome.error == f"{UNINSURED_PREFIX} Minimum required down payment is $240000."

    def test_thirty_years_below_twenty_percent(self, make_request):
        outcome = validate(make_request(amortization_period=30))
        assert outcome.error == f"{UNINSURED_PREFIX} Minimum required down payment is $60000."

    def test_uninsured_minimum_keeps_fraction(self, make_request):
        """Amounts in the 20% message are not padded to two decimals."""
        outcome = validate(make_request(property_price="1234.5", down_payment="100", amortization_period=30))
        assert outcome.error == f"{UNINSURED_PREFIX} Minimum required down payment is $246.9."

    def test_zero_interest_rate(self, make_request):
        outcome = validate(make_request(annual_interest_rate="0"))
        assert outcome.error == "Annual interest rate must be greater than 0"

    def test_negative_interest_rate(self, make_request):
        outcome = validate(make_request(annual_interest_rate="-1"))
        assert outcome.error == "Annual interest rate must be greater than 0"


class TestRuleOrder:
    def test_rules_in_fixed_order(self):
        assert [r.name for r in RULES] == [
            "amortization_period",
            "payment_schedule",
            "uninsured_minimum",
            "tiered_minimum",
            "maximum_down_payment",
            "minimum_down_payment",
            "interest_rate",
        ]

    def test_period_checked_before_schedule(self, make_request):
        outcome = validate(make_request(amortization_period=40, payment_schedule="weekly"))
        assert outcome.error == AMORTIZATION_ERROR

    def test_uninsured_minimum_beats_tiered_minimum(self, make_request):
        """$1.2M with $50K down breaks both; the 20% rule is reported."""
        outcome = validate(make_request(property_price="1200000", down_payment="50000"))
        assert outcome.error.startswith(UNINSURED_PREFIX)

    def test_uninsured_minimum_beats_five_percent_minimum(self, make_request):
        outcome = validate(make_request(down_payment="10000", amortization_period=30))
        assert outcome.error.startswith(UNINSURED_PREFIX)

    def test_down_payment_rules_beat_interest_rate(self, make_request):
        outcome = validate(make_request(down_payment="12000", annual_interest_rate="0"))
        assert outcome.error.startswith("Down payment must be at least 5%")


class TestEnsureValid:
    def test_raises_with_first_message(self, make_request):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(make_request(payment_schedule="weekly"))
        assert exc_info.value.message == SCHEDULE_ERROR
        assert str(exc_info.value) == SCHEDULE_ERROR

    def test_is_a_value_error(self, make_request):
        with pytest.raises(ValueError):
            ensure_valid(make_request(annual_interest_rate="0"))


class TestTieredMinimum:
    def test_600k(self):
        assert tiered_minimum_down_payment(Decimal("600000")) == Decimal("35000")

    def test_999999(self):
        assert tiered_minimum_down_payment(Decimal("999999")) == Decimal("74999.9")
