"""Canonical test fixtures used across all tests.

Fixture: $300K property, $40K down (13.3%, CMHC insured), 3.5% rate, 25yr, monthly.
"""

import pytest
from decimal import Decimal

from src.models.loan import LoanRequest


@pytest.fixture
def standard_request() -> LoanRequest:
    """$300K property with 13.3% down: 3.1% CMHC tier."""
    return LoanRequest(
        property_price=Decimal("300000"),
        down_payment=Decimal("40000"),
        annual_interest_rate=Decimal("3.5"),
        amortization_period=25,
        payment_schedule="monthly",
    )


@pytest.fixture
def make_request():
    """Build a LoanRequest from plain values, defaulting to the standard request."""
    def _make(
        property_price="300000",
        down_payment="40000",
        annual_interest_rate="3.5",
        amortization_period=25,
        payment_schedule="monthly",
    ) -> LoanRequest:
        return LoanRequest.from_values(
            property_price=property_price,
            down_payment=down_payment,
            annual_interest_rate=annual_interest_rate,
            amortization_period=amortization_period,
            payment_schedule=payment_schedule,
        )
    return _make
