"""HTTP client for the calculator API."""

import logging
from decimal import Decimal

import httpx

from src.config import settings
from src.engine.validation import ValidationError
from src.models.loan import LoanRequest
from src.models.results import PaymentResult

logger = logging.getLogger(__name__)


class CalculatorAPIClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.calculator_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    def _payload(self, request: LoanRequest) -> dict:
        period = request.amortization_period
        return {
            "propertyPrice": float(request.property_price),
            "downPayment": float(request.down_payment),
            "annualInterestRate": float(request.annual_interest_rate),
            "amortizationPeriod": period if isinstance(period, int) else float(period),
            "paymentSchedule": request.payment_schedule,
        }

    def calculate(self, request: LoanRequest) -> PaymentResult:
        """POST a loan request to /calculate.

        Raises:
            ValidationError: the API rejected the request (400)
            httpx.HTTPError: transport failure or any other error status
        """
        with httpx.Client(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                resp = client.post("/calculate", json=self._payload(request))
            except httpx.TransportError as e:
                logger.warning("Calculator API request failed: %s", e)
                raise

        if resp.status_code == 400:
            raise ValidationError(resp.json().get("error", "Invalid request"))
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Calculator API returned %s: %s", resp.status_code, e)
            raise

        # str() keeps the JSON float's short repr, e.g. 1341.97
        return PaymentResult(payment=Decimal(str(resp.json()["payment"])))
