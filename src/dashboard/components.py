"""Calculator view logic and chart builders, kept free of Dash page registration."""

import logging
from dataclasses import dataclass
from decimal import Decimal

import httpx
import plotly.graph_objects as go

from src.config import settings
from src.data.calculator_client import CalculatorAPIClient
from src.engine.debt import compare_schedules, mortgage_breakdown
from src.engine.validation import ValidationError
from src.models.loan import MISSING_FIELDS_ERROR, LoanRequest, PaymentSchedule, has_required_fields
from src.models.results import MortgageBreakdown, PaymentResult

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"

SCHEDULE_LABELS = {
    PaymentSchedule.MONTHLY: "Monthly",
    PaymentSchedule.BI_WEEKLY: "Bi-Weekly",
    PaymentSchedule.ACCELERATED_BI_WEEKLY: "Accelerated Bi-Weekly",
}


@dataclass(frozen=True)
class CalculationView:
    payment: Decimal | None = None
    error: str | None = None
    breakdown: MortgageBreakdown | None = None
    comparison: dict[PaymentSchedule, PaymentResult] | None = None


def run_calculation(
    price, down_payment, rate, period, schedule,
    api_client: CalculatorAPIClient | None = None,
) -> CalculationView:
    """Turn raw form values into a payment or an error message.

    Goes through the HTTP API when an api_client is given (or
    settings.calculator_api_url is set), else calls the engine in-process.
    """
    if not has_required_fields(price, down_payment, rate, period, schedule):
        return CalculationView(error=MISSING_FIELDS_ERROR)

    request = LoanRequest.from_values(price, down_payment, rate, period, schedule)

    if api_client is None and settings.calculator_api_url:
        api_client = CalculatorAPIClient()

    try:
        if api_client is not None:
            result = api_client.calculate(request)
            return CalculationView(payment=result.payment)

        breakdown = mortgage_breakdown(request)
        return CalculationView(
            payment=breakdown.payment,
            breakdown=breakdown,
            comparison=compare_schedules(request),
        )
    except ValidationError as e:
        return CalculationView(error=e.message)
    except httpx.HTTPError as e:
        logger.warning("Calculator API unavailable: %s", e)
        return CalculationView(error=GENERIC_ERROR)


def format_payment(payment: Decimal) -> str:
    return f"Payment: ${payment:,.2f}"


def breakdown_rows(breakdown: MortgageBreakdown) -> list[tuple[str, str]]:
    """(label, display value) pairs explaining a payment."""
    return [
        ("Loan amount", f"${breakdown.loan_amount:,.2f}"),
        ("CMHC premium rate", f"{breakdown.insurance_rate * 100:.1f}%"),
        ("CMHC premium", f"${breakdown.insurance_premium:,.2f}"),
        ("Principal financed", f"${breakdown.principal:,.2f}"),
        ("Number of payments", str(breakdown.number_of_payments)),
        ("Rate per period", f"{breakdown.schedule_rate * 100:.4f}%"),
    ]


def schedule_comparison_figure(comparison: dict[PaymentSchedule, PaymentResult]) -> go.Figure:
    schedules = list(comparison)
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[SCHEDULE_LABELS[s] for s in schedules],
        y=[float(comparison[s].payment) for s in schedules],
        text=[f"${comparison[s].payment:,.2f}" for s in schedules],
        textposition="auto",
        marker_color=["#1a1a2e", "#e94560", "#2ecc71"][:len(schedules)],
    ))
    fig.update_layout(
        title="Payment by Schedule",
        xaxis_title="Schedule",
        yaxis_title="Payment per Period ($)",
        showlegend=False,
    )
    return fig
