"""Mortgage calculator routes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.api.schemas import CalculateRequest, CalculateResponse, ErrorResponse
from src.engine.debt import calculate_mortgage
from src.models.loan import MISSING_FIELDS_ERROR, LoanRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate(req: CalculateRequest):
    """Compute the periodic mortgage payment for one loan request.

    Engine validation failures are turned into 400 responses by the
    app-level ValidationError handler.
    """
    if not req.has_all_fields():
        logger.info("Rejected calculate request with missing fields")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=MISSING_FIELDS_ERROR).model_dump(),
        )

    loan = LoanRequest.from_values(
        property_price=req.property_price,
        down_payment=req.down_payment,
        annual_interest_rate=req.annual_interest_rate,
        amortization_period=req.amortization_period,
        payment_schedule=req.payment_schedule,
    )
    result = calculate_mortgage(loan)
    return CalculateResponse(payment=float(result.payment))
