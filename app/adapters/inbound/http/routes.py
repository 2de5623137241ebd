"""HTTP routes."""

from uuid import uuid4

from fastapi import APIRouter, HTTPException, status

from app.adapters.inbound.http.schemas import CompareTermsRequest, TotalCostRequest
from app.application.dtos.mortgage import MortgageCostBreakdown
from app.domain.value_objects.loan_terms import LoanTerms
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event
from app.infrastructure.wiring.dependencies import (
    create_calculate_mortgage_cost_use_case,
    create_mortgage_cost_cache,
)

router = APIRouter()

# Create use case instance (wired with dependencies)
_mortgage_cost_cache = create_mortgage_cost_cache()
_calculate_mortgage_cost_use_case = create_calculate_mortgage_cost_use_case(_mortgage_cost_cache)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post(
    "/mortgage/total-cost",
    status_code=status.HTTP_200_OK,
    response_model=MortgageCostBreakdown,
)
async def total_cost(request: TotalCostRequest) -> MortgageCostBreakdown:
    """
    Calculate the total cost of a fixed-rate mortgage.

    Args:
        request: Principal, annual rate (percentage) and term in years

    Returns:
        Cost breakdown with monthly payment, total cost and total interest

    Raises:
        HTTPException: 422 if the loan terms are invalid or the rate is 0%
    """
    request_id = str(uuid4())
    log_event(request_id=request_id, component="http", endpoint="total_cost")

    try:
        terms = LoanTerms.from_values(
            request.principal, request.annual_rate_percent, request.years
        )
        return _calculate_mortgage_cost_use_case.calculate(terms, request_id=request_id)
    except ValueError as err:
        log_event(request_id=request_id, component="http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(err),
        ) from err


@router.post(
    "/mortgage/compare",
    status_code=status.HTTP_200_OK,
    response_model=list[MortgageCostBreakdown],
)
async def compare_terms(request: CompareTermsRequest) -> list[MortgageCostBreakdown]:
    """
    Calculate cost breakdowns for several loan terms.

    Invalid terms in years_options are skipped.

    Args:
        request: Principal, annual rate (percentage) and optional term options

    Returns:
        One breakdown per valid term, in request order

    Raises:
        HTTPException: 422 if principal or rate is invalid, or the rate is 0%
    """
    request_id = str(uuid4())
    log_event(request_id=request_id, component="http", endpoint="compare_terms")

    try:
        return _calculate_mortgage_cost_use_case.calculate_multiple_terms(
            request.principal,
            request.annual_rate_percent,
            years_options=request.years_options,
            request_id=request_id,
        )
    except ValueError as err:
        log_event(request_id=request_id, component="http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(err),
        ) from err


@router.get("/debug/cache", status_code=status.HTTP_200_OK)
async def debug_cache() -> dict[str, int]:
    """
    Debug endpoint to inspect the mortgage cost cache.

    Returns:
        Number of cached entries

    Raises:
        HTTPException: 404 if DEBUG_MODE is disabled
    """
    if not settings.debug_mode:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Debug endpoint is disabled",
        )

    return {"entries": _mortgage_cost_cache.size()}
