"""Mortgage DTOs."""

from pydantic import ConfigDict

from app.application.dtos.base import DTO


class MortgageCostBreakdown(DTO):
    """Mortgage cost breakdown DTO."""

    principal: float
    annual_rate_percent: float
    years: int
    term_months: int
    monthly_payment: float
    total_cost: float
    total_interest: float

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "principal": 250000.0,
                "annual_rate_percent": 6.5,
                "years": 5,
                "term_months": 60,
                "monthly_payment": 4891.54,
                "total_cost": 293492.22,
                "total_interest": 43492.22,
            }
        },
    )
