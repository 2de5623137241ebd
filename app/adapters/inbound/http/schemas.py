"""HTTP adapter schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class TotalCostRequest(BaseModel):
    """Total loan cost request schema."""

    principal: float
    annual_rate_percent: float
    years: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": 250000.0,
                "annual_rate_percent": 6.5,
                "years": 5,
            }
        }
    )


class CompareTermsRequest(BaseModel):
    """Multiple loan terms comparison request schema."""

    principal: float
    annual_rate_percent: float
    years_options: Optional[list[int]] = None  # Defaults to 10, 15, 20 and 30 years

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": 250000.0,
                "annual_rate_percent": 6.5,
                "years_options": [15, 30],
            }
        }
    )
