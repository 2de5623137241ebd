"""Structured logger for observability."""

import logging
from typing import Any

from app.infrastructure.config.settings import settings

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("mortgage_cost_calculator")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(settings.log_level.upper())
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a request.

    Args:
        request_id: Request identifier (UUID string, or "-" outside HTTP)
        component: Component name (e.g., 'http', 'mortgage', 'cache')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_mortgage_calculation(
    request_id: str,
    principal: float,
    annual_rate_percent: float,
    years: int,
    total_cost: float,
    cache_hit: bool = False,
    **kwargs: Any,
) -> None:
    """
    Log mortgage calculation event.

    Args:
        request_id: Request identifier
        principal: Borrowed amount
        annual_rate_percent: Annual rate as percentage
        years: Loan term in years
        total_cost: Computed total loan cost
        cache_hit: Whether the total came from the cache
        **kwargs: Additional fields
    """
    log_event(
        request_id=request_id,
        component="mortgage",
        mortgage_inputs={
            "principal": principal,
            "annual_rate_percent": annual_rate_percent,
            "years": years,
        },
        total_cost=round(total_cost, 2),
        cache_hit=cache_hit,
        **kwargs,
    )


logger = _logger
