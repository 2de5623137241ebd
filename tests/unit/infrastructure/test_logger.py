"""Unit tests for the structured logger."""

import logging

import pytest

from app.infrastructure.logging.logger import log_event, log_mortgage_calculation


def test_log_event_formats_key_value_pairs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="mortgage_cost_calculator"):
        log_event(request_id="req-1", component="http", endpoint="total_cost")

    assert "request_id='req-1' | component='http' | endpoint='total_cost'" in caplog.text


def test_log_mortgage_calculation(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="mortgage_cost_calculator"):
        log_mortgage_calculation(
            request_id="req-2",
            principal=250000,
            annual_rate_percent=6.5,
            years=5,
            total_cost=293492.22328093013,
            cache_hit=True,
        )

    assert "component='mortgage'" in caplog.text
    assert "'annual_rate_percent': 6.5" in caplog.text
    assert "total_cost=293492.22" in caplog.text
    assert "cache_hit=True" in caplog.text
