"""Mortgage cost cache adapters."""

from app.adapters.outbound.cache.in_memory_mortgage_cost_cache import (
    InMemoryMortgageCostCache,
)
from app.adapters.outbound.cache.noop_mortgage_cost_cache import NoOpMortgageCostCache

__all__ = ["InMemoryMortgageCostCache", "NoOpMortgageCostCache"]
