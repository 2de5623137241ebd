"""Dependency injection factory functions."""

from app.adapters.outbound.cache import InMemoryMortgageCostCache, NoOpMortgageCostCache
from app.application.ports.mortgage_cost_cache import MortgageCostCache
from app.application.use_cases.calculate_mortgage_cost import CalculateMortgageCost
from app.infrastructure.config.settings import settings


def create_mortgage_cost_cache() -> MortgageCostCache:
    """
    Factory function to create mortgage cost cache.

    Returns:
        MortgageCostCache instance

    Raises:
        ValueError: If MORTGAGE_COST_CACHE names an unknown backend
    """
    if settings.mortgage_cost_cache == "in_memory":
        return InMemoryMortgageCostCache(max_entries=settings.mortgage_cost_cache_max_entries)
    if settings.mortgage_cost_cache == "none":
        return NoOpMortgageCostCache()
    raise ValueError(
        f"Unknown MORTGAGE_COST_CACHE {settings.mortgage_cost_cache!r} "
        "(expected 'in_memory' or 'none')"
    )


def create_calculate_mortgage_cost_use_case(
    cache: MortgageCostCache,
) -> CalculateMortgageCost:
    """
    Factory function to create the mortgage cost use case.

    Args:
        cache: Cache shared by every request

    Returns:
        CalculateMortgageCost instance
    """
    return CalculateMortgageCost(cache=cache)
