"""No-op mortgage cost cache adapter for when caching is disabled."""

from typing import Optional

from app.application.ports.mortgage_cost_cache import CacheKey, MortgageCostCache


class NoOpMortgageCostCache(MortgageCostCache):
    """No-op adapter that never stores anything."""

    def get(self, key: CacheKey) -> Optional[float]:
        """
        Always return None (nothing cached).

        Args:
            key: Cache key (ignored)

        Returns:
            Always None
        """
        return None

    def set(self, key: CacheKey, value: float) -> None:
        """
        No-op (does nothing).

        Args:
            key: Cache key (ignored)
            value: Total cost (ignored)
        """
        pass

    def clear(self) -> None:
        """No-op (does nothing)."""
        pass

    def size(self) -> int:
        """Always 0."""
        return 0
