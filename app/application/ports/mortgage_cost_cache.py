"""Mortgage cost cache port."""

from abc import ABC, abstractmethod
from typing import Optional

CacheKey = tuple[float, float, int]


class MortgageCostCache(ABC):
    """Port interface for memoized total loan costs."""

    @abstractmethod
    def get(self, key: CacheKey) -> Optional[float]:
        """
        Get a cached total loan cost.

        Args:
            key: (principal, annual_rate_percent, years)

        Returns:
            Cached total cost, or None if not found
        """
        pass

    @abstractmethod
    def set(self, key: CacheKey, value: float) -> None:
        """
        Store a total loan cost.

        Args:
            key: (principal, annual_rate_percent, years)
            value: Total loan cost
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all cached entries."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Get number of cached entries.

        Returns:
            Entry count
        """
        pass
