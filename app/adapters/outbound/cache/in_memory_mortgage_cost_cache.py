"""In-memory mortgage cost cache adapter."""

import threading
from collections import OrderedDict
from typing import Optional

from app.application.ports.mortgage_cost_cache import CacheKey, MortgageCostCache


class InMemoryMortgageCostCache(MortgageCostCache):
    """Thread-safe in-memory implementation of mortgage cost cache."""

    def __init__(self, max_entries: Optional[int] = None) -> None:
        """
        Initialize in-memory cache.

        Args:
            max_entries: Maximum number of entries kept; oldest is evicted first.
                None means unbounded.
        """
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._storage: OrderedDict[CacheKey, float] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[float]:
        with self._lock:
            return self._storage.get(key)

    def set(self, key: CacheKey, value: float) -> None:
        with self._lock:
            self._storage[key] = value
            self._storage.move_to_end(key)
            if self._max_entries is not None:
                while len(self._storage) > self._max_entries:
                    self._storage.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._storage)
