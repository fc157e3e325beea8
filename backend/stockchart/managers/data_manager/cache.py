"""Bar Cache

Size-bounded in-memory cache for processed stock data responses.
"""
from collections import OrderedDict
from typing import Generic, Iterator, List, Optional, TypeVar

from stockchart.logger import logger


V = TypeVar("V")


class BarCache(Generic[V]):
    """FIFO cache with a fixed capacity.

    Entries never expire. After an insertion pushes the size over
    ``capacity`` exactly one entry is evicted: the oldest by insertion
    order. Reads do not refresh an entry's position (not LRU).
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[str, V]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, key: str) -> Optional[V]:
        """Return the cached value or None."""
        if key in self._entries:
            self.hits += 1
            return self._entries[key]
        self.misses += 1
        return None

    def set(self, key: str, value: V) -> Optional[str]:
        """Store ``value`` under ``key``.

        Returns:
            The evicted key, if the insertion caused an eviction
        """
        self._entries[key] = value

        if len(self._entries) > self.capacity:
            evicted_key, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug(f"Cache full ({self.capacity}), evicted {evicted_key}")
            return evicted_key
        return None

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
