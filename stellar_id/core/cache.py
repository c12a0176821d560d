"""
Bounded memo of raw hash values.

Keys are (algorithm, salted_input); values are the raw (unreduced) hash.
Once the cache is full new keys are simply not inserted: there is no eviction.
Entries only disappear through clear().
"""

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

DEFAULT_CACHE_CAPACITY = 1000

CacheKey = Tuple[str, str]

logger = logging.getLogger(__name__)


class HashCache:
    """
    Thread-safe, insert-until-full cache.

    Usage:
        cache = HashCache(capacity=500)
        raw = cache.get_or_compute("djb2", "hello", djb2_hash)
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"Cache capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._entries: Dict[CacheKey, int] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, algorithm: str, text: str) -> Optional[int]:
        with self._lock:
            return self._entries.get((algorithm, text))

    def put(self, algorithm: str, text: str, value: int) -> bool:
        """
        Store a value if there is room.

        Returns:
            True if the entry is present after the call
        """
        key = (algorithm, text)
        with self._lock:
            if key in self._entries:
                return True
            if len(self._entries) >= self.capacity:
                logger.debug("Hash cache full (%d entries), not caching", self.capacity)
                return False
            self._entries[key] = value
            return True

    def get_or_compute(self, algorithm: str, text: str, compute: Callable[[str], int]) -> int:
        """Return the cached hash for (algorithm, text), computing and storing it on a miss."""
        cached = self.get(algorithm, text)
        if cached is not None:
            logger.debug("Hash cache hit: algorithm=%s", algorithm)
            return cached
        value = compute(text)
        self.put(algorithm, text, value)
        return value

    def clear(self) -> int:
        """Drop all entries and return how many were removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.debug("Hash cache cleared: %d entries removed", removed)
        return removed

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"size": len(self._entries), "capacity": self.capacity}
