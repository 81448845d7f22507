"""Caller-owned memoization of built liturgical years.

The engines never cache. A service that answers many queries for the same
years can hold a YearCache and pass its `get` wherever a builder is needed.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class YearCache(Generic[T]):
    """Thread-safe, lazily populated map of civil year -> built year.

    Args:
        builder: Called with a civil year on a cache miss, e.g.
            `litcal.make_engine(spec).build`.
        maxsize: Upper bound on stored years; the oldest insertion is evicted
            first. None means unbounded.
    """

    def __init__(self, builder: Callable[[int], T], maxsize: int | None = 64):
        self._builder = builder
        self._maxsize = maxsize
        self._items: Dict[int, T] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, civil_year: int) -> T:
        with self._lock:
            if civil_year in self._items:
                self.hits += 1
                return self._items[civil_year]
        # Builds run outside the lock; concurrent misses may build a year twice.
        value = self._builder(civil_year)
        with self._lock:
            self.misses += 1
            existing = self._items.setdefault(civil_year, value)
            if self._maxsize is not None and len(self._items) > self._maxsize:
                oldest = next(iter(self._items))
                logger.debug("evicting year %d from cache", oldest)
                del self._items[oldest]
            return existing

    def __contains__(self, civil_year: int) -> bool:
        with self._lock:
            return civil_year in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self.hits = 0
            self.misses = 0
