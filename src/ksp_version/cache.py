# SPDX-License-Identifier: MIT
"""Memoization for version normalization and comparison.

Two tables are kept per VersionCache:

- normalization: raw input string -> (canonical form, is_short)
- comparison: ordered pair (a, b) -> -1, 0 or 1

The comparison key is the pair exactly as the caller passed it, so
compare(a, b) and compare(b, a) are stored separately.

A process-wide default instance backs every function that is not handed an
explicit cache. Tables grow without bound unless the CacheConfig says
otherwise.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Hashable, Optional, TypeVar

from .config import CacheConfig

if TYPE_CHECKING:
    from .normalize import Normalized
    from .version import GameVersion

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class TableStats:
    """Counters for a single memo table."""

    hits: int
    misses: int
    evictions: int
    size: int


@dataclass(frozen=True)
class CacheStats:
    """Counters for both tables of a VersionCache."""

    normal: TableStats
    compare: TableStats


class _MemoTable(Generic[K, V]):
    """A dict with hit/miss counters and optional LRU eviction.

    Not synchronized on its own; VersionCache holds the lock.
    """

    def __init__(self, name: str, max_entries: Optional[int]):
        self.name = name
        self.max_entries = max_entries
        self._entries: OrderedDict[K, V] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, key: K) -> Optional[V]:
        try:
            value = self._entries[key]
        except KeyError:
            self.misses += 1
            return None
        self.hits += 1
        if self.max_entries is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, key: K, value: V) -> None:
        self._entries[key] = value
        if self.max_entries is None:
            return
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug("Evicted %r from %s cache", evicted, self.name)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> TableStats:
        return TableStats(
            hits=self.hits,
            misses=self.misses,
            evictions=self.evictions,
            size=len(self._entries),
        )

    def __len__(self) -> int:
        return len(self._entries)


class VersionCache:
    """Owns the normalization and comparison memo tables.

    Example:
        >>> from ksp_version import CacheConfig, VersionCache, parse_version
        >>> cache = VersionCache(CacheConfig(max_normal_entries=1000))
        >>> parse_version("1.2", cache=cache).to_long_max()
        GameVersion('1.2.99')
    """

    def __init__(self, config: Optional[CacheConfig] = None):
        self.config = config or CacheConfig()
        self._lock: contextlib.AbstractContextManager = (
            threading.RLock() if self.config.thread_safe else contextlib.nullcontext()
        )
        self._normal: _MemoTable[str, Normalized] = _MemoTable(
            "normalization", self.config.max_normal_entries
        )
        self._compare: _MemoTable[tuple[GameVersion, GameVersion], int] = _MemoTable(
            "comparison", self.config.max_compare_entries
        )
        logger.debug("Created version cache with %s", self.config)

    def get_normal(self, raw: str) -> Optional[Normalized]:
        """Return the memoized normalization of a raw input, or None."""
        with self._lock:
            return self._normal.get(raw)

    def put_normal(self, raw: str, normalized: Normalized) -> None:
        with self._lock:
            self._normal.put(raw, normalized)

    def get_comparison(self, a: GameVersion, b: GameVersion) -> Optional[int]:
        """Return the memoized result of compare(a, b), or None."""
        with self._lock:
            return self._compare.get((a, b))

    def put_comparison(self, a: GameVersion, b: GameVersion, result: int) -> None:
        with self._lock:
            self._compare.put((a, b), result)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(normal=self._normal.stats(), compare=self._compare.stats())

    def clear(self) -> None:
        """Drop every memoized entry and reset the counters."""
        with self._lock:
            normal, compare = len(self._normal), len(self._compare)
            self._normal.clear()
            self._compare.clear()
        logger.debug(
            "Cleared version cache (%d normalizations, %d comparisons)", normal, compare
        )


_default_cache = VersionCache()


def get_default_cache() -> VersionCache:
    """Return the process-wide cache used when no cache is passed."""
    return _default_cache


def set_default_cache(cache: VersionCache) -> VersionCache:
    """Install a new process-wide cache and return the previous one."""
    global _default_cache
    previous, _default_cache = _default_cache, cache
    return previous


def resolve_cache(cache: Optional[VersionCache], *owners: object) -> VersionCache:
    """Pick the cache for an operation.

    An explicit cache wins, then the first owner built with a cache, then the
    process default.
    """
    if cache is not None:
        return cache
    for owner in owners:
        owned = getattr(owner, "cache", None)
        if isinstance(owned, VersionCache):
            return owned
    return _default_cache
