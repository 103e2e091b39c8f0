# SPDX-License-Identifier: MIT
"""Cache configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CacheConfig:
    """Configuration for a VersionCache.

    Attributes:
        max_normal_entries: Upper bound on memoized normalizations. None keeps
            every entry for the lifetime of the cache.
        max_compare_entries: Upper bound on memoized comparisons. None keeps
            every entry for the lifetime of the cache.
        thread_safe: Guard both tables with a lock.
    """

    max_normal_entries: Optional[int] = None
    max_compare_entries: Optional[int] = None
    thread_safe: bool = True

    def __post_init__(self) -> None:
        for name in ("max_normal_entries", "max_compare_entries"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
