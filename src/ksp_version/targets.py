# SPDX-License-Identifier: MIT
"""Range membership: does a version filter accept a concrete release?

A filter is any GameVersion. The wildcard accepts every release, a long
filter accepts exactly itself and a short filter x.y accepts x.y.0 through
x.y.99. The release being checked must always be a long version.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .cache import VersionCache, resolve_cache
from .compare import compare_versions
from .errors import IncomparableVersionError
from .version import GameVersion


def targets(
    version_filter: GameVersion,
    candidate: GameVersion,
    cache: Optional[VersionCache] = None,
) -> bool:
    """Return True if version_filter accepts the release candidate.

    Args:
        version_filter: Short, long or wildcard version
        candidate: Long version of a concrete release
        cache: Cache used for the underlying comparisons

    Raises:
        IncomparableVersionError: If candidate is not a long version

    Examples:
        >>> targets(GameVersion("0.25"), GameVersion("0.25.2"))
        True
        >>> targets(GameVersion("0.25"), GameVersion("0.26.0"))
        False
        >>> targets(GameVersion("any"), GameVersion("9.9.9"))
        True
    """
    if not candidate.is_long():
        raise IncomparableVersionError(version_filter, candidate, "targets")

    if version_filter.is_any():
        return True

    cache = resolve_cache(cache, version_filter, candidate)
    if version_filter.is_long():
        return compare_versions(version_filter, candidate, cache) == 0

    # Same MAJOR.MINOR line; skips the numeric comparison.
    if version_filter == candidate.short(cache):
        return True

    low = version_filter.to_long_min(cache)
    high = version_filter.to_long_max(cache)
    return (
        compare_versions(candidate, low, cache) >= 0
        and compare_versions(candidate, high, cache) <= 0
    )


def filter_targets(
    version_filter: GameVersion,
    candidates: Iterable[GameVersion],
    cache: Optional[VersionCache] = None,
) -> list[GameVersion]:
    """Return the candidates accepted by version_filter, in their original order.

    Raises:
        IncomparableVersionError: If any candidate is not a long version
    """
    return [c for c in candidates if targets(version_filter, c, cache)]
