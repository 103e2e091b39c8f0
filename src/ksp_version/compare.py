# SPDX-License-Identifier: MIT
"""Ordering of long game versions.

Components are compared numerically from left to right, so 1.2.10 sorts
after 1.2.9. When one version is a prefix of the other, the shorter one
sorts first (1.2.3 < 1.2.3.0).

Short and wildcard versions have no position in the order; expand them with
GameVersion.to_long_min() or GameVersion.to_long_max() first.
"""

from __future__ import annotations

from typing import Optional, Union

from .cache import VersionCache, resolve_cache
from .errors import IncomparableVersionError
from .version import GameVersion, parse_version


def _coerce(version: Union[str, GameVersion], cache: VersionCache) -> GameVersion:
    return parse_version(version, cache) if isinstance(version, str) else version


def compare_versions(
    version1: Union[str, GameVersion],
    version2: Union[str, GameVersion],
    cache: Optional[VersionCache] = None,
) -> int:
    """Compare two long game versions.

    Args:
        version1: First version (string or GameVersion)
        version2: Second version (string or GameVersion)
        cache: Cache to memoize into; the process default if omitted

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        BadVersionError: If either version string is invalid
        IncomparableVersionError: If either version is short or the wildcard

    Note:
        Results are memoized under the pair in the order given.
        compare_versions(a, b) and compare_versions(b, a) are separate entries.

    Examples:
        >>> compare_versions("1.2.9", "1.2.10")
        -1
        >>> compare_versions("1.4.0", "1.4.0")
        0
        >>> compare_versions("1.4", "1.4.0")
        Traceback (most recent call last):
            ...
        ksp_version.errors.IncomparableVersionError: 1.4 and 1.4.0 cannot be compared by compare
    """
    cache = resolve_cache(cache, version1, version2)
    v1 = _coerce(version1, cache)
    v2 = _coerce(version2, cache)

    if not (v1.is_long() and v2.is_long()):
        raise IncomparableVersionError(v1, v2, "compare")

    result = cache.get_comparison(v1, v2)
    if result is None:
        k1, k2 = v1.sort_key, v2.sort_key
        result = (k1 > k2) - (k1 < k2)
        cache.put_comparison(v1, v2, result)
    return result


def version_key(version: Union[str, GameVersion]) -> tuple[tuple[int, str], ...]:
    """Return a sort key for a long version, consistent with compare_versions.

    Each component becomes (digit count, digits) with leading zeros removed,
    which orders numerically for components of any length.

    Raises:
        IncomparableVersionError: If the version is short or the wildcard

    Examples:
        >>> sorted(["1.10.0", "1.9.1", "1.9.0"], key=version_key)
        ['1.9.0', '1.9.1', '1.10.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    if not v.is_long():
        raise IncomparableVersionError(v, v, "version_key")
    return v.sort_key
