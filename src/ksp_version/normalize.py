# SPDX-License-Identifier: MIT
"""Classification and canonicalization of raw version strings.

A raw version is one of:
- the wildcard: None, or the literal "any"
- short: MAJOR.MINOR
- long: MAJOR.MINOR.PATCH, with any number of further components

A missing leading zero is restored (".5" becomes "0.5"). No other rewriting
is done; in particular surrounding whitespace makes a version invalid.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .cache import VersionCache, resolve_cache
from .errors import BadVersionError

ANY = "any"

SHORT_PATTERN = re.compile(r"[0-9]+\.[0-9]+")
LONG_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+){2,}")


class Normalized(NamedTuple):
    """Canonical form of a version and whether it is short.

    version is None for the wildcard.
    """

    version: Optional[str]
    is_short: bool


WILDCARD = Normalized(None, False)


def _normalize(raw: str) -> Normalized:
    version = "0" + raw if raw.startswith(".") else raw

    if version == ANY:
        return WILDCARD
    if SHORT_PATTERN.fullmatch(version):
        return Normalized(version, True)
    if LONG_PATTERN.fullmatch(version):
        return Normalized(version, False)

    raise BadVersionError(raw)


def normalize_version(
    raw: Optional[str], cache: Optional[VersionCache] = None
) -> Normalized:
    """Normalize a raw version string.

    Args:
        raw: Version string, or None for "unspecified"
        cache: Cache to memoize into; the process default if omitted

    Returns:
        The canonical form and short flag

    Raises:
        BadVersionError: If raw is neither a wildcard nor a dotted numeric version

    Examples:
        >>> normalize_version(".5")
        Normalized(version='0.5', is_short=True)
        >>> normalize_version("any")
        Normalized(version=None, is_short=False)
    """
    if raw is None:
        return WILDCARD
    if not isinstance(raw, str):
        raise BadVersionError(
            raw, f"Version must be a string, got {type(raw).__name__}"
        )

    cache = resolve_cache(cache)
    normalized = cache.get_normal(raw)
    if normalized is None:
        normalized = _normalize(raw)
        cache.put_normal(raw, normalized)
    return normalized


def is_valid_version(raw: Optional[str]) -> bool:
    """Check whether a raw string parses as a version.

    Examples:
        >>> is_valid_version("1.2")
        True
        >>> is_valid_version("any")
        True
        >>> is_valid_version("1")
        False
    """
    try:
        normalize_version(raw)
    except BadVersionError:
        return False
    return True
