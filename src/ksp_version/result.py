# SPDX-License-Identifier: MIT
"""Non-raising variants of parsing and comparison.

These return a result object carrying either the value or the error, for
callers that validate many versions and want to collect failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .cache import VersionCache
from .compare import compare_versions
from .errors import BadVersionError, IncomparableVersionError, VersionError
from .version import GameVersion, parse_version


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse_version."""

    raw: Optional[str]
    value: Optional[GameVersion] = None
    error: Optional[BadVersionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GameVersion:
        """Return the parsed version, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("ParseResult holds neither a value nor an error")
        return self.value


@dataclass(frozen=True)
class CompareResult:
    """Outcome of try_compare_versions."""

    ordering: Optional[int] = None
    error: Optional[VersionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the ordering, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        if self.ordering is None:
            raise ValueError("CompareResult holds neither an ordering nor an error")
        return self.ordering


def try_parse_version(
    raw: Optional[str], cache: Optional[VersionCache] = None
) -> ParseResult:
    """Parse a version without raising.

    Examples:
        >>> try_parse_version("1.2").ok
        True
        >>> try_parse_version("abc").error.version
        'abc'
    """
    try:
        return ParseResult(raw=raw, value=parse_version(raw, cache))
    except BadVersionError as e:
        return ParseResult(raw=raw, error=e)


def try_compare_versions(
    version1: Union[str, GameVersion],
    version2: Union[str, GameVersion],
    cache: Optional[VersionCache] = None,
) -> CompareResult:
    """Compare two versions without raising.

    The error is a BadVersionError for unparsable strings and an
    IncomparableVersionError when either side is not a long version.
    """
    try:
        return CompareResult(ordering=compare_versions(version1, version2, cache))
    except (BadVersionError, IncomparableVersionError) as e:
        return CompareResult(error=e)
