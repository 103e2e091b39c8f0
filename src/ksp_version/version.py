# SPDX-License-Identifier: MIT
"""The game version value type.

A GameVersion is short (MAJOR.MINOR), long (MAJOR.MINOR.PATCH[...]) or the
wildcard "any". Short versions stand for every patch release of their
MAJOR.MINOR line and act as filters; long versions are concrete releases.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .cache import VersionCache
from .errors import IncomparableVersionError
from .normalize import ANY, normalize_version

# Patch number used as the upper end of a short version's range. Releases
# with a higher patch number are not matched by the short form.
LONG_MAX_PATCH = 99


class GameVersion:
    """An immutable, hashable game version.

    Equality and hashing use the canonical string only: "1.2.3" and
    "1.2.3.0" are different versions, and all wildcards are equal.

    Examples:
        >>> GameVersion(".25")
        GameVersion('0.25')
        >>> GameVersion("0.25").targets(GameVersion("0.25.2"))
        True
        >>> GameVersion("1.2.9") < GameVersion("1.2.10")
        True
    """

    __slots__ = ("_version", "_is_short", "_components", "_sort_key", "_cache")

    def __init__(self, version: Optional[str] = None, *, cache: Optional[VersionCache] = None):
        normalized = normalize_version(version, cache)
        object.__setattr__(self, "_version", normalized.version)
        object.__setattr__(self, "_is_short", normalized.is_short)
        object.__setattr__(self, "_components", None)
        object.__setattr__(self, "_sort_key", None)
        # Versions derived from this one memoize into the same cache.
        object.__setattr__(self, "_cache", cache)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._version,))

    @property
    def version(self) -> Optional[str]:
        """The canonical string, or None for the wildcard."""
        return self._version

    @property
    def cache(self) -> Optional[VersionCache]:
        """The cache this version was built with, or None for the process default."""
        return self._cache

    @property
    def components(self) -> tuple[int, ...]:
        """Numeric components, parsed on first use.

        Raises:
            IncomparableVersionError: If this is the wildcard
            ValueError: If a component has more digits than int() accepts
        """
        if self._version is None:
            raise IncomparableVersionError(self, self, "components")
        if self._components is None:
            object.__setattr__(
                self, "_components", tuple(int(part) for part in self._version.split("."))
            )
        return self._components

    @property
    def sort_key(self) -> tuple[tuple[int, str], ...]:
        """Ordering key: (digit count, digits) per component, leading zeros stripped.

        Orders components numerically without converting them to int, so
        components of any length compare.
        """
        if self._version is None:
            raise IncomparableVersionError(self, self, "sort_key")
        if self._sort_key is None:
            key = []
            for part in self._version.split("."):
                digits = part.lstrip("0") or "0"
                key.append((len(digits), digits))
            object.__setattr__(self, "_sort_key", tuple(key))
        return self._sort_key

    def is_any(self) -> bool:
        """True for the wildcard, which matches every release."""
        return self._version is None

    def is_not_any(self) -> bool:
        """True for short and long versions."""
        return self._version is not None

    def is_short(self) -> bool:
        """True for MAJOR.MINOR versions such as 0.23."""
        return self._is_short

    def is_long(self) -> bool:
        """True for versions with a patch number such as 0.23.5."""
        return self._version is not None and not self._is_short

    def _derive(self, version: str, cache: Optional[VersionCache]) -> GameVersion:
        return GameVersion(version, cache=self._cache if cache is None else cache)

    def to_long_min(self, cache: Optional[VersionCache] = None) -> GameVersion:
        """Return the lowest long version a short version covers (x.y -> x.y.0).

        Long and wildcard versions are returned unchanged.
        """
        return self._derive(f"{self._version}.0", cache) if self._is_short else self

    def to_long_max(self, cache: Optional[VersionCache] = None) -> GameVersion:
        """Return the highest long version a short version covers (x.y -> x.y.99).

        Long and wildcard versions are returned unchanged.
        """
        return self._derive(f"{self._version}.{LONG_MAX_PATCH}", cache) if self._is_short else self

    def short(self, cache: Optional[VersionCache] = None) -> GameVersion:
        """Return the MAJOR.MINOR part of this version.

        Raises:
            IncomparableVersionError: If this is the wildcard
        """
        if self._version is None:
            raise IncomparableVersionError(self, self, "short")
        if self._is_short:
            return self
        major, minor, _ = self._version.split(".", 2)
        return self._derive(f"{major}.{minor}", cache)

    def targets(self, candidate: GameVersion) -> bool:
        """Return True if this version accepts the long version candidate."""
        from .targets import targets

        return targets(self, candidate, self._cache)

    def compare_to(self, other: GameVersion) -> int:
        from .compare import compare_versions

        return compare_versions(self, other, self._cache)

    def less_than(self, other: GameVersion) -> bool:
        return self.compare_to(other) < 0

    def less_equal(self, other: GameVersion) -> bool:
        return self.compare_to(other) <= 0

    def greater_than(self, other: GameVersion) -> bool:
        return self.compare_to(other) > 0

    def greater_equal(self, other: GameVersion) -> bool:
        return self.compare_to(other) >= 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GameVersion):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GameVersion):
            return NotImplemented
        return self.less_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GameVersion):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GameVersion):
            return NotImplemented
        return self.greater_equal(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameVersion):
            return NotImplemented
        return self._version == other._version

    def __hash__(self) -> int:
        return hash(self._version)

    def __str__(self) -> str:
        return ANY if self._version is None else self._version

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    @classmethod
    def _validate(cls, value: Any) -> GameVersion:
        if isinstance(value, GameVersion):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Validates from str/None and dumps back to the string form.
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, info_arg=False, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "examples": ["1.12", "1.12.5", ANY]}


def parse_version(version: Optional[str], cache: Optional[VersionCache] = None) -> GameVersion:
    """Parse a version string into a GameVersion.

    Args:
        version: "MAJOR.MINOR", "MAJOR.MINOR.PATCH[...]", "any" or None
        cache: Cache to memoize normalization into; the process default if omitted

    Returns:
        The parsed GameVersion

    Raises:
        BadVersionError: If the string is not a valid game version

    Examples:
        >>> parse_version("1.2").to_long_min()
        GameVersion('1.2.0')
        >>> parse_version(None).is_any()
        True
    """
    return GameVersion(version, cache=cache)
