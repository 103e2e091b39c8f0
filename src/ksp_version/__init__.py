# SPDX-License-Identifier: MIT
"""Game version parsing, ordering and targeting for mod compatibility checks.

Versions come in three kinds:
- long ("1.12.5"): a concrete game release
- short ("1.12"): every patch release of a MAJOR.MINOR line
- the wildcard ("any" or None): every release

Example:
    >>> from ksp_version import parse_version, compare_versions
    >>>
    >>> mod_target = parse_version("1.12")
    >>> mod_target.is_short()
    True
    >>> mod_target.targets(parse_version("1.12.5"))
    True
    >>> mod_target.to_long_max()
    GameVersion('1.12.99')
    >>>
    >>> compare_versions("1.2.9", "1.2.10")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    BadVersionError,
    IncomparableVersionError,
)
from .config import CacheConfig
from .cache import (
    VersionCache,
    CacheStats,
    TableStats,
    get_default_cache,
    set_default_cache,
)
from .normalize import (
    Normalized,
    normalize_version,
    is_valid_version,
    SHORT_PATTERN,
    LONG_PATTERN,
)
from .version import (
    GameVersion,
    parse_version,
    LONG_MAX_PATCH,
)
from .compare import (
    compare_versions,
    version_key,
)
from .targets import (
    targets,
    filter_targets,
)
from .result import (
    ParseResult,
    CompareResult,
    try_parse_version,
    try_compare_versions,
)

__all__ = [
    # Errors
    "VersionError",
    "BadVersionError",
    "IncomparableVersionError",
    # Caching
    "CacheConfig",
    "VersionCache",
    "CacheStats",
    "TableStats",
    "get_default_cache",
    "set_default_cache",
    # Version parsing
    "Normalized",
    "normalize_version",
    "is_valid_version",
    "SHORT_PATTERN",
    "LONG_PATTERN",
    "GameVersion",
    "parse_version",
    "LONG_MAX_PATCH",
    # Version comparison
    "compare_versions",
    "version_key",
    "targets",
    "filter_targets",
    # Non-raising variants
    "ParseResult",
    "CompareResult",
    "try_parse_version",
    "try_compare_versions",
]
