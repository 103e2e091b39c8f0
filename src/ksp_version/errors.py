# SPDX-License-Identifier: MIT
"""Exceptions raised by version parsing and comparison."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for every error raised by ksp_version."""


class BadVersionError(VersionError, ValueError):
    """Raised when a string is not a valid game version."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"{version!r} is not a valid game version"
        super().__init__(self.message)


class IncomparableVersionError(VersionError, TypeError):
    """Raised when an operation needs long versions and did not get them.

    Ordering is only defined between long versions; short and wildcard
    versions have to be expanded with to_long_min()/to_long_max() first.
    """

    def __init__(self, version1: Any, version2: Any, operation: str):
        self.version1 = str(version1)
        self.version2 = str(version2)
        self.operation = operation
        super().__init__(
            f"{self.version1} and {self.version2} cannot be compared by {operation}"
        )
