# SPDX-License-Identifier: MIT
"""Tests for the non-raising parse and compare variants."""

import pytest

from ksp_version import (
    BadVersionError,
    CompareResult,
    IncomparableVersionError,
    ParseResult,
    parse_version,
    try_compare_versions,
    try_parse_version,
)


class TestTryParseVersion:
    """Tests for try_parse_version function."""

    def test_ok(self):
        result = try_parse_version("1.2")
        assert result.ok is True
        assert result.value == parse_version("1.2")
        assert result.error is None
        assert result.unwrap() == parse_version("1.2")

    def test_wildcard(self):
        assert try_parse_version(None).unwrap().is_any()

    def test_error(self):
        result = try_parse_version("abc")
        assert result.ok is False
        assert result.value is None
        assert isinstance(result.error, BadVersionError)
        assert result.raw == "abc"

    def test_unwrap_raises_stored_error(self):
        result = try_parse_version("abc")
        with pytest.raises(BadVersionError) as excinfo:
            result.unwrap()
        assert excinfo.value is result.error


class TestTryCompareVersions:
    """Tests for try_compare_versions function."""

    def test_ok(self):
        result = try_compare_versions("1.2.9", "1.2.10")
        assert result.ok is True
        assert result.unwrap() == -1

    def test_equal_is_ok(self):
        result = try_compare_versions("1.2.3", "1.2.3")
        assert result.ok is True
        assert result.ordering == 0

    def test_incomparable(self):
        result = try_compare_versions("1.2", "1.2.3")
        assert result.ok is False
        assert isinstance(result.error, IncomparableVersionError)
        with pytest.raises(IncomparableVersionError):
            result.unwrap()

    def test_bad_input(self):
        result = try_compare_versions("1.2.3", "x")
        assert isinstance(result.error, BadVersionError)


class TestEmptyResults:
    """Tests for results built without a value or an error."""

    def test_empty_parse_result(self):
        with pytest.raises(ValueError, match="neither a value nor an error"):
            ParseResult(raw="1.2").unwrap()

    def test_empty_compare_result(self):
        with pytest.raises(ValueError, match="neither an ordering nor an error"):
            CompareResult().unwrap()
