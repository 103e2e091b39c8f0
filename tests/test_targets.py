# SPDX-License-Identifier: MIT
"""Unit tests for version targeting."""

import pytest

from ksp_version import (
    IncomparableVersionError,
    VersionCache,
    filter_targets,
    parse_version,
    targets,
)


def v(raw):
    return parse_version(raw)


class TestShortFilter:
    """Tests for MAJOR.MINOR filters."""

    def test_same_line(self):
        assert v("0.25").targets(v("0.25.2")) is True

    def test_patch_zero(self):
        assert v("0.25").targets(v("0.25.0")) is True

    def test_next_minor(self):
        assert v("0.25").targets(v("0.26.0")) is False

    def test_previous_minor(self):
        assert v("0.25").targets(v("0.24.99")) is False

    def test_other_major(self):
        assert v("1.2").targets(v("2.2.0")) is False

    def test_fourth_component(self):
        assert v("1.2").targets(v("1.2.3.4")) is True

    def test_patch_above_ceiling_on_same_line(self):
        """Test that the MAJOR.MINOR match accepts any patch on the line."""
        assert v("1.2").targets(v("1.2.100")) is True

    def test_leading_zero_spelling(self):
        """Test that a differently spelled line falls back to the numeric range."""
        assert v("1.2").targets(v("01.2.5")) is True
        assert v("1.2").targets(v("01.2.100")) is False


class TestLongFilter:
    """Tests for MAJOR.MINOR.PATCH filters."""

    def test_exact(self):
        assert v("1.2.3").targets(v("1.2.3")) is True

    def test_same_line_other_patch(self):
        """Test that a long filter does not accept other patches of its line."""
        assert v("1.2.3").targets(v("1.2.4")) is False

    def test_other_line(self):
        assert v("1.2.3").targets(v("1.3.3")) is False

    def test_numeric_equality(self):
        assert v("01.2.3").targets(v("1.3.3")) is False
        assert v("1.02.3").targets(v("1.2.3")) is True


class TestWildcardFilter:
    """Tests for the 'any' filter."""

    def test_any(self):
        assert v("any").targets(v("9.9.9")) is True

    def test_none(self):
        assert v(None).targets(v("0.0.1")) is True


class TestCandidateMustBeLong:
    """Tests for the long-candidate precondition."""

    def test_short_candidate(self):
        with pytest.raises(IncomparableVersionError) as excinfo:
            v("1.2").targets(v("1.2"))
        assert excinfo.value.operation == "targets"

    def test_any_candidate(self):
        with pytest.raises(IncomparableVersionError):
            v("1.2.3").targets(v("any"))

    def test_checked_before_wildcard(self):
        with pytest.raises(IncomparableVersionError):
            v("any").targets(v("1.2"))


class TestTargetsFunction:
    """Tests for the module-level targets and filter_targets."""

    def test_explicit_cache(self):
        cache = VersionCache()
        assert targets(v("0.25"), v("0.26.0"), cache) is False
        assert cache.stats().compare.misses > 0

    def test_filter_targets(self):
        releases = [v(s) for s in ["1.11.2", "1.12.0", "1.12.5", "1.13.0"]]
        assert filter_targets(v("1.12"), releases) == [v("1.12.0"), v("1.12.5")]

    def test_filter_targets_any(self):
        releases = [v(s) for s in ["1.11.2", "1.12.0"]]
        assert filter_targets(v("any"), releases) == releases

    def test_filter_targets_rejects_short_candidate(self):
        with pytest.raises(IncomparableVersionError):
            filter_targets(v("1.12"), [v("1.12.0"), v("1.13")])
