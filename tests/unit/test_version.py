"""Tests for next-version calculation."""

from __future__ import annotations

import pytest

from package_release.core.version import BumpType, calculate_next_version


class TestPositionalBumps:
    """Tests for major/minor/patch bumps."""

    @pytest.mark.parametrize(
        ("bump", "expected"),
        [
            ("major", "2.2.3"),
            ("minor", "1.3.3"),
            ("patch", "1.2.4"),
        ],
    )
    def test_bump_keeps_lower_positions(self, bump: str, expected: str):
        """Only the selected position is incremented."""
        assert calculate_next_version("1.2.3", bump=bump) == expected

    def test_default_bump_is_patch(self):
        """Without a bump type the patch number is incremented."""
        assert calculate_next_version("0.9.9") == "0.9.10"

    def test_empty_bump_is_patch(self):
        """An empty bump type behaves like patch."""
        assert calculate_next_version("1.0.0", bump="") == "1.0.1"

    def test_bump_type_enum(self):
        """BumpType members are accepted."""
        assert calculate_next_version("1.2.3", bump=BumpType.MINOR) == "1.3.3"

    def test_missing_version_defaults_to_zero(self):
        """A missing version starts from 0.0.0."""
        assert calculate_next_version(None, bump="patch") == "0.0.1"
        assert calculate_next_version("", bump="minor") == "0.1.0"

    def test_short_version_is_padded(self):
        """Missing positions are filled with 0."""
        assert calculate_next_version("1", bump="patch") == "1.0.1"

    def test_malformed_parts_parse_as_zero(self):
        """Non-numeric parts count as 0."""
        assert calculate_next_version("x.y.z", bump="major") == "1.y.z"

    def test_patch_from_prerelease(self):
        """Patch bump drops the pre-release suffix and increments."""
        assert calculate_next_version("1.0.1-alpha.1", bump="patch") == "1.0.2"


class TestExplicitVersion:
    """Tests for the explicit version override."""

    def test_explicit_version_wins(self):
        """An explicit version is returned whatever the bump type."""
        assert calculate_next_version("0.0.0", version="5.0.0") == "5.0.0"
        assert calculate_next_version("1.2.3", version="5.0.0", bump="major") == "5.0.0"

    def test_explicit_version_is_not_validated(self):
        """The explicit version is used verbatim."""
        assert calculate_next_version("1.0.0", version="next") == "next"


class TestPrerelease:
    """Tests for pre-release channel bumps."""

    def test_enter_channel(self):
        """Entering a channel keeps the numeric triple."""
        assert calculate_next_version("1.0.0", bump="alpha") == "1.0.0-alpha.1"

    def test_repeat_channel_increments_counter(self):
        """Bumping the same channel twice increments its counter."""
        first = calculate_next_version("1.0.0", bump="alpha")
        second = calculate_next_version(first, bump="alpha")

        assert "-alpha.1" in first
        assert "-alpha.2" in second
        assert second == "1.0.0-alpha.2"

    def test_switch_channel_restarts_counter(self):
        """A new channel starts counting at 1."""
        assert calculate_next_version("1.0.0-alpha.2", bump="beta") == "1.0.0-beta.1"

    def test_double_digit_counter(self):
        """Counters are not limited to one digit."""
        assert calculate_next_version("2.1.3-rc.9", bump="rc") == "2.1.3-rc.10"
        assert calculate_next_version("2.1.3-rc.10", bump="rc") == "2.1.3-rc.11"

    def test_major_and_minor_are_kept(self):
        """Channel bumps leave major and minor alone."""
        assert calculate_next_version("3.4.5", bump="beta") == "3.4.5-beta.1"
