"""Next-version calculation.

Versions are handled as plain strings: ``MAJOR.MINOR.PATCH`` optionally
followed by a ``-<channel>.<n>`` pre-release suffix. This module is the
only place that looks inside them.

Bumping one position never resets the lower positions, so ``1.2.3``
bumped ``major`` becomes ``2.2.3``. Entering a pre-release channel keeps
the numeric triple as it is: ``1.0.0`` bumped ``alpha`` becomes
``1.0.0-alpha.1``, and bumping ``alpha`` again yields ``1.0.0-alpha.2``.
"""

from __future__ import annotations

import re
from enum import StrEnum

DEFAULT_VERSION = "0.0.0"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRAILING_INT = re.compile(r"(\d+)$")


class BumpType(StrEnum):
    """Positional version bumps. Any other token names a pre-release channel."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def position(self) -> int:
        return {BumpType.MAJOR: 0, BumpType.MINOR: 1, BumpType.PATCH: 2}[self]


def _leading_int(value: str) -> int:
    """Integer prefix of ``value`` (``"3-alpha"`` -> 3), 0 when there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _prerelease_counter(tail: str, channel: str) -> int:
    """Current counter of ``channel`` in a version tail such as ``0-alpha.4``."""
    if channel not in tail:
        return 0
    after = tail.split(channel)[1]
    match = _TRAILING_INT.search(after)
    return int(match.group(1)) if match else 0


def calculate_next_version(
    current: str | None,
    *,
    version: str | None = None,
    bump: str = BumpType.PATCH,
) -> str:
    """Compute the version to release.

    Args:
        current: Version stored in the manifest; ``0.0.0`` when missing
        version: Explicit target version, returned verbatim when given
        bump: ``major``, ``minor``, ``patch`` or a pre-release channel name;
            empty means ``patch``

    Returns:
        The next version string
    """
    if version:
        return version

    parts = (current if isinstance(current, str) and current else DEFAULT_VERSION).split(".")
    while len(parts) < 3:
        parts.append("0")

    bump = bump or BumpType.PATCH
    try:
        bump_type: BumpType | None = BumpType(bump)
    except ValueError:
        bump_type = None

    if bump_type is not None:
        position = bump_type.position
        parts[position] = str(_leading_int(parts[position]) + 1)
    else:
        tail = ".".join(parts[2:])
        counter = _prerelease_counter(tail, bump)
        parts[2] = f"{_leading_int(tail)}-{bump}.{counter + 1}"

    return ".".join(parts[:3])
