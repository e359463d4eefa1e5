"""Core business logic for package-release.

This module contains the fundamental building blocks:
- Next-version calculation
- Git log normalization and release extraction
- Changelog rendering
"""

from __future__ import annotations

from package_release.core.changelog import RenderedChangelog, render_changelog, write_changelog
from package_release.core.history import (
    LogEntry,
    Release,
    ReleaseExtractor,
    extract_releases,
    normalize_log_line,
)
from package_release.core.version import BumpType, calculate_next_version

__all__ = [
    # Version
    "BumpType",
    # History
    "LogEntry",
    "Release",
    "ReleaseExtractor",
    # Changelog
    "RenderedChangelog",
    "calculate_next_version",
    "extract_releases",
    "normalize_log_line",
    "render_changelog",
    "write_changelog",
]
