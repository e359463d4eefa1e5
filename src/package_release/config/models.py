"""Configuration models for package-release.

The configuration lives in the project manifest under the
``package-release`` key:

    {
      "package-release": {
        "header": "# Changelog",
        "types": {"feat": "Features", "fix": "Bug Fixes"}
      }
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

MANIFEST_FILENAME = "package.json"
CONFIG_KEY = "package-release"
DEFAULT_HEADER = "# CHANGELOG"


def default_types() -> dict[str, Any]:
    """Commit types shown in the changelog, in display order."""
    return {
        "feat": "Feat",
        "fix": "Fix",
        "docs": "Docs",
        "perf": "Perf",
        "refactor": "Refactor",
    }


class PackageReleaseConfig(BaseModel):
    """Root configuration.

    Attributes:
        header: First line of the generated changelog
        types: Mapping of commit type to display label. Only types whose
            label is a string are rendered; ordering is display order.
        changelog_path: Changelog location relative to the project
    """

    header: str = DEFAULT_HEADER
    types: dict[str, Any] = Field(default_factory=default_types)
    changelog_path: Path = Path("CHANGELOG.md")

    @property
    def visible_types(self) -> dict[str, str]:
        """Types that will actually appear in the changelog."""
        return {key: label for key, label in self.types.items() if isinstance(label, str)}
