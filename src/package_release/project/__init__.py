"""Project manifest handling."""

from __future__ import annotations

from package_release.project.manifest import update_manifest_version

__all__ = [
    "update_manifest_version",
]
