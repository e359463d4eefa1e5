"""package.json version manipulation.

This module updates the ``version`` field of the project manifest. The
document is rewritten with two-space indentation, its key order and
every other field preserved.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from package_release.config.loader import find_manifest, load_manifest
from package_release.exceptions import ProjectError

if TYPE_CHECKING:
    from pathlib import Path


def update_manifest_version(path: Path, new_version: str) -> Path:
    """Set the manifest version.

    Args:
        path: Manifest or the directory containing it
        new_version: New version string to set

    Returns:
        Path to the updated manifest

    Raises:
        ConfigNotFoundError: If the manifest cannot be read
        ProjectError: If the manifest cannot be written
    """
    manifest_path = find_manifest(path)
    manifest = load_manifest(manifest_path)
    manifest["version"] = new_version

    content = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    try:
        manifest_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Could not write {manifest_path}: {e}") from e
    return manifest_path
