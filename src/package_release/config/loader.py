"""Load package-release configuration from the project manifest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from package_release.config.models import CONFIG_KEY, MANIFEST_FILENAME, PackageReleaseConfig
from package_release.exceptions import ConfigNotFoundError, ConfigValidationError


def find_manifest(path: Path) -> Path:
    """Locate the manifest in a project directory.

    Args:
        path: Project directory, or the manifest itself

    Returns:
        Path to the manifest

    Raises:
        ConfigNotFoundError: If no manifest exists
    """
    manifest_path = path if path.is_file() else path / MANIFEST_FILENAME
    if not manifest_path.is_file():
        raise ConfigNotFoundError(
            f"The `{MANIFEST_FILENAME}` not found or unreadable from folder: {manifest_path.parent}"
        )
    return manifest_path


def load_manifest(path: Path) -> dict[str, Any]:
    """Read and decode the manifest.

    Raises:
        ConfigNotFoundError: If the manifest is missing, unreadable or not a JSON object
    """
    manifest_path = find_manifest(path)
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigNotFoundError(
            f"The `{MANIFEST_FILENAME}` not found or unreadable from folder: {manifest_path.parent}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigNotFoundError(f"{manifest_path} does not contain a JSON object")
    return data


def extract_package_release_config(manifest: dict[str, Any]) -> dict[str, Any]:
    """Pick the recognised options out of the ``package-release`` section.

    ``header`` is only honoured when it is a string and ``types`` only when
    it is an object; anything else keeps the default.
    """
    section = manifest.get(CONFIG_KEY)
    if not isinstance(section, dict):
        return {}

    options: dict[str, Any] = {}
    if isinstance(section.get("header"), str):
        options["header"] = section["header"]
    if isinstance(section.get("types"), dict):
        options["types"] = section["types"]
    return options


def load_config(path: Path) -> PackageReleaseConfig:
    """Load configuration for the project at ``path``.

    Raises:
        ConfigNotFoundError: If the manifest cannot be read
        ConfigValidationError: If the options do not validate
    """
    manifest = load_manifest(path)
    try:
        return PackageReleaseConfig.model_validate(extract_package_release_config(manifest))
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid {CONFIG_KEY} configuration: {e}") from e


def get_project_version(path: Path) -> str | None:
    """Return the manifest version, or None when it is absent or not a string."""
    version = load_manifest(path).get("version")
    return version if isinstance(version, str) else None
