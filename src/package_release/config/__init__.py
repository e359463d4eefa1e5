"""Configuration management for package-release."""

from __future__ import annotations

from package_release.config.loader import load_config
from package_release.config.models import PackageReleaseConfig

__all__ = [
    "PackageReleaseConfig",
    "load_config",
]
