"""Command-line interface for package-release."""

from __future__ import annotations

from package_release.cli.main import cli

__all__ = ["cli"]
