"""Shared fixtures for package-release tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


SAMPLE_LOG = """\
2024-03-05 (HEAD -> main, origin/main) feat(api): add pagination
2024-03-04 fix: handle empty payload
2024-03-04 fix: handle empty payload
2024-03-02 (tag: v1.1.0) chore(release): v1.1.0
2024-03-01 feat: add widget
2024-03-01 Merge branch 'feature/widget' into main
2024-02-20 docs: describe widget
2024-02-10 (tag: v1.0.0, origin/release) chore(release): v1.0.0
2024-02-09 perf(db): cache lookups
2024-02-08 chore: bump deps
"""


@pytest.fixture
def sample_log() -> str:
    """Decorated git log with two tags and commits after the latest one."""
    return SAMPLE_LOG


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project directory with a package.json at version 1.1.0."""
    manifest = {
        "name": "widget",
        "version": "1.1.0",
        "scripts": {"test": "jest"},
    }
    (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2) + "\n")
    return tmp_path
