"""Version control integration."""

from __future__ import annotations

from package_release.vcs.git import GitRepository, release_commit_message

__all__ = [
    "GitRepository",
    "release_commit_message",
]
