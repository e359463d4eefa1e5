"""Git operations used during a release.

Each command runs to completion through ``subprocess.run`` and its
output is captured in full. A non-zero exit status raises GitError
labelled with the release step that ran the command.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from package_release.exceptions import GitError

if TYPE_CHECKING:
    from pathlib import Path

LOG_FORMAT = "format:%cd%d %s"
LOG_DATE_FORMAT = "format:%Y-%m-%d"


def release_commit_message(version: str, summary: str) -> str:
    """Message of the release commit: title line, blank line, changelog entries."""
    return f"chore(release): v{version}\n\n{summary}"


class GitRepository:
    """Git repository rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _run_git(self, step: str, *args: str) -> str:
        """Run a git command and return its stdout."""
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.path,
                capture_output=True,
                text=True,
                check=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {' '.join(args)} failed with exit code {e.returncode}",
                step=step,
                stderr=e.stderr,
            ) from e
        except FileNotFoundError as e:
            raise GitError("git is not installed or not in PATH", step=step) from e
        return result.stdout

    def read_log(self) -> str:
        """Full history, one ``<date><decoration> <subject>`` line per commit, newest first."""
        return self._run_git(
            "log",
            "log",
            "--decorate=short",
            f"--pretty={LOG_FORMAT}",
            f"--date={LOG_DATE_FORMAT}",
        )

    def add_all(self) -> None:
        self._run_git("add", "add", ".")

    def commit(self, message: str) -> None:
        self._run_git("commit", "commit", "-m", message)

    def tag(self, name: str) -> None:
        self._run_git("tag", "tag", name)

    def push(self) -> None:
        """Push the current branch, then all tags."""
        self._run_git("push", "push")
        self._run_git("push", "push", "--tags")
