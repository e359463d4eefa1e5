"""Exception hierarchy for package-release.

Every error raised by the library derives from PackageReleaseError so
the command line can report all fatal conditions through one handler.
"""

from __future__ import annotations


class PackageReleaseError(Exception):
    """Base class for all package-release errors."""


class ConfigError(PackageReleaseError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """The project manifest is missing or unreadable."""


class ConfigValidationError(ConfigError):
    """The package-release configuration is invalid."""


class ProjectError(PackageReleaseError):
    """The project files could not be read or updated."""


class ChangelogError(PackageReleaseError):
    """The changelog could not be written."""


class GitError(PackageReleaseError):
    """A git command failed.

    Attributes:
        step: Name of the release step that ran the command
        stderr: Captured standard error of the command
    """

    def __init__(
        self,
        message: str,
        *,
        step: str | None = None,
        stderr: str | None = None,
    ) -> None:
        self.step = step
        self.stderr = stderr
        if step:
            message = f"{step}: {message}"
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
