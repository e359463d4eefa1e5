"""Implementation of the release command.

The release command regenerates the changelog, bumps the manifest
version and records the release in git:

1. compute the next version,
2. group the git history into releases,
3. stop if nothing was committed since the last release,
4. write CHANGELOG.md, then package.json,
5. commit and tag the release, then optionally push.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from package_release.config import load_config
from package_release.config.loader import get_project_version
from package_release.config.models import MANIFEST_FILENAME
from package_release.core.changelog import write_changelog
from package_release.core.history import extract_releases
from package_release.core.version import calculate_next_version
from package_release.project.manifest import update_manifest_version
from package_release.vcs import GitRepository, release_commit_message

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console


def run_release(
    path: Path,
    version_override: str | None,
    bump_type: str,
    push: bool,
    upgrade_only: bool,
    console: Console,
) -> str | None:
    """Run the release command.

    Args:
        path: Project directory
        version_override: Explicit version to release (e.g. "2.0.0")
        bump_type: major, minor, patch or a pre-release channel such as alpha
        push: Push commits and tags after tagging
        upgrade_only: Only update the changelog and manifest, no commit or tag
        console: Console for progress output

    Returns:
        The released version, or None when there is nothing to release

    Raises:
        PackageReleaseError: If any step fails; later steps are not run
    """
    config = load_config(path)
    next_version = calculate_next_version(
        get_project_version(path),
        version=version_override,
        bump=bump_type,
    )
    repo = GitRepository(path)

    console.print("Extract all releases")
    releases = extract_releases(repo.read_log(), f"v{next_version}")
    if not releases or releases[0].version != next_version:
        console.print("[yellow]There are no commits for the next version.[/]")
        return None

    console.print(f"Write {config.changelog_path}")
    summary = write_changelog(
        path / config.changelog_path,
        releases,
        config.visible_types,
        config.header,
    )

    console.print(f"Write {MANIFEST_FILENAME}")
    update_manifest_version(path, next_version)

    if not upgrade_only:
        _commit_new_release(repo, next_version, summary, console)

    if push:
        console.print("(Git) Push")
        repo.push()
        console.print(f"[green]v{next_version} is released and auto pushed to remote[/]")
    else:
        console.print(
            f"[green]v{next_version} is released[/], you can run "
            "[cyan]git push && git push --tags[/] to push release with tag."
        )
    return next_version


def _commit_new_release(
    repo: GitRepository,
    version: str,
    summary: str,
    console: Console,
) -> None:
    """Stage everything, commit the release and tag it, in that order."""
    console.print("(Git) Add files")
    repo.add_all()

    console.print("(Git) Commit release")
    repo.commit(release_commit_message(version, summary))

    console.print("(Git) Add tag")
    repo.tag(f"v{version}")
