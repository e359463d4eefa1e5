"""Changelog rendering.

Turns the releases extracted from the git history into a Markdown
document:

    # CHANGELOG


    ## v1.1.0 (2024-03-02)

    - Feat: add pagination

    - Fix: handle empty payload

Types are listed in the order of the type mapping, and only types whose
label is a string are shown. Repeated messages within one release and
type are listed once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from package_release.exceptions import ChangelogError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from package_release.core.history import Release


class RenderedChangelog(NamedTuple):
    """Rendered document plus the entries of the newest release.

    ``summary`` is used as the body of the release commit.
    """

    content: str
    summary: str


def _unique(messages: Sequence[str]) -> list[str]:
    """Drop repeated messages, keeping first-occurrence order."""
    return list(dict.fromkeys(messages))


def format_release_entries(release: Release, types: Mapping[str, Any]) -> list[list[str]]:
    """Bullet lines of one release, one block per shown type."""
    blocks = []
    for commit_type, label in types.items():
        if not isinstance(label, str):
            continue
        messages = release.changelogs.get(commit_type)
        if not messages:
            continue
        blocks.append([f"- {label}: {message}" for message in _unique(messages)])
    return blocks


def render_changelog(
    releases: Sequence[Release],
    types: Mapping[str, Any],
    header: str,
) -> RenderedChangelog:
    """Render releases (newest first) as Markdown.

    Args:
        releases: Releases as returned by extract_releases()
        types: Commit type to display label, in display order
        header: Document title line

    Returns:
        The document and the newest release's bullet lines
    """
    lines = [header, ""]
    summary: list[str] = []

    for index, release in enumerate(releases):
        lines.append("")
        lines.append(f"## {release.tag} ({release.date})")
        for block in format_release_entries(release, types):
            lines.append("")
            lines.extend(block)
            if index == 0:
                summary.extend(block)

    lines.append("")
    return RenderedChangelog(content="\n".join(lines), summary="\n".join(summary))


def write_changelog(
    path: Path,
    releases: Sequence[Release],
    types: Mapping[str, Any],
    header: str,
) -> str:
    """Render the changelog and overwrite ``path`` with it.

    Returns:
        The newest release's bullet lines, for the release commit message

    Raises:
        ChangelogError: If the file cannot be written
    """
    rendered = render_changelog(releases, types, header)
    try:
        path.write_text(rendered.content, encoding="utf-8")
    except OSError as e:
        raise ChangelogError(f"Could not write {path}: {e}") from e
    return rendered.summary
