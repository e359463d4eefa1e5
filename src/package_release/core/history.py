"""Group a decorated git log into releases.

The log is produced by::

    git log --decorate=short --pretty="format:%cd%d %s" --date=format:%Y-%m-%d

which yields one commit per line, newest first::

    2024-03-02 (HEAD -> main, tag: v1.1.0, origin/main) chore(release): v1.1.0
    2024-03-01 feat(api): add pagination
    2024-02-10 (tag: v1.0.0) chore(release): v1.0.0
    2024-02-09 fix: handle empty payload

Every tagged line opens a new release; the untagged conventional commits
that follow it (i.e. that happened before the tag) are collected into it.
Commits newer than the latest tag go into a release named after the
version about to be released.

Lines that do not fit the grammar (merge commits, free-form subjects,
blank lines) are skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

# <date> (<refs>) <subject>, as far as the decoration group is concerned
DECORATED_LINE_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2}) \((?P<refs>[^()]*)\)(?P<rest>.*)$",
)

HEAD_REF_PATTERN: re.Pattern[str] = re.compile(r"^HEAD(?:\s*->\s*\S+)?$", re.IGNORECASE)

# origin/main, upstream/feature/x
REMOTE_REF_PATTERN: re.Pattern[str] = re.compile(r"^[\w.-]+/[\w./-]+$")

LOG_LINE_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"  # commit date
    r"(?: \((?P<refs>[^()]*)\))?"  # optional decoration group
    r" (?P<type>[^(:]+)"  # type: free text up to the first ( or :
    r"(?:\((?P<scope>[^)]*)\))?"  # optional scope in parens
    r":\s*"  # colon + space
    r"(?P<message>\S.*)$",  # message
)

TAG_PATTERN: re.Pattern[str] = re.compile(
    r"(?:^|,)\s*tag:\s*(?P<tag>v\d+\.\d+\.\d+[^,\s()]*)",
)


def _keep_ref(ref: str) -> bool:
    return bool(ref) and not HEAD_REF_PATTERN.match(ref) and not REMOTE_REF_PATTERN.match(ref)


def normalize_log_line(line: str) -> str:
    """Strip ref noise from the decoration group of one log line.

    ``HEAD -> <branch>`` and remote-tracking refs are removed, the
    remaining refs are re-joined and an emptied group disappears. Runs of
    whitespace collapse to one space. The subject is left untouched.

    >>> normalize_log_line("2024-01-01 (HEAD -> main, tag: v1.0.0, origin/main) feat: x")
    '2024-01-01 (tag: v1.0.0) feat: x'
    """
    line = " ".join(line.split())
    match = DECORATED_LINE_PATTERN.match(line)
    if match is None:
        return line

    refs = [part.strip() for part in match.group("refs").split(",")]
    refs = [ref for ref in refs if _keep_ref(ref)]
    decoration = f" ({', '.join(refs)})" if refs else ""
    return f"{match.group('date')}{decoration}{match.group('rest')}"


@dataclass(frozen=True)
class LogEntry:
    """One commit line of the log.

    Attributes:
        date: Commit date (YYYY-MM-DD)
        tag: Release tag decorating the commit, if any
        commit_type: Conventional commit type (e.g. "feat"), not validated
        scope: Optional scope
        message: Commit description after the type prefix
    """

    date: str
    tag: str | None
    commit_type: str
    scope: str | None
    message: str

    @classmethod
    def from_line(cls, line: str) -> LogEntry | None:
        """Parse a normalized log line, or return None if it does not fit the grammar."""
        match = LOG_LINE_PATTERN.match(line)
        if match is None:
            return None

        tag = None
        refs = match.group("refs")
        if refs:
            tag_match = TAG_PATTERN.search(refs)
            if tag_match:
                tag = tag_match.group("tag")

        return cls(
            date=match.group("date"),
            tag=tag,
            commit_type=match.group("type").strip(),
            scope=match.group("scope"),
            message=match.group("message"),
        )


@dataclass
class Release:
    """A tagged group of commits.

    ``changelogs`` maps a commit type to its messages in log order.
    Duplicates are kept here; they are removed when rendering.
    """

    tag: str
    date: str
    changelogs: dict[str, list[str]] = field(default_factory=dict)

    def add(self, commit_type: str, message: str) -> None:
        self.changelogs.setdefault(commit_type, []).append(message)

    @property
    def version(self) -> str:
        """Tag without the leading ``v``."""
        return self.tag[1:] if self.tag.startswith("v") else self.tag


class ReleaseExtractor:
    """Fold log lines (newest first) into releases.

    Args:
        fallback_tag: Tag for commits newer than any release tag,
            normally ``v`` + the version being released
    """

    def __init__(self, fallback_tag: str) -> None:
        self.fallback_tag = fallback_tag
        self.releases: list[Release] = []

    def feed(self, line: str) -> LogEntry | None:
        """Process one raw log line. Returns the parsed entry, or None if skipped."""
        entry = LogEntry.from_line(normalize_log_line(line))
        if entry is None:
            return None

        if entry.tag:
            self.releases.append(Release(tag=entry.tag, date=entry.date))
            return entry

        if not self.releases:
            self.releases.append(Release(tag=self.fallback_tag, date=entry.date))
        self.releases[-1].add(entry.commit_type, entry.message)
        return entry

    def feed_all(self, lines: Iterable[str]) -> list[Release]:
        for line in lines:
            self.feed(line)
        return self.releases


def extract_releases(log: str | Iterable[str], fallback_tag: str) -> list[Release]:
    """Extract releases from git log output.

    Args:
        log: Raw log text, or an iterable of its lines, newest first
        fallback_tag: Tag used for commits made after the latest tag

    Returns:
        Releases, newest first
    """
    lines = log.splitlines() if isinstance(log, str) else log
    return ReleaseExtractor(fallback_tag).feed_all(lines)
