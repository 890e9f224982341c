"""
Commit log classification.

Reads `git log --no-merges --oneline` output and sorts each commit by the
marker at the front of its subject:

    abc1234 [FACT-123] Fix fact resolution    -> ticket FACT-123
    def5678 (maint) Update copyright year     -> note tag "maint"
    0123abc Tweak whitespace                  -> "unmarked"
"""

import re
from dataclasses import dataclass
from enum import Enum

from inquisitor_config import ReleaseConfig
from inquisitor_logging import get_logger
from inquisitor_logging.wrappers import GitWrapper
from inquisitor_logging.wrappers import git as default_git

from .errors import GitLogError


logger = get_logger("release-inquisitor", component="commits")

UNMARKED = "unmarked"

NOTE_PATTERN = re.compile(r"^[\[\(](\w+)[\]\)]\s+(.*)$")


class CommitKind(Enum):
    """Which marker a commit subject starts with."""

    TICKET = "ticket"
    NOTE = "note"
    UNMARKED = "unmarked"


@dataclass(frozen=True)
class CommitRecord:
    """One commit from the log.

    Attributes:
        sha: Abbreviated commit hash
        issue_key: Ticket key as written, note tag, or "unmarked"
        message: Subject with the leading marker removed
        kind: Which classification rule matched
    """

    sha: str
    issue_key: str
    message: str
    kind: CommitKind

    @property
    def is_ticket(self) -> bool:
        return self.kind is CommitKind.TICKET


def ticket_pattern(project: str) -> re.Pattern:
    """Regex for a leading `[PROJECT-123]` or `(PROJECT-123)` marker, any case."""
    return re.compile(rf"^[\[\(]({re.escape(project)}-\d+)[\]\)]\s+(.*)$", re.IGNORECASE)


def classify_line(line: str, project: str, pattern: re.Pattern | None = None) -> CommitRecord:
    """Parse one `<sha> <subject>` log line into a CommitRecord.

    A ticket marker for the project wins over a generic note tag; only the
    first bracket of the subject is looked at.
    """
    pattern = pattern or ticket_pattern(project)

    parts = line.strip().split(None, 1)
    sha = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""

    match = pattern.match(rest)
    if match:
        return CommitRecord(sha=sha, issue_key=match.group(1), message=match.group(2), kind=CommitKind.TICKET)

    match = NOTE_PATTERN.match(rest)
    if match:
        return CommitRecord(sha=sha, issue_key=match.group(1), message=match.group(2), kind=CommitKind.NOTE)

    return CommitRecord(sha=sha, issue_key=UNMARKED, message=rest, kind=CommitKind.UNMARKED)


def group_key(record: CommitRecord) -> str:
    """Key a commit is grouped under.

    Ticket keys are compared in the tracker's upper case; note tags and
    "unmarked" are kept as written.
    """
    if record.is_ticket:
        return record.issue_key.upper()
    return record.issue_key


def group_commits(records: list[CommitRecord]) -> dict[str, list[CommitRecord]]:
    """Group commits by key, keeping log order inside each group."""
    groups: dict[str, list[CommitRecord]] = {}
    for record in records:
        groups.setdefault(group_key(record), []).append(record)
    return groups


def parse_commit_log(text: str, project: str) -> dict[str, list[CommitRecord]]:
    """Classify every line of a oneline log and group the results."""
    pattern = ticket_pattern(project)
    records = [classify_line(line, project, pattern) for line in text.splitlines() if line.strip()]
    groups = group_commits(records)

    logger.debug(
        "Parsed commit log",
        commit_count=len(records),
        group_count=len(groups),
        unmarked_count=len(groups.get(UNMARKED, [])),
    )
    return groups


def read_commit_log(release: ReleaseConfig, git: GitWrapper | None = None) -> str:
    """Run `git log --no-merges --oneline FROM..TO` in the release repository.

    Raises:
        GitLogError: If git exits non-zero (unknown revision, not a repository)
    """
    git = git or default_git
    result = git.log(release.revision_range, oneline=True, no_merges=True, cwd=str(release.repo_path))
    if not result.success:
        raise GitLogError(result.command, result.exit_code, result.stderr)
    return result.stdout
