"""
Cross-reference committed work against the tickets Jira knows for a release.
"""

from dataclasses import dataclass, field

from .commits import UNMARKED, CommitKind, CommitRecord
from .tickets import TicketRecord


# Note tags that never need a ticket, plus the unmarked sentinel
EXEMPT_TAGS = frozenset({"maint", "doc", "packaging", UNMARKED})


@dataclass
class ReconciliationResult:
    """Four views of a release derived from commit groups and known tickets.

    Attributes:
        groups: Commit groups keyed by issue key, in sorted key order
        known_tickets: Tickets Jira reports for the fixVersion
        committed_and_known: Group keys that match a known ticket
        committed_unknown: Group keys with no matching ticket (includes note tags and "unmarked")
        unmarked_commits: Commits with no leading marker, in log order
        known_but_uncommitted: Known tickets no commit refers to, sorted by key
    """

    groups: dict[str, list[CommitRecord]]
    known_tickets: dict[str, TicketRecord]
    committed_and_known: list[str] = field(default_factory=list)
    committed_unknown: list[str] = field(default_factory=list)
    unmarked_commits: list[CommitRecord] = field(default_factory=list)
    known_but_uncommitted: list[TicketRecord] = field(default_factory=list)

    @property
    def untracked_keys(self) -> list[str]:
        """Unknown group keys that look like real issues (exempt tags removed)."""
        return [key for key in self.committed_unknown if key not in EXEMPT_TAGS]

    def is_known(self, key: str) -> bool:
        return key in self.committed_and_known


def _is_ticket_group(commits: list[CommitRecord]) -> bool:
    return any(commit.is_ticket for commit in commits)


def reconcile(
    committed_groups: dict[str, list[CommitRecord]],
    known_tickets: dict[str, TicketRecord],
) -> ReconciliationResult:
    """Reconcile commit groups with known tickets.

    Keys are visited in sorted order. Only ticket groups are looked up, by
    upper-cased key; note tags and "unmarked" are always unknown.
    """
    known = {key.upper(): ticket for key, ticket in known_tickets.items()}
    sorted_keys = sorted(committed_groups)

    result = ReconciliationResult(
        groups={key: list(committed_groups[key]) for key in sorted_keys},
        known_tickets=known,
    )

    committed_ticket_keys = set()
    for key in sorted_keys:
        commits = committed_groups[key]
        if _is_ticket_group(commits):
            committed_ticket_keys.add(key.upper())

        if _is_ticket_group(commits) and key.upper() in known:
            result.committed_and_known.append(key)
        else:
            result.committed_unknown.append(key)

    # An "[unmarked]" note shares the sentinel key but is not an unmarked commit
    if UNMARKED in result.committed_unknown:
        result.unmarked_commits = [
            commit for commit in committed_groups[UNMARKED] if commit.kind is CommitKind.UNMARKED
        ]

    result.known_but_uncommitted = [
        known[key] for key in sorted(known) if key not in committed_ticket_keys
    ]

    return result
