"""
inquisitor - audit a release by reconciling git commits with Jira tickets.

Usage:
    from inquisitor import parse_commit_log, reconcile, render_report

    groups = parse_commit_log(log_text, "FACT")
    result = reconcile(groups, known_tickets)
    print("\\n".join(render_report(result)))
"""

from .commits import (
    UNMARKED,
    CommitKind,
    CommitRecord,
    classify_line,
    group_commits,
    parse_commit_log,
    read_commit_log,
)
from .errors import ConfigError, FetchError, GitLogError, InputError, InquisitorError
from .reconcile import EXEMPT_TAGS, ReconciliationResult, reconcile
from .render import Tone, build_report, print_report, render_report
from .tickets import TicketRecord, build_jql, fetch_known_tickets, parse_search_response


__all__ = [
    "EXEMPT_TAGS",
    "UNMARKED",
    "CommitKind",
    "CommitRecord",
    "ConfigError",
    "FetchError",
    "GitLogError",
    "InputError",
    "InquisitorError",
    "ReconciliationResult",
    "TicketRecord",
    "Tone",
    "build_jql",
    "build_report",
    "classify_line",
    "fetch_known_tickets",
    "group_commits",
    "parse_commit_log",
    "parse_search_response",
    "print_report",
    "read_commit_log",
    "reconcile",
    "render_report",
]

__version__ = "0.1.0"
