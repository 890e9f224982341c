"""
Console report for a reconciled release.

Report lines are built as (tone, text) pairs; tones become ANSI codes only
when the lines are turned into strings.
"""

import sys
from enum import Enum
from typing import TextIO

from .reconcile import ReconciliationResult


class Tone(Enum):
    """How a report line should be highlighted."""

    NEUTRAL = ""
    SUCCESS = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow


RESET = "\033[0m"

COMMITTED_HEADER = "++ Issues committed in this release"
UNMARKED_HEADER = "++ Issues without an issue reference"
GIT_ONLY_HEADER = "++ Issues in Git that are not in Jira"
JIRA_ONLY_HEADER = "++ Issues in Jira not found in Git"


ReportLine = tuple[Tone, str]


def colorize(tone: Tone, text: str, use_colors: bool) -> str:
    if not use_colors or tone is Tone.NEUTRAL:
        return text
    return f"{tone.value}{text}{RESET}"


def committed_section(result: ReconciliationResult) -> list[ReportLine]:
    lines: list[ReportLine] = [(Tone.NEUTRAL, COMMITTED_HEADER)]
    for key, commits in result.groups.items():
        if result.is_known(key):
            lines.append((Tone.SUCCESS, f"  -- {key.upper()}"))
        else:
            lines.append((Tone.WARNING, f"  ** {key.upper()}"))
        for commit in commits:
            lines.append((Tone.NEUTRAL, f"    {commit.sha}  {commit.message}"))
    return lines


def unmarked_section(result: ReconciliationResult) -> list[ReportLine]:
    lines: list[ReportLine] = [(Tone.NEUTRAL, UNMARKED_HEADER)]
    for commit in result.unmarked_commits:
        lines.append((Tone.NEUTRAL, f"    {commit.sha}: {commit.message}"))
    return lines


def git_only_section(result: ReconciliationResult) -> list[ReportLine]:
    lines: list[ReportLine] = [(Tone.NEUTRAL, GIT_ONLY_HEADER)]
    for key in result.untracked_keys:
        lines.append((Tone.NEUTRAL, f"    {key}"))
        for commit in result.groups[key]:
            lines.append((Tone.NEUTRAL, f"      {commit.sha}: {commit.message}"))
    return lines


def jira_only_section(result: ReconciliationResult) -> list[ReportLine]:
    lines: list[ReportLine] = [(Tone.NEUTRAL, JIRA_ONLY_HEADER)]
    for ticket in result.known_but_uncommitted:
        lines.append((Tone.NEUTRAL, f"    {ticket.key}: ({ticket.resolution}) {ticket.summary}"))
    return lines


def build_report(result: ReconciliationResult) -> list[ReportLine]:
    """All four sections in order, separated by blank lines."""
    sections = [
        committed_section(result),
        unmarked_section(result),
        git_only_section(result),
        jira_only_section(result),
    ]

    lines: list[ReportLine] = []
    for index, section in enumerate(sections):
        if index:
            lines.append((Tone.NEUTRAL, ""))
        lines.extend(section)
    return lines


def render_report(result: ReconciliationResult, use_colors: bool = False) -> list[str]:
    """Report as printable strings."""
    return [colorize(tone, text, use_colors) for tone, text in build_report(result)]


def print_report(result: ReconciliationResult, use_colors: bool = False, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    for line in render_report(result, use_colors):
        print(line, file=stream)
