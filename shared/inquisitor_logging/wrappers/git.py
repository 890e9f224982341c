"""
Git wrapper for inquisitor_logging.

Wraps the read-only git commands the release audit needs, with structured
logging of each invocation.
"""

from typing import Any

from .base import ToolResult, ToolWrapper


class GitWrapper(ToolWrapper):
    """Wrapper for git CLI operations.

    Usage:
        from inquisitor_logging.wrappers import git

        result = git.log("2.0.2..HEAD", oneline=True, no_merges=True, cwd="~/src/facter")
    """

    tool_name = "git"

    def log(
        self,
        *refs: str,
        oneline: bool = False,
        no_merges: bool = False,
        cwd: str | None = None,
    ) -> ToolResult:
        """View commit history.

        Args:
            *refs: Refs or ranges to show (e.g. "2.0.2..HEAD")
            oneline: One line per commit ("<short-sha> <subject>")
            no_merges: Skip merge commits
            cwd: Working directory

        Returns:
            ToolResult with log output
        """
        args: list[str] = ["log"]

        if no_merges:
            args.append("--no-merges")

        if oneline:
            args.append("--oneline")

        args.extend(refs)

        return self.run(*args, cwd=cwd)

    def _extract_context(
        self,
        args: tuple[str, ...],
        stdout: str,
        stderr: str,
    ) -> dict[str, Any]:
        context: dict[str, Any] = {}

        if not args:
            return context

        subcommand = args[0]
        context["git_subcommand"] = subcommand

        if subcommand == "log" and "--oneline" in args:
            context["commit_count"] = len([line for line in stdout.splitlines() if line.strip()])
            ranges = [a for a in args[1:] if not a.startswith("-")]
            if ranges:
                context["revision_range"] = ranges[-1]

        return context
