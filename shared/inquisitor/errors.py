"""
Exceptions raised by release-inquisitor.

Every failure that ends a run derives from InquisitorError; the CLI turns
them into a message on stderr and exit code 1.
"""

from typing import Any


class InquisitorError(Exception):
    """Base class for release-inquisitor failures."""


class ConfigError(InquisitorError):
    """Missing credentials, wrong arguments or invalid configuration."""

    def __init__(self, errors: list[str] | str):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__("; ".join(self.errors))


class FetchError(InquisitorError):
    """The Jira query failed.

    Attributes:
        status: HTTP status code, or None when no response was received
        reason: HTTP reason phrase or transport error name
        messages: Error messages supplied by Jira ("errorMessages")
    """

    def __init__(self, status: int | None, messages: list[str] | None = None, reason: str = ""):
        self.status = status
        self.reason = reason
        self.messages = list(messages or [])
        super().__init__(self.describe())

    def describe(self) -> str:
        status = self.status if self.status is not None else "no response"
        return f"Could not query JIRA: {status} {self.reason} {self.messages!r}"


class InputError(InquisitorError):
    """Interactive input was required but stdin is not a terminal."""


class GitLogError(InquisitorError):
    """git log failed in the target repository."""

    def __init__(self, command: list[Any], exit_code: int, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"{' '.join(str(c) for c in command)} exited with {exit_code}{detail}")
