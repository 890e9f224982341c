"""
Context management for inquisitor_logging.

Carries the identity of the release being audited so that every log line
emitted during a run can be correlated with it.
"""

import secrets
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


_current_context: ContextVar["LogContext | None"] = ContextVar("inquisitor_log_context", default=None)


@dataclass
class LogContext:
    """Context for log correlation.

    Attributes:
        run_id: Identifier for one invocation (16 hex chars)
        repository: Path of the git repository being inspected
        project: Jira project key
        fix_version: Jira fixVersion being audited
        extra: Additional context fields to include in logs
    """

    run_id: str | None = None
    repository: str | None = None
    project: str | None = None
    fix_version: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.run_id is None:
            self.run_id = secrets.token_hex(8)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dict for log inclusion."""
        result: dict[str, Any] = {}

        if self.run_id:
            result["run_id"] = self.run_id
        if self.repository:
            result["repository"] = self.repository
        if self.project:
            result["project"] = self.project
        if self.fix_version:
            result["fix_version"] = self.fix_version

        return result


def get_current_context() -> LogContext | None:
    """Get the current logging context."""
    return _current_context.get()


def set_current_context(ctx: LogContext | None) -> None:
    """Set the current logging context."""
    _current_context.set(ctx)


class ContextScope:
    """Context manager for scoped logging context.

    Usage:
        with ContextScope(project="FACT", fix_version="2.1.0"):
            logger.info("Fetching tickets")
            # All logs in this scope include the context
    """

    def __init__(
        self,
        run_id: str | None = None,
        repository: str | None = None,
        project: str | None = None,
        fix_version: str | None = None,
        **extra: Any,
    ):
        self._run_id = run_id
        self._repository = repository
        self._project = project
        self._fix_version = fix_version
        self._extra = extra
        self._token: Any = None

    def __enter__(self) -> LogContext:
        previous = get_current_context()

        # Nested scopes keep the run they belong to
        run_id = self._run_id
        if run_id is None and previous:
            run_id = previous.run_id

        new_context = LogContext(
            run_id=run_id,
            repository=self._repository,
            project=self._project,
            fix_version=self._fix_version,
            extra=self._extra,
        )

        self._token = _current_context.set(new_context)
        return new_context

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        _current_context.reset(self._token)
