"""
Base classes for tool wrappers.

Runs command-line tools through subprocess and logs every invocation with
its exit code and timing.
"""

import subprocess
import time
from dataclasses import dataclass, field
from typing import Any

from ..logger import get_logger


@dataclass
class ToolResult:
    """Result from a wrapped tool invocation.

    Attributes:
        command: The full command that was executed
        exit_code: Process exit code (0 = success)
        stdout: Standard output as string
        stderr: Standard error as string
        duration_ms: Execution time in milliseconds
        success: Whether the command succeeded (exit_code == 0)
        extra: Additional context captured by the wrapper
    """

    command: list[str]
    exit_code: int
    stdout: str
    stderr: str
    duration_ms: float
    success: bool = field(init=False)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.success = self.exit_code == 0


class ToolWrapper:
    """Base class for tool wrappers.

    Subclasses set tool_name, may override _extract_context() to capture
    tool-specific metadata, and add convenience methods.
    """

    tool_name: str = "unknown"

    def __init__(self):
        self._logger = get_logger("release-inquisitor", component=f"tool-{self.tool_name}")

    def run(
        self,
        *args: str,
        cwd: str | None = None,
    ) -> ToolResult:
        """Execute the tool with given arguments.

        Args:
            *args: Command arguments (tool name will be prepended)
            cwd: Working directory for the command

        Returns:
            ToolResult with command output and metadata
        """
        command = [self.tool_name, *args]
        start_time = time.perf_counter()

        result = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
            cwd=cwd,
        )

        duration_ms = (time.perf_counter() - start_time) * 1000

        tool_result = ToolResult(
            command=command,
            exit_code=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            duration_ms=duration_ms,
            extra=self._extract_context(args, result.stdout or "", result.stderr or ""),
        )

        self._log_invocation(tool_result)

        return tool_result

    def _extract_context(
        self,
        args: tuple[str, ...],
        stdout: str,
        stderr: str,
    ) -> dict[str, Any]:
        """Extract tool-specific context from command and output."""
        return {}

    def _log_invocation(self, result: ToolResult) -> None:
        log_kwargs: dict[str, Any] = {
            "tool": self.tool_name,
            "command": result.command,
            "exit_code": result.exit_code,
            "duration_ms": round(result.duration_ms, 2),
        }
        log_kwargs.update(result.extra)

        if result.success:
            self._logger.debug(f"{self.tool_name} command completed", **log_kwargs)
        else:
            log_kwargs["stderr"] = result.stderr[:500] if result.stderr else ""
            self._logger.error(f"{self.tool_name} command failed", **log_kwargs)
