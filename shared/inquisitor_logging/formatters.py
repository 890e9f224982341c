"""
Log formatters for inquisitor_logging.

Provides a JSON formatter for machine consumption and a console formatter
for people watching the terminal.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


# Record attributes that carry run context rather than per-call extras
CONTEXT_FIELDS = ("run_id", "repository", "project", "fix_version")


class JsonFormatter(logging.Formatter):
    """One JSON object per log record.

    Output format:
        {
            "timestamp": "2026-10-19T12:34:56.789Z",
            "severity": "INFO",
            "message": "Fetched known tickets",
            "service": "release-inquisitor",
            "context": {"project": "FACT", "fix_version": "2.1.0"},
            "extra": {"ticket_count": 42}
        }
    """

    SEVERITY_MAP = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARNING",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    # Standard LogRecord attributes excluded from "extra"
    STANDARD_ATTRS = {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "message",
        "taskName",
        *CONTEXT_FIELDS,
    }

    def __init__(
        self,
        service: str = "release-inquisitor",
        component: str | None = None,
        include_extra: bool = True,
    ):
        """Initialize the JSON formatter.

        Args:
            service: Service name for all logs
            component: Optional component within the service
            include_extra: Whether to include extra fields from log records
        """
        super().__init__()
        self.service = service
        self.component = component
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": self._format_timestamp(record),
            "severity": self.SEVERITY_MAP.get(record.levelno, "DEFAULT"),
            "message": record.getMessage(),
            "service": self.service,
        }

        if self.component:
            log_entry["component"] = self.component

        if record.name and record.name != self.service:
            log_entry["logger"] = record.name

        context_fields = {}
        for name in CONTEXT_FIELDS:
            if getattr(record, name, None):
                context_fields[name] = getattr(record, name)

        if context_fields:
            log_entry["context"] = context_fields

        if self.include_extra:
            extra = self._extract_extra(record)
            if extra:
                log_entry["extra"] = extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.levelno >= logging.WARNING:
            log_entry["sourceLocation"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        """Format timestamp in ISO 8601 format with UTC timezone."""
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(dt.microsecond / 1000):03d}Z"

    def _extract_extra(self, record: logging.LogRecord) -> dict[str, Any]:
        """Extract extra fields that were passed to the log call."""
        extra = {}
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS and not key.startswith("_"):
                extra[key] = value

        return extra


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter.

    Output format:
        2026-10-19 12:34:56 [INFO    ] release-inquisitor: Fetched known tickets (project=FACT version=2.1.0)
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(
        self,
        service: str = "release-inquisitor",
        use_colors: bool | None = None,
        show_context: bool = True,
    ):
        """Initialize the console formatter.

        Args:
            service: Service name for logs
            use_colors: Whether to use ANSI colors (auto-detected if None)
            show_context: Whether to show context fields
        """
        super().__init__()
        self.service = service
        self.use_colors = use_colors if use_colors is not None else detect_color_support(sys.stderr)
        self.show_context = show_context

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record for console output."""
        dt = datetime.fromtimestamp(record.created)
        timestamp = dt.strftime("%Y-%m-%d %H:%M:%S")

        level = record.levelname
        if self.use_colors:
            color = self.COLORS.get(level, "")
            level = f"{color}{level:8}{self.RESET}"
        else:
            level = f"{level:8}"

        parts = [f"{timestamp} [{level}] {self.service}"]

        if record.name and record.name != self.service and "." in record.name:
            parts.append(f".{record.name.split('.')[-1]}")

        parts.append(f": {record.getMessage()}")

        if self.show_context:
            context_parts = []
            if getattr(record, "project", None):
                context_parts.append(f"project={record.project}")
            if getattr(record, "fix_version", None):
                context_parts.append(f"version={record.fix_version}")

            if context_parts:
                context_str = " ".join(context_parts)
                if self.use_colors:
                    context_str = f"\033[90m({context_str})\033[0m"
                else:
                    context_str = f"({context_str})"
                parts.append(f" {context_str}")

        message = "".join(parts)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def detect_color_support(stream: Any = None) -> bool:
    """Return True if ANSI colors should be written to the given stream."""
    stream = stream if stream is not None else sys.stdout
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False

    if os.environ.get("NO_COLOR"):
        return False

    return True
