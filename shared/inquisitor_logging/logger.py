"""
InquisitorLogger - Structured logging for release-inquisitor.

Log output always goes to stderr so the report on stdout stays clean.
"""

import logging
import sys
from typing import Any

from .context import get_current_context
from .formatters import ConsoleFormatter, JsonFormatter


LOG_FORMATS = ("console", "json")


def _coerce_level(level: int | str) -> int:
    return level if isinstance(level, int) else getattr(logging, level.upper())


class InquisitorLogger:
    """Structured logger.

    Keyword arguments given to the log methods become structured fields
    on the record, and the current ContextScope is attached automatically.

    Usage:
        from inquisitor_logging import get_logger

        logger = get_logger("release-inquisitor")
        logger.info("Fetched known tickets", ticket_count=42)
    """

    def __init__(
        self,
        name: str,
        level: int | str = logging.INFO,
        component: str | None = None,
        log_format: str = "console",
    ):
        """Initialize the logger.

        Args:
            name: Logger name (typically the service name)
            level: Log level (default INFO)
            component: Optional component within the service
            log_format: "console" for human-readable output, "json" for JSON lines
        """
        if log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {log_format!r}")

        self.name = name
        self.component = component
        self.log_format = log_format
        # Components get child loggers so each keeps its own handler
        self._logger = logging.getLogger(f"{name}.{component}" if component else name)
        self._logger.setLevel(_coerce_level(level))
        self._logger.propagate = False

    def set_level(self, level: int | str) -> None:
        """Change the log level after creation."""
        self._logger.setLevel(_coerce_level(level))

    def _ensure_handlers(self) -> None:
        """Ensure handlers are configured (lazy initialization)."""
        if self._logger.handlers:
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        if self.log_format == "json":
            handler.setFormatter(JsonFormatter(service=self.name, component=self.component))
        else:
            handler.setFormatter(ConsoleFormatter(service=self.name, use_colors=None))

        self._logger.addHandler(handler)

    def _get_extra(self, extra: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get extra fields including context."""
        result: dict[str, Any] = {}

        ctx = get_current_context()
        if ctx:
            result.update(ctx.to_dict())
            if ctx.extra:
                result.update(ctx.extra)

        if extra:
            result.update(extra)

        return result

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: Any = None,
        **kwargs: Any,
    ) -> None:
        self._ensure_handlers()

        self._logger.log(
            level,
            msg,
            *args,
            exc_info=exc_info,
            extra=self._get_extra(kwargs),
        )

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an exception (includes stack trace)."""
        self._log(logging.ERROR, msg, *args, exc_info=True, **kwargs)


# Logger registry for singleton behavior
_loggers: dict[str, InquisitorLogger] = {}


def get_logger(
    name: str,
    level: int | str = logging.INFO,
    component: str | None = None,
) -> InquisitorLogger:
    """Get or create a logger by name.

    Loggers are cached by name, so calling get_logger with the same name
    returns the same logger instance.

    Args:
        name: Logger name (typically "release-inquisitor")
        level: Log level used when the logger is first created
        component: Optional component within the service

    Returns:
        InquisitorLogger instance
    """
    key = f"{name}:{component or ''}"

    if key not in _loggers:
        _loggers[key] = InquisitorLogger(name, level, component)

    return _loggers[key]


def configure_logging(
    level: int | str = logging.WARNING,
    log_format: str = "console",
) -> None:
    """Apply level and output format to every registered logger and the root logger.

    Called once by the CLI after argument parsing. Handlers are rebuilt so
    a format change takes effect for loggers created at import time.
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {log_format!r}")

    for logger in _loggers.values():
        logger.log_format = log_format
        logger.set_level(level)
        for handler in logger._logger.handlers[:]:
            logger._logger.removeHandler(handler)

    configure_root_logging(level=level, json_format=log_format == "json")


def configure_root_logging(
    level: int | str = logging.WARNING,
    json_format: bool = False,
) -> None:
    """Configure the root logger for third-party libraries.

    This captures logs from requests and urllib3 and formats them
    consistently.

    Args:
        level: Log level for root logger (default WARNING to reduce noise)
        json_format: Whether to use JSON format (default False)
    """
    root = logging.getLogger()
    root.setLevel(_coerce_level(level))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter(service="root"))
    else:
        handler.setFormatter(ConsoleFormatter(service="root"))

    root.addHandler(handler)
