"""
inquisitor_logging - Structured logging for release-inquisitor.

Usage:
    from inquisitor_logging import get_logger, ContextScope

    logger = get_logger("release-inquisitor")

    # Simple logging
    logger.info("Fetched known tickets", ticket_count=42)

    # With context scope (all logs in scope include context)
    with ContextScope(project="FACT", fix_version="2.1.0"):
        logger.info("Reconciling")

    # Tool wrappers
    from inquisitor_logging.wrappers import git

    result = git.log("2.0.2..HEAD", oneline=True, no_merges=True)
    # Logged with exit code and timing

Features:
    - Human-readable console output on stderr, JSON lines on request
    - Run context (project, fix version, repository) on every record
    - Logged git invocations
"""

from .context import (
    ContextScope,
    LogContext,
    get_current_context,
    set_current_context,
)
from .formatters import ConsoleFormatter, JsonFormatter, detect_color_support
from .logger import (
    LOG_FORMATS,
    InquisitorLogger,
    configure_logging,
    configure_root_logging,
    get_logger,
)


__all__ = [
    "LOG_FORMATS",
    "ConsoleFormatter",
    "ContextScope",
    # Logger classes
    "InquisitorLogger",
    # Formatters (for advanced use)
    "JsonFormatter",
    # Context management
    "LogContext",
    # Configuration
    "configure_logging",
    "configure_root_logging",
    "detect_color_support",
    "get_current_context",
    # Primary API
    "get_logger",
    "set_current_context",
]

__version__ = "0.1.0"
