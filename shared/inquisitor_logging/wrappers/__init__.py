"""
Tool wrappers for inquisitor_logging.

Wrapped versions of command-line tools that log invocations, capture
output, and record timing.

Usage:
    from inquisitor_logging.wrappers import git

    # Instead of subprocess.run(["git", "log", "--oneline", "2.0.2..HEAD"])
    result = git.log("2.0.2..HEAD", oneline=True)
"""

from .base import ToolResult, ToolWrapper
from .git import GitWrapper

# Singleton wrapper instance
git = GitWrapper()

__all__ = [
    "GitWrapper",
    "ToolResult",
    "ToolWrapper",
    "git",
]
