"""
Configuration classes for release-inquisitor.

- JiraConfig: tracker location and credentials
- ReleaseConfig: repository, revision range and fixVersion under audit
"""

from .jira import JiraConfig
from .release import ReleaseConfig


__all__ = [
    "JiraConfig",
    "ReleaseConfig",
]
