"""
Jira configuration for the release audit.

Holds the tracker location and credentials used for the fixVersion query.
"""

import os
from dataclasses import dataclass
from typing import Any

from ..base import BaseConfig, ValidationResult
from ..utils import safe_int
from ..validators import mask_secret, validate_non_empty, validate_url


DEFAULT_BASE_URL = "https://tickets.puppetlabs.com"
REST_BASE_PATH = "/rest/api/2"

# One search page; larger releases are truncated
DEFAULT_MAX_RESULTS = 1000


@dataclass
class JiraConfig(BaseConfig):
    """Configuration for Jira access.

    Attributes:
        base_url: Jira instance URL (https://...)
        username: Jira account name
        password: Jira password; prompted for when not set
        max_results: maxResults sent with the search query
        request_timeout: HTTP request timeout in seconds
    """

    base_url: str = DEFAULT_BASE_URL
    username: str = ""
    password: str = ""
    max_results: int = DEFAULT_MAX_RESULTS
    request_timeout: int = 30

    @property
    def search_url(self) -> str:
        """URL of the issue search endpoint."""
        return f"{self.base_url.rstrip('/')}{REST_BASE_PATH}/search"

    def validate(self) -> ValidationResult:
        """Validate Jira configuration."""
        errors: list[str] = []
        warnings: list[str] = []

        is_valid, error = validate_non_empty(self.base_url, "base_url")
        if not is_valid:
            errors.append(error)
        else:
            is_valid, error = validate_url(self.base_url, require_https=True)
            if not is_valid:
                errors.append(f"base_url: {error}")

        is_valid, error = validate_non_empty(self.username, "JIRA_USERNAME")
        if not is_valid:
            errors.append(f"JIRA_USERNAME environment variable must be set ({error})")

        if self.max_results < 1:
            errors.append(f"max_results must be positive, got {self.max_results}")

        if self.request_timeout < 1:
            warnings.append(f"request_timeout of {self.request_timeout}s is unusable, requests may fail")

        if errors:
            return ValidationResult.invalid(errors, warnings)

        return ValidationResult.valid(warnings)

    def to_dict(self) -> dict[str, Any]:
        """Return config with secrets masked."""
        return {
            "base_url": self.base_url,
            "username": self.username,
            "password": mask_secret(self.password),
            "max_results": self.max_results,
            "request_timeout": self.request_timeout,
        }

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Load Jira configuration from environment variables.

        All settings use the JIRA_ prefix.
        """
        config = cls()

        config.base_url = os.environ.get("JIRA_BASE_URL", DEFAULT_BASE_URL)
        config.username = os.environ.get("JIRA_USERNAME", "")
        config.password = os.environ.get("JIRA_PASSWORD", "")
        config.request_timeout = safe_int(os.environ.get("JIRA_REQUEST_TIMEOUT"), 30)

        return config
