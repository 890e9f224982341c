"""
Configuration framework for release-inquisitor.

This module provides:
- BaseConfig: Abstract base class for service configurations
- ValidationResult: Result of configuration validation
- JiraConfig, ReleaseConfig: the two configs a run is built from
- Validators: Reusable validation functions

Usage:
    from inquisitor_config import JiraConfig
    from inquisitor_config.validators import mask_secret

    config = JiraConfig.from_env()
    result = config.validate()
    if not result.is_valid:
        print("Configuration errors found")
"""

from .base import (
    BaseConfig,
    ConfigStatus,
    ValidationResult,
)
from .configs import JiraConfig, ReleaseConfig


__all__ = [
    "BaseConfig",
    "ConfigStatus",
    "JiraConfig",
    "ReleaseConfig",
    "ValidationResult",
]
