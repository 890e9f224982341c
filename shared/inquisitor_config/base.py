"""
Base classes and types for the configuration framework.

This module provides:
- ConfigStatus: Enum for validation states (VALID, INVALID)
- ValidationResult: Result of config validation with errors/warnings
- BaseConfig: Abstract base class for all config classes
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ConfigStatus(Enum):
    """Status of configuration validation."""

    VALID = "valid"
    INVALID = "invalid"


@dataclass
class ValidationResult:
    """Result of validating a configuration.

    Attributes:
        status: Overall validation status
        errors: List of validation errors (config is invalid if non-empty)
        warnings: List of validation warnings (config may work but has issues)
    """

    status: ConfigStatus
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if config is valid (no errors)."""
        return self.status == ConfigStatus.VALID

    @classmethod
    def valid(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a valid result with optional warnings."""
        return cls(
            status=ConfigStatus.VALID,
            warnings=warnings or [],
        )

    @classmethod
    def invalid(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create an invalid result with errors."""
        return cls(
            status=ConfigStatus.INVALID,
            errors=errors,
            warnings=warnings or [],
        )


class BaseConfig(ABC):
    """Abstract base class for configurations.

    Config classes inherit from this and implement:
    - validate(): Check if the configuration is valid
    - to_dict(): Return config as dict with secrets masked
    - from_env(): Class method to load config from environment
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Validate the configuration.

        Returns:
            ValidationResult with status, errors, and warnings
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return configuration as a dictionary with secrets masked.

        Sensitive values (passwords, tokens) should be replaced with masked
        values like "****".

        Returns:
            Dictionary representation of the config
        """
        ...

    @classmethod
    @abstractmethod
    def from_env(cls) -> "BaseConfig":
        """Load configuration from environment variables.

        Returns:
            New instance of the config class
        """
        ...
