"""
Reusable validation functions for configuration values.

This module provides validators for:
- URLs (HTTP/HTTPS)
- Jira project keys
- Local directories
- Secret masking utilities
"""

import re
from pathlib import Path
from urllib.parse import urlparse


PROJECT_KEY_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def validate_url(url: str, *, require_https: bool = True) -> tuple[bool, str | None]:
    """Validate a URL.

    Args:
        url: The URL to validate
        require_https: If True, only HTTPS URLs are valid (default: True)

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    if not url:
        return False, "URL is empty"

    try:
        parsed = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if not parsed.scheme:
        return False, "URL missing scheme (http:// or https://)"

    if not parsed.netloc:
        return False, "URL missing host"

    if require_https and parsed.scheme != "https":
        return False, f"URL must use HTTPS, got {parsed.scheme}://"

    if parsed.scheme not in ("http", "https"):
        return False, f"URL scheme must be http or https, got {parsed.scheme}"

    return True, None


def validate_project_key(key: str) -> tuple[bool, str | None]:
    """Validate a Jira project key such as "FACT" or "PUP".

    Args:
        key: The project key to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    if not key:
        return False, "Project key is empty"

    if not PROJECT_KEY_PATTERN.match(key):
        return False, f"Project key must be letters, digits or underscores starting with a letter, got {key!r}"

    return True, None


def validate_directory(path: Path | str) -> tuple[bool, str | None]:
    """Validate that a path exists and is a directory.

    Args:
        path: The path to check

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    path = Path(path).expanduser()

    if not path.exists():
        return False, f"{path} does not exist"

    if not path.is_dir():
        return False, f"{path} is not a directory"

    return True, None


def validate_non_empty(value: str | None, field_name: str) -> tuple[bool, str | None]:
    """Validate that a value is not empty or None.

    Args:
        value: The value to check
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    if value is None:
        return False, f"{field_name} is not set"

    if not value.strip():
        return False, f"{field_name} is empty"

    return True, None


def mask_secret(value: str | None, *, visible_chars: int = 0) -> str:
    """Mask a secret value for safe display.

    Shows the first few characters followed by asterisks. Passwords show
    nothing by default.

    Args:
        value: The secret value to mask (can be None)
        visible_chars: Number of characters to show at the start

    Returns:
        Masked string like "****" or "[EMPTY]" if value is empty/None
    """
    if value is None or not value:
        return "[EMPTY]"

    if len(value) <= visible_chars:
        return "*" * len(value)

    return value[:visible_chars] + "*" * (len(value) - visible_chars)
