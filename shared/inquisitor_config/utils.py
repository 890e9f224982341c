"""
Utility functions for configuration loading.
"""


def safe_int(value: str | None, default: int = 0) -> int:
    """Safely parse an integer from a string.

    Args:
        value: String to parse (can be None)
        default: Default value if parsing fails

    Returns:
        Parsed integer or default value
    """
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default
