"""Environment variable utilities.

Parsing helpers with type conversion and default handling, used by the
holder configuration.
"""

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)


def parse_float_env(key: str, default: float) -> float:
    """Parse a float value from an environment variable.

    Args:
        key: The environment variable name.
        default: Default value if the environment variable is unset, blank
            or invalid.

    Returns:
        The float value from the environment variable, or the default.
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid float for {key}: {value!r}")
        return default


def parse_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Parse a string value from an environment variable."""
    return os.getenv(key, default)


def parse_list_env(key: str, default: List[str]) -> List[str]:
    """Parse a comma-separated list from an environment variable.

    Blank items are dropped, so ``"FOO,,BAR "`` yields ``["FOO", "BAR"]``.

    Examples:
        >>> os.environ["DEMO_VALUES"] = "FOO, BAR"
        >>> parse_list_env("DEMO_VALUES", [])
        ['FOO', 'BAR']
        >>> parse_list_env("UNSET_VAR", ["x"])
        ['x']
    """
    value = os.getenv(key)
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]
