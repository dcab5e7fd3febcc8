"""Environment variable utilities.

Helpers for reading store settings from the environment with
type conversion and default value handling.
"""

import os
from typing import Optional

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def parse_bool_env(key: str, default: bool = True) -> bool:
    """Parse a boolean value from an environment variable.

    Args:
        key: The environment variable name.
        default: Default value if the variable is unset or unrecognized.

    Returns:
        True for 'true', '1', 'yes' or 'on' (case-insensitive), False for
        'false', '0', 'no' or 'off', otherwise the default.

    Examples:
        >>> os.environ["CONFSTORE_WRITE_TIMESTAMP"] = "no"
        >>> parse_bool_env("CONFSTORE_WRITE_TIMESTAMP")
        False
        >>> parse_bool_env("UNSET_VAR", default=False)
        False
    """
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def parse_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Parse a string value from an environment variable.

    Blank values are treated as unset.

    Args:
        key: The environment variable name.
        default: Default value if the variable is unset or blank.

    Returns:
        The stripped string value, or the default.
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()
