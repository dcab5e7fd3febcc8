"""Package-wide constants and configuration defaults.

This module centralizes default values used by the store, its file format
and the demonstration entry point.
"""

# =============================================================================
# Persistence Defaults
# =============================================================================
DEFAULT_PROPERTIES_PATH = "app.properties"
DEFAULT_HEADER = "App Configuration"
DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Properties File Format
# =============================================================================
KEY_VALUE_SEPARATOR = "="
COMMENT_PREFIXES = ("#", "!")
# Timestamp comment written under the header, e.g. "Mon Oct 19 14:03:11 2026"
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y"

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
