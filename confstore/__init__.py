"""confstore: a process-wide, thread-safe configuration store."""

from .core.exceptions import ConfigurationIOError, ConfigurationStoreError
from .store import ConfigurationManager, Setting, get_configuration_manager

__version__ = "1.0.0"

__all__ = [
    "ConfigurationManager",
    "Setting",
    "get_configuration_manager",
    "ConfigurationStoreError",
    "ConfigurationIOError",
]
