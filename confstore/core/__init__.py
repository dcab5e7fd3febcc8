"""Core building blocks shared across the package."""

from .exceptions import ConfigurationStoreError, ConfigurationIOError
from .patterns import ThreadSafeSingleton

__all__ = [
    "ConfigurationStoreError",
    "ConfigurationIOError",
    "ThreadSafeSingleton",
]
