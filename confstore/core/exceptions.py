"""
Custom exceptions for the configuration store.
"""

from typing import Optional, Dict, Any


class ConfigurationStoreError(Exception):
    """Base exception for configuration store errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationIOError(ConfigurationStoreError, OSError):
    """
    Raised when a configuration file cannot be written, opened or read.

    Subclasses OSError so callers catching IOError keep working.
    """

    def __init__(self, message: str, path: Optional[str] = None, operation: Optional[str] = None):
        self.path = path
        self.operation = operation
        super().__init__(
            message=message,
            details={"path": path, "operation": operation},
        )


__all__ = [
    "ConfigurationStoreError",
    "ConfigurationIOError",
]
