"""Process-wide configuration store.

``ConfigurationManager`` is a lazily created, thread-safe singleton holding
a single mapping of string keys to string values, with persistence to a
flat ``key=value`` properties file.

Usage:
    >>> config = ConfigurationManager.get_instance()
    >>> config.set_setting("AppName", "My Application")
    >>> ConfigurationManager.get_instance().get_setting("AppName")
    'My Application'
"""

import logging
import sys
import threading
from datetime import datetime
from typing import Dict, List, Optional, TextIO

from pydantic import BaseModel, Field

from ..core.exceptions import ConfigurationIOError
from ..core.patterns import ThreadSafeSingleton
from .config import get_store_config
from .properties import dump_properties, parse_properties

logger = logging.getLogger(__name__)


class Setting(BaseModel):
    """A single key/value pair held by the store."""

    key: str = Field(..., description="Setting name")
    value: str = Field(..., description="Setting value")

    def __str__(self) -> str:
        return f"{self.key} = {self.value}"


class ConfigurationManager(ThreadSafeSingleton):
    """
    Shared key/value configuration store.

    There is exactly one instance per process. ``ConfigurationManager()``
    and ``ConfigurationManager.get_instance()`` both return it, creating it
    on first use.

    Every access to the mapping goes through one reentrant lock, so
    concurrent set/get/load/save calls never interleave mid-operation.

    Example:
        >>> first = ConfigurationManager.get_instance()
        >>> second = ConfigurationManager.get_instance()
        >>> first is second
        True
    """

    def _initialize(self) -> None:
        """Create the empty mapping and its lock."""
        self._settings: Dict[str, str] = {}
        self._settings_lock = threading.RLock()
        logger.info("ConfigurationManager initialized")

    def set_setting(self, key: str, value: str) -> None:
        """Insert or overwrite a setting. Empty strings are allowed."""
        with self._settings_lock:
            self._settings[key] = value

    def get_setting(self, key: str) -> Optional[str]:
        """Return the value for key, or None if it is not set."""
        with self._settings_lock:
            return self._settings.get(key)

    def get_all_settings(self) -> Dict[str, str]:
        """Return a snapshot copy of every setting."""
        with self._settings_lock:
            return dict(self._settings)

    def list_settings(self) -> List[Setting]:
        """Return every setting as a Setting, sorted by key."""
        snapshot = self.get_all_settings()
        return [Setting(key=key, value=snapshot[key]) for key in sorted(snapshot)]

    def print_all_settings(self, file: Optional[TextIO] = None) -> None:
        """Print a heading followed by one ``key = value`` line per setting."""
        out = file if file is not None else sys.stdout
        print("Current settings:", file=out)
        for setting in self.list_settings():
            print(setting, file=out)

    def save_to_file(self, path: Optional[str] = None) -> str:
        """
        Write every setting to a properties file.

        The file starts with the configured header comment and, unless
        disabled, a timestamp comment, followed by one ``key=value`` line
        per setting.

        Args:
            path: Destination file; defaults to the configured default path

        Returns:
            The path written to

        Raises:
            ConfigurationIOError: If the file cannot be opened or written
        """
        store_config = get_store_config()
        path = path or store_config.default_path
        snapshot = self.get_all_settings()
        timestamp = datetime.now() if store_config.write_timestamp else None

        try:
            with open(path, "w", encoding=store_config.encoding) as f:
                count = dump_properties(
                    snapshot,
                    f,
                    header=store_config.header,
                    timestamp=timestamp,
                )
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            raise ConfigurationIOError(
                f"Failed to save configuration to {path}: {e}",
                path=str(path),
                operation="save",
            ) from e

        logger.info(f"Saved {count} settings to {path}")
        return str(path)

    def load_from_file(self, path: Optional[str] = None) -> int:
        """
        Merge settings from a properties file into the store.

        Existing keys present in the file are overwritten; all other keys
        are left untouched. Comment lines and lines without a separator
        are ignored.

        Args:
            path: Source file; defaults to the configured default path

        Returns:
            Number of entries merged

        Raises:
            ConfigurationIOError: If the file is missing, unreadable or not
                valid text in the configured encoding
        """
        store_config = get_store_config()
        path = path or store_config.default_path

        try:
            with open(path, "r", encoding=store_config.encoding) as f:
                entries = parse_properties(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load configuration from {path}: {e}")
            raise ConfigurationIOError(
                f"Failed to load configuration from {path}: {e}",
                path=str(path),
                operation="load",
            ) from e

        with self._settings_lock:
            self._settings.update(entries)

        logger.info(f"Loaded {len(entries)} settings from {path}")
        return len(entries)

    def _cleanup(self) -> None:
        with self._settings_lock:
            self._settings.clear()

    def __repr__(self) -> str:
        with self._settings_lock:
            return f"ConfigurationManager(settings={len(self._settings)})"


def get_configuration_manager() -> ConfigurationManager:
    """Get the shared ConfigurationManager instance."""
    return ConfigurationManager.get_instance()


__all__ = [
    "Setting",
    "ConfigurationManager",
    "get_configuration_manager",
]
