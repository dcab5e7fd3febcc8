"""Thread-safe singleton pattern implementation.

This module provides a reusable base class for implementing the singleton
pattern with double-checked locking for thread safety.
"""

import logging
import threading
from abc import ABC
from typing import ClassVar, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='ThreadSafeSingleton')


class ThreadSafeSingleton(ABC):
    """Abstract base class for thread-safe singletons.

    Implements double-checked locking so that only one instance is ever
    created, even when many threads ask for it at the same time. The
    instance is fully initialized before it is published, so no caller can
    observe a half-built object.

    Usage:
        class MySingleton(ThreadSafeSingleton):
            def _initialize(self):
                # One-time initialization logic
                self.some_resource = create_resource()

        # Get instance (creates on first call)
        instance = MySingleton.get_instance()

    Note:
        Subclasses should implement `_initialize()` for one-time setup.
        Do NOT override `__new__` or `__init__` in subclasses.
    """

    _instance: ClassVar[Optional['ThreadSafeSingleton']] = None
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Each subclass owns its instance slot and lock
        cls._instance = None
        cls._lock = threading.RLock()

    def __new__(cls: type[T]) -> T:
        """Return the shared instance, creating it with double-checked locking."""
        instance = cls._instance
        if instance is None:
            with cls._lock:
                # Double-check after acquiring lock
                instance = cls._instance
                if instance is None:
                    instance = super().__new__(cls)
                    instance._initialize()
                    cls._instance = instance
                    logger.debug(f"{cls.__name__} instance created")
        return instance  # type: ignore

    def _initialize(self) -> None:
        """Override in subclasses for one-time initialization.

        This method is called exactly once, under the class lock, before
        the instance becomes visible to other callers.
        """
        pass

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Get the singleton instance.

        This is the preferred way to access the singleton.

        Returns:
            The singleton instance.
        """
        return cls()

    @classmethod
    def has_instance(cls) -> bool:
        """Return True if the instance has already been created."""
        return cls._instance is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (primarily for testing).

        Warning:
            This should only be used in tests. Handles obtained before the
            reset keep pointing at the old instance.
        """
        with cls._lock:
            if cls._instance is not None:
                try:
                    cls._instance._cleanup()
                except Exception as e:
                    logger.warning(f"Error during {cls.__name__} cleanup: {e}")
                cls._instance = None

    def _cleanup(self) -> None:
        """Override in subclasses for cleanup logic.

        Called when reset_instance() is invoked.
        """
        pass
