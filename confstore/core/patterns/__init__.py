"""Core patterns module.

Provides reusable design patterns for the application.
"""

from .singleton import ThreadSafeSingleton

__all__ = ["ThreadSafeSingleton"]
