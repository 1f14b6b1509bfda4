"""Abstract base class for cache providers.

Values are JSON-compatible data (dicts, lists, strings, numbers); callers
serialize their models before saving.
"""

from abc import ABC, abstractmethod
from typing import Any


class CacheProvider(ABC):
    """Abstract key/value cache."""

    @abstractmethod
    async def save(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    async def recover(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None on a miss."""

    @abstractmethod
    async def invalidate(self, key: str) -> None:
        """Drop ``key``. Missing keys are not an error."""

    @abstractmethod
    async def invalidate_prefix(self, prefix: str) -> int:
        """Drop every key starting with ``prefix``.

        Returns:
            Number of keys removed.
        """
