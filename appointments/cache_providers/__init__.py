"""Cache provider abstractions and implementations."""

from .base import CacheProvider
from .memory import InMemoryCacheProvider

__all__ = ["CacheProvider", "InMemoryCacheProvider"]
