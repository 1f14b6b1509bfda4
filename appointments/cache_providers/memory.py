"""Dict-backed CacheProvider for tests and local development."""

from __future__ import annotations

import copy
from typing import Any

from .base import CacheProvider


class InMemoryCacheProvider(CacheProvider):

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}

    def keys(self) -> list[str]:
        return list(self._store)

    async def save(self, key: str, value: Any) -> None:
        self._store[key] = copy.deepcopy(value)

    async def recover(self, key: str) -> Any | None:
        if key not in self._store:
            return None
        return copy.deepcopy(self._store[key])

    async def invalidate(self, key: str) -> None:
        self._store.pop(key, None)

    async def invalidate_prefix(self, prefix: str) -> int:
        doomed = [k for k in self._store if k.startswith(prefix)]
        for key in doomed:
            del self._store[key]
        return len(doomed)
