"""Redis cache provider.

Uses ``redis.asyncio`` so cache calls never block the event loop.  Values
are stored as JSON strings.  The connection URL is read from the
``REDIS_URL`` setting unless a client is passed in.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as aioredis

from appointments.config import settings

from .base import CacheProvider

log = logging.getLogger("appointments.cache_providers.redis")


class RedisCacheProvider(CacheProvider):
    """CacheProvider backed by a Redis server."""

    def __init__(
        self,
        client: aioredis.Redis | None = None,
        ttl_seconds: int | None = None,
    ) -> None:
        self._client = client or aioredis.from_url(
            settings.redis_url, decode_responses=True
        )
        self._ttl = settings.cache_ttl_seconds if ttl_seconds is None else ttl_seconds

    async def save(self, key: str, value: Any) -> None:
        payload = json.dumps(value, default=str)
        if self._ttl > 0:
            await self._client.set(key, payload, ex=self._ttl)
        else:
            await self._client.set(key, payload)

    async def recover(self, key: str) -> Any | None:
        data = await self._client.get(key)
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            return json.loads(data)
        except json.JSONDecodeError:
            log.warning("Discarding undecodable cache entry %s", key)
            await self._client.delete(key)
            return None

    async def invalidate(self, key: str) -> None:
        await self._client.delete(key)
        log.debug("Invalidated cache key %s", key)

    async def invalidate_prefix(self, prefix: str) -> int:
        keys = [key async for key in self._client.scan_iter(match=f"{prefix}*")]
        if not keys:
            return 0
        removed = await self._client.delete(*keys)
        log.debug("Invalidated %d cache keys under %s", removed, prefix)
        return removed

    async def close(self) -> None:
        await self._client.aclose()
