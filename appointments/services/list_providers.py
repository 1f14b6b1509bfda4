"""Cached read path: every provider a user can book, minus the user.

Each user gets their own cache entry.  ``CreateUserService`` clears all
of them at once when a new provider appears.
"""

from __future__ import annotations

import logging

from appointments.cache_keys import providers_list_key
from appointments.cache_providers.base import CacheProvider
from appointments.models import User
from appointments.repositories.base import UsersRepository

log = logging.getLogger("appointments.services.list_providers")


class ListProvidersService:

    def __init__(
        self, users_repository: UsersRepository, cache_provider: CacheProvider
    ) -> None:
        self._users = users_repository
        self._cache = cache_provider

    async def execute(self, user_id: str) -> list[User]:
        key = providers_list_key(user_id)

        cached = await self._cache.recover(key)
        if cached is not None:
            log.debug("Cache hit %s", key)
            return [User.model_validate(item) for item in cached]

        providers = await self._users.find_all_providers(except_user_id=user_id)
        await self._cache.save(key, [p.model_dump(mode="json") for p in providers])
        log.debug("Cached %d providers under %s", len(providers), key)
        return providers
