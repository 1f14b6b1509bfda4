"""User registration as seen by the booking layer.

A new user is a new bookable provider, so every cached providers listing
goes stale.  Clearing them is best-effort, like the side effects of
``CreateAppointmentService``.
"""

from __future__ import annotations

import logging

from appointments.cache_keys import PROVIDERS_LIST_PREFIX
from appointments.cache_providers.base import CacheProvider
from appointments.models import CreateUserData, User
from appointments.repositories.base import UsersRepository

log = logging.getLogger("appointments.services.create_user")


class CreateUserService:

    def __init__(
        self, users_repository: UsersRepository, cache_provider: CacheProvider
    ) -> None:
        self._users = users_repository
        self._cache = cache_provider

    async def execute(self, data: CreateUserData) -> User:
        user = await self._users.create(data)
        log.info("Created user %s", user.id)

        try:
            removed = await self._cache.invalidate_prefix(PROVIDERS_LIST_PREFIX)
        except Exception:
            log.exception("Failed to invalidate %s* cache keys", PROVIDERS_LIST_PREFIX)
        else:
            log.info("Invalidated %d providers listings", removed)

        return user
