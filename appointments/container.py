"""Service wiring: builds every booking service around shared collaborators.

A transport layer (HTTP, queue consumer, CLI) calls ``create_services()``
once at startup and ``await services.close()`` on shutdown.  Collaborators
not passed in are built from settings: Redis for the cache, in-memory
stores for the repositories.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from appointments.cache_providers.base import CacheProvider
from appointments.cache_providers.redis import RedisCacheProvider
from appointments.config import settings
from appointments.repositories import (
    AppointmentRepository,
    InMemoryAppointmentRepository,
    InMemoryNotificationRepository,
    InMemoryUsersRepository,
    NotificationRepository,
    UsersRepository,
)
from appointments.services import (
    CreateAppointmentService,
    CreateUserService,
    ListProviderAppointmentsService,
    ListProvidersService,
)

log = logging.getLogger("appointments.container")


@dataclass
class Services:
    create_appointment: CreateAppointmentService
    list_provider_appointments: ListProviderAppointmentsService
    list_providers: ListProvidersService
    create_user: CreateUserService
    cache_provider: CacheProvider

    async def close(self) -> None:
        """Release connections held by the collaborators."""
        if isinstance(self.cache_provider, RedisCacheProvider):
            await self.cache_provider.close()
            log.info("Redis cache connection closed")


def create_services(
    appointments_repository: AppointmentRepository | None = None,
    notifications_repository: NotificationRepository | None = None,
    users_repository: UsersRepository | None = None,
    cache_provider: CacheProvider | None = None,
) -> Services:
    """Validate settings and build the services.

    Raises:
        ValueError: the configuration is unusable (see ``Settings.validate_startup``).
    """
    for warning in settings.validate_startup():
        log.warning("Config: %s", warning)

    appointments_repository = appointments_repository or InMemoryAppointmentRepository()
    notifications_repository = notifications_repository or InMemoryNotificationRepository()
    users_repository = users_repository or InMemoryUsersRepository()
    cache_provider = cache_provider or RedisCacheProvider()

    log.info(
        "Booking services ready (timezone=%s, business hours %d-%d, cache=%s)",
        settings.calendar_timezone,
        settings.business_hours_start,
        settings.business_hours_end,
        type(cache_provider).__name__,
    )

    return Services(
        create_appointment=CreateAppointmentService(
            appointments_repository, notifications_repository, cache_provider
        ),
        list_provider_appointments=ListProviderAppointmentsService(
            appointments_repository, cache_provider
        ),
        list_providers=ListProvidersService(users_repository, cache_provider),
        create_user=CreateUserService(users_repository, cache_provider),
        cache_provider=cache_provider,
    )
