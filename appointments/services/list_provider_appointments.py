"""Cached read path: a provider's appointments for one calendar day.

Results are cached under the same day key ``CreateAppointmentService``
invalidates, so a new booking is visible on the next read.
"""

from __future__ import annotations

import logging
from datetime import date

from appointments.cache_keys import provider_appointments_key
from appointments.cache_providers.base import CacheProvider
from appointments.models import Appointment
from appointments.repositories.base import AppointmentRepository

log = logging.getLogger("appointments.services.list_provider_appointments")


class ListProviderAppointmentsService:

    def __init__(
        self,
        appointments_repository: AppointmentRepository,
        cache_provider: CacheProvider,
    ) -> None:
        self._appointments = appointments_repository
        self._cache = cache_provider

    async def execute(
        self, provider_id: str, year: int, month: int, day: int
    ) -> list[Appointment]:
        key = provider_appointments_key(provider_id, date(year, month, day))

        cached = await self._cache.recover(key)
        if cached is not None:
            log.debug("Cache hit %s", key)
            return [Appointment.model_validate(item) for item in cached]

        appointments = await self._appointments.find_all_in_day_from_provider(
            provider_id, year, month, day
        )
        await self._cache.save(key, [a.model_dump(mode="json") for a in appointments])
        log.debug("Cached %d appointments under %s", len(appointments), key)
        return appointments
