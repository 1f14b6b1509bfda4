"""Appointment creation: the single place that decides whether a slot can be booked.

Pipeline for one request::

    normalize date -> validate -> find_by_date -> create
                   -> notify provider -> invalidate provider's day cache

Validation failures raise before anything is written.  Once the
appointment is stored, the notification and the cache invalidation are
best-effort: a failure is logged and the appointment is still returned.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable

from appointments import clock
from appointments.cache_keys import provider_appointments_key
from appointments.cache_providers.base import CacheProvider
from appointments.config import settings
from appointments.errors import (
    AppError,
    OutsideBusinessHours,
    PastDateNotAllowed,
    SelfBookingNotAllowed,
    SlotAlreadyBooked,
    StorageFailure,
)
from appointments.models import (
    Appointment,
    AppointmentRequest,
    CreateAppointmentData,
    CreateNotificationData,
)
from appointments.repositories.base import AppointmentRepository, NotificationRepository

log = logging.getLogger("appointments.services.create_appointment")


def notification_content(appointment_date: datetime) -> str:
    """Message sent to the provider, e.g. ``New appointment on 26 June at 11:00``."""
    return f"New appointment on {appointment_date.strftime('%d %B at %H:%M')}"


class CreateAppointmentService:
    """Book one appointment.

    Holds references to its collaborators and nothing else, so one
    instance can serve concurrent requests.

    Args:
        appointments_repository: Appointment store.  Must enforce unique
            ``(provider_id, date)`` inside ``create``.
        notifications_repository: Where the provider's notification goes.
        cache_provider: Cache holding the provider-appointments read path.
        now: Zero-arg callable returning the current instant.
        business_hours: ``(first, last)`` allowed slot start hours,
            inclusive.  Defaults to the configured window.
        tz: Calendar timezone used for naive datetimes and hour checks.
    """

    def __init__(
        self,
        appointments_repository: AppointmentRepository,
        notifications_repository: NotificationRepository,
        cache_provider: CacheProvider,
        *,
        now: Callable[[], datetime] | None = None,
        business_hours: tuple[int, int] | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self._appointments = appointments_repository
        self._notifications = notifications_repository
        self._cache = cache_provider
        self._now = now or clock.now
        self._business_hours = business_hours or (
            settings.business_hours_start,
            settings.business_hours_end,
        )
        self._tz = tz

    async def execute(self, request: AppointmentRequest) -> Appointment:
        """Validate and store the appointment, then run the side effects.

        Raises:
            SelfBookingNotAllowed: user and provider are the same.
            OutsideBusinessHours: slot hour outside the business window.
            PastDateNotAllowed: slot starts before now.
            SlotAlreadyBooked: the provider already has this slot.
            StorageFailure: the appointment store failed.
        """
        appointment_date = clock.start_of_hour(clock.localize(request.date, self._tz))
        provider_id = request.provider_id

        self._validate(request, appointment_date)

        try:
            existing = await self._appointments.find_by_date(appointment_date, provider_id)
            if existing is not None:
                log.warning(
                    "Slot %s already booked for provider %s",
                    appointment_date.isoformat(),
                    provider_id,
                )
                raise SlotAlreadyBooked()

            appointment = await self._appointments.create(
                CreateAppointmentData(
                    provider_id=provider_id,
                    user_id=request.user_id,
                    date=appointment_date,
                )
            )
        except AppError:
            raise
        except Exception as exc:
            log.exception("Appointment storage failed for provider %s", provider_id)
            raise StorageFailure() from exc

        log.info(
            "Created appointment %s for provider %s at %s",
            appointment.id,
            provider_id,
            appointment_date.isoformat(),
        )

        await self._notify_provider(provider_id, appointment_date)
        await self._invalidate_cache(provider_id, appointment_date)

        return appointment

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate(self, request: AppointmentRequest, appointment_date: datetime) -> None:
        if request.user_id == request.provider_id:
            log.warning("Rejected self-booking by %s", request.user_id)
            raise SelfBookingNotAllowed()

        first, last = self._business_hours
        if appointment_date.hour < first or appointment_date.hour > last:
            log.warning(
                "Rejected slot %s outside business hours %d-%d",
                appointment_date.isoformat(),
                first,
                last,
            )
            raise OutsideBusinessHours(
                f"You can only create appointments between {first}:00 and {last}:00."
            )

        if appointment_date < clock.localize(self._now(), self._tz):
            log.warning("Rejected past slot %s", appointment_date.isoformat())
            raise PastDateNotAllowed()

    async def _notify_provider(self, provider_id: str, appointment_date: datetime) -> None:
        try:
            await self._notifications.create(
                CreateNotificationData(
                    recipient_id=provider_id,
                    content=notification_content(appointment_date),
                )
            )
        except Exception:
            log.exception("Failed to notify provider %s", provider_id)

    async def _invalidate_cache(self, provider_id: str, appointment_date: datetime) -> None:
        key = provider_appointments_key(provider_id, appointment_date)
        try:
            await self._cache.invalidate(key)
        except Exception:
            log.exception("Failed to invalidate cache key %s", key)
            return
        log.info("Invalidated cache key %s", key)
