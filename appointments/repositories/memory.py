"""In-process repositories.

Used by the test-suite and for local development.  State lives in plain
lists guarded by an ``asyncio.Lock``; nothing is persisted across restarts.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime

from appointments.errors import SlotAlreadyBooked
from appointments.models import (
    Appointment,
    CreateAppointmentData,
    CreateNotificationData,
    CreateUserData,
    Notification,
    User,
)

from .base import AppointmentRepository, NotificationRepository, UsersRepository

log = logging.getLogger("appointments.repositories.memory")


class InMemoryAppointmentRepository(AppointmentRepository):
    """AppointmentRepository backed by a list.

    ``latency`` (seconds) is awaited before each lookup so tests can
    interleave concurrent bookings between the check and the write.
    """

    def __init__(self, latency: float = 0.0) -> None:
        self._appointments: list[Appointment] = []
        self._lock = asyncio.Lock()
        self._latency = latency

    @property
    def appointments(self) -> list[Appointment]:
        return list(self._appointments)

    def _find(self, date: datetime, provider_id: str) -> Appointment | None:
        for appointment in self._appointments:
            if appointment.provider_id == provider_id and appointment.date == date:
                return appointment
        return None

    async def find_by_date(
        self, date: datetime, provider_id: str
    ) -> Appointment | None:
        await asyncio.sleep(self._latency)
        return self._find(date, provider_id)

    async def find_all_in_day_from_provider(
        self, provider_id: str, year: int, month: int, day: int
    ) -> list[Appointment]:
        await asyncio.sleep(self._latency)
        found = [
            a
            for a in self._appointments
            if a.provider_id == provider_id
            and (a.date.year, a.date.month, a.date.day) == (year, month, day)
        ]
        return sorted(found, key=lambda a: a.date)

    async def create(self, data: CreateAppointmentData) -> Appointment:
        async with self._lock:
            # Unique (provider_id, date), checked and written under one lock
            if self._find(data.date, data.provider_id) is not None:
                log.warning(
                    "Rejected duplicate slot %s for provider %s",
                    data.date.isoformat(),
                    data.provider_id,
                )
                raise SlotAlreadyBooked()

            appointment = Appointment(id=str(uuid.uuid4()), **data.model_dump())
            self._appointments.append(appointment)
            return appointment


class InMemoryNotificationRepository(NotificationRepository):
    """NotificationRepository backed by a list."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    async def create(self, data: CreateNotificationData) -> Notification:
        notification = Notification(id=str(uuid.uuid4()), **data.model_dump())
        self._notifications.append(notification)
        return notification


class InMemoryUsersRepository(UsersRepository):
    """UsersRepository backed by a list, in insertion order."""

    def __init__(self) -> None:
        self._users: list[User] = []

    async def find_all_providers(self, except_user_id: str | None = None) -> list[User]:
        return [u for u in self._users if u.id != except_user_id]

    async def create(self, data: CreateUserData) -> User:
        user = User(id=str(uuid.uuid4()), **data.model_dump())
        self._users.append(user)
        return user
