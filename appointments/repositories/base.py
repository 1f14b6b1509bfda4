"""Abstract base classes for appointment, notification and user storage.

Any persistence backend (SQL, document store, in-memory) implements these
ABCs.  The booking service only ever talks to these interfaces.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from appointments.models import (
    Appointment,
    CreateAppointmentData,
    CreateNotificationData,
    CreateUserData,
    Notification,
    User,
)


class AppointmentRepository(ABC):
    """Abstract appointment store.

    Implementations must enforce uniqueness of ``(provider_id, date)``
    atomically inside ``create``: ``find_by_date`` alone cannot stop two
    concurrent requests from booking the same slot.
    """

    @abstractmethod
    async def find_by_date(
        self, date: datetime, provider_id: str
    ) -> Appointment | None:
        """Return the provider's appointment at exactly ``date``, if any.

        Args:
            date: Hour-truncated, timezone-aware slot start.
            provider_id: Provider whose calendar is searched.
        """

    @abstractmethod
    async def find_all_in_day_from_provider(
        self, provider_id: str, year: int, month: int, day: int
    ) -> list[Appointment]:
        """Return the provider's appointments on one calendar day, ordered by date."""

    @abstractmethod
    async def create(self, data: CreateAppointmentData) -> Appointment:
        """Persist a new appointment and return it with its assigned ``id``.

        Raises:
            SlotAlreadyBooked: ``(provider_id, date)`` is already taken.
        """


class NotificationRepository(ABC):
    """Abstract notification store."""

    @abstractmethod
    async def create(self, data: CreateNotificationData) -> Notification:
        """Persist a notification and return it with its assigned ``id``."""


class UsersRepository(ABC):
    """Abstract user store."""

    @abstractmethod
    async def find_all_providers(self, except_user_id: str | None = None) -> list[User]:
        """Return every user who can be booked, minus ``except_user_id``."""

    @abstractmethod
    async def create(self, data: CreateUserData) -> User:
        """Persist a new user and return it with its assigned ``id``."""
