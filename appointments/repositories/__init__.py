"""Storage abstractions and implementations."""

from .base import AppointmentRepository, NotificationRepository, UsersRepository
from .memory import (
    InMemoryAppointmentRepository,
    InMemoryNotificationRepository,
    InMemoryUsersRepository,
)

__all__ = [
    "AppointmentRepository",
    "NotificationRepository",
    "UsersRepository",
    "InMemoryAppointmentRepository",
    "InMemoryNotificationRepository",
    "InMemoryUsersRepository",
]
