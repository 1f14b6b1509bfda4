"""Data models for the appointments layer."""

from .appointment import Appointment, AppointmentRequest, CreateAppointmentData
from .notification import CreateNotificationData, Notification
from .user import CreateUserData, User

__all__ = [
    "Appointment",
    "AppointmentRequest",
    "CreateAppointmentData",
    "CreateNotificationData",
    "CreateUserData",
    "Notification",
    "User",
]
