"""Failure kinds raised by the booking services.

Every failure a caller can observe is an ``AppError``.  ``status_code`` is
a hint for whatever transport layer sits on top; the services never look
at it.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for all booking failures."""

    status_code: int = 400
    default_message: str = "Appointment could not be created."

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class SelfBookingNotAllowed(AppError):
    default_message = "You can't create an appointment with yourself."


class OutsideBusinessHours(AppError):
    default_message = "You can only create appointments between 8am and 7pm."


class PastDateNotAllowed(AppError):
    default_message = "You can't create an appointment on a past date."


class SlotAlreadyBooked(AppError):
    status_code = 409
    default_message = "This appointment is already booked."


class StorageFailure(AppError):
    status_code = 500
    default_message = "Appointment storage is unavailable."
