"""Pydantic models for appointment requests and stored appointments."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class AppointmentRequest(BaseModel):
    """What a client asks for. Nothing is checked on construction."""

    provider_id: str
    user_id: str
    date: datetime


class CreateAppointmentData(BaseModel):
    """Payload handed to ``AppointmentRepository.create``."""

    provider_id: str
    user_id: str
    date: datetime  # already truncated to the hour


class Appointment(BaseModel):
    """A booked slot. ``id`` is assigned by the repository."""

    id: str
    provider_id: str
    user_id: str
    date: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
