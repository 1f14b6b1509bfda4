"""Pydantic models for provider notifications."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class CreateNotificationData(BaseModel):
    recipient_id: str
    content: str


class Notification(BaseModel):
    """A message waiting for its recipient.

    Delivery is handled elsewhere; the booking flow only creates these.
    """

    id: str
    recipient_id: str
    content: str
    read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
