"""Application configuration via environment variables."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings

log = logging.getLogger("appointments.config")


class Settings(BaseSettings):
    # Calendar
    calendar_timezone: str = "America/Sao_Paulo"

    # Business hours: allowed start-of-slot hours, both ends inclusive
    business_hours_start: int = 8
    business_hours_end: int = 19

    # Cache
    cache_key_prefix: str = "provider-appointments"
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl_seconds: int = 0  # 0 = keys never expire

    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        try:
            ZoneInfo(self.calendar_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f"CALENDAR_TIMEZONE {self.calendar_timezone!r} is not a known "
                "IANA timezone."
            )

        if not 0 <= self.business_hours_start <= self.business_hours_end <= 23:
            raise ValueError(
                "BUSINESS_HOURS_START/BUSINESS_HOURS_END must satisfy "
                f"0 <= start <= end <= 23 (got {self.business_hours_start}, "
                f"{self.business_hours_end})."
            )

        # Slots starting at 19:00 are accepted, although the user-facing copy
        # has always said "8am to 5pm". Surface it instead of correcting it.
        if self.business_hours_end > 17:
            warnings.append(
                f"BUSINESS_HOURS_END={self.business_hours_end} accepts slots "
                "starting after 17:00."
            )

        if not self.cache_key_prefix:
            warnings.append(
                "CACHE_KEY_PREFIX is empty: cache keys will start with ':'."
            )

        return warnings

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.calendar_timezone)


settings = Settings()
