"""Cache key derivation for the cached read paths.

Provider-appointment keys are day-granular: every hourly slot a provider
has on the same calendar day maps to the same key.
"""

from __future__ import annotations

from datetime import date

from appointments.config import settings

# Every per-user providers listing lives under this prefix
PROVIDERS_LIST_PREFIX = "providers-list:"


def provider_appointments_key(
    provider_id: str, day: date, prefix: str | None = None
) -> str:
    """Return ``"<prefix>:<provider_id>:<year>-<month>-<day>"``.

    Month and day are not zero-padded (``2020-5-10``).  ``day`` may be a
    ``date`` or a ``datetime``; only its calendar date is used.
    """
    if prefix is None:
        prefix = settings.cache_key_prefix
    return f"{prefix}:{provider_id}:{day.year}-{day.month}-{day.day}"


def providers_list_key(user_id: str) -> str:
    """Key for the providers listing seen by ``user_id`` (everyone but them)."""
    return f"{PROVIDERS_LIST_PREFIX}{user_id}"
