"""Helpers for producing the timestamps stored on entities."""

from __future__ import annotations

from datetime import datetime, timezone


def to_iso_timestamp(value: datetime) -> str:
    """Render ``value`` as a UTC ISO-8601 string with millisecond precision.

    The fixed-width ``YYYY-MM-DDTHH:MM:SS.mmmZ`` layout keeps timestamps
    ordered when they are compared as plain strings.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc_value = value.astimezone(timezone.utc)
    return utc_value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_value.microsecond // 1000:03d}Z"


def now_iso_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 timestamp."""

    return to_iso_timestamp(datetime.now(tz=timezone.utc))
