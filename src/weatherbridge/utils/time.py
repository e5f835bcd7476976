# src/weatherbridge/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for turning provider epoch timestamps into
    location-local values. Every helper accepts a missing or unknown
    timezone name and falls back to UTC instead of raising.
    """

    @staticmethod
    def resolve_timezone(timezone_name: str | None) -> tzinfo:
        """Look up an IANA timezone, UTC when missing or unknown.

        Args:
            timezone_name: IANA name such as ``America/New_York``

        Returns:
            tzinfo for the zone
        """
        if not timezone_name:
            return UTC
        try:
            return ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            return UTC

    @classmethod
    def to_local_datetime(cls, timestamp: int, timezone_name: str | None = None) -> datetime:
        """Convert POSIX timestamp to local datetime.

        Args:
            timestamp: POSIX timestamp
            timezone_name: Timezone name

        Returns:
            Localized datetime object
        """
        return datetime.fromtimestamp(timestamp, tz=cls.resolve_timezone(timezone_name))

    @classmethod
    def to_local_iso(cls, timestamp: int | None, timezone_name: str | None = None) -> str | None:
        """ISO-8601 string for a timestamp in the given zone, None when missing."""
        if timestamp is None:
            return None
        return cls.to_local_datetime(timestamp, timezone_name).isoformat()

    @classmethod
    def day_of_week(cls, timestamp: int, timezone_name: str | None = None) -> str:
        """Full weekday name (e.g. ``Monday``) of a timestamp in the given zone."""
        return cls.to_local_datetime(timestamp, timezone_name).strftime("%A")
