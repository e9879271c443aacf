"""Helpers for converting between dates and Zermelo's Unix timestamps."""

from datetime import date, datetime, time, timezone, tzinfo


def to_datetime(timestamp: int | None) -> datetime | None:
    """Convert a Unix timestamp (seconds, UTC) to an aware datetime."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def day_bounds(day: date, tz: tzinfo | None = None) -> tuple[int, int]:
    """Get the first and last second of a day as Unix timestamps.

    The result can be passed straight to ``Schedule.fetch_appointments``.

    Args:
        day: The day to cover
        tz: Time zone the day is in (the local zone when None)

    Returns:
        Tuple of (00:00:00, 23:59:59) timestamps
    """
    start = datetime.combine(day, time(0, 0, 0), tzinfo=tz)
    end = datetime.combine(day, time(23, 59, 59), tzinfo=tz)
    # Naive datetimes are interpreted in the local zone by timestamp()
    return int(start.timestamp()), int(end.timestamp())
