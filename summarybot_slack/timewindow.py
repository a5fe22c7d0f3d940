# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Calendar-day window arithmetic in a user's timezone."""

from datetime import datetime, timedelta, timezone


def local_midnight(now: datetime, offset_seconds: int) -> datetime:
    """Return the UTC instant of the most recent local midnight.

    Args:
        now: Current instant, timezone-aware or naive UTC
        offset_seconds: The user's UTC offset in seconds (may be negative or
                        a fractional number of hours)
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    offset = timedelta(seconds=offset_seconds)
    local = (now.astimezone(timezone.utc) + offset).replace(hour=0, minute=0, second=0, microsecond=0)
    return local - offset


def today_window(now: float, offset_seconds: int) -> tuple[float, float]:
    """Return ``(start, end)`` epoch seconds covering the user's calendar day so far."""
    current = datetime.fromtimestamp(now, tz=timezone.utc)
    return local_midnight(current, offset_seconds).timestamp(), now
