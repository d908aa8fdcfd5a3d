"""Clock helpers: the only place taskpad reads the system time."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from taskpad.models import ValidationError

Clock = Callable[[], datetime]


def get_system_timezone() -> str:
    """Detect the system timezone name (e.g. "Europe/Berlin")."""
    tz = tzlocal.get_localzone()
    return str(tz.key) if hasattr(tz, "key") else str(tz)


def system_now() -> datetime:
    """Return the current time as an aware datetime in the system's local zone."""
    return datetime.now(tzlocal.get_localzone())


def make_clock(timezone: str | None = None) -> Clock:
    """Build a clock for the given IANA timezone, or system local time when None."""
    if not timezone:
        return system_now
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {timezone}") from e

    def now() -> datetime:
        return datetime.now(tz)

    return now
