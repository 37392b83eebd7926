"""Clock implementations supplying "today" to the service layer."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class SystemClock:
    """Current calendar date in a configured IANA timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        try:
            self._tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {timezone}"
            raise ValueError(msg) from exc
        self.timezone = timezone

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock:
    """Always reports the same day."""

    def __init__(self, day: date) -> None:
        self.day = day

    def today(self) -> date:
        return self.day
