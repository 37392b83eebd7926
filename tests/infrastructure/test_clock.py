"""Tests for clock implementations."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from flavorhub.domain.daily import Clock
from flavorhub.infrastructure.clock import FixedClock, SystemClock


class TestSystemClock:
    def test_default_utc(self) -> None:
        clock = SystemClock()
        assert clock.timezone == "UTC"
        assert clock.today() == datetime.now(ZoneInfo("UTC")).date()

    def test_named_timezone(self) -> None:
        clock = SystemClock("Pacific/Kiritimati")
        assert clock.today() == datetime.now(ZoneInfo("Pacific/Kiritimati")).date()

    def test_unknown_timezone(self) -> None:
        with pytest.raises(ValueError, match="Unknown timezone: Mars/Olympus"):
            SystemClock("Mars/Olympus")

    def test_returns_date_not_datetime(self) -> None:
        today = SystemClock().today()
        assert type(today) is date


class TestFixedClock:
    def test_fixed(self) -> None:
        clock = FixedClock(date(2024, 2, 29))
        assert clock.today() == date(2024, 2, 29)
        assert clock.today() == clock.day

    def test_satisfies_protocol(self) -> None:
        clock: Clock = FixedClock(date(2024, 1, 1))
        assert clock.today().year == 2024
