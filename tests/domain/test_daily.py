"""Tests for the date-seeded recipe of the day selector."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from flavorhub.domain.daily import InvalidDateError, as_date, date_seed, select_daily

RECIPES = ["A", "B", "C"]


class TestDateSeed:
    def test_year_and_day_of_year(self) -> None:
        assert date_seed(date(2024, 4, 9)) == 2024100

    def test_first_day_of_year(self) -> None:
        assert date_seed(date(2025, 1, 1)) == 2025001

    def test_leap_year_last_day(self) -> None:
        assert date_seed(date(2024, 12, 31)) == 2024366

    def test_non_leap_year_last_day(self) -> None:
        assert date_seed(date(2023, 12, 31)) == 2023365

    def test_datetime_truncated(self) -> None:
        assert date_seed(datetime(2024, 4, 9, 23, 59, 59)) == 2024100

    def test_rejects_non_date(self) -> None:
        with pytest.raises(InvalidDateError):
            date_seed("2024-04-09")  # type: ignore[arg-type]


class TestAsDate:
    def test_date_passthrough(self) -> None:
        d = date(2024, 2, 29)
        assert as_date(d) is d

    def test_datetime_to_date(self) -> None:
        assert as_date(datetime(2024, 2, 29, 8, 30)) == date(2024, 2, 29)

    @pytest.mark.parametrize("value", [None, 20240409, "today", 1.5])
    def test_invalid_values(self, value: object) -> None:
        with pytest.raises(InvalidDateError):
            as_date(value)

    def test_invalid_date_error_is_value_error(self) -> None:
        assert issubclass(InvalidDateError, ValueError)


class TestSelectDaily:
    def test_empty_returns_none(self) -> None:
        assert select_daily([], date(2024, 4, 9)) is None

    def test_single_recipe_every_day(self) -> None:
        start = date(2024, 1, 1)
        for offset in range(400):
            assert select_daily(["only"], start + timedelta(days=offset)) == "only"

    def test_day_100_of_2024(self) -> None:
        # 2024100 % 3 == 0
        assert select_daily(RECIPES, date(2024, 4, 9)) == "A"

    def test_next_day_moves_on(self) -> None:
        # 2024101 % 3 == 1
        assert select_daily(RECIPES, date(2024, 4, 10)) == "B"

    def test_same_day_of_year_next_year(self) -> None:
        # 2025100 % 3 == 1
        assert select_daily(RECIPES, date(2025, 4, 10)) == "B"

    def test_leap_day_366(self) -> None:
        # 2024366 % 3 == 2
        assert select_daily(RECIPES, date(2024, 12, 31)) == "C"

    def test_deterministic(self) -> None:
        day = date(2026, 7, 14)
        picks = {select_daily(RECIPES, day) for _ in range(20)}
        assert len(picks) == 1

    def test_datetime_same_as_date(self) -> None:
        day = date(2024, 6, 1)
        morning = datetime(2024, 6, 1, 0, 0, 1)
        night = datetime(2024, 6, 1, 23, 59, 59)
        assert select_daily(RECIPES, morning) == select_daily(RECIPES, day)
        assert select_daily(RECIPES, night) == select_daily(RECIPES, day)

    def test_result_is_member(self) -> None:
        recipes = [f"r{i}" for i in range(7)]
        start = date(2023, 1, 1)
        for offset in range(0, 730, 13):
            assert select_daily(recipes, start + timedelta(days=offset)) in recipes

    def test_consecutive_days_cycle(self) -> None:
        recipes = list(range(5))
        start = date(2024, 3, 1)
        picks = [select_daily(recipes, start + timedelta(days=i)) for i in range(5)]
        assert sorted(picks) == recipes

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            select_daily(RECIPES, "2024-04-09")  # type: ignore[arg-type]

    def test_invalid_date_raises_even_when_empty(self) -> None:
        with pytest.raises(InvalidDateError):
            select_daily([], None)  # type: ignore[arg-type]

    def test_accepts_tuples(self) -> None:
        assert select_daily(("x", "y"), date(2024, 4, 9)) == "x"  # 2024100 is even
