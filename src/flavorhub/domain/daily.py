"""Recipe of the day — deterministic date-seeded selection.

The seed combines year and day-of-year so that consecutive days pick
consecutive positions and the same day in different years still moves::

    seed = (year * 1000 + day_of_year) % len(recipes)

INVARIANT: Selection indexes by position. The result is only stable for
the whole day if the caller supplies the recipes in a stable order.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Protocol


class InvalidDateError(ValueError):
    """Raised when the selection date has no well-defined year/day-of-year."""


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date: ...


def as_date(today: object) -> date:
    """Calendar date of *today*; datetimes are truncated to their date.

    Raises:
        InvalidDateError: *today* is neither a date nor a datetime.
    """
    if isinstance(today, datetime):
        return today.date()
    if isinstance(today, date):
        return today
    msg = f"Expected a calendar date, got {type(today).__name__}: {today!r}"
    raise InvalidDateError(msg)


def date_seed(today: date) -> int:
    """Return ``year * 1000 + day_of_year`` for *today*.

    Examples:
        >>> date_seed(date(2024, 4, 9))
        2024100
        >>> date_seed(date(2024, 12, 31))
        2024366
    """
    day = as_date(today)
    return day.year * 1000 + day.timetuple().tm_yday


def select_daily[T](recipes: Sequence[T], today: date) -> T | None:
    """Pick the recipe of the day from *recipes*.

    Returns None when *recipes* is empty. Otherwise returns the element at
    ``date_seed(today) % len(recipes)``. The date is checked before the
    empty case so a bad date is never masked by an empty catalogue.

    Raises:
        InvalidDateError: *today* is not a ``date``.
    """
    seed = date_seed(today)
    if not recipes:
        return None
    return recipes[seed % len(recipes)]
