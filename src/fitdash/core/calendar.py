"""Pure calendar domain logic - no I/O dependencies.

Months are 0-indexed (0 = January) and weekdays start on Sunday (0 = Sunday).
"""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterator

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class CalendarCursor:
    """The (year, month) currently on display."""

    year: int
    month: int

    def __post_init__(self):
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be in 0..11, got {self.month}")

    @classmethod
    def today(cls, as_of: date | None = None) -> "CalendarCursor":
        as_of = as_of or date.today()
        return cls(as_of.year, as_of.month - 1)

    @classmethod
    def parse(cls, value: str) -> "CalendarCursor":
        """Parse 'YYYY-MM' (1-based month, as people write it)."""
        year, sep, month = value.strip().partition("-")
        if not sep or not year.isdigit() or not month.isdigit():
            raise ValueError(f"Expected YYYY-MM, got {value!r}")
        month_index = int(month) - 1
        if not 0 <= month_index <= 11:
            raise ValueError(f"Month out of range in {value!r}")
        return cls(int(year), month_index)

    def label(self) -> str:
        """Human-readable month heading, e.g. 'October 2026'."""
        return f"{calendar.month_name[self.month + 1]} {self.year}"


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 0-indexed month, Gregorian leap years included."""
    return calendar.monthrange(year, month + 1)[1]


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of day 1, with 0 = Sunday .. 6 = Saturday."""
    # calendar.weekday counts from Monday = 0
    return (calendar.weekday(year, month + 1, 1) + 1) % 7


def build_grid(year: int, month: int) -> Iterator[int | None]:
    """
    Yield the cells of a month view.

    Leading blanks (None) pad the first week up to day 1, then the day
    numbers follow. Each call starts over from year/month.
    """
    for _ in range(first_weekday_of_month(year, month)):
        yield None
    yield from range(1, days_in_month(year, month) + 1)


def weeks(year: int, month: int) -> list[list[int | None]]:
    """Split the month grid into rows of seven, padding the last row."""
    cells = list(build_grid(year, month))
    cells.extend([None] * (-len(cells) % 7))
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def shift_month(cursor: CalendarCursor, delta: int) -> CalendarCursor:
    """Move the cursor by delta months (either direction), carrying into the year."""
    carry, month = divmod(cursor.month + delta, 12)
    return CalendarCursor(cursor.year + carry, month)


class CalendarState:
    """Owns the calendar cursor for the calendar view."""

    def __init__(self, cursor: CalendarCursor | None = None):
        self.cursor = cursor or CalendarCursor.today()

    def shift(self, delta: int) -> CalendarCursor:
        self.cursor = shift_month(self.cursor, delta)
        return self.cursor

    def previous(self) -> CalendarCursor:
        return self.shift(-1)

    def next(self) -> CalendarCursor:
        return self.shift(1)

    def grid(self) -> list[list[int | None]]:
        return weeks(self.cursor.year, self.cursor.month)
