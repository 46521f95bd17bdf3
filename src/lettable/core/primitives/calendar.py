# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Optional, Tuple

from dateutil.relativedelta import relativedelta
from pydantic import Field

from .model import Model

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class CalendarMonth(Model):
    """
    A single calendar month, the unit every rent calculation is built from.

    Attributes:
        year: Calendar year.
        month: Month number (1 = January).

    Examples:
        >>> from datetime import date
        >>> from lettable.core.primitives import CalendarMonth
        >>>
        >>> feb = CalendarMonth.containing(date(2024, 2, 14))
        >>> feb.days
        29
        >>> feb.label
        'February 2024'

        Clamp a month to a tenancy that starts mid-month:

        >>> feb.clamp(date(2024, 2, 10), date(2024, 8, 31))
        (datetime.date(2024, 2, 10), datetime.date(2024, 2, 29))
    """

    year: int = Field(ge=1)
    month: int = Field(ge=1, le=12)

    @classmethod
    def containing(cls, day: date) -> "CalendarMonth":
        """The calendar month a given date falls in."""
        return cls(year=day.year, month=day.month)

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return self.start + relativedelta(day=31)

    @property
    def days(self) -> int:
        """Number of days in the month (28-31)."""
        return self.end.day

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def label(self) -> str:
        """Display label, e.g. ``September 2025``."""
        return f"{self.name} {self.year}"

    def shift(self, months: int) -> "CalendarMonth":
        """Return the month ``months`` after (or before, if negative) this one."""
        return CalendarMonth.containing(self.start + relativedelta(months=months))

    def clamp(self, start: date, end: Optional[date]) -> Optional[Tuple[date, date]]:
        """
        Intersect this month with ``[start, end]``.

        Args:
            start: Lower bound (inclusive).
            end: Upper bound (inclusive); ``None`` means open-ended.

        Returns:
            The ``(first_day, last_day)`` of the overlap, or ``None`` if the
            month lies entirely outside the range.
        """
        effective_start = max(self.start, start)
        effective_end = self.end if end is None else min(self.end, end)
        if effective_start > effective_end:
            return None
        return effective_start, effective_end

    def __str__(self) -> str:
        return self.label


def inclusive_days(start: date, end: date) -> int:
    """Days from ``start`` to ``end`` counting both endpoints."""
    return (end - start).days + 1


def iter_months(start: date, end: date) -> Iterator[CalendarMonth]:
    """
    Iterate over every calendar month that overlaps ``[start, end]``.

    The sequence is finite and restartable: each call yields a fresh
    month-by-month walk from the month containing ``start``.
    """
    current = CalendarMonth.containing(start)
    while current.start <= end:
        yield current
        current = current.shift(1)


def day_before(day: date) -> date:
    return day - timedelta(days=1)
