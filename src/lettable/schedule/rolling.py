# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rolling monthly tenancies.

Rolling tenancies have no fixed end date and are always billed on the 1st of
the month. The engine generates only the first obligation when the tenancy is
approved; a continuation job bills each following month in advance using
``rolling_entry_for_month``. The helpers here are pure: the job owns the
clock, the database and the duplicate checks.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.primitives import CalendarMonth
from .calculator import Number, RentPeriodCalculator
from .cadence import calendar_month_entry, make_rent_entry
from .terms import ScheduleEntry

logger = logging.getLogger(__name__)


def first_period_entry(
    start_date: date,
    rent_pppw: Number,
    calculator: Optional[RentPeriodCalculator] = None,
) -> Optional[ScheduleEntry]:
    """
    First rent obligation of a rolling monthly tenancy.

    Starting on the 1st bills that full month, due on the start date.
    Starting mid-month bills the partial start month together with the whole
    following month as one entry due on the 1st of the following month, so a
    tenant is never charged twice in the same due-date cycle.

    Args:
        start_date: Tenancy start date.
        rent_pppw: Weekly rent.
        calculator: Calculator to use; a default PCM calculator if omitted.

    Returns:
        The entry, or ``None`` if the rent works out to zero.

    Example:
        >>> entry = first_period_entry(date(2025, 9, 10), 150)
        >>> entry.due_date, entry.covers_to
        (datetime.date(2025, 10, 1), datetime.date(2025, 10, 31))
    """
    calculator = calculator or RentPeriodCalculator()
    prefix = calculator.settings.rent_description_prefix
    start_month = CalendarMonth.containing(start_date)

    if start_date.day == 1:
        return calendar_month_entry(
            start_month,
            start_date,
            start_month.end,
            rent_pppw,
            calculator,
            due_date=start_date,
            description=f"{prefix}{start_month.label}",
        )

    next_month = start_month.shift(1)
    partial = calculator.amount_for_calendar_month(
        start_month.year, start_month.month, rent_pppw, start_date, start_month.end
    )
    full = calculator.amount_for_calendar_month(
        next_month.year, next_month.month, rent_pppw, next_month.start, next_month.end
    )
    combined = partial + full
    if combined.amount <= 0:
        return None

    logger.debug(
        f"Rolling first period from {start_date}: {partial.amount} partial + {full.amount} full"
    )
    return make_rent_entry(
        combined,
        due_date=next_month.start,
        covers_from=start_date,
        covers_to=next_month.end,
        description=f"{prefix}{start_month.label} (partial) & {next_month.label}",
    )


def is_covered_by_first_period(year: int, month: int, start_date: date) -> bool:
    """
    Whether a month is already billed by the combined first-period entry.

    Only mid-month starts combine two months; for those, the start month and
    the month after it are both covered.
    """
    if start_date.day == 1:
        return False
    start_month = CalendarMonth.containing(start_date)
    target = CalendarMonth(year=year, month=month)
    return target in (start_month, start_month.shift(1))


def rolling_month_entry(
    year: int,
    month: int,
    start_date: date,
    end_date: Optional[date],
    rent_pppw: Number,
    calculator: Optional[RentPeriodCalculator] = None,
) -> Optional[ScheduleEntry]:
    """
    Standard continuation entry for one month of a rolling tenancy.

    Due on the 1st of the month and covering the month clamped to the
    tenancy. ``end_date`` is set once notice has been given; ``None`` means
    the tenancy is ongoing.

    Returns:
        The entry, or ``None`` when the month lies wholly outside the tenancy
        or bills nothing.
    """
    calculator = calculator or RentPeriodCalculator()
    prefix = calculator.settings.rent_description_prefix
    target = CalendarMonth(year=year, month=month)
    return calendar_month_entry(
        target,
        start_date,
        end_date,
        rent_pppw,
        calculator,
        due_date=target.start,
        description=f"{prefix}{target.label}",
    )


def rolling_entry_for_month(
    year: int,
    month: int,
    start_date: date,
    end_date: Optional[date],
    rent_pppw: Number,
    calculator: Optional[RentPeriodCalculator] = None,
) -> Optional[ScheduleEntry]:
    """
    Entry the continuation job should create for a target month.

    Months a mid-month start combines into the first period get the combined
    first-period entry (the job skips it if that entry already exists);
    every other month gets the standard month entry.
    """
    if is_covered_by_first_period(year, month, start_date):
        return first_period_entry(start_date, rent_pppw, calculator)
    return rolling_month_entry(year, month, start_date, end_date, rent_pppw, calculator)


def next_billing_month(today: date) -> CalendarMonth:
    """Month the continuation job bills in advance: the one after ``today``."""
    return CalendarMonth.containing(today).shift(1)
