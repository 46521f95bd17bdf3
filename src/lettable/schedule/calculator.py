# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar-month (PCM) rent arithmetic.

The UK lettings convention bills a flat monthly rent derived from the weekly
rate (``pppw * 52 / 12``) and prorates partial months by the actual number of
days in that specific month. Ranges longer than one month are decomposed into
their calendar months and summed.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from pydantic import Field

from ..core.primitives import (
    CalendarMonth,
    Model,
    NonNegativeInt,
    ScheduleSettings,
    inclusive_days,
    iter_months,
)

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


def weeks_for_days(days: int) -> int:
    """Whole weeks covered by ``days``, rounded up (display only)."""
    return math.ceil(days / 7)


class RentAmount(Model):
    """
    Result of a rent calculation.

    Attributes:
        amount: Rent in pounds, rounded to the penny.
        days: Inclusive days the amount covers.
        weeks: Whole weeks the amount covers, rounded up.
    """

    amount: Decimal = Decimal("0.00")
    days: NonNegativeInt = 0
    weeks: NonNegativeInt = 0

    def __add__(self, other: "RentAmount") -> "RentAmount":
        days = self.days + other.days
        return RentAmount(
            amount=self.amount + other.amount, days=days, weeks=weeks_for_days(days)
        )


class RentPeriodCalculator(Model):
    """
    Stateless PCM rent calculator.

    Every method takes all of its inputs explicitly and returns a new
    ``RentAmount``; the only configuration is the immutable ``settings``.

    Examples:
        >>> calc = RentPeriodCalculator()
        >>> calc.monthly_rate_from_weekly(150)
        Decimal('650')
        >>> calc.amount_for_days(16, 150, 30).amount
        Decimal('346.67')
    """

    settings: ScheduleSettings = Field(default_factory=ScheduleSettings)

    @property
    def quantum(self) -> Decimal:
        return Decimal(1).scaleb(-self.settings.currency_precision)

    def round_money(self, value: Number) -> Decimal:
        """Round half-up to the configured currency precision."""
        return Decimal(str(value)).quantize(self.quantum, rounding=ROUND_HALF_UP)

    def monthly_rate_from_weekly(self, rent_pppw: Number) -> Decimal:
        """Unrounded calendar-month rent for a weekly rate."""
        return Decimal(str(rent_pppw)) * self.settings.weeks_per_year / 12

    def amount_for_days(
        self, days: int, rent_pppw: Number, days_in_month: int
    ) -> RentAmount:
        """
        Rent for ``days`` days of a month that has ``days_in_month`` days.

        A full month is billed at the flat monthly rate.
        """
        if days < 0 or days_in_month <= 0:
            raise ValueError(
                f"Invalid day counts: days={days}, days_in_month={days_in_month}"
            )
        monthly_rate = self.monthly_rate_from_weekly(rent_pppw)
        if days == days_in_month:
            amount = self.round_money(monthly_rate)
        else:
            amount = self.round_money(Decimal(days) / Decimal(days_in_month) * monthly_rate)
        return RentAmount(amount=amount, days=days, weeks=weeks_for_days(days))

    def amount_for_calendar_month(
        self,
        year: int,
        month: int,
        rent_pppw: Number,
        clamp_start: date,
        clamp_end: Optional[date],
    ) -> RentAmount:
        """
        Rent for the part of a calendar month that falls within the clamp.

        The denominator is always the full length of the calendar month, never
        the length of the clamped window.

        Args:
            year: Calendar year.
            month: Month number (1 = January).
            rent_pppw: Weekly rent.
            clamp_start: Earliest billable day (inclusive).
            clamp_end: Latest billable day (inclusive); ``None`` for open-ended.

        Returns:
            ``RentAmount`` with zero amount and days when the month lies
            entirely outside the clamp.
        """
        calendar_month = CalendarMonth(year=year, month=month)
        window = calendar_month.clamp(clamp_start, clamp_end)
        if window is None:
            return RentAmount()
        days = inclusive_days(*window)
        return self.amount_for_days(days, rent_pppw, calendar_month.days)

    def amount_across_months(
        self, start: date, end: date, rent_pppw: Number
    ) -> RentAmount:
        """
        Rent for an arbitrary inclusive date range.

        The range is decomposed into its constituent calendar months and the
        per-month amounts summed.

        Raises:
            ValueError: If ``end`` is before ``start``.
        """
        if end < start:
            raise ValueError(f"Period end {end} is before period start {start}")

        total = RentAmount()
        for calendar_month in iter_months(start, end):
            total = total + self.amount_for_calendar_month(
                calendar_month.year, calendar_month.month, rent_pppw, start, end
            )
        logger.debug(
            f"Rent {start} to {end} at {rent_pppw} pppw: {total.amount} over {total.days} days"
        )
        return total
