# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent schedule generators, one per billing cadence.

Each generator turns tenancy dates and a weekly rate into an ordered list of
rent ``ScheduleEntry`` records using ``RentPeriodCalculator``. Generators are
a closed set keyed by ``ScheduleKindEnum``; ``AnyCadenceSchedule`` is the
discriminated union used to resolve a kind to its generator, so an unknown
cadence is rejected rather than defaulted.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional, Union

from dateutil.relativedelta import relativedelta
from pydantic import Field, TypeAdapter
from typing_extensions import Annotated

from ..core.primitives import (
    CalendarMonth,
    Model,
    PaymentOptionEnum,
    PaymentTypeEnum,
    ScheduleKindEnum,
    day_before,
)
from .calculator import Number, RentAmount, RentPeriodCalculator
from .errors import UnknownPaymentOptionError
from .terms import ScheduleEntry

logger = logging.getLogger(__name__)

# Academic-year quarters: Jul-Sep, Oct-Dec, Jan-Mar, Apr-Jun
QUARTER_START_MONTHS = (7, 10, 1, 4)

QUARTER_LABELS: Dict[int, str] = {
    7: "July-September",
    10: "October-December",
    1: "January-March",
    4: "April-June",
}

# Quarter that a start on the 1st of these months anchors to. Starting on the
# 1st of November or December still anchors to the October quarter; any
# other start rolls forward to the next quarter boundary.
FIRST_OF_MONTH_QUARTER_ANCHORS: Dict[int, int] = {
    7: 7,
    10: 10,
    11: 10,
    12: 10,
    1: 1,
    4: 4,
}

# Months billed individually under the monthly-to-quarterly cadence
HYBRID_MONTHLY_MONTHS = (7, 8, 9)
HYBRID_QUARTER_MONTHS = (10, 1, 4)


def quarter_start_for(day: date) -> date:
    """First day of the academic-year quarter containing ``day``."""
    month = ((day.month - 1) // 3) * 3 + 1
    return date(day.year, month, 1)


def anchor_quarter(start_date: date) -> date:
    """
    First quarter boundary a quarterly schedule bills from.

    A tenancy starting exactly on the 1st of a quarter-start month anchors to
    that quarter (as do 1 November and 1 December, which anchor to October).
    Any other start anchors to the following quarter.
    """
    if start_date.day == 1 and start_date.month in FIRST_OF_MONTH_QUARTER_ANCHORS:
        return date(
            start_date.year, FIRST_OF_MONTH_QUARTER_ANCHORS[start_date.month], 1
        )
    return quarter_start_for(start_date) + relativedelta(months=3)


def quarter_label(quarter_start: date) -> str:
    return f"{QUARTER_LABELS[quarter_start.month]} {quarter_start.year}"


def make_rent_entry(
    rent: RentAmount,
    due_date: date,
    covers_from: date,
    covers_to: date,
    description: str,
) -> ScheduleEntry:
    return ScheduleEntry(
        payment_type=PaymentTypeEnum.RENT,
        due_date=due_date,
        amount_due=rent.amount,
        covers_from=covers_from,
        covers_to=covers_to,
        description=description,
        days=rent.days,
        weeks=rent.weeks,
    )


def calendar_month_entry(
    calendar_month: CalendarMonth,
    start_date: date,
    end_date: Optional[date],
    rent_pppw: Number,
    calculator: RentPeriodCalculator,
    due_date: Optional[date] = None,
    description: Optional[str] = None,
) -> Optional[ScheduleEntry]:
    """
    Rent entry for one calendar month clamped to the tenancy.

    Args:
        calendar_month: Month being billed.
        start_date: Tenancy start (clamp lower bound).
        end_date: Tenancy end (clamp upper bound); ``None`` for open-ended.
        rent_pppw: Weekly rent.
        calculator: Calculator to use.
        due_date: Defaults to the 1st of the month.
        description: Defaults to the month label, e.g. ``October 2025``.

    Returns:
        The entry, or ``None`` if the clamped month bills nothing.
    """
    window = calendar_month.clamp(start_date, end_date)
    if window is None:
        return None
    rent = calculator.amount_for_calendar_month(
        calendar_month.year, calendar_month.month, rent_pppw, start_date, end_date
    )
    if rent.amount <= 0:
        return None
    return make_rent_entry(
        rent,
        due_date=due_date or calendar_month.start,
        covers_from=window[0],
        covers_to=window[1],
        description=description or calendar_month.label,
    )


def partial_first_month_entry(
    start_date: date,
    end_date: date,
    rent_pppw: Number,
    calculator: RentPeriodCalculator,
) -> Optional[ScheduleEntry]:
    """Partial first month for a mid-month start, due on the start date."""
    calendar_month = CalendarMonth.containing(start_date)
    return calendar_month_entry(
        calendar_month,
        start_date,
        end_date,
        rent_pppw,
        calculator,
        due_date=start_date,
        description=f"{calendar_month.label} (partial)",
    )


def quarter_entry(
    quarter_start: date,
    start_date: date,
    end_date: date,
    rent_pppw: Number,
    calculator: RentPeriodCalculator,
    due_date: Optional[date] = None,
) -> Optional[ScheduleEntry]:
    """Three-month block opening at ``quarter_start``, clamped to the tenancy."""
    quarter_end = day_before(quarter_start + relativedelta(months=3))
    covers_from = max(quarter_start, start_date)
    covers_to = min(quarter_end, end_date)
    if covers_from > covers_to:
        return None
    rent = calculator.amount_across_months(covers_from, covers_to, rent_pppw)
    if rent.amount <= 0:
        return None
    return make_rent_entry(
        rent,
        due_date=due_date or quarter_start,
        covers_from=covers_from,
        covers_to=covers_to,
        description=quarter_label(quarter_start),
    )


class CadenceSchedule(Model, ABC):
    """
    Base class for all rent schedule generators.

    Uses template method pattern - ``generate`` validates the inputs and logs
    the result, while each subclass implements its alignment rules in
    ``_generate``.
    """

    kind: ScheduleKindEnum

    def generate(
        self,
        start_date: date,
        end_date: Optional[date],
        rent_pppw: Number,
        calculator: Optional[RentPeriodCalculator] = None,
    ) -> List[ScheduleEntry]:
        """
        Generate the rent entries for one member.

        Args:
            start_date: Tenancy start date.
            end_date: Tenancy end date (ignored by rolling monthly).
            rent_pppw: Weekly rent for the member.
            calculator: Calculator to use; a default PCM calculator if omitted.

        Returns:
            Rent entries ordered by due date, without description prefixes.

        Raises:
            ValueError: If the dates are missing or out of order.
        """
        calculator = calculator or RentPeriodCalculator()
        if self.requires_end_date:
            if end_date is None:
                raise ValueError(f"{self.kind.value} schedules require an end date")
            if end_date < start_date:
                raise ValueError(
                    f"Tenancy end {end_date} is before tenancy start {start_date}"
                )

        entries = self._generate(start_date, end_date, Decimal(str(rent_pppw)), calculator)
        logger.debug(
            f"Generated {len(entries)} {self.kind.value} rent entries from {start_date} to {end_date}"
        )
        return entries

    @property
    def requires_end_date(self) -> bool:
        return True

    @abstractmethod
    def _generate(
        self,
        start_date: date,
        end_date: Optional[date],
        rent_pppw: Decimal,
        calculator: RentPeriodCalculator,
    ) -> List[ScheduleEntry]:
        pass


class MonthlySchedule(CadenceSchedule):
    """
    One entry per calendar month.

    A tenancy starting after the 1st gets a partial first entry due on the
    start date; every later entry is due on the 1st of its month.

    Example:
        >>> entries = MonthlySchedule().generate(date(2025, 9, 15), date(2026, 6, 30), 150)
        >>> entries[0].description, str(entries[0].amount_due)
        ('September 2025 (partial)', '346.67')
    """

    kind: Literal[ScheduleKindEnum.MONTHLY] = ScheduleKindEnum.MONTHLY

    def _generate(self, start_date, end_date, rent_pppw, calculator):
        entries: List[ScheduleEntry] = []
        current = CalendarMonth.containing(start_date)

        if start_date.day > 1:
            entry = partial_first_month_entry(start_date, end_date, rent_pppw, calculator)
            if entry is not None:
                entries.append(entry)
            current = current.shift(1)

        while current.start <= end_date:
            entry = calendar_month_entry(current, start_date, end_date, rent_pppw, calculator)
            if entry is not None:
                entries.append(entry)
            current = current.shift(1)

        return entries


class QuarterlySchedule(CadenceSchedule):
    """
    One entry per academic-year quarter (Jul-Sep, Oct-Dec, Jan-Mar, Apr-Jun).

    A start that does not anchor to its own quarter is billed up to the next
    quarter boundary as a single ``Until quarter start`` entry due on the
    start date. The first quarter entry is due on the later of the quarter
    start and the tenancy start; the rest on the quarter's first day.
    """

    kind: Literal[ScheduleKindEnum.QUARTERLY] = ScheduleKindEnum.QUARTERLY

    def _generate(self, start_date, end_date, rent_pppw, calculator):
        entries: List[ScheduleEntry] = []
        first_quarter = anchor_quarter(start_date)

        if start_date < first_quarter:
            period_end = min(day_before(first_quarter), end_date)
            rent = calculator.amount_across_months(start_date, period_end, rent_pppw)
            if rent.amount > 0:
                entries.append(
                    make_rent_entry(
                        rent,
                        due_date=start_date,
                        covers_from=start_date,
                        covers_to=period_end,
                        description="Until quarter start",
                    )
                )

        quarter_start = first_quarter
        is_first_quarter = True
        while quarter_start <= end_date:
            due_date = max(quarter_start, start_date) if is_first_quarter else quarter_start
            entry = quarter_entry(
                quarter_start, start_date, end_date, rent_pppw, calculator, due_date=due_date
            )
            if entry is not None:
                entries.append(entry)
                is_first_quarter = False
            quarter_start = quarter_start + relativedelta(months=3)

        return entries


class MonthlyToQuarterlySchedule(CadenceSchedule):
    """
    July, August and September billed monthly; October, January and April
    each open a three-month block.

    Months inside a block are not billed independently. A tenancy that begins
    inside a block (e.g. mid-November) has no preceding block entry, so the
    uncovered months up to the next block are billed monthly instead.
    """

    kind: Literal[ScheduleKindEnum.MONTHLY_TO_QUARTERLY] = (
        ScheduleKindEnum.MONTHLY_TO_QUARTERLY
    )

    def _generate(self, start_date, end_date, rent_pppw, calculator):
        entries: List[ScheduleEntry] = []
        current = CalendarMonth.containing(start_date)

        if start_date.day > 1:
            entry = partial_first_month_entry(start_date, end_date, rent_pppw, calculator)
            if entry is not None:
                entries.append(entry)
            current = current.shift(1)

        # Last day billed by a block entry, if any
        covered_until: Optional[date] = None

        while current.start <= end_date:
            if current.month in HYBRID_QUARTER_MONTHS:
                entry = quarter_entry(current.start, start_date, end_date, rent_pppw, calculator)
                if entry is not None:
                    entries.append(entry)
                    covered_until = entry.covers_to
                current = current.shift(3)
                continue

            already_covered = covered_until is not None and current.start <= covered_until
            if current.month in HYBRID_MONTHLY_MONTHS or not already_covered:
                entry = calendar_month_entry(current, start_date, end_date, rent_pppw, calculator)
                if entry is not None:
                    entries.append(entry)
            current = current.shift(1)

        return entries


class UpfrontSchedule(CadenceSchedule):
    """A single entry covering the whole tenancy, due on the start date."""

    kind: Literal[ScheduleKindEnum.UPFRONT] = ScheduleKindEnum.UPFRONT

    def _generate(self, start_date, end_date, rent_pppw, calculator):
        rent = calculator.amount_across_months(start_date, end_date, rent_pppw)
        return [
            make_rent_entry(
                rent,
                due_date=start_date,
                covers_from=start_date,
                covers_to=end_date,
                description="Full tenancy (upfront)",
            )
        ]


class RollingMonthlySchedule(CadenceSchedule):
    """
    First obligation of an open-ended rolling monthly tenancy.

    Only the first period is generated here; later months are produced by the
    continuation job through ``lettable.schedule.rolling``. Rolling payments
    are always due on the 1st, so a mid-month start is combined with the
    whole following month into one entry due on the 1st of that month.
    """

    kind: Literal[ScheduleKindEnum.ROLLING_MONTHLY] = ScheduleKindEnum.ROLLING_MONTHLY

    @property
    def requires_end_date(self) -> bool:
        return False

    def _generate(self, start_date, end_date, rent_pppw, calculator):
        # Deferred: rolling imports the month helpers from this module
        from .rolling import first_period_entry

        entry = first_period_entry(start_date, rent_pppw, calculator)
        return [] if entry is None else [entry]


# Union type for all rent schedules, using discriminator for type differentiation
AnyCadenceSchedule = Annotated[
    Union[
        MonthlySchedule,
        QuarterlySchedule,
        MonthlyToQuarterlySchedule,
        UpfrontSchedule,
        RollingMonthlySchedule,
    ],
    Field(discriminator="kind"),
]

_CADENCE_ADAPTER = TypeAdapter(AnyCadenceSchedule)


def schedule_for_kind(kind: Union[ScheduleKindEnum, str]) -> CadenceSchedule:
    """
    Resolve a schedule kind to its generator.

    Raises:
        UnknownPaymentOptionError: If ``kind`` is not a known schedule kind.
    """
    try:
        kind = ScheduleKindEnum(kind)
    except ValueError as e:
        raise UnknownPaymentOptionError(f"Unknown payment option: {kind!r}") from e
    return _CADENCE_ADAPTER.validate_python({"kind": kind})


def cadence_for(payment_option: Union[PaymentOptionEnum, str]) -> CadenceSchedule:
    """
    Resolve a member's payment option to its fixed-term generator.

    Only the four member-electable cadences are accepted; rolling monthly is
    chosen by the tenancy, not the member.

    Raises:
        UnknownPaymentOptionError: If ``payment_option`` is not recognised.
    """
    try:
        option = PaymentOptionEnum(payment_option)
    except ValueError as e:
        raise UnknownPaymentOptionError(
            f"Unknown payment option: {payment_option!r}"
        ) from e
    return schedule_for_kind(option.value)


def generate_payment_schedule(
    start_date: date,
    end_date: date,
    payment_option: Union[PaymentOptionEnum, str],
    rent_pppw: Number,
    calculator: Optional[RentPeriodCalculator] = None,
) -> List[ScheduleEntry]:
    """
    Generate a fixed-term rent schedule for one member.

    Example:
        >>> entries = generate_payment_schedule(
        ...     date(2025, 9, 1), date(2026, 8, 31), "monthly", 150
        ... )
        >>> len(entries)
        12
    """
    return cadence_for(payment_option).generate(start_date, end_date, rent_pppw, calculator)
