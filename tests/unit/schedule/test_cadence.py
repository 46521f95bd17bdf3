# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the billing cadence generators."""

from datetime import date
from decimal import Decimal

import pytest

from lettable.core.primitives import PaymentTypeEnum, ScheduleKindEnum
from lettable.schedule import (
    MonthlySchedule,
    MonthlyToQuarterlySchedule,
    QuarterlySchedule,
    RollingMonthlySchedule,
    UnknownPaymentOptionError,
    UpfrontSchedule,
    anchor_quarter,
    cadence_for,
    generate_payment_schedule,
    schedule_for_kind,
)


def amounts(entries):
    return [e.amount_due for e in entries]


def due_dates(entries):
    return [e.due_date for e in entries]


class TestMonthlySchedule:
    """Tests for MonthlySchedule."""

    def test_academic_year(self, contiguous):
        entries = MonthlySchedule().generate(date(2025, 9, 1), date(2026, 8, 31), 150)

        assert len(entries) == 12
        assert all(e.payment_type == PaymentTypeEnum.RENT for e in entries)
        assert amounts(entries) == [Decimal("650.00")] * 12
        assert all(e.due_date.day == 1 for e in entries)
        assert entries[0].description == "September 2025"
        assert entries[-1].description == "August 2026"
        contiguous(entries, date(2025, 9, 1), date(2026, 8, 31))

    def test_partial_first_and_last_month(self, contiguous):
        entries = MonthlySchedule().generate(date(2025, 9, 15), date(2025, 11, 14), 150)

        assert due_dates(entries) == [date(2025, 9, 15), date(2025, 10, 1), date(2025, 11, 1)]
        assert amounts(entries) == [
            Decimal("346.67"),
            Decimal("650.00"),
            Decimal("303.33"),
        ]
        assert entries[0].description == "September 2025 (partial)"
        assert entries[0].days == 16
        assert entries[-1].covers_to == date(2025, 11, 14)
        contiguous(entries, date(2025, 9, 15), date(2025, 11, 14))

    def test_within_a_single_month(self):
        entries = MonthlySchedule().generate(date(2025, 9, 15), date(2025, 9, 20), 150)
        assert len(entries) == 1
        assert entries[0].amount_due == Decimal("130.00")
        assert entries[0].covers_to == date(2025, 9, 20)

    def test_zero_rent_produces_no_entries(self):
        assert MonthlySchedule().generate(date(2025, 9, 1), date(2026, 8, 31), 0) == []

    def test_requires_end_date(self):
        with pytest.raises(ValueError, match="require an end date"):
            MonthlySchedule().generate(date(2025, 9, 1), None, 150)

    def test_end_before_start(self):
        with pytest.raises(ValueError):
            MonthlySchedule().generate(date(2025, 9, 1), date(2025, 8, 1), 150)

    def test_serialization(self):
        assert MonthlySchedule().model_dump(mode="json") == {"kind": "monthly"}


class TestAnchorQuarter:
    """Tests for quarter anchoring."""

    @pytest.mark.parametrize(
        "start, expected",
        [
            (date(2025, 7, 1), date(2025, 7, 1)),
            (date(2025, 10, 1), date(2025, 10, 1)),
            (date(2025, 11, 1), date(2025, 10, 1)),
            (date(2025, 12, 1), date(2025, 10, 1)),
            (date(2026, 1, 1), date(2026, 1, 1)),
            (date(2026, 4, 1), date(2026, 4, 1)),
            (date(2025, 8, 1), date(2025, 10, 1)),
            (date(2025, 8, 5), date(2025, 10, 1)),
            (date(2025, 10, 15), date(2026, 1, 1)),
            (date(2025, 12, 20), date(2026, 1, 1)),
            (date(2026, 5, 1), date(2026, 7, 1)),
        ],
    )
    def test_anchor(self, start, expected):
        assert anchor_quarter(start) == expected


class TestQuarterlySchedule:
    """Tests for QuarterlySchedule."""

    def test_aligned_start(self, contiguous):
        entries = QuarterlySchedule().generate(date(2025, 7, 1), date(2026, 6, 30), 150)

        assert [e.description for e in entries] == [
            "July-September 2025",
            "October-December 2025",
            "January-March 2026",
            "April-June 2026",
        ]
        assert amounts(entries) == [Decimal("1950.00")] * 4
        assert due_dates(entries) == [
            date(2025, 7, 1),
            date(2025, 10, 1),
            date(2026, 1, 1),
            date(2026, 4, 1),
        ]
        contiguous(entries, date(2025, 7, 1), date(2026, 6, 30))

    def test_mid_quarter_start_bills_until_quarter_start(self, contiguous, non_decreasing):
        entries = QuarterlySchedule().generate(date(2025, 8, 5), date(2026, 6, 30), 150)

        first = entries[0]
        assert first.description == "Until quarter start"
        assert first.due_date == date(2025, 8, 5)
        assert first.covers_to == date(2025, 9, 30)
        assert first.amount_due == Decimal("1216.13")
        assert entries[1].description == "October-December 2025"
        assert entries[1].due_date == date(2025, 10, 1)
        assert len(entries) == 4
        contiguous(entries, date(2025, 8, 5), date(2026, 6, 30))
        non_decreasing(entries)

    def test_first_of_november_anchors_to_october_quarter(self, contiguous):
        entries = QuarterlySchedule().generate(date(2025, 11, 1), date(2026, 6, 30), 150)

        first = entries[0]
        assert first.description == "October-December 2025"
        assert first.due_date == date(2025, 11, 1)
        assert first.covers_from == date(2025, 11, 1)
        assert first.amount_due == Decimal("1300.00")
        assert len(entries) == 3
        contiguous(entries, date(2025, 11, 1), date(2026, 6, 30))

    def test_mid_october_start(self, contiguous):
        entries = QuarterlySchedule().generate(date(2025, 10, 15), date(2026, 6, 30), 150)

        assert entries[0].description == "Until quarter start"
        assert entries[0].amount_due == Decimal("1656.45")
        assert entries[1].description == "January-March 2026"
        contiguous(entries, date(2025, 10, 15), date(2026, 6, 30))

    def test_end_inside_quarter(self, contiguous):
        entries = QuarterlySchedule().generate(date(2025, 7, 1), date(2025, 11, 14), 150)

        assert amounts(entries) == [Decimal("1950.00"), Decimal("953.33")]
        assert entries[-1].covers_to == date(2025, 11, 14)
        contiguous(entries, date(2025, 7, 1), date(2025, 11, 14))

    def test_tenancy_ends_before_first_quarter(self):
        entries = QuarterlySchedule().generate(date(2025, 8, 5), date(2025, 9, 10), 150)

        assert len(entries) == 1
        assert entries[0].description == "Until quarter start"
        assert entries[0].covers_to == date(2025, 9, 10)
        assert entries[0].amount_due == Decimal("782.80")


class TestMonthlyToQuarterlySchedule:
    """Tests for the hybrid monthly-to-quarterly cadence."""

    def test_academic_year(self, contiguous):
        entries = MonthlyToQuarterlySchedule().generate(
            date(2025, 7, 1), date(2026, 6, 30), 150
        )

        assert [e.description for e in entries] == [
            "July 2025",
            "August 2025",
            "September 2025",
            "October-December 2025",
            "January-March 2026",
            "April-June 2026",
        ]
        assert amounts(entries) == [Decimal("650.00")] * 3 + [Decimal("1950.00")] * 3
        assert sum(amounts(entries)) == Decimal("7800.00")
        contiguous(entries, date(2025, 7, 1), date(2026, 6, 30))

    def test_mid_september_start(self, contiguous):
        entries = MonthlyToQuarterlySchedule().generate(
            date(2025, 9, 15), date(2026, 6, 30), 150
        )

        assert entries[0].description == "September 2025 (partial)"
        assert entries[0].amount_due == Decimal("346.67")
        assert entries[1].description == "October-December 2025"
        assert len(entries) == 4
        contiguous(entries, date(2025, 9, 15), date(2026, 6, 30))

    def test_start_inside_block_bills_gap_monthly(self, contiguous):
        """Mid-November start: December is billed on its own before January."""
        entries = MonthlyToQuarterlySchedule().generate(
            date(2025, 11, 15), date(2026, 6, 30), 150
        )

        assert [e.description for e in entries] == [
            "November 2025 (partial)",
            "December 2025",
            "January-March 2026",
            "April-June 2026",
        ]
        assert entries[0].amount_due == Decimal("346.67")
        assert entries[1].amount_due == Decimal("650.00")
        assert entries[1].due_date == date(2025, 12, 1)
        contiguous(entries, date(2025, 11, 15), date(2026, 6, 30))

    def test_end_inside_block(self, contiguous):
        entries = MonthlyToQuarterlySchedule().generate(
            date(2025, 7, 1), date(2025, 11, 14), 150
        )

        assert len(entries) == 4
        assert entries[-1].description == "October-December 2025"
        assert entries[-1].amount_due == Decimal("953.33")
        contiguous(entries, date(2025, 7, 1), date(2025, 11, 14))


class TestUpfrontSchedule:
    """Tests for UpfrontSchedule."""

    def test_single_entry(self):
        entries = UpfrontSchedule().generate(date(2025, 9, 1), date(2025, 11, 30), 150)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.description == "Full tenancy (upfront)"
        assert entry.due_date == date(2025, 9, 1)
        assert entry.amount_due == Decimal("1950.00")
        assert entry.days == 91
        assert entry.weeks == 13

    def test_matches_monthly_total(self):
        start, end = date(2025, 9, 15), date(2026, 6, 20)
        upfront = UpfrontSchedule().generate(start, end, 150)
        monthly = MonthlySchedule().generate(start, end, 150)
        assert upfront[0].amount_due == sum(amounts(monthly))

    def test_zero_rent_still_yields_entry(self):
        entries = UpfrontSchedule().generate(date(2025, 9, 1), date(2026, 8, 31), 0)
        assert len(entries) == 1
        assert entries[0].amount_due == Decimal("0.00")


class TestDispatch:
    """Tests for resolving payment options to generators."""

    @pytest.mark.parametrize(
        "option, expected",
        [
            ("monthly", MonthlySchedule),
            ("quarterly", QuarterlySchedule),
            ("monthly_to_quarterly", MonthlyToQuarterlySchedule),
            ("upfront", UpfrontSchedule),
        ],
    )
    def test_cadence_for(self, option, expected):
        assert isinstance(cadence_for(option), expected)

    def test_unknown_option(self):
        with pytest.raises(UnknownPaymentOptionError, match="weekly"):
            cadence_for("weekly")

    def test_unknown_option_is_value_error(self):
        with pytest.raises(ValueError):
            cadence_for("fortnightly")

    def test_rolling_is_not_a_member_option(self):
        with pytest.raises(UnknownPaymentOptionError):
            cadence_for("rolling_monthly")

    def test_schedule_for_kind(self):
        schedule = schedule_for_kind("rolling_monthly")
        assert isinstance(schedule, RollingMonthlySchedule)
        assert schedule.kind == ScheduleKindEnum.ROLLING_MONTHLY
        assert isinstance(schedule_for_kind(ScheduleKindEnum.UPFRONT), UpfrontSchedule)

    def test_generate_payment_schedule(self):
        entries = generate_payment_schedule(
            date(2025, 9, 1), date(2026, 8, 31), "monthly", Decimal("150")
        )
        assert len(entries) == 12

    def test_same_inputs_same_output(self):
        args = (date(2025, 8, 5), date(2026, 6, 30), "quarterly", 150)
        assert generate_payment_schedule(*args) == generate_payment_schedule(*args)
