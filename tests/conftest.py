# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Lettable testing.

This module provides convenient utilities for creating tenancy and member
terms without repeating every field, plus schedule shape assertions.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

import pytest

from lettable.schedule import (
    MemberBillingTerms,
    RentPeriodCalculator,
    ScheduleEntry,
    TenancyTerms,
)


# Terms Utilities
def create_tenancy(
    start_date: date = date(2025, 9, 1),
    end_date: Optional[date] = date(2026, 8, 31),
    is_rolling_monthly: bool = False,
    manage_rent: bool = True,
    tenancy_id: int = 1,
) -> TenancyTerms:
    """
    Create tenancy terms for testing.

    Defaults to a 12-month academic-year tenancy starting 1 September 2025.
    Rolling tenancies drop the end date automatically.
    """
    return TenancyTerms(
        start_date=start_date,
        end_date=None if is_rolling_monthly else end_date,
        is_rolling_monthly=is_rolling_monthly,
        manage_rent=manage_rent,
        tenancy_id=tenancy_id,
    )


def create_member(
    rent_pppw: str = "150",
    payment_option: Optional[str] = "monthly",
    deposit_amount: str = "500",
    member_id: int = 1,
) -> MemberBillingTerms:
    """Create member billing terms for testing (150 pppw is 650.00 pcm)."""
    return MemberBillingTerms(
        rent_per_person_per_week=Decimal(rent_pppw),
        payment_option=payment_option,
        deposit_amount=Decimal(deposit_amount),
        member_id=member_id,
    )


def assert_contiguous(entries: List[ScheduleEntry], start: date, end: date) -> None:
    """Rent coverage must tile ``[start, end]`` with no gap and no overlap."""
    assert entries, "expected at least one rent entry"
    assert entries[0].covers_from == start
    assert entries[-1].covers_to == end
    for previous, current in zip(entries, entries[1:]):
        assert current.covers_from == previous.covers_to + timedelta(days=1), (
            f"{previous.description} and {current.description} are not contiguous"
        )


def assert_due_dates_non_decreasing(entries: List[ScheduleEntry]) -> None:
    due_dates = [e.due_date for e in entries]
    assert due_dates == sorted(due_dates)


@pytest.fixture
def calculator() -> RentPeriodCalculator:
    return RentPeriodCalculator()


@pytest.fixture
def academic_year_tenancy() -> TenancyTerms:
    return create_tenancy()


@pytest.fixture
def tenancy_factory():
    return create_tenancy


@pytest.fixture
def member_factory():
    return create_member


@pytest.fixture
def contiguous():
    return assert_contiguous


@pytest.fixture
def non_decreasing():
    return assert_due_dates_non_decreasing
