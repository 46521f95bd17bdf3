# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Deposit intake, deposit return, and holding-deposit credit.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from ..core.primitives import PaymentTypeEnum, ScheduleSettings
from .calculator import RentPeriodCalculator
from .errors import DuplicateDepositReturnError
from .terms import MemberBillingTerms, ScheduleEntry, TenancyTerms

logger = logging.getLogger(__name__)


def deposit_entry(
    tenancy: TenancyTerms,
    member: MemberBillingTerms,
    settings: Optional[ScheduleSettings] = None,
) -> Optional[ScheduleEntry]:
    """
    Security deposit for one member, due ahead of the tenancy start, rounded
    to the currency precision.

    Returns:
        The entry, or ``None`` if the member holds no deposit.
    """
    settings = settings or ScheduleSettings()
    if member.deposit_amount <= 0:
        return None
    amount = RentPeriodCalculator(settings=settings).round_money(member.deposit_amount)
    return ScheduleEntry(
        payment_type=PaymentTypeEnum.DEPOSIT,
        due_date=tenancy.start_date - timedelta(days=settings.deposit_lead_days),
        amount_due=amount,
        description=settings.deposit_description,
        member_id=member.member_id,
    )


def schedule_deposit_returns(
    tenancy: TenancyTerms,
    members: Sequence[MemberBillingTerms],
    key_return_date: date,
    existing_entries: Iterable[ScheduleEntry] = (),
    settings: Optional[ScheduleSettings] = None,
) -> List[ScheduleEntry]:
    """
    Deposit refunds once the keys are back.

    One negative entry per member holding a deposit, due a fixed number of
    days after key return. Generation may happen only once per tenancy.

    Args:
        tenancy: Tenancy the deposits belong to.
        members: All members of the tenancy.
        key_return_date: Date the keys were returned.
        existing_entries: Entries already scheduled for the tenancy.
        settings: Schedule settings; defaults reproduce production.

    Returns:
        The refund entries; empty if no member holds a deposit.

    Raises:
        DuplicateDepositReturnError: If ``existing_entries`` already contains
            a deposit return.
    """
    settings = settings or ScheduleSettings()
    if any(e.payment_type == PaymentTypeEnum.DEPOSIT_RETURN for e in existing_entries):
        raise DuplicateDepositReturnError(
            f"Deposit return schedules already exist for tenancy {tenancy.tenancy_id}"
        )

    calculator = RentPeriodCalculator(settings=settings)
    due_date = key_return_date + timedelta(days=settings.deposit_return_days)
    entries = [
        ScheduleEntry(
            payment_type=PaymentTypeEnum.DEPOSIT_RETURN,
            due_date=due_date,
            amount_due=-calculator.round_money(member.deposit_amount),
            description=settings.deposit_return_description,
            member_id=member.member_id,
        )
        for member in members
        if member.deposit_amount > 0
    ]

    if entries:
        logger.info(
            f"Tenancy {tenancy.tenancy_id}: scheduled {len(entries)} deposit return(s) due {due_date}"
        )
    else:
        logger.info(f"Tenancy {tenancy.tenancy_id}: no members with deposits to return")
    return entries


def apply_holding_deposit(
    entries: Sequence[ScheduleEntry], holding_amount: Decimal
) -> List[ScheduleEntry]:
    """
    Credit a holding deposit against the earliest rent entry.

    The earliest-due rent entry is replaced by a copy whose amount is reduced
    by ``holding_amount``, floored at zero. Other entries are returned as-is.

    Args:
        entries: One member's schedule.
        holding_amount: Holding deposit already paid by the member.

    Returns:
        A new list in the original order.
    """
    holding_amount = Decimal(str(holding_amount))
    if holding_amount < 0:
        raise ValueError(f"Holding deposit cannot be negative, got {holding_amount}")

    rent_positions = [i for i, e in enumerate(entries) if e.is_rent]
    if not rent_positions:
        return list(entries)

    first = min(rent_positions, key=lambda i: entries[i].due_date)
    current = entries[first].amount_due
    reduced = max(Decimal("0.00"), current - holding_amount)
    logger.debug(f"Holding deposit: reduced first rent by {holding_amount} ({current} -> {reduced})")

    result = list(entries)
    result[first] = entries[first].model_copy(update={"amount_due": reduced})
    return result
