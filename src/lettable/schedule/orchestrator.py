# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-tenancy schedule generation.

``generate_tenancy_schedule`` is the entry point the tenancy workflow calls
when a tenancy becomes ready to bill. It fans out over the members, always
schedules deposits, and schedules rent only when the landlord has the agency
manage it. Persisting the result (in one transaction) is the caller's job.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from pydantic import Field

from ..core.primitives import Model, PaymentTypeEnum, ScheduleSettings
from .cadence import CadenceSchedule, RollingMonthlySchedule, cadence_for
from .calculator import RentPeriodCalculator
from .deposits import deposit_entry
from .terms import MemberBillingTerms, ScheduleEntry, TenancyTerms

logger = logging.getLogger(__name__)


class MemberSchedule(Model):
    """Entries generated for one member, deposit first then rent by due date."""

    member: MemberBillingTerms
    entries: List[ScheduleEntry] = Field(default_factory=list)
    skipped: bool = False

    @property
    def rent_entries(self) -> List[ScheduleEntry]:
        return [e for e in self.entries if e.payment_type == PaymentTypeEnum.RENT]

    @property
    def deposit_entries(self) -> List[ScheduleEntry]:
        return [e for e in self.entries if e.payment_type == PaymentTypeEnum.DEPOSIT]

    @property
    def total_rent(self) -> Decimal:
        return sum((e.amount_due for e in self.rent_entries), Decimal("0.00"))


class TenancySchedule(Model):
    """
    Result of generating a tenancy's schedule.

    Attributes:
        tenancy: Terms the schedule was generated from.
        members: One ``MemberSchedule`` per input member, in input order.
    """

    tenancy: TenancyTerms
    members: List[MemberSchedule] = Field(default_factory=list)

    @property
    def entries(self) -> List[ScheduleEntry]:
        return [entry for member in self.members for entry in member.entries]

    @property
    def members_processed(self) -> int:
        return len(self.members)

    @property
    def entries_created(self) -> int:
        return len(self.entries)

    @property
    def is_rolling_monthly(self) -> bool:
        return self.tenancy.is_rolling_monthly


def rent_schedule_for(
    tenancy: TenancyTerms, member: MemberBillingTerms
) -> CadenceSchedule:
    """
    Generator for a member's rent.

    Rolling tenancies always use the rolling monthly policy, whatever the
    member elected; fixed-term tenancies use the member's payment option.

    Raises:
        UnknownPaymentOptionError: If the payment option is not recognised.
    """
    if tenancy.is_rolling_monthly:
        return RollingMonthlySchedule()
    return cadence_for(member.payment_option)


def generate_member_schedule(
    tenancy: TenancyTerms,
    member: MemberBillingTerms,
    settings: Optional[ScheduleSettings] = None,
) -> MemberSchedule:
    """
    Deposit and rent entries for one member.

    Fixed-term rent descriptions are prefixed (``Rent - ``) to match the
    descriptions the rolling continuation job produces. A member without a
    payment option gets no entries at all and is marked ``skipped``.
    """
    settings = settings or ScheduleSettings()

    # An unset option skips the member entirely, deposit included, even on
    # rolling tenancies where the option does not pick the rent cadence
    if member.payment_option is None:
        logger.warning(
            f"Tenancy {tenancy.tenancy_id}: member {member.member_id} has no payment option, skipping"
        )
        return MemberSchedule(member=member, skipped=True)

    entries: List[ScheduleEntry] = []

    deposit = deposit_entry(tenancy, member, settings)
    if deposit is not None:
        entries.append(deposit)

    if tenancy.manage_rent:
        calculator = RentPeriodCalculator(settings=settings)
        schedule = rent_schedule_for(tenancy, member)
        rent_entries = schedule.generate(
            tenancy.start_date,
            tenancy.end_date,
            member.rent_per_person_per_week,
            calculator,
        )
        for entry in rent_entries:
            update = {"member_id": member.member_id}
            if not tenancy.is_rolling_monthly:
                update["description"] = f"{settings.rent_description_prefix}{entry.description}"
            entries.append(entry.model_copy(update=update))

    return MemberSchedule(member=member, entries=entries)


def generate_tenancy_schedule(
    tenancy: TenancyTerms,
    members: Sequence[MemberBillingTerms],
    settings: Optional[ScheduleSettings] = None,
) -> TenancySchedule:
    """
    Generate every member's deposit and rent obligations for a tenancy.

    Args:
        tenancy: Validated tenancy terms.
        members: Billing terms for each member.
        settings: Schedule settings; defaults reproduce production.

    Returns:
        ``TenancySchedule`` with one ``MemberSchedule`` per member.

    Raises:
        UnknownPaymentOptionError: If a member's cadence is not recognised.
            Generation stops; nothing partial should be persisted.

    Example:
        >>> schedule = generate_tenancy_schedule(
        ...     TenancyTerms(start_date=date(2025, 9, 1), end_date=date(2026, 8, 31)),
        ...     [MemberBillingTerms(rent_per_person_per_week=150,
        ...                         payment_option="monthly",
        ...                         deposit_amount=500)],
        ... )
        >>> schedule.entries_created
        13
    """
    settings = settings or ScheduleSettings()

    if not tenancy.manage_rent:
        logger.info(
            f"Tenancy {tenancy.tenancy_id}: landlord does not manage rent, scheduling deposits only"
        )

    member_schedules = [
        generate_member_schedule(tenancy, member, settings) for member in members
    ]
    result = TenancySchedule(tenancy=tenancy, members=member_schedules)

    logger.info(
        f"Tenancy {tenancy.tenancy_id}: {result.members_processed} member(s) processed, "
        f"{result.entries_created} schedule entries generated"
        f"{' (rolling monthly)' if tenancy.is_rolling_monthly else ''}"
    )
    return result
