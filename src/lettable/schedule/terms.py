# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Input and output records for payment schedule generation.

``TenancyTerms`` and ``MemberBillingTerms`` arrive from the tenancy workflow;
``ScheduleEntry`` is what the engine hands to persistence.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from pydantic import Field, model_validator

from ..core.primitives import (
    Model,
    NonNegativeInt,
    NonNegativeMoney,
    PaymentOptionEnum,
    PaymentTypeEnum,
    ValidationMixin,
)

Identifier = Union[int, str]


class TenancyTerms(Model, ValidationMixin):
    """
    Dates and flags of a tenancy that drive its payment schedule.

    Attributes:
        start_date: First day of the tenancy.
        end_date: Last day of the tenancy. Required for fixed-term tenancies;
            must be unset when a rolling tenancy is created.
        is_rolling_monthly: Open-ended tenancy billed month by month.
        manage_rent: Landlord setting; when False only deposits are scheduled.
        tenancy_id: Optional identifier used for logging.

    Example:
        >>> terms = TenancyTerms(
        ...     start_date=date(2025, 9, 1),
        ...     end_date=date(2026, 8, 31),
        ... )
    """

    start_date: date
    end_date: Optional[date] = None
    is_rolling_monthly: bool = False
    manage_rent: bool = True
    tenancy_id: Optional[Identifier] = None

    @model_validator(mode="after")
    def check_dates(self) -> "TenancyTerms":
        if self.is_rolling_monthly:
            if self.end_date is not None:
                raise ValueError(
                    "end_date must not be set when a rolling monthly tenancy is created"
                )
            return self
        if self.end_date is None:
            raise ValueError("end_date is required for fixed-term tenancies")
        return self.validate_date_ordering(self, "start_date", "end_date")


class MemberBillingTerms(Model):
    """
    Per-tenant billing election.

    Attributes:
        rent_per_person_per_week: Weekly rent (PPPW) for this member.
        payment_option: Elected cadence; unset members are skipped.
        deposit_amount: Security deposit held for this member.
        member_id: Optional identifier copied onto generated entries.
    """

    rent_per_person_per_week: NonNegativeMoney = Decimal("0")
    payment_option: Optional[PaymentOptionEnum] = None
    deposit_amount: NonNegativeMoney = Decimal("0")
    member_id: Optional[Identifier] = None


class ScheduleEntry(Model, ValidationMixin):
    """
    A single scheduled obligation: one rent, deposit, or deposit-return charge.

    Attributes:
        payment_type: Kind of obligation.
        due_date: Date the payment falls due.
        amount_due: Amount in pounds, two decimal places. Negative only for
            deposit returns (money owed to the tenant).
        covers_from: First day of the rent period covered (unset for deposits).
        covers_to: Last day of the rent period covered (unset for deposits).
        description: Human-readable period label.
        days: Inclusive days covered (display only).
        weeks: Whole weeks covered, rounded up (display only).
        member_id: Member this entry belongs to, when known.
    """

    payment_type: PaymentTypeEnum
    due_date: date
    amount_due: Decimal
    covers_from: Optional[date] = None
    covers_to: Optional[date] = None
    description: str = ""
    days: Optional[NonNegativeInt] = None
    weeks: Optional[NonNegativeInt] = None
    member_id: Optional[Identifier] = None

    @model_validator(mode="after")
    def check_coverage_and_sign(self) -> "ScheduleEntry":
        self.validate_paired_fields(self, "covers_from", "covers_to")
        self.validate_date_ordering(
            self, "covers_from", "covers_to", allow_equal=True
        )
        if self.amount_due < 0 and self.payment_type != PaymentTypeEnum.DEPOSIT_RETURN:
            raise ValueError(
                f"amount_due may only be negative for deposit returns, got {self.amount_due}"
            )
        if self.payment_type == PaymentTypeEnum.DEPOSIT_RETURN and self.amount_due > 0:
            raise ValueError("deposit return amounts must not be positive")
        return self

    @property
    def is_rent(self) -> bool:
        return self.payment_type == PaymentTypeEnum.RENT

    @property
    def coverage_days(self) -> Optional[int]:
        """Inclusive days between ``covers_from`` and ``covers_to``."""
        if self.covers_from is None:
            return None
        return (self.covers_to - self.covers_from).days + 1
