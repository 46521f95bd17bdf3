# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class PaymentOptionEnum(str, Enum):
    """
    Billing cadence a tenant elects for their rent.

    Options:
        MONTHLY: One payment per calendar month, partial first month if the
            tenancy starts after the 1st.
        QUARTERLY: One payment per academic-year quarter
            (Jul-Sep, Oct-Dec, Jan-Mar, Apr-Jun).
        MONTHLY_TO_QUARTERLY: July, August and September monthly, then
            quarterly blocks opening in October, January and April.
        UPFRONT: A single payment covering the whole tenancy.
    """

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    MONTHLY_TO_QUARTERLY = "monthly_to_quarterly"
    UPFRONT = "upfront"


class ScheduleKindEnum(str, Enum):
    """
    Discriminator for rent schedule generators.

    The four member payment options plus rolling monthly, which is selected
    by the tenancy rather than by the member's election.
    """

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    MONTHLY_TO_QUARTERLY = "monthly_to_quarterly"
    UPFRONT = "upfront"
    ROLLING_MONTHLY = "rolling_monthly"


class PaymentTypeEnum(str, Enum):
    """
    Kind of obligation a schedule entry represents.

    Attributes:
        RENT: Rent for a covered period (positive amount).
        DEPOSIT: Security deposit intake, due before the tenancy starts.
        DEPOSIT_RETURN: Deposit refund after keys are returned (negative amount).
    """

    RENT = "rent"
    DEPOSIT = "deposit"
    DEPOSIT_RETURN = "deposit_return"
