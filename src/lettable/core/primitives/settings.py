# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import NonNegativeInt, PositiveInt


class ScheduleSettings(Model):
    """
    Configuration for payment schedule generation.

    Defaults reproduce the UK calendar-month (PCM) convention used in
    production: deposits due a week before move-in, refunds a fortnight after
    keys come back, and 52 weeks spread over 12 calendar months.

    Usage Examples:
        # Standard lettings schedule
        settings = ScheduleSettings()

        # Agency that refunds deposits 10 days after key return
        settings = ScheduleSettings(deposit_return_days=10)
    """

    deposit_lead_days: NonNegativeInt = Field(
        default=7,
        description="Days before the tenancy start date that the security deposit is due.",
    )
    deposit_return_days: NonNegativeInt = Field(
        default=14,
        description="Days after key return that the deposit refund is due.",
    )
    weeks_per_year: PositiveInt = Field(
        default=52,
        description="Weeks used to convert a weekly rate to a calendar-month rate.",
    )
    currency_precision: NonNegativeInt = Field(
        default=2, description="Number of decimal places for currency values."
    )
    rent_description_prefix: str = Field(
        default="Rent - ",
        description="Prefix applied to fixed-term rent descriptions.",
    )
    deposit_description: str = "Security Deposit"
    deposit_return_description: str = "Deposit Return"
