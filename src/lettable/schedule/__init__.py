# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lettable Payment Schedules

Calendar-month (PCM) rent arithmetic, the four billing cadences, rolling
monthly tenancies, and deposit scheduling.
"""

from .cadence import (
    FIRST_OF_MONTH_QUARTER_ANCHORS,
    QUARTER_START_MONTHS,
    AnyCadenceSchedule,
    CadenceSchedule,
    MonthlySchedule,
    MonthlyToQuarterlySchedule,
    QuarterlySchedule,
    RollingMonthlySchedule,
    UpfrontSchedule,
    anchor_quarter,
    cadence_for,
    generate_payment_schedule,
    schedule_for_kind,
)
from .calculator import RentAmount, RentPeriodCalculator, weeks_for_days
from .deposits import apply_holding_deposit, deposit_entry, schedule_deposit_returns
from .errors import DuplicateDepositReturnError, UnknownPaymentOptionError
from .orchestrator import (
    MemberSchedule,
    TenancySchedule,
    generate_member_schedule,
    generate_tenancy_schedule,
    rent_schedule_for,
)
from .rolling import (
    first_period_entry,
    is_covered_by_first_period,
    next_billing_month,
    rolling_entry_for_month,
    rolling_month_entry,
)
from .terms import MemberBillingTerms, ScheduleEntry, TenancyTerms

__all__ = [
    # Inputs and outputs
    "MemberBillingTerms",
    "ScheduleEntry",
    "TenancyTerms",
    # Calculator
    "RentAmount",
    "RentPeriodCalculator",
    "weeks_for_days",
    # Cadences
    "AnyCadenceSchedule",
    "CadenceSchedule",
    "MonthlySchedule",
    "MonthlyToQuarterlySchedule",
    "QuarterlySchedule",
    "RollingMonthlySchedule",
    "UpfrontSchedule",
    "FIRST_OF_MONTH_QUARTER_ANCHORS",
    "QUARTER_START_MONTHS",
    "anchor_quarter",
    "cadence_for",
    "generate_payment_schedule",
    "schedule_for_kind",
    # Rolling monthly
    "first_period_entry",
    "is_covered_by_first_period",
    "next_billing_month",
    "rolling_entry_for_month",
    "rolling_month_entry",
    # Deposits
    "apply_holding_deposit",
    "deposit_entry",
    "schedule_deposit_returns",
    # Orchestration
    "MemberSchedule",
    "TenancySchedule",
    "generate_member_schedule",
    "generate_tenancy_schedule",
    "rent_schedule_for",
    # Errors
    "DuplicateDepositReturnError",
    "UnknownPaymentOptionError",
]
