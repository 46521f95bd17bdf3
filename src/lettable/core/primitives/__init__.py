# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lettable Core Primitives

Essential building blocks for payment schedule generation.
Handles calendar months, settings, enums, and validation.
"""

from .calendar import MONTH_NAMES, CalendarMonth, day_before, inclusive_days, iter_months
from .enums import PaymentOptionEnum, PaymentTypeEnum, ScheduleKindEnum
from .model import Model
from .settings import ScheduleSettings
from .types import Money, NonNegativeInt, NonNegativeMoney, PositiveInt
from .validation import ValidationMixin

__all__ = [
    # Core models
    "Model",
    "CalendarMonth",
    # Settings
    "ScheduleSettings",
    # Enums
    "PaymentOptionEnum",
    "PaymentTypeEnum",
    "ScheduleKindEnum",
    # Types
    "Money",
    "NonNegativeInt",
    "NonNegativeMoney",
    "PositiveInt",
    # Validation
    "ValidationMixin",
    # Calendar utilities
    "MONTH_NAMES",
    "day_before",
    "inclusive_days",
    "iter_months",
]
