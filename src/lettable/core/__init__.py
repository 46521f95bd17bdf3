# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lettable Core Framework

Foundational building blocks shared by schedule generation and reporting.
"""

from . import primitives
from .primitives import (
    MONTH_NAMES,
    CalendarMonth,
    Model,
    Money,
    NonNegativeInt,
    NonNegativeMoney,
    PaymentOptionEnum,
    PaymentTypeEnum,
    PositiveInt,
    ScheduleKindEnum,
    ScheduleSettings,
    ValidationMixin,
    day_before,
    inclusive_days,
    iter_months,
)

__all__ = [
    "primitives",
    # Core models
    "CalendarMonth",
    "Model",
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
