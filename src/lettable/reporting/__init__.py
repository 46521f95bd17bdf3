# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lettable Reporting Module

DataFrame views over generated payment schedules.
"""

from .schedule import (
    SCHEDULE_COLUMNS,
    UNASSIGNED_MEMBER,
    schedule_to_dataframe,
    summarize_by_member,
)

__all__ = [
    "SCHEDULE_COLUMNS",
    "UNASSIGNED_MEMBER",
    "schedule_to_dataframe",
    "summarize_by_member",
]
