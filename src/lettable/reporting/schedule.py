# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of generated schedules.

Reports only format and aggregate entries that have already been
generated; they never compute rent.
"""

from __future__ import annotations

from typing import Iterable, List, Union

import pandas as pd

from ..schedule.orchestrator import TenancySchedule
from ..schedule.terms import ScheduleEntry

SCHEDULE_COLUMNS: List[str] = [
    "member_id",
    "payment_type",
    "due_date",
    "amount_due",
    "covers_from",
    "covers_to",
    "description",
    "days",
    "weeks",
]

# member_id label for entries not attributed to a member
UNASSIGNED_MEMBER = "unassigned"


def _entries_of(
    schedule: Union[TenancySchedule, Iterable[ScheduleEntry]],
) -> List[ScheduleEntry]:
    if isinstance(schedule, TenancySchedule):
        return schedule.entries
    return list(schedule)


def schedule_to_dataframe(
    schedule: Union[TenancySchedule, Iterable[ScheduleEntry]],
) -> pd.DataFrame:
    """
    Flatten schedule entries into a DataFrame ordered by due date.

    Amounts are converted to float for display and aggregation; the
    ``ScheduleEntry`` records remain the exact Decimal source of truth.

    Args:
        schedule: A ``TenancySchedule`` or any iterable of entries.

    Returns:
        DataFrame with one row per entry and the columns in
        ``SCHEDULE_COLUMNS``.
    """
    entries = _entries_of(schedule)
    if not entries:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    records = []
    for entry in entries:
        record = entry.model_dump()
        record["payment_type"] = entry.payment_type.value
        record["amount_due"] = float(entry.amount_due)
        records.append(record)

    df = pd.DataFrame.from_records(records, columns=SCHEDULE_COLUMNS)
    df["due_date"] = pd.to_datetime(df["due_date"])
    return df.sort_values("due_date", kind="stable").reset_index(drop=True)


def summarize_by_member(
    schedule: Union[TenancySchedule, Iterable[ScheduleEntry]],
) -> pd.DataFrame:
    """
    Total scheduled amount per member and payment type.

    Entries without a ``member_id`` are grouped under ``UNASSIGNED_MEMBER``.

    Returns:
        DataFrame indexed by ``member_id`` with one column per payment type
        present in the schedule; missing combinations are zero.
    """
    df = schedule_to_dataframe(schedule)
    if df.empty:
        return pd.DataFrame()
    df["member_id"] = df["member_id"].astype(object).where(
        df["member_id"].notna(), UNASSIGNED_MEMBER
    )
    return df.pivot_table(
        index="member_id",
        columns="payment_type",
        values="amount_due",
        aggfunc="sum",
        fill_value=0.0,
    )
