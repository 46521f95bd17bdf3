# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Lettable - Payment Schedule Engine for Residential Lettings

Generates rent and deposit obligations for tenancies using the UK
calendar-month (PCM) convention: a flat monthly rate derived from the weekly
rent, with partial months prorated by the actual days in that month.

Key Entry Points:
- lettable.schedule.generate_tenancy_schedule() - All members of a tenancy
- lettable.schedule.generate_payment_schedule() - One member, one cadence
- lettable.schedule.schedule_deposit_returns() - Refunds after key return
- lettable.reporting.schedule_to_dataframe() - Tabular view of a schedule

Example Usage:
    ```python
    from datetime import date
    from lettable.schedule import (
        MemberBillingTerms,
        TenancyTerms,
        generate_tenancy_schedule,
    )

    tenancy = TenancyTerms(start_date=date(2025, 9, 15), end_date=date(2026, 6, 30))
    member = MemberBillingTerms(
        rent_per_person_per_week=150,
        payment_option="quarterly",
        deposit_amount=600,
    )
    schedule = generate_tenancy_schedule(tenancy, [member])
    for entry in schedule.entries:
        print(entry.due_date, entry.amount_due, entry.description)
    ```
"""

# Add a NullHandler to the package logger to prevent "No handlers could be found"
# warnings when the library is used in applications that don't configure logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "reporting",
    "schedule",
]


_LAZY_MODULES = {
    "core": "lettable.core",
    "reporting": "lettable.reporting",
    "schedule": "lettable.schedule",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'lettable' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
