# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class UnknownPaymentOptionError(ValueError):
    """Raised when a member's payment option does not name a known cadence."""


class DuplicateDepositReturnError(ValueError):
    """Raised when deposit-return entries already exist for a tenancy."""
