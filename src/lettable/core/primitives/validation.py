# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for common patterns across the codebase.

This module provides standardized validators for:
- Date ordering (end after start)
- Paired optional fields (both set or both unset)
"""

from __future__ import annotations

from typing import Any, Optional


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    Methods operate on model instances (``mode="after"`` validators) and
    raise ``ValueError`` so Pydantic surfaces them as ``ValidationError``.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Any,
        start_field: str,
        end_field: str,
        allow_equal: bool = False,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that the end date is after the start date.

        Args:
            data: Model instance
            start_field: Name of start date field
            end_field: Name of end date field
            allow_equal: Accept end == start (single-day periods)
            error_message: Custom error message

        Returns:
            The validated model instance

        Raises:
            ValueError: If the end date is not after the start date
        """
        start_date = getattr(data, start_field, None)
        end_date = getattr(data, end_field, None)

        if start_date is not None and end_date is not None:
            if end_date < start_date or (end_date == start_date and not allow_equal):
                msg = error_message or f"{end_field} must be after {start_field}"
                raise ValueError(msg)

        return data

    @classmethod
    def validate_paired_fields(
        cls,
        data: Any,
        field_a: str,
        field_b: str,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Validate that two optional fields are either both set or both unset.

        Raises:
            ValueError: If exactly one of the two fields is provided
        """
        value_a = getattr(data, field_a, None)
        value_b = getattr(data, field_b, None)

        if (value_a is None) != (value_b is None):
            msg = error_message or f"{field_a} and {field_b} must be provided together"
            raise ValueError(msg)

        return data
