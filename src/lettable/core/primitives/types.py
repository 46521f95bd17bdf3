# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

from pydantic import Field
from typing_extensions import Annotated

PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]

# Currency amounts, rounded to the penny by the calculator
Money = Decimal
NonNegativeMoney = Annotated[Decimal, Field(ge=0)]
