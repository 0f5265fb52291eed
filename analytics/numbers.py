# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Rounding helpers. Half-up, not banker's: 6.25 -> 6.3, 0.5 -> 1."""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number, digits: int = 0) -> float:
    """Round half-up to `digits` decimals."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def percent(part: Number, whole: Number) -> int:
    """Whole-number percentage of part/whole. 0 when whole is 0."""
    if not whole:
        return 0
    return int(round_half_up(part / whole * 100))


def format_number(value: Number) -> str:
    """Render 6.0 as "6" and 6.5 as "6.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
