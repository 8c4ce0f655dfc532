"""
rounding.py
-----------
Half-up rounding for prices, minutes and distances.

Python's round() uses banker's rounding (22.5 -> 22); prices and durations in
this package round halves away from zero the way the figures shown to
travellers always have (22.5 -> 23).
"""

from __future__ import annotations
import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    scaled = abs(value) * factor
    # nudge values like 2.4999999999999996 that are really x.5 in decimal
    rounded = math.floor(scaled + 0.5 + 1e-9)
    return math.copysign(rounded / factor, value)


def round_int(value: float) -> int:
    return int(round_half_up(value))
