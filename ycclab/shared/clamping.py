#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/clamping.py

import math


def round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero (127.5 -> 128, -0.5 -> -1)."""
    if v != v:
        return 0
    n = int(math.floor(abs(v) + 0.5))
    return n if v >= 0 else -n


def clamp_int(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def in_range(v: int, bounds) -> bool:
    lo, hi = bounds
    return lo <= v <= hi
