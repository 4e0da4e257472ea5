#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/core/conversions.py

import re
from typing import Optional

from . import config as c
from .types import RGB, YCbCr, ColorDisplay
from ycclab.shared.clamping import clamp_int, round_half_away


HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{6})")


def hex_to_rgb(hex_code: str) -> Optional[RGB]:
    """Convert a 6-digit hex string (optional '#') to RGB, or None if it does not match."""
    m = HEX_PATTERN.fullmatch(hex_code) if isinstance(hex_code, str) else None
    if not m:
        return None
    h = m.group(1)
    return RGB(*(int(h[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a '#RRGGBB' string."""
    r_clamped = clamp_int(round_half_away(r), c.RGB_MIN, c.RGB_MAX)
    g_clamped = clamp_int(round_half_away(g), c.RGB_MIN, c.RGB_MAX)
    b_clamped = clamp_int(round_half_away(b), c.RGB_MIN, c.RGB_MAX)
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def rgb_to_ycbcr(r: int, g: int, b: int) -> YCbCr:
    """
    Convert RGB to BT.601 limited range YCbCr.

    Each component is rounded half away from zero first and clamped to its
    limited range afterwards, so black lands on (16, 128, 128) and white on
    (235, 128, 128).
    """
    y = c.Y_R * r + c.Y_G * g + c.Y_B * b
    cb = c.C_NEUTRAL + c.CB_R * r + c.CB_G * g + c.CB_B * b
    cr = c.C_NEUTRAL + c.CR_R * r + c.CR_G * g + c.CR_B * b

    return YCbCr(
        clamp_int(round_half_away(y), c.Y_MIN, c.Y_MAX),
        clamp_int(round_half_away(cb), c.C_MIN, c.C_MAX),
        clamp_int(round_half_away(cr), c.C_MIN, c.C_MAX),
    )


def ycbcr_to_rgb(y: int, cb: int, cr: int) -> RGB:
    """
    Convert BT.601 limited range YCbCr back to RGB.

    This is only an approximate inverse of `rgb_to_ycbcr`: both directions
    round and clamp, and the forward transform keeps full-range luma while
    this one expands limited-range luma. A round trip may move a channel by up
    to `ROUND_TRIP_TOLERANCE` levels.
    """
    y_p = y - c.Y_OFFSET
    cb_p = cb - c.C_NEUTRAL
    cr_p = cr - c.C_NEUTRAL

    r = c.INV_Y * y_p + c.INV_R_CR * cr_p
    g = c.INV_Y * y_p + c.INV_G_CB * cb_p + c.INV_G_CR * cr_p
    b = c.INV_Y * y_p + c.INV_B_CB * cb_p

    return RGB(
        clamp_int(round_half_away(r), c.RGB_MIN, c.RGB_MAX),
        clamp_int(round_half_away(g), c.RGB_MIN, c.RGB_MAX),
        clamp_int(round_half_away(b), c.RGB_MIN, c.RGB_MAX),
    )


def derive_display(rgb) -> ColorDisplay:
    """Recompute every representation from a single RGB value."""
    r, g, b = rgb
    return ColorDisplay(rgb_to_hex(r, g, b), RGB(r, g, b), rgb_to_ycbcr(r, g, b))
