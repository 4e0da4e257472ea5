#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/core/types.py

from typing import NamedTuple


class RGB(NamedTuple):
    """8-bit sRGB triple, each channel in 0..255."""
    r: int
    g: int
    b: int


class YCbCr(NamedTuple):
    """BT.601 limited range triple: y in 16..235, cb and cr in 16..240."""
    y: int
    cb: int
    cr: int


class ColorDisplay(NamedTuple):
    """
    The three representations shown for one color.

    Always built from a single RGB value by `derive_display`, so the hex
    string and the YCbCr triple can never drift from the RGB channels.
    """
    hex: str
    rgb: RGB
    ycbcr: YCbCr
