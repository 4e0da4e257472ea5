#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/convert/renderer.py

from ycclab.core import config as c
from ycclab.core import conversions as conv
from ycclab.shared.formatting import format_field


def render_convert_info(r: int, g: int, b: int, fmt: str) -> str:
    """Composes RGB into a formatted output string."""
    text = format_field(fmt, conv.derive_display((r, g, b)))
    return f"{c.BOLD_WHITE}{text}{c.RESET}" if text else ""
