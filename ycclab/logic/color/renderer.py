#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/color/renderer.py

from ycclab.core import config as c
from ycclab.core.types import ColorDisplay
from ycclab.shared.formatting import format_field
from ycclab.shared.preview import print_color_block


def _label(key: str) -> str:
    padding = " " * max(0, c.TITLE_WIDTH - len(key))
    return f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}{padding}"


def render_color_info(color: ColorDisplay, title: str = "current") -> None:
    """Strictly prints the swatch and the three fields. Data must be pre-calculated by the engine."""
    print()
    print_color_block(color.rgb, color.hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for key in c.INPUT_FORMATS:
        print(f"{_label(key)}{c.BOLD_WHITE}: {format_field(key, color)}{c.RESET}")
    print()
