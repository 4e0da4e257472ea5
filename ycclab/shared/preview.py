#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/preview.py

import re

from ycclab.core import config as c


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def swatch(r: int, g: int, b: int) -> str:
    return f"\033[48;2;{r};{g};{b}m{' ' * c.SWATCH_WIDTH}{c.RESET}"


def print_color_block(rgb, hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = rgb
    vis_len = get_visible_len(title)
    padding = " " * max(0, c.TITLE_WIDTH - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(r, g, b)}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)
