#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/color/engine.py

import argparse

from ycclab.core import conversions as conv
from ycclab.shared.clipboard import copy_text
from ycclab.shared.formatting import format_field
from ycclab.shared.logger import log
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color command"""
    rgb, title = resolve_color_input(args)
    color = conv.derive_display(rgb)

    render_color_info(color, title)

    if getattr(args, "copy", None):
        text = format_field(args.copy, color)
        copy_text(text)
        log("success", f"copied '{text}'")
