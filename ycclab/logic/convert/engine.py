#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/convert/engine.py

import argparse

from ycclab.core import config as c
from ycclab.shared.sanitizer import _sanitize_for_log
from .resolver import resolve_convert_input
from .renderer import render_convert_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for color conversion"""
    r, g, b = resolve_convert_input(args.value, args.from_format, getattr(args, "strict", False))

    out = render_convert_info(r, g, b, args.to_format)

    if args.verbose:
        # Echo what was typed; re-deriving it from RGB is lossy for ycbcr
        src = f"{c.BOLD_WHITE}{_sanitize_for_log(args.value)}{c.RESET}"
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)
