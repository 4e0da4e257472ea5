#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/color/resolver.py

import argparse
import sys
from typing import Tuple

from ycclab.core import config as c
from ycclab.core.types import RGB
from ycclab.shared.logger import log
from ycclab.shared.parser import InputRejected, parse_input
from ycclab.shared.sanitizer import _sanitize_for_log


def resolve_color_input(args: argparse.Namespace) -> Tuple[RGB, str]:
    """Resolve raw CLI input into RGB plus the title shown next to the swatch"""
    strict = getattr(args, "strict", False)

    for fmt in c.INPUT_FORMATS:
        raw = getattr(args, fmt, None)
        if raw is None:
            continue
        try:
            return parse_input(raw, fmt, strict), fmt
        except InputRejected as e:
            log("error", f"invalid {fmt} value '{_sanitize_for_log(raw)}': {e}")
            sys.exit(2)

    return RGB(*c.DEFAULT_RGB), "default"
