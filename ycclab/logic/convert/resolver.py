#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/convert/resolver.py

import sys

from ycclab.core.types import RGB
from ycclab.shared.logger import log
from ycclab.shared.parser import InputRejected, parse_input
from ycclab.shared.sanitizer import _sanitize_for_log


def resolve_convert_input(val: str, fmt: str, strict: bool = False) -> RGB:
    """Resolves any input format into an RGB tuple, exiting on rejected input."""
    try:
        return parse_input(val, fmt, strict)
    except InputRejected as e:
        log("error", f"invalid {fmt} value '{_sanitize_for_log(val)}': {e}")
        sys.exit(2)
