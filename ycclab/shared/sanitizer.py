#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/sanitizer.py

import argparse
import re

from ycclab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing 
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up format names given on the command line.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


def resolve_format(value: str) -> str:
    """Map a user spelling ('YCC', 'y-cb-cr', 'Hex') onto one of INPUT_FORMATS, or ''."""
    cleaned = _extract_alpha_only(value)
    return c.FORMAT_ALIASES.get(cleaned, "")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_format(v: str) -> str:
    """Validator for input/output format names."""
    fmt = resolve_format(v)
    if not fmt:
        raw = _sanitize_for_log(v)
        choices = " ".join(c.INPUT_FORMATS)
        raise argparse.ArgumentTypeError(f"invalid format: '{raw}' (choose from {choices})")
    return fmt


def handle_raw_value(v: str) -> str:
    """
    Validator for color values. The text itself is left untouched so the
    parser sees exactly what the user typed; only empty values are refused.
    """
    if v is None or not str(v).strip():
        raise argparse.ArgumentTypeError("empty color value")
    return str(v)


# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "from_format": handle_format,
    "to_format": handle_format,
    "copy_field": handle_format,
    "value": handle_raw_value,
}
