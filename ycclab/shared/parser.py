#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/parser.py

import re
from typing import Optional, Tuple

from ycclab.core import config as c
from ycclab.core import conversions as conv
from ycclab.core.types import RGB
from .clamping import in_range


class InputRejected(ValueError):
    """Raw text is not an acceptable value for the declared format."""


class UnknownFormat(ValueError):
    """The declared input format is not one of hex, rgb or ycbcr."""


# Three integers separated by a comma and optional whitespace.
# search() scans the whole text, so "rgb(59, 130, 246)" is accepted as-is.
# ASCII digits only, like the hex pattern.
TRIPLE_PATTERN = re.compile(r"([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)")

# Strict mode only tolerates whitespace around the triple
STRICT_TRIPLE_PATTERN = re.compile(r"\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*")

MAX_CHANNEL_DIGITS = 3


def _parse_triple(raw: str, fmt: str, strict: bool = False) -> Tuple[int, int, int]:
    """
    Extract three integers and check each against the channel bounds of `fmt`.
    Any value outside its bounds rejects the whole input; nothing is clamped.
    """
    if strict:
        m = STRICT_TRIPLE_PATTERN.fullmatch(raw)
    else:
        m = TRIPLE_PATTERN.search(raw)
    if not m:
        raise InputRejected(f"expected three comma separated integers for {fmt}")

    # No in-range value needs more than three significant digits
    for v in m.groups():
        if len(v.lstrip("0")) > MAX_CHANNEL_DIGITS:
            raise InputRejected(f"{fmt} value {v[:8]}... is too long")

    vals = tuple(int(v) for v in m.groups())
    for val, bounds in zip(vals, c.CHANNEL_BOUNDS[fmt]):
        if not in_range(val, bounds):
            raise InputRejected(f"{fmt} value {val} outside {bounds[0]}..{bounds[1]}")
    return vals


def parse_hex(raw: str, strict: bool = False) -> RGB:
    rgb = conv.hex_to_rgb(raw)
    if rgb is None:
        raise InputRejected("expected 6 hex digits with an optional '#'")
    return rgb


def parse_rgb(raw: str, strict: bool = False) -> RGB:
    return RGB(*_parse_triple(raw, "rgb", strict))


def parse_ycbcr(raw: str, strict: bool = False) -> RGB:
    y, cb, cr = _parse_triple(raw, "ycbcr", strict)
    return conv.ycbcr_to_rgb(y, cb, cr)


STRING_PARSERS = {
    "hex": parse_hex,
    "rgb": parse_rgb,
    "ycbcr": parse_ycbcr,
}


def parse_input(raw: str, fmt: str, strict: bool = False) -> RGB:
    """Resolve raw text in the declared format into RGB, raising InputRejected on bad text."""
    if fmt not in STRING_PARSERS:
        raise UnknownFormat(f"unknown input format '{fmt}'")
    if not isinstance(raw, str):
        raise InputRejected("input must be text")
    return STRING_PARSERS[fmt](raw, strict)


def validate_and_convert(raw: str, fmt: str, strict: bool = False) -> Optional[RGB]:
    """
    Boundary used by interactive front ends: returns the RGB value for accepted
    input and None for rejected input. Bad text never raises.
    """
    try:
        return parse_input(raw, fmt, strict)
    except InputRejected:
        return None
