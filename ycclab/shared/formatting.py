#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/formatting.py

from ycclab.core.types import ColorDisplay


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return str(args[0]).upper()
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'ycbcr':
        return f"ycbcr({args[0]}, {args[1]}, {args[2]})"

    return ""


def format_field(fmt: str, color: ColorDisplay) -> str:
    """Plain text of one display field, as shown and as copied."""
    if fmt == 'hex':
        return format_colorspace('hex', color.hex)
    elif fmt == 'rgb':
        return format_colorspace('rgb', *color.rgb)
    elif fmt == 'ycbcr':
        return format_colorspace('ycbcr', *color.ycbcr)

    return ""
