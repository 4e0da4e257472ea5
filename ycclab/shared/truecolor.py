#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color so swatches render with their exact RGB value."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"
