#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/subcommands/command_registry.py

from . import (
    convert,
    interactive,
)

SUBCOMMANDS = {
    'convert': convert,
    'interactive': interactive,
}
