#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

RGB_MIN = 0                        # 8-bit channel lower bound
RGB_MAX = 255                      # 8-bit channel upper bound

# BT.601 limited ("studio swing") range (Source: ITU-R BT.601-7)
Y_MIN = 16                         # Black level for luma
Y_MAX = 235                        # White level for luma
C_MIN = 16                         # Lower bound for Cb / Cr
C_MAX = 240                        # Upper bound for Cb / Cr
C_NEUTRAL = 128                    # Zero-chroma level for Cb / Cr
Y_OFFSET = 16                      # Luma offset removed before the inverse transform

# RGB to YCbCr coefficients (Source: ITU-R BT.601 / JPEG JFIF)
Y_R = 0.299                        # Red contribution to luma
Y_G = 0.587                        # Green contribution to luma
Y_B = 0.114                        # Blue contribution to luma
CB_R = -0.168736                   # Red contribution to Cb
CB_G = -0.331264                   # Green contribution to Cb
CB_B = 0.5                         # Blue contribution to Cb
CR_R = 0.5                         # Red contribution to Cr
CR_G = -0.418688                   # Green contribution to Cr
CR_B = -0.081312                   # Blue contribution to Cr

# YCbCr to RGB coefficients (Source: ITU-R BT.601 limited range inverse)
INV_Y = 1.164                      # Luma scale (255 / 219)
INV_R_CR = 1.596                   # Cr contribution to red
INV_G_CB = -0.392                  # Cb contribution to green
INV_G_CR = -0.813                  # Cr contribution to green
INV_B_CB = 2.017                   # Cb contribution to blue

# Largest per-channel error of an RGB -> YCbCr -> RGB round trip
ROUND_TRIP_TOLERANCE = 24

# ==========================================
# Application Logic & Constraints
# ==========================================

DEFAULT_RGB = (59, 130, 246)       # Color shown before any input is accepted (#3B82F6)

INPUT_FORMATS = ("hex", "rgb", "ycbcr")

# Inclusive (min, max) bounds per channel for each triple format
CHANNEL_BOUNDS = {
    "rgb": ((RGB_MIN, RGB_MAX), (RGB_MIN, RGB_MAX), (RGB_MIN, RGB_MAX)),
    "ycbcr": ((Y_MIN, Y_MAX), (C_MIN, C_MAX), (C_MIN, C_MAX)),
}

# Accepted spellings on the command line
FORMAT_ALIASES = {
    'hex': 'hex',
    'rgb': 'rgb',
    'ycbcr': 'ycbcr',
    'ycc': 'ycbcr',
    'yuv': 'ycbcr',
}

# ==========================================
# CLI UI & Data Structures
# ==========================================

SWATCH_WIDTH = 16                  # Width of the color swatch in terminal cells
TITLE_WIDTH = 18                   # Padding for the left-hand labels

INTERACTIVE_PROMPT = "ycclab"

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
