#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/subcommands/interactive.py

import argparse
import sys

from ycclab.core import config as c
from ycclab.logic.session import engine
from ycclab.shared.logger import YcclabArgumentParser
from ycclab.shared.sanitizer import INPUT_HANDLERS


def get_interactive_parser() -> argparse.ArgumentParser:
    """Create argument parser for interactive command."""
    parser = YcclabArgumentParser(
        prog="ycclab interactive",
        description=(
            "ycclab interactive: type colors line by line and watch them in every format\n"
            "rejected input leaves the current color unchanged"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-f",
        "--input-format",
        default="hex",
        type=INPUT_HANDLERS["from_format"],
        help=f"initial input format: {' '.join(c.INPUT_FORMATS)} (default: hex)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject rgb/ycbcr values with any text around the numbers",
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for interactive command."""
    parser = get_interactive_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args, parser)


if __name__ == "__main__":
    main()
