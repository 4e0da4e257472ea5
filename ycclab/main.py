#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/main.py

import argparse
import sys

from ycclab import __version__
from ycclab.core import config as c
from ycclab.logic.color import engine
from ycclab.subcommands.command_registry import SUBCOMMANDS
from ycclab.shared.logger import log, YcclabArgumentParser
from ycclab.shared.sanitizer import INPUT_HANDLERS
from ycclab.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color command."""
    parser = YcclabArgumentParser(
        prog="ycclab",
        description="ycclab: view a color as HEX, RGB and BT.601 YCbCr at once",
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
        "-v",
        "--version",
        action="version",
        version=f"ycclab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["value"],
        help="6-digit hex color code, '#' optional",
    )
    color_input_group.add_argument(
        "-rgb",
        "--red-green-blue",
        dest="rgb",
        type=INPUT_HANDLERS["value"],
        help="three integers 0-255 separated by commas, e.g. \"59, 130, 246\"",
    )
    color_input_group.add_argument(
        "-ycc",
        "--ycbcr",
        dest="ycbcr",
        type=INPUT_HANDLERS["value"],
        help=(
            f"BT.601 limited range triple: y {c.Y_MIN}-{c.Y_MAX}, "
            f"cb/cr {c.C_MIN}-{c.C_MAX}"
        ),
    )

    parser.add_argument(
        "-c",
        "--copy",
        type=INPUT_HANDLERS["copy_field"],
        default=None,
        help=f"copy one field to the clipboard: {' '.join(c.INPUT_FORMATS)}",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject rgb/ycbcr values with any text around the numbers",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main(argv=None) -> None:
    """Main entry point for ycclab CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Subcommand Routing (Global behavior)
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            ensure_truecolor()
            SUBCOMMANDS[cmd].main(argv[1:])
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
