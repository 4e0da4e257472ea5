#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/subcommands/convert.py

import argparse
import sys

from ycclab.core import config as c
from ycclab.logic.convert import engine
from ycclab.shared.formatting import format_colorspace
from ycclab.shared.logger import YcclabArgumentParser
from ycclab.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = YcclabArgumentParser(
        prog="ycclab convert",
        description="ycclab convert: convert a color value from one format to another",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = " ".join(c.INPUT_FORMATS)
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-f",
        "--from-format",
        required=True,
        type=INPUT_HANDLERS["from_format"],
        help="the format to convert from\n" f"all formats: {formats_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="the format to convert to\n" f"all formats: {formats_list}",
    )

    ex_rgb = format_colorspace("rgb", 59, 130, 246)
    ex_ycbcr = format_colorspace("ycbcr", 122, 198, 83)

    parser.add_argument(
        "-v",
        "--value",
        required=True,
        type=INPUT_HANDLERS["value"],
        help=(
            "color value to convert must be in quotes\n"
            "examples:\n"
            '  -v "#3B82F6"\n'
            '  -v "59, 130, 246"\n'
            f'  -v "{ex_rgb}"\n'
            f'  -v "{ex_ycbcr}"'
        ),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject rgb/ycbcr values with any text around the numbers",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args, parser)


if __name__ == "__main__":
    main()
