#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/session/engine.py

import argparse
import sys
from typing import TextIO

from ycclab.core import config as c
from ycclab.logic.color.renderer import render_color_info
from ycclab.shared.logger import log
from ycclab.shared.sanitizer import resolve_format
from .state import ColorSession

SESSION_HELP = """commands:
  /hex /rgb /ycbcr   switch the input format (clears the typed text)
  /copy [FIELD]      copy hex, rgb or ycbcr (default: current format)
  /show              show the current color again
  /help              show this help
  /quit              leave the session
anything else is read as a color in the current input format"""


def _prompt(session: ColorSession) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{c.INTERACTIVE_PROMPT}{c.RESET}[{session.input_format}]> "


def handle_command(session: ColorSession, command: str) -> bool:
    """Run one '/command'. Returns False when the session should end."""
    parts = command[1:].split()
    if not parts:
        print(SESSION_HELP)
        return True

    name = parts[0].lower()
    if name in ("quit", "exit", "q"):
        return False
    if name == "help":
        print(SESSION_HELP)
    elif name == "show":
        render_color_info(session.color)
    elif name == "copy":
        field = resolve_format(parts[1]) if len(parts) > 1 else session.input_format
        if not field:
            log("error", f"cannot copy '{parts[1]}', choose from {' '.join(c.INPUT_FORMATS)}")
        else:
            text = session.copy(field)
            log("success", f"copied '{text}'")
    elif resolve_format(name):
        session.select_format(resolve_format(name))
        log("info", f"input format set to {session.input_format}")
    else:
        log("warning", f"unknown command '/{name}', try /help")
    return True


def handle_line(session: ColorSession, line: str) -> bool:
    """Dispatch one line of input. Returns False when the session should end."""
    if not line.strip():
        return True
    if line.lstrip().startswith("/"):
        return handle_command(session, line.strip())

    if session.submit(line):
        render_color_info(session.color)
    else:
        print(f"{c.MSG_BOLD_COLORS['dim']}unchanged{c.RESET}")
    return True


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None, stream: TextIO = None) -> ColorSession:
    """Main execution engine for the interactive session"""
    session = ColorSession(input_format=args.input_format, strict=getattr(args, "strict", False))
    stream = stream or sys.stdin

    render_color_info(session.color, "default")
    while True:
        sys.stdout.write(_prompt(session))
        sys.stdout.flush()
        line = stream.readline()
        if not line:
            print()
            break
        if not handle_line(session, line.rstrip("\r\n")):
            break
    return session
