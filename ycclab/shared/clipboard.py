#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/shared/clipboard.py

import base64
import shutil
import subprocess
import sys
from typing import List, Optional

from .logger import log

# Candidate commands per platform, tried in order
CLIPBOARD_COMMANDS = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


def _find_command(platform: str) -> Optional[List[str]]:
    key = "linux" if platform.startswith("linux") else platform
    for cmd in CLIPBOARD_COMMANDS.get(key, []):
        if shutil.which(cmd[0]):
            return cmd
    return None


def _osc52(text: str) -> str:
    """Terminal escape asking the emulator to put `text` on the system clipboard."""
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\033]52;c;{payload}\a"


def copy_text(text: str) -> None:
    """
    Best-effort copy to the system clipboard. Never raises and returns nothing;
    callers do not wait on or check the outcome.
    """
    cmd = _find_command(sys.platform)
    if cmd is not None:
        try:
            subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=2)
            return
        except (OSError, subprocess.SubprocessError) as e:
            log("warning", f"clipboard command '{cmd[0]}' failed: {e}")

    if sys.stdout.isatty():
        sys.stdout.write(_osc52(text))
        sys.stdout.flush()
    else:
        log("warning", "no clipboard available, nothing copied")
