#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ycclab/logic/session/state.py

from typing import Callable, Optional

from ycclab.core import config as c
from ycclab.core.conversions import derive_display
from ycclab.core.types import ColorDisplay, RGB
from ycclab.shared.clipboard import copy_text
from ycclab.shared.formatting import format_field
from ycclab.shared.parser import UnknownFormat, validate_and_convert


class ColorSession:
    """
    Mutable state behind an interactive front end.

    Holds the last accepted color, the declared input format and the raw text
    typed for it. Rejected input never touches the color, and switching
    format only clears the text.
    """

    def __init__(
        self,
        rgb=c.DEFAULT_RGB,
        input_format: str = "hex",
        strict: bool = False,
        copier: Callable[[str], None] = copy_text,
    ):
        if input_format not in c.INPUT_FORMATS:
            raise UnknownFormat(f"unknown input format '{input_format}'")
        self.color: ColorDisplay = derive_display(rgb)
        self.input_format = input_format
        self.input_text = ""
        self.strict = strict
        self._copier = copier

    @property
    def rgb(self) -> RGB:
        return self.color.rgb

    def submit(self, text: str) -> bool:
        """Handle one input event. Returns True if the color was updated."""
        self.input_text = text
        rgb: Optional[RGB] = validate_and_convert(text, self.input_format, self.strict)
        if rgb is None:
            return False
        self.color = derive_display(rgb)
        return True

    def select_format(self, fmt: str) -> None:
        if fmt not in c.INPUT_FORMATS:
            raise UnknownFormat(f"unknown input format '{fmt}'")
        self.input_format = fmt
        self.input_text = ""

    def field(self, fmt: str) -> str:
        if fmt not in c.INPUT_FORMATS:
            raise UnknownFormat(f"unknown field '{fmt}'")
        return format_field(fmt, self.color)

    def copy(self, fmt: str) -> str:
        text = self.field(fmt)
        self._copier(text)
        return text
