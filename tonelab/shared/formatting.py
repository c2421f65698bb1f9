#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/formatting.py

from typing import NamedTuple, Optional, Tuple

from tonelab.core import config as c
from .clamping import _clamp255


class HexFormat(NamedTuple):
    """How colors leave the library: '#RRGGBB' when shorten, else '#RRRRGGGGBBBB'."""

    shorten: bool = c.ALWAYS_SHORTEN


_default_format = HexFormat()


def get_hex_format() -> HexFormat:
    return _default_format


def set_always_shorten(flag: bool) -> HexFormat:
    """
    Set the process-wide output form and return the previous setting.

    Meant to be called once while configuring the host application; it is
    not synchronized against concurrent callers.
    """
    global _default_format
    previous = _default_format
    _default_format = HexFormat(shorten=bool(flag))
    return previous


def quantize_rgb(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Round float channels to 8-bit integers, clamping into [0, 255]."""
    return tuple(int(round(_clamp255(v))) for v in (r, g, b))


def format_hex(r: float, g: float, b: float, fmt: Optional[HexFormat] = None) -> str:
    if fmt is None:
        fmt = _default_format
    r8, g8, b8 = quantize_rgb(r, g, b)
    if fmt.shorten:
        return f"#{r8:02X}{g8:02X}{b8:02X}"
    return f"#{r8 * c.RGB16_FACTOR:04X}{g8 * c.RGB16_FACTOR:04X}{b8 * c.RGB16_FACTOR:04X}"
