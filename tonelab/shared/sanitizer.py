#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/sanitizer.py

import re
from typing import Optional

from tonelab.core import config as c

HEX_DIGITS = re.compile(r"^[0-9A-F]+$")


def _strip_hex(value: str) -> str:
    """Drop surrounding whitespace and a single leading '#', upper-case the rest."""
    s = str(value).strip()
    if s.startswith("#"):
        s = s[1:]
    return s.upper()


def normalize_hex(value: str) -> Optional[str]:
    """
    Normalizes a hex color string into a standard 6-character uppercase hex.

    Accepted forms are 'RGB', 'RRGGBB' and the 16-bit 'RRRRGGGGBBBB',
    each with an optional leading '#'. Returns None when the value is not
    one of those forms; name lookup is left to the caller.
    """
    if value is None:
        return None
    s = _strip_hex(value)

    if not s or not HEX_DIGITS.match(s):
        return None

    L = len(s)
    if L == 6:
        return s
    if L == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        return "".join([ch * 2 for ch in s])
    if L == 12:
        # 16-bit channels are scaled down to the nearest 8-bit value
        channels = (int(s[i : i + 4], 16) for i in (0, 4, 8))
        return "".join(f"{int(round(v / c.RGB16_FACTOR)):02X}" for v in channels)

    return None


def is_hex(value: str) -> bool:
    return normalize_hex(value) is not None
