# tonelab - comparison helpers shared by the test modules
from __future__ import annotations

from tonelab.core.conversions import hex_to_rgb


def rgb_close(color1: str, color2: str, tolerance: int = 1) -> bool:
    """True when every 8-bit channel differs by at most `tolerance`."""
    return all(abs(a - b) <= tolerance for a, b in zip(hex_to_rgb(color1), hex_to_rgb(color2)))


def hue_close(h1: float, h2: float, tolerance: float) -> bool:
    diff = abs(h1 - h2) % 360.0
    return min(diff, 360.0 - diff) <= tolerance
