#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/transform.py

"""
Generic transform framework.

Every space-specific read, write and construction goes through
with_space(): the color is converted into the working space, handed to a
transform function as three channels, and the function's result is
converted back to RGB, clamped per channel and formatted as hex.

Getters run the same path with an identity transform that captures the
channels on the way through; constructors run it on a throwaway seed color
with a transform that ignores its input.
"""

import math
from typing import Callable, NamedTuple, Optional, Tuple, Union

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.shared.clamping import _clamp, _clamp255
from tonelab.shared.errors import UnknownSpaceError
from tonelab.shared.formatting import HexFormat, format_hex

Triple = Tuple[float, float, float]
TransformFn = Callable[[float, float, float], Triple]
WhitePoint = Union[str, Tuple[float, float, float]]


class Space(NamedTuple):
    name: str
    to_triple: Callable[..., Triple]    # (r, g, b, white) -> channels
    from_triple: Callable[..., Triple]  # (t0, t1, t2, white) -> (r, g, b)
    hue_index: Optional[int] = None
    report: Optional[Callable[[Triple], Triple]] = None


def _lab_in(r, g, b, white):
    return conv.rgb_to_lab(r, g, b, white)


def _lab_out(L, a, b, white):
    return conv.lab_to_rgb(L, a, b, white)


# The Lab converter speaks radians; everything above this pair speaks degrees.
def _lch_in(r, g, b, white):
    L, chroma, hue = conv.lab_to_lch(*conv.rgb_to_lab(r, g, b, white))
    return L, chroma, math.degrees(hue) % c.HUE_MAX


def _lch_out(L, chroma, hue, white):
    L, a, b = conv.lch_to_lab(L, chroma, math.radians(hue % c.HUE_MAX))
    return conv.lab_to_rgb(L, a, b, white)


def _lch_report(channels):
    L, chroma, hue = channels
    return L, _clamp(chroma, 0.0, c.LCH_C_MAX), hue


def _hsl_in(r, g, b, white):
    h, s, L = conv.rgb_to_hsl(r, g, b)
    return h, s * c.PERCENT, L * c.PERCENT


def _hsl_out(h, s, L, white):
    return conv.hsl_to_rgb(h, s / c.PERCENT, L / c.PERCENT)


def _hsluv_in(r, g, b, white):
    return conv.rgb_to_hsluv(r, g, b)


def _hsluv_out(h, s, L, white):
    return conv.hsluv_to_rgb(h, s, L)


SPACES = {
    "lab": Space("lab", _lab_in, _lab_out),
    "lch": Space("lch", _lch_in, _lch_out, hue_index=2, report=_lch_report),
    "hsl": Space("hsl", _hsl_in, _hsl_out, hue_index=0),
    "hsluv": Space("hsluv", _hsluv_in, _hsluv_out, hue_index=0),
}


def get_space(space: Union[str, Space]) -> Space:
    if isinstance(space, Space):
        return space
    key = str(space).lower()
    if key not in SPACES:
        raise UnknownSpaceError(space, c.SPACE_KEYS)
    return SPACES[key]


def resolve_white_point(white_point: Optional[WhitePoint]) -> Tuple[float, float, float]:
    """Accept None (D65), a named illuminant such as 'd50', or an XYZ triple."""
    if white_point is None:
        return c.DEFAULT_WHITE_POINT
    if isinstance(white_point, str):
        key = white_point.lower()
        if key not in c.WHITE_POINTS:
            raise ValueError(
                f"unknown white point: '{white_point}' (expected one of: {', '.join(c.WHITE_POINTS)})"
            )
        return c.WHITE_POINTS[key]
    x, y, z = white_point
    return float(x), float(y), float(z)


def with_space(
    color: str,
    space: Union[str, Space],
    fn: TransformFn,
    white_point: Optional[WhitePoint] = None,
    fmt: Optional[HexFormat] = None,
) -> str:
    sp = get_space(space)
    white = resolve_white_point(white_point)
    r, g, b = conv.hex_to_rgb(color)
    t0, t1, t2 = fn(*sp.to_triple(r, g, b, white))
    r_out, g_out, b_out = sp.from_triple(t0, t1, t2, white)
    return format_hex(_clamp255(r_out), _clamp255(g_out), _clamp255(b_out), fmt=fmt)


def lab(color: str, fn: TransformFn, white_point: Optional[WhitePoint] = None, fmt: Optional[HexFormat] = None) -> str:
    """Transform a color through its (L, a, b) channels."""
    return with_space(color, "lab", fn, white_point, fmt)


def lch(color: str, fn: TransformFn, white_point: Optional[WhitePoint] = None, fmt: Optional[HexFormat] = None) -> str:
    """Transform a color through its (L, C, H) channels, hue in degrees."""
    return with_space(color, "lch", fn, white_point, fmt)


def hsl(color: str, fn: TransformFn, fmt: Optional[HexFormat] = None) -> str:
    """Transform a color through its (H, S, L) channels, S and L in 0-100."""
    return with_space(color, "hsl", fn, fmt=fmt)


def hsluv(color: str, fn: TransformFn, fmt: Optional[HexFormat] = None) -> str:
    """Transform a color through its HSLuv (H, S, L) channels."""
    return with_space(color, "hsluv", fn, fmt=fmt)


# ==========================================
# Single-channel changes
# ==========================================


class Constant(NamedTuple):
    """Replace the channel with a fixed value."""

    value: float

    def apply(self, current: float) -> float:
        return self.value


class Function(NamedTuple):
    """Replace the channel with fn(current)."""

    fn: Callable[[float], float]

    def apply(self, current: float) -> float:
        return self.fn(current)


Change = Union[Constant, Function]


def as_change(value) -> Change:
    """Tag a plain number or a unary callable as a Constant or a Function."""
    if isinstance(value, (Constant, Function)):
        return value
    if callable(value):
        return Function(value)
    return Constant(float(value))


def channel_transform(index: int, change: Change) -> TransformFn:
    if index not in (0, 1, 2):
        raise ValueError(f"channel index must be 0, 1 or 2, got {index}")

    def transform(t0: float, t1: float, t2: float) -> Triple:
        channels = [t0, t1, t2]
        channels[index] = change.apply(channels[index])
        return tuple(channels)

    return transform


def with_channel(
    color: str,
    space: Union[str, Space],
    index: int,
    change,
    white_point: Optional[WhitePoint] = None,
    fmt: Optional[HexFormat] = None,
) -> str:
    return with_space(color, space, channel_transform(index, as_change(change)), white_point, fmt)


# ==========================================
# Getters
# ==========================================


def read_channels(color: str, space: Union[str, Space], white_point: Optional[WhitePoint] = None) -> Triple:
    """Capture the channels with_space() hands to its transform, unmodified."""
    captured = []

    def capture(t0: float, t1: float, t2: float) -> Triple:
        captured.append((t0, t1, t2))
        return t0, t1, t2

    with_space(color, space, capture, white_point)
    return captured[0]


def getter(
    color: str,
    space: Union[str, Space],
    projection: Optional[int] = None,
    white_point: Optional[WhitePoint] = None,
):
    """
    Read a color's channels in a space.

    Returns the full triple, or the channel at `projection` when given.
    """
    sp = get_space(space)
    channels = read_channels(color, sp, white_point)
    if sp.report is not None:
        channels = sp.report(channels)
    if projection is None:
        return channels
    return channels[projection]


def lab_values(color: str, white_point: Optional[WhitePoint] = None) -> Triple:
    return getter(color, "lab", white_point=white_point)


def lch_values(color: str, white_point: Optional[WhitePoint] = None) -> Triple:
    return getter(color, "lch", white_point=white_point)


def hsl_values(color: str) -> Triple:
    return getter(color, "hsl")


def hsluv_values(color: str) -> Triple:
    return getter(color, "hsluv")


def _channel_getter(space: str, index: int, doc: str):
    def get(color: str, white_point: Optional[WhitePoint] = None) -> float:
        return getter(color, space, index, white_point)

    get.__doc__ = doc
    return get


def _channel_setter(space: str, index: int, doc: str):
    def set_channel(
        color: str,
        change,
        white_point: Optional[WhitePoint] = None,
        fmt: Optional[HexFormat] = None,
    ) -> str:
        return with_channel(color, space, index, change, white_point, fmt)

    set_channel.__doc__ = doc
    return set_channel


lab_l = _channel_getter("lab", 0, "Lab lightness L* (0-100).")
lab_a = _channel_getter("lab", 1, "Lab green-red axis a*.")
lab_b = _channel_getter("lab", 2, "Lab blue-yellow axis b*.")
lch_l = _channel_getter("lch", 0, "LCH lightness (0-100).")
lch_c = _channel_getter("lch", 1, "LCH chroma, clamped to 0-100.")
lch_h = _channel_getter("lch", 2, "LCH hue in degrees.")
hsl_h = _channel_getter("hsl", 0, "HSL hue in degrees.")
hsl_s = _channel_getter("hsl", 1, "HSL saturation (0-100).")
hsl_l = _channel_getter("hsl", 2, "HSL lightness (0-100).")
hsluv_h = _channel_getter("hsluv", 0, "HSLuv hue in degrees.")
hsluv_s = _channel_getter("hsluv", 1, "HSLuv saturation (0-100).")
hsluv_l = _channel_getter("hsluv", 2, "HSLuv lightness (0-100).")

set_lab_l = _channel_setter("lab", 0, "Set or map Lab L*.")
set_lab_a = _channel_setter("lab", 1, "Set or map Lab a*.")
set_lab_b = _channel_setter("lab", 2, "Set or map Lab b*.")
set_lch_l = _channel_setter("lch", 0, "Set or map LCH lightness.")
set_lch_c = _channel_setter("lch", 1, "Set or map LCH chroma.")
set_lch_h = _channel_setter("lch", 2, "Set or map LCH hue (degrees).")
set_hsl_h = _channel_setter("hsl", 0, "Set or map HSL hue (degrees).")
set_hsl_s = _channel_setter("hsl", 1, "Set or map HSL saturation.")
set_hsl_l = _channel_setter("hsl", 2, "Set or map HSL lightness.")
set_hsluv_h = _channel_setter("hsluv", 0, "Set or map HSLuv hue (degrees).")
set_hsluv_s = _channel_setter("hsluv", 1, "Set or map HSLuv saturation.")
set_hsluv_l = _channel_setter("hsluv", 2, "Set or map HSLuv lightness.")


# ==========================================
# Constructors
# ==========================================


def make(
    space: Union[str, Space],
    t0: float,
    t1: float,
    t2: float,
    white_point: Optional[WhitePoint] = None,
    fmt: Optional[HexFormat] = None,
) -> str:
    return with_space(c.SEED_COLOR, space, lambda *_: (t0, t1, t2), white_point, fmt)


def make_lab(L: float, a: float, b: float, white_point: Optional[WhitePoint] = None, fmt: Optional[HexFormat] = None) -> str:
    return make("lab", L, a, b, white_point, fmt)


def make_lch(L: float, chroma: float, hue: float, white_point: Optional[WhitePoint] = None, fmt: Optional[HexFormat] = None) -> str:
    return make("lch", L, chroma, hue, white_point, fmt)


def make_hsl(h: float, s: float, L: float, fmt: Optional[HexFormat] = None) -> str:
    return make("hsl", h, s, L, fmt=fmt)


def make_hsluv(h: float, s: float, L: float, fmt: Optional[HexFormat] = None) -> str:
    return make("hsluv", h, s, L, fmt=fmt)
