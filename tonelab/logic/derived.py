#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/derived.py

from typing import List, Optional, Sequence, Tuple

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.shared.clamping import _clamp
from tonelab.shared.formatting import HexFormat, format_hex
from .transform import (
    WhitePoint,
    hsl,
    lab_values,
    make_lab,
    make_lch,
    read_channels,
    set_hsl_h,
    set_hsl_s,
    set_lab_l,
)


def pastel(color: str, s_mod: float = c.PASTEL_SATURATION, l_mod: float = c.PASTEL_LIGHTNESS) -> str:
    """Scale HSL saturation and lightness; the result is only clamped in RGB."""
    return hsl(color, lambda h, s, L: (h, s * s_mod, L * l_mod))


def change_white_point(color: str, w1: WhitePoint, w2: WhitePoint) -> str:
    """Reinterpret the Lab values a color has under `w1` as Lab values under `w2`."""
    return make_lab(*lab_values(color, white_point=w1), white_point=w2)


def lighten(color: str, amount: float = 10.0) -> str:
    return set_lab_l(color, lambda L: _clamp(L + amount, 0.0, c.LAB_L_MAX))


def darken(color: str, amount: float = 10.0) -> str:
    return set_lab_l(color, lambda L: _clamp(L - amount, 0.0, c.LAB_L_MAX))


def saturate(color: str, amount: float = 10.0) -> str:
    return set_hsl_s(color, lambda s: _clamp(s + amount, 0.0, c.PERCENT))


def desaturate(color: str, amount: float = 10.0) -> str:
    return set_hsl_s(color, lambda s: _clamp(s - amount, 0.0, c.PERCENT))


def complement(color: str) -> str:
    return set_hsl_h(color, lambda h: h + c.HUE_HALF)


# ==========================================
# Gradients
# ==========================================


def _check_gradient_space(space: str) -> str:
    key = str(space).lower()
    if key not in c.GRADIENT_SPACES:
        raise ValueError(
            f"unknown gradient space: '{space}' (expected one of: {', '.join(c.GRADIENT_SPACES)})"
        )
    return key


def _to_space(color: str, space: str) -> Tuple[float, float, float]:
    if space == "srgb":
        r, g, b = conv.hex_to_rgb(color)
        return float(r), float(g), float(b)
    return read_channels(color, space)


def _interpolate(c1, c2, t: float, space: str) -> Tuple[float, float, float]:
    """Interpolate between two colors in the specified colorspace."""
    if space == "lch":
        l1, c1_val, h1 = c1
        l2, c2_val, h2 = c2
        h1, h2 = h1 % c.HUE_MAX, h2 % c.HUE_MAX
        h_diff = h2 - h1
        if h_diff > c.HUE_HALF:
            h2 -= c.HUE_MAX
        elif h_diff < -c.HUE_HALF:
            h2 += c.HUE_MAX
        return l1 + t * (l2 - l1), c1_val + t * (c2_val - c1_val), (h1 + t * (h2 - h1)) % c.HUE_MAX
    return tuple(a + t * (b - a) for a, b in zip(c1, c2))


def _from_space(channels, space: str, fmt: Optional[HexFormat]) -> str:
    if space == "lab":
        return make_lab(*channels, fmt=fmt)
    if space == "lch":
        return make_lch(*channels, fmt=fmt)
    return format_hex(*channels, fmt=fmt)


def gradient(
    steps: int,
    start: str,
    end: str,
    include_ends: bool = False,
    space: str = "srgb",
    fmt: Optional[HexFormat] = None,
) -> List[str]:
    """
    `steps` colors running from `start` to `end`.

    With `include_ends`, the given `start` and `end` strings are kept as
    the first and last items and `steps - 2` colors are interpolated
    strictly between them.
    """
    space = _check_gradient_space(space)
    if include_ends and steps < 2:
        raise ValueError(f"a gradient with ends needs at least 2 steps, got {steps}")
    if steps < 1:
        raise ValueError(f"gradient steps must be at least 1, got {steps}")

    c1, c2 = _to_space(start, space), _to_space(end, space)
    if steps == 1:
        return [_from_space(c1, space, fmt)]

    intervals = steps - 1
    if include_ends:
        inner = [_from_space(_interpolate(c1, c2, i / intervals, space), space, fmt) for i in range(1, intervals)]
        return [start] + inner + [end]
    return [_from_space(_interpolate(c1, c2, i / intervals, space), space, fmt) for i in range(steps)]


def gradient_n(
    steps: int,
    colors: Sequence[str],
    space: str = "srgb",
    fmt: Optional[HexFormat] = None,
) -> List[str]:
    """Spread `steps` samples evenly over the segments between consecutive stops."""
    space = _check_gradient_space(space)
    if len(colors) < 2:
        raise ValueError("at least two colors are required for a gradient")
    if steps < 1:
        raise ValueError(f"gradient steps must be at least 1, got {steps}")

    colors_in_space = [_to_space(col, space) for col in colors]
    if steps == 1:
        return [_from_space(colors_in_space[0], space, fmt)]

    num_segments = len(colors_in_space) - 1
    total_intervals = steps - 1
    gradient_colors = []

    for i in range(total_intervals + 1):
        t_scaled = (i / total_intervals) * num_segments
        idx = min(int(t_scaled), num_segments - 1)
        channels = _interpolate(colors_in_space[idx], colors_in_space[idx + 1], t_scaled - idx, space)
        gradient_colors.append(_from_space(channels, space, fmt))

    return gradient_colors
