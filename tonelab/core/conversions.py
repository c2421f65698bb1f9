#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/conversions.py

import functools
import math
from typing import Tuple

from coloraide.everything import ColorAll

from . import config as c
from tonelab.shared.clamping import _clamp01
from tonelab.shared.naming import color_to_rgb

Triple = Tuple[float, float, float]


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert a hex string or color name to an 8-bit RGB tuple."""
    return color_to_rgb(hex_code)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    """Convert RGB to CIE XYZ."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def xyz_to_rgb(x: float, y: float, z: float) -> Triple:
    """Convert CIE XYZ to RGB. Channels are not clamped."""
    x_n, y_n, z_n = x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return (
        _linear_to_srgb(r_lin) * c.RGB_MAX,
        _linear_to_srgb(g_lin) * c.RGB_MAX,
        _linear_to_srgb(b_lin) * c.RGB_MAX,
    )


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t**3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float, white: Triple = c.D65) -> Triple:
    """Convert XYZ to CIE LAB relative to the given reference white."""
    w_x, w_y, w_z = white
    x_r = _xyz_f(x / w_x)
    y_r = _xyz_f(y / w_y)
    z_r = _xyz_f(z / w_z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float, white: Triple = c.D65) -> Triple:
    """Convert LAB to CIE XYZ relative to the given reference white."""
    w_x, w_y, w_z = white
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return _xyz_f_inv(x_r) * w_x, _xyz_f_inv(y_r) * w_y, _xyz_f_inv(z_r) * w_z


def rgb_to_lab(r: float, g: float, b: float, white: Triple = c.D65) -> Triple:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b), white=white)


def lab_to_rgb(L: float, a: float, b: float, white: Triple = c.D65) -> Triple:
    """Direct LAB to RGB conversion."""
    return xyz_to_rgb(*lab_to_xyz(L, a, b, white=white))


def lab_to_lch(L: float, a: float, b: float) -> Triple:
    """Convert LAB to LCH. The hue is returned in radians."""
    return L, math.hypot(a, b), math.atan2(b, a)


def lch_to_lab(L: float, chroma: float, hue: float) -> Triple:
    """Convert LCH to LAB. The hue is expected in radians."""
    return L, chroma * math.cos(hue), chroma * math.sin(hue)


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """Convert RGB to HSL with saturation and lightness in 0-1."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, s, L)


def hsl_to_rgb(h: float, s: float, L: float) -> Triple:
    """Convert HSL to RGB. Channels are not clamped."""
    h = h % c.HUE_MAX
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return r * c.RGB_MAX, g * c.RGB_MAX, b * c.RGB_MAX


def rgb_to_hsluv(r: float, g: float, b: float) -> Triple:
    """Convert RGB to HSLuv (hue in degrees, saturation and lightness in 0-100)."""
    hsluv = ColorAll("srgb", [r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX]).convert("hsluv")
    h = hsluv["hue"]
    # Achromatic colors carry an undefined (NaN) hue
    if h != h:
        h = 0.0
    return h % c.HUE_MAX, hsluv["saturation"], hsluv["lightness"]


def hsluv_to_rgb(h: float, s: float, L: float) -> Triple:
    """Convert HSLuv to RGB. Channels are not clamped."""
    srgb = ColorAll("hsluv", [h % c.HUE_MAX, s, L]).convert("srgb")
    return srgb["red"] * c.RGB_MAX, srgb["green"] * c.RGB_MAX, srgb["blue"] * c.RGB_MAX


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
