#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/luminance.py

from . import config as c
from tonelab.shared.clamping import _clamp01


def _wcag_to_linear(color_comp: float) -> float:
    """Gamma-decode an 8-bit channel the way WCAG 2.x defines it."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * _wcag_to_linear(r) +
        c.LUMA_G * _wcag_to_linear(g) +
        c.LUMA_B * _wcag_to_linear(b)
    )
