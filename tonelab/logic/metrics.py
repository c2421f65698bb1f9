#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/metrics.py

from typing import Dict

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.core.contrast import get_contrast_ratio, get_pass_fail
from tonelab.core.difference import delta_e_ciede2000
from tonelab.core.luminance import get_luminance
from .transform import lab_l, lab_values


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a color, 0.0 (black) to 1.0 (white)."""
    return get_luminance(*conv.hex_to_rgb(color))


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio, 1.0 to 21.0. Symmetric in its arguments."""
    return get_contrast_ratio(relative_luminance(color1), relative_luminance(color2))


def wcag_levels(color1: str, color2: str) -> Dict[str, object]:
    ratio = contrast_ratio(color1, color2)
    return {
        "ratio": round(ratio, c.EXP_2),
        "levels": get_pass_fail(ratio),
    }


def color_distance(color1: str, color2: str) -> float:
    """CIEDE2000 distance between two colors' Lab values under D65."""
    return delta_e_ciede2000(lab_values(color1), lab_values(color2))


def is_light(color: str, threshold: float = c.LIGHT_THRESHOLD) -> bool:
    return lab_l(color) > threshold
