#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/contrast.py

from typing import Dict, Tuple

from . import config as c
from tonelab.shared.clamping import _clamp
from .luminance import get_luminance


def get_contrast_ratio(y1: float, y2: float) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two relative luminances.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter of the two.
    """
    lighter, darker = (y1, y2) if y1 > y2 else (y2, y1)
    ratio = (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)
    return _clamp(ratio, c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO)


def get_contrast_ratio_rgb(c1: Tuple[int, int, int], c2: Tuple[int, int, int]) -> float:
    """Calculate the WCAG 2.1 contrast ratio between two RGB colors."""
    return get_contrast_ratio(get_luminance(*c1), get_luminance(*c2))


def get_pass_fail(ratio: float) -> Dict[str, str]:
    """Grade a contrast ratio against the WCAG 2.1 text thresholds."""
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }
