#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/__init__.py

"""tonelab: inspect and transform colors across Lab, LCH, HSL and HSLuv."""

__version__ = "0.1.0"

from tonelab.core.config import WHITE_POINTS
from tonelab.shared.errors import (
    ConvergenceError,
    TonelabError,
    UnknownColorError,
    UnknownSpaceError,
)
from tonelab.shared.formatting import HexFormat, get_hex_format, set_always_shorten
from tonelab.shared.naming import get_name_for_hex, resolve_color
from tonelab.logic.transform import (
    Constant,
    Function,
    as_change,
    channel_transform,
    getter,
    hsl,
    hsl_h,
    hsl_l,
    hsl_s,
    hsl_values,
    hsluv,
    hsluv_h,
    hsluv_l,
    hsluv_s,
    hsluv_values,
    lab,
    lab_a,
    lab_b,
    lab_l,
    lab_values,
    lch,
    lch_c,
    lch_h,
    lch_l,
    lch_values,
    make,
    make_hsl,
    make_hsluv,
    make_lab,
    make_lch,
    set_hsl_h,
    set_hsl_l,
    set_hsl_s,
    set_hsluv_h,
    set_hsluv_l,
    set_hsluv_s,
    set_lab_a,
    set_lab_b,
    set_lab_l,
    set_lch_c,
    set_lch_h,
    set_lch_l,
    with_channel,
    with_space,
)
from tonelab.logic.metrics import (
    color_distance,
    contrast_ratio,
    is_light,
    relative_luminance,
    wcag_levels,
)
from tonelab.logic.convergence import (
    iterate,
    iterate_all,
    rotation,
    tint_ratio,
    tint_ratio_steps,
)
from tonelab.logic.derived import (
    change_white_point,
    complement,
    darken,
    desaturate,
    gradient,
    gradient_n,
    lighten,
    pastel,
    saturate,
)
