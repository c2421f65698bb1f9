#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/difference.py

import math
from typing import Tuple

from . import config as c

Lab = Tuple[float, float, float]


def _hue_deg(a: float, b: float) -> float:
    return math.degrees(math.atan2(b, a)) % c.HUE_MAX


def _delta_hue(h1: float, h2: float, chroma_product: float) -> float:
    if chroma_product == 0:
        return 0.0
    diff = h2 - h1
    if abs(diff) <= c.HUE_HALF:
        return diff
    return diff - c.HUE_MAX if diff > c.HUE_HALF else diff + c.HUE_MAX


def _mean_hue(h1: float, h2: float, chroma_product: float) -> float:
    if chroma_product == 0:
        return h1 + h2
    if abs(h2 - h1) <= c.HUE_HALF:
        return (h1 + h2) / c.DIV_2
    if h1 + h2 < c.HUE_MAX:
        return (h1 + h2 + c.HUE_MAX) / c.DIV_2
    return (h1 + h2 - c.HUE_MAX) / c.DIV_2


def delta_e_ciede2000(lab1: Lab, lab2: Lab) -> float:
    """
    Calculate the CIEDE2000 color difference (ΔE_00) between two CIE LAB colors.
    This formula is the CIE recommendation for perceptual color difference.

    Source: Sharma, G., Wu, W., & Dalal, E. N. (2005).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / c.DIV_2
    C_bar_7 = C_bar ** c.EXP_7
    G = c.G_FACTOR * (c.UNIT - math.sqrt(C_bar_7 / (C_bar_7 + c.POW7_25)))

    a1_p = (c.UNIT + G) * a1
    a2_p = (c.UNIT + G) * a2
    C1_p = math.hypot(a1_p, b1)
    C2_p = math.hypot(a2_p, b2)
    h1_p = _hue_deg(a1_p, b1)
    h2_p = _hue_deg(a2_p, b2)
    chroma_product = C1_p * C2_p

    dL = L2 - L1
    dC = C2_p - C1_p
    dh = _delta_hue(h1_p, h2_p, chroma_product)
    dH = c.DIV_2 * math.sqrt(max(0.0, chroma_product)) * math.sin(math.radians(dh) / c.DIV_2)

    L_bar = (L1 + L2) / c.DIV_2
    C_p_bar = (C1_p + C2_p) / c.DIV_2
    h_bar = _mean_hue(h1_p, h2_p, chroma_product)

    T = (
        c.UNIT
        - c.T_K1 * math.cos(math.radians(h_bar - c.T_OFFSET_1))
        + c.T_K2 * math.cos(math.radians(c.DIV_2 * h_bar))
        + c.T_K3 * math.cos(math.radians(c.T_MUL_3 * h_bar + c.T_OFFSET_2))
        - c.T_K4 * math.cos(math.radians(c.T_MUL_4 * h_bar - c.T_OFFSET_3))
    )

    L_50_sq = (L_bar - c.L_OFFSET) ** c.EXP_2
    S_L = c.UNIT + (c.S_L_K * L_50_sq) / math.sqrt(c.S_L_DIV + L_50_sq)
    S_C = c.UNIT + c.S_C_K * C_p_bar
    S_H = c.UNIT + c.S_L_K * C_p_bar * T

    d_theta = c.RT_D30 * math.exp(-(((h_bar - c.RT_H_OFFSET) / c.RT_DIV) ** c.EXP_2))
    C_p_bar_7 = C_p_bar ** c.EXP_7
    R_C = c.DIV_2 * math.sqrt(C_p_bar_7 / (C_p_bar_7 + c.POW7_25))
    R_T = -R_C * math.sin(math.radians(c.DIV_2 * d_theta))

    k_L, k_C, k_H = c.K_FACTORS
    term_L = dL / (k_L * S_L)
    term_C = dC / (k_C * S_C)
    term_H = dH / (k_H * S_H)

    return math.sqrt(term_L ** c.EXP_2 + term_C ** c.EXP_2 + term_H ** c.EXP_2 + R_T * term_C * term_H)
