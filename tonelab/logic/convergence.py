#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/convergence.py

from typing import Callable, List

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.shared.errors import ConvergenceError
from tonelab.shared.logger import log
from .metrics import contrast_ratio, is_light
from .transform import Function, get_space, set_lab_l, with_channel


def same_color(color1: str, color2: str) -> bool:
    """Compare two colors on their 8-bit RGB value, ignoring the hex form."""
    return conv.hex_to_rgb(color1) == conv.hex_to_rgb(color2)


def iterate_all(
    start: str,
    op: Callable[[str], str],
    condition: Callable[[str], bool],
    strict: bool = False,
) -> List[str]:
    """
    Apply `op` repeatedly, collecting every color visited.

    Stops as soon as `condition` holds for the latest color or `op` no
    longer changes it. At most MAX_ITERATIONS steps are taken; reaching the
    cap logs a warning and returns what was reached, or raises
    ConvergenceError when `strict` is set.
    """
    steps = [start]
    for _ in range(c.MAX_ITERATIONS):
        last = steps[-1]
        if condition(last):
            return steps
        nxt = op(last)
        if same_color(nxt, last):
            return steps
        steps.append(nxt)

    if condition(steps[-1]):
        return steps
    if strict:
        raise ConvergenceError(c.MAX_ITERATIONS, steps[-1])
    log("warning", f"iteration stopped after {c.MAX_ITERATIONS} steps without converging, last color {steps[-1]}")
    return steps


def iterate(
    start: str,
    op: Callable[[str], str],
    condition: Callable[[str], bool],
    strict: bool = False,
) -> str:
    return iterate_all(start, op, condition, strict)[-1]


def _tint_search(color: str, against: str, ratio: float, step: float):
    delta = -step if is_light(against) else step

    def op(current: str) -> str:
        return set_lab_l(current, lambda L: L + delta)

    def condition(current: str) -> bool:
        return contrast_ratio(current, against) > ratio

    return op, condition


def tint_ratio(color: str, against: str, ratio: float, step: float = c.TINT_STEP) -> str:
    """
    Darken (against a light color) or lighten (against a dark one) `color`
    in Lab L* until its contrast with `against` exceeds `ratio`.
    """
    op, condition = _tint_search(color, against, ratio, step)
    return iterate(color, op, condition)


def tint_ratio_steps(color: str, against: str, ratio: float, step: float = c.TINT_STEP) -> List[str]:
    """Every intermediate color tint_ratio() passes through."""
    op, condition = _tint_search(color, against, ratio, step)
    return iterate_all(color, op, condition)


def rotation(color: str, interval: float, space: str = "hsl") -> List[str]:
    """
    Colors at `color`'s hue plus 0, interval, 2*interval, ... below 360
    degrees, rotated in `space` (hsl, hsluv or lch).
    """
    if interval <= 0:
        raise ValueError(f"rotation interval must be positive, got {interval}")
    sp = get_space(space)
    if sp.hue_index is None:
        raise ValueError(f"color space '{sp.name}' has no hue channel")

    colors = []
    k = 0
    while k * interval < c.HUE_MAX:
        offset = k * interval
        colors.append(with_channel(color, sp, sp.hue_index, Function(lambda h, offset=offset: h + offset)))
        k += 1
    return colors
