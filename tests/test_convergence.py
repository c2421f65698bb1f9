# tonelab - Unit tests for the convergence engine
"""
Tests cover:
- iterate / iterate_all stopping rules (condition, fixpoint, step cap)
- tint_ratio direction and strict ratio comparison
- hue rotations in hsl, hsluv and lch
"""

from __future__ import annotations

import pytest

from helpers import hue_close
from tonelab import (
    ConvergenceError,
    contrast_ratio,
    hsl_h,
    hsluv_h,
    iterate,
    iterate_all,
    lab_l,
    lch_h,
    make_hsluv,
    rotation,
    set_always_shorten,
    tint_ratio,
    tint_ratio_steps,
)
from tonelab.core import config
from tonelab.logic.convergence import same_color


def never(color):
    return False


def flip(color):
    return "#000000" if same_color(color, "#FFFFFF") else "#FFFFFF"


def brighter(color):
    return "#" + f"{int(color[1:3], 16) + 1:02X}" * 3


# ─────────────────────────────────────────────────────────────────────────────
# iterate
# ─────────────────────────────────────────────────────────────────────────────


class TestIterate:
    def test_identity_op_stops_immediately(self):
        assert iterate_all("#336699", lambda col: col, never) == ["#336699"]
        assert iterate("#336699", lambda col: col, never) == "#336699"

    def test_condition_checked_first(self):
        calls = []

        def op(color):
            calls.append(color)
            return "#000000"

        assert iterate_all("#336699", op, lambda col: True) == ["#336699"]
        assert calls == []

    def test_stops_on_condition(self):
        steps = iterate_all("#000000", brighter, lambda col: col == "#050505")
        assert steps == ["#000000", "#010101", "#020202", "#030303", "#040404", "#050505"]

    def test_fixpoint_ignores_hex_form(self):
        steps = iterate_all("#336699", lambda col: "#333366669999", never)
        assert steps == ["#336699"]

    def test_cap_is_respected(self, capsys):
        steps = iterate_all("#FFFFFF", flip, never)
        assert len(steps) == config.MAX_ITERATIONS + 1
        assert "iteration stopped" in capsys.readouterr().err

    def test_strict_raises(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_ITERATIONS", 25)
        with pytest.raises(ConvergenceError) as exc:
            iterate("#FFFFFF", flip, never, strict=True)
        assert exc.value.steps == 25

    def test_condition_met_on_last_allowed_step(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "MAX_ITERATIONS", 3)
        steps = iterate_all("#000000", brighter, lambda col: col == "#030303", strict=True)
        assert steps == ["#000000", "#010101", "#020202", "#030303"]
        assert capsys.readouterr().err == ""


# ─────────────────────────────────────────────────────────────────────────────
# tint_ratio
# ─────────────────────────────────────────────────────────────────────────────


class TestTintRatio:
    def test_darkens_against_light(self):
        result = tint_ratio("#eeeeee", "#eeeeee", 4.5)
        assert contrast_ratio(result, "#eeeeee") > 4.5
        assert lab_l(result) < lab_l("#eeeeee")

    def test_stops_at_first_passing_step(self):
        steps = tint_ratio_steps("#eeeeee", "#eeeeee", 4.5)
        assert steps[0] == "#eeeeee"
        assert contrast_ratio(steps[-1], "#eeeeee") > 4.5
        assert all(contrast_ratio(step, "#eeeeee") <= 4.5 for step in steps[:-1])

    def test_lightens_against_dark(self):
        result = tint_ratio("#222222", "#111111", 3.0)
        assert contrast_ratio(result, "#111111") > 3.0
        assert lab_l(result) > lab_l("#222222")

    def test_equal_ratio_is_not_enough(self):
        ratio = contrast_ratio("#767676", "#FFFFFF")
        steps = tint_ratio_steps("#767676", "#FFFFFF", ratio)
        assert len(steps) >= 2
        assert contrast_ratio(steps[-1], "#FFFFFF") > ratio

    def test_unreachable_ratio_stops_at_fixpoint(self):
        result = tint_ratio("#808080", "#FFFFFF", 30.0)
        assert same_color(result, "#000000")

    def test_respects_long_form(self):
        set_always_shorten(False)
        result = tint_ratio("#eeeeee", "#eeeeee", 4.5)
        assert len(result) == 13


# ─────────────────────────────────────────────────────────────────────────────
# rotation
# ─────────────────────────────────────────────────────────────────────────────


class TestRotation:
    def test_hsluv_sixths(self):
        colors = rotation(make_hsluv(0, 50, 50), 60, space="hsluv")
        assert len(colors) == 6
        for k, color in enumerate(colors):
            assert hue_close(hsluv_h(color), k * 60.0, 2.0)

    def test_hsl_primaries(self):
        assert rotation("#FF0000", 120) == ["#FF0000", "#00FF00", "#0000FF"]

    @pytest.mark.parametrize("interval,expected", [(90, 4), (100, 4), (120, 3), (360, 1), (45, 8)])
    def test_count_excludes_full_turn(self, interval, expected):
        assert len(rotation("#336699", interval)) == expected

    def test_lch_rotation(self):
        colors = rotation("#8A7F70", 180, space="lch")
        assert len(colors) == 2
        assert hue_close(lch_h(colors[1]), lch_h("#8A7F70") + 180.0, 5.0)

    def test_first_is_the_input_hue(self):
        assert hsl_h(rotation("#336699", 30)[0]) == pytest.approx(hsl_h("#336699"), abs=0.5)

    def test_bad_interval(self):
        with pytest.raises(ValueError):
            rotation("#336699", 0)

    def test_space_without_hue(self):
        with pytest.raises(ValueError):
            rotation("#336699", 60, space="lab")
