# tonelab - Unit tests for operations built on the transform framework
"""
Tests cover:
- pastel and the lighten / darken / saturate / complement helpers
- two-color and multi-stop gradients in srgb, lab and lch
- white point reinterpretation
"""

from __future__ import annotations

import pytest

from helpers import rgb_close
from tonelab import (
    HexFormat,
    change_white_point,
    complement,
    darken,
    desaturate,
    gradient,
    gradient_n,
    hsl_s,
    hsl_values,
    lab_b,
    lab_l,
    lighten,
    pastel,
    saturate,
)

# ─────────────────────────────────────────────────────────────────────────────
# Simple adjustments
# ─────────────────────────────────────────────────────────────────────────────


class TestPastel:
    def test_red(self):
        h, s, L = hsl_values(pastel("#FF0000"))
        assert h == pytest.approx(0.0, abs=1.0)
        assert s == pytest.approx(90.0, abs=1.0)
        assert L == pytest.approx(55.0, abs=1.0)

    def test_white_stays_white(self):
        assert pastel("#FFFFFF") == "#FFFFFF"

    def test_custom_modifiers(self):
        assert pastel("#FF0000", s_mod=0.0, l_mod=1.0) == "#808080"


class TestAdjustments:
    def test_lighten_and_darken(self):
        assert lab_l(lighten("#808080")) == pytest.approx(lab_l("#808080") + 10.0, abs=0.5)
        assert lab_l(darken("#808080", 20)) == pytest.approx(lab_l("#808080") - 20.0, abs=0.5)

    def test_lighten_saturates_at_white(self):
        assert lighten("#FFFFFF", 50) == "#FFFFFF"
        assert darken("#000000", 50) == "#000000"

    def test_saturate(self):
        assert hsl_s("#996666") == pytest.approx(20.0, abs=0.5)
        assert hsl_s(saturate("#996666")) == pytest.approx(30.0, abs=1.0)
        assert hsl_s(desaturate("#996666", 50)) == pytest.approx(0.0, abs=0.5)

    def test_complement(self):
        assert complement("#FF0000") == "#00FFFF"
        assert rgb_close(complement(complement("#336699")), "#336699")


# ─────────────────────────────────────────────────────────────────────────────
# Gradients
# ─────────────────────────────────────────────────────────────────────────────


class TestGradient:
    def test_with_ends(self):
        assert gradient(5, "#000000", "#FFFFFF", include_ends=True) == [
            "#000000",
            "#404040",
            "#808080",
            "#BFBFBF",
            "#FFFFFF",
        ]

    def test_without_ends(self):
        assert gradient(3, "#000000", "#FFFFFF") == ["#000000", "#808080", "#FFFFFF"]

    def test_ends_are_kept_verbatim(self):
        colors = gradient(3, "#abc", "red", include_ends=True)
        assert colors[0] == "#abc"
        assert colors[-1] == "red"
        assert len(colors) == 3

    def test_two_steps_with_ends(self):
        assert gradient(2, "#123456", "#654321", include_ends=True) == ["#123456", "#654321"]

    def test_single_step(self):
        assert gradient(1, "#336699", "#FFFFFF") == ["#336699"]

    @pytest.mark.parametrize("steps,include_ends", [(0, False), (-3, False), (1, True), (0, True)])
    def test_bad_step_counts(self, steps, include_ends):
        with pytest.raises(ValueError):
            gradient(steps, "#000000", "#FFFFFF", include_ends=include_ends)

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            gradient(3, "#000000", "#FFFFFF", space="hsv")

    @pytest.mark.parametrize("space", ["lab", "lch"])
    def test_perceptual_spaces_hit_the_endpoints(self, space):
        colors = gradient(7, "#336699", "#FFCC00", space=space)
        assert len(colors) == 7
        assert rgb_close(colors[0], "#336699")
        assert rgb_close(colors[-1], "#FFCC00")

    def test_lab_lightness_is_linear(self):
        colors = gradient(5, "#000000", "#FFFFFF", space="lab")
        assert [lab_l(col) for col in colors] == pytest.approx([0.0, 25.0, 50.0, 75.0, 100.0], abs=0.5)

    def test_long_form(self):
        colors = gradient(2, "#000000", "#FFFFFF", fmt=HexFormat(shorten=False))
        assert colors == ["#000000000000", "#FFFFFFFFFFFF"]


class TestGradientN:
    def test_three_stops(self):
        assert gradient_n(5, ["#000000", "#FFFFFF", "#000000"]) == [
            "#000000",
            "#808080",
            "#FFFFFF",
            "#808080",
            "#000000",
        ]

    def test_two_stops_match_gradient(self):
        assert gradient_n(4, ["#336699", "#FFCC00"]) == gradient(4, "#336699", "#FFCC00")

    def test_needs_two_colors(self):
        with pytest.raises(ValueError):
            gradient_n(5, ["#000000"])


# ─────────────────────────────────────────────────────────────────────────────
# White point
# ─────────────────────────────────────────────────────────────────────────────


class TestChangeWhitePoint:
    @pytest.mark.parametrize("color", ["#336699", "#808080", "#FF0000"])
    def test_same_white_point_is_identity(self, color):
        assert rgb_close(change_white_point(color, "d65", "d65"), color)

    def test_d50_warms_gray(self):
        assert lab_b(change_white_point("#808080", "d65", "d50")) > 0.0

    def test_accepts_triples(self):
        d50 = (96.422, 100.0, 82.521)
        assert change_white_point("#808080", "d65", d50) == change_white_point("#808080", "d65", "d50")
