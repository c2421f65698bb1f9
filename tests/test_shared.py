# tonelab - Unit tests for hex parsing, color names, formatting and logging
"""
Tests cover:
- normalize_hex short, long and 16-bit forms
- resolve_color for hex codes and CSS names
- HexFormat output forms and the process-wide shorten preference
- the level logger's stream routing
"""

from __future__ import annotations

import pytest

from tonelab.shared.errors import TonelabError, UnknownColorError
from tonelab.shared.formatting import (
    HexFormat,
    format_hex,
    get_hex_format,
    quantize_rgb,
    set_always_shorten,
)
from tonelab.shared.logger import log
from tonelab.shared.naming import color_to_rgb, get_name_for_hex, resolve_color
from tonelab.shared.sanitizer import is_hex, normalize_hex

# ─────────────────────────────────────────────────────────────────────────────
# Hex parsing
# ─────────────────────────────────────────────────────────────────────────────


class TestNormalizeHex:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#ff0080", "FF0080"),
            ("FF0080", "FF0080"),
            ("  #abc ", "AABBCC"),
            ("#FFFF00008080", "FF0080"),
            ("#0101FEFE7F7F", "01FE7F"),
        ],
    )
    def test_valid_forms(self, value, expected):
        assert normalize_hex(value) == expected

    @pytest.mark.parametrize("value", ["", "#", "#12", "#12345", "#GGGGGG", "red", None])
    def test_invalid_forms(self, value):
        assert normalize_hex(value) is None

    def test_is_hex(self):
        assert is_hex("#123456")
        assert not is_hex("teal")


class TestResolveColor:
    def test_hex_passes_through(self):
        assert resolve_color("#336699") == "336699"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("red", "FF0000"),
            ("Dark Gray", "A9A9A9"),
            ("rebecca-purple", "663399"),
            ("LightSalmon", "FFA07A"),
        ],
    )
    def test_names(self, name, expected):
        assert resolve_color(name) == expected

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownColorError) as exc:
            resolve_color("not-a-color")
        assert exc.value.value == "not-a-color"

    def test_unknown_color_is_a_value_error(self):
        with pytest.raises(ValueError):
            color_to_rgb("#zzzzzz")
        assert issubclass(UnknownColorError, TonelabError)

    def test_color_to_rgb(self):
        assert color_to_rgb("navy") == (0, 0, 128)

    def test_name_for_hex(self):
        assert get_name_for_hex("#FF0000") == "red"
        assert get_name_for_hex("#123457") == ""


# ─────────────────────────────────────────────────────────────────────────────
# Formatting
# ─────────────────────────────────────────────────────────────────────────────


class TestFormatHex:
    def test_short_form_by_default(self):
        assert get_hex_format().shorten is True
        assert format_hex(255, 0, 128) == "#FF0080"

    def test_long_form(self):
        assert format_hex(255, 0, 128, fmt=HexFormat(shorten=False)) == "#FFFF00008080"

    def test_long_form_round_trips_to_short(self):
        long_hex = format_hex(18, 52, 86, fmt=HexFormat(shorten=False))
        assert normalize_hex(long_hex) == "123456"

    @pytest.mark.parametrize(
        "channels,expected",
        [
            ((255.4, 127.6, 0.1), (255, 128, 0)),
            ((300.0, -10.0, 64.0), (255, 0, 64)),
            ((float("nan"), 1.0, 2.0), (0, 1, 2)),
        ],
    )
    def test_quantize_clamps_and_rounds(self, channels, expected):
        assert quantize_rgb(*channels) == expected

    def test_set_always_shorten(self):
        previous = set_always_shorten(False)
        assert previous.shorten is True
        assert format_hex(0, 0, 0) == "#000000000000"
        set_always_shorten(True)
        assert format_hex(0, 0, 0) == "#000000"

    def test_explicit_format_wins_over_default(self):
        set_always_shorten(False)
        assert format_hex(1, 2, 3, fmt=HexFormat(shorten=True)) == "#010203"


# ─────────────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────────────


class TestLog:
    def test_info_goes_to_stdout(self, capsys):
        log("info", "hello")
        captured = capsys.readouterr()
        assert "[info]" in captured.out
        assert "hello" in captured.out
        assert captured.err == ""

    def test_warning_goes_to_stderr(self, capsys):
        log("WARNING", "careful")
        captured = capsys.readouterr()
        assert "[warning]" in captured.err
        assert captured.out == ""
