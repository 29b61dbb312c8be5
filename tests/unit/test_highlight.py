"""
Unit tests for kyopro.core.highlight module.
"""

import pytest

from kyopro.core.highlight import (
    BACKGROUND,
    FOREGROUND,
    HighlightMode,
    bg,
    fg,
    make_console,
)


class TestHighlightMode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("false", HighlightMode.NONE),
            ("16", HighlightMode.COLOR16),
            ("256", HighlightMode.COLOR256),
            ("true", HighlightMode.TRUECOLOR),
            ("TRUE", HighlightMode.NONE),
            ("True", HighlightMode.NONE),
            (" 16", HighlightMode.NONE),
            (True, HighlightMode.TRUECOLOR),
            (False, HighlightMode.NONE),
            (256, HighlightMode.COLOR256),
            ("rainbow", HighlightMode.NONE),
        ],
    )
    def test_from_str(self, value, expected):
        assert HighlightMode.from_str(value) is expected

    def test_color_system(self):
        assert HighlightMode.NONE.color_system is None
        assert HighlightMode.COLOR16.color_system == "standard"
        assert HighlightMode.COLOR256.color_system == "256"
        assert HighlightMode.TRUECOLOR.color_system == "truecolor"


class TestPalette:
    def test_palettes_share_names(self):
        assert set(FOREGROUND) == set(BACKGROUND)

    def test_background_renderings(self):
        green = BACKGROUND["green"]

        assert green.render(HighlightMode.TRUECOLOR) == "rgb(40,80,24)"
        assert green.render(HighlightMode.COLOR256) == "color(64)"
        assert green.render(HighlightMode.COLOR16) == "green"
        assert green.render(HighlightMode.NONE) is None

    def test_styles(self):
        assert bg("red", HighlightMode.COLOR256).bgcolor.name == "color(90)"
        assert fg("orange", HighlightMode.COLOR16).color.name == "yellow"
        assert bg("green", HighlightMode.NONE).bgcolor is None

    def test_unknown_color(self):
        with pytest.raises(KeyError):
            bg("purple", HighlightMode.TRUECOLOR)


class TestConsole:
    def test_console_color_system_follows_mode(self):
        assert make_console(HighlightMode.NONE).color_system is None
        assert make_console(HighlightMode.COLOR256).color_system == "256"
        assert make_console(HighlightMode.TRUECOLOR).color_system == "truecolor"
