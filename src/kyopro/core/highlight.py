"""
Terminal highlighting for debug reports.

Each palette colour carries three renderings: a true-colour RGB triple, an
index into the xterm 256-colour table and a name from the 16-colour ANSI set.
The active HighlightMode picks one of them and also decides the colour
system of the rich Console that prints the report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from rich.console import Console
from rich.style import Style


class HighlightMode(Enum):
    NONE = "false"
    COLOR16 = "16"
    COLOR256 = "256"
    TRUECOLOR = "true"

    @classmethod
    def from_str(cls, value: object) -> "HighlightMode":
        """Parse a config value; anything but the exact mode strings disables colour."""
        if isinstance(value, bool):
            return cls.TRUECOLOR if value else cls.NONE
        for mode in cls:
            if mode.value == str(value):
                return mode
        return cls.NONE

    @property
    def color_system(self) -> Optional[str]:
        return {
            HighlightMode.NONE: None,
            HighlightMode.COLOR16: "standard",
            HighlightMode.COLOR256: "256",
            HighlightMode.TRUECOLOR: "truecolor",
        }[self]


@dataclass(frozen=True)
class PaletteColor:
    rgb: Tuple[int, int, int]
    index: int
    ansi: str

    def render(self, mode: HighlightMode) -> Optional[str]:
        """Return a rich colour definition for ``mode``, or None when colour is off."""
        if mode is HighlightMode.TRUECOLOR:
            r, g, b = self.rgb
            return f"rgb({r},{g},{b})"
        if mode is HighlightMode.COLOR256:
            return f"color({self.index})"
        if mode is HighlightMode.COLOR16:
            return self.ansi
        return None


FOREGROUND: Dict[str, PaletteColor] = {
    "pink": PaletteColor((250, 105, 200), 207, "magenta"),
    "blue": PaletteColor((50, 50, 255), 27, "blue"),
    "white": PaletteColor((255, 255, 255), 15, "white"),
    "green": PaletteColor((100, 230, 60), 82, "green"),
    "red": PaletteColor((250, 80, 50), 196, "red"),
    "yellow": PaletteColor((240, 230, 0), 11, "yellow"),
    "orange": PaletteColor((255, 165, 0), 208, "yellow"),
    "lightblue": PaletteColor((53, 255, 255), 153, "bright_blue"),
}

BACKGROUND: Dict[str, PaletteColor] = {
    "pink": PaletteColor((60, 20, 60), 88, "magenta"),
    "blue": PaletteColor((20, 40, 80), 18, "blue"),
    "white": PaletteColor((40, 40, 40), 237, "white"),
    "yellow": PaletteColor((60, 60, 20), 100, "yellow"),
    "orange": PaletteColor((70, 40, 10), 95, "yellow"),
    "lightblue": PaletteColor((20, 30, 60), 20, "bright_blue"),
    "green": PaletteColor((40, 80, 24), 64, "green"),
    "red": PaletteColor((60, 20, 20), 90, "red"),
}


def fg(name: str, mode: HighlightMode) -> Style:
    """Foreground style for a palette colour."""
    return Style(color=FOREGROUND[name].render(mode))


def bg(name: str, mode: HighlightMode) -> Style:
    """Background style for a palette colour."""
    return Style(bgcolor=BACKGROUND[name].render(mode))


def make_console(mode: HighlightMode, **kwargs) -> Console:
    """Create a Console whose colour system matches ``mode``."""
    return Console(color_system=mode.color_system, highlight=False, **kwargs)
