"""Colour schemes for the castle visualisation."""

from __future__ import annotations

import time
from enum import Enum

from tensixviz.common import Rgb, ansi_color

__all__ = ["ColorScheme"]


class ColorScheme(Enum):
    """Colour scheme for castle rendering."""

    CLASSIC_BLUE = "classic_blue"
    ORANGE = "orange"
    CYBERPUNK = "cyberpunk"
    MATRIX = "matrix"
    RAINBOW = "rainbow"

    @staticmethod
    def random() -> ColorScheme:
        """Pick a scheme from the current wall-clock milliseconds."""
        schemes = list(ColorScheme)
        millis = time.time_ns() // 1_000_000
        return schemes[millis % len(schemes)]

    def base_color(self, frame: int) -> Rgb:
        """Base colour; the rainbow scheme cycles every 10 frames."""
        if self is ColorScheme.RAINBOW:
            return ansi_color(frame // 10)
        return _BASE_COLORS[self]

    def bright_color(self, frame: int) -> Rgb:
        """Bright/active colour; the rainbow scheme uses the bright half of the palette."""
        if self is ColorScheme.RAINBOW:
            return ansi_color(frame // 10 + 8)
        return _BRIGHT_COLORS[self]


_BASE_COLORS = {
    ColorScheme.CLASSIC_BLUE: Rgb(80, 180, 255),
    ColorScheme.ORANGE: Rgb(255, 150, 80),
    ColorScheme.CYBERPUNK: Rgb(150, 80, 255),
    ColorScheme.MATRIX: Rgb(80, 255, 120),
}

_BRIGHT_COLORS = {
    ColorScheme.CLASSIC_BLUE: Rgb(150, 220, 255),
    ColorScheme.ORANGE: Rgb(255, 200, 120),
    ColorScheme.CYBERPUNK: Rgb(255, 150, 255),
    ColorScheme.MATRIX: Rgb(150, 255, 180),
}