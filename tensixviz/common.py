"""Colour, glyph and animation helpers shared by the visualisations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

__all__ = [
    "Rgb",
    "BLOCK_CHARS",
    "PHOSPHOR_CHARS",
    "PARTICLE_CHARS",
    "DOOR_CHARS",
    "WALL_CHARS",
    "WINDOW_CHARS",
    "SHELF_CHAR",
    "PORTAL_CHARS",
    "ACCRETION_CHARS",
    "SINGULARITY_CHARS",
    "ANSI_PALETTE",
    "hsv_to_rgb",
    "temp_to_hue",
    "value_to_char_intensity",
    "value_to_block_char",
    "value_to_window_char",
    "value_to_singularity_char",
    "value_to_portal_char",
    "lerp",
    "ease_in_out",
    "wrap_phase",
    "ansi_color",
    "ansi_color_cycle",
    "arc_health_header",
    "arc_health_color",
    "lissajous",
    "spirograph",
]

TAU = 2.0 * math.pi


class Rgb(NamedTuple):
    """A 24-bit colour."""

    r: int
    g: int
    b: int


# Glyph gradients, ordered from low to high intensity.
BLOCK_CHARS = "·░▒▓█"
PHOSPHOR_CHARS = "·░▒▓█▓▒"
PARTICLE_CHARS = "·○◎◉●✦"

# Castle / portal / singularity character sets.
DOOR_CHARS = "╔╗╚╝"
WALL_CHARS = "═║─│"
WINDOW_CHARS = "□▫▪▪■"
SHELF_CHAR = "═"
PORTAL_CHARS = "◯◎◉⊚⊛◉"
ACCRETION_CHARS = "◐◑◒◓"
SINGULARITY_CHARS = "·∘○●◉"

ANSI_PALETTE: tuple[Rgb, ...] = (
    Rgb(0, 0, 0),
    Rgb(255, 100, 100),
    Rgb(80, 220, 100),
    Rgb(255, 220, 100),
    Rgb(100, 150, 255),
    Rgb(255, 100, 255),
    Rgb(100, 220, 220),
    Rgb(220, 220, 220),
    Rgb(100, 100, 100),
    Rgb(255, 150, 150),
    Rgb(150, 255, 150),
    Rgb(255, 255, 150),
    Rgb(150, 200, 255),
    Rgb(255, 150, 255),
    Rgb(150, 255, 255),
    Rgb(255, 255, 255),
)

_HEALTHY_COLOR = Rgb(80, 220, 100)
_UNHEALTHY_COLOR = Rgb(255, 100, 100)


def _clamp(value: float, low: float, high: float) -> float:
    """Clamp a value, treating NaN as the lower bound."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def _channel(value: float) -> int:
    """Convert a 0..255 float to a byte, truncating and saturating."""
    if math.isnan(value):
        return 0
    return int(max(0.0, min(255.0, value)))


def hsv_to_rgb(h: float, s: float, v: float) -> Rgb:
    """Convert hue (degrees), saturation and value (0..1) to an RGB colour."""
    h = math.fmod(h, 360.0)
    c = v * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = v - c

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Rgb(_channel((r + m) * 255.0), _channel((g + m) * 255.0), _channel((b + m) * 255.0))


def temp_to_hue(temp_c: float) -> float:
    """Map 0..100 °C onto hues 180..0 (cyan through yellow to red)."""
    return 180.0 - _clamp(temp_c, 0.0, 100.0) * 1.8


def value_to_char_intensity(value: float, chars: Sequence[str]) -> str:
    """Pick a glyph from a low-to-high gradient for a normalised value."""
    if not chars:
        raise ValueError("character gradient must not be empty")
    index = int(_clamp(value, 0.0, 1.0) * (len(chars) - 1))
    return chars[index]


def value_to_block_char(value: float) -> str:
    """Map a normalised value to a block glyph."""
    return value_to_char_intensity(value, BLOCK_CHARS)


def value_to_window_char(value: float) -> str:
    """Map a normalised value to a castle window glyph."""
    return value_to_char_intensity(value, WINDOW_CHARS)


def value_to_singularity_char(value: float) -> str:
    """Map a normalised value to a singularity glyph."""
    return value_to_char_intensity(value, SINGULARITY_CHARS)


def value_to_portal_char(value: float) -> str:
    """Map a normalised value to a portal glyph."""
    return value_to_char_intensity(value, PORTAL_CHARS)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation with the factor clamped to 0..1."""
    return a + (b - a) * _clamp(t, 0.0, 1.0)


def ease_in_out(t: float) -> float:
    """Cubic smoothstep easing of a factor clamped to 0..1."""
    t = _clamp(t, 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def wrap_phase(phase: float) -> float:
    """Wrap a phase angle by 2π, keeping the sign of the input."""
    return math.fmod(phase, TAU)


def ansi_color(index: int) -> Rgb:
    """Return a palette colour, wrapping indices past the end."""
    return ANSI_PALETTE[index % len(ANSI_PALETTE)]


def ansi_color_cycle(frame: int, speed: int) -> Rgb:
    """Cycle through the palette, advancing one colour every `speed` frames."""
    return ANSI_PALETTE[(frame // speed) % len(ANSI_PALETTE)]


def arc_health_header(arc_health: Iterable[tuple[int, bool]]) -> str:
    """Summarise ARC health as e.g. ``ARC: ●●○● (3/4 OK)``."""
    states = [healthy for _, healthy in arc_health]
    healthy_count = sum(1 for healthy in states if healthy)
    indicators = "".join("●" if healthy else "○" for healthy in states)
    if healthy_count == len(states):
        return f"ARC: {indicators} (All OK)"
    return f"ARC: {indicators} ({healthy_count}/{len(states)} OK)"


def arc_health_color(is_healthy: bool, frame: int) -> Rgb:
    """Solid colour for an ARC health indicator; the frame does not matter."""
    return _HEALTHY_COLOR if is_healthy else _UNHEALTHY_COLOR


def lissajous(t: float, a: float, b: float, delta: float) -> tuple[float, float]:
    """Point on a Lissajous curve for a time parameter in 0..1."""
    t *= TAU
    return math.sin(a * t + delta), math.sin(b * t)


def spirograph(t: float, r1: float, r2: float, d: float) -> tuple[float, float]:
    """Point on a hypotrochoid, scaled by ``r1 + r2``."""
    t *= TAU
    ratio = (r1 - r2) / r2
    x = (r1 - r2) * math.cos(t) + d * math.cos(ratio * t)
    y = (r1 - r2) * math.sin(t) - d * math.sin(ratio * t)
    return x / (r1 + r2), y / (r1 + r2)