"""Memory planets of the hardware starfield: L1, L2 and DDR activity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tensixviz.common import Rgb

__all__ = [
    "PLANET_CHARS",
    "LEVEL_L1",
    "LEVEL_L2",
    "LEVEL_DDR",
    "MemoryPlanet",
]

PLANET_CHARS = "·░▒▓█"

LEVEL_L1 = 0
LEVEL_L2 = 1
LEVEL_DDR = 2

_L1_CHAR = "◆"
_L2_CHAR = "◇"
_UNKNOWN_CHAR = "·"


def _gradient_index(value: float, length: int) -> int:
    """Index into a gradient, saturating like an unsigned float-to-int cast."""
    scaled = value * (length - 1)
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    return min(int(min(scaled, length)), length - 1)


@dataclass
class MemoryPlanet:
    """A memory bank orbiting its device.

    ``level`` is 0 for L1, 1 for L2 and 2 for DDR; ``channel_idx`` is the DDR
    channel or cache bank. ``activity`` runs from 0.0 to 1.0.
    """

    x: int = 0
    y: int = 0
    device_idx: int = 0
    level: int = LEVEL_L1
    channel_idx: int = 0
    activity: float = 0.0
    color: Rgb | None = None
    angle: float = 0.0
    radius: float = 0.0
    pulse: float = 0.0

    def get_char(self) -> str:
        """Glyph for the planet: diamonds for caches, blocks by activity for DDR."""
        if self.level == LEVEL_L1:
            return _L1_CHAR
        if self.level == LEVEL_L2:
            return _L2_CHAR
        if self.level == LEVEL_DDR:
            return PLANET_CHARS[_gradient_index(self.activity, len(PLANET_CHARS))]
        return _UNKNOWN_CHAR