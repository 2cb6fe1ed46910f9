"""Stars of the hardware starfield, one per Tensix core."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tensixviz.common import Rgb

__all__ = ["STAR_CHARS", "SPARKLE_CHAR", "Star"]

STAR_CHARS = "·∘○◉●"
SPARKLE_CHAR = "✦"
SPARKLE_THRESHOLD = 0.8


@dataclass
class Star:
    """A Tensix core drawn as a twinkling star.

    ``depth`` runs from 0.0 (far background) to 1.0 (foreground); nearer
    stars render brighter. ``sparkle`` above 0.8 shows a bright flash.
    """

    x: int = 0
    y: int = 0
    device_idx: int = 0
    core_idx: int = 0
    brightness: float = 0.3
    color: Rgb | None = None
    phase: float = 0.0
    depth: float = 1.0
    phase2: float = 0.0
    sparkle: float = 0.0

    def get_char(self) -> str:
        """Glyph for the star's brightness as seen at its depth."""
        if self.sparkle > SPARKLE_THRESHOLD:
            return SPARKLE_CHAR
        seen = self.brightness * (0.4 + self.depth * 0.6)
        scaled = seen * (len(STAR_CHARS) - 1)
        if math.isnan(scaled) or scaled <= 0.0:
            return STAR_CHARS[0]
        index = min(int(min(scaled, len(STAR_CHARS))), len(STAR_CHARS) - 1)
        return STAR_CHARS[index]