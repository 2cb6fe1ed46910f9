"""Data flow streams drawn between devices of the starfield."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["FLOW_CHARS", "DataStream"]

FLOW_CHARS = "▹▸▷▶"


@dataclass
class DataStream:
    """One cell of a flow path from one device to another.

    ``intensity`` runs from 0.0 to 1.0; ``offset`` is the animation phase.
    """

    x: int = 0
    y: int = 0
    from_device: int = 0
    to_device: int = 0
    intensity: float = 0.0
    offset: float = 0.0

    def get_char(self) -> str:
        """Arrow glyph for the stream's intensity."""
        scaled = self.intensity * (len(FLOW_CHARS) - 1)
        if math.isnan(scaled) or scaled <= 0.0:
            return FLOW_CHARS[0]
        index = min(int(min(scaled, len(FLOW_CHARS))), len(FLOW_CHARS) - 1)
        return FLOW_CHARS[index]