"""Particles of the memory flow topology: transactions between DDR and cores."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from tensixviz.common import Rgb, hsv_to_rgb

__all__ = [
    "FLOW_TTL",
    "CHANNEL_SLOTS",
    "FlowDirection",
    "MemoryFlowParticle",
]

FLOW_TTL = 120
CHANNEL_SLOTS = 12
ARRIVAL_DISTANCE = 0.01


class FlowDirection(Enum):
    """Direction of a memory transaction."""

    READ = "read"
    WRITE = "write"
    INTERNAL = "internal"


_DIRECTION_CHARS = {
    FlowDirection.READ: "→",
    FlowDirection.WRITE: "←",
    FlowDirection.INTERNAL: "↔",
}


def _channel_position(channel: int) -> float:
    """Normalised horizontal position of a DDR channel."""
    return (channel + 0.5) / CHANNEL_SLOTS


def _pseudo_random(channel: int, frame: int, channel_mul: int, frame_mul: int) -> float:
    """Deterministic value in 0..0.99 derived from channel and frame."""
    if channel < 0 or frame < 0:
        raise ValueError("channel and frame must not be negative")
    return ((channel * channel_mul + frame * frame_mul) % 100) / 100.0


def _speed(current: float) -> float:
    return 0.01 + (current / 100.0) * 0.03


@dataclass
class MemoryFlowParticle:
    """A memory transaction moving across the normalised 0..1 chip plane.

    Reads travel from a DDR channel on the top edge to a core near the
    centre; writes travel from a core to a DDR channel on the bottom edge.
    """

    x: float = 0.0
    y: float = 0.0
    target_x: float = 0.0
    target_y: float = 0.0
    direction: FlowDirection = FlowDirection.READ
    channel: int = 0
    speed: float = 0.01
    intensity: float = 0.7
    hue: float = 180.0
    ttl: int = FLOW_TTL

    @classmethod
    def new_read(cls, channel: int, current: float, temp: float, frame: int) -> MemoryFlowParticle:
        """A read particle leaving a DDR channel for a core."""
        rand = _pseudo_random(channel, frame, 73, 37)
        return cls(
            x=_channel_position(channel),
            y=0.0,
            target_x=0.3 + rand * 0.4,
            target_y=0.5,
            direction=FlowDirection.READ,
            channel=channel,
            speed=_speed(current),
            intensity=0.7 + rand * 0.3,
            hue=180.0 - temp * 1.8,
            ttl=FLOW_TTL,
        )

    @classmethod
    def new_write(cls, channel: int, current: float, temp: float, frame: int) -> MemoryFlowParticle:
        """A write particle leaving a core for a DDR channel."""
        rand = _pseudo_random(channel, frame, 97, 43)
        return cls(
            x=0.3 + rand * 0.4,
            y=0.5,
            target_x=_channel_position(channel),
            target_y=1.0,
            direction=FlowDirection.WRITE,
            channel=channel,
            speed=_speed(current),
            intensity=0.7 + rand * 0.3,
            hue=120.0 - temp * 1.2,
            ttl=FLOW_TTL,
        )

    def update(self) -> None:
        """Step towards the target; on arrival the particle expires."""
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        dist = math.hypot(dx, dy)
        if dist > ARRIVAL_DISTANCE:
            self.x += dx / dist * self.speed
            self.y += dy / dist * self.speed
        else:
            self.ttl = 0
        self.ttl = max(0, self.ttl - 1)

    def is_active(self) -> bool:
        """True while the particle has frames left to live."""
        return self.ttl > 0

    def get_char(self) -> str:
        """Arrow glyph for the flow direction."""
        return _DIRECTION_CHARS[self.direction]

    def get_color(self) -> Rgb:
        """Hue from temperature, brighter with intensity."""
        return hsv_to_rgb(self.hue, 0.9, 0.6 + self.intensity * 0.4)