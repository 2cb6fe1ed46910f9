"""Memory particles travelling through the memory hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tensixviz.common import PARTICLE_CHARS, Rgb, hsv_to_rgb, temp_to_hue

__all__ = ["LayerKind", "MemoryLayer", "MemoryParticle"]

PARTICLE_TTL = 60
LAYER_DISTANCE = 10.0


class LayerKind(Enum):
    """Level of the memory hierarchy."""

    DDR = "ddr"
    L2 = "l2"
    L1 = "l1"
    TENSIX = "tensix"


@dataclass(frozen=True)
class MemoryLayer:
    """A position in the hierarchy: a DDR channel, L2 bank, L1 core or Tensix core."""

    kind: LayerKind
    index: int = 0
    row: int = 0
    col: int = 0


def _next_layer(layer: MemoryLayer) -> MemoryLayer:
    if layer.kind is LayerKind.DDR:
        return MemoryLayer(LayerKind.L2, 0)
    if layer.kind is LayerKind.L2:
        return MemoryLayer(LayerKind.L1, row=0, col=0)
    return MemoryLayer(LayerKind.TENSIX, 0)


def _velocity(current: float) -> float:
    return 0.5 + min(current / 100.0, 1.0) * 1.5


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass
class MemoryParticle:
    """A memory operation flowing DDR → L2 → L1 → Tensix."""

    x: float = 0.0
    y: float = 0.0
    velocity: float = 0.5
    layer: MemoryLayer = field(default_factory=lambda: MemoryLayer(LayerKind.DDR, 0))
    target_layer: MemoryLayer = field(default_factory=lambda: MemoryLayer(LayerKind.L2, 0))
    intensity: float = 0.0
    color_hue: float = 180.0
    ttl: int = PARTICLE_TTL

    @classmethod
    def spawn(cls, ddr_channel: int, current: float, temp: float, power: float) -> MemoryParticle:
        """A new particle entering at a DDR channel, shaped by current, temperature and power."""
        return cls(
            velocity=_velocity(current),
            layer=MemoryLayer(LayerKind.DDR, ddr_channel),
            target_layer=MemoryLayer(LayerKind.L2, 0),
            intensity=_unit(power / 100.0),
            color_hue=temp_to_hue(temp),
            ttl=PARTICLE_TTL,
        )

    def update(self, current: float, frame: int) -> None:
        """Move one frame, advancing a layer when the distance is covered."""
        self.velocity = _velocity(current)
        self.x += self.velocity
        self.y += self.velocity * 0.5
        if self.x >= LAYER_DISTANCE:
            self.layer = self.target_layer
            self.x = 0.0
            self.target_layer = _next_layer(self.layer)
        self.ttl = max(0, self.ttl - 1)

    def is_active(self) -> bool:
        """True while the particle has frames left to live."""
        return self.ttl > 0

    def get_char(self) -> str:
        """Glyph for the particle's intensity."""
        index = int(_unit(self.intensity) * (len(PARTICLE_CHARS) - 1))
        return PARTICLE_CHARS[index]

    def get_color(self) -> Rgb:
        """Temperature hue, brighter with intensity."""
        return hsv_to_rgb(self.color_hue, 0.8, 0.8 + self.intensity * 0.2)