"""Castle themes chosen by chip architecture."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["CastleTheme"]


class CastleTheme(Enum):
    """Visual theme of a memory castle."""

    GREYSKULL = "greyskull"
    PORTAL_NEXUS = "portal_nexus"
    EVENT_HORIZON = "event_horizon"

    @staticmethod
    def for_architecture(arch: Any) -> CastleTheme:
        """Theme for an architecture given by name or by an enum member.

        Grayskull maps to the castle, Wormhole to the portal nexus and
        Blackhole to the event horizon; anything else falls back to the castle.
        """
        name = arch if isinstance(arch, str) else getattr(arch, "name", "")
        return _THEMES.get(str(name).strip().lower(), CastleTheme.GREYSKULL)


_THEMES = {
    "grayskull": CastleTheme.GREYSKULL,
    "wormhole": CastleTheme.PORTAL_NEXUS,
    "blackhole": CastleTheme.EVENT_HORIZON,
}