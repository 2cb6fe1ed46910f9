"""DDR gate status decoding and flow gauges for the castle visualisation."""

from __future__ import annotations

import math
import re

__all__ = [
    "UNTRAINED",
    "TRAINING",
    "TRAINED",
    "FLOW_BLOCKS",
    "parse_ddr_status",
    "channel_status",
    "flow_block_count",
    "training_glyph",
]

UNTRAINED = 0
TRAINING = 1
TRAINED = 2

FLOW_BLOCKS = 8

_U64_MAX = (1 << 64) - 1
_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")


def parse_ddr_status(text: str | None) -> int:
    """Decode a hexadecimal DDR status word.

    Any number of leading ``0x`` prefixes is ignored. A missing, malformed or
    out-of-range value decodes to 0.
    """
    if text is None:
        return 0
    digits = text
    while digits.startswith("0x"):
        digits = digits[2:]
    if not _HEX_DIGITS.fullmatch(digits):
        return 0
    value = int(digits.lstrip("+"), 16)
    return value if value <= _U64_MAX else 0


def channel_status(status: int, channel: int) -> int:
    """The 4-bit training status of one channel in a status word.

    0 is untrained, 1 training, 2 trained and anything higher an error.
    """
    if channel < 0:
        raise ValueError("channel must not be negative")
    return (status >> (4 * channel)) & 0xF


def flow_block_count(current: float) -> int:
    """Number of lit blocks, out of eight, for a current draw in amps."""
    utilization = min(current / 100.0, 1.0)
    blocks = utilization * FLOW_BLOCKS
    if math.isnan(blocks) or blocks <= 0.0:
        return 0
    return int(blocks)


def training_glyph(frame: int) -> str:
    """Status glyph of a gate in training; it alternates every three frames."""
    return "◐" if (frame // 3) % 2 == 0 else "◑"