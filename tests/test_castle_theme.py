from enum import Enum

import pytest

from tensixviz.castle_theme import CastleTheme


class _Arch(Enum):
    GRAYSKULL = 1
    WORMHOLE = 2
    BLACKHOLE = 3
    UNKNOWN = 4


@pytest.mark.parametrize(
    "arch, expected",
    [
        ("Grayskull", CastleTheme.GREYSKULL),
        ("Wormhole", CastleTheme.PORTAL_NEXUS),
        ("Blackhole", CastleTheme.EVENT_HORIZON),
        ("Unknown", CastleTheme.GREYSKULL),
    ],
)
def test_castle_theme_selection_by_name(arch, expected):
    assert CastleTheme.for_architecture(arch) is expected


@pytest.mark.parametrize(
    "arch, expected",
    [
        (_Arch.GRAYSKULL, CastleTheme.GREYSKULL),
        (_Arch.WORMHOLE, CastleTheme.PORTAL_NEXUS),
        (_Arch.BLACKHOLE, CastleTheme.EVENT_HORIZON),
        (_Arch.UNKNOWN, CastleTheme.GREYSKULL),
    ],
)
def test_castle_theme_selection_by_enum(arch, expected):
    assert CastleTheme.for_architecture(arch) is expected


def test_name_is_case_insensitive():
    assert CastleTheme.for_architecture("  WORMHOLE ") is CastleTheme.PORTAL_NEXUS


def test_unrelated_object_defaults_to_castle():
    assert CastleTheme.for_architecture(42) is CastleTheme.GREYSKULL