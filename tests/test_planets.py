import pytest

from tensixviz.planets import LEVEL_DDR, LEVEL_L1, LEVEL_L2, PLANET_CHARS, MemoryPlanet


def test_l1_planet_is_diamond():
    planet = MemoryPlanet(x=0, y=0, device_idx=0, level=0, channel_idx=0, activity=0.5)
    assert planet.get_char() == "◆"


def test_l2_planet_is_outline_diamond():
    planet = MemoryPlanet(x=0, y=0, device_idx=0, level=1, channel_idx=0, activity=0.5)
    assert planet.get_char() == "◇"


@pytest.mark.parametrize("activity", [0.0, 0.5, 1.0])
def test_cache_levels_ignore_activity(activity):
    assert MemoryPlanet(level=LEVEL_L1, activity=activity).get_char() == "◆"
    assert MemoryPlanet(level=LEVEL_L2, activity=activity).get_char() == "◇"


@pytest.mark.parametrize(
    "activity, expected",
    [
        (0.0, "·"),
        (0.25, "░"),
        (0.5, "▒"),
        (0.75, "▓"),
        (1.0, "█"),
    ],
)
def test_ddr_planet_follows_block_gradient(activity, expected):
    assert MemoryPlanet(level=LEVEL_DDR, activity=activity).get_char() == expected


def test_ddr_planet_saturates_above_one():
    assert MemoryPlanet(level=LEVEL_DDR, activity=3.0).get_char() == "█"


@pytest.mark.parametrize("activity", [-1.0, float("nan")])
def test_ddr_planet_with_negative_or_nan_activity_is_dimmest(activity):
    assert MemoryPlanet(level=LEVEL_DDR, activity=activity).get_char() == "·"


def test_unknown_level_is_dot():
    assert MemoryPlanet(level=7, activity=1.0).get_char() == "·"


def test_ddr_glyph_never_dims_as_activity_rises():
    steps = [i / 20 for i in range(21)]
    indices = [
        PLANET_CHARS.index(MemoryPlanet(level=LEVEL_DDR, activity=a).get_char())
        for a in steps
    ]
    assert indices == sorted(indices)
    assert indices[0] == 0
    assert indices[-1] == len(PLANET_CHARS) - 1