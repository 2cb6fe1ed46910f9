import pytest

from tensixviz.streams import FLOW_CHARS, DataStream


def test_idle_stream_is_faintest_arrow():
    assert DataStream(intensity=0.0).get_char() == "▹"


def test_full_stream_is_solid_arrow():
    assert DataStream(intensity=1.0).get_char() == "▶"


def test_intensity_above_one_saturates():
    assert DataStream(intensity=5.0).get_char() == DataStream(intensity=1.0).get_char()


@pytest.mark.parametrize("intensity", [-0.5, float("nan")])
def test_negative_or_nan_intensity_is_faintest(intensity):
    assert DataStream(intensity=intensity).get_char() == FLOW_CHARS[0]


def test_glyph_always_from_flow_set():
    for i in range(-5, 30):
        assert DataStream(intensity=i / 10).get_char() in FLOW_CHARS


def test_glyph_grows_with_intensity():
    indices = [FLOW_CHARS.index(DataStream(intensity=i / 30).get_char()) for i in range(31)]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(FLOW_CHARS)))


def test_fields_do_not_affect_glyph():
    a = DataStream(x=3, y=4, from_device=0, to_device=1, intensity=0.6, offset=0.2)
    b = DataStream(x=90, y=1, from_device=2, to_device=5, intensity=0.6, offset=0.9)
    assert a.get_char() == b.get_char()