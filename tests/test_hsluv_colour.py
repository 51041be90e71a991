import pytest

from hsluv_palette import HsluvColor, NAMED, darken, to_rgba_bytes
from hsluv_palette.packing import clamp_hsluv


def test_wraps_a_packed_word():
    c = HsluvColor(NAMED["red"])
    assert int(c) == NAMED["red"]
    assert str(c) == "HsluvColor(0xFE7FFF08)"
    assert c.saturation == 1.0
    assert c.alpha == 1.0
    assert c.alpha_int == 254
    assert c.to_rgba_bytes() == to_rgba_bytes(NAMED["red"])
    assert c.to_hex().startswith("#") and len(c.to_hex()) == 9


@pytest.mark.parametrize("bad", [-1, 2 ** 32, 1.5, "red"])
def test_rejects_values_outside_a_word(bad):
    with pytest.raises(ValueError):
        HsluvColor(bad)


def test_constructors():
    assert HsluvColor.from_channels(0.25, 0.5, 0.5).value == clamp_hsluv(0.25, 0.5, 0.5, 1.0)
    assert HsluvColor.from_hex("#ff0000") == HsluvColor.from_rgba_bytes(255, 0, 0)
    assert HsluvColor.from_description("dark red").value == darken(NAMED["red"], 0.15)


def test_edits_chain_and_stay_immutable():
    c = HsluvColor(NAMED["mint"])
    d = c.darken(0.5).rotate_h(0.5)
    assert c.value == NAMED["mint"]
    assert d.value >> 16 & 0xFF == (NAMED["mint"] >> 16 & 0xFF) // 2
    assert c.lighten(1.0).lightness == 1.0
    assert c.fade(1.0).alpha_int == 0
    assert c.fade(1.0).blot(1.0).alpha_int == 254
    assert c.enrich(1.0).saturation == 1.0
    assert c.dullen(1.0).saturation == 0.0
    assert c.lerp(HsluvColor(NAMED["mint"]), 0.5).value >> 24 == c.value >> 24


def test_describe_round_trip():
    assert "mint" in HsluvColor(NAMED["mint"]).describe().split()
