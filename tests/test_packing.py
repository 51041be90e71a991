import math

import pytest

from hsluv_palette.packing import (
    BLACK,
    TRANSPARENT,
    WHITE,
    alpha,
    alpha_int,
    channel_h,
    channel_l,
    channel_s,
    clamp_hsluv,
    float_to_packed,
    hsluv,
    pack_bytes,
    packed_to_float,
    to_int,
    unpack,
    wrap_turns,
)


def test_named_words():
    assert TRANSPARENT == 0
    assert BLACK == 0xFE000000
    assert WHITE == 0xFEFF0000


def test_hsluv_extremes():
    assert hsluv(0.0, 0.0, 0.0, 0.0) == 0
    assert hsluv(1.0, 1.0, 1.0, 1.0) == 0xFEFFFFFF


def test_alpha_low_bit_always_clear():
    for a in (0.0, 0.1, 0.5, 0.77, 1.0):
        assert (hsluv(0.3, 0.4, 0.5, a) >> 24) & 1 == 0
        assert (clamp_hsluv(0.3, 0.4, 0.5, a) >> 24) & 1 == 0


def test_clamp_hsluv_wraps_hue_and_clamps_rest():
    assert clamp_hsluv(1.25, 2.0, -1.0, 1.0) == 0xFE00FF40
    assert clamp_hsluv(-0.75, 0.0, 0.0, 0.0) == 0x40
    assert clamp_hsluv(0.25, 0.0, 0.0, 5.0) >> 25 == 127


def test_non_finite_input_encodes_without_error():
    assert hsluv(float("nan"), 0.0, 0.0, 0.0) == 0
    assert clamp_hsluv(float("nan"), float("nan"), float("nan"), float("nan")) == 0
    assert clamp_hsluv(float("inf"), 0.0, float("inf"), 1.0) == 0xFEFF0000


def test_to_int_behaves_like_int_cast():
    assert to_int(-2.7) == -2
    assert to_int(2.7) == 2
    assert to_int(float("nan")) == 0
    assert to_int(1e20) == 0x7FFFFFFF
    assert to_int(-1e20) == -0x80000000


def test_wrap_turns():
    assert wrap_turns(1.25) == pytest.approx(0.25)
    assert wrap_turns(-0.25) == pytest.approx(0.75)
    assert wrap_turns(float("inf")) == 0.0


def test_decoders():
    packed = pack_bytes(64, 255, 127, 255)
    assert packed == 0xFE7FFF40
    assert channel_h(packed) == pytest.approx(64 / 255)
    assert channel_s(packed) == 1.0
    assert channel_l(packed) == pytest.approx(127 / 255)
    assert alpha(packed) == 1.0
    assert alpha_int(packed) == 254
    assert unpack(packed) == (channel_h(packed), 1.0, channel_l(packed), 1.0)
    assert alpha(TRANSPARENT) == 0.0


def test_float_view_round_trip():
    for packed in (TRANSPARENT, BLACK, WHITE, 0x12345678, 0xFEFFFFFF):
        value = packed_to_float(packed)
        assert math.isfinite(value)
        assert float_to_packed(value) == packed
