import numpy as np

from hsluv_palette.edits import (
    blot,
    darken,
    differentiate_lightness,
    dullen,
    edit_hsluv,
    enrich,
    fade,
    inverse_lightness,
    lerp_colors,
    lerp_colors_blended,
    lessen_change,
    lighten,
    maximize_saturation,
    mix,
    mix_range,
    offset_lightness,
    random_color,
    random_edit,
    rotate_h,
)
from hsluv_palette.packing import BLACK, TRANSPARENT, WHITE, alpha_int
from hsluv_palette.palette_data import NAMED

SAMPLES = [
    NAMED["red"],
    NAMED["mint"],
    NAMED["navy"],
    NAMED["gray"],
    WHITE,
    BLACK,
    TRANSPARENT,
    0x7E3399C4,
]


def _h(p):
    return p & 0xFF


def _s(p):
    return p >> 8 & 0xFF


def _l(p):
    return p >> 16 & 0xFF


def test_zero_change_is_identity():
    for c in SAMPLES:
        assert lighten(c, 0.0) == c
        assert darken(c, 0.0) == c
        assert enrich(c, 0.0) == c
        assert dullen(c, 0.0) == c
        assert rotate_h(c, 0.0) == c
        assert blot(c, 0.0) == c
        assert fade(c, 0.0) == c


def test_full_change_hits_boundary():
    for c in SAMPLES:
        assert _l(lighten(c, 1.0)) == 255
        assert _l(darken(c, 1.0)) == 0
        assert _s(enrich(c, 1.0)) == 255
        assert _s(dullen(c, 1.0)) == 0
        assert alpha_int(fade(c, 1.0)) == 0
        assert alpha_int(blot(c, 1.0)) == 254


def test_edits_touch_one_channel():
    c = NAMED["mint"]
    lit = lighten(c, 0.4)
    assert (_h(lit), _s(lit), alpha_int(lit)) == (_h(c), _s(c), alpha_int(c))
    rich = enrich(c, 0.4)
    assert (_h(rich), _l(rich), alpha_int(rich)) == (_h(c), _l(c), alpha_int(c))
    turned = rotate_h(c, 0.25)
    assert (_s(turned), _l(turned), alpha_int(turned)) == (_s(c), _l(c), alpha_int(c))
    faded = fade(c, 0.5)
    assert faded & 0x00FFFFFF == c & 0x00FFFFFF


def test_rotate_h_wraps():
    c = NAMED["mint"]
    assert rotate_h(c, 1.0) == c
    assert _h(rotate_h(c, 0.5)) == (_h(c) + 128) & 0xFF
    assert _h(rotate_h(c, -0.5)) == (_h(c) - 128) & 0xFF


def test_lighten_darken_amounts():
    c = NAMED["red"]  # L byte 127
    assert _l(lighten(c, 0.5)) == 191
    assert _l(darken(c, 0.5)) == 63


def test_edit_hsluv_zero_is_identity():
    for c in SAMPLES:
        assert edit_hsluv(c, 0.0, 0.0, 0.0, 0.0) == c


def test_edit_hsluv_wraps_hue_and_clamps():
    c = NAMED["mint"]
    assert edit_hsluv(c, 1.0, 0.0, 0.0, 0.0) == c
    out = edit_hsluv(c, 0.0, 5.0, -5.0, 0.0)
    assert _s(out) == 255
    assert _l(out) == 0
    assert alpha_int(edit_hsluv(c, 0.0, 0.0, 0.0, 0.0, mul_alpha=0.0)) == 0


def test_maximize_saturation():
    assert _s(maximize_saturation(NAMED["mint"])) == 255
    assert maximize_saturation(NAMED["red"]) == NAMED["red"]


def test_lessen_change():
    c = NAMED["mint"]
    assert lessen_change(c, 1.0) == c
    none = lessen_change(c, 0.0)
    assert (_s(none), _l(none)) == (0x80, 0x80)
    assert _h(none) == _h(c)
    assert alpha_int(none) == alpha_int(c)


def test_inverse_lightness():
    red = NAMED["red"]
    # hues far apart already contrast
    assert inverse_lightness(red, NAMED["blue"]) == red
    out = inverse_lightness(red, WHITE)
    assert _l(out) == 70
    assert out & 0xFE00FFFF == red & 0xFE00FFFF
    lifted = inverse_lightness(red, BLACK)
    assert _l(lifted) == 185


def test_differentiate_and_offset_lightness():
    red = NAMED["red"]
    assert _l(offset_lightness(red)) == (255 + 127) >> 1
    out = differentiate_lightness(red, WHITE)
    assert _l(out) == (127 + 127) >> 1
    assert out & 0xFE00FFFF == red & 0xFE00FFFF


def test_mix_is_half_lerp():
    colours = [NAMED["red"], NAMED["blue"], NAMED["mint"], NAMED["gray"], BLACK, 0x7E3399C4]
    for a in colours:
        for b in colours:
            assert mix(a, b) == lerp_colors(a, b, 0.5)


def test_mix_folds_in_order():
    a, b, c = NAMED["red"], NAMED["blue"], NAMED["mint"]
    assert mix(a, b, c) == lerp_colors(lerp_colors(a, b, 0.5), c, 1.0 / 3.0)
    assert mix(a) == a
    assert mix() == TRANSPARENT


def test_mix_range_rejects_bad_ranges():
    colours = [NAMED["red"], NAMED["blue"]]
    assert mix_range(colours, 0, 2) == mix(*colours)
    assert mix_range(colours, 1, 1) == NAMED["blue"]
    assert mix_range(colours, 1, 2) == TRANSPARENT
    assert mix_range(colours, -1, 1) == TRANSPARENT
    assert mix_range(colours, 0, 0) == TRANSPARENT


def test_lerp_end_points():
    red = NAMED["red"]
    start = lerp_colors(red, NAMED["blue"], 0.0)
    for got, want in zip((_h(start), _s(start), _l(start)), (_h(red), _s(red), _l(red))):
        assert abs(got - want) <= 1
    assert alpha_int(start) == 254
    assert lerp_colors(red, WHITE, 1.0) == WHITE
    assert lerp_colors(red, BLACK, 1.0) == BLACK


def test_lerp_alpha():
    red = NAMED["red"]
    assert alpha_int(lerp_colors(red, fade(red, 1.0), 0.5)) == 126


def test_lerp_blended_keeps_start_alpha():
    red = NAMED["red"]
    half = fade(red, 0.5)
    assert alpha_int(lerp_colors_blended(half, NAMED["blue"], 0.5)) == alpha_int(half)
    # a fully transparent end contributes nothing
    same = lerp_colors_blended(red, TRANSPARENT, 0.9)
    assert abs(_l(same) - _l(red)) <= 1


def test_random_edit_is_deterministic_and_bounded():
    c = NAMED["mint"]
    first = random_edit(c, 12345, 0.1)
    assert random_edit(c, 12345, 0.1) == first
    for seed in range(20):
        out = random_edit(c, seed, 0.1)
        d_h = abs(_h(out) - _h(c))
        assert min(d_h, 256 - d_h) <= 28
        assert abs(_s(out) - _s(c)) <= 27
        assert abs(_l(out) - _l(c)) <= 27
        assert alpha_int(out) == alpha_int(c)


def test_random_edit_zero_variance_keeps_colour():
    c = NAMED["mint"]
    assert random_edit(c, 99, 0.0) == c


def test_random_color():
    a = random_color(np.random.default_rng(7))
    b = random_color(np.random.default_rng(7))
    assert a == b
    assert alpha_int(a) == 254
