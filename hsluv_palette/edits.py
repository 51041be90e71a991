# hsluv_palette/edits.py
from __future__ import annotations

"""
Edits on packed HSLuv colours.

Single-channel edits work directly on the encoded bytes and leave every other
channel untouched. Blending goes through Luv so hue never takes the long way
round and greys do not pick up a stray hue.

Exports:
  lighten, darken, enrich, dullen, rotate_h, blot, fade
  edit_hsluv, maximize_saturation, lessen_change
  inverse_lightness, differentiate_lightness, offset_lightness
  lerp_colors, lerp_colors_blended, mix, mix_range
  random_edit, random_color
"""

import math
from typing import Sequence, Tuple

import numpy as np

from .colour_convert import atan2_turns, cos_turns, sin_turns
from .constants import (
    ALPHA_MASK,
    GOLDEN_GAMMA,
    INVERSE_HUE_GAP,
    KEEP_BUT_ALPHA,
    KEEP_BUT_HUE,
    KEEP_BUT_LIGHT,
    KEEP_BUT_SAT,
    L_BLACK_EPS,
    L_WHITE_EPS,
    MASK64,
    QUANT,
    RANDOM_EDIT_TRIES,
    RANDOM_MUL_H,
    RANDOM_MUL_L,
    RANDOM_MUL_S,
    SAT_MASK,
    SMALL,
)
from .core_types import Packed, clamp_value
from .gamut import chroma_limit
from .packing import (
    BLACK,
    TRANSPARENT,
    WHITE,
    alpha,
    channel_h,
    channel_l,
    channel_s,
    clamp_hsluv,
    hsluv,
    to_int,
    wrap_turns,
)

_RANDOM_CENTRE = 0x7FFFFF * 0.5
_RANDOM_SCALE = 2.0 ** -22


# Single-channel edits


def lighten(start: Packed, change: float) -> Packed:
    """Move the L byte toward 255 by change (0..1)."""
    t = start >> 16 & 0xFF
    return (to_int(t + (0xFF - t) * change) << 16 & 0xFF0000) | (start & KEEP_BUT_LIGHT)


def darken(start: Packed, change: float) -> Packed:
    """Move the L byte toward 0 by change (0..1)."""
    t = start >> 16 & 0xFF
    return (to_int(t * (1.0 - change)) & 0xFF) << 16 | (start & KEEP_BUT_LIGHT)


def enrich(start: Packed, change: float) -> Packed:
    """Move the S byte toward 255 by change (0..1)."""
    p = start >> 8 & 0xFF
    return (to_int(p + (0xFF - p) * change) << 8 & 0xFF00) | (start & KEEP_BUT_SAT)


def dullen(start: Packed, change: float) -> Packed:
    """Move the S byte toward 0 by change (0..1)."""
    p = start >> 8 & 0xFF
    return (to_int(p * (1.0 - change)) & 0xFF) << 8 | (start & KEEP_BUT_SAT)


def rotate_h(start: Packed, change: float) -> Packed:
    """Turn the hue by change turns; wraps."""
    i = start & 0xFF
    return (to_int(i + 256.0 * change) & 0xFF) | (start & KEEP_BUT_HUE)


def blot(start: Packed, change: float) -> Packed:
    """Move alpha toward opaque (254) by change."""
    opacity = start >> 24 & 0xFE
    return (to_int(opacity + (0xFE - opacity) * change) & 0xFE) << 24 | (start & KEEP_BUT_ALPHA)


def fade(start: Packed, change: float) -> Packed:
    """Move alpha toward transparent by change."""
    opacity = start >> 24 & 0xFE
    return (to_int(opacity * (1.0 - change)) & 0xFE) << 24 | (start & KEEP_BUT_ALPHA)


def edit_hsluv(
    packed: Packed,
    add_h: float,
    add_s: float,
    add_l: float,
    add_alpha: float,
    mul_h: float = 1.0,
    mul_s: float = 1.0,
    mul_l: float = 1.0,
    mul_alpha: float = 1.0,
) -> Packed:
    """
    Affine edit of every channel: each becomes channel * mul + add.
    Hue wraps, the other channels clamp to [0,1].
    """
    h = wrap_turns(channel_h(packed) * mul_h + add_h)
    s = clamp_value(channel_s(packed) * mul_s + add_s, 0.0, 1.0)
    l = clamp_value(channel_l(packed) * mul_l + add_l, 0.0, 1.0)
    a = clamp_value(alpha(packed) * mul_alpha + add_alpha, 0.0, 1.0)
    return hsluv(h, s, l, a)


def maximize_saturation(packed: Packed) -> Packed:
    """Same hue, lightness and alpha at the most saturated in-gamut colour."""
    return packed | SAT_MASK


def lessen_change(color: Packed, fraction: float) -> Packed:
    """Pull S and L toward the middle (0x80) so that only fraction of their offset remains."""
    e_s = color >> 8 & 0xFF
    e_l = color >> 16 & 0xFF
    return (
        (color & 0xFF)
        | (to_int(0x80 + fraction * (e_s - 0x80)) & 0xFF) << 8
        | (to_int(0x80 + fraction * (e_l - 0x80)) & 0xFF) << 16
        | (color & ALPHA_MASK)
    )


# Contrast helpers


def inverse_lightness(main_color: Packed, contrasting_color: Packed) -> Packed:
    """
    Push main_color's lightness to the far side of mid-grey from contrasting_color.

    Colours whose hue bytes are INVERSE_HUE_GAP or more apart already contrast
    and are returned unchanged.
    """
    h = main_color & 0xFF
    l = main_color >> 16 & 0xFF
    c_h = contrasting_color & 0xFF
    c_l = contrasting_color >> 16 & 0xFF
    if abs(h - c_h) >= INVERSE_HUE_GAP:
        return main_color
    new_l = to_int(l * 0.45 + 128.0 if c_l < 128 else 128.0 - l * 0.45)
    return (main_color & KEEP_BUT_LIGHT) | (new_l & 0xFF) << 16


def differentiate_lightness(main_color: Packed, contrasting_color: Packed) -> Packed:
    """Average main_color's L byte with the contrasting L byte shifted by half the range."""
    shifted = ((contrasting_color >> 16) + 128) & 0xFF
    new_l = (shifted + (main_color >> 16 & 0xFF)) >> 1
    return (main_color & KEEP_BUT_LIGHT) | new_l << 16


def offset_lightness(main_color: Packed) -> Packed:
    return differentiate_lightness(main_color, main_color)


# Blending


def _luv_from_bytes(h_byte: int, s_byte: int, l_byte: int) -> Tuple[float, float, float]:
    """(L, U, V) straight from the stored bytes; L is taken as stored, without the curve."""
    h = h_byte / 255.0
    if l_byte == 255:
        L, C = 1.0, 0.0
    elif l_byte == 0:
        L, C = 0.0, 0.0
    else:
        L = l_byte / 255.0
        C = chroma_limit(h, L) * (s_byte / 255.0)
    return L, cos_turns(h) * C, sin_turns(h) * C


def _quantise(value: float) -> int:
    return min(max(to_int(value * QUANT), 0), 255)


def lerp_colors(start: Packed, end: Packed, change: float) -> Packed:
    """
    Blend start toward end by change (0..1) through Luv.

    L, U, V and alpha are interpolated linearly; H and S are recovered from the
    blended point. A blend that lands on a pole snaps to WHITE or BLACK.
    """
    ls, us, vs = _luv_from_bytes(start & 0xFF, start >> 8 & 0xFF, start >> 16 & 0xFF)
    le, ue, ve = _luv_from_bytes(end & 0xFF, end >> 8 & 0xFF, end >> 16 & 0xFF)
    a_s = start >> 24 & 0xFE
    a_e = end >> 24 & 0xFE

    L = ls + change * (le - ls)
    U = us + change * (ue - us)
    V = vs + change * (ve - vs)
    H = atan2_turns(V, U)

    if L > L_WHITE_EPS:
        return WHITE
    if L < L_BLACK_EPS:
        return BLACK
    limit = chroma_limit(H, L)
    S = min(math.sqrt(U * U + V * V) / limit, 1.0) if limit > SMALL else 0.0
    return (
        _quantise(H)
        | _quantise(S) << 8
        | _quantise(L) << 16
        | (to_int(a_s + change * (a_e - a_s)) & 0xFE) << 24
    )


def lerp_colors_blended(start: Packed, end: Packed, change: float) -> Packed:
    """Like lerp_colors, but end's alpha scales the weight and start's alpha is kept."""
    change *= alpha(end)
    return lerp_colors(start, (start & ALPHA_MASK) | (end & KEEP_BUT_ALPHA), change)


def mix_range(colors: Sequence[Packed], offset: int, size: int) -> Packed:
    """
    Fold-order mix of colors[offset:offset + size]: each next colour is blended in
    with weight 1/2, 1/3, 1/4, ... Out-of-range requests give TRANSPARENT.
    """
    if colors is None or offset < 0 or size <= 0 or len(colors) < offset + size:
        return TRANSPARENT
    result = colors[offset]
    for denom, i in enumerate(range(offset + 1, offset + size), start=2):
        result = lerp_colors(result, colors[i], 1.0 / denom)
    return result


def mix(*colors: Packed) -> Packed:
    """Fold-order mix of any number of colours; order matters. No colours gives TRANSPARENT."""
    return mix_range(colors, 0, len(colors))


# Randomness


def random_edit(color: Packed, seed: int, variance: float) -> Packed:
    """
    Nudge H, S and L by a random offset inside a ball of radius variance.

    The same (color, seed, variance) always gives the same result. If 50 draws
    all land outside the ball the colour comes back unchanged.
    """
    h = channel_h(color)
    s = channel_s(color)
    l = channel_l(color)
    limit = variance * variance
    seed &= MASK64
    for _ in range(RANDOM_EDIT_TRIES):
        x = (((seed * RANDOM_MUL_H & MASK64) >> 41) - _RANDOM_CENTRE) * _RANDOM_SCALE * variance
        y = (((seed * RANDOM_MUL_S & MASK64) >> 41) - _RANDOM_CENTRE) * _RANDOM_SCALE * variance
        z = (((seed * RANDOM_MUL_L & MASK64) >> 41) - _RANDOM_CENTRE) * _RANDOM_SCALE * variance
        seed = (seed + GOLDEN_GAMMA) & MASK64
        if x * x + y * y + z * z <= limit:
            return clamp_hsluv(h + x, s + y, l + z, alpha(color))
    return color


def random_color(rng: np.random.Generator) -> Packed:
    """Uniformly random opaque colour in HSLuv channel space."""
    h, s, l = rng.random(3)
    return hsluv(float(h), float(s), float(l), 1.0)


__all__ = [
    "lighten",
    "darken",
    "enrich",
    "dullen",
    "rotate_h",
    "blot",
    "fade",
    "edit_hsluv",
    "maximize_saturation",
    "lessen_change",
    "inverse_lightness",
    "differentiate_lightness",
    "offset_lightness",
    "lerp_colors",
    "lerp_colors_blended",
    "mix_range",
    "mix",
    "random_edit",
    "random_color",
]
