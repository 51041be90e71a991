# hsluv_palette/pipeline.py
from __future__ import annotations

"""
HSLuv <-> sRGB conversion for single packed colours.

Exports:
  to_rgba / to_rgba_bytes / to_rgba8888
  red / green / blue, red_int / green_int / blue_int
  from_rgba / from_rgba_bytes / from_rgba8888 / from_hex
  chroma, hsluv_by_hcl
  hsl_hue / hsl_saturation / hsl_lightness, from_hsl
"""

import colorsys
from typing import Tuple

from .colour_convert import (
    forward_gamma,
    forward_light,
    hsl_to_rgb,
    lch_to_luv,
    linear_rgb_to_xyz,
    luv_to_lch,
    luv_to_xyz,
    reverse_gamma,
    reverse_light,
    xyz_to_linear_rgb,
    xyz_to_luv,
)
from .constants import (
    ALPHA_MASK,
    L_BLACK_EPS,
    L_WHITE_EPS,
    LIGHT_MASK,
    QUANT,
    SMALL,
    WORD_MASK,
)
from .core_types import FloatRGBA, HexStr, Packed, RGBATuple, Triple, clamp_value, hex_to_rgba
from .gamut import chroma_limit
from .packing import alpha, alpha_int, channel_h, channel_l, channel_s, clamp_hsluv, to_int, wrap_turns

_BYTE_SCALE = 1.0 / 255.0


def _quantise(value: float) -> int:
    return min(max(to_int(value * QUANT), 0), 255)


def _alpha_byte(packed: Packed) -> int:
    """Stored 7-bit alpha widened to 8 bits; the top bit is copied into bit 0 so 254 reads as 255."""
    a = alpha_int(packed)
    return a | a >> 7


# HSLuv -> sRGB


def _decode_light(packed: Packed) -> float:
    return reverse_light(channel_l(packed))


def _srgb_from_packed(packed: Packed) -> Triple:
    """Non-linear sRGB floats in [0,1] for the colour part of a packed word."""
    L = _decode_light(packed)
    if L > L_WHITE_EPS:
        return 1.0, 1.0, 1.0
    if L < L_BLACK_EPS:
        return 0.0, 0.0, 0.0
    H = channel_h(packed)
    C = chroma_limit(H, L) * channel_s(packed)
    x, y, z = luv_to_xyz(*lch_to_luv(L, C, H))
    r, g, b = xyz_to_linear_rgb(x, y, z)
    return (
        reverse_gamma(clamp_value(r, 0.0, 1.0)),
        reverse_gamma(clamp_value(g, 0.0, 1.0)),
        reverse_gamma(clamp_value(b, 0.0, 1.0)),
    )


def to_rgba(packed: Packed) -> FloatRGBA:
    """Packed HSLuv -> (r, g, b, a) floats in [0,1]."""
    r, g, b = _srgb_from_packed(packed)
    return r, g, b, alpha(packed)


def to_rgba_bytes(packed: Packed) -> RGBATuple:
    """Packed HSLuv -> (r, g, b, a) ints in 0..255."""
    r, g, b = _srgb_from_packed(packed)
    return _quantise(r), _quantise(g), _quantise(b), _alpha_byte(packed)


def to_rgba8888(packed: Packed) -> int:
    """Packed HSLuv -> 0xRRGGBBAA."""
    r, g, b, a = to_rgba_bytes(packed)
    return r << 24 | g << 16 | b << 8 | a


def red(packed: Packed) -> float:
    return _srgb_from_packed(packed)[0]


def green(packed: Packed) -> float:
    return _srgb_from_packed(packed)[1]


def blue(packed: Packed) -> float:
    return _srgb_from_packed(packed)[2]


def red_int(packed: Packed) -> int:
    return _quantise(red(packed))


def green_int(packed: Packed) -> int:
    return _quantise(green(packed))


def blue_int(packed: Packed) -> int:
    return _quantise(blue(packed))


# sRGB -> HSLuv


def _hsl_bits_from_srgb(r: float, g: float, b: float) -> Packed:
    """H, S and L bytes (no alpha) for non-linear sRGB floats, clamped into [0,1]."""
    x, y, z = linear_rgb_to_xyz(
        forward_gamma(clamp_value(r, 0.0, 1.0)),
        forward_gamma(clamp_value(g, 0.0, 1.0)),
        forward_gamma(clamp_value(b, 0.0, 1.0)),
    )
    L, C, h = luv_to_lch(*xyz_to_luv(x, y, z))
    if L > L_WHITE_EPS:
        s, l = 0.0, 1.0
    elif L < L_BLACK_EPS:
        s, l = 0.0, 0.0
    else:
        l = forward_light(L)
        limit = chroma_limit(h, l)
        s = min(C / limit, 1.0) if limit > SMALL else 0.0
    return _quantise(h) | _quantise(s) << 8 | _quantise(l) << 16


def from_rgba(r: float, g: float, b: float, a: float = 1.0) -> Packed:
    """(r, g, b, a) floats in [0,1] -> packed HSLuv."""
    return _hsl_bits_from_srgb(r, g, b) | (to_int(a * 255.0) << 24 & ALPHA_MASK)


def from_rgba_bytes(r: int, g: int, b: int, a: int = 255) -> Packed:
    """(r, g, b, a) ints in 0..255 -> packed HSLuv; the low alpha bit is dropped."""
    bits = _hsl_bits_from_srgb(
        (r & 0xFF) * _BYTE_SCALE, (g & 0xFF) * _BYTE_SCALE, (b & 0xFF) * _BYTE_SCALE
    )
    return bits | (a & 0xFE) << 24


def from_rgba8888(rgba: int) -> Packed:
    """0xRRGGBBAA -> packed HSLuv."""
    rgba &= WORD_MASK
    return from_rgba_bytes(rgba >> 24, rgba >> 16 & 0xFF, rgba >> 8 & 0xFF, rgba & 0xFF)


def from_hex(hex_str: HexStr) -> Packed:
    """'#rgb', '#rrggbb' or '#rrggbbaa' -> packed HSLuv. Raises ValueError on bad input."""
    return from_rgba_bytes(*hex_to_rgba(hex_str))


# Chroma views


def chroma(packed: Packed) -> float:
    """Absolute Luv chroma of a packed colour; 0 at the black and white poles."""
    L = _decode_light(packed)
    if L > L_WHITE_EPS or L < L_BLACK_EPS:
        return 0.0
    return chroma_limit(channel_h(packed), L) * channel_s(packed)


def hsluv_by_hcl(hue: float, chroma_value: float, lightness: float, alpha_value: float = 1.0) -> Packed:
    """
    Build a colour from an absolute chroma instead of a saturation fraction.
    Chroma past the gamut limit for this hue and lightness is clamped to it.
    """
    hue = wrap_turns(hue)
    alpha_value = clamp_value(alpha_value, 0.0, 1.0)
    if lightness <= 0.0:
        return clamp_hsluv(hue, 0.0, 0.0, alpha_value)
    if lightness >= 1.0:
        return clamp_hsluv(hue, 0.0, 1.0, alpha_value)
    limit = chroma_limit(hue, lightness) + 0.0001
    return clamp_hsluv(hue, min(max(chroma_value, 0.0) / limit, 1.0), lightness, alpha_value)


# Plain HSL views


def _hls(packed: Packed) -> Tuple[float, float, float]:
    return colorsys.rgb_to_hls(*_srgb_from_packed(packed))


def hsl_hue(packed: Packed) -> float:
    """Hue as plain HSL computes it from the sRGB colour, in [0,1)."""
    return _hls(packed)[0]


def hsl_saturation(packed: Packed) -> float:
    return _hls(packed)[2]


def hsl_lightness(packed: Packed) -> float:
    return _hls(packed)[1]


def from_hsl(h: float, s: float, l: float, a: float = 1.0) -> Packed:
    """
    Plain HSL (not HSLuv) -> packed HSLuv. Lightness at or below 0.001 gives black
    and at or above 0.999 gives white, keeping alpha either way.
    """
    alpha_bits = to_int(a * 255.0) << 24 & ALPHA_MASK
    if l <= 0.001:
        return alpha_bits
    if l >= 0.999:
        return alpha_bits | LIGHT_MASK
    r, g, b = hsl_to_rgb(h, clamp_value(s, 0.0, 1.0), l)
    return from_rgba(r, g, b, a)


__all__ = [
    "to_rgba",
    "to_rgba_bytes",
    "to_rgba8888",
    "red",
    "green",
    "blue",
    "red_int",
    "green_int",
    "blue_int",
    "from_rgba",
    "from_rgba_bytes",
    "from_rgba8888",
    "from_hex",
    "chroma",
    "hsluv_by_hcl",
    "hsl_hue",
    "hsl_saturation",
    "hsl_lightness",
    "from_hsl",
]
