# hsluv_palette/packing.py
from __future__ import annotations

"""
Packed HSLuv word layout and the encode / decode primitives.

Layout (least significant byte first):
  bits  0..8   H  hue in turns, [0,1) -> 0..255
  bits  8..16  S  fraction of the chroma limit, [0,1] -> 0..255
  bits 16..24  L  re-curved lightness, [0,1] -> 0..255
  bits 24..32  A  alpha; only the top 7 bits are used, so bit 24 is always 0

Keeping bit 24 clear means the exponent field of the word, read as an IEEE-754
single, can never be all ones, so the float view is never NaN or infinite.

Exports:
  hsluv(h, s, l, alpha)          unclamped fast path
  clamp_hsluv(h, s, l, alpha)    wraps h, clamps the rest
  channel_h / channel_s / channel_l / alpha / alpha_int / unpack
  packed_to_float / float_to_packed
  TRANSPARENT, BLACK, WHITE
"""

import math
from typing import Tuple

import numpy as np

from .constants import QUANT, QUANT_ALPHA, WORD_MASK
from .core_types import Packed

TRANSPARENT: Packed = 0x00000000
BLACK: Packed = 0xFE000000
WHITE: Packed = 0xFEFF0000

_INT_MAX = 0x7FFFFFFF
_INT_MIN = -0x80000000


def to_int(value: float) -> int:
    """Truncate toward zero like a 32-bit integer cast; NaN gives 0, overflow saturates."""
    if value != value:
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return int(value)


def wrap_turns(value: float) -> float:
    """Fractional part of value in [0,1); non-finite input gives 0."""
    if not math.isfinite(value):
        return 0.0
    return value - math.floor(value)


# Encode


def hsluv(h: float, s: float, l: float, alpha: float) -> Packed:
    """
    Pack four [0,1] channels without clamping.
    Out-of-range input wraps through the masks and may produce unrelated bits.
    """
    return (
        (to_int(alpha * QUANT) << 24 & 0xFE000000)
        | (to_int(l * QUANT) << 16 & 0xFF0000)
        | (to_int(s * QUANT) << 8 & 0xFF00)
        | (to_int(h * QUANT) & 0xFF)
    )


def clamp_hsluv(h: float, s: float, l: float, alpha: float) -> Packed:
    """Pack four channels, wrapping h into [0,1) and clamping s, l, alpha into [0,1]."""
    return (
        (min(max(to_int(alpha * QUANT_ALPHA), 0), 127) << 25)
        | (min(max(to_int(l * QUANT), 0), 255) << 16)
        | (min(max(to_int(s * QUANT), 0), 255) << 8)
        | min(to_int(wrap_turns(h) * 256.0), 255)
    )


def pack_bytes(h: int, s: int, l: int, alpha: int) -> Packed:
    """Pack raw channel bytes; the low alpha bit is dropped."""
    return (alpha & 0xFE) << 24 | (l & 0xFF) << 16 | (s & 0xFF) << 8 | (h & 0xFF)


# Decode


def channel_h(packed: Packed) -> float:
    return (packed & 0xFF) / 255.0


def channel_s(packed: Packed) -> float:
    return (packed >> 8 & 0xFF) / 255.0


def channel_l(packed: Packed) -> float:
    return (packed >> 16 & 0xFF) / 255.0


def alpha(packed: Packed) -> float:
    """Alpha from the 7 stored bits, in [0,1]."""
    return ((packed & WORD_MASK) >> 25) / 127.0


def alpha_int(packed: Packed) -> int:
    """Alpha byte as stored: an even int in 0..254."""
    return (packed & WORD_MASK) >> 24 & 0xFE


def unpack(packed: Packed) -> Tuple[float, float, float, float]:
    """(h, s, l, alpha) as floats in [0,1]."""
    return channel_h(packed), channel_s(packed), channel_l(packed), alpha(packed)


# Float view


def packed_to_float(packed: Packed) -> float:
    """Reinterpret the word's bits as an IEEE-754 single (storage only, not for arithmetic)."""
    word = np.array([packed & WORD_MASK], dtype=np.uint32)
    return float(word.view(np.float32)[0])


def float_to_packed(value: float) -> Packed:
    """Inverse of packed_to_float."""
    single = np.array([value], dtype=np.float32)
    return int(single.view(np.uint32)[0])


__all__ = [
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "to_int",
    "wrap_turns",
    "hsluv",
    "clamp_hsluv",
    "pack_bytes",
    "channel_h",
    "channel_s",
    "channel_l",
    "alpha",
    "alpha_int",
    "unpack",
    "packed_to_float",
    "float_to_packed",
]
