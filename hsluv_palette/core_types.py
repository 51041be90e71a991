# hsluv_palette/core_types.py
from __future__ import annotations

"""
Type aliases for packed words and RGBA arrays, the PaletteEntry record, hex
parsing and array validators shared across hsluv_palette.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

Packed = int  # 32-bit HSLuv word, see packing.py for the layout
RGBATuple = Tuple[int, int, int, int]
FloatRGBA = Tuple[float, float, float, float]
Triple = Tuple[float, float, float]  # transient XYZ / Luv / LCh values
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
PackedImage = NDArray[np.uint32]  # (H, W) packed words

# Value objects


@dataclass(frozen=True)
class PaletteEntry:
    """Named palette entry with its packed colour and reference RGBA hex."""

    name: str
    packed: Packed
    rgba_hex: HexStr  # "#rrggbbaa"


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def hue_difference_turns(hue_a: float, hue_b: float) -> float:
    """Minimal absolute difference between two hues in turns, in [0, 0.5]."""
    d = abs(hue_a - hue_b)
    return 1.0 - d if d > 0.5 else d


def rgba_to_hex(rgba: RGBATuple) -> HexStr:
    """RGBA tuple to lowercase hex string '#rrggbbaa'."""
    return f"#{rgba[0]:02x}{rgba[1]:02x}{rgba[2]:02x}{rgba[3]:02x}"



def hex_to_rgba(hex_str: str) -> RGBATuple:
    """
    Parse '#rgb', '#rrggbb' or '#rrggbbaa' (case-insensitive) into an RGBA tuple.
    Alpha defaults to 255 when absent.
    """
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) == 7:
        s += "ff"
    if len(s) != 9:
        raise ValueError("hex must be '#rgb', '#rrggbb' or '#rrggbbaa'")
    try:
        return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16), int(s[7:9], 16))
    except ValueError:
        raise ValueError(f"invalid hex digits in {hex_str!r}") from None



def assert_u8_image_rgba(image: np.ndarray) -> U8Image:
    """Validate a uint8 (..., 4) image and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim < 1 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (..., 4) RGBA array")
    return image  # type: ignore[return-value]


def assert_packed_image(packed: np.ndarray) -> PackedImage:
    """Validate a uint32 array of packed words and return it typed as PackedImage."""
    if packed.dtype != np.uint32:
        raise TypeError("expected uint32 array of packed colours")
    return packed  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "Packed",
    "RGBATuple",
    "FloatRGBA",
    "Triple",
    "HexStr",
    "U8Image",
    "PackedImage",
    # value objects
    "PaletteEntry",
    # helpers
    "clamp_value",
    "hue_difference_turns",
    "rgba_to_hex",
    "hex_to_rgba",
    "assert_u8_image_rgba",
    "assert_packed_image",
]
