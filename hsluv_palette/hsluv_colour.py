# hsluv_palette/hsluv_colour.py
from __future__ import annotations

"""
HsluvColor: a frozen value wrapper around one packed word.

The module-level functions stay the primary API; this type gives named channel
access and chainable edits for callers that prefer objects.
"""

from dataclasses import dataclass

from . import edits, pipeline
from .describe import best_match, parse_description
from .constants import WORD_MASK
from .core_types import FloatRGBA, Packed, RGBATuple, rgba_to_hex
from .packing import alpha, alpha_int, channel_h, channel_l, channel_s, clamp_hsluv


@dataclass(frozen=True)
class HsluvColor:
    value: Packed

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or not 0 <= self.value <= WORD_MASK:
            raise ValueError(f"packed colour must be an int in [0, 2**32), got {self.value!r}")

    # Construction

    @classmethod
    def from_channels(cls, h: float, s: float, l: float, a: float = 1.0) -> "HsluvColor":
        return cls(clamp_hsluv(h, s, l, a))

    @classmethod
    def from_rgba_bytes(cls, r: int, g: int, b: int, a: int = 255) -> "HsluvColor":
        return cls(pipeline.from_rgba_bytes(r, g, b, a))

    @classmethod
    def from_hex(cls, hex_str: str) -> "HsluvColor":
        return cls(pipeline.from_hex(hex_str))

    @classmethod
    def from_description(cls, text: str) -> "HsluvColor":
        """Lenient parse; unknown words mix in as transparent."""
        return cls(parse_description(text))

    # Channels

    @property
    def hue(self) -> float:
        return channel_h(self.value)

    @property
    def saturation(self) -> float:
        return channel_s(self.value)

    @property
    def lightness(self) -> float:
        return channel_l(self.value)

    @property
    def alpha(self) -> float:
        return alpha(self.value)

    @property
    def alpha_int(self) -> int:
        return alpha_int(self.value)

    # Output

    def to_rgba(self) -> FloatRGBA:
        return pipeline.to_rgba(self.value)

    def to_rgba_bytes(self) -> RGBATuple:
        return pipeline.to_rgba_bytes(self.value)

    def to_hex(self) -> str:
        return rgba_to_hex(self.to_rgba_bytes())

    def describe(self, mix_count: int = 1) -> str:
        return best_match(self.value, mix_count)

    # Edits

    def lighten(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.lighten(self.value, change))

    def darken(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.darken(self.value, change))

    def enrich(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.enrich(self.value, change))

    def dullen(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.dullen(self.value, change))

    def rotate_h(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.rotate_h(self.value, change))

    def blot(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.blot(self.value, change))

    def fade(self, change: float) -> "HsluvColor":
        return HsluvColor(edits.fade(self.value, change))

    def lerp(self, other: "HsluvColor", change: float) -> "HsluvColor":
        return HsluvColor(edits.lerp_colors(self.value, other.value, change))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"HsluvColor(0x{self.value:08X})"


__all__ = ["HsluvColor"]
