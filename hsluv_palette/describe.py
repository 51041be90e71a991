# hsluv_palette/describe.py
from __future__ import annotations

"""
Colour descriptions: "darker rich mint yellow" <-> packed colour.

A description is a run of words split on anything that is not a letter. Colour
names from the palette are mixed in order; light/dark and rich/dull adjectives
then shift lightness and saturation of the mix by a fixed step per level.

Exports:
  Intensity, AdjectiveFamily, Adjective, DescriptionError
  adjective_family(token), parse_adjective(token)
  parse_description(text, palette=PALETTE)
  parse_description_strict(text, palette=PALETTE)
  best_match(target, mix_count=1, palette=PALETTE)
  describe_distance(a, b)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .constants import (
    ADJECTIVE_LEVELS,
    DARKEN_STEP,
    DULL_STEP,
    LIGHTEN_STEP,
    MAX_MIX_COUNT,
    RICH_STEP,
)
from .core_types import Packed, hue_difference_turns
from .edits import darken, dullen, enrich, lerp_colors, lighten, mix_range
from .image_ops import (
    darken_array,
    describe_distance_array,
    dullen_array,
    enrich_array,
    lighten_array,
)
from .packing import TRANSPARENT, channel_h, channel_l, channel_s
from .palette_data import PALETTE, Palette
from .utils import warn

_SPLIT = re.compile(r"[^a-zA-Z]+")

LIGHT_ADJECTIVES: Tuple[str, ...] = (
    "darkmost ", "darkest ", "darker ", "dark ", "",
    "light ", "lighter ", "lightest ", "lightmost ",
)
SATURATION_ADJECTIVES: Tuple[str, ...] = (
    "dullmost ", "dullest ", "duller ", "dull ", "",
    "rich ", "richer ", "richest ", "richmost ",
)


class DescriptionError(ValueError):
    """A description that the strict parser refuses."""


class Intensity(Enum):
    """How many steps an adjective applies."""

    BASE = 1
    ER = 2
    EST = 3
    MOST = 4


class AdjectiveFamily(Enum):
    """(axis, signed step per level)."""

    LIGHT = ("lightness", LIGHTEN_STEP)
    DARK = ("lightness", -DARKEN_STEP)
    RICH = ("saturation", RICH_STEP)
    DULL = ("saturation", -DULL_STEP)

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def step(self) -> float:
        return self.value[1]


# "light" is one letter longer than "dark", "rich" and "dull"
_LIGHT_LENGTHS: Dict[int, Intensity] = {
    5: Intensity.BASE,
    7: Intensity.ER,
    8: Intensity.EST,
    9: Intensity.MOST,
}
_SHORT_LENGTHS: Dict[int, Intensity] = {
    4: Intensity.BASE,
    6: Intensity.ER,
    7: Intensity.EST,
    8: Intensity.MOST,
}


@dataclass(frozen=True)
class Adjective:
    family: AdjectiveFamily
    intensity: Intensity

    @property
    def amount(self) -> float:
        """Signed change this adjective adds to its axis."""
        return self.family.step * self.intensity.value


def adjective_family(token: str) -> Optional[AdjectiveFamily]:
    """
    Which adjective family a lowercase token belongs to, judged by its leading
    letters only, or None when the token is a colour name.
    """
    n = len(token)
    if n > 2 and token[0] == "l" and token[2] == "g":
        return AdjectiveFamily.LIGHT
    if n > 1 and token[0] == "r" and token[1] == "i":
        return AdjectiveFamily.RICH
    if n > 1 and token[0] == "d":
        if token[1] == "a":
            return AdjectiveFamily.DARK
        if token[1] == "u":
            return AdjectiveFamily.DULL
    return None


def parse_adjective(token: str) -> Optional[Adjective]:
    """
    Adjective for a lowercase token, or None when the token is not an adjective
    or has a length that matches no intensity.
    """
    family = adjective_family(token)
    if family is None:
        return None
    table = _LIGHT_LENGTHS if family is AdjectiveFamily.LIGHT else _SHORT_LENGTHS
    intensity = table.get(len(token))
    if intensity is None:
        return None
    return Adjective(family, intensity)


def _tokens(text: str) -> List[str]:
    return [t.lower() for t in _SPLIT.split(text) if t]


def _apply_adjustments(color: Packed, lightness: float, saturation: float) -> Packed:
    if lightness > 0:
        color = lighten(color, lightness)
    elif lightness < 0:
        color = darken(color, -lightness)
    if saturation > 0:
        color = enrich(color, saturation)
    elif saturation < 0:
        color = dullen(color, -saturation)
    return color


# Parsing


def parse_description(text: str, palette: Palette = PALETTE) -> Packed:
    """
    Resolve a description to a packed colour. Never raises.

    Unknown names, and adjective-looking words of the wrong length, each add
    TRANSPARENT to the mix. A description that mixes to TRANSPARENT is returned
    as is, without adjective adjustments.
    """
    lightness = 0.0
    saturation = 0.0
    mixing: List[Packed] = []
    for token in _tokens(text):
        family = adjective_family(token)
        if family is None:
            mixing.append(palette.get(token))
            continue
        adjective = parse_adjective(token)
        if adjective is None:
            mixing.append(TRANSPARENT)
        elif family.axis == "lightness":
            lightness += adjective.amount
        else:
            saturation += adjective.amount

    result = mix_range(mixing, 0, len(mixing))
    if result == TRANSPARENT:
        return result
    return _apply_adjustments(result, lightness, saturation)


def parse_description_strict(text: str, palette: Palette = PALETTE) -> Packed:
    """
    Like parse_description, but raises DescriptionError for an empty description,
    an unknown colour name, a malformed adjective, or a description without any
    colour name.
    """
    tokens = _tokens(text)
    if not tokens:
        raise DescriptionError("empty description")
    names = 0
    for token in tokens:
        if adjective_family(token) is None:
            if token not in palette:
                raise DescriptionError(f"unknown colour name {token!r}")
            names += 1
        elif parse_adjective(token) is None:
            raise DescriptionError(f"malformed adjective {token!r}")
    if names == 0:
        raise DescriptionError(f"no colour name in {text!r}")
    return parse_description(text, palette)


# Matching


def describe_distance(a: Packed, b: Packed) -> float:
    """Squared distance in (wrapped hue, saturation, lightness) channel space."""
    d_h = hue_difference_turns(channel_h(a), channel_h(b))
    d_s = channel_s(a) - channel_s(b)
    d_l = channel_l(a) - channel_l(b)
    return d_h * d_h + d_s * d_s + d_l * d_l


def _mix_table(colors: Sequence[Packed], mix_count: int) -> List[Packed]:
    """
    Fold-order mixes of every mix_count-long combination of colors, with the
    first colour of the combination varying fastest.
    """
    table: List[Packed] = list(colors)
    for k in range(2, mix_count + 1):
        weight = 1.0 / k
        table = [lerp_colors(prefix, last, weight) for last in colors for prefix in table]
    return table


def _combination(code: int, size: int, mix_count: int) -> List[int]:
    out: List[int] = []
    for _ in range(mix_count):
        out.append(code % size)
        code //= size
    return out


def best_match(target: Packed, mix_count: int = 1, palette: Palette = PALETTE) -> str:
    """
    Description whose colour lies closest to target, searched exhaustively.

    Every mix of mix_count palette colours is tried with each of the nine
    lightness and nine saturation adjective levels; the first candidate at the
    smallest distance wins. mix_count is capped to 1..MAX_MIX_COUNT since the
    search grows as palette_size ** mix_count.
    """
    if mix_count < 1 or mix_count > MAX_MIX_COUNT:
        capped = min(max(mix_count, 1), MAX_MIX_COUNT)
        warn(f"mix_count {mix_count} out of range, using {capped}")
        mix_count = capped

    names = [n for n in palette.names_by_hue if n != "transparent"]
    colors = [palette.named[n] for n in names]
    mixes = np.array(_mix_table(colors, mix_count), dtype=np.uint32)

    best_distance = np.inf
    best: Tuple[int, int, int] = (0, 0, 0)
    levels = range(-ADJECTIVE_LEVELS, ADJECTIVE_LEVELS + 1)
    for idx_s in levels:
        for idx_i in levels:
            result = mixes
            if idx_i > 0:
                result = lighten_array(result, LIGHTEN_STEP * idx_i)
            elif idx_i < 0:
                result = darken_array(result, -DARKEN_STEP * idx_i)
            if idx_s > 0:
                result = enrich_array(result, RICH_STEP * idx_s)
            elif idx_s < 0:
                result = dullen_array(result, -DULL_STEP * idx_s)
            distances = describe_distance_array(result, target)
            code = int(np.argmin(distances))
            if distances[code] < best_distance:
                best_distance = float(distances[code])
                best = (code, idx_i, idx_s)

    code, idx_i, idx_s = best
    picked = " ".join(names[i] for i in _combination(code, len(names), mix_count))
    return (
        LIGHT_ADJECTIVES[idx_i + ADJECTIVE_LEVELS]
        + SATURATION_ADJECTIVES[idx_s + ADJECTIVE_LEVELS]
        + picked
    )


def describe(target: Packed, mix_count: int = 1, palette: Palette = PALETTE) -> Tuple[str, Packed]:
    """best_match plus the colour that description resolves to."""
    text = best_match(target, mix_count, palette)
    return text, parse_description(text, palette)


__all__ = [
    "LIGHT_ADJECTIVES",
    "SATURATION_ADJECTIVES",
    "DescriptionError",
    "Intensity",
    "AdjectiveFamily",
    "Adjective",
    "adjective_family",
    "parse_adjective",
    "parse_description",
    "parse_description_strict",
    "describe_distance",
    "best_match",
    "describe",
]
