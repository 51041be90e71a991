# hsluv_palette/palette_data.py
from __future__ import annotations

"""
Named HSLuv colours and the orderings derived from them.

Exports:
  NAMED_COLOURS: list[tuple[str, int, str]]  # [(name, packed, "#rrggbbaa"), ...]
  ALIASES: list[tuple[str, str]]             # [(alias, target name), ...]
  Palette, build_palette(entries, aliases) -> Palette
  PALETTE: Palette built once at import
  NAMED: read-only name -> packed mapping (aliases included)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import GREY_SATURATION
from .core_types import Packed, PaletteEntry
from .packing import TRANSPARENT, alpha_int, channel_h, channel_l, channel_s

NAMED_COLOURS: List[Tuple[str, Packed, str]] = [
    ("transparent", 0x00000000, "#00000000"),
    ("black", 0xFE000000, "#000000ff"),
    ("gray", 0xFE800029, "#808080ff"),
    ("silver", 0xFEB50029, "#b6b6b6ff"),
    ("white", 0xFEFF0029, "#ffffffff"),
    ("red", 0xFE7FFF08, "#ff0000ff"),
    ("orange", 0xFEA2FF15, "#ff7f00ff"),
    ("yellow", 0xFEF7FF3D, "#ffff00ff"),
    ("green", 0xFEDCFF5A, "#00ff00ff"),
    ("blue", 0xFE4CFFBD, "#0000ffff"),
    ("indigo", 0xFE4DFFC0, "#520fe0ff"),
    ("violet", 0xFE6EE1C5, "#9040efff"),
    ("purple", 0xFE77FFCD, "#c000ffff"),
    ("brown", 0xFE65AE15, "#8f573bff"),
    ("pink", 0xFEBEE0E8, "#ffa0e0ff"),
    ("magenta", 0xFE8BFFDA, "#f500f5ff"),
    ("brick", 0xFE7DAF0A, "#d5524aff"),
    ("ember", 0xFE8DEC0D, "#f55a32ff"),
    ("salmon", 0xFE96DC08, "#ff6262ff"),
    ("chocolate", 0xFE44E416, "#683818ff"),
    ("tan", 0xFEB86F27, "#d2b48cff"),
    ("bronze", 0xFE9AF121, "#ce8e31ff"),
    ("cinnamon", 0xFE86FF14, "#d2691dff"),
    ("apricot", 0xFEBAFD1F, "#ffa828ff"),
    ("peach", 0xFECBD820, "#ffbf81ff"),
    ("pear", 0xFED8F841, "#d3e330ff"),
    ("saffron", 0xFED8FF30, "#ffd510ff"),
    ("butter", 0xFEEFD438, "#fff288ff"),
    ("chartreuse", 0xFEECEF4A, "#c8ff41ff"),
    ("cactus", 0xFE8AFF58, "#30a000ff"),
    ("lime", 0xFEBFFF4E, "#93d300ff"),
    ("olive", 0xFE7BFF3C, "#818000ff"),
    ("fern", 0xFE6EA856, "#4e7942ff"),
    ("moss", 0xFE3DFF55, "#204608ff"),
    ("celery", 0xFEE3D559, "#7dff73ff"),
    ("sage", 0xFED66369, "#abe3c5ff"),
    ("jade", 0xFEA6E45A, "#3fbf3fff"),
    ("cyan", 0xFEE5FF88, "#00ffffff"),
    ("mint", 0xFEE8D970, "#7fffd4ff"),
    ("teal", 0xFE71FF88, "#007f7fff"),
    ("turquoise", 0xFEC0FB81, "#2ed6c9ff"),
    ("sky", 0xFEAFFF9A, "#10c0e0ff"),
    ("cobalt", 0xFE4CFFB8, "#0046abff"),
    ("denim", 0xFE80F2A8, "#3088b8ff"),
    ("navy", 0xFE20FFBD, "#000080ff"),
    ("lavender", 0xFEA5E8C5, "#b991ffff"),
    ("plum", 0xFE6DFFD8, "#be0dc6ff"),
    ("mauve", 0xFE8661DA, "#ab73abff"),
    ("rose", 0xFE79FFFC, "#e61e78ff"),
    ("raspberry", 0xFE49F802, "#911437ff"),
]

ALIASES: List[Tuple[str, str]] = [
    ("grey", "gray"),
    ("gold", "saffron"),
    ("puce", "mauve"),
    ("sand", "tan"),
    ("skin", "peach"),
    ("coral", "salmon"),
    ("azure", "sky"),
    ("ocean", "teal"),
    ("sapphire", "cobalt"),
]


def _hue_order_key(packed: Packed) -> Tuple[int, float, float]:
    """Translucent first, then greys dark to light, then chromatic colours by hue then lightness."""
    if alpha_int(packed) < 128:
        return 0, 0.0, 0.0
    if channel_s(packed) <= GREY_SATURATION:
        return 1, channel_l(packed), 0.0
    return 2, channel_h(packed), channel_l(packed)


@dataclass(frozen=True)
class Palette:
    """
    Read-only named palette.

    named holds the canonical names plus aliases; the name orderings only ever
    list canonical names.
    """

    entries: Tuple[PaletteEntry, ...]
    named: Mapping[str, Packed]
    aliases: Mapping[str, Packed]
    names: Tuple[str, ...]
    names_by_hue: Tuple[str, ...]
    colors_by_hue: Tuple[Packed, ...]
    names_by_lightness: Tuple[str, ...]

    def get(self, name: str, default: Packed = TRANSPARENT) -> Packed:
        """Packed colour for name, or default (TRANSPARENT) when unknown."""
        return self.named.get(name, default)

    def entry(self, name: str) -> Optional[PaletteEntry]:
        for item in self.entries:
            if item.name == name:
                return item
        return None

    def __contains__(self, name: object) -> bool:
        return name in self.named

    def __len__(self) -> int:
        return len(self.entries)


def build_palette(
    entries: Sequence[Tuple[str, Packed, str]] = NAMED_COLOURS,
    aliases: Sequence[Tuple[str, str]] = ALIASES,
) -> Palette:
    """
    Build a Palette from (name, packed, rgba_hex) rows and (alias, target) pairs.
    Raises ValueError on duplicate names or aliases that point nowhere.
    """
    items: List[PaletteEntry] = []
    named: Dict[str, Packed] = {}
    for name, packed, rgba_hex in entries:
        if name in named:
            raise ValueError(f"duplicate palette name {name!r}")
        named[name] = packed
        items.append(PaletteEntry(name=name, packed=packed, rgba_hex=rgba_hex))

    alias_map: Dict[str, Packed] = {}
    for alias, target in aliases:
        if target not in named:
            raise ValueError(f"alias {alias!r} points at unknown colour {target!r}")
        alias_map[alias] = named[target]

    names = tuple(sorted(named))
    names_by_hue = tuple(sorted(names, key=lambda n: _hue_order_key(named[n])))
    names_by_lightness = tuple(sorted(names, key=lambda n: channel_l(named[n])))

    merged = dict(named)
    merged.update(alias_map)

    return Palette(
        entries=tuple(items),
        named=MappingProxyType(merged),
        aliases=MappingProxyType(alias_map),
        names=names,
        names_by_hue=names_by_hue,
        colors_by_hue=tuple(named[n] for n in names_by_hue),
        names_by_lightness=names_by_lightness,
    )


PALETTE: Palette = build_palette()
NAMED: Mapping[str, Packed] = PALETTE.named


__all__ = [
    "NAMED_COLOURS",
    "ALIASES",
    "Palette",
    "build_palette",
    "PALETTE",
    "NAMED",
]
