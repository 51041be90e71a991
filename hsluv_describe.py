#!/usr/bin/env python3
"""
hsluv_describe.py
Describe, match, and edit colours in packed HSLuv form.

Usage:
  python hsluv_describe.py describe "darker rich mint" [--strict]
  python hsluv_describe.py match "#3a7f5c" [--mix N]
  python hsluv_describe.py palette [--order alpha|hue|lightness]
  python hsluv_describe.py swatch OUT.png [DESCRIPTION ...] [--order ...] [--cell PX] [--columns N]
  python hsluv_describe.py recolour INPUT [OUTPUT] [--lighten X] [--darken X] [--enrich X]
                                  [--dullen X] [--rotate X] [--workers N]

Commands:
  describe : resolve a description to a packed colour and its RGBA.
  match    : closest description for an RGB(A) hex colour.
  palette  : list the named palette.
  swatch   : write a PNG strip of descriptions, or of the whole palette.
  recolour : apply HSLuv channel edits to every pixel of an image.

Notes:
  Colour maths comes from hsluv_palette.pipeline / edits; image work is vectorised
  through hsluv_palette.image_ops and runs on ThreadPoolExecutor row splits.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from hsluv_palette.core_types import rgba_to_hex
from hsluv_palette.constants import MAX_MIX_COUNT
from hsluv_palette.describe import (
    best_match,
    describe_distance,
    parse_description,
    parse_description_strict,
)
from hsluv_palette.image_io import load_image_rgba, save_image_rgba, save_palette_swatch
from hsluv_palette.image_ops import (
    darken_array,
    dullen_array,
    enrich_array,
    lighten_array,
    packed_to_rgba_threaded,
    rgba_to_packed_threaded,
    rotate_h_array,
)
from hsluv_palette.palette_data import PALETTE
from hsluv_palette.pipeline import from_hex, to_rgba_bytes
from hsluv_palette.utils import (
    debug_log,
    error,
    format_channels,
    format_packed,
    format_seconds_compact,
    log,
    print_banner,
    print_config_line,
)

# CLI args & small helpers


def _default_workers() -> int:
    """Leave a few cores free for the system; returns a sensible worker count."""
    n = os.cpu_count() or 4
    reserve = 1 if n <= 6 else 2 if n <= 12 else 3 if n <= 18 else 4
    return max(1, n - reserve)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Subcommands:
      describe TEXT [--strict]
      match HEX [--mix N]
      palette [--order]
      swatch OUT [DESCRIPTION ...] [--order] [--cell] [--columns]
      recolour INPUT [OUTPUT] [--lighten/--darken/--enrich/--dullen/--rotate] [--workers]
    """
    parser = argparse.ArgumentParser(
        prog="hsluv_describe",
        description="Describe, match and edit colours in packed HSLuv form.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    sub = parser.add_subparsers(dest="command", required=True)

    p_desc = sub.add_parser("describe", help="Resolve a colour description")
    p_desc.add_argument("text", help='Description, e.g. "darker rich mint"')
    p_desc.add_argument(
        "--strict", action="store_true", help="Reject unknown names and malformed adjectives"
    )

    p_match = sub.add_parser("match", help="Closest description for a hex colour")
    p_match.add_argument("colour", help="#rgb, #rrggbb or #rrggbbaa")
    p_match.add_argument(
        "--mix", type=int, default=1, help=f"Colours mixed per candidate (1..{MAX_MIX_COUNT})"
    )

    p_pal = sub.add_parser("palette", help="List the named palette")
    p_pal.add_argument("--order", choices=["alpha", "hue", "lightness"], default="hue")

    p_swatch = sub.add_parser("swatch", help="Write a PNG swatch")
    p_swatch.add_argument("out", type=Path, help="Output PNG path")
    p_swatch.add_argument("descriptions", nargs="*", help="Descriptions; omit for the palette")
    p_swatch.add_argument("--order", choices=["alpha", "hue", "lightness"], default="hue")
    p_swatch.add_argument("--cell", type=int, default=32, help="Cell size in pixels")
    p_swatch.add_argument("--columns", type=int, default=None, help="Cells per row")

    p_rec = sub.add_parser("recolour", help="Apply channel edits to an image")
    p_rec.add_argument("src", type=Path, help="Input image")
    p_rec.add_argument("out", type=Path, nargs="?", default=None, help="Output PNG (optional)")
    p_rec.add_argument("--lighten", type=float, default=0.0)
    p_rec.add_argument("--darken", type=float, default=0.0)
    p_rec.add_argument("--enrich", type=float, default=0.0)
    p_rec.add_argument("--dullen", type=float, default=0.0)
    p_rec.add_argument("--rotate", type=float, default=0.0, help="Hue turn, in turns")
    p_rec.add_argument("--workers", type=int, default=_default_workers(), help="Internal workers")
    return parser


def _names_in_order(order: str) -> Sequence[str]:
    if order == "alpha":
        return PALETTE.names
    if order == "lightness":
        return PALETTE.names_by_lightness
    return PALETTE.names_by_hue


def _hex_of(packed: int) -> str:
    return rgba_to_hex(to_rgba_bytes(packed))


# Commands


def cmd_describe(args: argparse.Namespace) -> int:
    parse = parse_description_strict if args.strict else parse_description
    packed = parse(args.text)
    log(f"{args.text} -> {format_packed(packed)}  {_hex_of(packed)}")
    if args.debug:
        debug_log(format_channels(packed))
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    target = from_hex(args.colour)
    print_config_line(
        "match", [("Mix", args.mix), ("Palette", len(PALETTE) - 1)], debug=args.debug
    )
    t0 = time.perf_counter()
    text = best_match(target, args.mix)
    elapsed = time.perf_counter() - t0
    matched = parse_description(text)
    log(f"{args.colour} -> {text}  {_hex_of(matched)}")
    if args.debug:
        debug_log(f"target {format_channels(target)}")
        debug_log(f"match  {format_channels(matched)}")
        debug_log(f"distance {describe_distance(target, matched):.6f} in {format_seconds_compact(elapsed)}")
    return 0


def cmd_palette(args: argparse.Namespace) -> int:
    print_banner(f"palette ({args.order})")
    for name in _names_in_order(args.order):
        entry = PALETTE.entry(name)
        ref = entry.rgba_hex if entry is not None else "-"
        log(f"{name:<12} {format_packed(PALETTE.get(name))}  {ref}")
    if PALETTE.aliases:
        alias_list = ", ".join(sorted(PALETTE.aliases))
        log(f"aliases: {alias_list}")
    return 0


def cmd_swatch(args: argparse.Namespace) -> int:
    if args.descriptions:
        colors: List[int] = [parse_description(d) for d in args.descriptions]
    else:
        colors = [PALETTE.get(n) for n in _names_in_order(args.order)]
    out = save_palette_swatch(args.out, colors, args.cell, args.columns)
    log(f"Wrote {out.name} | cells={len(colors)} | cell={args.cell}px")
    return 0


def cmd_recolour(args: argparse.Namespace) -> int:
    src: Path = args.src
    if not src.exists():
        raise FileNotFoundError(f"not found: {src}")
    out: Path = args.out or src.with_name(f"{src.stem}_hsluv.png")

    print_config_line(
        "recolour",
        [
            ("Workers", args.workers),
            ("Lighten", args.lighten),
            ("Darken", args.darken),
            ("Enrich", args.enrich),
            ("Dullen", args.dullen),
            ("Rotate", args.rotate),
        ],
        debug=args.debug,
    )
    t0 = time.perf_counter()
    rgba = load_image_rgba(src)
    packed = rgba_to_packed_threaded(rgba, args.workers)
    if args.lighten:
        packed = lighten_array(packed, args.lighten)
    if args.darken:
        packed = darken_array(packed, args.darken)
    if args.enrich:
        packed = enrich_array(packed, args.enrich)
    if args.dullen:
        packed = dullen_array(packed, args.dullen)
    if args.rotate:
        packed = rotate_h_array(packed, args.rotate)
    result = packed_to_rgba_threaded(packed, args.workers)
    # Fully transparent pixels keep their source bytes.
    clear = rgba[..., 3] == 0
    result[clear] = rgba[clear]
    written = save_image_rgba(out, result)
    height, width = rgba.shape[:2]
    log(
        f"Wrote {written.name} | size={width}x{height} | "
        f"time={format_seconds_compact(time.perf_counter() - t0)}"
    )
    return 0


_COMMANDS = {
    "describe": cmd_describe,
    "match": cmd_match,
    "palette": cmd_palette,
    "swatch": cmd_swatch,
    "recolour": cmd_recolour,
}


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.

    Bad input (malformed hex, strict-parse failures, unreadable images) is
    reported through error() with status 2.
    """
    args = build_parser().parse_args(argv)
    try:
        return _COMMANDS[args.command](args)
    except (ValueError, OSError) as exc:
        error(str(exc))
        return 2


if __name__ == "__main__":
    sys.exit(main())
