# hsluv_palette/utils.py
from __future__ import annotations

"""
Console output and small formatting helpers for hsluv_palette.

Log lines go to stdout with a short bracketed tag ([debug], [warn]); errors go
to stderr. Nothing in the colour core logs; only best_match (when it caps
mix_count) and the CLI do.
"""

import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple

from .core_types import Packed
from .packing import alpha_int


# Values


def format_seconds_compact(seconds: float) -> str:
    """Elapsed time as '12.3ms', '4.567s' or '2m 3.4s'."""
    if seconds < 1.0:
        return f"{seconds * 1e3:.1f}ms"
    minutes, rest = divmod(seconds, 60.0)
    if minutes < 1:
        return f"{rest:.3f}s"
    return f"{int(minutes)}m {rest:.1f}s"


def format_value(value: Any) -> str:
    """on/off for bools, grouped digits for ints, trimmed decimals for floats."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0")
        return text[:-1] if text.endswith(".") else text
    return str(value)


def format_packed(packed: Packed) -> str:
    """Packed word as '0xAALLSSHH'."""
    return f"0x{packed & 0xFFFFFFFF:08X}"


def format_channels(packed: Packed) -> str:
    """Channel bytes as 'H:8 S:255 L:127 A:254'."""
    h = packed & 0xFF
    s = packed >> 8 & 0xFF
    l = packed >> 16 & 0xFF
    return f"H:{h} S:{s} L:{l} A:{alpha_int(packed)}"


def key_value_pairs_to_string(pairs: Iterable[Tuple[str, Any]], sep: str = "  ") -> str:
    """'Mix: 2  Palette: 49' from [("Mix", 2), ("Palette", 49)]."""
    return sep.join(f"{name}: {format_value(value)}" for name, value in pairs)


# Row spans for threaded array work


def split_rows_into_parts(height: int, parts: int) -> List[Tuple[int, int]]:
    """
    Cut [0, height) into at most `parts` contiguous [start, end) spans whose
    sizes differ by at most one row. Empty spans are never returned.
    """
    parts = max(1, min(int(parts), height))
    base, extra = divmod(height, parts)
    spans: List[Tuple[int, int]] = []
    start = 0
    for i in range(parts):
        end = start + base + (1 if i < extra else 0)
        if end > start:
            spans.append((start, end))
        start = end
    return spans


# Console


def _emit(message: str, tag: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    line = f"[{tag}] {message}" if tag else message
    print(line, file=stream or sys.stdout, flush=True)


def log(message: str) -> None:
    _emit(message)


def debug_log(message: str) -> None:
    _emit(message, "debug")


def warn(message: str) -> None:
    _emit(message, "warn")


def error(message: str) -> None:
    """[error] line on stderr."""
    _emit(message, "error", sys.stderr)


def print_banner(title: str) -> None:
    _emit(f"\n=== {title} ===")


def print_config_line(section: str, pairs: Iterable[Tuple[str, Any]], debug: bool) -> None:
    """
    One '[section] Name: value  Name: value' line; routed through debug_log
    when debug is set so it carries the [debug] tag.
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    if debug:
        debug_log(line)
    else:
        log(line)


__all__ = [
    "format_seconds_compact",
    "format_value",
    "format_packed",
    "format_channels",
    "key_value_pairs_to_string",
    "split_rows_into_parts",
    "log",
    "debug_log",
    "warn",
    "error",
    "print_banner",
    "print_config_line",
]
