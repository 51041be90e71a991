# hsluv_palette/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image, ImageOps

from .core_types import Packed, U8Image, assert_u8_image_rgba
from .image_ops import packed_array_to_rgba

"""
Image I/O helpers (RGBA, 8 bits per channel) and palette swatch rendering.
"""


def load_image_rgba(path: Path) -> U8Image:
    """Read any Pillow-readable image as an (H, W, 4) uint8 RGBA array."""
    with Image.open(path) as im0:
        im = ImageOps.exif_transpose(im0).convert("RGBA")
    return np.array(im, dtype=np.uint8)


def save_image_rgba(path: Path, rgba: np.ndarray) -> Path:
    """Write an (H, W, 4) uint8 array as PNG. A non-.png suffix is replaced."""
    arr = assert_u8_image_rgba(np.asarray(rgba))
    if arr.ndim != 3:
        raise TypeError("expected (H, W, 4) RGBA image")
    path = Path(path)
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    Image.fromarray(np.ascontiguousarray(arr)).save(path)
    return path


def render_swatch(
    colors: Sequence[Packed], cell: int = 32, columns: Optional[int] = None
) -> U8Image:
    """
    Lay packed colours out as a grid of cell x cell squares, row by row.
    columns defaults to a single row. Unused cells stay fully transparent.
    """
    if cell <= 0:
        raise ValueError("cell must be positive")
    count = len(colors)
    if count == 0:
        return np.zeros((cell, cell, 4), dtype=np.uint8)
    cols = count if columns is None else max(1, min(int(columns), count))
    rows = (count + cols - 1) // cols

    rgba = packed_array_to_rgba(np.asarray(colors, dtype=np.uint32))
    out = np.zeros((rows * cell, cols * cell, 4), dtype=np.uint8)
    for i in range(count):
        r, c = divmod(i, cols)
        out[r * cell:(r + 1) * cell, c * cell:(c + 1) * cell] = rgba[i]
    return out


def save_palette_swatch(
    path: Path, colors: Sequence[Packed], cell: int = 32, columns: Optional[int] = None
) -> Path:
    return save_image_rgba(path, render_swatch(colors, cell, columns))


__all__ = [
    "load_image_rgba",
    "save_image_rgba",
    "render_swatch",
    "save_palette_swatch",
]
