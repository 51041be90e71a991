# hsluv_palette/image_ops.py
from __future__ import annotations

"""
Vectorised packed-colour work over numpy arrays.

Exports:
  rgba_to_packed_array(rgba_u8)        (..., 4) uint8 -> (...) uint32
  packed_array_to_rgba(packed_u32)     (...) uint32 -> (..., 4) uint8
  rgba_to_packed_threaded / packed_to_rgba_threaded
  lighten_array, darken_array, enrich_array, dullen_array,
  rotate_h_array, blot_array, fade_array
  describe_distance_array(packed_u32, target)
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .colour_convert import (
    TAU,
    cbrt_positive_array,
    forward_gamma_array,
    forward_light_array,
    reverse_gamma_array,
    reverse_light_array,
)
from .constants import (
    EPSILON,
    KAPPA,
    KEEP_BUT_ALPHA,
    KEEP_BUT_HUE,
    KEEP_BUT_LIGHT,
    KEEP_BUT_SAT,
    L_BLACK_EPS,
    L_WHITE_EPS,
    LINEAR_L_MAX,
    M_RGB_TO_XYZ,
    M_XYZ_TO_RGB,
    QUANT,
    REF_U,
    REF_V,
    SMALL,
    TINY,
)
from .core_types import Packed, PackedImage, U8Image, assert_packed_image, assert_u8_image_rgba
from .gamut import chroma_limit_array
from .utils import split_rows_into_parts

_M_RGB_TO_XYZ_T = np.array(M_RGB_TO_XYZ, dtype=np.float64).T
_M_XYZ_TO_RGB_T = np.array(M_XYZ_TO_RGB, dtype=np.float64).T


def _quantise_array(values: np.ndarray) -> np.ndarray:
    """int(value * 255.999) clamped to 0..255, as uint32."""
    scaled = np.nan_to_num(values * QUANT, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(scaled), 0, 255).astype(np.uint32)


# RGBA -> packed


def rgba_to_packed_array(rgba: np.ndarray) -> PackedImage:
    """
    Convert an (..., 4) uint8 RGBA array to packed HSLuv words.
    Agrees with from_rgba_bytes to within one unit per channel.
    """
    arr = assert_u8_image_rgba(np.asarray(rgba))
    srgb = arr[..., :3].astype(np.float64) / 255.0
    xyz = forward_gamma_array(srgb) @ _M_RGB_TO_XYZ_T
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]

    L = np.where(y <= EPSILON, KAPPA * y, 1.16 * cbrt_positive_array(y) - 0.16)
    black = L < L_BLACK_EPS
    white = L > L_WHITE_EPS
    denom = x + 15.0 * y + 3.0 * z
    with np.errstate(divide="ignore", invalid="ignore"):
        U = 13.0 * L * (4.0 * x / denom - REF_U)
        V = 13.0 * L * (9.0 * y / denom - REF_V)
    flat = black | (denom < TINY)
    U = np.where(flat, 0.0, U)
    V = np.where(flat, 0.0, V)
    L = np.where(black, 0.0, L)

    C = np.hypot(U, V)
    h = np.arctan2(V, U) / TAU
    h = np.where(h < 0.0, h + 1.0, h)
    h = np.where(h >= 1.0, 0.0, h)

    l = forward_light_array(L)
    limit = chroma_limit_array(h, l)
    with np.errstate(divide="ignore", invalid="ignore"):
        s = np.where(limit > SMALL, np.minimum(C / limit, 1.0), 0.0)
    s = np.where(black | white, 0.0, s)
    l = np.where(white, 1.0, np.where(black, 0.0, l))

    alpha_bits = (arr[..., 3].astype(np.uint32) & np.uint32(0xFE)) << np.uint32(24)
    out = (
        _quantise_array(h)
        | _quantise_array(s) << np.uint32(8)
        | _quantise_array(l) << np.uint32(16)
        | alpha_bits
    )
    return out.astype(np.uint32, copy=False)


# packed -> RGBA


def packed_array_to_rgba(packed: np.ndarray) -> U8Image:
    """
    Convert packed HSLuv words to an (..., 4) uint8 RGBA array.
    Agrees with to_rgba_bytes to within one unit per channel.
    """
    p = assert_packed_image(np.asarray(packed))
    H = (p & np.uint32(0xFF)).astype(np.float64) / 255.0
    S = ((p >> np.uint32(8)) & np.uint32(0xFF)).astype(np.float64) / 255.0
    L = reverse_light_array(((p >> np.uint32(16)) & np.uint32(0xFF)).astype(np.float64) / 255.0)
    white = L > L_WHITE_EPS
    black = L < L_BLACK_EPS
    live = ~(white | black)

    L_live = np.where(live, L, 0.5)
    C = chroma_limit_array(H, L_live) * S
    U = np.cos(H * TAU) * C
    V = np.sin(H * TAU) * C

    y = np.where(L_live <= LINEAR_L_MAX, L_live / KAPPA, ((L_live + 0.16) / 1.16) ** 3)
    inv_l = 1.0 / (13.0 * L_live)
    var_u = U * inv_l + REF_U
    var_v = V * inv_l + REF_V
    with np.errstate(divide="ignore", invalid="ignore"):
        x = 9.0 * var_u * y / (4.0 * var_v)
        z = (3.0 * y / var_v) - x / 3.0 - 5.0 * y
    xyz = np.stack([x, y, z], axis=-1)
    linear = np.clip(np.nan_to_num(xyz @ _M_XYZ_TO_RGB_T, nan=0.0), 0.0, 1.0)
    rgb = _quantise_array(reverse_gamma_array(linear))
    rgb[white] = 255
    rgb[black] = 0

    a = (p >> np.uint32(24)) & np.uint32(0xFE)
    out = np.empty(p.shape + (4,), dtype=np.uint8)
    out[..., :3] = rgb.astype(np.uint8)
    out[..., 3] = (a | (a >> np.uint32(7))).astype(np.uint8)
    return out


# Threaded helpers


def rgba_to_packed_threaded(rgba: np.ndarray, workers: int) -> PackedImage:
    """
    Threaded RGBA->packed conversion by splitting rows.

    Args:
      rgba: uint8 array [H,W,4]
      workers: number of threads; if <=1 or H<256, runs single-threaded
    Returns:
      uint32 array [H,W]
    """
    height = int(rgba.shape[0])
    if workers <= 1 or height < 256:
        return rgba_to_packed_array(rgba)

    chunks = split_rows_into_parts(height, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(rgba_to_packed_array, rgba[s:e]) for s, e in chunks]
        parts = [f.result() for f in futures]
    return np.concatenate(parts, axis=0)


def packed_to_rgba_threaded(packed: np.ndarray, workers: int) -> U8Image:
    """Threaded packed->RGBA conversion; same row split as rgba_to_packed_threaded."""
    height = int(packed.shape[0])
    if workers <= 1 or height < 256:
        return packed_array_to_rgba(packed)

    chunks = split_rows_into_parts(height, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(packed_array_to_rgba, packed[s:e]) for s, e in chunks]
        parts = [f.result() for f in futures]
    return np.concatenate(parts, axis=0)


# Channel edits


def _channel(p: np.ndarray, shift: int) -> np.ndarray:
    return ((p >> np.uint32(shift)) & np.uint32(0xFF)).astype(np.float64)


def _edited(p: np.ndarray, values: np.ndarray, shift: int, byte_mask: int, keep: int) -> PackedImage:
    new = (np.trunc(values).astype(np.int64) & byte_mask).astype(np.uint32)
    return (p & np.uint32(keep)) | (new << np.uint32(shift))


def lighten_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    t = _channel(p, 16)
    return _edited(p, t + (255.0 - t) * change, 16, 0xFF, KEEP_BUT_LIGHT)


def darken_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    return _edited(p, _channel(p, 16) * (1.0 - change), 16, 0xFF, KEEP_BUT_LIGHT)


def enrich_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    s = _channel(p, 8)
    return _edited(p, s + (255.0 - s) * change, 8, 0xFF, KEEP_BUT_SAT)


def dullen_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    return _edited(p, _channel(p, 8) * (1.0 - change), 8, 0xFF, KEEP_BUT_SAT)


def rotate_h_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    return _edited(p, _channel(p, 0) + 256.0 * change, 0, 0xFF, KEEP_BUT_HUE)


def blot_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    a = ((p >> np.uint32(24)) & np.uint32(0xFE)).astype(np.float64)
    return _edited(p, a + (254.0 - a) * change, 24, 0xFE, KEEP_BUT_ALPHA)


def fade_array(packed: np.ndarray, change: float) -> PackedImage:
    p = assert_packed_image(np.asarray(packed))
    a = ((p >> np.uint32(24)) & np.uint32(0xFE)).astype(np.float64)
    return _edited(p, a * (1.0 - change), 24, 0xFE, KEEP_BUT_ALPHA)


def describe_distance_array(packed: np.ndarray, target: Packed) -> np.ndarray:
    """Wrapped-hue squared (H, S, L) distance from every word to target. Returns float64."""
    p = assert_packed_image(np.asarray(packed))
    d_h = np.abs(_channel(p, 0) / 255.0 - (target & 0xFF) / 255.0)
    d_h = np.where(d_h > 0.5, 1.0 - d_h, d_h)
    d_s = _channel(p, 8) / 255.0 - (target >> 8 & 0xFF) / 255.0
    d_l = _channel(p, 16) / 255.0 - (target >> 16 & 0xFF) / 255.0
    return d_h * d_h + d_s * d_s + d_l * d_l


__all__ = [
    "rgba_to_packed_array",
    "packed_array_to_rgba",
    "rgba_to_packed_threaded",
    "packed_to_rgba_threaded",
    "lighten_array",
    "darken_array",
    "enrich_array",
    "dullen_array",
    "rotate_h_array",
    "blot_array",
    "fade_array",
    "describe_distance_array",
]
