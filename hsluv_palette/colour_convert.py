# hsluv_palette/colour_convert.py
from __future__ import annotations

"""
Colorimetric kernel (sRGB / D65). Stateless scalar functions plus numpy twins.

Lightness and chroma here use the 0..1 scaling of Luv (CIE L*/100, u*/100, v*/100),
and hue is measured in turns.

Exports:
  cbrt_positive(x), cbrt_positive_array(x)
  forward_gamma(c), reverse_gamma(c), forward_gamma_array, reverse_gamma_array
  forward_light(L), reverse_light(L), forward_light_array, reverse_light_array
  sin_turns, cos_turns, atan2_turns
  linear_rgb_to_xyz, xyz_to_linear_rgb
  xyz_to_luv, luv_to_xyz, luv_to_lch, lch_to_luv
  hsl_to_rgb(h, s, l)
"""

import colorsys
import math

import numpy as np

from .constants import (
    EPSILON,
    GAMMA_FORWARD_THRESHOLD,
    GAMMA_REVERSE_THRESHOLD,
    KAPPA,
    L_BLACK_EPS,
    LIGHT_SHAPE_FORWARD,
    LIGHT_SHAPE_REVERSE,
    LIGHT_TURNING,
    LINEAR_L_MAX,
    M_RGB_TO_XYZ,
    M_XYZ_TO_RGB,
    REF_U,
    REF_V,
    TINY,
    WORD_MASK,
)
from .core_types import Triple
from .packing import float_to_packed

TAU = 2.0 * math.pi
_CBRT_MAGIC = 0x2A5137A0


# Cube root


def cbrt_positive(x: float) -> float:
    """
    Cube root for non-negative x.

    Seeds from the single-precision bit pattern (a Hacker's Delight style
    shift-and-add on the exponent) and refines with two Newton steps.
    Negative input is outside the contract.
    """
    ix = float_to_packed(x)
    ix = (ix >> 2) + (ix >> 4)
    ix += ix >> 4
    ix += (ix >> 8) + _CBRT_MAGIC
    y = float(np.array([ix & WORD_MASK], dtype=np.uint32).view(np.float32)[0])
    y = (2.0 * y + x / (y * y)) / 3.0
    y = (2.0 * y + x / (y * y)) / 3.0
    return y


def cbrt_positive_array(x: np.ndarray) -> np.ndarray:
    """Vectorised cbrt_positive. Returns float64 with the shape of x."""
    x64 = np.asarray(x, dtype=np.float64)
    ix = np.ascontiguousarray(x64, dtype=np.float32).view(np.uint32)
    ix = (ix >> np.uint32(2)) + (ix >> np.uint32(4))
    ix = ix + (ix >> np.uint32(4))
    ix = ix + (ix >> np.uint32(8)) + np.uint32(_CBRT_MAGIC)
    y = ix.view(np.float32).astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        y = (2.0 * y + x64 / (y * y)) / 3.0
        y = (2.0 * y + x64 / (y * y)) / 3.0
    return y


# sRGB transfer


def forward_gamma(c: float) -> float:
    """Non-linear sRGB channel -> linear."""
    if c < GAMMA_FORWARD_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def reverse_gamma(c: float) -> float:
    """Linear channel -> non-linear sRGB."""
    if c < GAMMA_REVERSE_THRESHOLD:
        return c * 12.92
    return c ** (1.0 / 2.4) * 1.055 - 0.055


def forward_gamma_array(srgb: np.ndarray) -> np.ndarray:
    """
    Vectorised forward_gamma over float arrays in 0..1.
    Returns float64 with shape preserved.
    """
    c = np.asarray(srgb, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(
            c < GAMMA_FORWARD_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4
        )


def reverse_gamma_array(linear: np.ndarray) -> np.ndarray:
    """Vectorised reverse_gamma. Returns float64 with shape preserved."""
    c = np.asarray(linear, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(
            c < GAMMA_REVERSE_THRESHOLD,
            c * 12.92,
            np.power(np.maximum(c, 0.0), 1.0 / 2.4) * 1.055 - 0.055,
        )


# Lightness re-curving


def _recurve(L: float, shape: float) -> float:
    d = LIGHT_TURNING - L
    if d < 0:
        return ((1.0 - LIGHT_TURNING) * (L - 1.0)) / (1.0 - (L + shape * d)) + 1.0
    return (LIGHT_TURNING * L) / (TINY + (L + shape * d))


def forward_light(L: float) -> float:
    """
    Luv lightness -> stored lightness.
    Widens the dark end; only approximately inverted by reverse_light.
    """
    return _recurve(L, LIGHT_SHAPE_FORWARD)


def reverse_light(L: float) -> float:
    """Stored lightness -> Luv lightness."""
    return _recurve(L, LIGHT_SHAPE_REVERSE)


def _recurve_array(L: np.ndarray, shape: float) -> np.ndarray:
    L = np.asarray(L, dtype=np.float64)
    d = LIGHT_TURNING - L
    with np.errstate(divide="ignore", invalid="ignore"):
        upper = ((1.0 - LIGHT_TURNING) * (L - 1.0)) / (1.0 - (L + shape * d)) + 1.0
        lower = (LIGHT_TURNING * L) / (TINY + (L + shape * d))
    return np.where(d < 0, upper, lower)


def forward_light_array(L: np.ndarray) -> np.ndarray:
    """Vectorised forward_light. Returns float64."""
    return _recurve_array(L, LIGHT_SHAPE_FORWARD)


def reverse_light_array(L: np.ndarray) -> np.ndarray:
    """Vectorised reverse_light. Returns float64."""
    return _recurve_array(L, LIGHT_SHAPE_REVERSE)


# Turn-based trig


def sin_turns(turns: float) -> float:
    return math.sin(turns * TAU)


def cos_turns(turns: float) -> float:
    return math.cos(turns * TAU)


def atan2_turns(y: float, x: float) -> float:
    """atan2 measured in turns, in [0,1)."""
    a = math.atan2(y, x) / TAU
    if a < 0.0:
        a += 1.0
        if a >= 1.0:
            a = 0.0
    return a


# Triple transforms


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    m = M_RGB_TO_XYZ
    return (
        m[0][0] * r + m[0][1] * g + m[0][2] * b,
        m[1][0] * r + m[1][1] * g + m[1][2] * b,
        m[2][0] * r + m[2][1] * g + m[2][2] * b,
    )


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
    m = M_XYZ_TO_RGB
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def xyz_to_luv(x: float, y: float, z: float) -> Triple:
    """
    XYZ -> (L, U, V). Y at or below EPSILON uses the linear segment, mirroring
    luv_to_xyz. Near-black input snaps to (0, 0, 0) so the chromaticity
    division is never attempted on an empty denominator.
    """
    L = KAPPA * y if y <= EPSILON else 1.16 * cbrt_positive(y) - 0.16
    if L < L_BLACK_EPS:
        return 0.0, 0.0, 0.0
    denom = x + 15.0 * y + 3.0 * z
    if denom < TINY:
        return L, 0.0, 0.0
    U = 13.0 * L * (4.0 * x / denom - REF_U)
    V = 13.0 * L * (9.0 * y / denom - REF_V)
    return L, U, V


def luv_to_xyz(L: float, U: float, V: float) -> Triple:
    if L < L_BLACK_EPS:
        return 0.0, 0.0, 0.0
    if L <= LINEAR_L_MAX:
        y = L / KAPPA
    else:
        y = (L + 0.16) / 1.16
        y *= y * y
    inv_l = 1.0 / (13.0 * L)
    var_u = U * inv_l + REF_U
    var_v = V * inv_l + REF_V
    if abs(var_v) < TINY:
        return 0.0, y, 0.0
    x = 9.0 * var_u * y / (4.0 * var_v)
    z = (3.0 * y / var_v) - x / 3.0 - 5.0 * y
    return x, y, z


def luv_to_lch(L: float, U: float, V: float) -> Triple:
    """(L, U, V) -> (L, C, h) with h in turns."""
    return L, math.sqrt(U * U + V * V), atan2_turns(V, U)


def lch_to_luv(L: float, C: float, h: float) -> Triple:
    return L, cos_turns(h) * C, sin_turns(h) * C


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """Plain (non-perceptual) HSL -> sRGB, all in [0,1]."""
    return colorsys.hls_to_rgb(h - math.floor(h), l, s)


__all__ = [
    "TAU",
    "cbrt_positive",
    "cbrt_positive_array",
    "forward_gamma",
    "reverse_gamma",
    "forward_gamma_array",
    "reverse_gamma_array",
    "forward_light",
    "reverse_light",
    "forward_light_array",
    "reverse_light_array",
    "sin_turns",
    "cos_turns",
    "atan2_turns",
    "linear_rgb_to_xyz",
    "xyz_to_linear_rgb",
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_lch",
    "lch_to_luv",
    "hsl_to_rgb",
]
