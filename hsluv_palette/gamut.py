# hsluv_palette/gamut.py
from __future__ import annotations

"""
Analytic sRGB gamut boundary in Luv chromaticity.

For a fixed lightness every RGB channel clipping at 0 or 1 is a straight line in
the (U, V) plane. Walking the hue ray out from the grey axis, the first of those
six lines it meets is the largest chroma that stays displayable.

Exports:
  intersect_length(sin, cos, line1, line2)
  chroma_limit(hue, lightness)
  chroma_limit_array(hues, lightness)
  in_gamut, in_gamut_channels, limit_to_gamut, limit_to_gamut_channels
"""

import math
from typing import List, Tuple

import numpy as np

from .colour_convert import TAU, cos_turns, sin_turns
from .constants import EPSILON, KAPPA, M_XYZ_TO_RGB
from .core_types import Packed
from .packing import clamp_hsluv, wrap_turns

# Boundary-line coefficients of the Luv gamut construction
_TOP1_M1 = 2845.17
_TOP1_M3 = 948.39
_TOP2_M1 = 7317.18
_TOP2_M2 = 7698.60
_TOP2_M3 = 8384.22
_BOTTOM_M2 = 1264.52
_BOTTOM_M3 = 6322.60


def _luminance_sub(lightness: float) -> float:
    sub1 = (lightness + 0.16) / 1.16
    sub1 *= sub1 * sub1
    return sub1 if sub1 > EPSILON else lightness / KAPPA


def _boundary_lines(lightness: float) -> List[Tuple[float, float]]:
    """(slope, intercept) of the six clipping lines at this lightness; vertical ones are skipped."""
    sub2 = _luminance_sub(lightness)
    lines: List[Tuple[float, float]] = []
    for row in M_XYZ_TO_RGB:
        m1, m2, m3 = row[0] * sub2, row[1] * sub2, row[2] * sub2
        for t in (0, 1):
            m2 -= t
            top1 = _TOP1_M1 * m1 - _TOP1_M3 * m3
            top2 = (_TOP2_M3 * m3 + _TOP2_M2 * m2 + _TOP2_M1 * m1) * lightness
            bottom = _BOTTOM_M3 * m3 - _BOTTOM_M2 * m2
            if bottom == 0.0:
                continue
            lines.append((top1 / bottom, top2 / bottom))
    return lines


def intersect_length(sin: float, cos: float, line1: float, line2: float) -> float:
    """
    Distance from the origin along the hue direction (cos, sin) to the line
    v = line1 * u + line2. A ray parallel to the line never meets it, which is
    reported as +inf so a minimum over candidates ignores it.
    """
    denom = sin - line1 * cos
    if denom == 0.0:
        return math.inf
    return line2 / denom


def chroma_limit(hue: float, lightness: float) -> float:
    """
    Largest in-gamut chroma at this hue (turns, any value) and Luv lightness (0..1).
    Always finite and non-negative; 0 at both poles and when no boundary line
    lies ahead of the ray.
    """
    if lightness <= 0.0 or lightness >= 1.0:
        return 0.0
    h = wrap_turns(hue)
    sin = sin_turns(h)
    cos = cos_turns(h)
    best = math.inf
    for line1, line2 in _boundary_lines(lightness):
        length = intersect_length(sin, cos, line1, line2)
        if length >= 0.0 and length < best:
            best = length
    return 0.0 if math.isinf(best) else best


def chroma_limit_array(hues: np.ndarray, lightness: np.ndarray | float) -> np.ndarray:
    """
    Vectorised chroma_limit. hues and lightness broadcast against each other.
    Returns float64.
    """
    h = np.asarray(hues, dtype=np.float64)
    L = np.asarray(lightness, dtype=np.float64)
    h, L = np.broadcast_arrays(h, L)
    h = h - np.floor(h)
    sin = np.sin(h * TAU)
    cos = np.cos(h * TAU)

    sub1 = ((L + 0.16) / 1.16) ** 3
    sub2 = np.where(sub1 > EPSILON, sub1, L / KAPPA)

    best = np.full(h.shape, np.inf, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        for row in M_XYZ_TO_RGB:
            m1 = row[0] * sub2
            m2 = row[1] * sub2
            m3 = row[2] * sub2
            for t in (0, 1):
                m2 = m2 - t
                top1 = _TOP1_M1 * m1 - _TOP1_M3 * m3
                top2 = (_TOP2_M3 * m3 + _TOP2_M2 * m2 + _TOP2_M1 * m1) * L
                bottom = _BOTTOM_M3 * m3 - _BOTTOM_M2 * m2
                denom = sin - (top1 / bottom) * cos
                length = (top2 / bottom) / denom
                valid = (bottom != 0.0) & (denom != 0.0) & (length >= 0.0)
                best = np.where(valid & (length < best), length, best)
    best[np.isinf(best) | (L <= 0.0) | (L >= 1.0)] = 0.0
    return best


# Gamut queries


def in_gamut(packed: Packed) -> bool:
    """Every packed HSLuv colour is displayable; S is a fraction of the limit."""
    return True


def in_gamut_channels(h: float, s: float, l: float) -> bool:
    """True when S and L are inside [0,1]; any hue is accepted since it wraps."""
    return 0.0 <= s <= 1.0 and 0.0 <= l <= 1.0


def limit_to_gamut(packed: Packed) -> Packed:
    return packed


def limit_to_gamut_channels(h: float, s: float, l: float, alpha: float) -> Packed:
    """Pack channels after wrapping hue and clamping the rest into range."""
    return clamp_hsluv(h, s, l, alpha)


__all__ = [
    "intersect_length",
    "chroma_limit",
    "chroma_limit_array",
    "in_gamut",
    "in_gamut_channels",
    "limit_to_gamut",
    "limit_to_gamut_channels",
]
