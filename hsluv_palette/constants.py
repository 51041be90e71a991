"""
Global constants and tunables used across the project.

- sRGB / D65 matrices and Luv reference white (scaled so L runs 0..1)
- Lightness re-curve shapes and pole guards
- Packed word layout masks and quantisation scale
- Description adjective steps and best-match limits
- Random edit stream constants
"""
from __future__ import annotations

from typing import Final, Tuple

Matrix3 = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

# =====================
# Colorimetry (sRGB/D65)
# =====================
# XYZ -> linear sRGB
M_XYZ_TO_RGB: Final[Matrix3] = (
    (+3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, +1.8760108, +0.0415560),
    (+0.0556434, -0.2040259, +1.0572252),
)
# linear sRGB -> XYZ
M_RGB_TO_XYZ: Final[Matrix3] = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

REF_U: Final[float] = 0.19783000664283
REF_V: Final[float] = 0.46831999493879

# CIE kappa and epsilon with L scaled to 0..1
KAPPA: Final[float] = 9.032962962
EPSILON: Final[float] = 0.0088564516

# Below this L the Luv -> XYZ step uses the linear segment
LINEAR_L_MAX: Final[float] = 0.08

# sRGB transfer thresholds
GAMMA_FORWARD_THRESHOLD: Final[float] = 0.04045
GAMMA_REVERSE_THRESHOLD: Final[float] = 0.0031308

# ================
# Lightness curves
# ================
LIGHT_TURNING: Final[float] = 0.1
LIGHT_SHAPE_FORWARD: Final[float] = 0.8528
LIGHT_SHAPE_REVERSE: Final[float] = 1.1726

# Pole guards: L at or beyond these is treated as pure black / white
L_BLACK_EPS: Final[float] = 0.00001
L_WHITE_EPS: Final[float] = 0.99999

TINY: Final[float] = 1e-20
SMALL: Final[float] = 1e-10

# ============
# Packed layout
# ============
WORD_MASK: Final[int] = 0xFFFFFFFF
HUE_MASK: Final[int] = 0x000000FF
SAT_MASK: Final[int] = 0x0000FF00
LIGHT_MASK: Final[int] = 0x00FF0000
ALPHA_MASK: Final[int] = 0xFE000000

# Everything except the named channel (alpha's dead low bit is always cleared)
KEEP_BUT_HUE: Final[int] = 0xFEFFFF00
KEEP_BUT_SAT: Final[int] = 0xFEFF00FF
KEEP_BUT_LIGHT: Final[int] = 0xFE00FFFF
KEEP_BUT_ALPHA: Final[int] = 0x00FFFFFF

# int(x * QUANT) maps [0,1] to [0,255] with an upward bias
QUANT: Final[float] = 255.999
QUANT_ALPHA: Final[float] = 127.999

# ========================
# Descriptions / best match
# ========================
LIGHTEN_STEP: Final[float] = 0.125
DARKEN_STEP: Final[float] = 0.15
RICH_STEP: Final[float] = 0.2
DULL_STEP: Final[float] = 0.2

# Adjective levels tried per axis by best_match: -4..4
ADJECTIVE_LEVELS: Final[int] = 4
MAX_MIX_COUNT: Final[int] = 3

# S at or below this counts as grey when ordering by hue
GREY_SATURATION: Final[float] = 0.05

# hue difference (in hue bytes) at or beyond which inverse_lightness is a no-op
INVERSE_HUE_GAP: Final[int] = 90

# ===========
# Random edit
# ===========
RANDOM_EDIT_TRIES: Final[int] = 50
MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF
RANDOM_MUL_H: Final[int] = 0xD1B54A32D192ED03
RANDOM_MUL_S: Final[int] = 0xABC98388FB8FAC03
RANDOM_MUL_L: Final[int] = 0x8CB92BA72F3D8DD7
GOLDEN_GAMMA: Final[int] = 0x9E3779B97F4A7C15

__all__ = [
    "Matrix3",
    "M_XYZ_TO_RGB",
    "M_RGB_TO_XYZ",
    "REF_U",
    "REF_V",
    "KAPPA",
    "EPSILON",
    "LINEAR_L_MAX",
    "GAMMA_FORWARD_THRESHOLD",
    "GAMMA_REVERSE_THRESHOLD",
    "LIGHT_TURNING",
    "LIGHT_SHAPE_FORWARD",
    "LIGHT_SHAPE_REVERSE",
    "L_BLACK_EPS",
    "L_WHITE_EPS",
    "TINY",
    "SMALL",
    "WORD_MASK",
    "HUE_MASK",
    "SAT_MASK",
    "LIGHT_MASK",
    "ALPHA_MASK",
    "KEEP_BUT_HUE",
    "KEEP_BUT_SAT",
    "KEEP_BUT_LIGHT",
    "KEEP_BUT_ALPHA",
    "QUANT",
    "QUANT_ALPHA",
    "LIGHTEN_STEP",
    "DARKEN_STEP",
    "RICH_STEP",
    "DULL_STEP",
    "ADJECTIVE_LEVELS",
    "MAX_MIX_COUNT",
    "GREY_SATURATION",
    "INVERSE_HUE_GAP",
    "RANDOM_EDIT_TRIES",
    "MASK64",
    "RANDOM_MUL_H",
    "RANDOM_MUL_S",
    "RANDOM_MUL_L",
    "GOLDEN_GAMMA",
]
