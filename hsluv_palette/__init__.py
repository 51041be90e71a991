# hsluv_palette/__init__.py
"""
hsluv_palette package.

Purpose:
  HSLuv colours packed into one 32-bit word, conversion to and from sRGB, an
  analytic gamut limit, byte-level colour edits, and a small colour-description
  language over a named palette. See hsluv_describe.py for the CLI.

Public API:
  packing       : packed word layout, hsluv(), clamp_hsluv(), channel decoders.
  colour_convert: gamma, lightness curves, XYZ / Luv / LCh transforms.
  gamut         : chroma_limit() and gamut queries.
  pipeline      : to_rgba* / from_rgba* conversions, chroma views, HSL views.
  edits         : lighten/darken/enrich/dullen/rotate_h/blot/fade, lerp, mix.
  palette_data  : named colours, aliases, derived orderings (PALETTE, NAMED).
  describe      : parse_description(), best_match().
  image_ops     : numpy array conversions and edits.
  image_io      : Pillow load/save and palette swatches.
  utils         : formatting and logging helpers.
  HsluvColor    : frozen value wrapper around one packed word.

Quick start:
  from hsluv_palette import parse_description, to_rgba_bytes, best_match
  to_rgba_bytes(parse_description("darker rich mint"))
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import constants
from . import core_types
from . import describe
from . import edits
from . import gamut
from . import image_io
from . import image_ops
from . import packing
from . import palette_data
from . import pipeline
from . import utils

from .describe import (  # noqa: E402,F401
    DescriptionError,
    best_match,
    parse_description,
    parse_description_strict,
)
from .edits import (  # noqa: E402,F401
    blot,
    darken,
    dullen,
    enrich,
    fade,
    lerp_colors,
    lighten,
    mix,
    rotate_h,
)
from .gamut import chroma_limit  # noqa: E402,F401
from .hsluv_colour import HsluvColor  # noqa: E402,F401
from .packing import BLACK, TRANSPARENT, WHITE, clamp_hsluv, hsluv  # noqa: E402,F401
from .palette_data import NAMED, PALETTE  # noqa: E402,F401
from .pipeline import from_hex, from_rgba, from_rgba_bytes, to_rgba, to_rgba_bytes  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "constants",
    "core_types",
    "describe",
    "edits",
    "gamut",
    "image_io",
    "image_ops",
    "packing",
    "palette_data",
    "pipeline",
    "utils",
    "DescriptionError",
    "best_match",
    "parse_description",
    "parse_description_strict",
    "blot",
    "darken",
    "dullen",
    "enrich",
    "fade",
    "lerp_colors",
    "lighten",
    "mix",
    "rotate_h",
    "chroma_limit",
    "HsluvColor",
    "BLACK",
    "TRANSPARENT",
    "WHITE",
    "clamp_hsluv",
    "hsluv",
    "NAMED",
    "PALETTE",
    "from_hex",
    "from_rgba",
    "from_rgba_bytes",
    "to_rgba",
    "to_rgba_bytes",
]
