"""invert_color — hex/RGB colors, WCAG luminance, and color inversion.

Usage::

    from invert_color import Color

    Color.from_hex("#fff").invert()            # "#000000"
    Color.from_hex("282b35").invert(bw=True)   # "#ffffff"
    Color.from_rgb([40, 43, 53]).is_dark()     # True
"""

from __future__ import annotations

from invert_color.color import LUMINANCE_THRESHOLD, Color
from invert_color.errors import InvalidColorFormat, InvalidRGB, InvertColorError
from invert_color.inverter import Inverter, invert

__all__ = [
    "Color",
    "LUMINANCE_THRESHOLD",
    "InvalidColorFormat",
    "InvalidRGB",
    "InvertColorError",
    "Inverter",
    "invert",
]
