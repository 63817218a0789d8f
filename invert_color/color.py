"""The Color value type: hex/RGB parsing, inversion, and WCAG luminance.

A Color is created through one of two factories and is immutable afterwards::

    from invert_color import Color

    color = Color.from_hex("#282b35")
    color.get_rgb()          # (40, 43, 53)
    color.invert()           # "#d7d4ca"
    color.invert(bw=True)    # "#ffffff", dark colors invert to white
    color.get_luminance()    # 0.0243...

Luminance follows the WCAG 2.0 relative-luminance definition:
https://www.w3.org/TR/WCAG20/#relativeluminancedef
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from invert_color.errors import InvalidColorFormat, InvalidRGB

logger = logging.getLogger("invert_color.color")

RGB = tuple[int, int, int]

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Luminance at which the contrast ratio against black equals the contrast
# ratio against white: (L + 0.05) / 0.05 == 1.05 / (L + 0.05).
LUMINANCE_THRESHOLD: float = math.sqrt(1.05 * 0.05) - 0.05  # 0.17912878474779

# Channel weights for R, G, B.
LUMINANCE_WEIGHTS: tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

# Fully anchored pattern per accepted input length.
_HEX_PATTERNS: dict[int, re.Pattern[str]] = {
    3: re.compile(r"^([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])$"),
    4: re.compile(r"^#([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])$"),
    6: re.compile(r"^([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$"),
    7: re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$"),
}


# ---------------------------------------------------------------------------
# Parsing / validation
# ---------------------------------------------------------------------------


def _match_hex(hex_str: Any) -> re.Match[str] | None:
    if not isinstance(hex_str, str):
        return None
    pattern = _HEX_PATTERNS.get(len(hex_str))
    if pattern is None:
        return None
    return pattern.fullmatch(hex_str)


def is_valid_hex(hex_str: Any) -> bool:
    """Return True if ``hex_str`` is accepted by :meth:`Color.from_hex`."""
    return _match_hex(hex_str) is not None


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse ``rgb``, ``#rgb``, ``rrggbb`` or ``#rrggbb`` into an RGB triple.

    Shorthand digits are doubled, so ``"abc"`` parses like ``"aabbcc"``.

    Raises:
        InvalidColorFormat: If the length or characters do not match any form.
    """
    match = _match_hex(hex_str)
    if match is None:
        logger.debug("Rejected hex color %r", hex_str)
        raise InvalidColorFormat(hex_str)

    r, g, b = match.groups()
    if len(r) == 1:
        return int(r * 2, 16), int(g * 2, 16), int(b * 2, 16)
    return int(r, 16), int(g, 16), int(b, 16)


def check_rgb(rgb: Any) -> RGB:
    """Validate an RGB triple and return it as a tuple.

    Checks run in a fixed order and the first failure wins: count, indexes,
    types, lower bound, upper bound.

    Raises:
        InvalidRGB: With ``reason`` naming the failed constraint.
    """
    try:
        count = len(rgb)
    except TypeError:
        count = None
    if count != 3:
        raise InvalidRGB("must contain 3 values exactly", rgb)

    if isinstance(rgb, Mapping):
        if set(rgb.keys()) != {0, 1, 2}:
            raise InvalidRGB("indexes must be integers and start at 0", rgb)
        values = (rgb[0], rgb[1], rgb[2])
    elif isinstance(rgb, Sequence):
        values = (rgb[0], rgb[1], rgb[2])
    else:
        raise InvalidRGB("indexes must be integers and start at 0", rgb)

    # bool is an int subclass but never a channel value
    if any(not isinstance(v, int) or isinstance(v, bool) for v in values):
        raise InvalidRGB("values must be integers", rgb)
    if any(v < 0 for v in values):
        raise InvalidRGB("values must be greater or equal to 0", rgb)
    if any(v > 255 for v in values):
        raise InvalidRGB("values must be lesser or equal to 255", rgb)

    return values


def _channel_level(channel: int) -> float:
    coef = channel / 255
    if coef <= 0.03928:
        return coef / 12.92
    return ((coef + 0.055) / 1.055) ** 2.4


def _invert_channel(channel: int) -> int:
    return 255 - channel


def _format_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


@dataclass(frozen=True, repr=False)
class Color:
    """Immutable RGB color.

    Build instances with :meth:`from_hex` or :meth:`from_rgb`.  Passing a
    triple to the constructor directly runs the same validation as
    :meth:`from_rgb`, so an invalid Color can never exist.

    Attributes:
        rgb: ``(red, green, blue)``, each an int in ``[0, 255]``.
    """

    LUMINANCE_THRESHOLD: ClassVar[float] = LUMINANCE_THRESHOLD

    rgb: RGB

    def __post_init__(self) -> None:
        # Normalise lists / mappings to a plain tuple
        object.__setattr__(self, "rgb", check_rgb(self.rgb))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Build a Color from ``rgb``, ``#rgb``, ``rrggbb`` or ``#rrggbb`` (any case).

        Raises:
            InvalidColorFormat: If ``hex_str`` is not one of those forms.
        """
        return cls(hex_to_rgb(hex_str))

    @classmethod
    def from_rgb(cls, rgb: Sequence[int] | Mapping[int, int]) -> "Color":
        """Build a Color from three ints in ``[0, 255]``.

        Raises:
            InvalidRGB: If the triple is malformed or out of range.
        """
        return cls(rgb)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_rgb(self) -> RGB:
        return self.rgb

    def get_hex(self) -> str:
        """Render as ``#rrggbb`` in lowercase."""
        return _format_hex(self.rgb)

    def __str__(self) -> str:
        return self.get_hex()

    def __repr__(self) -> str:
        return f"<Color {self.get_hex()}>"

    # ------------------------------------------------------------------
    # Inversion
    # ------------------------------------------------------------------

    def invert_as_rgb(self, bw: bool = False) -> RGB:
        """Return the inverted triple.

        With ``bw`` the result is black for bright colors and white for dark
        ones, whichever contrasts more.
        """
        if bw:
            return BLACK if self.is_bright() else WHITE
        r, g, b = self.rgb
        return _invert_channel(r), _invert_channel(g), _invert_channel(b)

    def invert(self, bw: bool = False) -> str:
        """Return the inverted color as ``#rrggbb``. See :meth:`invert_as_rgb`."""
        return _format_hex(self.invert_as_rgb(bw))

    def invert_as_obj(self, bw: bool = False) -> "Color":
        """Return the inverted color as a new Color. See :meth:`invert_as_rgb`."""
        return Color(self.invert_as_rgb(bw))

    # ------------------------------------------------------------------
    # Luminance
    # ------------------------------------------------------------------

    def get_luminance(self) -> float:
        """WCAG 2.0 relative luminance, from 0.0 (black) to 1.0 (white)."""
        return sum(
            weight * _channel_level(channel)
            for weight, channel in zip(LUMINANCE_WEIGHTS, self.rgb)
        )

    def is_bright(self) -> bool:
        return self.get_luminance() > LUMINANCE_THRESHOLD

    def is_dark(self) -> bool:
        return not self.is_bright()

    def contrast_ratio(self, other: "Color") -> float:
        """WCAG contrast ratio against ``other``, from 1.0 to 21.0."""
        l1 = self.get_luminance()
        l2 = other.get_luminance()
        return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "hex": self.get_hex(),
            "rgb": list(self.rgb),
            "luminance": round(self.get_luminance(), 6),
            "is_bright": self.is_bright(),
            "inverted": self.invert(),
            "inverted_bw": self.invert(bw=True),
        }
