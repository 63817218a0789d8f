"""Stateless hex-in / hex-out inversion helpers.

Thin wrapper over :class:`~invert_color.color.Color` for callers that only
deal in hex strings and never need the Color object itself::

    from invert_color.inverter import invert

    invert("#282b35")            # "#d7d4ca"
    invert("282b35", bw=True)    # "#ffffff"
"""

from __future__ import annotations

import logging

from invert_color.color import RGB, Color, is_valid_hex

logger = logging.getLogger("invert_color.inverter")


class Inverter:
    """Invert hex color strings without keeping any state between calls."""

    def invert(self, color: str, bw: bool = False) -> str:
        """Return the inverted ``#rrggbb`` for ``color``.

        Raises:
            InvalidColorFormat: If ``color`` is not a valid hex color.
        """
        return Color.from_hex(color).invert(bw)

    def hex_to_rgb(self, hex_str: str) -> RGB:
        """Parse a hex color into ``(r, g, b)``.

        Raises:
            InvalidColorFormat: If ``hex_str`` is not a valid hex color.
        """
        return Color.from_hex(hex_str).get_rgb()

    def is_valid_color(self, color: str) -> bool:
        valid = is_valid_hex(color)
        if not valid:
            logger.debug("Not a valid hex color: %r", color)
        return valid


_default_inverter = Inverter()


def invert(color: str, bw: bool = False) -> str:
    """Module-level shortcut for :meth:`Inverter.invert`."""
    return _default_inverter.invert(color, bw)
