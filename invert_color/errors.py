"""Exceptions raised while constructing a :class:`~invert_color.color.Color`.

Both kinds are raised at construction time only.  Once a Color exists it is
valid, so no other operation in the package raises.
"""

from __future__ import annotations

from typing import Any


class InvertColorError(ValueError):
    """Base class for every error raised by invert_color."""


class InvalidColorFormat(InvertColorError):
    """Raised when a hex string is not one of ``rgb``, ``#rgb``, ``rrggbb``, ``#rrggbb``."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid color format: {value!r}")
        self.value = value


class InvalidRGB(InvertColorError):
    """Raised when an RGB triple fails validation.

    Attributes:
        reason: The constraint that failed, e.g. ``"values must be integers"``.
        value:  The offending input, as passed by the caller.
    """

    def __init__(self, reason: str, value: Any) -> None:
        super().__init__(f"Invalid RGB {value!r}: {reason}")
        self.reason = reason
        self.value = value
