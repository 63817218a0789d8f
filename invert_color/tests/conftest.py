"""Shared fixtures for the invert_color test suite."""

from __future__ import annotations

import pytest

from invert_color.color import Color
from invert_color.config import get_settings

# (hex, rgb, inverted hex), checked by hand
KNOWN_COLORS: list[tuple[str, tuple[int, int, int], str]] = [
    ("#000000", (0, 0, 0), "#ffffff"),
    ("#ffffff", (255, 255, 255), "#000000"),
    ("#282b35", (40, 43, 53), "#d7d4ca"),
    ("#ff0000", (255, 0, 0), "#00ffff"),
    ("#0a0b0c", (10, 11, 12), "#f5f4f3"),
    ("#7f8081", (127, 128, 129), "#807f7e"),
]


@pytest.fixture
def white() -> Color:
    return Color.from_hex("#fff")


@pytest.fixture
def black() -> Color:
    return Color.from_hex("#000")


@pytest.fixture
def slate() -> Color:
    """A dark blue-grey used throughout the examples."""
    return Color.from_hex("#282b35")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
