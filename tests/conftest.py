from __future__ import annotations

import pytest

from cssgradient.errors import InvalidColorError
from cssgradient.model.color import RGBA

COLORS: dict[str, RGBA] = {
    "red": RGBA(255, 0, 0),
    "blue": RGBA(0, 0, 255),
    "yellow": RGBA(255, 255, 0),
    "transparent": RGBA(0, 0, 0, 0.0),
    "#fff": RGBA(255, 255, 255),
    "#f00": RGBA(255, 0, 0),
    "#00f": RGBA(0, 0, 255),
    "#e66465": RGBA(230, 100, 101),
    "#9198e5": RGBA(145, 152, 229),
    "rgb(255, 0, 0)": RGBA(255, 0, 0),
}


def fake_resolve(text: str) -> RGBA:
    """Color resolver that only knows a fixed table of literals."""
    try:
        return COLORS[text.lower()]
    except KeyError:
        raise InvalidColorError(f"Invalid color: {text}", source=text) from None


@pytest.fixture
def resolve():
    return fake_resolve
