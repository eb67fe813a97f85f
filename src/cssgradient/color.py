"""Color-literal resolution: hex, named and functional colors to RGBA.

The parser never interprets color text itself; it hands the source text of a
token to a ``ColorResolver``. The default resolver is backed by tinycss2's
CSS Color Level 4 parser, so space-separated forms such as
``rgb(255 0 0 / 50%)`` are accepted; tests and hosts may inject their own.
"""

from __future__ import annotations

from typing import Protocol

from tinycss2.color4 import parse_color

from cssgradient.errors import InvalidColorError
from cssgradient.model.color import RGBA

__all__ = ["ColorResolver", "resolve_color"]


class ColorResolver(Protocol):
    """Callable turning color text into an RGBA value or raising InvalidColorError."""

    def __call__(self, text: str) -> RGBA: ...


def _channel(value: float | None) -> int:
    # "none" components come back as None.
    return max(0, min(255, round((value or 0.0) * 255)))


def resolve_color(text: str) -> RGBA:
    """Resolve a CSS color literal such as ``#fff``, ``red`` or ``hsl(120deg 100% 50%)``."""
    parsed = parse_color(text)
    # parse_color returns a string for the currentColor keyword.
    if parsed is None or isinstance(parsed, str):
        raise InvalidColorError(f"Invalid color: {text}", source=text)
    red, green, blue = parsed.to("srgb").coordinates
    alpha = parsed.alpha if parsed.alpha is not None else 0.0
    return RGBA(
        r=_channel(red),
        g=_channel(green),
        b=_channel(blue),
        a=max(0.0, min(1.0, float(alpha))),
    )
