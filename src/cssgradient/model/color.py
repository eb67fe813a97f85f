"""Color model: resolver output and paint-record colors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGBA:
    """A resolved CSS color: 0-255 integer channels and 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0


@dataclass(frozen=True)
class PaintColor:
    """A paint-record color with every channel as a 0-1 real."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> PaintColor:
        return cls(r=rgba.r / 255.0, g=rgba.g / 255.0, b=rgba.b / 255.0, a=rgba.a)

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}
