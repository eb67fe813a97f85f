"""Paint model: the device-independent gradient record handed to a renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cssgradient.model.color import PaintColor


class PaintType(Enum):
    """Native gradient primitive of the target renderer."""

    LINEAR = "GRADIENT_LINEAR"
    RADIAL = "GRADIENT_RADIAL"
    ANGULAR = "GRADIENT_ANGULAR"
    DIAMOND = "GRADIENT_DIAMOND"


@dataclass(frozen=True)
class AffineTransform:
    """A 2x3 affine matrix laid out as ``[[a, c, e], [b, d, f]]``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def rows(self) -> list[list[float]]:
        return [[self.a, self.c, self.e], [self.b, self.d, self.f]]


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: PaintColor


@dataclass(frozen=True)
class GradientPaint:
    """Normalized stops plus the transform placing a unit ramp in the shape.

    Stop positions are non-decreasing and lie in [0, 1].
    """

    type: PaintType
    gradient_stops: tuple[GradientStop, ...]
    transform: AffineTransform

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the design-tool paint layout."""
        return {
            "type": self.type.value,
            "gradientStops": [
                {"position": stop.position, "color": stop.color.to_dict()}
                for stop in self.gradient_stops
            ],
            "gradientTransform": self.transform.rows(),
        }
