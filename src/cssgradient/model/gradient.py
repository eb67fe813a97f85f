"""Gradient model: parsed linear, radial and conic gradients and their stops."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from cssgradient.model.color import RGBA
from cssgradient.model.value import Length


class GradientKind(Enum):
    """Gradient function, decided once from the (unprefixed) function name."""

    LINEAR = "linear-gradient"
    REPEATING_LINEAR = "repeating-linear-gradient"
    RADIAL = "radial-gradient"
    REPEATING_RADIAL = "repeating-radial-gradient"
    CONIC = "conic-gradient"
    REPEATING_CONIC = "repeating-conic-gradient"

    @property
    def repeating(self) -> bool:
        return self.value.startswith("repeating-")

    @property
    def family(self) -> str:
        """``"linear"``, ``"radial"`` or ``"conic"``."""
        return self.value.removeprefix("repeating-").removesuffix("-gradient")


RADIAL_EXTENTS = frozenset(
    {"closest-corner", "closest-side", "farthest-corner", "farthest-side"}
)
ENDING_SHAPES = frozenset({"circle", "ellipse"})


# ---------------------------------------------------------------------------
# Gradient line
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SideOrCorner:
    """A ``to <side-or-corner>`` gradient line, e.g. ``"left"`` or ``"top right"``.

    The value is kept as written; the geometry layer rejects combinations
    that are not one of the twelve legal ones.
    """

    value: str


@dataclass(frozen=True)
class AngleLine:
    """An explicit gradient-line angle in degrees, clockwise from up."""

    degrees: float


GradientLine = Union[SideOrCorner, AngleLine]


# ---------------------------------------------------------------------------
# Color stops
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColorStop:
    rgba: RGBA
    position: Length | None = None


@dataclass(frozen=True)
class ColorHint:
    """A bare position between two stops that biases interpolation."""

    hint: Length


@dataclass(frozen=True)
class AngularColorStop:
    """A conic stop; a pair of angles marks a double-position hard edge."""

    rgba: RGBA
    angle: Length | tuple[Length, Length] | None = None


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LinearGradient:
    kind: GradientKind
    gradient_line: GradientLine
    color_stops: tuple[ColorStop | ColorHint, ...]

    @property
    def repeating(self) -> bool:
        return self.kind.repeating


@dataclass(frozen=True)
class RadialGradient:
    """A radial gradient.

    Attributes:
        kind: RADIAL or REPEATING_RADIAL.
        ending_shape: ``"circle"`` or ``"ellipse"``.
        size: An extent keyword, or one or two explicit lengths.
        position: The raw text after ``at`` (``"center"`` when absent).
        color_stops: Stops and hints in source order.
    """

    kind: GradientKind
    ending_shape: str
    size: str | tuple[Length, ...]
    position: str
    color_stops: tuple[ColorStop | ColorHint, ...]

    @property
    def repeating(self) -> bool:
        return self.kind.repeating


@dataclass(frozen=True)
class ConicGradient:
    kind: GradientKind
    angle: float | None  # degrees; None means 0
    position: str
    color_stops: tuple[AngularColorStop | ColorHint, ...]

    @property
    def repeating(self) -> bool:
        return self.kind.repeating


GradientNode = Union[LinearGradient, RadialGradient, ConicGradient]
