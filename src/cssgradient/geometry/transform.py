"""Map a parsed gradient onto the affine transform of a unit gradient ramp.

CSS measures gradient angles clockwise from "up" with a top-to-bottom
default; the target ramp runs left to right from (0, 0.5) to (1, 0.5) and is
rotated counter-clockwise from the x-axis. Only the farthest-corner, centered
radial case is modeled.
"""

from __future__ import annotations

import math

import numpy as np

from cssgradient.errors import UnsupportedGeometryMappingError, UnsupportedOrientationError
from cssgradient.model.gradient import (
    AngleLine,
    ConicGradient,
    GradientNode,
    LinearGradient,
    RadialGradient,
    SideOrCorner,
)
from cssgradient.model.paint import AffineTransform

__all__ = [
    "destination_angle",
    "rotation",
    "scale",
    "translation",
    "ray_length",
    "gradient_transform",
]

# CSS's 180deg default is a -90 degree turn of the left-to-right ramp.
BASELINE_ROTATION = -90.0
# farthest-corner: the ramp points at the bottom-right corner.
RADIAL_ROTATION = 45.0

_ROTATION_DELTAS: dict[str, float] = {
    "left": -90.0,
    "right": 90.0,
    "bottom": 0.0,
    "top": 180.0,
    "left top": -135.0,
    "top left": -135.0,
    "right top": 135.0,
    "top right": 135.0,
    "left bottom": -45.0,
    "bottom left": -45.0,
    "right bottom": 45.0,
    "bottom right": 45.0,
}

_ANCHORS: dict[str, tuple[float, float]] = {
    "left": (-1.0, -0.5),
    "right": (0.0, -0.5),
    "bottom": (-0.5, 0.0),
    "top": (-0.5, -1.0),
    "left top": (-1.0, -1.0),
    "top left": (-1.0, -1.0),
    "right top": (0.0, -1.0),
    "top right": (0.0, -1.0),
    "left bottom": (-1.0, 0.0),
    "bottom left": (-1.0, 0.0),
    "right bottom": (0.0, 0.0),
    "bottom right": (0.0, 0.0),
}

_SIDES = frozenset({"left", "right", "top", "bottom"})


def _orientation(line: SideOrCorner) -> str:
    if line.value not in _ROTATION_DELTAS:
        raise UnsupportedOrientationError(
            f"Unsupported linear gradient orientation: {line.value!r}", source=line.value
        )
    return line.value


def _mappable(node: GradientNode) -> LinearGradient | RadialGradient:
    if isinstance(node, ConicGradient):
        raise UnsupportedGeometryMappingError(
            f"No paint mapping for {node.kind.value}", source=node.kind.value
        )
    return node


def destination_angle(css_degrees: float) -> float:
    """CSS angle (clockwise from up) to counter-clockwise degrees in [0, 360)."""
    return (360.0 - css_degrees % 360.0) % 360.0


def rotation(node: GradientNode) -> float:
    """Rotation of the unit ramp, in degrees."""
    node = _mappable(node)
    if isinstance(node, RadialGradient):
        return BASELINE_ROTATION + RADIAL_ROTATION
    line = node.gradient_line
    if isinstance(line, AngleLine):
        # An explicit angle replaces the baseline entirely.
        return (destination_angle(line.degrees) + 90.0) % 360.0
    return BASELINE_ROTATION + _ROTATION_DELTAS[_orientation(line)]


def scale(node: GradientNode) -> tuple[float, float]:
    node = _mappable(node)
    if isinstance(node, RadialGradient):
        s = 1 / math.sqrt(2)
        return s, s
    line = node.gradient_line
    if isinstance(line, AngleLine):
        theta = math.radians(rotation(node))
        s = 1 / (abs(math.sin(theta)) + abs(math.cos(theta)))
        return s, s
    if _orientation(line) in _SIDES:
        return 1.0, 1.0
    return 1 / math.sqrt(2), 1.0


def translation(node: GradientNode) -> tuple[float, float]:
    """Offset moving the rotation pivot to the ramp's start anchor."""
    node = _mappable(node)
    if isinstance(node, RadialGradient):
        return 0.0, 0.0
    line = node.gradient_line
    if isinstance(line, SideOrCorner):
        return _ANCHORS[_orientation(line)]

    angle = destination_angle(line.degrees)
    if angle == 0:
        return _ANCHORS["top"]
    if angle == 90:
        return _ANCHORS["left"]
    if angle == 180:
        return _ANCHORS["bottom"]
    if angle == 270:
        return _ANCHORS["right"]
    if angle < 90:
        return _ANCHORS["left top"]
    if angle < 180:
        return _ANCHORS["left bottom"]
    if angle < 270:
        return _ANCHORS["right bottom"]
    return _ANCHORS["right top"]


def ray_length(node: GradientNode, width: float = 1.0, height: float = 1.0) -> float:
    """Length of the gradient line across a width x height box."""
    node = _mappable(node)
    if isinstance(node, RadialGradient):
        return math.sqrt(2)
    line = node.gradient_line
    if isinstance(line, AngleLine):
        angle = math.radians(destination_angle(line.degrees))
        return abs(width * math.sin(angle)) + abs(height * math.cos(angle))
    side = _orientation(line)
    if side in ("left", "right"):
        return width
    if side in ("top", "bottom"):
        return height
    return math.hypot(width, height)


def _translate(tx: float, ty: float) -> np.ndarray:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def _scale(sx: float, sy: float) -> np.ndarray:
    return np.diag([sx, sy, 1.0])


def _rotate(radians: float) -> np.ndarray:
    cos, sin = math.cos(radians), math.sin(radians)
    return np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]])


def gradient_transform(node: GradientNode) -> AffineTransform:
    """Compose translate(0, .5) . scale . rotate . translate(anchor).

    The anchor translation is applied to points first.
    """
    sx, sy = scale(node)
    tx, ty = translation(node)
    theta = rotation(node)
    matrix = (
        _translate(0.0, 0.5)
        @ _scale(sx, sy)
        @ _rotate(math.radians(theta))
        @ _translate(tx, ty)
    )
    return AffineTransform(
        a=float(matrix[0, 0]),
        b=float(matrix[1, 0]),
        c=float(matrix[0, 1]),
        d=float(matrix[1, 1]),
        e=float(matrix[0, 2]),
        f=float(matrix[1, 2]),
    )
