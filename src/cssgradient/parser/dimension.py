"""Dimension resolver: ``number[unit]`` words to typed lengths, and angle units to degrees."""

from __future__ import annotations

import math
import re

from cssgradient.errors import UnsupportedDimensionUnitError
from cssgradient.model.value import Length, Node

__all__ = ["ANGLE_UNITS", "to_unit", "to_degrees"]

ANGLE_UNITS = frozenset({"deg", "rad", "grad", "turn"})

# A CSS number followed by an optional unit: "%" or an identifier.
_DIMENSION_RE = re.compile(
    r"""
    (?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    (?P<unit>%|[a-zA-Z_][a-zA-Z0-9_-]*)?
    """,
    re.VERBOSE,
)


def to_unit(node: Node, unit_for_zero: str) -> Length | None:
    """Read *node* as a dimension, or return None when it is not one.

    A unitless number is accepted only when it is exactly zero, in which
    case it takes *unit_for_zero*.
    """
    if not node.is_word:
        return None
    match = _DIMENSION_RE.fullmatch(node.value)
    if match is None:
        return None
    value = float(match.group("number"))
    unit = match.group("unit")
    if unit:
        return Length(value=value, unit=unit.lower())
    if value == 0:
        return Length(value=0.0, unit=unit_for_zero)
    return None


def to_degrees(length: Length) -> float:
    """Convert an angle-unit length to degrees."""
    if length.unit == "deg":
        return length.value
    if length.unit == "rad":
        return 180 * length.value / math.pi
    if length.unit == "grad":
        return 360 * length.value / 400
    if length.unit == "turn":
        return 360 * length.value
    raise UnsupportedDimensionUnitError(length.unit)
