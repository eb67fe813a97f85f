"""Stop normalization: hints dropped, positions resolved to [0, 1] and made monotonic."""

from __future__ import annotations

from collections.abc import Sequence

from cssgradient.errors import GeometryError
from cssgradient.model.color import PaintColor
from cssgradient.model.gradient import ColorHint, ColorStop
from cssgradient.model.paint import GradientStop
from cssgradient.model.value import Length

__all__ = ["normalize_stops"]


def _raw_position(
    position: Length | None, index: int, count: int, ray_length: float
) -> float:
    if position is None:
        return index / (count - 1) if count > 1 else 0.0
    if position.unit == "%":
        return position.value / 100
    if ray_length <= 0:
        raise GeometryError(
            f"Cannot place {position} on a gradient line of length {ray_length:g}"
        )
    return position.value / ray_length


def normalize_stops(
    stops: Sequence[ColorStop | ColorHint], ray_length: float
) -> tuple[GradientStop, ...]:
    """Resolve stop positions along a gradient line of *ray_length*.

    A stop whose position is smaller than an earlier one is pinned up to it;
    positions are clamped into [0, 1].
    """
    color_stops = [stop for stop in stops if isinstance(stop, ColorStop)]
    count = len(color_stops)
    resolved: list[GradientStop] = []
    previous = 0.0
    for index, stop in enumerate(color_stops):
        raw = _raw_position(stop.position, index, count, ray_length)
        position = max(previous, min(1.0, raw))
        resolved.append(GradientStop(position=position, color=PaintColor.from_rgba(stop.rgba)))
        previous = position
    return tuple(resolved)
