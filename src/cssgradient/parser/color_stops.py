"""Color-stop resolvers: argument groups to stops and hints, per gradient family."""

from __future__ import annotations

from collections.abc import Sequence

from cssgradient.color import ColorResolver
from cssgradient.errors import InvalidAngularColorStopError, InvalidColorStopError
from cssgradient.model.gradient import AngularColorStop, ColorHint, ColorStop
from cssgradient.model.value import Length, Node
from cssgradient.parser.dimension import ANGLE_UNITS, to_unit
from cssgradient.parser.tokenizer import stringify

__all__ = ["ANGULAR_UNITS", "to_color_stop_or_hint", "to_angular_color_stop_or_hint"]

ANGULAR_UNITS = ANGLE_UNITS | {"%"}


def _source(nodes: Sequence[Node]) -> str:
    return " ".join(stringify(node) for node in nodes)


def to_color_stop_or_hint(
    nodes: Sequence[Node], resolve: ColorResolver
) -> ColorStop | ColorHint:
    """Interpret one linear/radial argument group.

    A lone length is a hint, never a color; anything else alone is a color.
    """
    if len(nodes) == 2:
        position = to_unit(nodes[1], "px")
        if position is None:
            raise InvalidColorStopError(
                f"Invalid color stop: {_source(nodes)}", source=_source(nodes)
            )
        return ColorStop(rgba=resolve(stringify(nodes[0])), position=position)
    if len(nodes) == 1:
        hint = to_unit(nodes[0], "px")
        if hint is not None:
            return ColorHint(hint=hint)
        return ColorStop(rgba=resolve(stringify(nodes[0])))
    raise InvalidColorStopError(
        f"Invalid color stop: {_source(nodes)}", source=_source(nodes)
    )


def _to_angle(node: Node) -> Length | None:
    length = to_unit(node, "deg")
    if length is None or length.unit not in ANGULAR_UNITS:
        return None
    return length


def to_angular_color_stop_or_hint(
    nodes: Sequence[Node], resolve: ColorResolver
) -> AngularColorStop | ColorHint:
    """Interpret one conic argument group; positions must be angles or percentages."""
    if len(nodes) == 1:
        hint = _to_angle(nodes[0])
        if hint is not None:
            return ColorHint(hint=hint)
        return AngularColorStop(rgba=resolve(stringify(nodes[0])))
    if len(nodes) == 2:
        angle = _to_angle(nodes[1])
        if angle is not None:
            return AngularColorStop(rgba=resolve(stringify(nodes[0])), angle=angle)
    elif len(nodes) == 3:
        first = _to_angle(nodes[1])
        second = _to_angle(nodes[2])
        if first is not None and second is not None:
            return AngularColorStop(
                rgba=resolve(stringify(nodes[0])), angle=(first, second)
            )
    raise InvalidAngularColorStopError(
        f"Invalid angular color stop: {_source(nodes)}", source=_source(nodes)
    )
