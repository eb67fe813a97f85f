"""Gradient parser: dispatch layers to the linear, radial and conic grammars.

Each grammar rule takes the remaining argument groups and returns the parsed
clause together with the groups it did not consume; nothing is modified in
place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Union

from cssgradient.color import ColorResolver, resolve_color
from cssgradient.config import GradientConfig
from cssgradient.errors import (
    InvalidGradientError,
    MissingAngleError,
    UnsupportedFunctionError,
)
from cssgradient.model.gradient import (
    ENDING_SHAPES,
    RADIAL_EXTENTS,
    AngleLine,
    AngularColorStop,
    ColorHint,
    ColorStop,
    ConicGradient,
    GradientKind,
    GradientLine,
    GradientNode,
    LinearGradient,
    RadialGradient,
    SideOrCorner,
)
from cssgradient.model.value import Length, Node
from cssgradient.parser.arguments import split_comma_args
from cssgradient.parser.color_stops import (
    to_angular_color_stop_or_hint,
    to_color_stop_or_hint,
)
from cssgradient.parser.dimension import ANGLE_UNITS, to_degrees, to_unit
from cssgradient.parser.tokenizer import stringify, tokenize

__all__ = ["parse_gradient", "gradient_kind"]

logger = logging.getLogger(__name__)

Args = Sequence[Sequence[Node]]
Stop = Union[ColorStop, AngularColorStop, ColorHint]

DEFAULT_ANGLE = 180.0  # top to bottom


def _keyword(node: Node) -> str | None:
    return node.value.lower() if node.is_word else None


def _joined(nodes: Sequence[Node]) -> str:
    return " ".join(stringify(node) for node in nodes)


def _angle(node: Node) -> Length | None:
    length = to_unit(node, "deg")
    if length is None or length.unit not in ANGLE_UNITS:
        return None
    return length


# ---------------------------------------------------------------------------
# Linear
# ---------------------------------------------------------------------------


def _linear_line(args: Args) -> tuple[GradientLine, Args]:
    first = args[0]
    if _keyword(first[0]) == "to":
        value = " ".join(stringify(node).lower() for node in first[1:])
        return SideOrCorner(value=value), args[1:]
    angle = _angle(first[0])
    if angle is not None:
        return AngleLine(degrees=to_degrees(angle)), args[1:]
    return AngleLine(degrees=DEFAULT_ANGLE), args


def _parse_linear(
    kind: GradientKind, args: Args, resolve: ColorResolver, source: str
) -> LinearGradient:
    line, rest = _linear_line(args)
    stops = _with_color_stop(
        tuple(to_color_stop_or_hint(group, resolve) for group in _stop_groups(rest, source)),
        source,
    )
    return LinearGradient(kind=kind, gradient_line=line, color_stops=stops)


# ---------------------------------------------------------------------------
# Radial
# ---------------------------------------------------------------------------


def _radial_shape(
    args: Args, source: str
) -> tuple[str, str | tuple[Length, ...], str, Args]:
    """Read the optional ``<shape> <size> at <position>`` argument.

    Returns (ending_shape, size, position, remaining args).
    """
    first = args[0]
    ending_shape = "ellipse"
    extent = "farthest-corner"
    lengths: list[Length] = []
    position = "center"
    recognized = False

    for i, token in enumerate(first):
        keyword = _keyword(token)
        if keyword in ENDING_SHAPES:
            ending_shape = keyword
        elif keyword in RADIAL_EXTENTS:
            extent = keyword
        elif keyword == "at":
            position = _joined(first[i + 1 :])
            if not position:
                raise InvalidGradientError(
                    "Position expected after 'at'", source=source
                )
            recognized = True
            break
        else:
            length = to_unit(token, "px")
            if length is not None and length.unit not in ANGLE_UNITS:
                if len(lengths) == 2:
                    raise InvalidGradientError(
                        f"Too many radial sizes: {_joined(first)}", source=source
                    )
                lengths.append(length)
            elif not recognized:
                break
            else:
                logger.debug("ignoring radial option %r", stringify(token))
                continue
        recognized = True

    size: str | tuple[Length, ...] = tuple(lengths) if lengths else extent
    rest = args[1:] if recognized else args
    return ending_shape, size, position, rest


def _parse_radial(
    kind: GradientKind, args: Args, resolve: ColorResolver, source: str
) -> RadialGradient:
    ending_shape, size, position, rest = _radial_shape(args, source)
    stops = _with_color_stop(
        tuple(to_color_stop_or_hint(group, resolve) for group in _stop_groups(rest, source)),
        source,
    )
    return RadialGradient(
        kind=kind,
        ending_shape=ending_shape,
        size=size,
        position=position,
        color_stops=stops,
    )


# ---------------------------------------------------------------------------
# Conic
# ---------------------------------------------------------------------------


def _conic_origin(args: Args, source: str) -> tuple[float | None, str, Args]:
    """Read the optional ``from <angle> at <position>`` argument."""
    first = args[0]
    angle: float | None = None
    position = "center"
    cursor = 0

    if _keyword(first[0]) == "from":
        length = _angle(first[1]) if len(first) > 1 else None
        if length is None:
            raise MissingAngleError("angle expected", source=source)
        angle = to_degrees(length)
        cursor = 2

    if cursor < len(first) and _keyword(first[cursor]) == "at":
        position = _joined(first[cursor + 1 :])
        if not position:
            raise InvalidGradientError("Position expected after 'at'", source=source)
        cursor = len(first)

    rest = args[1:] if cursor else args
    return angle, position, rest


def _parse_conic(
    kind: GradientKind, args: Args, resolve: ColorResolver, source: str
) -> ConicGradient:
    angle, position, rest = _conic_origin(args, source)
    stops = _with_color_stop(
        tuple(
            to_angular_color_stop_or_hint(group, resolve)
            for group in _stop_groups(rest, source)
        ),
        source,
    )
    return ConicGradient(kind=kind, angle=angle, position=position, color_stops=stops)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_GRAMMARS: dict[str, Callable[[GradientKind, Args, ColorResolver, str], GradientNode]] = {
    "linear": _parse_linear,
    "radial": _parse_radial,
    "conic": _parse_conic,
}


def _stop_groups(groups: Args, source: str) -> Args:
    if not groups:
        raise InvalidGradientError("At least one color stop expected", source=source)
    return groups


def _with_color_stop(stops: tuple[Stop, ...], source: str) -> tuple[Stop, ...]:
    # Hints alone leave nothing to paint.
    if all(isinstance(stop, ColorHint) for stop in stops):
        raise InvalidGradientError("At least one color stop expected", source=source)
    return stops


def gradient_kind(name: str, vendor_prefixes: Sequence[str] = ()) -> GradientKind:
    """Map a (possibly vendor-prefixed) function name to its GradientKind."""
    name = name.lower()
    for prefix in vendor_prefixes:
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    try:
        return GradientKind(name)
    except ValueError:
        raise UnsupportedFunctionError(f"Unsupported gradient: {name}", source=name) from None


def _parse_layer(
    node: Node, resolve: ColorResolver, config: GradientConfig
) -> GradientNode:
    source = stringify(node)
    kind = gradient_kind(node.value, config.vendor_prefixes)
    args = split_comma_args(node.nodes)
    if not args[0]:
        raise InvalidGradientError(f"Empty argument in {source}", source=source)
    gradient = _GRAMMARS[kind.family](kind, args, resolve, source)
    logger.debug("parsed %s", gradient)
    return gradient


def _is_gradient_layer(layer: Sequence[Node]) -> bool:
    return len(layer) == 1 and layer[0].is_function and "-gradient" in layer[0].value.lower()


def parse_gradient(
    css: str,
    *,
    color_resolver: ColorResolver | None = None,
    config: GradientConfig | None = None,
) -> list[GradientNode]:
    """Parse every gradient layer of a ``background-image``-style value.

    Layers that are not gradient functions (``url(...)``, ``none``) are
    skipped. A malformed gradient layer raises for the whole call.
    """
    config = config or GradientConfig()
    resolve = color_resolver or resolve_color
    text = css.strip()
    if config.strip_trailing_semicolon and text.endswith(";"):
        text = text[:-1].rstrip()

    gradients: list[GradientNode] = []
    for layer in split_comma_args(tokenize(text)):
        if not _is_gradient_layer(layer):
            logger.debug("skipping non-gradient layer %r", _joined(layer))
            continue
        gradients.append(_parse_layer(layer[0], resolve, config))
    return gradients
