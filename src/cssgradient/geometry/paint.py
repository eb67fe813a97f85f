"""Convert parsed gradients into gradient paints."""

from __future__ import annotations

import logging

from cssgradient.color import ColorResolver
from cssgradient.config import GradientConfig
from cssgradient.errors import UnsupportedGeometryMappingError
from cssgradient.geometry.stops import normalize_stops
from cssgradient.geometry.transform import gradient_transform, ray_length
from cssgradient.model.gradient import ConicGradient, GradientNode, LinearGradient
from cssgradient.model.paint import GradientPaint, PaintType
from cssgradient.parser.gradient import parse_gradient

__all__ = ["paint_type", "node_to_paint", "to_paint"]

logger = logging.getLogger(__name__)


def paint_type(node: GradientNode) -> PaintType:
    if isinstance(node, LinearGradient):
        return PaintType.LINEAR
    if isinstance(node, ConicGradient):
        raise UnsupportedGeometryMappingError(
            f"No paint mapping for {node.kind.value}", source=node.kind.value
        )
    return PaintType.RADIAL


def node_to_paint(
    node: GradientNode, width: float = 1.0, height: float = 1.0
) -> GradientPaint:
    """Build the paint for one parsed gradient placed on a width x height shape."""
    kind = paint_type(node)
    transform = gradient_transform(node)
    stops = normalize_stops(node.color_stops, ray_length(node, width, height))  # type: ignore[arg-type]
    logger.debug(
        "%s -> %s transform=%s stops=%s",
        node.kind.value,
        kind.value,
        transform.rows(),
        [stop.position for stop in stops],
    )
    return GradientPaint(type=kind, gradient_stops=stops, transform=transform)


def to_paint(
    css: str,
    width: float | None = None,
    height: float | None = None,
    *,
    color_resolver: ColorResolver | None = None,
    config: GradientConfig | None = None,
) -> list[GradientPaint]:
    """Parse *css* and convert every gradient layer into a paint.

    *width* and *height* default to the config's (1 x 1) and only matter for
    stops positioned in absolute units.
    """
    config = config or GradientConfig()
    width = config.width if width is None else width
    height = config.height if height is None else height
    nodes = parse_gradient(css, color_resolver=color_resolver, config=config)
    return [node_to_paint(node, width, height) for node in nodes]
