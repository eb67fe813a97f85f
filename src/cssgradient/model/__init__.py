"""cssgradient model layer -- public type re-exports."""

from cssgradient.model.color import RGBA, PaintColor
from cssgradient.model.gradient import (
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
from cssgradient.model.paint import AffineTransform, GradientPaint, GradientStop, PaintType
from cssgradient.model.value import Length, Node, NodeKind

__all__ = [
    # value
    "NodeKind",
    "Node",
    "Length",
    # color
    "RGBA",
    "PaintColor",
    # gradient
    "GradientKind",
    "SideOrCorner",
    "AngleLine",
    "GradientLine",
    "ColorStop",
    "ColorHint",
    "AngularColorStop",
    "LinearGradient",
    "RadialGradient",
    "ConicGradient",
    "GradientNode",
    # paint
    "PaintType",
    "AffineTransform",
    "GradientStop",
    "GradientPaint",
]
