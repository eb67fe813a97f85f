from cssgradient.geometry.paint import node_to_paint, paint_type, to_paint
from cssgradient.geometry.stops import normalize_stops
from cssgradient.geometry.transform import (
    destination_angle,
    gradient_transform,
    ray_length,
    rotation,
    scale,
    translation,
)

__all__ = [
    "to_paint",
    "node_to_paint",
    "paint_type",
    "normalize_stops",
    "destination_angle",
    "rotation",
    "scale",
    "translation",
    "ray_length",
    "gradient_transform",
]
