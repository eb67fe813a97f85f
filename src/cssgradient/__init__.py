"""cssgradient - CSS gradient functions to typed gradients and design-tool paints."""

__version__ = "0.1.0"

from cssgradient.color import ColorResolver, resolve_color
from cssgradient.config import GradientConfig
from cssgradient.errors import GradientError, ParseError
from cssgradient.geometry import node_to_paint, to_paint
from cssgradient.parser import parse_gradient

__all__ = [
    "__version__",
    "parse_gradient",
    "to_paint",
    "node_to_paint",
    "resolve_color",
    "ColorResolver",
    "GradientConfig",
    "GradientError",
    "ParseError",
]
