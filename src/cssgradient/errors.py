"""Error hierarchy for gradient parsing and conversion."""
from __future__ import annotations


class GradientError(Exception):
    """Base error for all cssgradient errors."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


# ---------------------------------------------------------------------------
# Parse-time errors
# ---------------------------------------------------------------------------


class ParseError(GradientError):
    """Raised when a gradient declaration cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, source=source)
        self.line = line
        self.column = column


class UnsupportedFunctionError(ParseError):
    """A ``*-gradient`` function name that is not linear, radial or conic."""


class InvalidGradientError(ParseError):
    """The argument list of a recognized gradient is malformed."""


class InvalidColorStopError(ParseError):
    """A color-stop argument has the wrong arity or position type."""


class InvalidAngularColorStopError(InvalidColorStopError):
    """A conic color-stop argument has the wrong arity or angle type."""


class MissingAngleError(ParseError):
    """``from`` in a conic gradient is not followed by an angle."""


class InvalidColorError(ParseError):
    """The color resolver could not read a color literal."""


# ---------------------------------------------------------------------------
# Unit and geometry errors
# ---------------------------------------------------------------------------


class UnsupportedDimensionUnitError(GradientError):
    """An angle conversion was asked for a non-angle unit."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unsupported dimension: {unit}", source=unit)
        self.unit = unit


class GeometryError(GradientError):
    """A parsed gradient cannot be mapped onto a paint transform."""


class UnsupportedOrientationError(GeometryError):
    """A side-or-corner value is not one of the legal keyword combinations."""


class UnsupportedGeometryMappingError(GeometryError):
    """The gradient kind has no transform mapping (conic gradients)."""
