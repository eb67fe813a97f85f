from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_VENDOR_PREFIXES = ("-webkit-", "-moz-", "-o-", "-ms-")


@dataclass(frozen=True)
class GradientConfig:
    """Settings shared by parsing and conversion."""

    vendor_prefixes: tuple[str, ...] = DEFAULT_VENDOR_PREFIXES
    width: float = 1.0  # target shape size for absolute stop positions
    height: float = 1.0
    strip_trailing_semicolon: bool = True  # accept pasted "...;" declarations

    @classmethod
    def from_env(cls) -> GradientConfig:
        """Build a config from CSSGRADIENT_* environment variables."""
        kwargs: dict[str, object] = {}
        if "CSSGRADIENT_WIDTH" in os.environ:
            kwargs["width"] = float(os.environ["CSSGRADIENT_WIDTH"])
        if "CSSGRADIENT_HEIGHT" in os.environ:
            kwargs["height"] = float(os.environ["CSSGRADIENT_HEIGHT"])
        if "CSSGRADIENT_VENDOR_PREFIXES" in os.environ:
            raw = os.environ["CSSGRADIENT_VENDOR_PREFIXES"]
            kwargs["vendor_prefixes"] = tuple(
                p.strip() for p in raw.split(",") if p.strip()
            )
        return cls(**kwargs)  # type: ignore[arg-type]
