"""svgborder: outline SVG artwork and grow the canvas to fit."""

from svgborder.engine.pipeline import process
from svgborder.errors import (
    BooleanOpFailure,
    FallbackFailure,
    InvalidInput,
    NoGeometry,
    OffsetFailure,
    OutlineError,
)
from svgborder.svg.sanitizer import sanitize

__version__ = "0.1.0"

__all__ = [
    "process",
    "sanitize",
    "OutlineError",
    "InvalidInput",
    "NoGeometry",
    "OffsetFailure",
    "BooleanOpFailure",
    "FallbackFailure",
]
