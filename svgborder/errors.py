"""Typed failures raised by the outline pipeline.

Each error carries a ``kind`` so callers can show a specific diagnostic.
NoGeometry, OffsetFailure and BooleanOpFailure are recovered inside the pipeline
(raster fallback); InvalidInput and FallbackFailure reach the caller.
"""

from __future__ import annotations


class OutlineError(Exception):
    """Base class for all outline processing failures."""

    kind = "outline_error"

    def __init__(self, message: str = "", *, stage: str = "") -> None:
        super().__init__(message or self.kind)
        self.stage = stage

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": str(self), "stage": self.stage}


class InvalidInput(OutlineError):
    """Input is not text or has no <svg> root after sanitization."""

    kind = "invalid_input"


class NoGeometry(OutlineError):
    """No vector paths could be extracted and no raster content was found."""

    kind = "no_geometry"


class OffsetFailure(OutlineError):
    """The offset engine could not produce an outer boundary."""

    kind = "offset_failure"


class BooleanOpFailure(OutlineError):
    """A union or subtraction step failed irrecoverably."""

    kind = "boolean_op_failure"


class FallbackFailure(OutlineError):
    """The raster fallback itself could not produce a document."""

    kind = "fallback_failure"


RECOVERABLE = (NoGeometry, OffsetFailure, BooleanOpFailure)
