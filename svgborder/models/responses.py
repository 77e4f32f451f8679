"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fallback_counts: dict[str, int] = Field(default_factory=dict)


class OutlineResponse(BaseModel):
    svg: str
    strategy: str
    fallback_reason: str = ""
    width: float = 0.0
    height: float = 0.0
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)


class SanitizeResponse(BaseModel):
    svg: str


class ErrorDetail(BaseModel):
    kind: str
    message: str
    stage: str = ""


class ErrorResponse(BaseModel):
    detail: ErrorDetail
