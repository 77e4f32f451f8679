"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    border_width: float | None = Field(
        default=None,
        gt=0,
        le=500,
        description="Outline offset in user units (defaults to the configured width)",
    )
    border_color: str | None = Field(
        default=None,
        min_length=1,
        description="Outline stroke color (defaults to the configured color)",
    )


class SanitizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
