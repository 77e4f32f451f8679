"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgborder import __version__
from svgborder.dependencies import get_pipeline
from svgborder.engine.pipeline import OutlinePipeline
from svgborder.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(pipeline: OutlinePipeline = Depends(get_pipeline)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        fallback_counts=dict(pipeline.fallback_counts),
    )
