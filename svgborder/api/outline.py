"""POST /api/outline — outline an SVG and grow its canvas."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svgborder.config import Settings
from svgborder.dependencies import get_pipeline, get_settings
from svgborder.engine.pipeline import OutlinePipeline
from svgborder.errors import OutlineError
from svgborder.models.border import BorderSpec
from svgborder.models.requests import OutlineRequest
from svgborder.models.responses import ErrorResponse, OutlineResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/outline", response_model=OutlineResponse, responses={422: {"model": ErrorResponse}})
def outline(
    req: OutlineRequest,
    pipeline: OutlinePipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> OutlineResponse:
    border = BorderSpec(
        width=req.border_width if req.border_width is not None else settings.default_border_width,
        color=req.border_color or settings.default_border_color,
    )

    try:
        result = pipeline.run(req.svg, border)
    except OutlineError as e:
        logger.info("Outline rejected (%s): %s", e.kind, e)
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    return OutlineResponse(
        svg=result.svg,
        strategy=result.strategy,
        fallback_reason=result.fallback_reason,
        width=result.width,
        height=result.height,
        viewbox=result.viewbox,
        processing_time_ms=result.processing_time_ms,
        errors=result.errors,
    )
