"""POST /api/sanitize — strip script elements from SVG text."""

from __future__ import annotations

from fastapi import APIRouter

from svgborder.models.requests import SanitizeRequest
from svgborder.models.responses import SanitizeResponse
from svgborder.svg.sanitizer import sanitize

router = APIRouter()


@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize_svg(req: SanitizeRequest) -> SanitizeResponse:
    return SanitizeResponse(svg=sanitize(req.svg))
