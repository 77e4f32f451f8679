"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from svgborder.config import settings
from svgborder.engine.config import PipelineConfig
from svgborder.engine.pipeline import OutlinePipeline, create_pipeline


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_pipeline() -> OutlinePipeline:
    """Shared pipeline; holds no per-document state, only fallback counters."""
    return create_pipeline(PipelineConfig(strict=settings.svgborder_strict))
