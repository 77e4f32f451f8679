"""svgborder outline engine."""

from svgborder.engine.config import PipelineConfig
from svgborder.engine.context import Bounds, CanvasFit, CompoundShape, OutlineContext, PathGeometry
from svgborder.engine.pipeline import OutlinePipeline, OutlineResult, create_pipeline, process

__all__ = [
    "PipelineConfig",
    "Bounds",
    "CanvasFit",
    "CompoundShape",
    "OutlineContext",
    "PathGeometry",
    "OutlinePipeline",
    "OutlineResult",
    "create_pipeline",
    "process",
]
