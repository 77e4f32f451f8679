"""Offset engine: grow the silhouette outward by the border width.

Round joins at corners and round caps at open ends, so there are no miter spikes.
"""

from __future__ import annotations

import logging

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from svgborder.engine.config import PipelineConfig
from svgborder.engine.context import CompoundShape
from svgborder.errors import OffsetFailure
from svgborder.utils.geometry import repair

logger = logging.getLogger(__name__)


def offset_shape(
    shape: CompoundShape,
    distance: float,
    config: PipelineConfig | None = None,
) -> BaseGeometry:
    """Return the shape's outward offset by exactly ``distance``.

    Raises OffsetFailure when no outer boundary can be produced.
    """
    config = config or PipelineConfig()
    if distance < 0:
        raise OffsetFailure(f"Offset distance must be non-negative, got {distance}", stage="offset")
    if shape.is_empty:
        raise OffsetFailure("Cannot offset empty geometry", stage="offset")

    try:
        geom = repair(shape.geometry)
    except (GEOSException, ValueError) as e:
        raise OffsetFailure(f"Geometry could not be normalized: {e}", stage="offset") from e

    if geom.is_empty or (geom.area <= config.min_area and geom.length <= 0):
        raise OffsetFailure("Geometry degenerates to nothing after normalization", stage="offset")

    if distance == 0:
        result = geom
    else:
        try:
            result = geom.buffer(
                distance,
                quad_segs=config.quad_segs,
                cap_style="round",
                join_style="round",
            )
        except (GEOSException, ValueError) as e:
            raise OffsetFailure(f"Buffer failed: {e}", stage="offset") from e

    if result.is_empty or result.area <= config.min_area:
        raise OffsetFailure("Offset produced no outer boundary", stage="offset")

    logger.debug("Offset by %g: area %.2f -> %.2f", distance, geom.area, result.area)
    return result
