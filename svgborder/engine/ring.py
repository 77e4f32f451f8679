"""Ring resolver: offset minus original, leaving only the outward band."""

from __future__ import annotations

import logging

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from svgborder.engine.config import PipelineConfig
from svgborder.errors import BooleanOpFailure
from svgborder.utils.geometry import polygonal, repair

logger = logging.getLogger(__name__)


def as_filled(geom: BaseGeometry) -> BaseGeometry:
    """Treat a geometry as a nonzero-filled area for the boolean engine.

    Polygons are repaired; line work contributes no area.
    """
    return polygonal(repair(geom))


def resolve_ring(
    offset: BaseGeometry,
    original: BaseGeometry,
    config: PipelineConfig | None = None,
) -> BaseGeometry:
    """Compute ``offset - original``; only polygonal parts are kept.

    Raises BooleanOpFailure when the subtraction fails or leaves nothing.
    """
    config = config or PipelineConfig()
    try:
        minuend = as_filled(offset)
        subtrahend = as_filled(original)
        if subtrahend.is_empty:
            ring = minuend
        else:
            ring = polygonal(repair(minuend.difference(subtrahend)))
    except (GEOSException, ValueError) as e:
        raise BooleanOpFailure(f"Ring subtraction failed: {e}", stage="ring") from e

    if ring.is_empty or ring.area <= config.min_area:
        raise BooleanOpFailure("Ring subtraction produced empty geometry", stage="ring")
    if not ring.is_valid:
        raise BooleanOpFailure("Ring subtraction produced invalid geometry", stage="ring")

    logger.debug("Ring area %.2f (offset %.2f, original %.2f)", ring.area, minuend.area, subtrahend.area)
    return ring
