"""Shape unification: fold all extracted paths into one silhouette.

Left-to-right pairwise union. A step that cannot be computed drops its second
operand and unification continues with the remaining paths.
"""

from __future__ import annotations

import logging

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from svgborder.engine.context import CompoundShape, PathGeometry
from svgborder.errors import BooleanOpFailure, NoGeometry
from svgborder.utils.geometry import points_to_geometry, repair

logger = logging.getLogger(__name__)


def path_geometry(path: PathGeometry) -> BaseGeometry:
    """Pure geometry of a path: styling is not consulted."""
    return points_to_geometry(path.points, path.closed)


def unify_paths(paths: list[PathGeometry]) -> CompoundShape:
    """Union N >= 1 paths into one CompoundShape.

    Raises NoGeometry for an empty input and BooleanOpFailure when no operand
    produced usable geometry.
    """
    if not paths:
        raise NoGeometry("No paths to unify", stage="unify")

    if len(paths) == 1:
        geom = path_geometry(paths[0])
        if geom.is_empty:
            raise BooleanOpFailure(f"Path {paths[0].id} is degenerate", stage="unify")
        return CompoundShape(geometry=geom, path_ids=[paths[0].id])

    accumulated: BaseGeometry | None = None
    used: list[str] = []
    skipped: list[str] = []

    for path in paths:
        try:
            geom = path_geometry(path)
        except (GEOSException, ValueError) as e:
            logger.warning("Union: %s has no usable geometry (%s), skipping", path.id, e)
            skipped.append(path.id)
            continue
        if geom.is_empty:
            logger.debug("Union: %s is degenerate, skipping", path.id)
            skipped.append(path.id)
            continue

        if accumulated is None:
            accumulated = geom
            used.append(path.id)
            continue

        try:
            merged = repair(accumulated.union(geom))
        except (GEOSException, ValueError) as e:
            logger.warning("Union with %s failed (%s), skipping operand", path.id, e)
            skipped.append(path.id)
            continue
        if merged.is_empty:
            logger.warning("Union with %s produced empty geometry, skipping operand", path.id)
            skipped.append(path.id)
            continue

        accumulated = merged
        used.append(path.id)

    if accumulated is None:
        raise BooleanOpFailure("Every path was skipped during union", stage="unify")

    logger.debug("Unified %d paths (%d skipped)", len(used), len(skipped))
    return CompoundShape(geometry=accumulated, path_ids=used, skipped_ids=skipped)
