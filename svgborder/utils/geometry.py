"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import GeometryCollection, LineString, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid


def apply_affine(points: NDArray[np.float64], matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a 3x3 homogeneous SVG transform matrix to an Nx2 point array."""
    if len(points) == 0:
        return points
    homogeneous = np.column_stack([points, np.ones(len(points))])
    mapped = homogeneous @ matrix.T
    return mapped[:, :2]


def extract_polys(geom: BaseGeometry | None) -> list[Polygon]:
    """Extract all Polygon objects from any Shapely geometry, recursing into collections."""
    if geom is None or geom.is_empty:
        return []
    if geom.geom_type == "Polygon":
        return [geom]
    if geom.geom_type in ("MultiPolygon", "GeometryCollection"):
        polys: list[Polygon] = []
        for g in geom.geoms:
            polys.extend(extract_polys(g))
        return polys
    return []


def polygonal(geom: BaseGeometry | None) -> BaseGeometry:
    """Polygonal part of a geometry as a (Multi)Polygon; empty Polygon if none."""
    polys = [p for p in extract_polys(geom) if not p.is_empty]
    if not polys:
        return Polygon()
    if len(polys) == 1:
        return polys[0]
    # Parts of a repaired geometry may share edges; dissolve them
    return unary_union(polys)


def repair(geom: BaseGeometry) -> BaseGeometry:
    """Return a valid version of the geometry (self-intersections resolved)."""
    if geom.is_valid:
        return geom
    return make_valid(geom)


def points_to_geometry(points: NDArray[np.float64], closed: bool) -> BaseGeometry:
    """Build a Shapely geometry from sampled points.

    Closed paths with >= 3 distinct points become repaired polygons, everything
    else a line string. Degenerate input yields an empty collection.
    """
    pts = _dedupe(points)
    if len(pts) < 2:
        return GeometryCollection()
    if closed and len(pts) >= 3:
        return repair(Polygon(pts))
    return LineString(pts)


def _dedupe(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Drop consecutive duplicate points (and a repeated closing point)."""
    if len(points) == 0:
        return points
    keep = np.ones(len(points), dtype=bool)
    keep[1:] = np.any(np.abs(np.diff(points, axis=0)) > 1e-12, axis=1)
    pts = points[keep]
    if len(pts) > 1 and np.allclose(pts[0], pts[-1], atol=1e-12):
        pts = pts[:-1]
    return pts
