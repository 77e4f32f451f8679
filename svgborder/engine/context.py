"""OutlineContext: the per-call working state flowing through the outline stages.

Geometry intermediates live here for one call only. A fresh context is built
for every document; callers reusing one must clear() it first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray
from shapely.geometry.base import BaseGeometry

from svgborder.models.border import BorderSpec
from svgborder.models.svg_document import SvgDocument


@dataclass
class PathGeometry:
    """A single sub-path extracted from the SVG, already in root user space."""

    id: str
    # Sampled boundary points: Nx2 array of (x, y)
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    closed: bool = False
    # Source element tag (path, rect, circle, ...)
    source_tag: str = "path"
    # Styling metadata; never read by geometric operations
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def num_points(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box. Always derived fresh from a geometry."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def of(cls, geom: BaseGeometry) -> "Bounds":
        if geom is None or geom.is_empty:
            return cls(0.0, 0.0, 0.0, 0.0)
        xmin, ymin, xmax, ymax = geom.bounds
        return cls(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))

    def contains(self, other: "Bounds", tol: float = 1e-9) -> bool:
        return (
            self.x <= other.x + tol
            and self.y <= other.y + tol
            and self.right >= other.right - tol
            and self.bottom >= other.bottom - tol
        )


@dataclass
class CompoundShape:
    """Union of one or more paths, treated as one silhouette."""

    geometry: BaseGeometry
    # Ids of the paths that contributed area/length
    path_ids: list[str] = field(default_factory=list)
    # Ids of the paths dropped because their union step failed
    skipped_ids: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.geometry is None or self.geometry.is_empty

    @property
    def area(self) -> float:
        return 0.0 if self.is_empty else float(self.geometry.area)

    @property
    def bounds(self) -> Bounds:
        return Bounds.of(self.geometry)


@dataclass
class CanvasFit:
    """Padding and the resulting canvas for the composed document."""

    pad_left: float
    pad_top: float
    pad_right: float
    pad_bottom: float
    width: float
    height: float

    @property
    def viewbox(self) -> tuple[float, float, float, float]:
        return (-self.pad_left, -self.pad_top, self.width, self.height)


@dataclass
class OutlineContext:
    """Shared state for one processing call."""

    svg_raw: str = ""
    border: BorderSpec = field(default_factory=BorderSpec)
    document: SvgDocument | None = None
    # Parsed element tree (xml.etree Element), None when not well-formed
    tree: Any = None
    has_raster: bool = False

    paths: list[PathGeometry] = field(default_factory=list)
    silhouette: CompoundShape | None = None
    offset: BaseGeometry | None = None
    ring: BaseGeometry | None = None
    fit: CanvasFit | None = None

    # "outline", "raster_fallback" or "passthrough"
    strategy: str = ""
    fallback_reason: str = ""
    output_svg: str = ""

    # --- Metadata ---
    completed_stages: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def num_paths(self) -> int:
        return len(self.paths)

    def clear(self) -> None:
        """Release every geometric object and reset metadata."""
        fresh = OutlineContext()
        for name in self.__dataclass_fields__:
            setattr(self, name, getattr(fresh, name))
