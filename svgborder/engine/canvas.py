"""Canvas fitting: grow the canvas just enough to hold the ring.

The original artwork keeps its coordinate space: it still occupies
(0, 0, width, height) in the output, and padding only appears on the sides
the ring actually overflows (plus the safety margin).
"""

from __future__ import annotations

from shapely import affinity
from shapely.geometry.base import BaseGeometry

from svgborder.engine.context import Bounds, CanvasFit
from svgborder.models.svg_document import SvgDocument


def viewbox_to_canvas(geom: BaseGeometry, doc: SvgDocument) -> BaseGeometry:
    """Map geometry from the document's viewBox user space to its width/height canvas.

    Honours preserveAspectRatio="none"; every other value is treated as the
    default xMidYMid meet.
    """
    if doc.is_identity_viewbox:
        return geom
    vx, vy, vw, vh = doc.viewbox
    sx = doc.width / vw
    sy = doc.height / vh
    par = doc.root_attributes.get("preserveAspectRatio", "").strip()
    if par.startswith("none"):
        tx, ty = -vx * sx, -vy * sy
    else:
        s = min(sx, sy)
        tx = -vx * s + (doc.width - vw * s) / 2
        ty = -vy * s + (doc.height - vh * s) / 2
        sx = sy = s
    return affinity.affine_transform(geom, [sx, 0.0, 0.0, sy, tx, ty])


def fit_canvas(ring_bounds: Bounds, width: float, height: float, margin: float = 2.0) -> CanvasFit:
    """Pad each side by ``max(0, overflow) + margin``.

    The new viewBox origin is (-left, -top) and its size equals the new canvas size.
    """
    pad_left = max(0.0, -ring_bounds.x) + margin
    pad_top = max(0.0, -ring_bounds.y) + margin
    pad_right = max(0.0, ring_bounds.right - width) + margin
    pad_bottom = max(0.0, ring_bounds.bottom - height) + margin

    return CanvasFit(
        pad_left=pad_left,
        pad_top=pad_top,
        pad_right=pad_right,
        pad_bottom=pad_bottom,
        width=width + pad_left + pad_right,
        height=height + pad_top + pad_bottom,
    )
