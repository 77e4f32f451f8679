"""Compositor: assemble the outlined document.

Layout: the stroked ring group first, then the untouched original re-embedded
as a nested <svg> at the origin of the fitted canvas.
"""

from __future__ import annotations

from shapely.geometry.base import BaseGeometry

from svgborder.engine.config import PipelineConfig
from svgborder.engine.context import CanvasFit
from svgborder.models.border import BorderSpec
from svgborder.models.svg_document import SvgDocument
from svgborder.svg.serializer import (
    attr_string,
    fmt_number,
    fmt_viewbox,
    geometry_to_path_d,
    namespace_attrs,
    nested_document,
    tag,
)

OUTLINE_GROUP_ID = "svgborder-outline"


def compose(
    doc: SvgDocument,
    ring: BaseGeometry,
    fit: CanvasFit,
    border: BorderSpec,
    config: PipelineConfig | None = None,
) -> str:
    """Serialize the final document. ``ring`` must already be in canvas space."""
    config = config or PipelineConfig()
    p = config.precision

    ring_path = tag(
        "path",
        {
            "d": geometry_to_path_d(ring, p),
            "fill": "none",
            "stroke": border.color,
            "stroke-width": fmt_number(config.ring_stroke_width, p),
            "stroke-linejoin": "round",
        },
    )

    root_attrs: dict[str, str] = {
        **namespace_attrs(doc),
        "width": fmt_number(fit.width, p),
        "height": fmt_number(fit.height, p),
        "viewBox": fmt_viewbox(fit.viewbox, p),
        "fill": "none",
    }

    lines = [
        f"<svg {attr_string(root_attrs, escape=False)}>",
        f'  <g id="{OUTLINE_GROUP_ID}">',
        f"    {ring_path}",
        "  </g>",
        f"  {nested_document(doc, p)}",
        "</svg>",
    ]
    return "\n".join(lines)
