"""Raster fallback: frame the whole document in a rounded rectangle.

Used when the artwork cannot be outlined geometrically (embedded images, no
vector paths, or a failed offset/boolean stage). Only the root open tag is
rewritten; the original content is kept byte-for-byte inside a labelled group.
"""

from __future__ import annotations

import logging
import re

from svgborder.engine.config import PipelineConfig
from svgborder.errors import FallbackFailure
from svgborder.models.border import BorderSpec
from svgborder.models.svg_document import SVG_NS, XLINK_NS, SvgDocument
from svgborder.svg.serializer import fmt_number, fmt_viewbox, tag

logger = logging.getLogger(__name__)

FRAME_GROUP_ID = "svgborder-frame"
CONTENT_GROUP_ID = "svgborder-content"


def apply_raster_border(
    doc: SvgDocument,
    border: BorderSpec,
    config: PipelineConfig | None = None,
) -> str:
    """Expand the canvas by the border width on every side and draw a rounded frame.

    Never raises unless ``config.strict`` is set: on an internal error the
    document text is returned unmodified.
    """
    config = config or PipelineConfig()
    try:
        return _frame_document(doc, border, config)
    except Exception as e:
        if config.strict:
            raise FallbackFailure(f"Raster fallback failed: {e}", stage="fallback") from e
        logger.error("Raster fallback failed, returning original document: %s", e)
        return doc.raw_svg


def framed_viewbox(doc: SvgDocument, width: float) -> tuple[float, float, float, float]:
    vx, vy, vw, vh = doc.viewbox
    return (vx - width, vy - width, vw + 2 * width, vh + 2 * width)


def _frame_document(doc: SvgDocument, border: BorderSpec, config: PipelineConfig) -> str:
    w = border.width
    p = config.precision
    vx, vy, vw, vh = doc.viewbox

    open_tag = doc.open_tag
    if not open_tag:
        raise ValueError("document has no root open tag")

    new_open = open_tag
    if doc.self_closing:
        new_open = re.sub(r"\s*/\s*>$", ">", new_open.rstrip())
    new_open = _set_attr(new_open, "width", fmt_number(doc.width + 2 * w, p))
    new_open = _set_attr(new_open, "height", fmt_number(doc.height + 2 * w, p))
    new_open = _set_attr(new_open, "viewBox", fmt_viewbox(framed_viewbox(doc, w), p))
    if "" not in doc.namespaces:
        new_open = _set_attr(new_open, "xmlns", SVG_NS)
    if doc.uses_xlink and "xlink" not in doc.namespaces:
        new_open = _set_attr(new_open, "xmlns:xlink", XLINK_NS)

    # Stroke centred half a border outside the viewBox: its outer edge sits
    # exactly one border width out, its inner edge on the original canvas edge
    frame = tag(
        "rect",
        {
            "x": fmt_number(vx - w / 2, p),
            "y": fmt_number(vy - w / 2, p),
            "width": fmt_number(vw + w, p),
            "height": fmt_number(vh + w, p),
            "rx": fmt_number(w, p),
            "ry": fmt_number(w, p),
            "fill": "none",
            "stroke": border.color,
            "stroke-width": fmt_number(w, p),
        },
    )

    open_start, open_end = doc.open_tag_span
    close_start, close_end = doc.close_tag_span
    head = doc.raw_svg[:open_start]
    if doc.self_closing:
        tail = "</svg>" + doc.raw_svg[open_end:]
    elif close_start == close_end:
        # Unterminated root
        tail = "</svg>"
    else:
        tail = doc.raw_svg[close_start:]

    logger.info(
        "Raster fallback: canvas %gx%g -> %gx%g",
        doc.width,
        doc.height,
        doc.width + 2 * w,
        doc.height + 2 * w,
    )
    return (
        head
        + new_open
        + f'<g id="{FRAME_GROUP_ID}">{frame}</g>'
        + f'<g id="{CONTENT_GROUP_ID}">{doc.inner_svg}</g>'
        + tail
    )


def _set_attr(open_tag: str, name: str, value: str) -> str:
    """Replace an attribute in a tag string, or insert it right after the tag name."""
    pattern = re.compile(r"(\s)" + re.escape(name) + r"""\s*=\s*(?:"[^"]*"|'[^']*')""")
    if pattern.search(open_tag):
        return pattern.sub(lambda m: f'{m.group(1)}{name}="{value}"', open_tag, count=1)
    return re.sub(r"^<svg\b", f'<svg {name}="{value}"', open_tag, count=1, flags=re.IGNORECASE)
