"""Write SVG markup: attribute formatting and tag assembly."""

from __future__ import annotations

import html
from typing import Any

from shapely.geometry.base import BaseGeometry

from svgborder.models.svg_document import SVG_NS, XLINK_NS, SvgDocument
from svgborder.utils.geometry import extract_polys

# Root attributes that describe the viewport rather than presentation
_VIEWPORT_ATTRS = {"width", "height", "x", "y", "viewBox", "preserveAspectRatio", "version", "baseProfile"}


def fmt_number(value: float, precision: int = 3) -> str:
    """Compact decimal: no trailing zeros, no negative zero."""
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def fmt_viewbox(viewbox: tuple[float, float, float, float], precision: int = 3) -> str:
    return " ".join(fmt_number(v, precision) for v in viewbox)


def attr_string(attrs: dict[str, Any], escape: bool = True) -> str:
    """Render attributes as ``k="v"`` pairs.

    With ``escape=False`` values are emitted as written in the source (entity
    references intact); single quotes are used when a value contains ``"``.
    """
    parts = []
    for key, value in attrs.items():
        text = str(value)
        if escape:
            parts.append(f'{key}="{html.escape(text, quote=True)}"')
        elif '"' in text:
            parts.append(f"{key}='{text}'")
        else:
            parts.append(f'{key}="{text}"')
    return " ".join(parts)


def tag(name: str, attrs: dict[str, Any], children: str | None = None, escape: bool = True) -> str:
    """Self-closing tag when ``children`` is None, otherwise an element wrapping them verbatim."""
    attr_text = attr_string(attrs, escape=escape)
    open_text = f"<{name} {attr_text}" if attr_text else f"<{name}"
    if children is None:
        return f"{open_text}/>"
    return f"{open_text}>{children}</{name}>"


def namespace_attrs(doc: SvgDocument) -> dict[str, str]:
    """Namespace declarations for a new root: SVG, xlink when used, plus the source's own."""
    attrs = {"xmlns": SVG_NS}
    if doc.uses_xlink or "xlink" in doc.namespaces:
        attrs["xmlns:xlink"] = XLINK_NS
    for prefix, uri in doc.namespaces.items():
        if prefix in ("", "xlink"):
            continue
        attrs[f"xmlns:{prefix}"] = uri
    return attrs


def presentation_attrs(doc: SvgDocument) -> dict[str, str]:
    """Root attributes that style the content (fill, stroke, class, ...), as written."""
    return {
        k: v
        for k, v in doc.root_attributes.items()
        if k not in _VIEWPORT_ATTRS and k != "xmlns" and not k.startswith("xmlns:")
    }


def nested_document(doc: SvgDocument, precision: int = 3) -> str:
    """Re-embed the source document as a nested <svg> at the origin.

    Width, height, viewBox and presentation attributes are carried over; the
    content is the source inner text byte-for-byte.
    """
    attrs: dict[str, str] = {
        "x": "0",
        "y": "0",
        "width": fmt_number(doc.width, precision),
        "height": fmt_number(doc.height, precision),
        "viewBox": doc.root_attributes.get("viewBox") if doc.has_viewbox else fmt_viewbox(doc.viewbox, precision),
    }
    if "preserveAspectRatio" in doc.root_attributes:
        attrs["preserveAspectRatio"] = doc.root_attributes["preserveAspectRatio"]
    presentation = presentation_attrs(doc)
    # The new root declares fill="none"; restore the initial fill the source inherited
    if "fill" not in presentation:
        attrs["fill"] = doc.default_fill
    attrs.update(presentation)
    return tag("svg", attrs, children=doc.inner_svg, escape=False)


def geometry_to_path_d(geom: BaseGeometry, precision: int = 3) -> str:
    """Serialize the polygonal part of a geometry as SVG path data.

    Every exterior and interior ring becomes its own closed subpath.
    """
    parts: list[str] = []
    for poly in extract_polys(geom):
        for ring in [poly.exterior, *poly.interiors]:
            coords = list(ring.coords)
            if len(coords) > 1 and coords[0] == coords[-1]:
                coords = coords[:-1]
            if len(coords) < 3:
                continue
            points = [f"{fmt_number(x, precision)} {fmt_number(y, precision)}" for x, y in coords]
            parts.append("M" + " L".join(points) + " Z")
    return " ".join(parts)
