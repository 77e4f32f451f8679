"""SVG parser: root tag facts from the raw text, element tree via ElementTree.

The root open/close tags are located textually so the inner content can be
re-embedded byte-for-byte; geometry extraction works on the parsed tree.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from svgborder.errors import InvalidInput
from svgborder.models.svg_document import SVG_NS, XLINK_NS, SvgDocument

logger = logging.getLogger(__name__)

# Root open tag; quoted attribute values may contain ">"
_ROOT_OR_COMMENT_RE = re.compile(
    r"<!--.*?-->|<!\[CDATA\[.*?\]\]>|<svg\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*>",
    re.DOTALL | re.IGNORECASE,
)
_CLOSE_SVG_RE = re.compile(r"</svg\s*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px)?\s*$")
_NUMBER_SPLIT_RE = re.compile(r"[\s,]+")

# Heuristic used when the document does not parse as XML
_RASTER_TEXT_RE = re.compile(
    r"<image\b|(?:xlink:)?href\s*=\s*[\"']\s*data:image",
    re.IGNORECASE,
)


def parse_document(svg_text: str) -> SvgDocument:
    """Parse root-level facts of an SVG string into an SvgDocument.

    Raises InvalidInput when there is no <svg> root tag.
    """
    if not isinstance(svg_text, str):
        raise InvalidInput("SVG input must be text", stage="parse")

    open_match = None
    for match in _ROOT_OR_COMMENT_RE.finditer(svg_text):
        if match.group(0).lower().startswith("<svg"):
            open_match = match
            break
    if open_match is None:
        raise InvalidInput("No <svg> root element found", stage="parse")

    open_tag = open_match.group(0)
    attrs = _extract_attrs(open_tag)
    namespaces = {
        (k.split(":", 1)[1] if ":" in k else ""): v
        for k, v in attrs.items()
        if k == "xmlns" or k.startswith("xmlns:")
    }

    if open_tag.rstrip().endswith("/>"):
        inner = ""
        close_span = (open_match.end(), open_match.end())
    else:
        closes = list(_CLOSE_SVG_RE.finditer(svg_text, open_match.end()))
        if closes:
            close = closes[-1]
            inner = svg_text[open_match.end() : close.start()]
            close_span = (close.start(), close.end())
        else:
            logger.warning("SVG root has no closing tag; treating rest of text as content")
            inner = svg_text[open_match.end() :]
            close_span = (len(svg_text), len(svg_text))

    width = _parse_length(attrs.get("width"))
    height = _parse_length(attrs.get("height"))
    viewbox = _parse_viewbox(attrs.get("viewBox"))

    doc = SvgDocument(
        root_attributes=attrs,
        namespaces=namespaces,
        inner_svg=inner,
        open_tag_span=(open_match.start(), open_match.end()),
        close_tag_span=close_span,
        raw_svg=svg_text,
    )

    if viewbox is not None:
        doc.viewbox = viewbox
        doc.has_viewbox = True
    # Rendered size defaults to 24 even when a viewBox is present
    doc.width = width if width is not None else doc.width
    doc.height = height if height is not None else doc.height
    if viewbox is None:
        doc.viewbox = (0.0, 0.0, doc.width, doc.height)

    logger.debug(
        "Parsed SVG root: %gx%g, viewBox %s",
        doc.width,
        doc.height,
        " ".join(f"{v:g}" for v in doc.viewbox),
    )
    return doc


def parse_tree(doc: SvgDocument) -> ET.Element | None:
    """Parse the document into an ElementTree root, or None if it is not well-formed XML.

    Default and xlink namespace declarations are injected when the source omits them.
    """
    open_tag = doc.open_tag
    patched = open_tag
    injected = []
    if "" not in doc.namespaces:
        injected.append(f'xmlns="{SVG_NS}"')
    if doc.uses_xlink and "xlink" not in doc.namespaces:
        injected.append(f'xmlns:xlink="{XLINK_NS}"')
    if injected:
        patched = re.sub(r"^<svg\b", "<svg " + " ".join(injected), open_tag, count=1, flags=re.IGNORECASE)

    start, end = doc.open_tag_span
    text = doc.raw_svg[:start] + patched + doc.raw_svg[end:]
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        logger.warning("SVG is not well-formed XML: %s", e)
        return None


def has_embedded_raster(doc: SvgDocument, tree: ET.Element | None) -> bool:
    """Detect <image> elements or data:image references.

    Structural when the tree parsed; falls back to a text heuristic otherwise.
    """
    if tree is None:
        return bool(_RASTER_TEXT_RE.search(doc.raw_svg))

    for elem in tree.iter():
        if not isinstance(elem.tag, str):
            continue
        if local_name(elem.tag) == "image":
            return True
        for key in ("href", f"{{{XLINK_NS}}}href"):
            value = elem.get(key)
            if value and value.strip().lower().startswith("data:image"):
                return True
    return False


def local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string, in source order."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs


def _parse_length(value: str | None) -> float | None:
    """Parse a unitless or px length. Other units and percentages return None."""
    if not value:
        return None
    m = _LENGTH_RE.match(value)
    if not m:
        return None
    length = float(m.group(1))
    return length if length > 0 else None


def _parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = [p for p in _NUMBER_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    if w <= 0 or h <= 0:
        return None
    return (x, y, w, h)
