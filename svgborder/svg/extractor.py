"""Path extraction: walk the element tree and collect every path-like leaf.

Elements are classified into a closed set of kinds; only PATH leaves produce
geometry and only GROUP containers are descended. Shapes are converted to path
data with svgpathtools, sampled into points and mapped through the accumulated
transform so every PathGeometry is in root user space.
"""

from __future__ import annotations

import enum
import logging
import math
import re
import xml.etree.ElementTree as ET

import numpy as np
import svgpathtools
from svgpathtools import Line, parse_path
from svgpathtools.parser import parse_transform
from svgpathtools.svg_to_paths import ellipse2pathd, line2pathd, polyline2pathd, rect2pathd

from svgborder.engine.config import PipelineConfig
from svgborder.engine.context import PathGeometry
from svgborder.svg.parser import local_name
from svgborder.utils.geometry import apply_affine

logger = logging.getLogger(__name__)

_STYLE_ATTRS = ("fill", "stroke", "stroke-width", "fill-rule", "opacity", "style", "class")
_DISPLAY_NONE_RE = re.compile(r"display\s*:\s*none", re.IGNORECASE)


class ElementKind(enum.Enum):
    PATH = "path"
    GROUP = "group"
    IMAGE = "image"
    OTHER = "other"


_KINDS: dict[str, ElementKind] = {
    "path": ElementKind.PATH,
    "rect": ElementKind.PATH,
    "circle": ElementKind.PATH,
    "ellipse": ElementKind.PATH,
    "line": ElementKind.PATH,
    "polyline": ElementKind.PATH,
    "polygon": ElementKind.PATH,
    "svg": ElementKind.GROUP,
    "g": ElementKind.GROUP,
    "a": ElementKind.GROUP,
    "switch": ElementKind.GROUP,
    "image": ElementKind.IMAGE,
}


def classify(elem: ET.Element) -> ElementKind:
    if not isinstance(elem.tag, str):
        # Comments and processing instructions
        return ElementKind.OTHER
    return _KINDS.get(local_name(elem.tag), ElementKind.OTHER)


def extract_paths(tree: ET.Element | None, config: PipelineConfig | None = None) -> list[PathGeometry]:
    """Collect all vector paths below the root, in document order.

    Returns an empty list when there are none; never raises on malformed elements.
    """
    if tree is None:
        return []
    config = config or PipelineConfig()

    paths: list[PathGeometry] = []
    # Root transform is ignored: the root viewBox defines user space
    for child in tree:
        _visit(child, np.identity(3), paths, config)

    logger.info("Extracted %d sub-paths", len(paths))
    return paths


def _visit(
    elem: ET.Element,
    parent_tf: np.ndarray,
    out: list[PathGeometry],
    config: PipelineConfig,
) -> None:
    kind = classify(elem)
    if kind in (ElementKind.IMAGE, ElementKind.OTHER) or _is_hidden(elem):
        return

    try:
        tf = parent_tf @ _element_transform(elem, kind)
    except Exception as e:
        logger.debug("Skipping <%s> with bad transform: %s", local_name(elem.tag), e)
        return

    if kind is ElementKind.GROUP:
        for child in elem:
            _visit(child, tf, out, config)
        return

    tag = local_name(elem.tag)
    try:
        d = _element_to_d(elem, tag)
        if not d:
            return
        path = parse_path(d)
    except Exception as e:
        logger.debug("Skipping malformed <%s>: %s", tag, e)
        return

    attrs = {k: v for k, v in elem.attrib.items() if k in _STYLE_ATTRS}
    for sp in _split_subpaths(path):
        try:
            points = _sample_subpath(sp, config)
            closed = sp.isclosed() or tag in ("rect", "circle", "ellipse", "polygon")
        except Exception as e:
            logger.debug("Skipping unsamplable sub-path of <%s>: %s", tag, e)
            continue
        if len(points) < 2:
            continue
        out.append(
            PathGeometry(
                id=f"P{len(out) + 1}",
                points=apply_affine(points, tf),
                closed=closed,
                source_tag=tag,
                attributes=attrs,
            )
        )


def _element_transform(elem: ET.Element, kind: ElementKind) -> np.ndarray:
    tf = np.identity(3)
    if kind is ElementKind.GROUP and local_name(elem.tag) == "svg":
        # Nested viewport: honour its position only
        tf[0, 2] = float(elem.get("x", "0") or 0)
        tf[1, 2] = float(elem.get("y", "0") or 0)
    transform = elem.get("transform")
    if transform:
        tf = tf @ parse_transform(transform)
    return tf


def _element_to_d(elem: ET.Element, tag: str) -> str:
    """Convert a shape element to path data with svgpathtools' converters.

    rect/circle/ellipse converters take attribute dicts; line/polyline take the element.
    """
    attrs = dict(elem.attrib)
    if tag == "path":
        return (attrs.get("d") or "").strip()
    if tag in ("circle", "ellipse"):
        return ellipse2pathd(attrs)
    if tag == "rect":
        if float(attrs.get("width", 0)) <= 0 or float(attrs.get("height", 0)) <= 0:
            return ""
        return rect2pathd(attrs)
    if tag == "line":
        return line2pathd(elem)
    if tag in ("polyline", "polygon"):
        points = (attrs.get("points") or "").strip()
        if not points:
            return ""
        return polyline2pathd(elem, is_polygon=(tag == "polygon"))
    return ""


def _split_subpaths(path: svgpathtools.Path) -> list[svgpathtools.Path]:
    """Split compound SVG path at moveto discontinuities."""
    subpaths = []
    current: list = []
    for seg in path:
        if current and abs(seg.start - current[-1].end) > 1e-6:
            subpaths.append(svgpathtools.Path(*current))
            current = []
        current.append(seg)
    if current:
        subpaths.append(svgpathtools.Path(*current))
    return subpaths


def _sample_subpath(path: svgpathtools.Path, config: PipelineConfig) -> np.ndarray:
    """Sample a continuous sub-path: lines by their start point, curves by arc length."""
    pts: list[complex] = []
    for seg in path:
        if isinstance(seg, Line):
            pts.append(seg.start)
            continue
        length = seg.length()
        if not math.isfinite(length) or length < 1e-12:
            pts.append(seg.start)
            continue
        n = int(math.ceil(length / config.sample_spacing))
        n = max(config.curve_samples_min, min(config.curve_samples_max, n))
        pts.extend(seg.point(t) for t in np.linspace(0.0, 1.0, n, endpoint=False))
    if len(path):
        pts.append(path[-1].end)
    return np.array([[p.real, p.imag] for p in pts], dtype=np.float64).reshape(-1, 2)


def _is_hidden(elem: ET.Element) -> bool:
    if (elem.get("display") or "").strip() == "none":
        return True
    return bool(_DISPLAY_NONE_RE.search(elem.get("style") or ""))
