"""Tests for the raster fallback frame."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgborder.engine.config import PipelineConfig
from svgborder.engine.fallback import CONTENT_GROUP_ID, FRAME_GROUP_ID, apply_raster_border, framed_viewbox
from svgborder.errors import FallbackFailure
from svgborder.models.border import BorderSpec
from svgborder.models.svg_document import SVG_NS, SvgDocument
from svgborder.svg.parser import parse_document
from tests.conftest import IMAGE_SVG, TEXT_ONLY_SVG

NS = {"svg": SVG_NS}


def test_canvas_grows_by_border_on_every_side():
    out = apply_raster_border(parse_document(IMAGE_SVG), BorderSpec(width=5, color="#00f"))
    root = ET.fromstring(out)
    assert root.get("width") == "110"
    assert root.get("height") == "110"
    assert root.get("viewBox") == "-5 -5 110 110"


def test_frame_rect_geometry():
    out = apply_raster_border(parse_document(IMAGE_SVG), BorderSpec(width=5, color="#00f"))
    rect = ET.fromstring(out).find(f"svg:g[@id='{FRAME_GROUP_ID}']/svg:rect", NS)
    assert rect.get("x") == "-2.5"
    assert rect.get("y") == "-2.5"
    assert rect.get("width") == "105"
    assert rect.get("height") == "105"
    assert rect.get("rx") == "5"
    assert rect.get("fill") == "none"
    assert rect.get("stroke") == "#00f"
    assert rect.get("stroke-width") == "5"


def test_content_is_kept_verbatim():
    doc = parse_document(IMAGE_SVG)
    out = apply_raster_border(doc, BorderSpec(width=5))
    assert f'<g id="{CONTENT_GROUP_ID}">{doc.inner_svg}</g>' in out
    assert 'xlink:href="data:image/png;base64,' in out


def test_frame_is_drawn_beneath_content():
    root = ET.fromstring(apply_raster_border(parse_document(TEXT_ONLY_SVG), BorderSpec(width=4)))
    assert [child.get("id") for child in root] == [FRAME_GROUP_ID, CONTENT_GROUP_ID]


def test_missing_namespaces_are_added():
    svg = '<svg width="10" height="10"><use xlink:href="#a"/></svg>'
    out = apply_raster_border(parse_document(svg), BorderSpec(width=2))
    assert f'xmlns="{SVG_NS}"' in out
    assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in out
    ET.fromstring(out)


def test_self_closing_root():
    out = apply_raster_border(parse_document('<svg width="10" height="10"/>'), BorderSpec(width=2))
    root = ET.fromstring(out)
    assert root.get("width") == "14"
    assert len(root) == 2


def test_prolog_is_preserved():
    svg = '<?xml version="1.0"?>\n<svg width="10" height="10"><g/></svg>\n'
    out = apply_raster_border(parse_document(svg), BorderSpec(width=2))
    assert out.startswith('<?xml version="1.0"?>\n<svg')
    assert out.endswith("</svg>\n")


def test_framed_viewbox():
    doc = parse_document('<svg viewBox="10 20 30 40"></svg>')
    assert framed_viewbox(doc, 3) == (7, 17, 36, 46)


def test_broken_document_returns_original():
    doc = SvgDocument(raw_svg="<svg>")
    assert apply_raster_border(doc, BorderSpec(width=2)) == "<svg>"


def test_broken_document_raises_in_strict_mode():
    doc = SvgDocument(raw_svg="<svg>")
    with pytest.raises(FallbackFailure):
        apply_raster_border(doc, BorderSpec(width=2), PipelineConfig(strict=True))
