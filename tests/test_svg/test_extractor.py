"""Tests for path extraction from the element tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from svgborder.svg.extractor import ElementKind, classify, extract_paths
from svgborder.svg.parser import parse_document, parse_tree
from tests.conftest import (
    BAR_CHART_SVG,
    CIRCLE_SVG,
    IMAGE_SVG,
    SMILEY_SVG,
    SQUARE_SVG,
    TEXT_ONLY_SVG,
    TRANSFORMED_SVG,
)


def _paths(svg: str):
    return extract_paths(parse_tree(parse_document(svg)))


def _bbox(points: np.ndarray) -> tuple[float, float, float, float]:
    return (
        float(points[:, 0].min()),
        float(points[:, 1].min()),
        float(points[:, 0].max()),
        float(points[:, 1].max()),
    )


def test_square_path():
    paths = _paths(SQUARE_SVG)
    assert len(paths) == 1
    sp = paths[0]
    assert sp.closed
    assert sp.source_tag == "path"
    assert _bbox(sp.points) == pytest.approx((0.0, 0.0, 24.0, 24.0))


def test_circle_is_sampled():
    paths = _paths(CIRCLE_SVG)
    assert len(paths) == 1
    assert paths[0].closed
    assert paths[0].num_points > 10
    assert _bbox(paths[0].points) == pytest.approx((2.0, 2.0, 22.0, 22.0), abs=0.05)


def test_smiley_mixes_closed_and_open():
    paths = _paths(SMILEY_SVG)
    assert len(paths) == 4
    assert [p.closed for p in paths] == [True, True, True, False]


def test_lines_are_open():
    paths = _paths(BAR_CHART_SVG)
    assert len(paths) == 3
    assert not any(p.closed for p in paths)
    assert _bbox(paths[1].points) == pytest.approx((12.0, 4.0, 12.0, 20.0))


def test_all_shape_kinds():
    svg = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
      <rect x="1" y="1" width="5" height="5"/>
      <circle cx="20" cy="20" r="3"/>
      <ellipse cx="40" cy="40" rx="4" ry="2"/>
      <line x1="0" y1="90" x2="10" y2="90"/>
      <polyline points="50,50 60,50 60,60"/>
      <polygon points="70,70 80,70 75,80"/>
    </svg>"""
    paths = _paths(svg)
    assert [p.source_tag for p in paths] == ["rect", "circle", "ellipse", "line", "polyline", "polygon"]
    assert [p.closed for p in paths] == [True, True, True, False, False, True]


def test_group_transforms_compose():
    paths = _paths(TRANSFORMED_SVG)
    assert len(paths) == 2
    assert _bbox(paths[0].points) == pytest.approx((10.0, 5.0, 14.0, 9.0))
    # translate(10,5) then scale(2): (5,5)-(6,6) -> (20,15)-(22,17)
    assert _bbox(paths[1].points) == pytest.approx((20.0, 15.0, 22.0, 17.0))


def test_compound_path_splits_into_subpaths():
    svg = '<svg><path d="M0 0 L10 0 L10 10 Z M20 20 L30 20 L30 30 Z"/></svg>'
    paths = _paths(svg)
    assert len(paths) == 2
    assert _bbox(paths[1].points) == pytest.approx((20.0, 20.0, 30.0, 30.0))


def test_images_and_text_contribute_nothing():
    assert _paths(TEXT_ONLY_SVG) == []
    image_paths = _paths(IMAGE_SVG)
    # The background rect is vector, the image is not
    assert [p.source_tag for p in image_paths] == ["rect"]


def test_defs_and_hidden_elements_are_skipped():
    svg = """<svg>
      <defs><path d="M0 0 L5 0 L5 5 Z"/></defs>
      <clipPath id="c"><rect width="4" height="4"/></clipPath>
      <path d="M0 0 L5 0 L5 5 Z" display="none"/>
      <g style="opacity: 1; display: none"><rect width="2" height="2"/></g>
      <path d="M10 10 L15 10 L15 15 Z"/>
    </svg>"""
    paths = _paths(svg)
    assert len(paths) == 1
    assert _bbox(paths[0].points) == pytest.approx((10.0, 10.0, 15.0, 15.0))


def test_malformed_elements_are_skipped():
    svg = """<svg>
      <path d="M0 0 L"/>
      <circle cx="5" cy="5"/>
      <rect x="abc" width="3" height="3"/>
      <rect width="0" height="3"/>
      <path d=""/>
      <g transform="rotate(nope)"><rect width="3" height="3"/></g>
      <path d="M10 10 L15 10 L15 15 Z"/>
    </svg>"""
    paths = _paths(svg)
    assert len(paths) == 1


def test_no_tree_yields_nothing():
    assert extract_paths(None) == []


def test_ids_are_sequential():
    paths = _paths(SMILEY_SVG)
    assert [p.id for p in paths] == ["P1", "P2", "P3", "P4"]


@pytest.mark.parametrize(
    "markup, kind",
    [
        ("<path/>", ElementKind.PATH),
        ("<rect/>", ElementKind.PATH),
        ("<g/>", ElementKind.GROUP),
        ("<svg/>", ElementKind.GROUP),
        ("<image/>", ElementKind.IMAGE),
        ("<text/>", ElementKind.OTHER),
        ("<defs/>", ElementKind.OTHER),
        ('<use xmlns="http://www.w3.org/2000/svg"/>', ElementKind.OTHER),
    ],
)
def test_classify(markup, kind):
    assert classify(ET.fromstring(markup)) is kind
