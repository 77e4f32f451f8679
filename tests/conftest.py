"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Minimal un-namespaced document with one closed path
SQUARE_SVG = '<svg width="24" height="24"><path d="M0 0 L24 0 L24 24 L0 24 Z"/></svg>'

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# Filled artwork well inside its canvas
FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

TWO_BOXES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="20" height="20" fill="#111"/>
  <rect x="70" y="70" width="20" height="20" fill="#222"/>
</svg>'''

TRANSFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="40" height="40" viewBox="0 0 40 40">
  <g transform="translate(10,5)">
    <rect x="0" y="0" width="4" height="4"/>
    <g transform="scale(2)">
      <rect x="5" y="5" width="1" height="1"/>
    </g>
  </g>
</svg>'''

TEXT_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="50" height="20" viewBox="0 0 50 20">
  <text x="2" y="15" font-size="12">Hello</text>
</svg>'''

IMAGE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100" height="100" viewBox="0 0 100 100">
  <rect x="0" y="0" width="100" height="100" fill="#eeeeee"/>
  <image x="10" y="10" width="80" height="80" xlink:href="data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="/>
</svg>'''

SCRIPT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <script type="text/javascript">alert("hi")</script>
  <path d="M2 2 L22 2 L22 22 L2 22 Z" fill="#333"/>
  <SCRIPT>
    document.title = "x";
  </SCRIPT>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def filled_rect_svg() -> str:
    return FILLED_RECT_SVG


@pytest.fixture
def image_svg() -> str:
    return IMAGE_SVG
