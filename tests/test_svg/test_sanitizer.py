"""Tests for script stripping."""

import pytest

from svgborder.svg.sanitizer import sanitize
from tests.conftest import SCRIPT_SVG, SQUARE_SVG


def test_removes_script_elements():
    out = sanitize(SCRIPT_SVG)
    assert "<script" not in out.lower()
    assert "alert" not in out
    assert "document.title" not in out
    assert '<path d="M2 2 L22 2 L22 22 L2 22 Z" fill="#333"/>' in out


def test_leaves_clean_svg_untouched():
    assert sanitize(SQUARE_SVG) == SQUARE_SVG


def test_self_closing_script():
    out = sanitize('<svg><script href="evil.js"/><path d="M0 0 L1 1"/></svg>')
    assert out == '<svg><path d="M0 0 L1 1"/></svg>'


def test_unterminated_script_is_neutralized():
    out = sanitize("<svg><script>alert(1)<path d='M0 0'/></svg>")
    assert "<script" not in out.lower()


def test_nested_reassembly_is_removed():
    out = sanitize("<svg><scr<script></script>ipt>alert(1)</script></svg>")
    assert "<script" not in out.lower()


@pytest.mark.parametrize("value", [None, 42, b"<svg/>", ["<svg/>"]])
def test_non_text_input_yields_empty(value):
    assert sanitize(value) == ""


@pytest.mark.parametrize(
    "text",
    [
        SCRIPT_SVG,
        SQUARE_SVG,
        "<svg><script>a</script><script>b</script></svg>",
        "<svg><scr<script></script>ipt>x</script></svg>",
        "< script>x</script>",
        "",
    ],
)
def test_idempotent(text):
    once = sanitize(text)
    assert sanitize(once) == once
    assert "<script" not in once.lower()
