"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


class SvgDocument(BaseModel):
    """Represents a parsed SVG file.

    ``inner_svg`` is the exact source text between the root open and close tags,
    so it can be re-embedded without re-serialization.
    """

    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 24.0, 24.0)
    has_viewbox: bool = False
    width: float = 24.0
    height: float = 24.0
    root_attributes: dict[str, str] = Field(default_factory=dict)
    namespaces: dict[str, str] = Field(default_factory=dict)
    inner_svg: str = ""
    open_tag_span: tuple[int, int] = (0, 0)
    close_tag_span: tuple[int, int] = (0, 0)
    raw_svg: str = ""
    # Initial value of the fill property when the root declares none
    default_fill: str = "black"

    @property
    def open_tag(self) -> str:
        start, end = self.open_tag_span
        return self.raw_svg[start:end]

    @property
    def self_closing(self) -> bool:
        return self.open_tag.rstrip().endswith("/>")

    @property
    def uses_xlink(self) -> bool:
        return "xlink:" in self.raw_svg

    @property
    def is_identity_viewbox(self) -> bool:
        """True when viewBox user units map 1:1 onto width/height at the origin."""
        x, y, w, h = self.viewbox
        return x == 0 and y == 0 and w == self.width and h == self.height
