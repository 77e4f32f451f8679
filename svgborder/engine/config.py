"""Pipeline configuration: geometry tolerances and output constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls sampling, offsetting and output formatting."""

    # Padding added on every side of the fitted canvas so anti-aliased
    # ring edges are never clipped
    safety_margin: float = 2.0

    # Stroke width of the rendered outline ring
    ring_stroke_width: float = 2.0

    # Segments per quarter circle for round joins/caps
    quad_segs: int = 16

    # Curve sampling
    curve_samples_min: int = 8
    curve_samples_max: int = 256
    sample_spacing: float = 0.5  # user units between samples along curves

    # Geometry with area below this is treated as degenerate
    min_area: float = 1e-9

    # Decimal places for coordinates written to output SVG
    precision: int = 3

    # Raise typed errors instead of returning the tolerant fallback value
    strict: bool = False
