"""Outline pipeline orchestrator: runs the stages and routes failures to the fallback.

    sanitize → parse → extract → (raster or no paths → fallback)
             → unify → offset → ring → fit → compose → sanitize

NoGeometry, OffsetFailure and BooleanOpFailure never reach the caller: they
send the document down the raster fallback, and every trigger is logged and
counted so fallbacks stay observable.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from svgborder.engine.canvas import fit_canvas, viewbox_to_canvas
from svgborder.engine.compositor import compose
from svgborder.engine.config import PipelineConfig
from svgborder.engine.context import Bounds, OutlineContext
from svgborder.engine.fallback import apply_raster_border, framed_viewbox
from svgborder.engine.offset import offset_shape
from svgborder.engine.ring import resolve_ring
from svgborder.engine.unifier import unify_paths
from svgborder.errors import RECOVERABLE, FallbackFailure, InvalidInput, NoGeometry, OutlineError
from svgborder.models.border import DEFAULT_BORDER_COLOR, DEFAULT_BORDER_WIDTH, BorderSpec
from svgborder.svg.extractor import extract_paths
from svgborder.svg.parser import has_embedded_raster, parse_document, parse_tree
from svgborder.svg.sanitizer import sanitize

logger = logging.getLogger(__name__)

STRATEGY_OUTLINE = "outline"
STRATEGY_FALLBACK = "raster_fallback"
STRATEGY_PASSTHROUGH = "passthrough"


@dataclass
class OutlineResult:
    """What one call produced."""

    svg: str
    strategy: str
    fallback_reason: str = ""
    width: float = 0.0
    height: float = 0.0
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    errors: dict[str, str] = field(default_factory=dict)
    processing_time_ms: float = 0.0


class OutlinePipeline:
    """Runs the outline stages on one document per call."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()
        self.fallback_counts: Counter[str] = Counter()

    def run(self, svg_text: Any, border: BorderSpec | None = None) -> OutlineResult:
        """Outline a document. Raises InvalidInput, or FallbackFailure in strict mode."""
        start = time.perf_counter()
        ctx = OutlineContext(border=border or BorderSpec())

        if not isinstance(svg_text, str):
            raise InvalidInput("SVG input must be text", stage="sanitize")
        ctx.svg_raw = self._stage(ctx, "sanitize", lambda: sanitize(svg_text))
        ctx.document = self._stage(ctx, "parse", lambda: parse_document(ctx.svg_raw))
        ctx.tree = self._stage(ctx, "parse_tree", lambda: parse_tree(ctx.document))
        ctx.has_raster = has_embedded_raster(ctx.document, ctx.tree)

        if ctx.has_raster:
            self._fallback(ctx, "embedded_raster")
        else:
            try:
                self._outline(ctx)
            except RECOVERABLE as e:
                ctx.errors[e.stage or e.kind] = str(e)
                self._fallback(ctx, e.kind)
            except Exception as e:
                ctx.errors["outline"] = str(e)
                logger.exception("Unexpected outline error")
                self._fallback(ctx, "unexpected_error")

        ctx.output_svg = sanitize(ctx.output_svg)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Outline complete: strategy=%s paths=%d in %.0fms",
            ctx.strategy,
            ctx.num_paths,
            elapsed,
        )
        return self._result(ctx, elapsed)

    def _outline(self, ctx: OutlineContext) -> None:
        config = self.config
        doc = ctx.document

        ctx.paths = self._stage(ctx, "extract", lambda: extract_paths(ctx.tree, config))
        if not ctx.paths:
            raise NoGeometry("No vector paths found", stage="extract")

        ctx.silhouette = self._stage(ctx, "unify", lambda: unify_paths(ctx.paths))
        if ctx.silhouette.skipped_ids:
            self.fallback_counts["union_operand_skipped"] += len(ctx.silhouette.skipped_ids)

        ctx.offset = self._stage(
            ctx, "offset", lambda: offset_shape(ctx.silhouette, ctx.border.width, config)
        )
        ctx.ring = self._stage(
            ctx, "ring", lambda: resolve_ring(ctx.offset, ctx.silhouette.geometry, config)
        )

        def _fit():
            ring_canvas = viewbox_to_canvas(ctx.ring, doc)
            fit = fit_canvas(Bounds.of(ring_canvas), doc.width, doc.height, config.safety_margin)
            return ring_canvas, fit

        ring_canvas, ctx.fit = self._stage(ctx, "fit", _fit)
        ctx.output_svg = self._stage(
            ctx, "compose", lambda: compose(doc, ring_canvas, ctx.fit, ctx.border, config)
        )
        ctx.strategy = STRATEGY_OUTLINE

    def _fallback(self, ctx: OutlineContext, reason: str) -> None:
        logger.warning("Taking raster fallback: %s", reason)
        self.fallback_counts[reason] += 1
        ctx.fallback_reason = reason
        ctx.output_svg = self._stage(
            ctx, "fallback", lambda: apply_raster_border(ctx.document, ctx.border, self.config)
        )
        if ctx.output_svg == ctx.document.raw_svg:
            self.fallback_counts["fallback_failed"] += 1
            ctx.strategy = STRATEGY_PASSTHROUGH
        else:
            ctx.strategy = STRATEGY_FALLBACK

    def _stage(self, ctx: OutlineContext, name: str, fn: Callable[[], Any]) -> Any:
        t0 = time.perf_counter()
        result = fn()
        elapsed = (time.perf_counter() - t0) * 1000
        ctx.timings_ms[name] = round(elapsed, 2)
        ctx.completed_stages.append(name)
        logger.debug("  %s completed in %.1fms", name, elapsed)
        return result

    def _result(self, ctx: OutlineContext, elapsed: float) -> OutlineResult:
        doc = ctx.document
        if ctx.strategy == STRATEGY_OUTLINE and ctx.fit is not None:
            width, height, viewbox = ctx.fit.width, ctx.fit.height, ctx.fit.viewbox
        elif ctx.strategy == STRATEGY_PASSTHROUGH:
            width, height, viewbox = doc.width, doc.height, doc.viewbox
        else:
            w = ctx.border.width
            width, height = doc.width + 2 * w, doc.height + 2 * w
            viewbox = framed_viewbox(doc, w)
        return OutlineResult(
            svg=ctx.output_svg,
            strategy=ctx.strategy,
            fallback_reason=ctx.fallback_reason,
            width=width,
            height=height,
            viewbox=viewbox,
            errors=dict(ctx.errors),
            processing_time_ms=round(elapsed, 1),
        )


def create_pipeline(config: PipelineConfig | None = None) -> OutlinePipeline:
    """Factory function for creating a pipeline instance."""
    return OutlinePipeline(config=config)


def process(
    svg_input: Any,
    border_width: float = DEFAULT_BORDER_WIDTH,
    border_color: str = DEFAULT_BORDER_COLOR,
    *,
    strict: bool = False,
    pipeline: OutlinePipeline | None = None,
) -> str:
    """Return the outlined SVG as text.

    Tolerant (default): on InvalidInput or a failed fallback, returns the
    sanitized input text, or "" for non-text input. Strict: raises the typed error,
    also when the given ``pipeline`` was built tolerant and passed the input through.
    """
    pipeline = pipeline or OutlinePipeline(PipelineConfig(strict=strict))
    try:
        border = BorderSpec(width=border_width, color=border_color)
        result = pipeline.run(svg_input, border)
        if strict and result.strategy == STRATEGY_PASSTHROUGH:
            raise FallbackFailure(
                f"Raster fallback failed after {result.fallback_reason}", stage="fallback"
            )
        return result.svg
    except OutlineError as e:
        if strict:
            raise
        logger.error("Outline failed (%s): %s", e.kind, e)
        return sanitize(svg_input)
    except ValueError as e:
        # Rejected BorderSpec
        if strict:
            raise InvalidInput(f"Invalid border: {e}", stage="border") from e
        logger.error("Outline failed (invalid border): %s", e)
        return sanitize(svg_input)
