"""Audit orchestrator: markup/tree in, ParseResult out.

    parse_svg_file(path)  → load_document → parse_svg
    parse_svg(markup)     → build_tree → analyze_tree
    analyze_tree(tree)    → resolve_canvas → walk → detect_issues + coverage_ratio

Either a complete ParseResult comes back or an SvgAuditError is raised;
nothing is retried and no partial result escapes.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping
from typing import Any

from svgaudit.engine import events
from svgaudit.engine.config import ParserConfig
from svgaudit.engine.coverage import coverage_ratio
from svgaudit.engine.dimensions import resolve_canvas
from svgaudit.engine.events import EventCallback
from svgaudit.engine.issues import detect_issues
from svgaudit.engine.walker import SVG_TAG, walk
from svgaudit.errors import ExtractionFailure, MalformedDocument, SvgAuditError
from svgaudit.models.design import ParseResult
from svgaudit.svg.loader import load_document
from svgaudit.svg.tree import ATTRS_KEY, TreeBuilder, build_tree

logger = logging.getLogger(__name__)


def analyze_tree(
    tree: Mapping[str, Any],
    *,
    config: ParserConfig | None = None,
    on_event: EventCallback | None = None,
    source: str = "<string>",
) -> ParseResult:
    """Audit an already-built tree rooted at the <svg> node."""
    config = config or ParserConfig()
    if not isinstance(tree, Mapping):
        raise MalformedDocument(f"expected a tree node, got {type(tree).__name__}", source=source)

    try:
        root = root_node(tree)
        canvas = resolve_canvas(root.get(ATTRS_KEY), config)
        logger.debug("SVG dimensions: %g x %g", canvas.width, canvas.height)
        events.emit(on_event, events.CANVAS_RESOLVED, width=canvas.width, height=canvas.height)

        walked = walk(root, canvas, 0, config=config, on_event=on_event)
        issues = detect_issues(walked.element_count, walked.items)
        ratio = coverage_ratio(walked.items, canvas)

        return ParseResult(
            canvas=canvas,
            items=tuple(walked.items),
            total_element_count=walked.element_count,
            coverage_ratio=ratio,
            issues=tuple(issues),
        )
    except SvgAuditError:
        raise
    except Exception as e:
        logger.exception("Error during extraction of %s", source)
        raise ExtractionFailure(f"extraction failed: {e}", source=source) from e


def parse_svg(
    markup: str | bytes,
    *,
    config: ParserConfig | None = None,
    builder: TreeBuilder = build_tree,
    on_event: EventCallback | None = None,
    source: str = "<string>",
) -> ParseResult:
    """Parse raw SVG markup and audit it."""
    start = time.perf_counter()

    try:
        tree = builder(markup, source=source)
    except SvgAuditError:
        raise
    except Exception as e:
        raise MalformedDocument(f"tree builder failed: {e}", source=source) from e

    result = analyze_tree(tree, config=config, on_event=on_event, source=source)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Parsed %s in %.1fms: %d elements, %d rectangles, coverage %.2f%%",
        source,
        elapsed,
        result.total_element_count,
        result.rectangle_count,
        result.coverage_ratio * 100,
    )
    return result


def parse_svg_file(
    path: str | os.PathLike[str],
    *,
    config: ParserConfig | None = None,
    builder: TreeBuilder = build_tree,
    on_event: EventCallback | None = None,
) -> ParseResult:
    """Load a document from disk and audit it."""
    data = load_document(path)
    return parse_svg(data, config=config, builder=builder, on_event=on_event, source=str(path))


def root_node(tree: Mapping[str, Any]) -> Mapping[str, Any]:
    """Accept both the root <svg> node and a ``{"svg": root}`` wrapper.

    Only a single mapping under ``svg`` counts as a wrapper. build_tree always
    stores children in lists, so a real root holding one nested <svg> is
    never mistaken for one.
    """
    if ATTRS_KEY not in tree and set(tree) == {SVG_TAG} and isinstance(tree[SVG_TAG], Mapping):
        return tree[SVG_TAG]
    return tree
