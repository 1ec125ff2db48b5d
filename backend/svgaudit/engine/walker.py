"""Element walker: counts primitives and collects rectangles across the tree.

The walk is a pure function of (node, canvas) returning a WalkResult;
results of separate walks combine with WalkResult.merge. Nodes are visited
from an explicit stack, so nesting depth never touches the interpreter
recursion limit. The identity set that stops a node from being visited twice
matters only for hand-built trees with shared or cyclic nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from svgaudit.engine import events
from svgaudit.engine.config import ParserConfig
from svgaudit.engine.events import EventCallback
from svgaudit.engine.rectangles import extract_rectangle
from svgaudit.models.design import CanvasSize, RectangleItem

logger = logging.getLogger(__name__)

GROUP_TAG = "g"
SVG_TAG = "svg"
RECT_TAG = "rect"


@dataclass
class WalkResult:
    """Aggregates produced by one (sub)traversal."""

    element_count: int = 0
    items: list[RectangleItem] = field(default_factory=list)
    depth_capped: bool = False
    nodes_visited: int = 0

    def merge(self, other: WalkResult) -> None:
        self.element_count += other.element_count
        self.items.extend(other.items)
        self.depth_capped = self.depth_capped or other.depth_capped
        self.nodes_visited += other.nodes_visited


def walk(
    node: Any,
    canvas: CanvasSize,
    depth: int = 0,
    *,
    config: ParserConfig | None = None,
    on_event: EventCallback | None = None,
) -> WalkResult:
    """Walk ``node`` and everything below it.

    ``depth`` is the depth of ``node`` itself; nested <svg> children are
    only entered below the root (depth > 0), so a builder that repeats the
    root under itself does not get it counted twice.
    """
    config = config or ParserConfig()
    result = _visit(node, canvas, depth, config)

    if result.depth_capped:
        logger.warning("Max recursion depth %d reached, stopping descent", config.max_depth)
        events.emit(on_event, events.DEPTH_CAPPED, max_depth=config.max_depth)
    events.emit(on_event, events.ELEMENTS_FOUND, count=result.element_count)
    events.emit(on_event, events.RECTANGLES_FOUND, count=len(result.items))
    return result


def children(node: Mapping[str, Any], tag: str) -> list[Any]:
    """Child nodes under ``tag``; a single node and a list of siblings both work."""
    value = node.get(tag)
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _visit(node: Any, canvas: CanvasSize, depth: int, config: ParserConfig) -> WalkResult:
    """Pre-order walk on an explicit stack: a node's rects, then its groups, then nested svgs."""
    result = WalkResult()
    seen: set[int] = set()
    stack: list[tuple[Any, int]] = [(node, depth)]

    while stack:
        current, level = stack.pop()
        if not isinstance(current, Mapping):
            continue
        if level > config.max_depth:
            result.depth_capped = True
            continue
        if id(current) in seen:
            continue
        seen.add(id(current))
        result.nodes_visited += 1

        for tag in config.primitive_tags:
            result.element_count += len(children(current, tag))

        for rect in children(current, RECT_TAG):
            result.items.append(extract_rectangle(rect, canvas, config))

        below = list(children(current, GROUP_TAG))
        if level > 0:
            below.extend(children(current, SVG_TAG))
        # Reversed so the first child is popped first
        stack.extend((child, level + 1) for child in reversed(below))

    return result
