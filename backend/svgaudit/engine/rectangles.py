"""<rect> geometry + fill extraction, classified against the document canvas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from svgaudit.engine.config import ParserConfig
from svgaudit.models.design import CanvasSize, IssueKind, RectangleItem
from svgaudit.svg.tree import ATTRS_KEY
from svgaudit.utils.numbers import parse_number


def extract_rectangle(
    node: Any,
    canvas: CanvasSize,
    config: ParserConfig | None = None,
) -> RectangleItem:
    """Build a RectangleItem from a rect node. Never raises.

    Bad numeric text coerces to 0; a missing fill becomes the default fill.
    Bounds are checked against the document canvas even for rects inside
    nested groups or sub-documents.
    """
    config = config or ParserConfig()
    attrs = _attributes(node)

    x = parse_number(attrs.get("x"))
    y = parse_number(attrs.get("y"))
    width = parse_number(attrs.get("width"))
    height = parse_number(attrs.get("height"))
    fill = attrs.get("fill") or config.default_fill

    issue = IssueKind.OUT_OF_BOUNDS if is_out_of_bounds(x, y, width, height, canvas) else None
    return RectangleItem(x=x, y=y, width=width, height=height, fill=str(fill), issue=issue)


def is_out_of_bounds(x: float, y: float, width: float, height: float, canvas: CanvasSize) -> bool:
    return x < 0 or y < 0 or x + width > canvas.width or y + height > canvas.height


def _attributes(node: Any) -> Mapping[str, Any]:
    if isinstance(node, Mapping):
        attrs = node.get(ATTRS_KEY)
        if isinstance(attrs, Mapping):
            return attrs
    return {}
