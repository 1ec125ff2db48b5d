"""Canvas size resolution from the root <svg> attributes.

Priority: width/height attributes, then viewBox for whichever dimension is
still 0/NaN, then the default canvas, but only when *both* are unresolved.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from svgaudit.engine.config import ParserConfig
from svgaudit.models.design import CanvasSize
from svgaudit.utils.numbers import is_unresolved, parse_length, parse_number_list

logger = logging.getLogger(__name__)


def resolve_canvas(
    attributes: Mapping[str, str] | None,
    config: ParserConfig | None = None,
) -> CanvasSize:
    """Resolve the document canvas. Never raises."""
    config = config or ParserConfig()
    attributes = attributes or {}

    width = 0.0
    height = 0.0

    if attributes.get("width"):
        width = parse_length(attributes["width"])
    if attributes.get("height"):
        height = parse_length(attributes["height"])

    view_box = parse_view_box(attributes.get("viewBox"))
    if view_box is not None:
        if is_unresolved(width):
            width = view_box[2]
        if is_unresolved(height):
            height = view_box[3]

    if is_unresolved(width) and is_unresolved(height):
        logger.debug("No usable width/height/viewBox, using default canvas")
        width, height = config.default_width, config.default_height

    # A single unresolved dimension stays 0
    if math.isnan(width):
        width = 0.0
    if math.isnan(height):
        height = 0.0

    return CanvasSize(width=width, height=height)


def parse_view_box(text: str | None) -> tuple[float, float, float, float] | None:
    """Parse ``min-x min-y width height``; anything but four numbers is ignored."""
    values = parse_number_list(text)
    if len(values) != 4:
        return None
    return values[0], values[1], values[2], values[3]
