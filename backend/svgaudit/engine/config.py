"""Parser configuration: traversal limits and canvas fallbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgaudit.config import Settings

# Drawing primitives counted toward the element total. Only rect is inspected.
PRIMITIVE_TAGS: tuple[str, ...] = (
    "rect",
    "path",
    "circle",
    "ellipse",
    "polygon",
    "polyline",
    "line",
    "text",
    "use",
    "image",
)


@dataclass(frozen=True)
class ParserConfig:
    """Controls traversal depth and the fallback canvas."""

    # Nodes deeper than this are not visited
    max_depth: int = 100

    # Canvas used when neither width/height nor viewBox resolve anything
    default_width: float = 100.0
    default_height: float = 100.0

    # Fill reported for rects without a fill attribute
    default_fill: str = "#000000"

    primitive_tags: tuple[str, ...] = field(default=PRIMITIVE_TAGS)

    @classmethod
    def from_settings(cls, settings: Settings) -> ParserConfig:
        return cls(
            max_depth=settings.svgaudit_max_depth,
            default_width=settings.svgaudit_default_canvas_size,
            default_height=settings.svgaudit_default_canvas_size,
        )
