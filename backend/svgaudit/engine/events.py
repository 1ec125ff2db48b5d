"""Traversal events: optional structured reporting alongside module logging."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

ELEMENTS_FOUND = "elements_found"
RECTANGLES_FOUND = "rectangles_found"
DEPTH_CAPPED = "depth_capped"
CANVAS_RESOLVED = "canvas_resolved"


@dataclass(frozen=True)
class ParseEvent:
    name: str
    data: dict[str, Any] = field(default_factory=dict)


EventCallback = Callable[[ParseEvent], None]


def emit(callback: EventCallback | None, name: str, **data: Any) -> None:
    if callback is not None:
        callback(ParseEvent(name=name, data=data))
