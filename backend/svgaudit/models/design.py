"""Audit result model: the structured output handed to storage and UI layers."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class IssueKind(str, enum.Enum):
    EMPTY = "EMPTY"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


class CanvasSize(BaseModel):
    width: float
    height: float

    model_config = {"frozen": True}

    @property
    def area(self) -> float:
        return self.width * self.height


class RectangleItem(BaseModel):
    """One <rect> found anywhere in the document, in document coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill: str = "#000000"
    issue: IssueKind | None = None

    model_config = {"frozen": True}

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, px: float, py: float) -> bool:
        """Inclusive hit test against the rectangle's edges."""
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


class ParseResult(BaseModel):
    """Immutable snapshot of one document audit.

    Serialized with camelCase keys (``totalElementCount``, ``coverageRatio``);
    ``coverage_ratio`` is a fraction, not a percentage.
    """

    canvas: CanvasSize
    items: tuple[RectangleItem, ...] = Field(default_factory=tuple)
    total_element_count: int = 0
    coverage_ratio: float = 0.0
    issues: tuple[IssueKind, ...] = Field(default_factory=tuple)

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @property
    def rectangle_count(self) -> int:
        return len(self.items)

    def item_at(self, x: float, y: float) -> RectangleItem | None:
        """Return the first rectangle (document order) covering the point."""
        for item in self.items:
            if item.contains(x, y):
                return item
        return None

    def to_record(self) -> dict[str, Any]:
        """Flat record shape persisted by the document store."""
        return {
            "svgWidth": self.canvas.width,
            "svgHeight": self.canvas.height,
            "items": [item.model_dump(mode="json", exclude_none=True) for item in self.items],
            "itemsCount": self.total_element_count,
            "coverageRatio": self.coverage_ratio,
            "issues": [issue.value for issue in self.issues],
        }

    def summary(self) -> str:
        issues = ", ".join(issue.value for issue in self.issues) or "none"
        return (
            f"{self.canvas.width:g}×{self.canvas.height:g} canvas, "
            f"{self.total_element_count} elements ({self.rectangle_count} rectangles), "
            f"coverage {self.coverage_ratio * 100:.2f}%, issues: {issues}"
        )
