"""Rectangle area coverage against the canvas."""

from __future__ import annotations

from collections.abc import Sequence

from svgaudit.models.design import CanvasSize, RectangleItem


def coverage_ratio(items: Sequence[RectangleItem], canvas: CanvasSize) -> float:
    """Summed rect area / canvas area. Overlaps are not merged, so this can exceed 1."""
    canvas_area = canvas.area
    if canvas_area <= 0:
        return 0.0
    # Negative rect sizes are invalid SVG; they never drive the ratio below 0
    return max(0.0, sum(item.area for item in items) / canvas_area)
