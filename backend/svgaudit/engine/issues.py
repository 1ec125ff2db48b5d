"""Document-level issue detection."""

from __future__ import annotations

from collections.abc import Sequence

from svgaudit.models.design import IssueKind, RectangleItem


def detect_issues(element_count: int, items: Sequence[RectangleItem]) -> list[IssueKind]:
    """EMPTY first, OUT_OF_BOUNDS second; each kind at most once.

    EMPTY means no primitives at all, hence no rectangles, so the two never
    co-occur in practice. They are still evaluated independently.
    """
    issues: list[IssueKind] = []
    if element_count == 0:
        issues.append(IssueKind.EMPTY)
    if any(item.issue is IssueKind.OUT_OF_BOUNDS for item in items):
        issues.append(IssueKind.OUT_OF_BOUNDS)
    return issues
