"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from svgaudit.models.design import CanvasSize


# Sample SVGs

OUT_OF_BOUNDS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect x="90" y="90" width="20" height="20" fill="#f00"/>
</svg>'''

CIRCLE_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <circle cx="50" cy="50" r="20"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <title>Nothing here</title>
</svg>'''

NO_DIMENSIONS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="10" width="50" height="50"/>
</svg>'''

VIEWBOX_CONFLICT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 50 50">
  <rect x="0" y="0" width="100" height="50"/>
</svg>'''

# 10 primitives, 3 rects (root, group, sub-document inside the group).
# The <svg> directly under the root is not entered.
MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="200" height="100" viewBox="0 0 50 50">
  <!-- comment -->
  <rect x="0" y="0" width="100" height="50" fill="#4ECDC4"/>
  <circle cx="150" cy="50" r="20"/>
  <path d="M0 0 L10 10"/>
  <text x="10" y="90">Label</text>
  <g id="layer1">
    <rect x="100" y="50" width="50" height="50"/>
    <line x1="0" y1="0" x2="10" y2="10"/>
    <g>
      <ellipse cx="20" cy="20" rx="5" ry="3"/>
      <use xlink:href="#a"/>
    </g>
    <svg x="150" y="0" width="10" height="10">
      <rect x="10" y="10" width="20" height="20" fill="red"/>
      <polygon points="0,0 5,5 0,5"/>
    </svg>
  </g>
  <svg width="10" height="10"><rect width="5" height="5"/></svg>
</svg>'''


def nested_groups(levels: int) -> dict[str, Any]:
    """Tree of ``levels`` groups nested in a chain, one circle per node."""
    root: dict[str, Any] = {"$": {"width": "100", "height": "100"}, "circle": [{}]}
    node = root
    for _ in range(levels):
        child: dict[str, Any] = {"circle": [{}]}
        node["g"] = [child]
        node = child
    return root


@pytest.fixture
def canvas() -> CanvasSize:
    return CanvasSize(width=100, height=100)


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG


@pytest.fixture
def out_of_bounds_svg() -> str:
    return OUT_OF_BOUNDS_SVG
