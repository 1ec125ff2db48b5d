"""SVG structural audit engine."""

from svgaudit.engine.analyzer import analyze_tree, parse_svg, parse_svg_file
from svgaudit.engine.config import ParserConfig
from svgaudit.engine.walker import WalkResult, walk

__all__ = [
    "analyze_tree",
    "parse_svg",
    "parse_svg_file",
    "ParserConfig",
    "WalkResult",
    "walk",
]
