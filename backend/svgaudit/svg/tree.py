"""SVG markup → generic attributed tree.

Tree shape (children always in lists):

    {"$": {"width": "100", ...},
     "rect": [{"$": {...}}, {"$": {...}}],
     "g": [{"$": {...}, "circle": [...]}],
     "_": "text content"}

Tag and attribute names lose their namespace ("{http://www.w3.org/2000/svg}rect"
→ "rect", "{http://www.w3.org/1999/xlink}href" → "href"). The engine only
depends on the TreeBuilder callable, so any parser producing this shape fits.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Protocol

from svgaudit.errors import MalformedDocument

logger = logging.getLogger(__name__)

ATTRS_KEY = "$"
TEXT_KEY = "_"

Tree = dict[str, Any]


class TreeBuilder(Protocol):
    def __call__(self, markup: str | bytes, source: str = ...) -> Tree: ...


def build_tree(markup: str | bytes, source: str = "<string>") -> Tree:
    """Parse markup and return the root element as a tree node.

    Raises MalformedDocument when the markup is not well-formed XML.
    """
    try:
        root = ET.fromstring(markup)
    except (ET.ParseError, ValueError) as e:
        logger.error("XML parsing error in %s: %s", source, e)
        raise MalformedDocument(f"invalid markup: {e}", source=source) from e

    if local_name(root.tag) != "svg":
        logger.debug("Root element is <%s>, not <svg>", local_name(root.tag))
    return element_to_node(root)


def element_to_node(element: ET.Element) -> Tree:
    """Convert an element and its descendants without recursing per level."""
    root: Tree = {}
    stack: list[tuple[ET.Element, Tree]] = [(element, root)]
    while stack:
        current, node = stack.pop()
        if current.attrib:
            node[ATTRS_KEY] = {local_name(k): v for k, v in current.attrib.items()}

        text = (current.text or "").strip()
        if text:
            node[TEXT_KEY] = text

        for child in current:
            # Comments and processing instructions carry a callable tag
            if not isinstance(child.tag, str):
                continue
            child_node: Tree = {}
            node.setdefault(local_name(child.tag), []).append(child_node)
            stack.append((child, child_node))
    return root


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag
