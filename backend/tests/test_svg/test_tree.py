"""Tests for the markup → tree builder."""

from __future__ import annotations

import sys

import pytest

from svgaudit.errors import MalformedDocument
from svgaudit.svg.tree import build_tree, local_name
from tests.conftest import MIXED_SVG, OUT_OF_BOUNDS_SVG


def test_root_is_svg_node():
    tree = build_tree(OUT_OF_BOUNDS_SVG)
    assert tree["$"] == {"width": "100", "height": "100"}
    assert tree["rect"] == [{"$": {"x": "90", "y": "90", "width": "20", "height": "20", "fill": "#f00"}}]


def test_children_are_always_lists():
    tree = build_tree(MIXED_SVG)
    assert len(tree["rect"]) == 1
    assert len(tree["g"]) == 1
    group = tree["g"][0]
    assert group["$"] == {"id": "layer1"}
    assert len(group["g"]) == 1
    assert len(group["svg"]) == 1


def test_namespaces_stripped():
    tree = build_tree(MIXED_SVG)
    use = tree["g"][0]["g"][0]["use"][0]
    assert use["$"] == {"href": "#a"}
    assert not any(key.startswith("{") for key in tree)


def test_text_content_and_comments():
    tree = build_tree(MIXED_SVG)
    assert tree["text"][0]["_"] == "Label"
    assert "_" not in tree  # whitespace-only text is dropped


def test_element_without_attributes():
    tree = build_tree("<svg><g><circle/></g></svg>")
    assert "$" not in tree
    assert tree["g"] == [{"circle": [{}]}]


def test_bytes_input():
    tree = build_tree(b'<?xml version="1.0" encoding="UTF-8"?><svg width="5"/>')
    assert tree["$"] == {"width": "5"}


@pytest.mark.parametrize("markup", ["<svg><rect></svg>", "", "not xml at all"])
def test_malformed_markup(markup):
    with pytest.raises(MalformedDocument) as exc_info:
        build_tree(markup, source="broken.svg")
    assert exc_info.value.source == "broken.svg"
    assert exc_info.value.__cause__ is not None


def test_local_name():
    assert local_name("{http://www.w3.org/2000/svg}rect") == "rect"
    assert local_name("rect") == "rect"


def test_nesting_deeper_than_recursion_limit():
    levels = sys.getrecursionlimit() + 500
    tree = build_tree("<svg>" + "<g>" * levels + "<rect/>" + "</g>" * levels + "</svg>")
    node = tree
    for _ in range(levels):
        (node,) = node["g"]
    assert node == {"rect": [{}]}


def test_sibling_order_preserved():
    tree = build_tree('<svg><rect x="1"/><g/><rect x="2"/><rect x="3"/></svg>')
    assert [r["$"]["x"] for r in tree["rect"]] == ["1", "2", "3"]
