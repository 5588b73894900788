"""
Pytest fixtures: sample unist trees.

The main fixture is the mdast tree of the markdown paragraph
``Some _emphasis_, **importance**, and `code`.``

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from dataclasses import dataclass
from typing import Any, List, Optional

import pytest


def text(value: str) -> dict:
    return {"type": "text", "value": value}


def build_paragraph_tree() -> dict:
    """root > paragraph > [text, emphasis[text], text, strong[text], text, inlineCode, text]."""
    return {
        "type": "root",
        "children": [
            {
                "type": "paragraph",
                "children": [
                    text("Some "),
                    {"type": "emphasis", "children": [text("emphasis")]},
                    text(", "),
                    {"type": "strong", "children": [text("importance")]},
                    text(", and "),
                    {"type": "inlineCode", "value": "code"},
                    text("."),
                ],
            }
        ],
    }


# Visit order of build_paragraph_tree(), forward and with reverse=True.
TYPES = [
    "root",
    "paragraph",
    "text",
    "emphasis",
    "text",
    "text",
    "strong",
    "text",
    "text",
    "inlineCode",
    "text",
]

REVERSE_TYPES = [
    "root",
    "paragraph",
    "text",
    "inlineCode",
    "text",
    "strong",
    "text",
    "text",
    "emphasis",
    "text",
    "text",
]


@dataclass
class Element:
    """Attribute-style node, as produced by object-based tree builders."""

    type: str
    children: Optional[List[Any]] = None
    value: Optional[str] = None
    depth: Optional[int] = None


@pytest.fixture
def tree() -> dict:
    """Fresh paragraph tree (tests may mutate it)."""
    return build_paragraph_tree()


@pytest.fixture
def paragraph(tree: dict) -> dict:
    return tree["children"][0]


@pytest.fixture
def element_tree() -> Element:
    """root > [text A, emphasis > [text B], text C] built from dataclasses."""
    return Element(
        type="root",
        children=[
            Element(type="text", value="A"),
            Element(type="emphasis", children=[Element(type="text", value="B")]),
            Element(type="text", value="C"),
        ],
    )


@pytest.fixture
def tree_file(tmp_path, tree):
    """Paragraph tree written to a JSON file."""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(tree), encoding="utf-8")
    return path


@pytest.fixture
def types() -> List[str]:
    return list(TYPES)


@pytest.fixture
def reverse_types() -> List[str]:
    return list(REVERSE_TYPES)
