"""
Node accessors.

Nodes are either mappings (unist JSON loaded into dicts) or arbitrary objects
exposing ``type`` and ``children`` attributes. The engine only ever reads
nodes through these helpers.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Sequence

_MISSING = object()


def get_property(node: Any, key: str, default: Any = None) -> Any:
    """Read a property from a mapping node (by key) or an object node (by attribute)."""
    if isinstance(node, Mapping):
        return node.get(key, default)
    return getattr(node, key, default)


def node_type(node: Any) -> Optional[str]:
    """Return the ``type`` discriminant of a node, or None if it has none."""
    return get_property(node, "type")


def node_children(node: Any) -> Optional[Sequence[Any]]:
    """
    Return the live children sequence of a parent node.

    Returns None for leaf nodes. An empty list is returned as is: a node with
    an empty ``children`` field is still a parent node.
    """
    return get_property(node, "children")


def is_parent(node: Any) -> bool:
    return node_children(node) is not None


def describe_node(node: Any) -> str:
    """Short human-readable label, e.g. ``heading`` or ``text("Some ")``."""
    kind = node_type(node) or type(node).__name__
    for key in ("name", "value"):
        value = get_property(node, key)
        if isinstance(value, str):
            if len(value) > 20:
                value = value[:17] + "..."
            return f"{kind}({value!r})"
    return kind
