"""
Visitor engine: test matching, action normalization and the walker.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .actions import CONTINUE, EXIT, SKIP, Action, VisitResult, to_result
from .matcher import (
    AnyOf,
    Anything,
    Check,
    Nothing,
    Predicate,
    PropertyPattern,
    Test,
    TypeName,
    convert,
    is_match,
)
from .nodes import describe_node, get_property, is_parent, node_children, node_type
from .walker import visit, visit_parents

__all__ = [
    "CONTINUE",
    "EXIT",
    "SKIP",
    "Action",
    "VisitResult",
    "to_result",
    "AnyOf",
    "Anything",
    "Check",
    "Nothing",
    "Predicate",
    "PropertyPattern",
    "Test",
    "TypeName",
    "convert",
    "is_match",
    "describe_node",
    "get_property",
    "is_parent",
    "node_children",
    "node_type",
    "visit",
    "visit_parents",
]
