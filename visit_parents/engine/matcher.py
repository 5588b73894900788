"""
Test matcher: decides whether a node passes a test specification.

A test is one of:
- None: matches every node
- str: matches nodes whose ``type`` equals it
- mapping: matches nodes carrying every key with an equal value
- callable ``(node, index, parent) -> bool``
- list/tuple of any of the above (logical OR, nested lists included)

`convert` turns a test into a Check once; the walker then calls the check per
node without re-dispatching on the test's type. Matching never raises for
malformed tests: unsupported values become a check that matches nothing.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .nodes import _MISSING, get_property, node_type

logger = logging.getLogger(__name__)

PredicateFunction = Callable[[Any, Optional[int], Any], Any]
Test = Union[None, str, Mapping, PredicateFunction, list, tuple]


class Check:
    """Base class for converted tests."""

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Anything(Check):
    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        return True


@dataclass(frozen=True)
class Nothing(Check):
    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        return False


@dataclass(frozen=True)
class TypeName(Check):
    """Match by ``type`` discriminant, e.g. TypeName("heading")."""

    name: str

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        return node_type(node) == self.name


@dataclass(frozen=True, eq=False)
class PropertyPattern(Check):
    """Match when every key in `properties` equals the node's property."""

    properties: Mapping

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        for key, expected in self.properties.items():
            actual = get_property(node, key, _MISSING)
            if actual is _MISSING or not _equal(actual, expected):
                return False
        return True


@dataclass(frozen=True)
class Predicate(Check):
    """Match when ``function(node, index, parent)`` is truthy."""

    function: PredicateFunction

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        return bool(self.function(node, index, parent))


@dataclass(frozen=True)
class AnyOf(Check):
    """Match when any of `checks` matches, tried left to right."""

    checks: tuple[Check, ...] = ()

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> bool:
        return any(check(node, index, parent) for check in self.checks)


def _equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    # True == 1 in Python; property values compare strictly.
    if isinstance(actual, bool) is not isinstance(expected, bool):
        return False
    try:
        return bool(actual == expected)
    except (TypeError, ValueError):
        # e.g. array-like values with ambiguous truthiness
        return False


def convert(test: Test) -> Check:
    """
    Convert a test specification into a Check.

    Args:
        test: None, type name, property mapping, predicate, or list of tests

    Returns:
        Check instance callable as ``check(node, index, parent)``
    """
    if test is None:
        return Anything()
    if isinstance(test, Check):
        return test
    if isinstance(test, str):
        return TypeName(test)
    if isinstance(test, Mapping):
        return PropertyPattern(dict(test))
    if isinstance(test, (list, tuple)):
        return AnyOf(tuple(convert(item) for item in test))
    if callable(test):
        return Predicate(test)
    logger.debug(f"Unsupported test {test!r}; it will match nothing")
    return Nothing()


def is_match(
    node: Any, test: Test = None, index: Optional[int] = None, parent: Any = None
) -> bool:
    """Check whether `node` passes `test`."""
    return convert(test)(node, index, parent)
