"""
Depth-first walker with ancestor tracking.

The walk is pre-order: a node is visited before its children, children in
order (or in reverse order with ``reverse=True``). The visitor steers the walk
through its return value (see `actions.to_result`).

Descent uses an explicit stack of frames instead of recursion, so the depth of
the tree is not bounded by the interpreter's recursion limit. Each frame keeps
the parent node and the cursor into its children; the children sequence is
re-read from the parent on every step so that nodes appended by the visitor are
visited and removed ones are not read out of bounds.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..core.exceptions import InvalidArgumentError
from .actions import Action, VisitResult, to_result
from .matcher import Check, Test, convert
from .nodes import describe_node, is_parent, node_children

logger = logging.getLogger(__name__)

Visitor = Callable[[Any, list], Any]
IndexVisitor = Callable[[Any, Optional[int], Any], Any]
_Call = Callable[[Any, Optional[int], Any, list], Any]


@dataclass
class _Frame:
    parent: Any
    cursor: int


def _resolve_arguments(
    test: Any, visitor: Any, reverse: Any
) -> tuple[Any, Callable, bool]:
    """Support the ``(tree, visitor, reverse)`` form where no test is given."""
    if callable(test) and not callable(visitor):
        reverse = visitor
        visitor = test
        test = None
    if not callable(visitor):
        raise InvalidArgumentError(
            f"Expected a callable visitor, got {type(visitor).__name__}",
            argument="visitor",
        )
    return test, visitor, bool(reverse)


def _annotate(error: BaseException, node: Any, ancestors: list) -> None:
    path = " > ".join(describe_node(n) for n in [*ancestors, node])
    # add_note is available from Python 3.11
    if hasattr(error, "add_note"):
        error.add_note(f"while visiting {path}")


def _walk(
    tree: Any, check: Check, call: _Call, reverse: bool, annotate_errors: bool
) -> None:
    step = -1 if reverse else 1
    stack: list[_Frame] = []
    ancestors: list = []

    def one(node: Any, index: Optional[int], parent: Any) -> VisitResult:
        try:
            if not check(node, index, parent):
                return VisitResult()
            return to_result(call(node, index, parent, ancestors))
        except Exception as e:
            if annotate_errors:
                _annotate(e, node, ancestors)
            raise

    def enter(node: Any, result: VisitResult) -> None:
        if not is_parent(node) or result.action is Action.SKIP:
            return
        start = len(node_children(node)) - 1 if reverse else 0
        stack.append(_Frame(node, start))
        ancestors.append(node)

    logger.debug(f"Starting traversal at {describe_node(tree)} (reverse={reverse})")

    result = one(tree, None, None)
    if result.action is Action.EXIT:
        logger.debug("Traversal exited at root")
        return
    enter(tree, result)

    walked = 1
    while stack:
        frame = stack[-1]
        children = node_children(frame.parent)
        index = frame.cursor
        if children is None or not 0 <= index < len(children):
            stack.pop()
            ancestors.pop()
            continue

        child = children[index]
        if child is None:
            frame.cursor = index + step
            continue

        result = one(child, index, frame.parent)
        walked += 1
        if result.action is Action.EXIT:
            logger.debug(
                f"Traversal exited at {describe_node(child)} after {walked} nodes"
            )
            return

        # The cursor is read again only once the child's subtree is done.
        frame.cursor = result.index if result.index is not None else index + step
        enter(child, result)

    logger.debug(f"Traversal finished, {walked} nodes walked")


def visit_parents(
    tree: Any,
    test: Test = None,
    visitor: Optional[Visitor] = None,
    reverse: Optional[bool] = None,
    *,
    annotate_errors: bool = False,
) -> None:
    """
    Visit every node of `tree` that passes `test`, with its ancestors.

    ``visitor(node, ancestors)`` receives the node and a fresh list of its
    ancestors from the root down to its parent (empty for the root). Its return
    value may be None, CONTINUE, SKIP, EXIT, a resume index, or an
    ``(action, index)`` pair.

    Args:
        tree: Root node
        test: Optional test; may be omitted, i.e. ``visit_parents(tree, visitor)``
        visitor: Callable invoked for each matching node
        reverse: Visit siblings from last to first
        annotate_errors: Attach the active node path to exceptions raised by
            the test or the visitor (the exception itself is re-raised
            unchanged)

    Raises:
        InvalidArgumentError: If no visitor callable can be resolved
    """
    test, visitor, reverse = _resolve_arguments(test, visitor, reverse)

    def call(node: Any, index: Optional[int], parent: Any, ancestors: list) -> Any:
        return visitor(node, list(ancestors))

    _walk(tree, convert(test), call, reverse, annotate_errors)


def visit(
    tree: Any,
    test: Test = None,
    visitor: Optional[IndexVisitor] = None,
    reverse: Optional[bool] = None,
    *,
    annotate_errors: bool = False,
) -> None:
    """
    Like `visit_parents`, but call ``visitor(node, index, parent)``.

    `index` is the node's position in ``parent.children``; both are None for
    the root.
    """
    test, visitor, reverse = _resolve_arguments(test, visitor, reverse)

    def call(node: Any, index: Optional[int], parent: Any, ancestors: list) -> Any:
        return visitor(node, index, parent)

    _walk(tree, convert(test), call, reverse, annotate_errors)
