"""
Traversal-control actions and visitor result normalization.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """What the walker should do after a visitor returns."""

    CONTINUE = "continue"
    SKIP = "skip"
    EXIT = "exit"


CONTINUE = Action.CONTINUE
SKIP = Action.SKIP
EXIT = Action.EXIT


@dataclass(frozen=True)
class VisitResult:
    """
    Normalized visitor result.

    `index`, when set, is the position in the parent's children at which the
    sibling loop resumes instead of moving on to the next child.
    """

    action: Action = Action.CONTINUE
    index: Optional[int] = None

    @classmethod
    def skip(cls) -> "VisitResult":
        return cls(Action.SKIP)

    @classmethod
    def exit(cls) -> "VisitResult":
        return cls(Action.EXIT)

    @classmethod
    def resume(cls, index: int, action: Action = Action.CONTINUE) -> "VisitResult":
        return cls(action, index)


_CONTINUE_RESULT = VisitResult()


def _is_index(value: Any) -> bool:
    # bool is an int subclass but means CONTINUE/EXIT, never a position.
    return isinstance(value, int) and not isinstance(value, bool)


def _to_action(value: Any) -> Action:
    if isinstance(value, Action):
        return value
    if value is False:
        return Action.EXIT
    return Action.CONTINUE


def to_result(value: Any) -> VisitResult:
    """
    Normalize whatever a visitor returned into a VisitResult.

    Accepted forms:
    - None or CONTINUE: keep going
    - SKIP / EXIT
    - False / True: EXIT / CONTINUE
    - int: CONTINUE and resume the sibling loop at that index
    - (action, index) tuple or list, either part optional
    - VisitResult
    """
    if value is None:
        return _CONTINUE_RESULT
    if isinstance(value, VisitResult):
        return value
    if isinstance(value, (Action, bool)):
        return VisitResult(_to_action(value))
    if _is_index(value):
        return VisitResult(Action.CONTINUE, value)
    if isinstance(value, (tuple, list)):
        action = _to_action(value[0]) if len(value) > 0 else Action.CONTINUE
        index = value[1] if len(value) > 1 and _is_index(value[1]) else None
        return VisitResult(action, index)
    logger.debug(f"Ignoring unrecognized visitor result {value!r}")
    return _CONTINUE_RESULT
