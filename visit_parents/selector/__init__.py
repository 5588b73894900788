"""
Selector strings for tests, e.g. ``heading[depth=1], paragraph``.

Public API:
  - parse_test(selector: str) -> Test
  - SelectorParseError

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from ..core.exceptions import SelectorParseError
from .parser import parse_test

__all__ = [
    "SelectorParseError",
    "parse_test",
]
