"""
visit_parents - walk unist-style syntax trees with ancestral information.

Public API:
  - visit_parents(tree, test=None, visitor=None, reverse=None) -> None
  - visit(tree, test=None, visitor=None, reverse=None) -> None
  - CONTINUE, SKIP, EXIT
  - is_match(node, test=None, index=None, parent=None) -> bool
  - convert(test) -> Check

Example:
    ```python
    def visitor(node, ancestors):
        print(node["type"], [a["type"] for a in ancestors])

    visit_parents(tree, "text", visitor)
    ```

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .core.exceptions import (
    ConfigError,
    InvalidArgumentError,
    SelectorParseError,
    VisitParentsError,
)
from .engine import (
    CONTINUE,
    EXIT,
    SKIP,
    Action,
    Check,
    Test,
    VisitResult,
    convert,
    is_match,
    visit,
    visit_parents,
)

__version__ = "1.0.0"

__all__ = [
    "CONTINUE",
    "EXIT",
    "SKIP",
    "Action",
    "Check",
    "Test",
    "VisitResult",
    "convert",
    "is_match",
    "visit",
    "visit_parents",
    "ConfigError",
    "InvalidArgumentError",
    "SelectorParseError",
    "VisitParentsError",
]
