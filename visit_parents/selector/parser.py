"""
Selector parser (Lark): turns a short selector string into a test.

Supported syntax:
- `TYPE` or `*`
- Property predicates: `heading[depth=1]`, `[value="."]`
- Alternatives separated by commas: `text, inlineCode`

Values can be double-quoted strings (JSON escapes) or barewords; barewords `true`, `false`
and `null` and numeric barewords are converted to the matching Python values.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import json
from typing import Any

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from ..core.exceptions import SelectorParseError
from ..engine.matcher import Test

_GRAMMAR = r"""
?start: selector_list

selector_list: selector ("," selector)*

selector: node_type predicate*
        | predicate+
node_type: STAR | NAME
STAR: "*"

predicate: "[" NAME "=" value "]"
value: STRING | BAREWORD

NAME: /[a-zA-Z_][a-zA-Z0-9_\-]*/
BAREWORD: /[^\]\s,"]+/

%import common.ESCAPED_STRING -> STRING
%import common.WS_INLINE -> WS
%ignore WS
"""


_parser = Lark(_GRAMMAR, parser="lalr", start="start")

_KEYWORDS = {"true": True, "false": False, "null": None}


def _bareword_value(raw: str) -> Any:
    if raw in _KEYWORDS:
        return _KEYWORDS[raw]
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


class _ToTest(Transformer):
    def NAME(self, t: Token) -> str:  # noqa: N802
        return str(t)

    def STAR(self, _t: Token) -> str:  # noqa: N802
        return "*"

    def node_type(self, items: list[Any]) -> str:
        return str(items[0])

    def value(self, items: list[Any]) -> Any:
        tok = items[0]
        raw = str(tok)
        if tok.type == "STRING":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise SelectorParseError(f"Invalid string value {raw}: {e}") from e
        return _bareword_value(raw)

    def predicate(self, items: list[Any]) -> tuple[str, Any]:
        return (str(items[0]), items[1])

    def selector(self, items: list[Any]) -> Test:
        node_type = "*"
        properties: dict[str, Any] = {}
        for it in items:
            if isinstance(it, tuple):
                key, val = it
                properties[key] = val
            else:
                node_type = it

        if not properties:
            return None if node_type == "*" else node_type
        if node_type != "*":
            properties = {"type": node_type, **properties}
        return properties

    def selector_list(self, items: list[Any]) -> Test:
        if len(items) == 1:
            return items[0]
        return list(items)


def parse_test(selector: str) -> Test:
    """
    Parse a selector into a test usable with `visit_parents`.

    Raises:
        SelectorParseError
    """
    try:
        tree = _parser.parse(selector)
    except UnexpectedInput as e:
        raise SelectorParseError(f"Invalid selector: {e}", selector=selector) from e
    try:
        return _ToTest().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorParseError):
            e.orig_exc.selector = selector
            raise e.orig_exc from e
        raise
