"""Lark-based value tokenizer: turns a CSS value string into a node forest."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssgradient.errors import ParseError
from cssgradient.model.value import Node, NodeKind

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a list of top-level Nodes."""

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)

    def function(self, items: list[object]) -> Node:
        name = ""
        children = items
        if items and isinstance(items[0], Token) and items[0].type == "FUNCTION_NAME":
            name = str(items[0])
            children = items[1:]
        return Node(NodeKind.FUNCTION, name, tuple(children))  # type: ignore[arg-type]

    def word(self, items: list[Token]) -> Node:
        return Node(NodeKind.WORD, str(items[0]))

    def string(self, items: list[Token]) -> Node:
        return Node(NodeKind.STRING, str(items[0]))

    def divider(self, items: list[Token]) -> Node:
        return Node(NodeKind.DIVIDER, ",")

    def space(self, items: list[Token]) -> Node:
        return Node(NodeKind.SPACE, str(items[0]))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def tokenize(text: str) -> list[Node]:
    """Split *text* into top-level nodes; function arguments nest inside."""
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), source=text, line=line, column=column) from e
    nodes = ValueTransformer().transform(tree)
    logger.debug("tokenized %d top-level node(s) from %r", len(nodes), text)
    return nodes


def stringify(node: Node) -> str:
    """Reproduce the source text of *node*, nested arguments included."""
    if node.kind is NodeKind.FUNCTION:
        inner = "".join(stringify(child) for child in node.nodes)
        return f"{node.value}({inner})"
    return node.value
