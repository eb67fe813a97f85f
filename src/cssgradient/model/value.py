"""Value model: lexical nodes and dimensioned lengths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Kind of a lexical unit produced by the value tokenizer."""

    WORD = "word"
    STRING = "string"
    FUNCTION = "function"
    DIVIDER = "div"
    SPACE = "space"


@dataclass(frozen=True)
class Node:
    """One lexical unit of a CSS value.

    Attributes:
        kind: What sort of unit this is.
        value: Raw text for words, strings, dividers and spaces; the
            function name for functions (empty for a bare ``( ... )`` group).
        nodes: Child nodes of a function, in source order.
    """

    kind: NodeKind
    value: str
    nodes: tuple[Node, ...] = ()

    @property
    def is_word(self) -> bool:
        return self.kind is NodeKind.WORD

    @property
    def is_function(self) -> bool:
        return self.kind is NodeKind.FUNCTION


@dataclass(frozen=True)
class Length:
    """A number with a lowercased unit tag, e.g. ``10px``, ``50%``, ``0.25turn``."""

    value: float
    unit: str

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit}"
