"""Split node sequences into comma-separated, whitespace-free argument groups."""

from __future__ import annotations

from collections.abc import Sequence

from cssgradient.model.value import Node, NodeKind

__all__ = ["split_comma_args", "split_space_args"]


def split_space_args(nodes: Sequence[Node]) -> list[Node]:
    """Drop whitespace nodes, keeping everything else in order."""
    return [node for node in nodes if node.kind is not NodeKind.SPACE]


def split_comma_args(nodes: Sequence[Node]) -> list[list[Node]]:
    """Partition *nodes* on dividers at this nesting level.

    Always returns at least one group; a group may be empty (``a,,b``).
    """
    groups: list[list[Node]] = []
    start = 0
    for i, node in enumerate(nodes):
        if node.kind is NodeKind.DIVIDER:
            groups.append(split_space_args(nodes[start:i]))
            start = i + 1
    groups.append(split_space_args(nodes[start:]))
    return groups
