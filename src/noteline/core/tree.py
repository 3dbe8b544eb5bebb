"""Structural helpers shared by the builder, the runtime and the tests."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, TypeVar

from .model import AnnotatedNode, PureNode

N = TypeVar("N", PureNode, AnnotatedNode)


def clean_node(node: PureNode) -> PureNode:
    """
    Collapse content-less wrappers left behind by the tree builder.

    - A content-less node with a single child is replaced by that child.
    - A single content-less child is spliced out, its children adopted.
    """
    while not node.content and len(node.children) == 1:
        node = node.children[0]
    while len(node.children) == 1 and not node.children[0].content:
        node = replace(node, children=node.children[0].children)
    return replace(node, children=tuple(clean_node(c) for c in node.children))


def iter_nodes(root: N) -> Iterator[tuple[N, int]]:
    """Yield (node, depth) pairs in document (pre-)order."""
    stack: list[tuple[N, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def count_nodes(root: PureNode | AnnotatedNode) -> int:
    return sum(1 for _ in iter_nodes(root))


def node_depths(root: PureNode | AnnotatedNode) -> list[int]:
    """Depth of every node in document order; the root is depth 0."""
    return [depth for _node, depth in iter_nodes(root)]
