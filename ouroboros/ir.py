"""Intermediate representation pass over the syntax tree."""

from __future__ import annotations

from typing import Iterator, Optional

from .syntax import Node


def iter_ir(root: Optional[Node]) -> Iterator[Node]:
    """Yield nodes in IR generation order: node, left, right, then next."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        for child in (node.next, node.right, node.left):
            if child is not None:
                stack.append(child)


def generate_ir(root: Optional[Node]) -> None:
    """Report IR generation for every node of the tree on standard output."""
    for node in iter_ir(root):
        print(f"[IR] Generating IR for node: {node.value}")