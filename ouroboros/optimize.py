"""Constant folding over the syntax tree."""

from __future__ import annotations

import sys
from typing import Optional

from .syntax import Node, NodeType


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: junk yields 0."""
    stripped = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return _wrap(sign * int(digits)) if digits else 0


def _wrap(value: int) -> int:
    """Wrap to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def constant_fold(node: Optional[Node]) -> None:
    """Fold integer arithmetic on literal operands in this subtree, in place."""
    if node is None:
        return

    if node.type is not NodeType.BINARY_OP:
        constant_fold(node.left)
        constant_fold(node.right)
        return

    for child in (node.left, node.right):
        if child is not None and child.type is not NodeType.LITERAL:
            constant_fold(child)

    left, right = node.left, node.right
    if not (left and right and left.type is NodeType.LITERAL and right.type is NodeType.LITERAL):
        return

    lhs, rhs = _atoi(left.value), _atoi(right.value)
    op = node.value
    if op == "+":
        result = lhs + rhs
    elif op == "-":
        result = lhs - rhs
    elif op == "*":
        result = lhs * rhs
    elif op == "/":
        if rhs == 0:
            print(
                f"[OPT L{node.line}:{node.col}] Error: Division by zero during constant "
                f"folding: {left.value} / {right.value} ",
                file=sys.stderr,
            )
            return
        result = _truncating_div(lhs, rhs)
    else:
        return

    result = _wrap(result)
    node.value = str(result)
    node.type = NodeType.LITERAL
    node.left = None
    node.right = None
    node.data_type = "int"
    print(f"[OPT] Folded constant: {result} at L{node.line}:{node.col} (New type: {node.data_type})")


def optimize_ast(root: Optional[Node]) -> None:
    """Optimise every statement in a `next`-linked chain, in place."""
    while root is not None:
        optimize_ast(root.left)
        optimize_ast(root.right)
        constant_fold(root)
        root = root.next