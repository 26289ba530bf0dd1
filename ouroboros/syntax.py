"""Abstract syntax tree nodes and their debug rendering."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

MAX_VALUE_LENGTH = 255
MAX_TYPE_LENGTH = 63
MAX_ACCESS_MODIFIER_LENGTH = 15

_INDENT = "  "


class NodeType(Enum):
    """Kinds of syntax tree nodes."""

    PROGRAM = auto()
    FUNCTION = auto()
    CLASS = auto()
    VAR_DECL = auto()
    ASSIGN = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    BLOCK = auto()
    CALL = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    LITERAL = auto()
    IDENTIFIER = auto()
    ARRAY = auto()
    IMPORT = auto()
    STRUCT = auto()
    STRUCT_INIT = auto()
    CLASS_METHOD = auto()
    NEW = auto()
    MEMBER_ACCESS = auto()
    THIS = auto()
    GENERIC = auto()
    TYPED_VAR_DECL = auto()
    TYPED_FUNCTION = auto()
    TYPE = auto()
    PARAMETER = auto()
    STRUCT_FIELD = auto()
    CLASS_FIELD = auto()
    PRINT = auto()
    INDEX_ACCESS = auto()
    MAP = auto()
    TERNARY = auto()
    BREAK = auto()
    CONTINUE = auto()
    SUPER = auto()
    UNKNOWN = auto()

    @property
    def label(self) -> str:
        """Human-readable name used in debug output."""
        return _LABELS.get(self, "Unknown")


_LABELS = {
    NodeType.PROGRAM: "Program",
    NodeType.FUNCTION: "Function",
    NodeType.CLASS: "Class",
    NodeType.VAR_DECL: "VarDecl",
    NodeType.ASSIGN: "Assign",
    NodeType.RETURN: "Return",
    NodeType.IF: "If",
    NodeType.ELSE: "Else",
    NodeType.WHILE: "While",
    NodeType.FOR: "For",
    NodeType.BLOCK: "Block",
    NodeType.CALL: "Call",
    NodeType.BINARY_OP: "BinaryOp",
    NodeType.UNARY_OP: "UnaryOp",
    NodeType.LITERAL: "Literal",
    NodeType.IDENTIFIER: "Identifier",
    NodeType.ARRAY: "Array",
    NodeType.IMPORT: "Import",
    NodeType.STRUCT: "Struct",
    NodeType.STRUCT_INIT: "StructInit",
    NodeType.CLASS_METHOD: "ClassMethod",
    NodeType.NEW: "New",
    NodeType.MEMBER_ACCESS: "MemberAccess",
    NodeType.THIS: "This",
    NodeType.GENERIC: "Generic",
    NodeType.TYPED_VAR_DECL: "TypedVarDecl",
    NodeType.TYPED_FUNCTION: "TypedFunction",
    NodeType.TYPE: "Type",
    NodeType.PARAMETER: "Parameter",
    NodeType.STRUCT_FIELD: "StructField",
    NodeType.CLASS_FIELD: "ClassField",
    NodeType.PRINT: "Print",
    NodeType.INDEX_ACCESS: "IndexAccess",
    NodeType.UNKNOWN: "Unknown",
}


@dataclass(eq=False)
class Node:
    """A syntax tree node with left/right children and a `next` sibling."""

    type: NodeType
    value: str = ""
    line: int = 0
    col: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None
    next: Optional[Node] = None
    data_type: str = ""
    generic_type: str = ""
    is_void: bool = False
    is_array: bool = False
    array_size: int = 0
    access_modifier: str = ""
    parent_class_name: Optional[str] = None

    def __post_init__(self) -> None:
        self.value = (self.value or "")[:MAX_VALUE_LENGTH]
        self.data_type = self.data_type[:MAX_TYPE_LENGTH]
        self.generic_type = self.generic_type[:MAX_TYPE_LENGTH]
        self.access_modifier = self.access_modifier[:MAX_ACCESS_MODIFIER_LENGTH]

    def _header(self) -> str:
        parts = [f"{self.type.label}: {self.value} (L{self.line}:C{self.col})"]
        if self.data_type:
            info = f" (Type: {self.data_type}"
            if self.generic_type:
                info += f"<{self.generic_type}>"
            if self.is_void:
                info += ", void"
            if self.is_array:
                info += ", array"
            parts.append(info + ")")
        elif self.generic_type:
            parts.append(f" (Generic: {self.generic_type})")
        elif self.is_void:
            parts.append(" (void)")
        if self.access_modifier:
            parts.append(f" [{self.access_modifier}]")
        if self.parent_class_name:
            parts.append(f" [ParentClass: {self.parent_class_name}]")
        return "".join(parts)

    def format(self, indent: int = 0) -> str:
        """Render this node and its subtrees as indented debug text."""
        lines: list[str] = []
        self._format_into(lines, indent)
        return "".join(line + "\n" for line in lines)

    def _format_into(self, lines: list[str], indent: int) -> None:
        pad = _INDENT * indent
        lines.append(pad + self._header())
        for title, child in (("Left", self.left), ("Right", self.right), ("Next", self.next)):
            if child is not None:
                lines.append(f"{pad}{title}:")
                child._format_into(lines, indent + 1)


def format_ast(node: Optional[Node], indent: int = 0) -> str:
    """Render a tree as debug text; an empty tree renders as ''."""
    if node is None:
        return ""
    return node.format(indent)


def print_ast(node: Optional[Node], indent: int = 0) -> None:
    """Write the debug rendering of a tree to standard output."""
    sys.stdout.write(format_ast(node, indent))