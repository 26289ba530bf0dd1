"""Pseudo-array values ("[a,b,c]") and index access on runtime values."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from .values import MAX_RESULT_LENGTH, is_numeric_string

UNDEFINED = "undefined"
MAX_ELEMENT_LENGTH = 510
WARNING_INDEX_LIMIT = 50

_WHITESPACE = " \t\n\r\v\f"


def _atoi(text: Optional[str]) -> int:
    """Leading integer of the text; anything unparsable reads as 0."""
    if not text:
        return 0
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if ch not in "0123456789":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def _is_pseudo_array(text: str) -> bool:
    return len(text) > 0 and text[0] == "[" and text[-1] == "]"


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def format_array(elements: Iterable[str]) -> str:
    """Join element values into the bracketed, comma-separated array form."""
    text = "[" + ",".join(elements) + "]"
    return text[: MAX_RESULT_LENGTH - 1]


def split_array(text: str) -> list[str]:
    """Split a bracketed pseudo-array into its top-level elements.

    Commas inside nested brackets do not split; scanning stops at the first
    top-level ']'. Elements are returned untrimmed and capped in length.
    The result always has at least one element: '[]' holds one empty string.
    """
    if not _is_pseudo_array(text):
        raise ValueError(f"not a pseudo-array: {text!r}")
    elements: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text[1:]:
        if depth == 0 and ch == "]":
            break
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == "," and depth == 0:
            elements.append("".join(current)[:MAX_ELEMENT_LENGTH])
            current = []
            continue
        current.append(ch)
    elements.append("".join(current)[:MAX_ELEMENT_LENGTH])
    return elements


def index_value(target: Optional[str], index: Optional[str]) -> str:
    """Evaluate `target[index]` for pseudo-arrays and plain strings.

    Out-of-range access yields 'undefined'; a target that is neither a
    pseudo-array nor indexed by a number yields a descriptive placeholder.
    """
    if target is None or target == UNDEFINED:
        return UNDEFINED

    if _is_pseudo_array(target):
        position = _atoi(index)
        elements = split_array(target)
        if 0 <= position < len(elements):
            return elements[position].strip(_WHITESPACE)
        if position < WARNING_INDEX_LIMIT:
            _warn(f"Index {position} out of bounds for pseudo-array.")
        return UNDEFINED

    if is_numeric_string(index):
        position = _atoi(index)
        if 0 <= position < len(target):
            return target[position]
        if position < WARNING_INDEX_LIMIT:
            _warn(f"Index {position} out of bounds for string '{target}'.")
        return UNDEFINED

    return f"indexed_value_of_{target}_at_{index if index is not None else 'null'}"