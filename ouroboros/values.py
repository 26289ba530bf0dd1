"""Operations on the interpreter's string-encoded runtime values."""

from __future__ import annotations

import math
import sys
from typing import Optional

MAX_RESULT_LENGTH = 1024

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FALSY = frozenset({"0", "false", ""})

_ARITHMETIC = frozenset({"+", "-", "*", "/"})
_SHIFTS = frozenset({"<<", ">>", ">>>"})
_COMPARISONS = frozenset({"==", "!=", "<", ">", "<=", ">="})


class EvaluationError(ValueError):
    """Raised when an operator cannot be applied to its operand."""


def is_numeric_string(text: Optional[str]) -> bool:
    """Whether the text is an optional '-' followed by digits with at most one '.'."""
    if not text:
        return False
    body = text[1:] if text[0] == "-" else text
    if not body:
        return False
    if body.count(".") > 1:
        return False
    return all(ch == "." or ch in "0123456789" for ch in body)


def is_truthy(value: Optional[str]) -> bool:
    """Truthiness of a runtime value: everything but None, '0', 'false' and ''."""
    return value is not None and value not in _FALSY


def _atof(text: str) -> float:
    """Float value of a numeric string; a bare '.' reads as zero."""
    try:
        return float(text)
    except ValueError:
        return -0.0 if text.startswith("-") else 0.0


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _leading_int(text: str, bits: int) -> int:
    """Leading integer of the text, junk after it ignored, wrapped to `bits`."""
    stripped = text.lstrip(" \t\n\r\v\f")
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
    if not digits:
        return 0
    return _wrap(sign * int("".join(digits)), bits)


def _format_number(value: float) -> str:
    """Integral results print without a fraction; others in %g form."""
    if math.isfinite(value) and value.is_integer() and _INT_MIN <= value <= _INT_MAX:
        return str(int(value))
    return "%g" % value


def _truncating_mod(left: int, right: int) -> int:
    remainder = abs(left) % abs(right)
    return -remainder if left < 0 else remainder


def _arithmetic(op: str, left: str, right: str) -> str:
    if op == "+" and not (is_numeric_string(left) and is_numeric_string(right)):
        return left + right
    if not (is_numeric_string(left) and is_numeric_string(right)):
        return ""
    lhs, rhs = _atof(left), _atof(right)
    if op == "+":
        return _format_number(lhs + rhs)
    if op == "-":
        return _format_number(lhs - rhs)
    if op == "*":
        return _format_number(lhs * rhs)
    if rhs == 0:
        print("[RUNTIME] Error: Division by zero", file=sys.stderr)
        return "NaN"
    return _format_number(lhs / rhs)


def _modulus(left: str, right: str) -> str:
    if not (is_numeric_string(left) and is_numeric_string(right)):
        return ""
    lhs, rhs = _leading_int(left, 64), _leading_int(right, 64)
    if rhs == 0:
        print("[RUNTIME] Error: Modulus by zero", file=sys.stderr)
        return "NaN"
    return str(_truncating_mod(lhs, rhs))


def _shift(op: str, left: str, right: str) -> str:
    if not (is_numeric_string(left) and is_numeric_string(right)):
        return ""
    value = _leading_int(left, 64)
    amount = _leading_int(right, 32) & 63
    if op == "<<":
        return str(_wrap(value << amount, 64))
    # '>>>' behaves as an arithmetic shift, like '>>'.
    return str(value >> amount)


def _compare(op: str, left: str, right: str) -> str:
    if is_numeric_string(left) and is_numeric_string(right):
        lhs: object = _atof(left)
        rhs: object = _atof(right)
    else:
        lhs, rhs = left, right
    if op == "==":
        result = lhs == rhs
    elif op == "!=":
        result = lhs != rhs
    elif op == "<":
        result = lhs < rhs  # type: ignore[operator]
    elif op == ">":
        result = lhs > rhs  # type: ignore[operator]
    elif op == "<=":
        result = lhs <= rhs  # type: ignore[operator]
    else:
        result = lhs >= rhs  # type: ignore[operator]
    return "true" if result else "false"


def evaluate_binary_op(op: str, left: Optional[str], right: Optional[str]) -> str:
    """Apply a binary operator to two evaluated values.

    Arithmetic on non-numeric operands yields '' (except '+', which
    concatenates); '&&' and '||' treat only 'true' as true; an unknown
    operator yields ''. Results are limited to the runtime's buffer size.
    """
    lhs = left if left is not None else ""
    rhs = right if right is not None else ""
    if op in _ARITHMETIC:
        result = _arithmetic(op, lhs, rhs)
    elif op == "%":
        result = _modulus(lhs, rhs)
    elif op in _SHIFTS:
        result = _shift(op, lhs, rhs)
    elif op in _COMPARISONS:
        result = _compare(op, lhs, rhs)
    elif op == "&&":
        result = "true" if lhs == "true" and rhs == "true" else "false"
    elif op == "||":
        result = "true" if lhs == "true" or rhs == "true" else "false"
    else:
        result = ""
    return result[: MAX_RESULT_LENGTH - 1]


def evaluate_unary_op(op: str, operand: Optional[str]) -> str:
    """Apply a prefix operator ('-', '!', '++', '--') to an evaluated value.

    '++' and '--' return the new integer value; storing it is the caller's job.
    """
    if op == "-":
        if operand is None or not is_numeric_string(operand):
            raise EvaluationError(
                f"Unary '-' requires numeric operand, got '{operand if operand is not None else 'undefined'}'."
            )
        return "%g" % -_atof(operand)
    if op == "!":
        return "false" if is_truthy(operand) else "true"
    if op in ("++", "--"):
        if operand is None or not is_numeric_string(operand):
            raise EvaluationError(
                f"'{op}' operator requires numeric operand, got "
                f"'{operand if operand is not None else 'undefined'}'."
            )
        delta = 1 if op == "++" else -1
        return str(_wrap(_leading_int(operand, 32) + delta, 32))
    raise EvaluationError(f"Unknown unary operator '{op}'.")