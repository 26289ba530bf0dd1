from ouroboros.optimize import constant_fold, optimize_ast
from ouroboros.syntax import Node, NodeType


def lit(value):
    return Node(NodeType.LITERAL, value, 1, 1)


def binop(op, left, right):
    return Node(NodeType.BINARY_OP, op, 1, 1, left=left, right=right)


def test_fold_addition():
    node = binop("+", lit("2"), lit("3"))
    constant_fold(node)
    assert node.type is NodeType.LITERAL
    assert node.value == "5"
    assert node.data_type == "int"
    assert node.left is None and node.right is None


def test_division_truncates_toward_zero():
    node = binop("/", lit("-7"), lit("2"))
    constant_fold(node)
    assert node.value == "-3"


def test_fold_reports_on_stdout(capsys):
    node = binop("*", lit("4"), lit("1"))
    constant_fold(node)
    out = capsys.readouterr().out
    assert out.startswith("[OPT] Folded constant: ")
    assert "(New type: int)" in out
    assert node.value == "4"


def test_division_by_zero_not_folded(capsys):
    node = binop("/", lit("8"), lit("0"))
    constant_fold(node)
    assert node.type is NodeType.BINARY_OP
    assert node.left.value == "8"
    assert "Division by zero" in capsys.readouterr().err


def test_comparison_not_folded():
    node = binop("<", lit("1"), lit("2"))
    constant_fold(node)
    assert node.type is NodeType.BINARY_OP
    assert node.value == "<"


def test_identifier_operand_not_folded():
    node = binop("+", Node(NodeType.IDENTIFIER, "x"), lit("2"))
    constant_fold(node)
    assert node.type is NodeType.BINARY_OP
    assert node.left.value == "x"


def test_non_numeric_literal_counts_as_zero():
    node = binop("+", lit("abc"), lit("4"))
    constant_fold(node)
    assert node.value == "4"


def test_subtraction_of_equal_values():
    node = binop("-", lit("9"), lit("9"))
    constant_fold(node)
    assert node.value == "0"


def test_nested_folding_matches_flat():
    flat = binop("*", lit("6"), lit("7"))
    constant_fold(flat)
    nested = binop("+", binop("*", lit("6"), lit("7")), lit("0"))
    optimize_ast(nested)
    assert nested.type is NodeType.LITERAL
    assert nested.value == flat.value


def test_fold_inside_non_binary_parent():
    ret = Node(NodeType.RETURN, "return", left=binop("+", lit("1"), lit("1")))
    constant_fold(ret)
    assert ret.type is NodeType.RETURN
    assert ret.left.type is NodeType.LITERAL


def test_constant_fold_ignores_next_chain():
    node = binop("+", lit("1"), lit("1"))
    node.next = binop("+", lit("2"), lit("2"))
    constant_fold(node)
    assert node.type is NodeType.LITERAL
    assert node.next.type is NodeType.BINARY_OP


def test_optimize_ast_follows_next_chain():
    first = binop("+", lit("1"), lit("1"))
    second = binop("+", lit("2"), lit("2"))
    first.next = second
    optimize_ast(first)
    assert first.type is NodeType.LITERAL
    assert second.type is NodeType.LITERAL


def test_optimize_long_chain_without_recursion_error():
    head = binop("+", lit("1"), lit("1"))
    current = head
    for _ in range(5000):
        current.next = binop("+", lit("1"), lit("1"))
        current = current.next
    optimize_ast(head)
    assert current.type is NodeType.LITERAL
    assert current.value == head.value