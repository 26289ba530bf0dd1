from ouroboros.ir import generate_ir, iter_ir
from ouroboros.syntax import Node, NodeType


def make_tree():
    d = Node(NodeType.LITERAL, "d")
    a = Node(NodeType.IDENTIFIER, "a", next=d)
    b = Node(NodeType.LITERAL, "b")
    c = Node(NodeType.RETURN, "c")
    return Node(NodeType.BINARY_OP, "root", left=a, right=b, next=c)


def test_order_is_node_left_right_next():
    assert [n.value for n in iter_ir(make_tree())] == ["root", "a", "d", "b", "c"]


def test_empty_tree_yields_nothing():
    assert list(iter_ir(None)) == []


def test_generate_ir_prints_one_line_per_node(capsys):
    root = make_tree()
    generate_ir(root)
    lines = capsys.readouterr().out.splitlines()
    values = [n.value for n in iter_ir(root)]
    assert len(lines) == len(values)
    prefix = "[IR] Generating IR for node: "
    assert all(line.startswith(prefix) for line in lines)
    assert [line[len(prefix):] for line in lines] == values


def test_generate_ir_none_prints_nothing(capsys):
    generate_ir(None)
    assert capsys.readouterr().out == ""


def test_long_chain_visits_every_node():
    head = Node(NodeType.BLOCK, "n0")
    current = head
    for i in range(1, 5000):
        current.next = Node(NodeType.BLOCK, f"n{i}")
        current = current.next
    visited = list(iter_ir(head))
    assert len(visited) == 5000
    assert visited[-1] is current