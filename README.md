# ouroboros

This package holds building blocks for an interpreter of the Ouroboros scripting
language:

- a lexer (`ouroboros.lexer`)
- syntax tree nodes with a debug printer (`ouroboros.syntax`)
- constant folding (`ouroboros.optimize`)
- an IR walk over the tree (`ouroboros.ir`)
- the string-valued operators used during evaluation (`ouroboros.values`,
  `ouroboros.indexing`)

It also has small runtime helpers:

- classes and instances (`ouroboros.classes`)
- named events (`ouroboros.events`)
- background threads (`ouroboros.concurrency`)
- simulated GUI and network calls (`ouroboros.gui`, `ouroboros.network`)

## Installation

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install ".[test]"
```

## Tokenizing source

```python
from ouroboros.lexer import tokenize, TokenType

for token in tokenize("let x = 1 + 2.5; // sum"):
    print(token.type, repr(token.text), token.line, token.col)
```

`tokenize(source)` yields `Token` objects. Each token has a `type`, its `text`, and
the `line` and `col` where it starts. The last token is always `TokenType.EOF`.
`lex(source)` returns the same tokens as a list.

- Keywords such as `let`, `class` and `int` come back as `TokenType.KEYWORD`.
- `true` and `false` come back as `TokenType.BOOL`.
- String literals and character literals both come back as `TokenType.STRING`,
  with their escapes resolved.

You can check a word with `is_keyword(text)`. Unknown characters, malformed
exponents and bad character literals are reported on standard error, and lexing
continues.

## Syntax trees and optimization

```python
from ouroboros.syntax import Node, NodeType, print_ast
from ouroboros.optimize import optimize_ast

expr = Node(NodeType.BINARY_OP, "+",
            left=Node(NodeType.LITERAL, "2"),
            right=Node(NodeType.LITERAL, "3"))
optimize_ast(expr)   # prints "[OPT] Folded constant: 5 at L0:0 (New type: int)"
print_ast(expr, 0)   # Literal: 5 (L0:C0) (Type: int)
```

A `Node` has `left`, `right` and `next` links, plus type information:
`data_type`, `generic_type`, `is_void`, `is_array`, `access_modifier` and
`parent_class_name`.

- `Node.format(indent)` and `format_ast(node, indent)` return the debug listing
  as a string.
- `print_ast` writes the same listing to standard output.

`constant_fold(node)` works in place. It rewrites integer `+ - * /` between two
literal operands, using 32-bit wrap-around and truncating division. A division
by zero is reported on standard error and left unfolded. `optimize_ast(root)`
folds every statement in a `next`-linked chain.

`ouroboros.ir.iter_ir(root)` yields the nodes of a tree in IR order: a node,
then its left subtree, then its right subtree, then its `next` chain.
`generate_ir(root)` prints one `[IR] Generating IR for node: ...` line for each
of those nodes.

## Values and operators

All runtime values are strings, as they are in the language itself:

```python
from ouroboros.values import evaluate_binary_op, evaluate_unary_op, is_truthy
from ouroboros.indexing import index_value, format_array, split_array

evaluate_binary_op("+", "2", "3")      # "5"
evaluate_binary_op("+", "a", "b")      # "ab"
evaluate_binary_op("<", "1", "10")     # "true"
evaluate_binary_op("/", "1", "0")      # "NaN"
evaluate_unary_op("++", "41")          # "42"
is_truthy("0")                         # False
index_value(format_array(["1", "[2,3]", "4"]), "1")   # "[2,3]"
split_array("[a,[b,c]]")               # ["a", "[b,c]"]
```

`is_numeric_string(text)` decides whether operands are treated as numbers.

How operators treat their operands:

- Arithmetic other than `+` yields `""` when an operand is not numeric.
- `&&` and `||` count only `"true"` as true.
- An unknown binary operator yields `""`.
- `evaluate_unary_op` supports `-`, `!`, `++` and `--`. It raises
  `ouroboros.values.EvaluationError` for a non-numeric operand of `-`, `++` or
  `--`, and for an unknown operator.

`index_value(target, index)` indexes both pseudo-arrays and plain strings.

- If the index is out of range, it returns `"undefined"`.
- For any other target, it returns a descriptive placeholder string.

## Classes, instances and events

```python
from ouroboros.classes import ClassRegistry
from ouroboros.events import EventRegistry

classes = ClassRegistry()
classes.register("Animal", None)
classes.define_field("Animal", "legs", "4")
classes.register("Dog", "Animal")
dog = classes.create_instance("Dog")
dog.get_field("legs")                  # "4", inherited from Animal
dog.set_field("name", "Rex")

events = EventRegistry()
events.register("ready", lambda: print("go"))
events.trigger("ready")                # True; False when no handler exists
```

`create_instance` raises `ouroboros.classes.ClassNotFoundError` for an unknown
class.

`ouroboros.concurrency.start_thread(fn, arg)` runs `fn(None)` on a daemon thread
and returns the thread.

## Simulated GUI and network

The following functions only print a report of what they would do. None of them
opens a window or a socket.

- `ouroboros.gui`: `init_gui`, `draw_window`, `draw_label`, `draw_button` and
  `gui_message_loop`. Each returns the line it printed.
- `ouroboros.network`: `create_server`, `accept_connection`, `connect_to_server`,
  `send_data`, `receive_data`, `close_socket` and `http_get`. These return fixed
  handles, a fixed response text, and status 200.

## What this package does not do

There is no parser that turns tokens into a syntax tree; trees are built from
`Node` objects directly. There is also no statement executor or virtual machine
that runs whole programs, no module loader, and no command-line program. The
package provides the lexer, tree, optimizer and operator pieces, which an
interpreter would use.