"""Graphviz visualization helpers for parsed programs.

Provides `render_ast_dot(statements)` which returns a `graphviz.Digraph`
object (not rendered). `write_and_render` writes the rendered file to disk.

Layout: a single `program` root node fans out to the top-level statements;
every AST node becomes one graph node labelled with its kind and scalar
fields, and every parent-child edge is labelled with the child's role
(`left`, `then`, `stmt[0]`, ...).
"""

from typing import List, Sequence, Tuple
from graphviz import Digraph
from ast_nodes import *


def _label(node: ASTNode) -> str:
    match node:
        case NumberNode(value=v):
            return f"Number\\n{v}"
        case VariableNode(name=n):
            return f"Variable\\n{n}"
        case BinaryOpNode(operator=op):
            return f"BinaryOp\\n{op}"
        case ParenNode():
            return "Paren"
        case InfoNode(kind=kind, direction=d):
            return f"Info\\n{kind.value}" + (f" {d.value}" if d is not None else "")
        case AssignNode(name=n):
            return f"Assign\\n{n}"
        case DoneNode():
            return "Done"
        case MoveNode(direction=d):
            return f"Move\\n{d.value}"
        case ShootNode(direction=d):
            return f"Shoot\\n{d.value}"
        case BlockNode():
            return "Block"
        case IfNode():
            return "If"
        case WhileNode():
            return "While"
        case _:
            raise TypeError(f"Unknown node type: {type(node).__name__}")


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    match node:
        case BinaryOpNode(left=l, right=r):
            return [("left", l), ("right", r)]
        case ParenNode(inner=inner):
            return [("inner", inner)]
        case AssignNode(value=value):
            return [("value", value)]
        case ShootNode(expenditure=expr):
            return [("expenditure", expr)]
        case BlockNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case IfNode(condition=c, then_branch=t, else_branch=e):
            return [("condition", c), ("then", t), ("else", e)]
        case WhileNode(condition=c, body=b):
            return [("condition", c), ("body", b)]
        case _:
            return []


def render_ast_dot(statements: Sequence[ASTNode]) -> Digraph:
    """Return a graphviz.Digraph for a parsed program.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica")

    dot.node("program", label="Program", shape="ellipse")

    # Node ids are assigned in pre-order so the output is deterministic.
    counter = 0
    stack: List[Tuple[str, str, ASTNode]] = [
        ("program", f"stmt[{i}]", s) for i, s in reversed(list(enumerate(statements)))
    ]
    while stack:
        parent_id, role, node = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        dot.node(node_id, label=_label(node))
        dot.edge(parent_id, node_id, label=role)
        for child_role, child in reversed(_children(node)):
            stack.append((node_id, child_role, child))

    return dot


def write_and_render(
    statements: Sequence[ASTNode], out_path: str, fmt: str = "svg"
) -> str:
    """Write and render the AST graph to `out_path` (without extension).

    Returns the path of the rendered file. Example:
    write_and_render(ast, 'out/ast', fmt='png') creates out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(statements)
    dot.format = fmt
    # render appends the extension automatically
    return dot.render(out_path, cleanup=True)
