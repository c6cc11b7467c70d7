"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line tree, and `print_surface(node)` /
`print_program(statements)` which render nodes back into strategy source
text. Because parenthesized expressions are kept as `ParenNode`, printing a
parsed program and parsing the result yields an equal AST.

Examples:
    PrettyPrinter.print_ast(statement)
    PrettyPrinter.print_program(parse_text("x=(1+2)*3 done"))
"""

from __future__ import annotations
from typing import Sequence
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberNode(value=v):
                lines.append(f"{indent_str}{prefix}Number({v})")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case BinaryOpNode(operator=op, left=left, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case ParenNode(inner=inner):
                lines.append(f"{indent_str}{prefix}Paren")
                lines.append(PrettyPrinter.print_ast(inner, indent + 2))

            case InfoNode(kind=kind, direction=d):
                arg = f", {d}" if d is not None else ""
                lines.append(f"{indent_str}{prefix}Info({kind}{arg})")

            case AssignNode(name=n, value=value):
                lines.append(f"{indent_str}{prefix}Assign({n})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case DoneNode():
                lines.append(f"{indent_str}{prefix}Done")

            case MoveNode(direction=d):
                lines.append(f"{indent_str}{prefix}Move({d})")

            case ShootNode(direction=d, expenditure=expr):
                lines.append(f"{indent_str}{prefix}Shoot({d})")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2, "expenditure: "))

            case BlockNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Block")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case IfNode(condition=cond, then_branch=then_b, else_branch=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(then_b, indent + 4, "then: "))
                lines.append(PrettyPrinter.print_ast(else_b, indent + 4, "else: "))

            case WhileNode(condition=cond, body=body):
                lines.append(f"{indent_str}{prefix}While")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case _:
                raise TypeError(f"Unknown node type: {type(node).__name__}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_program_ast(statements: Sequence[ASTNode]) -> str:
        """Tree dump of every top-level statement."""
        lines = ["Program"]
        for i, stmt in enumerate(statements):
            lines.append(PrettyPrinter.print_ast(stmt, 4, f"stmt[{i}]: "))
        return "\n".join(lines)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact one-line source rendering of an AST node.

        Operators are emitted without adding parentheses; grouping comes
        only from `ParenNode`, which is exactly what the parser records.
        """
        _p = PrettyPrinter.print_surface

        match node:
            case NumberNode(value=v):
                return str(v)
            case VariableNode(name=n):
                return n
            case BinaryOpNode(operator=op, left=l, right=r):
                return f"{_p(l)} {op} {_p(r)}"
            case ParenNode(inner=inner):
                return f"({_p(inner)})"
            case InfoNode(kind=kind, direction=None):
                return kind.value
            case InfoNode(kind=kind, direction=d):
                return f"{kind.value} {d.value}"
            case AssignNode(name=n, value=value):
                return f"{n} = {_p(value)}"
            case DoneNode():
                return "done"
            case MoveNode(direction=d):
                return f"move {d.value}"
            case ShootNode(direction=d, expenditure=expr):
                return f"shoot {d.value} {_p(expr)}"
            case BlockNode(statements=stmts):
                if not stmts:
                    return "{ }"
                return "{ " + " ".join(_p(s) for s in stmts) + " }"
            case IfNode(condition=cond, then_branch=then_b, else_branch=else_b):
                return f"if ({_p(cond)}) then {_p(then_b)} else {_p(else_b)}"
            case WhileNode(condition=cond, body=body):
                return f"while ({_p(cond)}) {_p(body)}"
            case _:
                raise TypeError(f"Unknown node type: {type(node).__name__}")

    @staticmethod
    def print_program(statements: Sequence[ASTNode]) -> str:
        """Render a program as source text, one top-level statement per line."""
        return "\n".join(PrettyPrinter.print_surface(s) for s in statements)
