"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `program_to_json`
for a whole parsed program. Each dict carries a `node_type` tag plus the
node's fields; enums are written as their keyword text.
"""

from typing import Any, List, Optional, Sequence
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None
    if not isinstance(node, ASTNode):
        raise TypeError(f"Cannot serialize node of type {type(node).__name__}")

    t = node.type
    # expressions
    if t == NodeType.NUMBER and isinstance(node, NumberNode):
        return {"node_type": "Number", "value": node.value}
    if t == NodeType.VARIABLE and isinstance(node, VariableNode):
        return {"node_type": "Variable", "name": node.name}
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    if t == NodeType.PAREN and isinstance(node, ParenNode):
        return {"node_type": "Paren", "inner": ast_to_json(node.inner)}
    if t == NodeType.INFO and isinstance(node, InfoNode):
        return {
            "node_type": "Info",
            "kind": node.kind.value,
            "direction": node.direction.value if node.direction is not None else None,
        }
    # statements
    if t == NodeType.ASSIGN and isinstance(node, AssignNode):
        return {
            "node_type": "Assign",
            "name": node.name,
            "value": ast_to_json(node.value),
        }
    if t == NodeType.DONE and isinstance(node, DoneNode):
        return {"node_type": "Done"}
    if t == NodeType.MOVE and isinstance(node, MoveNode):
        return {"node_type": "Move", "direction": node.direction.value}
    if t == NodeType.SHOOT and isinstance(node, ShootNode):
        return {
            "node_type": "Shoot",
            "direction": node.direction.value,
            "expenditure": ast_to_json(node.expenditure),
        }
    if t == NodeType.BLOCK and isinstance(node, BlockNode):
        return {
            "node_type": "Block",
            "statements": [ast_to_json(s) for s in node.statements],
        }
    if t == NodeType.IF_STMT and isinstance(node, IfNode):
        return {
            "node_type": "If",
            "condition": ast_to_json(node.condition),
            "then": ast_to_json(node.then_branch),
            "else": ast_to_json(node.else_branch),
        }
    if t == NodeType.WHILE_STMT and isinstance(node, WhileNode):
        return {
            "node_type": "While",
            "condition": ast_to_json(node.condition),
            "body": ast_to_json(node.body),
        }

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def program_to_json(statements: Sequence[ASTNode]) -> List[Any]:
    return [ast_to_json(s) for s in statements]
