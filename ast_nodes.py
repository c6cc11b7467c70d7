"""AST node definitions for the strategy language.

This module defines the concrete AST node dataclasses produced by the parser.
Each node is a frozen dataclass that carries the relevant information (an
operator, child nodes, names, directions). The `NodeType` enum identifies the
node kind and is what downstream consumers (pretty-printer, JSON dump, graph
view) dispatch on.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, whose `type` field records
    the node kind. It is filled in by each subclass and is not a constructor
    argument.
- Nodes are immutable and compare structurally, so two parses of the same
    text produce equal trees.
- Statement and expression nodes form two closed unions, listed in
    `STATEMENT_TYPES` and `EXPRESSION_TYPES`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    UPLEFT = "upleft"
    UPRIGHT = "upright"
    DOWNLEFT = "downleft"
    DOWNRIGHT = "downright"

    def __str__(self) -> str:
        return self.name


class InfoKind(Enum):
    ALLY = "ally"
    OPPONENT = "opponent"
    NEARBY = "nearby"

    def __str__(self) -> str:
        return self.name


class NodeType(Enum):
    # Statements
    ASSIGN = auto()
    DONE = auto()
    MOVE = auto()
    SHOOT = auto()
    BLOCK = auto()
    IF_STMT = auto()
    WHILE_STMT = auto()

    # Expressions
    NUMBER = auto()
    VARIABLE = auto()
    BINARY_OP = auto()
    PAREN = auto()
    INFO = auto()

    def __str__(self) -> str:
        return self.name


BINARY_OPERATORS = ("+", "-", "*", "/", "%", "^")


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType = field(init=False, repr=False)


# Statement Nodes
@dataclass(frozen=True)
class AssignNode(ASTNode):
    type: NodeType = field(default=NodeType.ASSIGN, init=False, repr=False)
    name: str
    value: ASTNode


@dataclass(frozen=True)
class DoneNode(ASTNode):
    type: NodeType = field(default=NodeType.DONE, init=False, repr=False)


@dataclass(frozen=True)
class MoveNode(ASTNode):
    type: NodeType = field(default=NodeType.MOVE, init=False, repr=False)
    direction: Direction


@dataclass(frozen=True)
class ShootNode(ASTNode):
    type: NodeType = field(default=NodeType.SHOOT, init=False, repr=False)
    direction: Direction
    expenditure: ASTNode


@dataclass(frozen=True)
class BlockNode(ASTNode):
    type: NodeType = field(default=NodeType.BLOCK, init=False, repr=False)
    statements: Tuple[ASTNode, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple.
        object.__setattr__(self, "statements", tuple(self.statements))


@dataclass(frozen=True)
class IfNode(ASTNode):
    type: NodeType = field(default=NodeType.IF_STMT, init=False, repr=False)
    condition: ASTNode
    then_branch: ASTNode
    else_branch: ASTNode


@dataclass(frozen=True)
class WhileNode(ASTNode):
    type: NodeType = field(default=NodeType.WHILE_STMT, init=False, repr=False)
    condition: ASTNode
    body: ASTNode


# Expression Nodes
@dataclass(frozen=True)
class NumberNode(ASTNode):
    type: NodeType = field(default=NodeType.NUMBER, init=False, repr=False)
    value: int


@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: NodeType = field(default=NodeType.VARIABLE, init=False, repr=False)
    name: str


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = field(default=NodeType.BINARY_OP, init=False, repr=False)
    operator: str
    left: ASTNode
    right: ASTNode

    def __post_init__(self) -> None:
        if self.operator not in BINARY_OPERATORS:
            raise ValueError(f"Unknown binary operator {self.operator!r}")


@dataclass(frozen=True)
class ParenNode(ASTNode):
    type: NodeType = field(default=NodeType.PAREN, init=False, repr=False)
    inner: ASTNode


@dataclass(frozen=True)
class InfoNode(ASTNode):
    type: NodeType = field(default=NodeType.INFO, init=False, repr=False)
    kind: InfoKind
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        # Only `nearby` takes a direction, and it always does.
        if (self.kind is InfoKind.NEARBY) != (self.direction is not None):
            raise ValueError(
                f"InfoNode({self.kind}) "
                + ("requires a direction" if self.kind is InfoKind.NEARBY else "takes no direction")
            )


STATEMENT_TYPES = (
    AssignNode,
    DoneNode,
    MoveNode,
    ShootNode,
    BlockNode,
    IfNode,
    WhileNode,
)

EXPRESSION_TYPES = (
    NumberNode,
    VariableNode,
    BinaryOpNode,
    ParenNode,
    InfoNode,
)


def is_statement(node: object) -> bool:
    return isinstance(node, STATEMENT_TYPES)


def is_expression(node: object) -> bool:
    return isinstance(node, EXPRESSION_TYPES)
