"""
Parser for the strategy language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser with a
    single-token lookahead cursor over the list produced by the lexer.
    Statements dispatch on the type of the next token; expressions use one
    method per precedence tier (classic precedence climbing).

Key points:
- Statement parsing:
    - `parse_statement()` recognizes `if`, `while`, blocks, `done`, `move`,
        `shoot` and assignments (`ident = expr`). There is no statement
        terminator; statements simply follow each other.
    - Both branches of an `if` are mandatory, each a single statement
        (possibly a block).

- Expression parsing, lowest to highest precedence:
    - `parse_additive()`: `+ -`, left-associative.
    - `parse_multiplicative()`: `* / %`, left-associative.
    - `parse_power()`: `^`, right-associative; the right operand re-enters
        `parse_power()` so `2^3^2` is `2^(3^2)`.
    - `parse_primary()`: numbers, identifiers, parenthesized expressions
        (kept as `ParenNode`), `ally`, `opponent` and `nearby <direction>`.
    - There are no unary operators; a leading `+`/`-` is an error.

- Errors:
    - The first violation raises `ParseError` citing the lexeme and position
        of the token where it was detected. There is no recovery.

Examples:
    - `x=1+2*3` -> Assign(x, Binary(+, 1, Binary(*, 2, 3)))
    - `move up shoot down 5 done` -> [Move(UP), Shoot(DOWN, 5), Done]
"""

from __future__ import annotations
from types import MappingProxyType
from typing import List, Mapping
from tokens import Token, TokenType
from errors import ParseError
from ast_nodes import *


DIRECTIONS: Mapping[TokenType, Direction] = MappingProxyType(
    {
        TokenType.UP: Direction.UP,
        TokenType.DOWN: Direction.DOWN,
        TokenType.UPLEFT: Direction.UPLEFT,
        TokenType.UPRIGHT: Direction.UPRIGHT,
        TokenType.DOWNLEFT: Direction.DOWNLEFT,
        TokenType.DOWNRIGHT: Direction.DOWNRIGHT,
    }
)


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            end = tokens[-1].pos + len(tokens[-1].lexeme) if tokens else 0
            tokens = list(tokens) + [Token(TokenType.EOF, "", None, end)]
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        """Return next token without consuming it."""
        return self.tokens[self.pos]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        """Consume and return the current token. EOF is never consumed."""
        token = self.peek()
        if not self.is_at_end():
            self.pos += 1
        return token

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any type, consume if true."""
        if self.peek().type in token_types:
            self.advance()
            return True
        return False

    def error(self, token: Token, message: str) -> ParseError:
        return ParseError(message, token.lexeme, token.pos, token.line, token.column)

    def expect(self, expected_type: TokenType, message: str) -> Token:
        """Expect and consume token of given type."""
        if self.check(expected_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def parse_direction(self) -> Direction:
        """Consume exactly one token, which must be a direction keyword."""
        token = self.advance()
        direction = DIRECTIONS.get(token.type)
        if direction is None:
            raise self.error(token, "Expected direction")
        return direction

    # Expressions

    def parse_expression(self) -> ASTNode:
        """Parse an expression."""
        return self.parse_additive()

    def parse_additive(self) -> ASTNode:
        left = self.parse_multiplicative()
        while self.peek().type in (TokenType.PLUS, TokenType.MINUS):
            operator = self.advance().lexeme
            right = self.parse_multiplicative()
            left = BinaryOpNode(operator, left, right)
        return left

    def parse_multiplicative(self) -> ASTNode:
        left = self.parse_power()
        while self.peek().type in (TokenType.STAR, TokenType.SLASH, TokenType.PERCENT):
            operator = self.advance().lexeme
            right = self.parse_power()
            left = BinaryOpNode(operator, left, right)
        return left

    def parse_power(self) -> ASTNode:
        left = self.parse_primary()
        if self.match(TokenType.CARET):
            # Right-associative: recurse into this level, not the one below.
            right = self.parse_power()
            return BinaryOpNode("^", left, right)
        return left

    def parse_primary(self) -> ASTNode:
        """Parse primary expressions (literals, identifiers, parenthesized, info)."""
        token = self.peek()

        match token.type:
            case TokenType.NUMBER:
                self.advance()
                return NumberNode(token.value)

            case TokenType.IDENT:
                self.advance()
                return VariableNode(token.lexeme)

            case TokenType.LPAREN:
                self.advance()
                inner = self.parse_expression()
                self.expect(TokenType.RPAREN, "Expected ')'")
                return ParenNode(inner)

            case TokenType.ALLY:
                self.advance()
                return InfoNode(InfoKind.ALLY)

            case TokenType.OPPONENT:
                self.advance()
                return InfoNode(InfoKind.OPPONENT)

            case TokenType.NEARBY:
                self.advance()
                return InfoNode(InfoKind.NEARBY, self.parse_direction())

            case _:
                raise self.error(token, "Expected expression")

    # Statements

    def parse_block(self) -> BlockNode:
        """Parse a block of statements: { statement* }"""
        self.expect(TokenType.LBRACE, "Expected '{'")
        statements: List[ASTNode] = []

        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            statements.append(self.parse_statement())

        self.expect(TokenType.RBRACE, "Expected '}' after block")
        return BlockNode(statements)

    def parse_if_statement(self) -> IfNode:
        """Parse if statement: if (expr) then stmt else stmt"""
        self.expect(TokenType.IF, "Expected 'if'")
        self.expect(TokenType.LPAREN, "Expected '(' after 'if'")
        condition = self.parse_expression()
        self.expect(TokenType.RPAREN, "Expected ')' after condition")
        self.expect(TokenType.THEN, "Expected 'then' after condition")
        then_branch = self.parse_statement()
        self.expect(TokenType.ELSE, "Expected 'else' after then branch")
        else_branch = self.parse_statement()
        return IfNode(condition, then_branch, else_branch)

    def parse_while_statement(self) -> WhileNode:
        """Parse while statement: while (expr) stmt"""
        self.expect(TokenType.WHILE, "Expected 'while'")
        self.expect(TokenType.LPAREN, "Expected '(' after 'while'")
        condition = self.parse_expression()
        self.expect(TokenType.RPAREN, "Expected ')' after condition")
        body = self.parse_statement()
        return WhileNode(condition, body)

    def parse_move_statement(self) -> MoveNode:
        self.expect(TokenType.MOVE, "Expected 'move'")
        return MoveNode(self.parse_direction())

    def parse_shoot_statement(self) -> ShootNode:
        self.expect(TokenType.SHOOT, "Expected 'shoot'")
        direction = self.parse_direction()
        expenditure = self.parse_expression()
        return ShootNode(direction, expenditure)

    def parse_assignment(self) -> AssignNode:
        name = self.expect(TokenType.IDENT, "Expected identifier")
        self.expect(TokenType.EQUAL, "Expected '=' after identifier")
        value = self.parse_expression()
        return AssignNode(name.lexeme, value)

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        match self.peek().type:
            case TokenType.IF:
                return self.parse_if_statement()

            case TokenType.WHILE:
                return self.parse_while_statement()

            case TokenType.LBRACE:
                return self.parse_block()

            case TokenType.DONE:
                self.advance()
                return DoneNode()

            case TokenType.MOVE:
                return self.parse_move_statement()

            case TokenType.SHOOT:
                return self.parse_shoot_statement()

            case TokenType.IDENT:
                return self.parse_assignment()

            case _:
                raise self.error(self.peek(), "Expected statement")

    def parse_program(self) -> List[ASTNode]:
        """Parse a complete program (one or more statements)."""
        statements: List[ASTNode] = []

        while not self.is_at_end():
            statements.append(self.parse_statement())

        if not statements:
            raise self.error(self.peek(), "Expected at least one statement")
        return statements

    def parse(self) -> List[ASTNode]:
        return self.parse_program()


def parse(tokens: List[Token]) -> List[ASTNode]:
    """Parse a token list into the program's top-level statements."""
    return Parser(tokens).parse()
