"""Token definitions for the strategy lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass holding a token type, the
lexeme it was scanned from, an optional integer value and its source
position. Tokens are the atomic units produced by the lexer and consumed by
the parser.

The keyword and symbol tables are read-only mappings built once at import.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    # Symbols
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()
    EQUAL = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Literals
    NUMBER = auto()
    IDENT = auto()

    # Keywords
    DONE = auto()
    MOVE = auto()
    SHOOT = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    WHILE = auto()
    ALLY = auto()
    OPPONENT = auto()
    NEARBY = auto()

    # Directions
    UP = auto()
    DOWN = auto()
    UPLEFT = auto()
    UPRIGHT = auto()
    DOWNLEFT = auto()
    DOWNRIGHT = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "done": TokenType.DONE,
        "move": TokenType.MOVE,
        "shoot": TokenType.SHOOT,
        "if": TokenType.IF,
        "then": TokenType.THEN,
        "else": TokenType.ELSE,
        "while": TokenType.WHILE,
        "ally": TokenType.ALLY,
        "opponent": TokenType.OPPONENT,
        "nearby": TokenType.NEARBY,
        "up": TokenType.UP,
        "down": TokenType.DOWN,
        "upleft": TokenType.UPLEFT,
        "upright": TokenType.UPRIGHT,
        "downleft": TokenType.DOWNLEFT,
        "downright": TokenType.DOWNRIGHT,
    }
)

SYMBOLS: Mapping[str, TokenType] = MappingProxyType(
    {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.STAR,
        "/": TokenType.SLASH,
        "%": TokenType.PERCENT,
        "^": TokenType.CARET,
        "=": TokenType.EQUAL,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }
)


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: Optional[int] = None
    pos: int = 0
    # Informational only; two tokens scanned from the same offset are equal.
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type}, {self.lexeme!r}, value={self.value}, pos={self.pos})"
        return f"Token({self.type}, {self.lexeme!r}, pos={self.pos})"
