"""Error types raised by the lexer and parser.

Both error kinds derive from the built-in `SyntaxError`, so callers that
only care whether the input is a valid program can catch that. Each error
records the human-readable message, the offending lexeme and the 0-based
source offset where the problem was detected, plus a 1-based line/column
for display.
"""

from __future__ import annotations


class StrategySyntaxError(SyntaxError):
    kind = "Syntax"

    def __init__(
        self,
        message: str,
        lexeme: str = "",
        position: int = 0,
        line: int = 1,
        column: int = 1,
    ):
        self.message = message
        self.lexeme = lexeme
        self.position = position
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        return (
            f"{self.kind} error at line {self.line}, column {self.column} "
            f"(position {self.position}) near '{self.lexeme}': {self.message}"
        )

    def __str__(self) -> str:
        # SyntaxError.__str__ appends filename/lineno details we never set.
        return self._format()


class LexError(StrategySyntaxError):
    """Malformed or unrecognized input characters."""

    kind = "Lexical"


class ParseError(StrategySyntaxError):
    """Grammar violation detected while building the AST."""

    kind = "Syntax"
