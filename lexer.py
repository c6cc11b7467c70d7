"""
Lexer for the strategy language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (commands such as `move`, `shoot`, `done`, control
    flow `if`/`then`/`else`/`while`, the info queries `ally`, `opponent`,
    `nearby` and the six direction words), identifiers, integer literals and
    the single-character symbols `+ - * / % ^ = ( ) { }`. Whitespace and
    line comments starting with `#` are skipped.

Examples:
    Input:  "move up shoot down 5 done"
    Tokens: [MOVE, UP, SHOOT, DOWN, NUMBER(5), DONE, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; it never backtracks.
- A letter-initial run is scanned to its maximal length before the keyword
    lookup, so `then1` and `if1` are identifiers, not keywords.
- Integer literals must fit in a signed 64-bit integer.
- The first unrecognized character raises a `LexError`; no partial token
    list is ever returned.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, KEYWORDS, SYMBOLS
from errors import LexError

MAX_INT64 = 2**63 - 1


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def error(
        self,
        message: str,
        lexeme: Optional[str] = None,
        pos: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> LexError:
        return LexError(
            message,
            lexeme if lexeme is not None else (self.current_char or ""),
            self.pos if pos is None else pos,
            self.line if line is None else line,
            self.column if column is None else column,
        )

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_comment(self) -> None:
        """Skip a `#` comment up to, but not including, the next newline."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

    def number(self) -> Token:
        """Scan a run of decimal digits into a NUMBER token."""
        start, line, column = self.pos, self.line, self.column
        result = []

        while self.current_char is not None and self.current_char.isdecimal():
            result.append(self.current_char)
            self.advance()

        lexeme = "".join(result)
        # Normalize to ASCII digits and compare lengths first; int() refuses
        # very long digit strings.
        digits = "".join(str(int(ch)) for ch in result).lstrip("0") or "0"
        if len(digits) > len(str(MAX_INT64)) or int(digits) > MAX_INT64:
            raise self.error(
                "Number out of range for 64-bit integer", lexeme, start, line, column
            )
        return Token(TokenType.NUMBER, lexeme, int(digits), start, line, column)

    def word(self) -> Token:
        """Scan a letter-initial run and classify it as keyword or identifier."""
        start, line, column = self.pos, self.line, self.column
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and (
            self.current_char.isalpha() or self.current_char.isdecimal()
        ):
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        token_type = KEYWORDS.get(text, TokenType.IDENT)
        return Token(token_type, text, None, start, line, column)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char == "#":
                self.skip_comment()
                continue

            if self.current_char.isdecimal():
                return self.number()

            if self.current_char.isalpha():
                return self.word()

            symbol = SYMBOLS.get(self.current_char)
            if symbol is not None:
                token = Token(
                    symbol, self.current_char, None, self.pos, self.line, self.column
                )
                self.advance()
                return token

            raise self.error(f"Unexpected character: {self.current_char}")

        return Token(TokenType.EOF, "", None, self.pos, self.line, self.column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize `source`, ending with a single EOF token at `len(source)`."""
    return Lexer(source).tokenize()
