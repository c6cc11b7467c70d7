from lexer import Lexer
from parser import Parser


def parse_text(text: str):
    """Convenience: lex+parse a source text into a list of statements."""
    return Parser(Lexer(text).tokenize()).parse()


def parse_single(text: str):
    """Parse a program expected to hold exactly one top-level statement."""
    statements = parse_text(text)
    assert len(statements) == 1
    return statements[0]
