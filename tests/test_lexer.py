import pytest

from main import lex
from lexer import tokenize
from errors import LexError, StrategySyntaxError
from tokens import Token, TokenType


def _types(src):
    return [t.type for t in lex(src)]


def test_lexer_recognizes_commands_and_directions():
    assert _types("move up shoot down 5 done") == [
        TokenType.MOVE,
        TokenType.UP,
        TokenType.SHOOT,
        TokenType.DOWN,
        TokenType.NUMBER,
        TokenType.DONE,
        TokenType.EOF,
    ]


def test_lexer_recognizes_all_symbols():
    assert _types("+-*/%^=(){}") == [
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.STAR,
        TokenType.SLASH,
        TokenType.PERCENT,
        TokenType.CARET,
        TokenType.EQUAL,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.EOF,
    ]


def test_lexer_number_value_and_position():
    tokens = lex("x = 42")
    num = tokens[2]
    assert num == Token(TokenType.NUMBER, "42", 42, 4)
    assert num.line == 1 and num.column == 5


def test_empty_input_is_only_eof():
    tokens = tokenize("")
    assert tokens == [Token(TokenType.EOF, "", None, 0)]


def test_eof_position_is_input_length():
    src = "move up  # trailing comment"
    tokens = lex(src)
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-1].pos == len(src)


def test_comments_and_whitespace_are_skipped():
    src = "# header\n\tx=1 # set x\n  done\n"
    assert _types(src) == [
        TokenType.IDENT,
        TokenType.EQUAL,
        TokenType.NUMBER,
        TokenType.DONE,
        TokenType.EOF,
    ]


def test_positions_are_non_decreasing():
    tokens = lex("if (a) then { move up } else shoot downleft ally + 3")
    positions = [t.pos for t in tokens]
    assert positions == sorted(positions)


def test_line_and_column_tracking():
    tokens = lex("x=1\n  move up")
    move = tokens[3]
    assert move.type == TokenType.MOVE
    assert (move.line, move.column, move.pos) == (2, 3, 6)


@pytest.mark.parametrize("word", ["then1", "if1", "upleftt", "Move", "nearbyx"])
def test_keyword_prefixes_are_identifiers(word):
    tokens = lex(word)
    assert tokens[0].type == TokenType.IDENT
    assert tokens[0].lexeme == word


def test_keywords_are_exact_matches():
    assert _types("ally opponent nearby upright downright") == [
        TokenType.ALLY,
        TokenType.OPPONENT,
        TokenType.NEARBY,
        TokenType.UPRIGHT,
        TokenType.DOWNRIGHT,
        TokenType.EOF,
    ]


def test_digits_then_letters_split_into_two_tokens():
    tokens = lex("12ab")
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.IDENT, TokenType.EOF]
    assert tokens[1].pos == 2


def test_largest_64_bit_literal_is_accepted():
    tokens = lex("9223372036854775807")
    assert tokens[0].value == 2**63 - 1


def test_number_out_of_range():
    with pytest.raises(LexError) as excinfo:
        lex("x = 9223372036854775808")
    err = excinfo.value
    assert "out of range" in err.message
    assert err.lexeme == "9223372036854775808"
    assert err.position == 4


@pytest.mark.parametrize(
    "src, pos, char",
    [
        ("x=@", 2, "@"),
        ("x=1;", 3, ";"),
        ("x = 1.5", 5, "."),
        ("_x=1", 0, "_"),
    ],
)
def test_unexpected_character(src, pos, char):
    with pytest.raises(LexError) as excinfo:
        lex(src)
    assert excinfo.value.position == pos
    assert excinfo.value.lexeme == char
    assert "Unexpected character" in excinfo.value.message


def test_lex_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        lex("$")
    with pytest.raises(StrategySyntaxError):
        lex("$")


def test_lex_error_message_format():
    with pytest.raises(LexError) as excinfo:
        lex("x=1\ny=@")
    assert str(excinfo.value) == (
        "Lexical error at line 2, column 3 (position 6) near '@': Unexpected character: @"
    )


def test_very_long_literal_is_out_of_range():
    digits = "9" * 5000
    with pytest.raises(LexError) as excinfo:
        lex("x = " + digits)
    assert "out of range" in excinfo.value.message
    assert excinfo.value.lexeme == digits
    assert excinfo.value.position == 4


def test_leading_zeros_do_not_count_toward_range():
    tokens = lex("0" * 40 + "7")
    assert tokens[0].value == 7


@pytest.mark.parametrize("space", ["\u00a0", "\u2003", "\u3000", "\u000b"])
def test_unicode_whitespace_is_skipped(space):
    assert _types(f"move{space}up") == [TokenType.MOVE, TokenType.UP, TokenType.EOF]


@pytest.mark.parametrize("src, value", [("x=١٢", 12), ("x=٠٧", 7), ("x=１２３", 123)])
def test_non_ascii_decimal_digits(src, value):
    tokens = lex(src)
    assert tokens[2].type == TokenType.NUMBER
    assert tokens[2].lexeme == src[2:]
    assert tokens[2].value == value
