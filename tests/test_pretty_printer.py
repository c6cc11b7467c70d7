import pytest

from pretty_printer import PrettyPrinter
from ast_nodes import *
from tests.utils import parse_text, parse_single


PROGRAMS = [
    "x=1+2*3",
    "x=(1+2)*3",
    "x=2^3^2^1",
    "x=(2^3)^2",
    "x=1-(2-3)",
    "a=ally b=opponent c=nearby downright",
    "move up shoot down 5 done",
    "{ x=1 while(1) { if(1) then done else move up } }",
    "{ }",
    "if (hp % 2) then { } else { shoot upleft (hp - 1) / 2 }",
]


@pytest.mark.parametrize("src", PROGRAMS)
def test_program_rendering_reparses_to_same_ast(src):
    ast = parse_text(src)
    assert parse_text(PrettyPrinter.print_program(ast)) == ast


def test_print_surface_statements():
    assert PrettyPrinter.print_surface(parse_single("x=(1+2)*3")) == "x = (1 + 2) * 3"
    assert PrettyPrinter.print_surface(parse_single("shoot down 5")) == "shoot down 5"
    assert PrettyPrinter.print_surface(parse_single("x=nearby upleft")) == "x = nearby upleft"
    assert (
        PrettyPrinter.print_surface(parse_single("while(a){move up done}"))
        == "while (a) { move up done }"
    )


def test_print_program_one_statement_per_line():
    ast = parse_text("move up shoot down 5 done")
    assert PrettyPrinter.print_program(ast) == "move up\nshoot down 5\ndone"


def test_print_ast_tree_dump():
    stmt = parse_single("x = (1 + y) ^ nearby up")
    assert PrettyPrinter.print_ast(stmt) == "\n".join(
        [
            "Assign(x)",
            "  value: BinaryOp(^)",
            "    left: Paren",
            "      BinaryOp(+)",
            "        left: Number(1)",
            "        right: Variable(y)",
            "    right: Info(NEARBY, UP)",
        ]
    )


def test_print_ast_if_statement():
    stmt = parse_single("if (ally) then done else move down")
    assert PrettyPrinter.print_ast(stmt) == "\n".join(
        [
            "If",
            "    condition: Info(ALLY)",
            "    then: Done",
            "    else: Move(DOWN)",
        ]
    )


def test_print_program_ast_lists_top_level_statements():
    out = PrettyPrinter.print_program_ast(parse_text("done { }"))
    assert out.splitlines() == ["Program", "    stmt[0]: Done", "    stmt[1]: Block"]


def test_unknown_node_is_rejected():
    with pytest.raises(TypeError):
        PrettyPrinter.print_surface(object())
