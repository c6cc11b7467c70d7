from __future__ import annotations
import argparse
import json
import os
import sys
from typing import List, Optional, Sequence

import graphviz

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from errors import StrategySyntaxError
from pretty_printer import PrettyPrinter
from ast_json import program_to_json
from ast_viz import render_ast_dot, write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> List[ASTNode]:
    """Parse tokens into a list of top-level statements."""
    parser = Parser(tokens)
    return parser.parse()


def parse_text(text: str) -> List[ASTNode]:
    """Convenience: lex+parse a source text into an AST."""
    return parse_tokens(lex(text))


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and optionally print each stage.

    Returns True when the program parsed. Lexical and syntax errors are
    reported on stdout and yield False.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse_tokens(tokens)
    except StrategySyntaxError as e:
        print(f"✗ {e}")
        return False

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_program_ast(ast))

    if print_surface:
        print("\nSource:")
        print(PrettyPrinter.print_program(ast))

    if print_json:
        print("\nJSON:")
        print(json.dumps(program_to_json(ast), indent=2))

    if viz_path:
        try:
            out = write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {out}")
        except (graphviz.ExecutableNotFound, graphviz.CalledProcessError) as e:
            # Rendering needs the Graphviz binaries; fall back to the DOT source.
            os.makedirs(os.path.dirname(viz_path) or ".", exist_ok=True)
            with open(f"{viz_path}.dot", "w", encoding="utf-8") as fh:
                fh.write(render_ast_dot(ast).source)
            print(f"Wrote DOT to {viz_path}.dot (render failed: {e})")

    return True


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    print_json: bool = False,
) -> None:
    """Run interactive parser REPL reading programs from stdin."""
    print("\nInteractive Strategy Parser (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(
            text,
            print_tokens=print_tokens,
            print_ast=print_ast,
            print_surface=print_surface,
            print_json=print_json,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a strategy program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the program re-rendered as source text",
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    # visualization options
    parser.add_argument(
        "--viz",
        dest="viz_path",
        default=None,
        help="Write a Graphviz rendering of the AST to this path (no extension)",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        choices=("svg", "png", "pdf"),
        default="svg",
        help="Output format for --viz",
    )

    parser.set_defaults(
        print_tokens=False,
        print_ast=True,
        print_surface=False,
        print_json=False,
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_surface=args.print_surface,
            print_json=args.print_json,
        )
        return 0

    if not args.file:
        parser.print_help()
        return 0

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        print(f"Failed to read file {args.file}: {e}")
        return 1

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
        print_json=args.print_json,
        viz_path=args.viz_path,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
