from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from errors import ScriptSyntaxError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json_str
from ast_viz import render_ast_dot, write_and_render

logger = logging.getLogger(__name__)

DEMO_PROGRAM = """
  var abc = "abc"
  alert(abc, 246)
"""


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse_text(text: str) -> ProgramNode:
    """Parse a source text into a Program AST."""
    return Parser(text).parse_program()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_json: bool = False,
    print_surface: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and print the requested views.

    Returns False when the program has a syntax error.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            logger.debug("lexed %d tokens", len(tokens))
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse_text(text)
        logger.debug("parsed %d statements", len(ast.body))
    except ScriptSyntaxError as e:
        print(f"Syntax Error: {e}")
        return False

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(ast))

    if print_json:
        print(ast_to_json_str(ast))

    if print_surface:
        print(PrettyPrinter.print_surface(ast))

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            rendered = write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {rendered}")
        except Exception as e:
            # fallback: write dot source
            logger.debug("graphviz render failed: %s", e)
            with open(f"{viz_path}.dot", "w", encoding="utf-8") as fh:
                fh.write(render_ast_dot(ast).source)
            print(f"Wrote DOT to {viz_path}.dot (render failed: {e})")

    return True


def interactive_mode(**options) -> None:
    """Run interactive parser REPL reading one program per line from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
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

        process_program(text, **options)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a varscript program and print its syntax tree"
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
    # printing options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print AST as JSON"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the program regenerated from the AST",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = dict(
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_json=args.print_json,
        print_surface=args.print_surface,
    )

    if args.interactive:
        interactive_mode(**options)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
        logger.debug("read %d characters from %s", len(text), args.file)
    else:
        logger.debug("no input given, running the demo program")
        text = DEMO_PROGRAM

    ok = process_program(
        text, viz_path=args.viz_ast, viz_format=args.viz_format, **options
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
