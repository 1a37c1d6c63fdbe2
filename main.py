from __future__ import annotations
import json
import sys
from typing import List, Optional, TextIO

import graphviz

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from visitor import default_passes, run_passes
from errors import PrintScriptError
from pretty_printer import PrettyPrinter
from ast_json import program_to_json
from ast_viz import write_and_render

DEFAULT_SOURCE = "input.txt"


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> List[ASTNode]:
    """Parse tokens into a list of statement nodes."""
    parser = Parser(tokens)
    return parser.parse()


def read_source(path: str) -> str:
    """Read a program from disk."""
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def execute(nodes: List[ASTNode], stream: Optional[TextIO] = None) -> None:
    """Check and run a parsed program."""
    run_passes(nodes, default_passes(stream))


def run_source(text: str, stream: Optional[TextIO] = None) -> List[ASTNode]:
    """Lex, parse, check and run `text`; returns the parsed nodes."""
    nodes = parse_tokens(lex(text))
    execute(nodes, stream)
    return nodes


def process_program(
    text: str,
    *,
    print_tokens: bool = True,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse, run the passes and optionally print stages.

    Returns True when the program ran to completion. Errors are reported on
    stderr.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(PrettyPrinter.print_tokens(tokens))
            print()

        nodes = parse_tokens(tokens)
        if print_ast:
            print(PrettyPrinter.print_program(nodes))
            print()

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(program_to_json(nodes), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=sys.stderr)

        if viz_path:
            try:
                write_and_render(nodes, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except (
                graphviz.ExecutableNotFound,
                graphviz.CalledProcessError,
                OSError,
                ValueError,
            ) as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}", file=sys.stderr)

        execute(nodes)

    except PrintScriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False

    return True


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> None:
    """Run an interactive REPL reading one program per line from stdin."""
    print("\nInteractive Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\n>>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Run a print-statement program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file",
        "-f",
        dest="file",
        help=f"Path to source file to run (default: {DEFAULT_SOURCE})",
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
        "--no-tokens",
        dest="print_tokens",
        action="store_false",
        help="Do not print the token list before running",
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
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
        choices=sorted(graphviz.FORMATS),
        metavar="FORMAT",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    # default behavior: show tokens, then run
    parser.set_defaults(
        file=DEFAULT_SOURCE,
        print_tokens=True,
        print_ast=False,
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    try:
        text = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read file: {args.file} ({e})", file=sys.stderr)
        return 1

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
