"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST node into a readable multi-line string, `print_program(nodes)` for a whole
parsed program, and `print_tokens(tokens)` for the token dump shown before a
program runs. The printer is intended for debugging, tests and development.

Examples:
    PrettyPrinter.print_program(nodes)
    PrettyPrinter.print_tokens(Lexer(src).tokenize())
"""

from __future__ import annotations
from typing import List
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token]) -> str:
        """Render one `<TYPE> <value>` line per token."""
        return "\n".join(f"{token.type} {token.value}" for token in tokens)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        match node:
            case StringNode(value=v):
                lines.append(f"{indent_str}{prefix}String({v!r})")

            case PrintNode(argument=None):
                lines.append(f"{indent_str}{prefix}Print")
                lines.append(f"{indent_str}  argument: <missing>")

            case PrintNode(argument=arg):
                lines.append(f"{indent_str}{prefix}Print")
                lines.append(PrettyPrinter.print_ast(arg, indent + 2, "argument: "))

            case _:
                raise TypeError(f"Cannot print node type: {type(node).__name__}")

        return "\n".join(lines)

    @staticmethod
    def print_program(nodes: List[ASTNode]) -> str:
        lines = ["Program"]
        for i, node in enumerate(nodes):
            lines.append(PrettyPrinter.print_ast(node, 4, f"stmt[{i}]: "))
        return "\n".join(lines)
