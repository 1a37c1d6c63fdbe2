"""AST node definitions for the print-statement language.

This module defines the AST node dataclasses built by the parser and read by
the visitor passes, plus the `ASTNodeFactory` that turns a statement's tokens
into a node. The `NodeType` enum identifies node kinds and is used by the
pretty-printer and the JSON/Graphviz exporters.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the source `line`/`column` of the statement.
- The node set is closed: a `PrintNode` owns at most one `StringNode`. The
    argument is `None` only when the parser found no string literal between
    the parentheses; the semantic pass rejects such nodes.
- Nodes are never modified after the factory builds them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, Optional
from tokens import Token, TokenType
from errors import UnrecognizedInstructionError

if TYPE_CHECKING:
    from visitor import Visitor


class NodeType(Enum):
    STRING = auto()
    PRINT = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    # Source position of the statement, for diagnostics only.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit(self)


@dataclass
class StringNode(ASTNode):
    type: NodeType = NodeType.STRING
    value: str = ""


@dataclass
class PrintNode(ASTNode):
    type: NodeType = NodeType.PRINT
    argument: Optional[StringNode] = None


class ASTNodeFactory:
    """Builds AST nodes from the tokens of one statement."""

    @staticmethod
    def create_node(tokens: List[Token]) -> ASTNode:
        """Create a node from `[instruction, argument]`.

        Only the instruction token's type is used to pick the node kind. An
        `UNKNOWN` argument token means the statement had no argument.
        """
        head = tokens[0]

        match head.type:
            case TokenType.PRINT:
                argument = tokens[1]
                string_node = (
                    None
                    if argument.type == TokenType.UNKNOWN
                    else ASTNodeFactory.create_string_node(argument)
                )
                return PrintNode(
                    line=head.line, column=head.column, argument=string_node
                )
            case _:
                raise UnrecognizedInstructionError(head)

    @staticmethod
    def create_string_node(token: Token) -> StringNode:
        return StringNode(line=token.line, column=token.column, value=token.value)
