"""Token definitions for the lexer.

This module defines the `TokenType` enum for the token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type and its
lexeme. Tokens are the atomic units produced by the lexer and consumed by the
parser.

`UNKNOWN` is never emitted by the lexer. The parser uses it as a stand-in for
a missing string argument when it hands a statement to the node factory.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field


class TokenType(Enum):
    # Keywords
    PRINT = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    STRING = auto()

    # Statement terminator (`;` or a line break)
    END = auto()

    # Special
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    type: TokenType
    value: str = ""
    # Source position, for diagnostics only.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    offset: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if not self.value:
            return str(self.type)
        return self.value
