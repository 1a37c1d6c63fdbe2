"""
Parser for the print-statement language.

Overview and approach:
- The grammar has one statement form, so instead of a recursive-descent
    parser this is a small state machine over the token list. In `DEFAULT`
    the current token's type is looked up in `self.state_map` to pick the
    statement handler; in `PRINT` the print handler checks the whole statement
    at once and hands it to `ASTNodeFactory`.

Key points:
- A print statement is a fixed-size window of tokens:
    `PRINT LPAREN STRING RPAREN END` (5 tokens), or `PRINT LPAREN RPAREN END`
    (4 tokens) when the argument is missing. A missing argument is not a
    syntax error. The factory receives a synthetic `UNKNOWN` token in the
    argument slot and builds a `PrintNode` without an argument, which the
    semantic pass then rejects.
- The token list itself is never modified.
- The window is bounds-checked before it is inspected, so truncated input
    raises `IncompletePrintError` rather than an `IndexError`.

Examples:
    - `print("hi");`   -> PrintNode(argument=StringNode("hi"))
    - `print()`        -> PrintNode(argument=None)
    - `print("hi")x`   -> lexical error before the parser ever runs
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Dict, List
from tokens import Token, TokenType
from ast_nodes import ASTNode, ASTNodeFactory
from errors import (
    ExpectedLParenError,
    ExpectedRParenError,
    ExpectedTerminatorError,
    IncompletePrintError,
    NoTokensError,
    UnexpectedTokenError,
)


class ParserState(Enum):
    DEFAULT = auto()
    PRINT = auto()


# Token counts of a print statement with and without its string argument.
PRINT_WIDTH = 5
PRINT_WIDTH_NO_ARG = 4


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.state = ParserState.DEFAULT
        self.nodes: List[ASTNode] = []

        # Statement heads and the state that handles them.
        self.state_map: Dict[TokenType, ParserState] = {
            TokenType.PRINT: ParserState.PRINT,
        }

    def peek(self, offset: int = 0) -> Token:
        """Return the token `offset` places after the cursor."""
        return self.tokens[self.pos + offset]

    def remaining(self) -> int:
        return len(self.tokens) - self.pos

    def expect(self, expected_type: TokenType, offset: int, error) -> Token:
        """Check the token at `offset` from the cursor, raising `error` if it differs."""
        token = self.peek(offset)
        if token.type != expected_type:
            raise error(self.pos + offset, token)
        return token

    def parse(self) -> List[ASTNode]:
        """Parse the whole token list into a list of statement nodes."""
        if not self.tokens:
            raise NoTokensError()

        while self.pos < len(self.tokens):
            match self.state:
                case ParserState.DEFAULT:
                    token = self.peek()
                    next_state = self.state_map.get(token.type)
                    if next_state is None:
                        raise UnexpectedTokenError(token, self.pos)
                    self.state = next_state

                case ParserState.PRINT:
                    self.parse_print_statement()

        return self.nodes

    def parse_print_statement(self) -> None:
        """Parse one print statement starting at the cursor."""
        has_argument = (
            self.remaining() > 2 and self.peek(2).type == TokenType.STRING
        )
        width = PRINT_WIDTH if has_argument else PRINT_WIDTH_NO_ARG
        if self.remaining() < width:
            raise IncompletePrintError(self.pos, self.peek())

        head = self.peek()
        self.expect(TokenType.LPAREN, 1, ExpectedLParenError)

        if has_argument:
            argument = self.peek(2)
        else:
            # Stand-in for the missing literal; only the factory sees it.
            argument = Token(TokenType.UNKNOWN, "", head.line, head.column)

        self.expect(TokenType.RPAREN, width - 2, ExpectedRParenError)
        self.expect(TokenType.END, width - 1, ExpectedTerminatorError)

        self.nodes.append(ASTNodeFactory.create_node([head, argument]))

        self.pos += width
        self.state = ParserState.DEFAULT
