"""Error types raised by the pipeline stages.

Each stage raises its own family so callers can tell where a program was
rejected:

- `LexicalError`: malformed characters in the source text.
- `ParseError`: a token sequence that is not a sequence of print statements.
- `SemanticError`: a print statement without a string argument.
- `OptimizationError`: a print statement whose argument is empty.

All of them derive from `PrintScriptError` and carry a single readable
message. None of them is recovered from locally.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class PrintScriptError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Lexical errors
class LexicalError(PrintScriptError):
    def __init__(
        self,
        message: str,
        position: int,
        source: str,
        line: int = 0,
        column: int = 0,
    ):
        self.position = position
        self.line = line
        self.column = column
        self.context = context_window(source, position)
        super().__init__(
            f"Lexical error at line {line}, column {column}: {message} "
            f"at position {position} in input: '{self.context}'"
        )


class UnterminatedStringError(LexicalError):
    def __init__(self, position: int, source: str, line: int = 0, column: int = 0):
        super().__init__(
            "unclosed string literal. Did you forget to close it with a '\"'?",
            position,
            source,
            line,
            column,
        )


class UnexpectedCharacterError(LexicalError):
    def __init__(
        self, char: str, position: int, source: str, line: int = 0, column: int = 0
    ):
        self.char = char
        super().__init__(
            f"unexpected character {char!r}", position, source, line, column
        )


class UnknownTokenError(LexicalError):
    def __init__(
        self, word: str, position: int, source: str, line: int = 0, column: int = 0
    ):
        self.word = word
        super().__init__(f"unexpected token '{word}'", position, source, line, column)


def context_window(source: str, position: int, before: int = 5, width: int = 10) -> str:
    """Return a short slice of `source` around `position` for error messages."""
    start = max(0, position - before)
    return source[start : start + width]


# Syntax errors
class ParseError(PrintScriptError):
    def __init__(
        self, message: str, index: Optional[int] = None, token: Optional[Token] = None
    ):
        self.index = index
        self.token = token
        super().__init__(f"Syntax error: {message}")


class NoTokensError(ParseError):
    def __init__(self):
        super().__init__("no tokens to parse")


class UnrecognizedInstructionError(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"unrecognized instruction '{token.lexeme}'", token=token)


class UnexpectedTokenError(ParseError):
    def __init__(self, token: Token, index: int):
        super().__init__(
            f"unexpected token '{token.value}' at position {index}", index, token
        )


class IncompletePrintError(ParseError):
    def __init__(self, index: int, token: Optional[Token] = None):
        super().__init__(
            f"incomplete print statement at position {index}", index, token
        )


class ExpectedLParenError(ParseError):
    def __init__(self, index: int, token: Token):
        super().__init__(
            f"expected '(' after 'print' keyword at position {index}, got {token.type}",
            index,
            token,
        )


class ExpectedRParenError(ParseError):
    def __init__(self, index: int, token: Token):
        super().__init__(
            f"expected ')' after string literal at position {index}, got {token.type}",
            index,
            token,
        )


class ExpectedTerminatorError(ParseError):
    def __init__(self, index: int, token: Token):
        super().__init__(
            "expected newline or semicolon after print "
            f"at position {index}, got {token.type}",
            index,
            token,
        )


# Pass errors
class SemanticError(PrintScriptError):
    def __init__(self, message: str):
        super().__init__(f"Semantic error: {message}")


class MissingArgumentError(SemanticError):
    def __init__(self, line: int = 0):
        self.line = line
        where = f" (line {line})" if line else ""
        super().__init__(f"PRINT requires a string argument{where}.")


class OptimizationError(PrintScriptError):
    def __init__(self, message: str):
        super().__init__(f"Optimization error: {message}")


class EmptyStringArgumentError(OptimizationError):
    def __init__(self, line: int = 0):
        self.line = line
        where = f" (line {line})" if line else ""
        super().__init__(f"PRINT statement with empty string{where}.")
