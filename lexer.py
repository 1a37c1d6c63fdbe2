"""
Lexer for the print-statement language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes the `print` keyword, parentheses, double-quoted string
    literals and statement terminators (`;` or a line break). Spaces and tabs
    between tokens are skipped.

Examples:
    Input:  'print("hello");'
    Tokens: [PRINT, LPAREN, STRING('hello'), RPAREN, END]

Implementation notes:
- Line endings are normalized first (`\\r\\n` and lone `\\r` become `\\n`), so
    the scanner only ever sees `\\n` as a line terminator.
- The scanner has two states. In `DEFAULT`, letters accumulate into a pending
    word which is flushed as a keyword token when any other character shows
    up. A `"` switches to `STRING`, which consumes characters verbatim up to
    the closing quote. There are no escape sequences.
- Consecutive line breaks collapse into a single END token, and a non-empty
    token list always ends with END.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Dict, List, Tuple
from tokens import Token, TokenType
from errors import UnexpectedCharacterError, UnknownTokenError, UnterminatedStringError


class LexerState(Enum):
    DEFAULT = auto()
    STRING = auto()


def normalize_newlines(text: str) -> str:
    """Replace `\\r\\n` and lone `\\r` with `\\n`."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class Lexer:
    def __init__(self, text: str):
        self.text = normalize_newlines(text)
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None
        self.state = LexerState.DEFAULT

        # Pending letters and the position where they started.
        self.word: List[str] = []
        self.word_start: Tuple[int, int, int] = (0, 1, 1)

        self.keywords: Dict[str, TokenType] = {
            "print": TokenType.PRINT,
        }
        self.special_characters: Dict[str, TokenType] = {
            "(": TokenType.LPAREN,
            ")": TokenType.RPAREN,
            ";": TokenType.END,
        }

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def _token(self, token_type: TokenType, value: str = "") -> Token:
        return Token(token_type, value, self.line, self.column, self.pos)

    def add_keyword_token(self, tokens: List[Token]) -> None:
        """Flush the pending word as a keyword token."""
        if not self.word:
            return

        word = "".join(self.word)
        offset, line, column = self.word_start
        self.word = []

        token_type = self.keywords.get(word)
        if token_type is None:
            # Reported at the character that ended the word, or at the end of
            # input when the word runs up to it.
            raise UnknownTokenError(
                word, self.pos, self.text, self.line, self.column
            )
        tokens.append(Token(token_type, word, line, column, offset))

    def handle_special_character(self, tokens: List[Token]) -> None:
        """Classify a non-letter character in the DEFAULT state."""
        self.add_keyword_token(tokens)
        char = self.current_char

        if char in self.special_characters:
            tokens.append(self._token(self.special_characters[char], char))
        elif char == "\n":
            # Blank lines and a line break right after `;` add nothing.
            if tokens and tokens[-1].type != TokenType.END:
                tokens.append(self._token(TokenType.END, "\\n"))
        elif char == '"':
            self.state = LexerState.STRING
        else:
            raise UnexpectedCharacterError(
                char, self.pos, self.text, self.line, self.column
            )
        self.advance()

    def string_literal(self) -> Token:
        """Consume characters up to the closing quote."""
        # The opening quote was consumed already.
        line, column, offset = self.line, self.column - 1, self.pos - 1
        result = []
        while self.current_char is not None and self.current_char != '"':
            result.append(self.current_char)
            self.advance()

        if self.current_char is None:
            raise UnterminatedStringError(
                len(self.text), self.text, self.line, self.column
            )

        self.advance()  # closing quote
        return Token(TokenType.STRING, "".join(result), line, column, offset)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens: List[Token] = []

        while self.current_char is not None:
            match self.state:
                case LexerState.DEFAULT:
                    if self.current_char in (" ", "\t"):
                        self.advance()
                    elif self.current_char.isalpha():
                        if not self.word:
                            self.word_start = (self.pos, self.line, self.column)
                        self.word.append(self.current_char)
                        self.advance()
                    else:
                        self.handle_special_character(tokens)

                case LexerState.STRING:
                    tokens.append(self.string_literal())
                    self.state = LexerState.DEFAULT

        self.add_keyword_token(tokens)

        # A `"` as the very last character leaves us inside a string.
        if self.state != LexerState.DEFAULT:
            raise UnterminatedStringError(
                len(self.text), self.text, self.line, self.column
            )

        if tokens and tokens[-1].type != TokenType.END:
            tokens.append(self._token(TokenType.END, ""))

        return tokens

