from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_tokens(tokens):
    """Parse a list of tokens into a list of statement nodes."""
    return Parser(tokens).parse()


def parse_text(text: str):
    """Convenience: lex+parse a source text into statement nodes."""
    return Parser(Lexer(text).tokenize()).parse()
