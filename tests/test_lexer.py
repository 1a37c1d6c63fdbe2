import pytest
from main import lex
from lexer import Lexer, normalize_newlines
from tokens import Token, TokenType
from errors import (
    LexicalError,
    UnexpectedCharacterError,
    UnknownTokenError,
    UnterminatedStringError,
)


def _types(tokens):
    return [t.type for t in tokens]


def test_lexer_recognizes_print_statement():
    tokens = lex('print("hello");')
    assert tokens == [
        Token(TokenType.PRINT, "print"),
        Token(TokenType.LPAREN, "("),
        Token(TokenType.STRING, "hello"),
        Token(TokenType.RPAREN, ")"),
        Token(TokenType.END, ";"),
    ]


def test_lexer_appends_end_when_terminator_missing():
    tokens = lex('print("hello")')
    assert tokens[-1] == Token(TokenType.END, "")
    assert len(tokens) == 5


def test_lexer_empty_input_gives_no_tokens():
    assert lex("") == []
    assert lex("  \t\n\n") == []


def test_lexer_newline_is_terminator():
    tokens = lex('print("a")\nprint("b")\n')
    assert _types(tokens) == [
        TokenType.PRINT,
        TokenType.LPAREN,
        TokenType.STRING,
        TokenType.RPAREN,
        TokenType.END,
    ] * 2
    assert tokens[4].value == "\\n"


def test_lexer_collapses_blank_lines():
    tokens = lex('print("a")\n\n   \n\t\nprint("b");\n\n')
    ends = [t for t in tokens if t.type == TokenType.END]
    assert len(ends) == 2


def test_lexer_semicolon_then_newline_is_single_end():
    tokens = lex('print("a");\nprint("b");\n')
    assert _types(tokens).count(TokenType.END) == 2


def test_lexer_string_keeps_contents_verbatim():
    tokens = lex('print("  hi; (there) print\t")')
    assert tokens[2] == Token(TokenType.STRING, "  hi; (there) print\t")


def test_lexer_whitespace_between_tokens_is_ignored():
    assert lex('  print ( "x" ) ;') == lex('print("x");')


def test_lexer_normalizes_crlf_and_cr():
    expected = lex('print("a")\nprint("b")\n')
    assert lex('print("a")\r\nprint("b")\r\n') == expected
    assert lex('print("a")\rprint("b")\r') == expected


def test_normalize_newlines_is_idempotent():
    src = 'print("a")\r\n\r\rprint("b")\r'
    once = normalize_newlines(src)
    assert normalize_newlines(once) == once
    assert Lexer(once).tokenize() == Lexer(src).tokenize()


def test_lexer_unterminated_string():
    with pytest.raises(UnterminatedStringError) as exc:
        lex('print("unterminated')
    err = exc.value
    assert err.position == len('print("unterminated')
    assert err.context == "nated"
    assert isinstance(err, LexicalError)


def test_lexer_trailing_quote_is_unterminated():
    with pytest.raises(UnterminatedStringError):
        lex('print("')


def test_lexer_unexpected_character():
    with pytest.raises(UnexpectedCharacterError) as exc:
        lex('print("a") + 1')
    assert exc.value.char == "+"
    assert exc.value.position == 11
    assert exc.value.context == '"a") + 1'


def test_lexer_unknown_keyword():
    with pytest.raises(UnknownTokenError) as exc:
        lex('echo("a");')
    assert exc.value.word == "echo"
    assert exc.value.position == 4
    # Line and column point at the same character as the offset.
    assert (exc.value.line, exc.value.column) == (1, 5)
    assert "line 1, column 5" in str(exc.value)


def test_lexer_unknown_keyword_at_end_of_input():
    with pytest.raises(UnknownTokenError) as exc:
        lex('print("a");\nfoo')
    assert exc.value.position == len('print("a");\nfoo')
    assert (exc.value.line, exc.value.column) == (2, 4)


def test_lexer_tracks_line_and_column():
    tokens = lex('print("a")\n  print("b")')
    second = tokens[5]
    assert second.type == TokenType.PRINT
    assert (second.line, second.column) == (2, 3)
    assert tokens[7].line == 2


def test_lexer_error_message_mentions_position():
    with pytest.raises(UnexpectedCharacterError) as exc:
        lex("print(1)")
    assert "line 1, column 7" in str(exc.value)
