import pytest

import json_errors as je
from lexer import Token, TokenKind, tokenize


def kinds(text):
    return [tok.kind for tok in tokenize(text)]


def test_punctuation_tokens():
    assert kinds(",{}[]:") == [
        TokenKind.COMMA,
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COLON,
    ]


@pytest.mark.parametrize("text,kind", [
    ("null", TokenKind.NULL),
    ("true", TokenKind.TRUE),
    ("false", TokenKind.FALSE),
])
def test_literal_yields_single_token(text, kind):
    assert tokenize(text) == [Token(kind, None, 0)]


def test_typo_literal_rejected():
    with pytest.raises(je.UnfinishedLiteralValue):
        tokenize("nolll")


def test_extra_letter_after_literal_rejected():
    with pytest.raises(je.CharNotRecognized):
        tokenize("nulll")


def test_truncated_literal_is_eof():
    with pytest.raises(je.UnexpectedEof) as ei:
        tokenize("[tru")
    assert ei.value.position == 4


def test_literal_matched_at_cursor_not_later():
    # "nul" must not be satisfied by the "null" further along
    with pytest.raises(je.UnfinishedLiteralValue):
        tokenize('nul, null')


@pytest.mark.parametrize("text,expected", [
    ("123", 123.0),
    ("123.9", 123.9),
    ("-123.9", -123.9),
    ("0", 0.0),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
    ("-4e+1", -40.0),
])
def test_number_values(text, expected):
    (tok,) = tokenize(text)
    assert tok.kind is TokenKind.NUMBER
    assert tok.value == expected


def test_second_decimal_point_ends_number():
    with pytest.raises(je.CharNotRecognized) as ei:
        tokenize("1.2.3")
    assert ei.value.position == 3


@pytest.mark.parametrize("text", ["1.", "1e", "1e+", "-2.e5"])
def test_malformed_numbers(text):
    with pytest.raises(je.ParseNumberError):
        tokenize(text)


def test_lone_minus_not_recognized():
    with pytest.raises(je.CharNotRecognized):
        tokenize("- 1")


def test_string_keeps_raw_escapes():
    (tok,) = tokenize(r'"a\"b\\nA"')
    assert tok.kind is TokenKind.STRING
    assert tok.value == r'a\"b\\nA'


def test_string_with_escaped_backslash_before_quote_closes():
    assert tokenize(r'"x\\" 1') == [
        Token(TokenKind.STRING, "x\\\\", 0),
        Token(TokenKind.NUMBER, 1.0, 6),
    ]


def test_unclosed_string():
    with pytest.raises(je.UnclosedQuotes) as ei:
        tokenize('["abc')
    assert ei.value.position == 1


def test_escaped_quote_does_not_close_string():
    with pytest.raises(je.UnclosedQuotes):
        tokenize(r'"abc\"')


def test_non_ascii_string_is_not_split():
    (tok,) = tokenize('"olá_こんにちは 💩"')
    assert tok.value == "olá_こんにちは 💩"


def test_whitespace_only_input_is_empty():
    assert tokenize(" \t\r\n ") == []
    assert tokenize("") == []


def test_offsets_track_source_positions():
    toks = tokenize('{ "a" : 1 }')
    assert [t.offset for t in toks] == [0, 2, 6, 8, 10]


def test_unrecognized_character_reports_offset():
    with pytest.raises(je.CharNotRecognized) as ei:
        tokenize("[1, @]")
    assert "at offset 4" in str(ei.value)


def test_lex_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        tokenize("?")
