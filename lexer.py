# lexer.py
# Stage one of the JSON reader: characters in, flat token list out.
#
# =============================================================================
#  TOKENIZER DESIGN
# =============================================================================
#
# The scanner walks the decoded text once, left to right, with a single
# integer cursor. Dispatch is on the current character only; the sole
# lookahead is the digit check after a leading '-'.
#
# Keywords are matched by comparing the next N characters at the cursor,
# never by searching the rest of the input, so "nul" followed later by
# "null" cannot match.
#
# String tokens keep their raw, still-escaped text. Escape decoding belongs
# to the parser, which is the only stage that builds values.
#
# =============================================================================

from enum import Enum
from typing import Any, List, NamedTuple, Tuple

from json_errors import (
    CharNotRecognized,
    ParseNumberError,
    UnclosedQuotes,
    UnexpectedEof,
    UnfinishedLiteralValue,
)

# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class TokenKind(Enum):
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    COLON = ":"
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    NUMBER = "NUMBER"
    STRING = "STRING"


class Token(NamedTuple):
    """
    Immutable token record: (kind, value, offset).

    value is a float for NUMBER, the raw escaped text for STRING and None for
    everything else. offset is the character index of the token start, or -1
    for tokens built by hand.
    """
    kind: TokenKind
    value: Any = None
    offset: int = -1


# ---------------------------------------------------------------------------
# DISPATCH TABLES
# ---------------------------------------------------------------------------
_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")

_PUNCTUATION = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_KEYWORDS = {
    "n": ("null", TokenKind.NULL),
    "t": ("true", TokenKind.TRUE),
    "f": ("false", TokenKind.FALSE),
}


# ---------------------------------------------------------------------------
# SCANNERS
# ---------------------------------------------------------------------------
def _match_literal(text: str, pos: int, word: str) -> int:
    """Compare `word` against the input at the cursor; return the end index."""
    for i, expected in enumerate(word):
        if pos + i >= len(text):
            raise UnexpectedEof(f"unexpected end of input inside '{word}'", pos + i)
        if text[pos + i] != expected:
            raise UnfinishedLiteralValue(f"unfinished literal value - expected '{word}'", pos)
    return pos + len(word)


def _scan_digits(text: str, pos: int) -> int:
    n = len(text)
    while pos < n and text[pos] in _DIGITS:
        pos += 1
    return pos


def _scan_number(text: str, start: int) -> Tuple[float, int]:
    """
    Consume a number: optional '-', digits, an optional fraction and an
    optional exponent. A second '.' simply ends the number.
    """
    n = len(text)
    pos = start
    if text[pos] == "-":
        pos += 1
    pos = _scan_digits(text, pos)

    if pos < n and text[pos] == ".":
        frac_start = pos + 1
        pos = _scan_digits(text, frac_start)
        if pos == frac_start:
            raise ParseNumberError(f"missing digits after decimal point in '{text[start:pos]}'", start)

    if pos < n and text[pos] in "eE":
        pos += 1
        if pos < n and text[pos] in "+-":
            pos += 1
        exp_start = pos
        pos = _scan_digits(text, exp_start)
        if pos == exp_start:
            raise ParseNumberError(f"missing exponent digits in '{text[start:pos]}'", start)

    literal = text[start:pos]
    try:
        return float(literal), pos
    except ValueError:
        raise ParseNumberError(f"cannot parse number '{literal}'", start) from None


def _scan_string(text: str, start: int) -> Tuple[str, int]:
    """
    Copy the raw text between the quotes. Returns the interior and the index
    just past the closing quote.
    """
    n = len(text)
    pos = start + 1
    escaping = False
    while pos < n:
        ch = text[pos]
        if ch == '"' and not escaping:
            return text[start + 1:pos], pos + 1
        escaping = ch == "\\" and not escaping
        pos += 1
    raise UnclosedQuotes("unclosed quotes in string", start)


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def tokenize(text: str) -> List[Token]:
    """
    Turn JSON text into a list of tokens.

    Whitespace between tokens is dropped. The first lexical error aborts the
    whole call; there is no partial result.
    """
    tokens: List[Token] = []
    n = len(text)
    pos = 0
    while True:
        while pos < n and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= n:
            return tokens

        ch = text[pos]
        if ch in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[ch], None, pos))
            pos += 1
        elif ch in _KEYWORDS:
            word, kind = _KEYWORDS[ch]
            end = _match_literal(text, pos, word)
            tokens.append(Token(kind, None, pos))
            pos = end
        elif ch in _DIGITS or (ch == "-" and pos + 1 < n and text[pos + 1] in _DIGITS):
            number, end = _scan_number(text, pos)
            tokens.append(Token(TokenKind.NUMBER, number, pos))
            pos = end
        elif ch == '"':
            raw, end = _scan_string(text, pos)
            tokens.append(Token(TokenKind.STRING, raw, pos))
            pos = end
        else:
            raise CharNotRecognized(f"character not recognized {ch!r}", pos)


__all__ = ["TokenKind", "Token", "tokenize"]
