# json_errors.py
# Error taxonomy for the JSON tokenizer and parser.
#
# Two disjoint families, one per stage. Both derive from the builtin
# SyntaxError so a caller that only cares about "was this valid JSON" can
# catch one class, while tests and tooling can match the exact cause.
#
# =============================================================================

from typing import Optional


class _JSONError(SyntaxError):
    """
    Base for every error raised while reading JSON text.

    The offset is a character index into the source for lexical errors and a
    token index for syntax errors. -1 means the position is unknown, which is
    the case for hand-built token sequences.
    """
    default_message = "invalid JSON"

    def __init__(self, message: Optional[str] = None, offset: int = -1):
        message = message or self.default_message
        if offset >= 0:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        # SyntaxError reserves .offset for source columns, keep ours apart
        self.position = offset


# ---------------------------------------------------------------------------
# LEXICAL ERRORS
# ---------------------------------------------------------------------------
class LexError(_JSONError):
    default_message = "lexical error"


class CharNotRecognized(LexError):
    default_message = "character not recognized"


class UnfinishedLiteralValue(LexError):
    default_message = "unfinished literal value"


class UnexpectedEof(LexError):
    default_message = "unexpected end of input"


class UnclosedQuotes(LexError):
    default_message = "unclosed quotes"


class ParseNumberError(LexError):
    default_message = "malformed number"


# ---------------------------------------------------------------------------
# SYNTAX ERRORS
# ---------------------------------------------------------------------------
class TokenParseError(_JSONError):
    default_message = "syntax error"


class UnexpectedToken(TokenParseError):
    default_message = "unexpected token - value expected"


class ExpectedComma(TokenParseError):
    default_message = "expected comma"


class ExpectedProperty(TokenParseError):
    default_message = "expected property name"


class ExpectedColon(TokenParseError):
    default_message = "expected colon"


class UnexpectedEndOfTokens(TokenParseError):
    default_message = "unexpected end of tokens"


class TrailingTokens(TokenParseError):
    default_message = "extra data after root value"


class DepthLimitExceeded(TokenParseError):
    default_message = "depth limit exceeded"


class DuplicateKey(TokenParseError):
    default_message = "duplicate key"


class UnfinishedEscape(TokenParseError):
    default_message = "unfinished escape sequence"


class InvalidHexValue(TokenParseError):
    default_message = "invalid hex value in unicode escape"


class InvalidCodePointValue(TokenParseError):
    default_message = "invalid code point value"


__all__ = [
    "LexError",
    "CharNotRecognized",
    "UnfinishedLiteralValue",
    "UnexpectedEof",
    "UnclosedQuotes",
    "ParseNumberError",
    "TokenParseError",
    "UnexpectedToken",
    "ExpectedComma",
    "ExpectedProperty",
    "ExpectedColon",
    "UnexpectedEndOfTokens",
    "TrailingTokens",
    "DepthLimitExceeded",
    "DuplicateKey",
    "UnfinishedEscape",
    "InvalidHexValue",
    "InvalidCodePointValue",
]
