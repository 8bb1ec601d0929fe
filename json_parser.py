# json_parser.py
# Stage two of the JSON reader: token list in, value tree out.
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT OVER TOKENS
# =============================================================================
#
# JSON is LL(1): the token at the cursor always decides the next rule, so the
# parser is a handful of mutually recursive functions sharing one cursor.
# The cursor is a plain index into the token list and never looks more than
# one token ahead.
#
# String tokens arrive still escaped; unescape() decodes them at the moment
# they become part of the tree, for values and object keys alike.
#
# Nesting is bounded by a depth limit so adversarial input fails with
# DepthLimitExceeded instead of exhausting the interpreter stack.
#
# =============================================================================

import argparse
import sys
from typing import Dict, List, Sequence

from json_errors import (
    DepthLimitExceeded,
    DuplicateKey,
    ExpectedColon,
    ExpectedComma,
    ExpectedProperty,
    InvalidCodePointValue,
    InvalidHexValue,
    LexError,
    TokenParseError,
    TrailingTokens,
    UnexpectedEndOfTokens,
    UnexpectedToken,
    UnfinishedEscape,
)
from json_values import Value, kind_of
from lexer import Token, TokenKind, tokenize

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 256   # two frames per level, stays under the default recursion limit

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SCALARS = {
    TokenKind.NULL: None,
    TokenKind.TRUE: True,
    TokenKind.FALSE: False,
}

# ---------------------------------------------------------------------------
# TOKEN CURSOR
# ---------------------------------------------------------------------------
class TokenCursor:
    """
    Forward-only index into a token sequence.

    Only the token at the cursor is ever inspected, which is all the lookahead
    an LL(1) grammar needs.
    """
    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tokens
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self._tokens)

    def peek(self) -> Token:
        if self.at_end():
            raise UnexpectedEndOfTokens("unexpected end of tokens", self.index)
        return self._tokens[self.index]

    def advance(self) -> None:
        self.index += 1


# ---------------------------------------------------------------------------
# STRING UNESCAPING
# ---------------------------------------------------------------------------
def _read_code_unit(raw: str, i: int, offset: int) -> int:
    """Decode the four hex digits of a \\u escape starting at raw[i]."""
    unit = 0
    for j in range(i, i + 4):
        if j >= len(raw):
            raise UnfinishedEscape(f"unfinished unicode escape '\\u{raw[i:]}'", offset)
        ch = raw[j]
        if ch not in _HEX_DIGITS:
            raise InvalidHexValue(f"invalid hex escape '\\u{raw[i:i + 4]}'", offset)
        unit = unit * 16 + int(ch, 16)
    return unit


def unescape(raw: str, offset: int = -1) -> str:
    """
    Decode the escape sequences of a raw string token.

    Handles the standard single-letter escapes and \\uXXXX, combining a high
    and low surrogate pair into one code point. An unknown escape such as
    \\q passes the letter through unchanged. Errors carry `offset`, the
    index of the token being decoded, when the caller knows it.
    """
    if "\\" not in raw:
        return raw

    out: List[str] = []
    n = len(raw)
    i = 0
    while i < n:
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise UnfinishedEscape("trailing backslash in string", offset)
        esc = raw[i + 1]
        if esc != "u":
            out.append(_SIMPLE_ESCAPES.get(esc, esc))
            i += 2
            continue

        unit = _read_code_unit(raw, i + 2, offset)
        i += 6
        if 0xD800 <= unit <= 0xDBFF:
            if raw[i:i + 2] != "\\u":
                raise InvalidCodePointValue(f"unpaired high surrogate \\u{unit:04X}", offset)
            low = _read_code_unit(raw, i + 2, offset)
            if not 0xDC00 <= low <= 0xDFFF:
                raise InvalidCodePointValue(f"unpaired high surrogate \\u{unit:04X}", offset)
            unit = 0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)
            i += 6
        elif 0xDC00 <= unit <= 0xDFFF:
            raise InvalidCodePointValue(f"unpaired low surrogate \\u{unit:04X}", offset)
        out.append(chr(unit))
    return "".join(out)


def _string_payload(token: Token, index: int) -> str:
    """Unescape a STRING token, rejecting hand-built tokens with no text."""
    if not isinstance(token.value, str):
        raise UnexpectedToken(f"string token without text: {token.value!r}", index)
    return unescape(token.value, index)


# ---------------------------------------------------------------------------
# CORE VALUE PARSER
# ---------------------------------------------------------------------------
def _parse_value(cursor: TokenCursor, depth: int, max_depth: int, reject_dup: bool) -> Value:
    token = cursor.peek()
    kind = token.kind

    if kind in _SCALARS:
        cursor.advance()
        return _SCALARS[kind]
    if kind is TokenKind.NUMBER:
        if isinstance(token.value, bool) or not isinstance(token.value, (int, float)):
            raise UnexpectedToken(f"number token without a numeric value: {token.value!r}", cursor.index)
        cursor.advance()
        return float(token.value)
    if kind is TokenKind.STRING:
        text = _string_payload(token, cursor.index)
        cursor.advance()
        return text
    if kind is TokenKind.LEFT_BRACE or kind is TokenKind.LEFT_BRACKET:
        if depth >= max_depth:
            raise DepthLimitExceeded(f"depth limit of {max_depth} exceeded", cursor.index)
        if kind is TokenKind.LEFT_BRACE:
            return _parse_object(cursor, depth + 1, max_depth, reject_dup)
        return _parse_array(cursor, depth + 1, max_depth, reject_dup)

    raise UnexpectedToken(f"unexpected token '{kind.value}' - value expected", cursor.index)


# ---------------------------------------------------------------------------
# ARRAY PARSER
# ---------------------------------------------------------------------------
def _parse_array(cursor: TokenCursor, depth: int, max_depth: int, reject_dup: bool) -> List[Value]:
    items: List[Value] = []
    while True:
        # step over '[' or ','
        cursor.advance()
        if cursor.peek().kind is TokenKind.RIGHT_BRACKET:
            break
        items.append(_parse_value(cursor, depth, max_depth, reject_dup))

        kind = cursor.peek().kind
        if kind is TokenKind.RIGHT_BRACKET:
            break
        if kind is not TokenKind.COMMA:
            raise ExpectedComma(f"expected ',' or ']' - got '{kind.value}'", cursor.index)
    cursor.advance()
    return items


# ---------------------------------------------------------------------------
# OBJECT PARSER
# ---------------------------------------------------------------------------
def _parse_object(cursor: TokenCursor, depth: int, max_depth: int, reject_dup: bool) -> Dict[str, Value]:
    obj: Dict[str, Value] = {}
    while True:
        # step over '{' or ','
        cursor.advance()
        token = cursor.peek()
        if token.kind is TokenKind.RIGHT_BRACE:
            break
        if token.kind is not TokenKind.STRING:
            raise ExpectedProperty(f"expected property name - got '{token.kind.value}'", cursor.index)
        key = _string_payload(token, cursor.index)
        cursor.advance()

        if cursor.peek().kind is not TokenKind.COLON:
            raise ExpectedColon(f"expected ':' after key '{key}'", cursor.index)
        cursor.advance()

        if reject_dup and key in obj:
            raise DuplicateKey(f"duplicate key '{key}'", cursor.index)
        obj[key] = _parse_value(cursor, depth, max_depth, reject_dup)

        kind = cursor.peek().kind
        if kind is TokenKind.RIGHT_BRACE:
            break
        if kind is not TokenKind.COMMA:
            raise ExpectedComma(f"expected ',' or '}}' - got '{kind.value}'", cursor.index)
    cursor.advance()
    return obj


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse(
    tokens: Sequence[Token],
    *,
    max_depth: int = DEPTH_LIMIT_DEFAULT,
    reject_duplicates: bool = False,
) -> Value:
    """
    Build a value tree from a complete token sequence.

    Parsing starts at the first token and must consume every token; leftovers
    raise TrailingTokens. Syntax offsets are token indexes, not character
    positions.
    """
    cursor = TokenCursor(tokens)
    try:
        result = _parse_value(cursor, 0, max_depth, reject_duplicates)
    except RecursionError:
        # max_depth set above what the interpreter stack can hold
        raise DepthLimitExceeded("nesting exceeds the interpreter recursion limit", cursor.index) from None
    if not cursor.at_end():
        raise TrailingTokens("extra data after root value", cursor.index)
    return result


def parse_json(
    text: str,
    *,
    max_depth: int = DEPTH_LIMIT_DEFAULT,
    reject_duplicates: bool = False,
) -> Value:
    """Tokenize and parse JSON text in one call."""
    return parse(tokenize(text), max_depth=max_depth, reject_duplicates=reject_duplicates)


# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def _cli(argv: List[str]) -> int:
    """
    Command-line validator.

    Exit codes: 0 when the file is valid JSON, 1 on a lexical or syntax
    error, 2 when the file cannot be read.
    """
    ap = argparse.ArgumentParser(description="JSON tokenizer and validator")
    ap.add_argument("file", help="JSON file to verify, '-' for stdin")
    ap.add_argument("--tokens", action="store_true", help="dump token stream and exit")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    ap.add_argument("--reject-dup-keys", action="store_true")
    args = ap.parse_args(argv)

    try:
        data = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.tokens:
            for tok in tokenize(data):
                print(tok)
            return 0
        value = parse_json(data, max_depth=args.max_depth, reject_duplicates=args.reject_dup_keys)
    except (LexError, TokenParseError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"OK ({kind_of(value).value})")
    return 0


def main() -> None:
    sys.exit(_cli(sys.argv[1:]))


__all__ = [
    "DEPTH_LIMIT_DEFAULT",
    "TokenCursor",
    "parse",
    "parse_json",
    "unescape",
]

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
