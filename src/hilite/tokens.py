"""Token kinds, grammars, the Token span type, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import regex


class TokenKind(Enum):
    # Words
    KEYWORD = auto()  # reserved word of the active grammar
    IDENTIFIER = auto()  # any other identifier-shaped span
    FUNCTION = auto()  # identifier followed by (

    # Literals
    STRING = auto()  # "..." or '...', possibly unterminated
    NUMBER = auto()  # digits, ., x, X (not validated)
    COMMENT = auto()  # line or block comment

    # Symbols
    OPERATOR = auto()  # + - * / % = ! < > & | ^ ~ ? : . , and two-char pairs
    PUNCTUATION = auto()  # ( ) { } [ ] ;

    WHITESPACE = auto()  # run of Unicode whitespace
    UNKNOWN = auto()  # any other single code point


class Grammar(Enum):
    """Lexical rule set used by the scanner.

    AUTO is not a rule set of its own: it accepts every comment style and
    unions the C, shell and YAML keyword vocabularies.
    """

    C = "c"
    SHELL = "shell"
    MAKEFILE = "makefile"
    YAML = "yaml"
    AUTO = "auto"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of the input, as half-open UTF-8 byte offsets."""

    kind: TokenKind
    start: int
    end: int

    def text(self, data: bytes) -> str:
        """Decode this token's slice of the UTF-8 encoded source."""
        return data[self.start : self.end].decode("utf-8")


OPERATOR_CHARS = frozenset("+-*/%=!<>&|^~?:.,")
PUNCTUATION_CHARS = frozenset("(){}[];")

# Operator pairs consumed as a single token
OPERATOR_PAIRS = frozenset({"==", "!=", "<=", ">=", "&&", "||", "++", "--", "<<", ">>"})


def utf8_len(ch: str) -> int:
    """Return the number of bytes ch occupies when encoded as UTF-8."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_number_char(ch: str) -> bool:
    """Return True if ch may continue a numeric literal."""
    return is_ascii_digit(ch) or ch in ".xX"


# Unicode Alphabetic, Numeric and White_Space properties
_ALPHABETIC_RE = regex.compile(r"\p{Alphabetic}")
_ALPHANUMERIC_RE = regex.compile(r"[\p{Alphabetic}\p{N}]")
_WHITESPACE_RE = regex.compile(r"\p{White_Space}")


def is_whitespace(ch: str) -> bool:
    return _WHITESPACE_RE.match(ch) is not None


def is_alphanumeric(ch: str) -> bool:
    """Return True if ch is Alphabetic or Numeric (Nd, Nl, No)."""
    return _ALPHANUMERIC_RE.match(ch) is not None


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return ch == "_" or _ALPHABETIC_RE.match(ch) is not None


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch == "_" or is_alphanumeric(ch)


def is_operator_char(ch: str) -> bool:
    return ch in OPERATOR_CHARS


def is_punctuation_char(ch: str) -> bool:
    return ch in PUNCTUATION_CHARS
