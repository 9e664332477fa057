"""Token scanner: partitions source text into classified spans for a single grammar."""

from __future__ import annotations

from hilite.keywords import is_keyword
from hilite.tokens import (
    OPERATOR_PAIRS,
    Grammar,
    Token,
    TokenKind,
    is_ascii_digit,
    is_ident_char,
    is_ident_start,
    is_number_char,
    is_operator_char,
    is_punctuation_char,
    is_whitespace,
    utf8_len,
)


class Lexer:
    """Tokenize source text under one grammar into a gapless list of Token spans.

    The lexer never fails: every code point of the input ends up in exactly
    one token, and constructs left open at end of input (strings, block
    comments) close at end of input.
    """

    def __init__(self, source: str, grammar: Grammar = Grammar.AUTO) -> None:
        self._source = source
        self._grammar = grammar
        self._pos = 0  # code point index into _source
        self._offset = 0  # UTF-8 byte offset of _pos
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            self._lex_next()
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        self._offset += utf8_len(ch)
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _emit(self, kind: TokenKind, start: int) -> Token:
        tok = Token(kind, start, self._offset)
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()

        if is_whitespace(ch):
            self._lex_whitespace()
            return

        if self._is_comment_start():
            self._lex_comment()
            return

        if ch in "\"'":
            self._lex_string(ch)
            return

        if is_ascii_digit(ch):
            self._lex_number()
            return

        if is_ident_start(ch):
            self._lex_identifier()
            return

        if is_operator_char(ch):
            self._lex_operator()
            return

        start = self._offset
        self._advance()
        if is_punctuation_char(ch):
            self._emit(TokenKind.PUNCTUATION, start)
        else:
            # Emoji, control characters, and anything else unclassified
            self._emit(TokenKind.UNKNOWN, start)

    def _lex_whitespace(self) -> None:
        start = self._offset
        while not self._at_end() and is_whitespace(self._peek()):
            self._advance()
        self._emit(TokenKind.WHITESPACE, start)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _is_comment_start(self) -> bool:
        ch = self._peek()
        slash_comment = ch == "/" and self._peek(1) in ("/", "*")

        if self._grammar is Grammar.C:
            return slash_comment
        if self._grammar is Grammar.AUTO:
            return ch == "#" or slash_comment
        return ch == "#"

    def _lex_comment(self) -> None:
        start = self._offset
        if self._peek() == "/" and self._peek(1) == "*":
            self._advance()
            self._advance()
            while not self._at_end():
                if self._peek() == "*" and self._peek(1) == "/":
                    self._advance()
                    self._advance()
                    break
                self._advance()
        else:
            # // and # comments stop before the line feed
            while not self._at_end() and self._peek() != "\n":
                self._advance()
        self._emit(TokenKind.COMMENT, start)

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _lex_string(self, quote: str) -> None:
        start = self._offset
        self._advance()  # opening quote

        while not self._at_end():
            ch = self._advance()
            if ch == quote:
                break
            if ch == "\\" and not self._at_end():
                self._advance()  # escaped character, whatever it is

        self._emit(TokenKind.STRING, start)

    def _lex_number(self) -> None:
        start = self._offset
        while not self._at_end() and is_number_char(self._peek()):
            self._advance()
        self._emit(TokenKind.NUMBER, start)

    # ------------------------------------------------------------------
    # Identifiers, keywords, and function names
    # ------------------------------------------------------------------

    def _lex_identifier(self) -> None:
        start = self._offset
        first = self._pos
        while not self._at_end() and is_ident_char(self._peek()):
            self._advance()
        text = self._source[first : self._pos]

        if is_keyword(text, self._grammar):
            kind = TokenKind.KEYWORD
        elif self._next_significant() == "(":
            kind = TokenKind.FUNCTION
        else:
            kind = TokenKind.IDENTIFIER
        self._emit(kind, start)

    def _next_significant(self) -> str:
        """Return the next non-whitespace character without consuming anything."""
        idx = self._pos
        while idx < len(self._source):
            ch = self._source[idx]
            if not is_whitespace(ch):
                return ch
            idx += 1
        return ""

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _lex_operator(self) -> None:
        start = self._offset
        ch = self._advance()
        if ch + self._peek() in OPERATOR_PAIRS:
            self._advance()
        self._emit(TokenKind.OPERATOR, start)


def tokenize(source: str, grammar: Grammar = Grammar.AUTO) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, grammar).tokenize()
