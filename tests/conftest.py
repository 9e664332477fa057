"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from hilite.lexer import tokenize
from hilite.tokens import Grammar, Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source under a grammar (AUTO by default)."""

    def _lex(source: str, grammar: Grammar = Grammar.AUTO) -> list[Token]:
        return tokenize(source, grammar)

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def texts(source: str, tokens: list[Token]) -> list[str]:
    """Return the source text of each token."""
    data = source.encode("utf-8")
    return [t.text(data) for t in tokens]


def significant(source: str, tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    """Return (kind, text) pairs for every non-whitespace token."""
    data = source.encode("utf-8")
    return [(t.kind, t.text(data)) for t in tokens if t.kind != TokenKind.WHITESPACE]


def find_tokens(tokens: list[Token], kind: TokenKind) -> list[Token]:
    """Return all tokens of the given kind."""
    return [t for t in tokens if t.kind == kind]
