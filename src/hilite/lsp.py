"""Minimal LSP server for hilite: semantic tokens only."""

from __future__ import annotations

import regex
from lsprotocol.types import (
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from hilite import __version__
from hilite.detect import resolve_grammar
from hilite.lexer import tokenize
from hilite.logger import get_logger
from hilite.tokens import Grammar, TokenKind

logger = get_logger(__name__)

# Punctuation, whitespace and unknown tokens are not reported
TOKEN_TYPES: dict[TokenKind, str] = {
    TokenKind.KEYWORD: "keyword",
    TokenKind.IDENTIFIER: "variable",
    TokenKind.FUNCTION: "function",
    TokenKind.STRING: "string",
    TokenKind.NUMBER: "number",
    TokenKind.COMMENT: "comment",
    TokenKind.OPERATOR: "operator",
}

LEGEND = SemanticTokensLegend(token_types=list(TOKEN_TYPES.values()), token_modifiers=[])

_TYPE_INDEX = {kind: i for i, kind in enumerate(TOKEN_TYPES)}

# LSP line terminators
_LINE_BREAK_RE = regex.compile(r"\r\n|\r|\n")

server = LanguageServer(
    "hilite-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def encode_semantic_tokens(source: str, grammar: Grammar) -> list[int]:
    """Tokenize source and encode it as LSP relative semantic token data.

    Each reported token contributes five integers: line delta, start column
    delta, length, token type index and modifier bits. Tokens spanning
    several lines are split at each line terminator (\\r\\n, \\r or \\n);
    columns and lengths are in UTF-16 code units.
    """
    data = source.encode("utf-8")
    encoded: list[int] = []
    line = col = 0
    prev_line = prev_col = 0
    pending_cr = False

    for tok in tokenize(source, grammar):
        type_index = _TYPE_INDEX.get(tok.kind)
        text = tok.text(data)
        if pending_cr and text.startswith("\n"):
            # \r\n split across two tokens; the \r already ended the line
            text = text[1:]
        for i, segment in enumerate(_LINE_BREAK_RE.split(text)):
            if i:
                line += 1
                col = 0
            length = _utf16_len(segment)
            if type_index is not None and length:
                delta_line = line - prev_line
                delta_col = col - prev_col if delta_line == 0 else col
                encoded.extend((delta_line, delta_col, length, type_index, 0))
                prev_line, prev_col = line, col
            col += length
        pending_cr = text.endswith("\r")

    return encoded


def _semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    """Resolve the document's grammar and build its semantic tokens."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    grammar = resolve_grammar(source, doc.language_id, filename)
    logger.debug("semantic tokens for %s as %s", uri, grammar.value)
    return SemanticTokens(data=encode_semantic_tokens(source, grammar))


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
