"""HTML renderer: converts a token stream into spans carrying hl-* CSS classes."""

from __future__ import annotations

import html

from hilite.tokens import Grammar, Token, TokenKind, is_whitespace

CSS_CLASSES: dict[TokenKind, str] = {
    TokenKind.KEYWORD: "hl-keyword",
    TokenKind.IDENTIFIER: "hl-identifier",
    TokenKind.FUNCTION: "hl-function",
    TokenKind.STRING: "hl-string",
    TokenKind.NUMBER: "hl-number",
    TokenKind.COMMENT: "hl-comment",
    TokenKind.OPERATOR: "hl-operator",
    TokenKind.PUNCTUATION: "hl-punctuation",
    TokenKind.WHITESPACE: "hl-whitespace",
    TokenKind.UNKNOWN: "hl-unknown",
}

_CLASS_PREFIXES = ("language-", "lang-")


def css_class(kind: TokenKind) -> str:
    """Return the CSS class name for a token kind."""
    return CSS_CLASSES[kind]


def escape_html(text: str) -> str:
    """Escape & < > " ' for embedding in HTML text or attribute values."""
    return html.escape(text, quote=True)


def render_html(source: str, tokens: list[Token]) -> str:
    """Render tokens over source as HTML.

    Each token becomes ``<span class="hl-...">text</span>``. Whitespace
    tokens, and any token whose text is only whitespace, are emitted as bare
    escaped text. Source bytes not covered by a token are emitted escaped.
    """
    data = source.encode("utf-8")
    parts: list[str] = []
    last_end = 0

    for tok in tokens:
        if tok.start > last_end:
            parts.append(escape_html(data[last_end : tok.start].decode("utf-8")))

        text = tok.text(data)
        if tok.kind is TokenKind.WHITESPACE or all(map(is_whitespace, text)):
            parts.append(escape_html(text))
        else:
            parts.append(f'<span class="{css_class(tok.kind)}">{escape_html(text)}</span>')
        last_end = tok.end

    if last_end < len(data):
        parts.append(escape_html(data[last_end:].decode("utf-8")))

    return "".join(parts)


def render_block(source: str, tokens: list[Token], grammar: Grammar) -> str:
    """Render tokens wrapped in ``<pre><code>``, tagged with the grammar name."""
    body = render_html(source, tokens)
    if grammar is Grammar.AUTO:
        return f"<pre><code>{body}</code></pre>\n"
    return f'<pre><code class="language-{grammar.value}">{body}</code></pre>\n'


def language_from_class(class_name: str) -> str | None:
    """Extract the language from a class attribute such as "language-c other".

    The first class starting with ``language-`` or ``lang-`` wins; the prefix
    is case-sensitive and an empty suffix yields None.
    """
    for cls in class_name.split():
        for prefix in _CLASS_PREFIXES:
            if cls.startswith(prefix):
                lang = cls[len(prefix) :]
                return lang or None
    return None
