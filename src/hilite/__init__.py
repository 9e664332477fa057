"""Multi-grammar lexical tokenizer and language detector for syntax highlighting."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

__version__ = "0.1.0"


def highlight(
    code: str,
    language: str | None = None,
    filename: str | None = None,
    aliases: Mapping[str, str] | None = None,
) -> str:
    """Detect the grammar, tokenize, and render source code to classed HTML spans."""
    from hilite.detect import resolve_grammar
    from hilite.lexer import tokenize
    from hilite.render import render_html

    grammar = resolve_grammar(code, language, filename, aliases)
    return render_html(code, tokenize(code, grammar))
