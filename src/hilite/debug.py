"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from hilite.tokens import Grammar, Token


def dump_tokens(
    source: str, tokens: list[Token], grammar: Grammar, *, file: TextIO = sys.stderr
) -> None:
    """Print one line per token to *file*: byte range, kind, and source text."""
    data = source.encode("utf-8")
    file.write(f"Tokens ({grammar.value}, {len(tokens)})\n")
    width = len(str(len(data)))
    for tok in tokens:
        span = f"{tok.start:>{width}}..{tok.end:<{width}}"
        file.write(f"  {span} {tok.kind.name:<11} {tok.text(data)!r}\n")
