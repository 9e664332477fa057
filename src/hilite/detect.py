"""Language detection: picks a grammar from an explicit name, a filename, or content."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import regex

from hilite.logger import get_logger
from hilite.tokens import Grammar, is_alphanumeric

logger = get_logger(__name__)

# Alias map: caller-supplied language name -> grammar
ALIASES: dict[str, Grammar] = {
    "c": Grammar.C,
    "cpp": Grammar.C,
    "c++": Grammar.C,
    "bash": Grammar.SHELL,
    "sh": Grammar.SHELL,
    "shell": Grammar.SHELL,
    "makefile": Grammar.MAKEFILE,
    "make": Grammar.MAKEFILE,
    "yaml": Grammar.YAML,
    "yml": Grammar.YAML,
}

_C_EXTENSIONS = (".c", ".h", ".cpp", ".hpp")
_SHELL_EXTENSIONS = (".sh", ".bash")
_SHELL_NAMES = ("bashrc", ".bashrc")
_YAML_EXTENSIONS = (".yml", ".yaml")

_SHEBANGS = ("#!/bin/bash", "#!/bin/sh")
_C_MARKERS = ("#include", "int main", "printf", "MODULE_")
_MAKEFILE_MARKERS = ("$(", "\t")
_YAML_DOCUMENT_MARKER = "---"

_TARGET_SPECIAL = frozenset("_-.")


def grammar_from_alias(name: str, extra: Mapping[str, str] | None = None) -> Grammar | None:
    """Resolve a language name such as "c++" or "yml" to a grammar.

    Names are matched case-insensitively. *extra* maps further names to a
    canonical alias ("cpp", "shell", ...). Returns None if the name is not
    recognised.
    """
    key = name.strip().lower()
    if extra:
        lowered = {k.strip().lower(): v for k, v in extra.items()}
        if key in lowered:
            key = lowered[key].strip().lower()
    return ALIASES.get(key)


def grammar_for_filename(filename: str) -> Grammar | None:
    """Map a file name or extension to a grammar, or None if it says nothing."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1].lower()
    if name.endswith(_C_EXTENSIONS):
        return Grammar.C
    if name.endswith(_SHELL_EXTENSIONS) or name in _SHELL_NAMES:
        return Grammar.SHELL
    if name.startswith("makefile") or name.endswith(".mk"):
        return Grammar.MAKEFILE
    if name.endswith(_YAML_EXTENSIONS):
        return Grammar.YAML
    return None


_TRIM_RE = regex.compile(r"^\p{White_Space}+|\p{White_Space}+$")


def _trim(text: str) -> str:
    return _TRIM_RE.sub("", text)


def _trimmed_lines(text: str) -> Iterator[str]:
    """Yield each line-feed separated line with White_Space trimmed from both ends."""
    for line in text.split("\n"):
        yield _trim(line)


def _is_target_name(text: str) -> bool:
    return bool(text) and all(is_alphanumeric(ch) or ch in _TARGET_SPECIAL for ch in text)


def has_build_target(text: str) -> bool:
    """Return True if some non-comment line looks like `target: prerequisites`."""
    for stripped in _trimmed_lines(text):
        if ":" not in stripped or stripped.startswith("#"):
            continue
        before_colon = _trim(stripped.split(":", 1)[0])
        if _is_target_name(before_colon):
            return True
    return False


def has_markup_pattern(text: str) -> bool:
    """Return True if text shows a YAML document marker, `key: value` pair or list item."""
    if _YAML_DOCUMENT_MARKER in text:
        return True
    for stripped in _trimmed_lines(text):
        if stripped.startswith("#"):
            continue
        if ": " in stripped or stripped.startswith("- "):
            return True
    return False


def detect_grammar(text: str, filename: str | None = None) -> Grammar:
    """Pick the grammar for text, first by filename hint, then by content signals.

    Signals are tried strongest first:

    1. filename or extension
    2. ``#!/bin/bash`` or ``#!/bin/sh`` shebang
    3. C markers (``#include``, ``int main``, ``printf``, ``MODULE_``)
    4. make markers (``$(``, or any tab character)
    5. make targets vs. YAML key/value and list lines
    6. AUTO when nothing matched
    """
    if filename:
        grammar = grammar_for_filename(filename)
        if grammar is not None:
            logger.debug("detected %s from filename %r", grammar.value, filename)
            return grammar

    if text.lstrip().startswith(_SHEBANGS):
        logger.debug("detected shell from shebang")
        return Grammar.SHELL

    if any(marker in text for marker in _C_MARKERS):
        logger.debug("detected c from content marker")
        return Grammar.C

    if any(marker in text for marker in _MAKEFILE_MARKERS):
        logger.debug("detected makefile from $( or tab")
        return Grammar.MAKEFILE

    build_target = has_build_target(text)
    markup = has_markup_pattern(text)
    if build_target and not markup:
        logger.debug("detected makefile from target line")
        return Grammar.MAKEFILE
    if markup:
        logger.debug("detected yaml from key/value or list line")
        return Grammar.YAML

    logger.debug("no language signal, using auto")
    return Grammar.AUTO


def resolve_grammar(
    text: str,
    language: str | None = None,
    filename: str | None = None,
    aliases: Mapping[str, str] | None = None,
) -> Grammar:
    """Resolve the grammar for text from an explicit language, a filename, or content.

    A recognised language name wins outright. An unrecognised one is treated
    as a filename hint when no filename was given, so fence info strings
    such as ``Makefile`` or ``docker-compose.yml`` still select a grammar.
    """
    if language:
        grammar = grammar_from_alias(language, aliases)
        if grammar is not None:
            return grammar
        if filename is None:
            filename = language
    return detect_grammar(text, filename)
