"""Command-line interface for hilite."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from hilite.detect import ALIASES, resolve_grammar
from hilite.errors import ConfigError
from hilite.tokens import Grammar

STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    language: str | None
    filename: str | None
    wrap: bool
    detect: bool
    debug: bool
    verbose: bool
    aliases: dict[str, str] = field(default_factory=dict)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="hilite",
        description="Tokenize source code and render it as classed HTML spans",
    )
    p.add_argument("input", help="Input source file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-l",
        "--language",
        metavar="NAME",
        help="Language name (c, cpp, bash, sh, make, yaml, ...); detected when omitted",
    )
    p.add_argument(
        "--filename",
        metavar="NAME",
        help="File name used for detection (default: the input file name)",
    )
    p.add_argument(
        "--wrap",
        action="store_true",
        default=None,
        help="Wrap output in <pre><code class=\"language-...\">",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover hilite.toml)",
    )
    p.add_argument("--detect", action="store_true", help="Print the detected language and exit")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Log detection decisions")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "hilite.toml"

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path) from exc


def _config_aliases(config: dict[str, Any], path: Path) -> dict[str, str]:
    aliases: dict[str, str] = {}
    cfg_aliases = config.get("aliases")
    if cfg_aliases is None:
        return aliases
    if not isinstance(cfg_aliases, dict):
        raise ConfigError("[aliases] must be a table", path)
    for name, target in cfg_aliases.items():
        if not isinstance(target, str) or target.strip().lower() not in ALIASES:
            raise ConfigError(f"alias {name!r} must name a known language, got {target!r}", path)
        aliases[str(name)] = target
    return aliases


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = None if args.input == STDIN else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    source_path = config_path if config_path is not None else input_dir / "hilite.toml"

    # Highlight settings: config < CLI
    language: str | None = None
    wrap = False
    cfg_highlight = config.get("highlight")
    if isinstance(cfg_highlight, dict):
        cfg_language = cfg_highlight.get("language")
        if cfg_language is not None:
            if not isinstance(cfg_language, str):
                raise ConfigError("highlight.language must be a string", source_path)
            language = cfg_language
        cfg_wrap = cfg_highlight.get("wrap")
        if cfg_wrap is not None:
            if not isinstance(cfg_wrap, bool):
                raise ConfigError("highlight.wrap must be true or false", source_path)
            wrap = cfg_wrap
    if args.language:
        language = args.language
    if args.wrap is not None:
        wrap = args.wrap

    aliases = _config_aliases(config, source_path)

    filename = args.filename
    if filename is None and input_file is not None:
        filename = input_file.name

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        language=language,
        filename=filename,
        wrap=wrap,
        detect=args.detect,
        debug=args.debug,
        verbose=args.verbose,
        aliases=aliases,
    )


def read_source(options: CliOptions) -> str:
    """Read the input file, or stdin when no input file was given."""
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def detect_source(source: str, options: CliOptions) -> Grammar:
    return resolve_grammar(source, options.language, options.filename, options.aliases)


def highlight_source(source: str, options: CliOptions) -> str:
    """Detect, tokenize, and render source to HTML according to options."""
    from hilite.debug import dump_tokens
    from hilite.lexer import tokenize
    from hilite.render import render_block, render_html

    grammar = detect_source(source, options)
    tokens = tokenize(source, grammar)

    if options.debug:
        dump_tokens(source, tokens, grammar, file=sys.stderr)

    if options.wrap:
        return render_block(source, tokens, grammar)
    return render_html(source, tokens)


def highlight_file(options: CliOptions) -> str:
    """Read and highlight the input named by options."""
    return highlight_source(read_source(options), options)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s", stream=sys.stderr)
        logging.getLogger("hilite").setLevel(logging.DEBUG)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 1

    if options.detect:
        print(detect_source(source, options).value)
        return 0

    html = highlight_source(source, options)

    if options.output_file:
        options.output_file.write_text(html, encoding="utf-8")
    else:
        sys.stdout.write(html)

    return 0
