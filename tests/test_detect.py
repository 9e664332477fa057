"""Test language detection: filename hints, content signals, and alias resolution."""

from __future__ import annotations

import logging

import pytest

from hilite.detect import (
    detect_grammar,
    grammar_for_filename,
    grammar_from_alias,
    has_build_target,
    has_markup_pattern,
    resolve_grammar,
)
from hilite.tokens import Grammar

C, SHELL, MAKE, YAML, AUTO = (
    Grammar.C,
    Grammar.SHELL,
    Grammar.MAKEFILE,
    Grammar.YAML,
    Grammar.AUTO,
)


class TestFilename:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("main.c", C),
            ("header.h", C),
            ("program.cpp", C),
            ("header.hpp", C),
            ("MAIN.C", C),
            ("script.sh", SHELL),
            ("install.bash", SHELL),
            ("bashrc", SHELL),
            (".bashrc", SHELL),
            ("Makefile", MAKE),
            ("makefile", MAKE),
            ("Makefile.debug", MAKE),
            ("build.mk", MAKE),
            ("config.yml", YAML),
            ("docker-compose.YAML", YAML),
            ("src/Makefile", MAKE),
        ],
    )
    def test_mapping(self, name, expected):
        assert grammar_for_filename(name) == expected
        assert detect_grammar("", name) == expected

    @pytest.mark.parametrize("name", ["notes.txt", "main.rs", "my.bashrc.bak", "c", ""])
    def test_no_mapping(self, name):
        assert grammar_for_filename(name) is None

    def test_filename_overrides_content(self):
        assert detect_grammar("echo hello", "Makefile") == MAKE
        assert detect_grammar("echo hello", "test.c") == C
        assert detect_grammar("#!/bin/bash\necho hi", "values.yaml") == YAML

    def test_unknown_filename_falls_through(self):
        assert detect_grammar("#include <stdio.h>", "notes.txt") == C


class TestShebang:
    def test_bash(self):
        assert detect_grammar("#!/bin/bash\necho hello") == SHELL

    def test_sh(self):
        assert detect_grammar("#!/bin/sh\necho hello") == SHELL

    def test_leading_whitespace(self):
        assert detect_grammar("  \n #!/bin/bash") == SHELL

    def test_outranks_colon_space(self):
        assert detect_grammar("#!/bin/bash\nkey: value") == SHELL

    def test_env_shebang_not_recognised(self):
        assert detect_grammar("#!/usr/bin/env bash\nls") == AUTO


class TestStrongC:
    @pytest.mark.parametrize(
        "text",
        [
            "#include <stdio.h>\nint main() {}",
            "int main(void) { return 0; }",
            'printf("hello world");',
            'MODULE_LICENSE("GPL");',
        ],
    )
    def test_markers(self, text):
        assert detect_grammar(text) == C

    def test_outranks_colon_pattern(self):
        assert detect_grammar("#include <stdio.h>\nlabel: statement") == C

    def test_outranks_tab(self):
        assert detect_grammar("int main() {\n\treturn 0;\n}") == C

    def test_keywords_alone_are_not_enough(self):
        assert detect_grammar("int return void") != C


class TestStrongMakefile:
    def test_tab_outranks_colon_space(self):
        assert detect_grammar("target: dependency\n\tcommand with spaces") == MAKE

    def test_macro_expansion(self):
        assert detect_grammar("CC=$(shell which gcc)") == MAKE
        assert detect_grammar("$(info Building project)") == MAKE
        assert detect_grammar("$()") == MAKE

    def test_target_then_tab(self):
        assert detect_grammar("all: clean\n\tgcc -o test") == MAKE

    def test_comment_then_target(self):
        assert detect_grammar("# This is a makefile comment\nall:\n\tbuild") == MAKE


class TestStructural:
    def test_yaml_key_value(self):
        assert detect_grammar("name: value\nother: test") == YAML

    def test_yaml_document_marker(self):
        assert detect_grammar("---") == YAML
        assert detect_grammar("---\nkey: value") == YAML

    def test_yaml_list(self):
        assert detect_grammar("- item1\n- item2") == YAML

    def test_yaml_quoted_scalar(self):
        assert detect_grammar("version: '3.8'\nservices:") == YAML

    def test_yaml_beats_target(self):
        assert detect_grammar("build: ./Dockerfile\nports: 8080:80") == YAML

    def test_target_without_markup(self):
        assert detect_grammar("target:dependency") == MAKE
        assert detect_grammar("clean:\nall:") == MAKE

    def test_unicode_key_value(self):
        assert detect_grammar("名前: テスト\n値: 42") == YAML

    def test_commented_key_value_ignored(self):
        assert detect_grammar("# note: this is a comment") == AUTO

    def test_indented_yaml(self):
        text = (
            "\n"
            "    version: '3.8'\n"
            "    services:\n"
            "      web:\n"
            "        ports:\n"
            '          - "8000:8000"\n'
        )
        assert detect_grammar(text) == YAML


class TestFallback:
    def test_empty(self):
        assert detect_grammar("") == AUTO

    def test_no_signal(self):
        assert detect_grammar("hello world") == AUTO

    @pytest.mark.parametrize("text", [":", ":::", "a b:c"])
    def test_malformed_colons(self, text):
        assert detect_grammar(text) == AUTO

    def test_hint_none(self):
        assert detect_grammar("", None) == AUTO


class TestSignals:
    def test_build_target(self):
        assert has_build_target("all: main.o")
        assert has_build_target("  lib-v1.2_x:")
        assert not has_build_target("my target: x")
        assert not has_build_target("# all: x")
        assert not has_build_target(": x")
        assert not has_build_target("a/b: c")

    def test_markup(self):
        assert has_markup_pattern("a: b")
        assert has_markup_pattern("  - item")
        assert has_markup_pattern("x\n---\ny")
        assert not has_markup_pattern("# a: b")
        assert not has_markup_pattern("a:b")
        assert not has_markup_pattern("-item")

    def test_lines_split_on_line_feed_only(self):
        # U+001C is a line boundary for str.splitlines but not here
        assert not has_markup_pattern("# note\x1c- item")
        assert has_markup_pattern("# note\r\n- item")

    def test_trim_keeps_non_white_space_controls(self):
        assert not has_build_target("\x1call: deps")
        assert has_build_target("\u3000all: deps\r")


class TestAliases:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("c", C),
            ("cpp", C),
            ("c++", C),
            ("bash", SHELL),
            ("sh", SHELL),
            ("shell", SHELL),
            ("makefile", MAKE),
            ("make", MAKE),
            ("yaml", YAML),
            ("yml", YAML),
            ("YAML", YAML),
            (" C++ ", C),
        ],
    )
    def test_builtin(self, name, expected):
        assert grammar_from_alias(name) == expected

    @pytest.mark.parametrize("name", ["python", "auto", "", "rust"])
    def test_unknown(self, name):
        assert grammar_from_alias(name) is None

    def test_extra_aliases(self):
        extra = {"h++": "cpp", "Compose": "yml"}
        assert grammar_from_alias("h++", extra) == C
        assert grammar_from_alias("compose", extra) == YAML
        assert grammar_from_alias("zsh", extra) is None


class TestResolve:
    def test_explicit_language_wins(self):
        assert resolve_grammar("#!/bin/bash\necho", "yaml") == YAML

    def test_explicit_language_beats_filename(self):
        assert resolve_grammar("", "c", "Makefile") == C

    def test_unknown_language_used_as_filename(self):
        assert resolve_grammar("echo hi", "docker-compose.yml") == YAML

    def test_unknown_language_with_filename(self):
        assert resolve_grammar("key: value", "python", "notes.txt") == YAML

    def test_no_language(self):
        assert resolve_grammar("#include <x.h>") == C
        assert resolve_grammar("") == AUTO

    def test_aliases_passed_through(self):
        assert resolve_grammar("", "zsh", aliases={"zsh": "bash"}) == SHELL


class TestLogging:
    def test_decision_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="hilite"):
            detect_grammar("#!/bin/sh")
        assert any("shebang" in r.getMessage() for r in caplog.records)
        assert all(r.name == "hilite.detect" for r in caplog.records)
