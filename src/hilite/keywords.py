"""Keyword vocabularies: one fixed set and one membership predicate per grammar."""

from __future__ import annotations

from hilite.tokens import Grammar

C_KEYWORDS: frozenset[str] = frozenset(
    {
        # C89 / C99
        "auto", "break", "case", "char", "const", "continue", "default", "do",
        "double", "else", "enum", "extern", "float", "for", "goto", "if",
        "int", "long", "register", "return", "short", "signed", "sizeof", "static",
        "struct", "switch", "typedef", "union", "unsigned", "void", "volatile", "while",
        # C99 / C11
        "inline", "restrict", "_Bool", "_Complex", "_Imaginary", "_Static_assert",
        "_Alignas", "_Alignof", "_Atomic", "_Generic", "_Noreturn", "_Thread_local",
        # C++
        "class", "namespace", "template", "typename", "public", "private", "protected",
        "virtual", "override", "final", "explicit", "operator", "new", "delete",
        "this", "nullptr", "true", "false", "try", "catch", "throw",
        # Common types
        "size_t", "ssize_t", "uint8_t", "uint16_t", "uint32_t", "uint64_t",
        "int8_t", "int16_t", "int32_t", "int64_t", "bool", "string",
        # Kernel modules
        "MODULE_LICENSE", "MODULE_AUTHOR", "MODULE_DESCRIPTION", "MODULE_VERSION",
        "module_init", "module_exit", "__init", "__exit", "KERN_INFO", "KERN_ERR",
        "printk", "kmalloc", "kfree", "GFP_KERNEL", "EXPORT_SYMBOL", "EXPORT_SYMBOL_GPL",
        "static_assert", "__attribute__", "__packed", "__aligned", "likely", "unlikely",
        # Preprocessor directives (the # is scanned separately)
        "include", "define", "ifdef", "ifndef", "endif", "pragma", "undef",
        "error", "warning", "line", "elif",
    }
)  # fmt: skip

SHELL_KEYWORDS: frozenset[str] = frozenset(
    {
        # Reserved words
        "if", "then", "else", "elif", "fi", "case", "esac", "for", "select",
        "while", "until", "do", "done", "function", "time", "coproc",
        "in", "break", "continue", "return", "exit", "trap", "wait",
        # Builtins
        "echo", "printf", "read", "test", "cd", "pwd", "pushd", "popd",
        "dirs", "jobs", "bg", "fg", "disown", "kill", "killall",
        "export", "unset", "set", "unalias", "alias", "source", "eval",
        "exec", "shift", "getopts", "declare", "local", "readonly",
        "typeset", "let", "compgen", "complete", "shopt", "bind",
        # Common commands
        "ls", "mkdir", "rmdir", "rm", "cp", "mv", "ln", "find", "grep",
        "sed", "awk", "sort", "uniq", "cut", "tr", "head", "tail",
        "cat", "less", "more", "file", "which", "whereis", "locate",
        "chmod", "chown", "chgrp", "umask", "du", "df", "mount", "umount",
        "ps", "top", "htop", "pgrep", "pkill", "nohup", "screen", "tmux",
        "tar", "gzip", "gunzip", "zip", "unzip", "curl", "wget", "ssh",
        "scp", "rsync", "git", "make", "gcc", "g++", "clang", "cargo",
        "npm", "yarn", "pip", "apt", "yum", "dnf", "pacman", "sudo", "su",
        # System administration
        "uname", "uptime", "who", "whoami", "last", "history",
        "env", "setenv", "printenv", "lsmod", "modprobe", "insmod",
        "rmmod", "dmesg", "lsof", "strace", "ltrace", "vmstat",
        "iostat", "mpstat", "free", "iotop", "atop", "sar", "watch",
        "cron", "crontab", "systemctl", "service", "chkconfig",
        "sysctl", "journalctl", "dstat", "iftop", "netstat", "ss",
        "ip", "ifconfig", "route", "ping", "traceroute", "dig",
        "nslookup", "host", "iptables", "ufw", "selinux", "apparmor",
        "auditd", "systemd", "sysvinit", "upstart",
    }
)  # fmt: skip

# Hyphenated and symbolic entries never match a scanned identifier.
MAKEFILE_KEYWORDS: frozenset[str] = frozenset(
    {
        # Standard targets
        "all", "clean", "install", "uninstall", "distclean", "check", "test",
        "dist", "distcheck", "maintainer-clean", "mostlyclean", "realclean",
        "info", "dvi", "html", "pdf", "ps", "tags", "TAGS",
        # Directives
        "include", "sinclude", "-include", "override", "export", "unexport",
        "vpath", "define", "endef", "ifdef", "ifndef", "ifeq", "ifneq",
        "else", "endif", "error", "warning", "eval", "call",
        # Functions
        "subst", "patsubst", "strip", "findstring", "filter", "filter-out",
        "sort", "word", "wordlist", "words", "firstword", "lastword",
        "dir", "notdir", "suffix", "basename", "addsuffix", "addprefix",
        "join", "wildcard", "realpath", "abspath", "if", "or", "and",
        "foreach", "file", "shell", "origin", "flavor", "value",
        # Toolchain
        "gcc", "g++", "clang", "clang++", "ld", "ar", "ranlib",
        "objcopy", "objdump", "nm", "size", "readelf", "make", "cmake",
        "pkg-config", "autoconf", "automake", "libtool", "cp",
        "rm", "mkdir", "rmdir", "ln", "chmod", "chown", "tar", "gzip",
    }
)  # fmt: skip

YAML_KEYWORDS: frozenset[str] = frozenset(
    {
        # Booleans
        "true", "True", "TRUE", "false", "False", "FALSE",
        "yes", "Yes", "YES", "no", "No", "NO",
        "on", "On", "ON", "off", "Off", "OFF",
        # Null
        "null", "Null", "NULL", "~",
        # Special floats (never match a scanned identifier)
        ".nan", ".NaN", ".NAN", ".inf", ".Inf", ".INF",
        "-.inf", "-.Inf", "-.INF", "+.inf", "+.Inf", "+.INF",
        # Document markers
        "---", "...",
        # package manifests
        "version", "name", "description", "author", "license", "main",
        "scripts", "dependencies", "devDependencies", "keywords",
        "repository", "bugs", "homepage", "engines", "private",
        # CI workflows
        "jobs", "runs-on", "steps", "uses", "with", "run",
        "env", "if", "needs", "strategy", "matrix", "include", "exclude",
        "services", "container", "volumes", "ports", "options",
        "timeout-minutes", "continue-on-error", "outputs", "secrets",
        "workflow_dispatch", "push", "pull_request", "schedule", "cron",
        # Compose files
        "networks", "configs",
        "image", "build", "command", "entrypoint", "working_dir",
        "user", "expose", "environment",
        "env_file", "depends_on", "links", "restart",
        # Kubernetes manifests
        "apiVersion", "kind", "metadata", "spec", "status",
        "namespace", "annotations", "selector",
        "template", "containers", "volumeMounts",
        "resources", "limits", "requests", "cpu", "memory",
        "replicas", "rollingUpdate", "maxSurge", "maxUnavailable",
    }
)  # fmt: skip


def is_c_keyword(text: str) -> bool:
    return text in C_KEYWORDS


def is_shell_keyword(text: str) -> bool:
    return text in SHELL_KEYWORDS


def is_makefile_keyword(text: str) -> bool:
    return text in MAKEFILE_KEYWORDS


def is_yaml_keyword(text: str) -> bool:
    return text in YAML_KEYWORDS


def is_keyword(text: str, grammar: Grammar) -> bool:
    """Return True if text is reserved under grammar.

    AUTO tests the C, shell and YAML vocabularies; the makefile vocabulary
    is not part of the AUTO union.
    """
    if grammar is Grammar.C:
        return is_c_keyword(text)
    if grammar is Grammar.SHELL:
        return is_shell_keyword(text)
    if grammar is Grammar.MAKEFILE:
        return is_makefile_keyword(text)
    if grammar is Grammar.YAML:
        return is_yaml_keyword(text)
    return is_c_keyword(text) or is_shell_keyword(text) or is_yaml_keyword(text)
