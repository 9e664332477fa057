"""Error types for the command-line and configuration layers.

The tokenizer and detector never raise; these only cover the outer surfaces.
"""

from __future__ import annotations

from pathlib import Path


class HiliteError(Exception):
    """Base class for hilite errors."""


class ConfigError(HiliteError):
    """Raised when a configuration file cannot be read or has invalid values."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}\n  --> {self.path}"
