"""Logger lookup under the hilite namespace."""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger whose name is prefixed with "hilite."."""
    if not (name == "hilite" or name.startswith("hilite.")):
        name = f"hilite.{name}"
    return logging.getLogger(name)
