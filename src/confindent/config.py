"""Local configuration for confindent."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_INDENT_NAME = "tab"

# The only units the reader counts as one level of nesting.
INDENT_UNITS: dict[str, str] = {
    "tab": "\t",
    "space": "  ",
}

CONFINDENT_ENCODING = os.getenv("CONFINDENT_ENCODING", DEFAULT_ENCODING)
CONFINDENT_INDENT = INDENT_UNITS.get(
    os.getenv("CONFINDENT_INDENT", DEFAULT_INDENT_NAME).strip().lower(),
    INDENT_UNITS[DEFAULT_INDENT_NAME],
)
