"""Writer: renders sections and documents back to indented text."""

from __future__ import annotations

from . import config
from .document import Document
from .errors import IndentError
from .section import Section


def _check_indent(indent: str | None) -> str:
    if indent is None:
        return config.CONFINDENT_INDENT
    if indent not in config.INDENT_UNITS.values():
        raise IndentError(
            f"indent must be a tab or two spaces, got {indent!r}"
        )
    return indent


def section_to_text(key: str, section: Section, indent: str | None = None) -> str:
    """Render *section* under *key* with its children one unit deeper.

    The first line is always ``"<key> <value>"``; an empty value leaves
    the trailing space in place.
    """
    unit = _check_indent(indent)
    lines = [f"{key} {section.value}"]
    for child_key, child in section.children.items():
        child_text = section_to_text(child_key, child, unit)
        lines.extend(unit + line for line in child_text.split("\n"))
    return "\n".join(lines)


def serialize(document: Document, indent: str | None = None) -> str:
    """Render every top-level section, separated by a blank line."""
    unit = _check_indent(indent)
    blocks = [
        section_to_text(key, section, unit)
        for key, section in document.sections.items()
    ]
    return "\n\n".join(blocks).strip()
