"""Builder: attaches reader events to a Document by depth."""

from __future__ import annotations

import logging
from typing import Iterable

from .document import Document
from .reader import LineEvent, read_lines
from .section import Section

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str, *, keep_remainder: bool = False) -> Document:
    """Parse configuration text into a Document.

    Never fails; text without a single key yields an empty Document.
    """
    return build(read_lines(text, keep_remainder=keep_remainder))


def build(events: Iterable[LineEvent]) -> Document:
    """Build a Document from an ordered stream of line events."""
    builder = TreeBuilder()
    for event in events:
        builder.feed(event)
    return builder.document


# ---------------------------------------------------------------------------
# TreeBuilder
# ---------------------------------------------------------------------------

class TreeBuilder:
    """Incrementally attaches events to :attr:`document`.

    ``_open`` holds the chain of sections that can still receive children,
    outermost first, with strictly increasing depths.  A line at depth
    ``d`` closes every open section at depth ``d`` or deeper, then becomes
    a child of the innermost remaining one if that sits at ``d - 1``.

    Otherwise the top-level sections are searched, most recently declared
    first, for one at depth ``d - 1``.  Lines that still have no parent (a
    depth jump, or an indented first line) are kept as top-level sections
    that carry their own depth.
    """

    def __init__(self, document: Document | None = None) -> None:
        self.document = document if document is not None else Document()
        self._open: list[Section] = []

    def feed(self, event: LineEvent) -> Section:
        """Attach one event and return the section created for it."""
        section = Section(event.value, event.depth)

        while self._open and self._open[-1].depth >= event.depth:
            self._open.pop()

        if event.depth == 0 or not self.document:
            self._insert_top(event.key, section)
        elif self._open and self._open[-1].depth == event.depth - 1:
            self._attach(self._open[-1], event.key, section)
        else:
            parent = self._top_level_at(event.depth - 1)
            if parent is not None:
                self._attach(parent, event.key, section)
                self._open = [parent]
            else:
                logger.debug(
                    "No parent at depth %d for %r, keeping it top-level",
                    event.depth - 1,
                    event.key,
                )
                self._insert_top(event.key, section)

        self._open.append(section)
        return section

    def feed_text(self, text: str, *, keep_remainder: bool = False) -> None:
        """Parse *text* and attach its lines after everything fed so far."""
        for event in read_lines(text, keep_remainder=keep_remainder):
            self.feed(event)

    def reset(self) -> None:
        self.document = Document()
        self._open = []

    def _insert_top(self, key: str, section: Section) -> None:
        replaced = self.document.upsert(key, section)
        if replaced is None:
            return
        logger.debug("Overwrote top-level %r", key)
        # A detached subtree must not receive later lines.
        for i, open_section in enumerate(self._open):
            if open_section is replaced:
                del self._open[i:]
                break

    def _top_level_at(self, depth: int) -> Section | None:
        for top in reversed(self.document.sections.values()):
            if top.depth == depth:
                return top
        return None

    @staticmethod
    def _attach(parent: Section, key: str, section: Section) -> None:
        if parent.upsert(key, section) is not None:
            logger.debug("Overwrote %r at depth %d", key, section.depth)
