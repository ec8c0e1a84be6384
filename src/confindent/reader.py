"""Reader layer: turns configuration text into per-line events.

Every non-blank line becomes one :class:`LineEvent`.  The reader never
raises; odd input degrades instead:

- blank or whitespace-only lines produce nothing
- an odd trailing space in the indentation is ignored
- tokens after the value are dropped unless ``keep_remainder`` is set
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .values import Empty, Scalar, Text


_TAB = "\t"
_SPACE_PAIR = "  "


@dataclass(slots=True)
class LineEvent:
    key: str
    depth: int
    value: Scalar = Empty


# ---------------------------------------------------------------------------
# Indentation
# ---------------------------------------------------------------------------

def measure_indent(line: str) -> tuple[int, str]:
    """Strip leading indentation units and count them.

    A unit is one tab or exactly two spaces; both may be mixed on a line.

    >>> measure_indent("\\t  Key Value")
    (2, 'Key Value')
    """
    depth = 0
    pos = 0
    while True:
        if line.startswith(_TAB, pos):
            pos += 1
        elif line.startswith(_SPACE_PAIR, pos):
            pos += 2
        else:
            break
        depth += 1
    return depth, line[pos:]


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def parse_line(line: str, *, keep_remainder: bool = False) -> LineEvent | None:
    """Parse one physical line; ``None`` for lines that carry no key."""
    if not line.strip():
        return None

    depth, rest = measure_indent(line)

    if keep_remainder:
        fields = rest.split(None, 1)
    else:
        fields = rest.split()
    if not fields:
        return None

    key = fields[0]
    if len(fields) < 2:
        return LineEvent(key, depth)
    value = fields[1].strip() if keep_remainder else fields[1]
    return LineEvent(key, depth, Text(value))


def read_lines(text: str, *, keep_remainder: bool = False) -> Iterator[LineEvent]:
    """Yield a :class:`LineEvent` for every meaningful line in *text*."""
    for line in text.splitlines():
        event = parse_line(line, keep_remainder=keep_remainder)
        if event is not None:
            yield event
