"""Read and write configuration files.

Thin wrappers around :func:`confindent.parse` and
:func:`confindent.serialize`.  ``OSError`` and decoding errors reach the
caller untouched.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from . import config
from .builder import parse
from .document import Document
from .writer import serialize

logger = logging.getLogger(__name__)


def load(
    path: str | PathLike[str],
    *,
    encoding: str | None = None,
    keep_remainder: bool = False,
) -> Document:
    """Parse the configuration file at *path*."""
    path = Path(path)
    text = path.read_text(encoding=encoding or config.CONFINDENT_ENCODING)
    logger.debug("Read %d characters from %s", len(text), path)
    return parse(text, keep_remainder=keep_remainder)


def dump(
    document: Document,
    path: str | PathLike[str],
    *,
    encoding: str | None = None,
    indent: str | None = None,
) -> None:
    """Write *document* to *path*, replacing any existing file."""
    path = Path(path)
    text = serialize(document, indent=indent)
    path.write_text(text, encoding=encoding or config.CONFINDENT_ENCODING)
    logger.debug("Wrote %d sections to %s", len(document), path)
