"""confindent: configuration by indentation."""

from .builder import TreeBuilder, build, parse
from .document import Document
from .errors import ConfindentError, DuplicateKeyError, IndentError
from .files import dump, load
from .reader import LineEvent, read_lines
from .repl import ConfRepl
from .section import ConfParent, Section
from .values import Empty, Scalar, Text, _Empty
from .writer import section_to_text, serialize

__all__ = [
    "parse",
    "serialize",
    "build",
    "load",
    "dump",
    "Document",
    "Section",
    "ConfParent",
    "TreeBuilder",
    "LineEvent",
    "read_lines",
    "section_to_text",
    "Empty",
    "Scalar",
    "Text",
    "_Empty",
    "ConfindentError",
    "DuplicateKeyError",
    "IndentError",
    "ConfRepl",
]
