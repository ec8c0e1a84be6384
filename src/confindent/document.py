"""Document: the root of a parsed configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from .section import ConfParent, Section


@dataclass(eq=True)
class Document(ConfParent):
    """Holds the ordered top-level sections of a configuration."""

    sections: dict[str, Section] = field(default_factory=dict)

    @property
    def depth(self) -> int:
        # Top-level sections are created at depth 0.
        return -1

    def _entries(self) -> dict[str, Section]:
        return self.sections

    # -- Text conversion ------------------------------------------------

    @classmethod
    def from_str(cls, text: str, *, keep_remainder: bool = False) -> "Document":
        from .builder import parse
        return parse(text, keep_remainder=keep_remainder)

    def to_string(self, indent: str | None = None) -> str:
        from .writer import serialize
        return serialize(self, indent=indent)

    def __str__(self) -> str:
        return self.to_string()

    # -- Files ----------------------------------------------------------

    @classmethod
    def from_file(
        cls,
        path: str | PathLike[str],
        *,
        encoding: str | None = None,
        keep_remainder: bool = False,
    ) -> "Document":
        """Read and parse the file at *path*; I/O errors propagate."""
        from .files import load
        return load(path, encoding=encoding, keep_remainder=keep_remainder)

    def to_file(
        self,
        path: str | PathLike[str],
        *,
        encoding: str | None = None,
        indent: str | None = None,
    ) -> None:
        """Serialize into the file at *path*, replacing its contents."""
        from .files import dump
        dump(self, path, encoding=encoding, indent=indent)
