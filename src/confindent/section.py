"""Section tree nodes and the child API shared with Document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Self, TypeVar

from .accessor import Kind, scalar_get, scalar_get_vec
from .errors import DuplicateKeyError
from .values import Empty, Scalar, Text, to_scalar

T = TypeVar("T")


class ConfParent:
    """Methods for nodes that own named child sections.

    Children live in an insertion-ordered ``dict``; declaration order is
    what the builder and the writer rely on.
    """

    depth: int

    def _entries(self) -> dict[str, "Section"]:
        raise NotImplementedError

    # -- Insertion ------------------------------------------------------

    def upsert(self, key: str, section: "Section") -> "Section | None":
        """Insert *section* under *key*, dropping any previous entry.

        The previous entry goes away with its whole subtree and the new
        one is placed last, as the most recent declaration.  Returns the
        displaced section, if any.
        """
        entries = self._entries()
        replaced = entries.pop(key, None)
        entries[key] = section
        return replaced

    def insert(self, key: str, section: "Section") -> None:
        """Like :meth:`upsert` but refuses to overwrite an existing key."""
        entries = self._entries()
        if key in entries:
            raise DuplicateKeyError(key)
        entries[key] = section

    def create_child(self, key: str, value: object | None = None) -> Self:
        """Create a child one level deeper than this node.

        Overwrites an existing child of the same name.  Returns ``self``
        so calls can be chained::

            conf.create("Host", "example.com")
            conf.child("Host").create("Username", "user").create("Password", "pass")
        """
        self.upsert(key, Section(to_scalar(value), self.depth + 1))
        return self

    def create(self, key: str, value: object | None = None) -> Self:
        return self.create_child(key, value)

    # -- Lookup ---------------------------------------------------------

    def get_child(self, key: str) -> "Section | None":
        return self._entries().get(key)

    def child(self, key: str) -> "Section | None":
        return self.get_child(key)

    # Same as get_child: lookups always return the live node.
    def get_child_mut(self, key: str) -> "Section | None":
        return self.get_child(key)

    def child_mut(self, key: str) -> "Section | None":
        return self.get_child(key)

    def get_child_value(self, key: str, kind: Kind[T] = str) -> T | None:
        """Typed value of child *key*, or ``None`` if missing or unconvertible."""
        section = self.get_child(key)
        if section is None:
            return None
        return section.get(kind)

    def child_value(self, key: str, kind: Kind[T] = str) -> T | None:
        return self.get_child_value(key, kind)

    def find(self, *keys: str) -> "Section | None":
        """Walk a key path, e.g. ``conf.find("Host", "Username")``."""
        node: ConfParent = self
        for key in keys:
            found = node.get_child(key)
            if found is None:
                return None
            node = found
        return node if keys else None

    # -- Mapping-ish protocol -------------------------------------------

    def keys(self):
        return self._entries().keys()

    def items(self):
        return self._entries().items()

    def __contains__(self, key: object) -> bool:
        return key in self._entries()

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries())

    def __len__(self) -> int:
        return len(self._entries())


@dataclass(eq=True)
class Section(ConfParent):
    """A named node: one scalar value plus ordered child sections."""

    value: Scalar = Empty
    depth: int = 0
    children: dict[str, "Section"] = field(default_factory=dict)

    # ConfParent defines __len__, which would make childless sections falsy.
    def __bool__(self) -> bool:
        return True

    def _entries(self) -> dict[str, "Section"]:
        return self.children

    # -- Value access ---------------------------------------------------

    def get_value(self, kind: Kind[T] = str) -> T | None:
        """Return the value converted with *kind*.

        ``None`` when the section has no value or the conversion fails.
        """
        return scalar_get(self.value, kind)

    def get(self, kind: Kind[T] = str) -> T | None:
        return self.get_value(kind)

    def get_vec(self, kind: Kind[T] = str) -> list[T] | None:
        """Return the comma-separated value as a list of *kind*.

        ``None`` when the value is missing or any element fails to convert.
        """
        return scalar_get_vec(self.value, kind)

    def set_value(self, value: object) -> "Section":
        """Replace the value with the text of *value*.

        The format has no escaping.  Text containing whitespace or a line
        break is written verbatim, so reading it back keeps only the first
        token (all of it on one line with ``keep_remainder=True``), and an
        empty string reads back as ``Empty``.
        """
        self.value = Text(str(value))
        return self

    def set(self, value: object) -> "Section":
        return self.set_value(value)
