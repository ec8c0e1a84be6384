"""Typed conversion of scalar values.

A *kind* is any callable that builds a value from a string (``int``,
``float``, ``Decimal``, ``Path``, a user function ...).  Conversion failure
and a missing value both come back as ``None``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .values import Scalar, _Empty

T = TypeVar("T")

Kind = Callable[[str], T]


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a bool: {text!r}")


# Kinds whose constructor accepts any string without complaint.
_STRICT_KINDS: dict[type, Callable[[str], object]] = {
    bool: _parse_bool,
}


def _parser_for(kind: Kind[T]) -> Callable[[str], T]:
    if isinstance(kind, type):
        return _STRICT_KINDS.get(kind, kind)
    return kind


def from_str(text: str, kind: Kind[T] = str) -> T | None:
    """Convert *text* with *kind*; ``None`` if the conversion fails."""
    parse = _parser_for(kind)
    try:
        return parse(text)
    except (ValueError, TypeError, ArithmeticError):
        return None


def from_str_list(text: str, kind: Kind[T] = str) -> list[T] | None:
    """Convert a comma-separated list; one bad element fails the whole list."""
    parse = _parser_for(kind)
    items: list[T] = []
    for piece in text.split(","):
        try:
            items.append(parse(piece.strip()))
        except (ValueError, TypeError, ArithmeticError):
            return None
    return items


def scalar_get(value: Scalar, kind: Kind[T] = str) -> T | None:
    if isinstance(value, _Empty):
        return None
    return from_str(value.value, kind)


def scalar_get_vec(value: Scalar, kind: Kind[T] = str) -> list[T] | None:
    if isinstance(value, _Empty):
        return None
    return from_str_list(value.value, kind)
