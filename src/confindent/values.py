"""Scalar value types for confindent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class Text:
    value: str

    def __str__(self) -> str:
        return self.value


class _Empty:
    """Singleton for a section that carries no value."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""


Empty = _Empty()

Scalar = Union[Text, _Empty]


def to_scalar(raw: object | None) -> Scalar:
    """Wrap *raw* as a Text value; ``None`` maps to Empty."""
    if raw is None:
        return Empty
    return Text(str(raw))
