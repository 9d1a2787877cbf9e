"""
Text style attributes for BBCode output.

A StyleSet is an immutable bag of the four presentation attributes the
markup supports. Sets combine with `merge`, where the argument is the more
specific style:

  - color/size: the argument's value wins when present, else the receiver's
  - bold/italic: true when either side is true

`StyleSet()` is the identity on both sides. When several sets are combined the
rightmost non-default value wins, so callers list the base style first and the
most specific override last.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Optional


@dataclass(frozen=True)
class StyleSet:
    color: Optional[str] = None
    size: Optional[int] = None
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        if self.size is not None and self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    # Single-attribute constructors; module-level aliases below.
    @classmethod
    def with_color(cls, color: str) -> "StyleSet":
        return cls(color=color)

    @classmethod
    def with_size(cls, size: int) -> "StyleSet":
        return cls(size=size)

    @classmethod
    def with_bold(cls) -> "StyleSet":
        return cls(bold=True)

    @classmethod
    def with_italic(cls) -> "StyleSet":
        return cls(italic=True)

    def merge(self, other: "StyleSet") -> "StyleSet":
        """Return this style overridden by ``other``."""
        return StyleSet(
            color=other.color if other.color is not None else self.color,
            size=other.size if other.size is not None else self.size,
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
        )

    @classmethod
    def combine(cls, *styles: "StyleSet") -> "StyleSet":
        """Fold ``styles`` left to right with `merge`."""
        return reduce(lambda acc, s: acc.merge(s), styles, cls())

    @property
    def is_plain(self) -> bool:
        return self == StyleSet()


def color(value: str) -> StyleSet:
    return StyleSet.with_color(value)


def size(value: int) -> StyleSet:
    return StyleSet.with_size(value)


def bold() -> StyleSet:
    return StyleSet.with_bold()


def italic() -> StyleSet:
    return StyleSet.with_italic()


__all__ = ["StyleSet", "bold", "color", "italic", "size"]
