"""Document tree: the primitive variants of the layout algebra."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prettydoc.diagnostics import (
    DOC_CHAR_INVALID,
    DOC_TEXT_CONTAINS_NEWLINE,
    DOC_TEXT_EMPTY,
    InvalidTextError,
)

if TYPE_CHECKING:
    from prettydoc.layout.options import PageWidth


class DocNode:
    """Shared operators for every document variant."""

    __slots__ = ()

    def __add__(self, other: object) -> Doc:
        if not isinstance(other, DocNode):
            return NotImplemented
        return Cat(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Fail(DocNode):
    """Unrenderable document; any layout path reaching it is rejected."""

    pass


@dataclass(frozen=True, slots=True)
class Empty(DocNode):
    """Zero-width unit of concatenation."""

    pass


@dataclass(frozen=True, slots=True)
class Char(DocNode):
    c: str

    def __post_init__(self) -> None:
        if len(self.c) != 1 or self.c in "\n\r":
            raise InvalidTextError.from_spec(DOC_CHAR_INVALID, detail=f"Got {self.c!r}.")


@dataclass(frozen=True, slots=True)
class Text(DocNode):
    """Non-empty literal run with no line breaks; `text()` keeps single characters as `Char`."""

    s: str

    def __post_init__(self) -> None:
        if not self.s:
            raise InvalidTextError.from_spec(DOC_TEXT_EMPTY)
        if "\n" in self.s or "\r" in self.s:
            raise InvalidTextError.from_spec(DOC_TEXT_CONTAINS_NEWLINE, detail=f"Got {self.s!r}.")


@dataclass(frozen=True, slots=True)
class Line(DocNode):
    """
    Line break at the current indentation.

    A soft line becomes a single space when flattened by a group. A hard line
    cannot be flattened, so any group around it keeps its broken layout.
    """

    hard: bool = False


@dataclass(frozen=True, slots=True)
class FlatAlt(DocNode):
    """Render `when_broken` by default, `when_flat` once a group flattens it."""

    when_broken: Doc
    when_flat: Doc


@dataclass(frozen=True, slots=True)
class Cat(DocNode):
    left: Doc
    right: Doc


@dataclass(frozen=True, slots=True)
class Nest(DocNode):
    """Shift the indentation of line breaks inside `doc` by `delta`."""

    delta: int
    doc: Doc


@dataclass(frozen=True, slots=True)
class Union(DocNode):
    """
    Layout alternative built by grouping.

    Invariant (not checked): `flat` is `broken` with every break flattened.
    """

    flat: Doc
    broken: Doc


@dataclass(frozen=True, slots=True)
class Column(DocNode):
    """Document built from the column the layout has reached."""

    fn: Callable[[int], Doc]


@dataclass(frozen=True, slots=True)
class Nesting(DocNode):
    """Document built from the current indentation level."""

    fn: Callable[[int], Doc]


@dataclass(frozen=True, slots=True)
class WithPageWidth(DocNode):
    """Document built from the page width of the layout call."""

    fn: Callable[[PageWidth], Doc]


@dataclass(frozen=True, slots=True)
class Annotated(DocNode):
    annotation: object
    doc: Doc


type Doc = (
    Fail
    | Empty
    | Char
    | Text
    | Line
    | FlatAlt
    | Cat
    | Nest
    | Union
    | Column
    | Nesting
    | WithPageWidth
    | Annotated
)

LEAF_TYPES = (Empty, Char, Text)


def cat_parts(doc: Doc) -> list[Doc]:
    """Left-to-right operands of a `Cat` spine (no recursion)."""
    parts: list[Doc] = []
    stack: list[Doc] = [doc]
    while stack:
        current = stack.pop()
        if isinstance(current, Cat):
            # right first so left is processed first
            stack.append(current.right)
            stack.append(current.left)
            continue
        parts.append(current)
    return parts


def cat_balanced(parts: list[Doc]) -> Doc:
    """Concatenate as a balanced `Cat` tree; depth stays logarithmic."""
    if not parts:
        return Empty()
    level = list(parts)
    while len(level) > 1:
        paired: list[Doc] = []
        for idx in range(0, len(level) - 1, 2):
            paired.append(Cat(level[idx], level[idx + 1]))
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
    return level[0]
