"""Structured form of a stream with annotation regions nested."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TreeFail:
    pass


@dataclass(frozen=True, slots=True)
class TreeEmpty:
    pass


@dataclass(frozen=True, slots=True)
class TreeChar:
    char: str


@dataclass(frozen=True, slots=True)
class TreeText:
    text: str


@dataclass(frozen=True, slots=True)
class TreeLine:
    indent: int


@dataclass(frozen=True, slots=True)
class TreeConcat:
    children: tuple["Tree", ...]


@dataclass(frozen=True, slots=True)
class TreeAnnotated:
    annotation: object
    child: "Tree"


type Tree = TreeFail | TreeEmpty | TreeChar | TreeText | TreeLine | TreeConcat | TreeAnnotated
