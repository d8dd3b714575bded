"""Centralized document cases used across layout/tree/fusion tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from prettydoc.doc import (
    COLON,
    HARDLINE,
    SPACE,
    Cat,
    Doc,
    Empty,
    Line,
    Nest,
    Text,
    Union,
    align,
    annotate,
    fill,
    fill_sep,
    hsep,
    list_doc,
    nest,
    parens,
    pretty,
    sep,
    text,
    vcat,
)


@dataclass(frozen=True, slots=True)
class DocCase:
    name: str
    build: Callable[[], Doc]
    min_width: int
    """Narrowest page on which no line overflows."""


def fn_call() -> Doc:
    return Cat(
        Text("fn"),
        Union(Text(" foo()"), Cat(Nest(2, Cat(Line(), Text("foo()"))), Empty())),
    )


def type_signature() -> Doc:
    arrows = ["::"] + ["->"] * 3
    types = ["Int", "Bool", "Char", "IO ()"]
    parts = [hsep([text(arrow), text(ty)]) for arrow, ty in zip(arrows, types)]
    return text("example") + SPACE + align(sep(parts))


def number_list() -> Doc:
    return list_doc(pretty(i) for i in range(1, 6))


def def_main() -> Doc:
    body = HARDLINE + annotate("kw", text("return")) + SPACE + text("0")
    return (
        annotate("kw", text("def"))
        + SPACE
        + annotate("name", text("main"))
        + parens(Empty())
        + COLON
        + nest(4, body)
    )


def filled_words() -> Doc:
    words = "lorem ipsum dolor sit amet consectetur adipiscing elit".split()
    return fill_sep(text(word) for word in words)


def let_table() -> Doc:
    signatures = [
        ("empty", "Doc"),
        ("nest", "Int -> Doc -> Doc"),
        ("fillSep", "[Doc] -> Doc"),
    ]
    rows = [fill(5, text(name)) + text(" :: ") + text(ty) for name, ty in signatures]
    return text("let") + nest(4, HARDLINE + vcat(rows))


DOC_CASES: tuple[DocCase, ...] = (
    DocCase(name="fn_call", build=fn_call, min_width=7),
    DocCase(name="type_signature", build=type_signature, min_width=16),
    DocCase(name="number_list", build=number_list, min_width=5),
    DocCase(name="def_main", build=def_main, min_width=12),
    DocCase(name="filled_words", build=filled_words, min_width=11),
    DocCase(name="let_table", build=let_table, min_width=30),
)


def case_id(case: DocCase) -> str:
    return case.name
