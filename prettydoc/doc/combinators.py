"""Document combinators built from the primitive variants."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Final

from prettydoc.diagnostics import DOC_TEXT_CONTAINS_NEWLINE, InvalidTextError
from prettydoc.doc.flatten import group
from prettydoc.doc.model import (
    Annotated,
    Cat,
    Char,
    Column,
    Doc,
    Empty,
    FlatAlt,
    Line,
    Nest,
    Nesting,
    Text,
    Union,
    WithPageWidth,
    cat_balanced,
)

if TYPE_CHECKING:
    from prettydoc.layout.options import PageWidth


def text(s: str) -> Doc:
    """Literal text without line breaks; `""` is `Empty`, one character is `Char`."""
    if "\n" in s or "\r" in s:
        raise InvalidTextError.from_spec(DOC_TEXT_CONTAINS_NEWLINE, detail=f"Got {s!r}.")
    if not s:
        return Empty()
    if len(s) == 1:
        return Char(s)
    return Text(s)


def pretty(value: object) -> Doc:
    """Text of `str(value)`, with embedded newlines turned into `line`s."""
    s = value if isinstance(value, str) else str(value)
    return vsep(text(piece) for piece in s.replace("\r\n", "\n").split("\n"))


def empty() -> Doc:
    return Empty()


LINE: Final[Doc] = FlatAlt(Line(), Char(" "))
"""Line break; a space when grouped flat."""

LINE_: Final[Doc] = FlatAlt(Line(), Empty())
"""Line break; nothing when grouped flat."""

SOFTLINE: Final[Doc] = Union(Char(" "), Line())
"""A space if the rest fits, else a line break."""

SOFTLINE_: Final[Doc] = Union(Empty(), Line())

HARDLINE: Final[Doc] = Line(hard=True)
"""Always breaks; prevents any enclosing group from flattening."""


def line() -> Doc:
    return LINE


def line_() -> Doc:
    return LINE_


def softline() -> Doc:
    return SOFTLINE


def softline_() -> Doc:
    return SOFTLINE_


def hardline() -> Doc:
    return HARDLINE


def flat_alt(when_broken: Doc, when_flat: Doc) -> Doc:
    return FlatAlt(when_broken, when_flat)


def nest(delta: int, doc: Doc) -> Doc:
    if delta == 0:
        return doc
    return Nest(delta, doc)


def column(fn: Callable[[int], Doc]) -> Doc:
    return Column(fn)


def nesting(fn: Callable[[int], Doc]) -> Doc:
    return Nesting(fn)


def page_width(fn: Callable[[PageWidth], Doc]) -> Doc:
    return WithPageWidth(fn)


def annotate(annotation: object, doc: Doc) -> Doc:
    return Annotated(annotation, doc)


def width(doc: Doc, fn: Callable[[int], Doc]) -> Doc:
    """Lay out `doc`, then `fn(w)` where `w` is the number of columns `doc` advanced."""
    return Column(lambda start: doc + Column(lambda end: fn(end - start)))


def align(doc: Doc) -> Doc:
    """Nest `doc` at the current column instead of the current indentation."""
    return Column(lambda col: Nesting(lambda ind: Nest(col - ind, doc)))


def hang(delta: int, doc: Doc) -> Doc:
    return align(nest(delta, doc))


def indent(delta: int, doc: Doc) -> Doc:
    return hang(delta, spaces(delta) + doc)


def spaces(n: int) -> Doc:
    if n <= 0:
        return Empty()
    if n == 1:
        return Char(" ")
    return Text(" " * n)


def concat(*docs: Doc) -> Doc:
    return cat_balanced(list(docs))


def concat_with(op: Callable[[Doc, Doc], Doc], docs: Iterable[Doc]) -> Doc:
    """
    Combine `docs` pairwise with `op`, as a balanced fold.

    `op` must be associative, which all the list combinators here are.
    """
    level = list(docs)
    if not level:
        return Empty()
    while len(level) > 1:
        paired: list[Doc] = []
        for idx in range(0, len(level) - 1, 2):
            paired.append(op(level[idx], level[idx + 1]))
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
    return level[0]


def space_join(left: Doc, right: Doc) -> Doc:
    return left + Char(" ") + right


def hsep(docs: Iterable[Doc]) -> Doc:
    return concat_with(space_join, docs)


def vsep(docs: Iterable[Doc]) -> Doc:
    return concat_with(lambda x, y: x + LINE + y, docs)


def fill_sep(docs: Iterable[Doc]) -> Doc:
    return concat_with(lambda x, y: x + SOFTLINE + y, docs)


def sep(docs: Iterable[Doc]) -> Doc:
    return group(vsep(docs))


def hcat(docs: Iterable[Doc]) -> Doc:
    return concat_with(Cat, docs)


def vcat(docs: Iterable[Doc]) -> Doc:
    return concat_with(lambda x, y: x + LINE_ + y, docs)


def fill_cat(docs: Iterable[Doc]) -> Doc:
    return concat_with(lambda x, y: x + SOFTLINE_ + y, docs)


def cat(docs: Iterable[Doc]) -> Doc:
    return group(vcat(docs))


def punctuate(punctuation: Doc, docs: Iterable[Doc]) -> list[Doc]:
    """Append `punctuation` to every document but the last."""
    items = list(docs)
    return [doc + punctuation for doc in items[:-1]] + items[-1:]


def fill(n: int, doc: Doc) -> Doc:
    """Pad `doc` with spaces up to width `n`."""
    return width(doc, lambda w: spaces(n - w))


def fill_break(n: int, doc: Doc) -> Doc:
    """Pad `doc` up to width `n`; if it is wider, break and indent by `n` instead."""
    return width(doc, lambda w: nest(n, LINE_) if w > n else spaces(n - w))


def enclose(left: Doc, right: Doc, doc: Doc) -> Doc:
    return left + doc + right


def surround(doc: Doc, left: Doc, right: Doc) -> Doc:
    return left + doc + right


def enclose_sep(left: Doc, right: Doc, separator: Doc, docs: Iterable[Doc]) -> Doc:
    """
    Enclose `docs` in `left`/`right`, each entry after the first led by `separator`.

    Flat: `[1, 2, 3]`. Broken, the separators line up with the opening delimiter.
    """
    items = list(docs)
    if not items:
        return left + right
    if len(items) == 1:
        return left + items[0] + right
    leaders = [left] + [separator] * (len(items) - 1)
    return cat(leader + item for leader, item in zip(leaders, items)) + right


def list_doc(docs: Iterable[Doc]) -> Doc:
    return group(
        enclose_sep(FlatAlt(text("[ "), LBRACKET), FlatAlt(text(" ]"), RBRACKET), text(", "), docs)
    )


def tupled(docs: Iterable[Doc]) -> Doc:
    return group(
        enclose_sep(FlatAlt(text("( "), LPAREN), FlatAlt(text(" )"), RPAREN), text(", "), docs)
    )


def plural(one: Doc, many: Doc, n: int) -> Doc:
    return one if n == 1 else many


LPAREN: Final[Doc] = Char("(")
RPAREN: Final[Doc] = Char(")")
LANGLE: Final[Doc] = Char("<")
RANGLE: Final[Doc] = Char(">")
LBRACE: Final[Doc] = Char("{")
RBRACE: Final[Doc] = Char("}")
LBRACKET: Final[Doc] = Char("[")
RBRACKET: Final[Doc] = Char("]")
SQUOTE: Final[Doc] = Char("'")
DQUOTE: Final[Doc] = Char('"')
SEMI: Final[Doc] = Char(";")
COLON: Final[Doc] = Char(":")
COMMA: Final[Doc] = Char(",")
SPACE: Final[Doc] = Char(" ")
DOT: Final[Doc] = Char(".")
SLASH: Final[Doc] = Char("/")
BACKSLASH: Final[Doc] = Char("\\")
EQUALS: Final[Doc] = Char("=")
PIPE: Final[Doc] = Char("|")


def squotes(doc: Doc) -> Doc:
    return enclose(SQUOTE, SQUOTE, doc)


def dquotes(doc: Doc) -> Doc:
    return enclose(DQUOTE, DQUOTE, doc)


def parens(doc: Doc) -> Doc:
    return enclose(LPAREN, RPAREN, doc)


def angles(doc: Doc) -> Doc:
    return enclose(LANGLE, RANGLE, doc)


def brackets(doc: Doc) -> Doc:
    return enclose(LBRACKET, RBRACKET, doc)


def braces(doc: Doc) -> Doc:
    return enclose(LBRACE, RBRACE, doc)
