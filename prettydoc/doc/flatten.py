"""Flattening and grouping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from prettydoc.doc.model import (
    Annotated,
    Cat,
    Char,
    Column,
    Doc,
    Fail,
    FlatAlt,
    Line,
    Nest,
    Nesting,
    Union,
    WithPageWidth,
    cat_balanced,
    cat_parts,
)


class FlattenOutcome(StrEnum):
    FLATTENED = "flattened"
    ALREADY_FLAT = "already_flat"
    NEVER_FLAT = "never_flat"


@dataclass(frozen=True, slots=True)
class FlattenResult:
    outcome: FlattenOutcome
    doc: Doc | None = None


_ALREADY_FLAT = FlattenResult(FlattenOutcome.ALREADY_FLAT)
_NEVER_FLAT = FlattenResult(FlattenOutcome.NEVER_FLAT)


def flatten(doc: Doc) -> Doc:
    """Replace every break with its flat form; hard lines become `Fail`."""
    if isinstance(doc, Cat):
        return cat_balanced([flatten(part) for part in cat_parts(doc)])
    if isinstance(doc, Line):
        return Fail() if doc.hard else Char(" ")
    if isinstance(doc, FlatAlt):
        return flatten(doc.when_flat)
    if isinstance(doc, Union):
        return flatten(doc.flat)
    if isinstance(doc, Nest):
        return Nest(doc.delta, flatten(doc.doc))
    if isinstance(doc, Annotated):
        return Annotated(doc.annotation, flatten(doc.doc))
    if isinstance(doc, Column):
        fn = doc.fn
        return Column(lambda col: flatten(fn(col)))
    if isinstance(doc, Nesting):
        fn = doc.fn
        return Nesting(lambda ind: flatten(fn(ind)))
    if isinstance(doc, WithPageWidth):
        fn = doc.fn
        return WithPageWidth(lambda pw: flatten(fn(pw)))
    return doc


def changes_upon_flattening(doc: Doc) -> FlattenResult:
    """
    Flatten `doc`, reporting whether anything changed.

    `ALREADY_FLAT` means the document has no breaks, so grouping it would only
    duplicate it. `NEVER_FLAT` means a hard line sits on every flat path.
    """
    if isinstance(doc, Cat):
        return _changes_in_cat(doc)
    if isinstance(doc, Line):
        return _NEVER_FLAT if doc.hard else FlattenResult(FlattenOutcome.FLATTENED, Char(" "))
    if isinstance(doc, FlatAlt):
        return FlattenResult(FlattenOutcome.FLATTENED, flatten(doc.when_flat))
    if isinstance(doc, Union):
        return FlattenResult(FlattenOutcome.FLATTENED, doc.flat)
    if isinstance(doc, Nest):
        inner = changes_upon_flattening(doc.doc)
        if inner.outcome is FlattenOutcome.FLATTENED:
            return FlattenResult(FlattenOutcome.FLATTENED, Nest(doc.delta, inner.doc))
        return inner
    if isinstance(doc, Annotated):
        inner = changes_upon_flattening(doc.doc)
        if inner.outcome is FlattenOutcome.FLATTENED:
            return FlattenResult(FlattenOutcome.FLATTENED, Annotated(doc.annotation, inner.doc))
        return inner
    if isinstance(doc, (Column, Nesting, WithPageWidth)):
        return FlattenResult(FlattenOutcome.FLATTENED, flatten(doc))
    return _ALREADY_FLAT


def _changes_in_cat(doc: Cat) -> FlattenResult:
    parts = cat_parts(doc)
    flattened: list[Doc] = []
    changed = False
    for part in parts:
        result = changes_upon_flattening(part)
        if result.outcome is FlattenOutcome.NEVER_FLAT:
            return _NEVER_FLAT
        if result.outcome is FlattenOutcome.FLATTENED:
            assert result.doc is not None
            flattened.append(result.doc)
            changed = True
        else:
            flattened.append(part)
    if not changed:
        return _ALREADY_FLAT
    return FlattenResult(FlattenOutcome.FLATTENED, cat_balanced(flattened))


def group(doc: Doc) -> Doc:
    """Offer the layout a flat alternative: `Union(flatten(doc), doc)`."""
    if isinstance(doc, Union):
        return doc
    if isinstance(doc, FlatAlt):
        result = changes_upon_flattening(doc.when_flat)
        if result.outcome is FlattenOutcome.FLATTENED:
            assert result.doc is not None
            return Union(result.doc, doc.when_broken)
        if result.outcome is FlattenOutcome.ALREADY_FLAT:
            return Union(doc.when_flat, doc.when_broken)
        # the flat branch would only fail, so it is never offered
        return doc.when_broken
    result = changes_upon_flattening(doc)
    if result.outcome is FlattenOutcome.FLATTENED:
        assert result.doc is not None
        return Union(result.doc, doc)
    return doc
