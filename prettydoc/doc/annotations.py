"""Annotation rewrites over documents."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from prettydoc.doc.model import (
    Annotated,
    Cat,
    Column,
    Doc,
    FlatAlt,
    Nest,
    Nesting,
    Union,
    WithPageWidth,
    cat_balanced,
    cat_parts,
)


def alter_annotations(fn: Callable[[object], Iterable[object]], doc: Doc) -> Doc:
    """
    Replace each annotation by the annotations `fn` returns for it.

    No result removes the annotation; several wrap the region outermost-first.
    """
    if isinstance(doc, Cat):
        return cat_balanced([alter_annotations(fn, part) for part in cat_parts(doc)])
    if isinstance(doc, Annotated):
        inner = alter_annotations(fn, doc.doc)
        for annotation in reversed(list(fn(doc.annotation))):
            inner = Annotated(annotation, inner)
        return inner
    if isinstance(doc, FlatAlt):
        return FlatAlt(alter_annotations(fn, doc.when_broken), alter_annotations(fn, doc.when_flat))
    if isinstance(doc, Union):
        return Union(alter_annotations(fn, doc.flat), alter_annotations(fn, doc.broken))
    if isinstance(doc, Nest):
        return Nest(doc.delta, alter_annotations(fn, doc.doc))
    if isinstance(doc, Column):
        column_fn = doc.fn
        return Column(lambda col: alter_annotations(fn, column_fn(col)))
    if isinstance(doc, Nesting):
        nesting_fn = doc.fn
        return Nesting(lambda ind: alter_annotations(fn, nesting_fn(ind)))
    if isinstance(doc, WithPageWidth):
        width_fn = doc.fn
        return WithPageWidth(lambda pw: alter_annotations(fn, width_fn(pw)))
    return doc


def re_annotate(fn: Callable[[object], object], doc: Doc) -> Doc:
    return alter_annotations(lambda annotation: (fn(annotation),), doc)


def un_annotate(doc: Doc) -> Doc:
    return alter_annotations(lambda _: (), doc)
