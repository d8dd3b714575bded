"""Fusion: merge adjacent literal fragments so layout has less to walk."""

from __future__ import annotations

from enum import StrEnum
import logging

from prettydoc.doc.model import (
    LEAF_TYPES,
    Annotated,
    Cat,
    Char,
    Column,
    Doc,
    Empty,
    FlatAlt,
    Nest,
    Nesting,
    Text,
    Union,
    WithPageWidth,
    cat_balanced,
    cat_parts,
)

logger = logging.getLogger(__name__)


class FusionDepth(StrEnum):
    """How far `fuse` looks for fusable leaves."""

    SHALLOW = "shallow"
    """Only the top-level concatenation spine."""

    DEEP = "deep"
    """Also inside nesting, alternatives, annotations and deferred documents."""


def fuse(doc: Doc, depth: FusionDepth = FusionDepth.SHALLOW) -> Doc:
    """
    Rewrite `doc` so that it lays out to the same characters with fewer nodes.

    Deep fusion wraps deferred documents (`Column`, `Nesting`, `WithPageWidth`)
    so the documents they produce are fused at layout time; this costs work on
    every evaluation. Annotation boundaries are never merged across, and every
    `Union` keeps its flat/broken pairing.
    """
    logger.debug("Fusing document (depth=%s)", depth)
    if depth == FusionDepth.DEEP:
        return _fuse_deep(doc)
    return _fuse_spine(cat_parts(doc))


def _fuse_spine(parts: list[Doc]) -> Doc:
    out: list[Doc] = []
    run: list[str] = []

    def flush() -> None:
        if not run:
            return
        joined = "".join(run)
        out.append(Char(joined) if len(joined) == 1 else Text(joined))
        run.clear()

    for part in parts:
        if isinstance(part, Empty):
            continue
        if isinstance(part, Char):
            run.append(part.c)
            continue
        if isinstance(part, Text):
            run.append(part.s)
            continue
        flush()
        out.append(part)
    flush()

    return cat_balanced(out)


def _fuse_deep(doc: Doc) -> Doc:
    # post-order walk; each node waits on `pending` until its children are fused
    pending: list[tuple[Doc, int | None]] = [(doc, None)]
    fused: list[Doc] = []

    while pending:
        node, arity = pending.pop()

        if arity is not None:
            start = len(fused) - arity
            children = fused[start:]
            del fused[start:]
            fused.append(_rebuild(node, children))
            continue

        if isinstance(node, Nest):
            node = _collapse_nest(node)
        children = _deep_children(node)
        pending.append((node, len(children)))
        pending.extend((child, None) for child in reversed(children))

    return fused[0]


def _deep_children(doc: Doc) -> list[Doc]:
    if isinstance(doc, Cat):
        return cat_parts(doc)
    if isinstance(doc, FlatAlt):
        return [doc.when_broken, doc.when_flat]
    if isinstance(doc, Union):
        return [doc.flat, doc.broken]
    if isinstance(doc, (Nest, Annotated)):
        return [doc.doc]
    return []


def _rebuild(doc: Doc, children: list[Doc]) -> Doc:
    if isinstance(doc, Cat):
        parts: list[Doc] = []
        for child in children:
            # a fused part can itself be a Cat (e.g. Nest(0, a + b))
            parts.extend(cat_parts(child))
        return _fuse_spine(parts)

    if isinstance(doc, Nest):
        delta = doc.delta
        inner = children[0]
        # a fused child only comes back as a Nest whose own child is not one
        if isinstance(inner, Nest):
            delta += inner.delta
            inner = inner.doc
        # indentation only matters to line breaks
        if delta == 0 or isinstance(inner, LEAF_TYPES):
            return inner
        return Nest(delta, inner)

    if isinstance(doc, FlatAlt):
        return FlatAlt(children[0], children[1])

    if isinstance(doc, Union):
        return Union(children[0], children[1])

    if isinstance(doc, Annotated):
        return Annotated(doc.annotation, children[0])

    if isinstance(doc, Column):
        fn = doc.fn
        return Column(lambda col: _fuse_deep(fn(col)))

    if isinstance(doc, Nesting):
        fn = doc.fn
        return Nesting(lambda ind: _fuse_deep(fn(ind)))

    if isinstance(doc, WithPageWidth):
        fn = doc.fn
        return WithPageWidth(lambda pw: _fuse_deep(fn(pw)))

    return doc


def _collapse_nest(doc: Nest) -> Nest:
    delta = doc.delta
    inner = doc.doc
    while isinstance(inner, Nest):
        delta += inner.delta
        inner = inner.doc
    return Nest(delta, inner)
