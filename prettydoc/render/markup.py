"""Structured renderer: annotated regions become open/close tag pairs."""

from __future__ import annotations

from collections.abc import Callable

from prettydoc.diagnostics import RENDER_FAILED_DOCUMENT, LayoutFailedError
from prettydoc.tree.model import (
    Tree,
    TreeAnnotated,
    TreeChar,
    TreeConcat,
    TreeFail,
    TreeLine,
    TreeText,
)

type TagFn = Callable[[object], tuple[str, str]]


def render_markup(tree: Tree, tags: TagFn) -> str:
    """Render a tree, wrapping each annotated region in the strings `tags` returns."""
    out: list[str] = []
    _render_into(tree, tags, out)
    return "".join(out)


def _render_into(tree: Tree, tags: TagFn, out: list[str]) -> None:
    if isinstance(tree, TreeFail):
        raise LayoutFailedError.from_spec(RENDER_FAILED_DOCUMENT)
    if isinstance(tree, TreeChar):
        out.append(tree.char)
    elif isinstance(tree, TreeText):
        out.append(tree.text)
    elif isinstance(tree, TreeLine):
        out.append("\n")
        out.append(" " * tree.indent)
    elif isinstance(tree, TreeConcat):
        for child in tree.children:
            _render_into(child, tags, out)
    elif isinstance(tree, TreeAnnotated):
        open_tag, close_tag = tags(tree.annotation)
        out.append(open_tag)
        _render_into(tree.child, tags, out)
        out.append(close_tag)
