"""Wadler/Leijen-style pretty printer: document algebra, layout, streams and trees."""

from prettydoc.diagnostics import (
    Diagnostic,
    InvalidLayoutOptionsError,
    InvalidTextError,
    LayoutFailedError,
    MalformedStreamError,
    PrettyDocError,
)
from prettydoc.doc import Doc, group, pretty, text
from prettydoc.fusion import FusionDepth, fuse
from prettydoc.layout import (
    Bounded,
    LayoutAlgorithm,
    LayoutOptions,
    PageWidth,
    Unbounded,
    layout,
    layout_compact,
    layout_pretty,
    layout_smart,
)
from prettydoc.render import render_doc, render_markup, render_text
from prettydoc.tree import Tree, tree_events, tree_form

__all__ = [
    "Bounded",
    "Diagnostic",
    "Doc",
    "FusionDepth",
    "InvalidLayoutOptionsError",
    "InvalidTextError",
    "LayoutAlgorithm",
    "LayoutFailedError",
    "LayoutOptions",
    "MalformedStreamError",
    "PageWidth",
    "PrettyDocError",
    "Tree",
    "Unbounded",
    "fuse",
    "group",
    "layout",
    "layout_compact",
    "layout_pretty",
    "layout_smart",
    "pretty",
    "render_doc",
    "render_markup",
    "render_text",
    "text",
    "tree_events",
    "tree_form",
]
