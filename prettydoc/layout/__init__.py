"""Layout engine and its options."""

from prettydoc.layout.engine import layout, layout_compact, layout_pretty, layout_smart
from prettydoc.layout.options import (
    DEFAULT_PAGE_WIDTH,
    Bounded,
    LayoutAlgorithm,
    LayoutOptions,
    PageWidth,
    Unbounded,
)

__all__ = [
    "DEFAULT_PAGE_WIDTH",
    "Bounded",
    "LayoutAlgorithm",
    "LayoutOptions",
    "PageWidth",
    "Unbounded",
    "layout",
    "layout_compact",
    "layout_pretty",
    "layout_smart",
]
