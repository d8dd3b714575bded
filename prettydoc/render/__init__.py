"""Boundary renderers over streams and trees."""

from prettydoc.render.markup import render_markup
from prettydoc.render.text import render_doc, render_text

__all__ = [
    "render_doc",
    "render_markup",
    "render_text",
]
