"""Tree reconstruction for structured renderers."""

from prettydoc.tree.builder import TreeBuilder, tree_events, tree_form
from prettydoc.tree.model import (
    Tree,
    TreeAnnotated,
    TreeChar,
    TreeConcat,
    TreeEmpty,
    TreeFail,
    TreeLine,
    TreeText,
)

__all__ = [
    "Tree",
    "TreeAnnotated",
    "TreeBuilder",
    "TreeChar",
    "TreeConcat",
    "TreeEmpty",
    "TreeFail",
    "TreeLine",
    "TreeText",
    "tree_events",
    "tree_form",
]
