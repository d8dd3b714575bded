"""Shared debug printers for layout/tree tests."""

from __future__ import annotations

from collections.abc import Iterable
import os

from prettydoc.stream import StreamEvent
from prettydoc.tree import Tree, TreeAnnotated, TreeConcat

PRINT_STREAM = os.getenv("PRINT_STREAM", "0").lower() in {"1", "true", "yes", "on"}
PRINT_TREE = os.getenv("PRINT_TREE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_RENDERED = os.getenv("PRINT_RENDERED", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_stream(test_name: str, events: Iterable[StreamEvent]) -> None:
    if not PRINT_STREAM:
        return
    print(f"\n===== {test_name} STREAM =====")
    for index, event in enumerate(events):
        print(f"{index:03d} {event!r}")


def debug_dump_tree(test_name: str, tree: Tree) -> None:
    if not PRINT_TREE:
        return
    print(f"\n===== {test_name} TREE =====")
    print(_dump_tree(tree))


def debug_dump_rendered(test_name: str, rendered: str) -> None:
    if not PRINT_RENDERED:
        return
    print(f"\n===== {test_name} RENDERED =====")
    for line in rendered.split("\n"):
        print(f"|{line}|")


def _dump_tree(tree: Tree) -> str:
    lines: list[str] = []

    def walk(node: Tree, depth: int) -> None:
        indent = "  " * depth
        if isinstance(node, TreeConcat):
            lines.append(f"{indent}Concat")
            for child in node.children:
                walk(child, depth + 1)
        elif isinstance(node, TreeAnnotated):
            lines.append(f"{indent}Annotated {node.annotation!r}")
            walk(node.child, depth + 1)
        else:
            lines.append(f"{indent}{node!r}")

    walk(tree, 0)
    return "\n".join(lines)
