"""Rebuild a nested tree from a flat stream, and flatten it back."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging

from prettydoc.diagnostics import (
    STREAM_UNCLOSED_ANNOTATION,
    STREAM_UNMATCHED_POP,
    MalformedStreamError,
)
from prettydoc.stream.events import (
    CharEvent,
    FailEvent,
    LineEvent,
    PopAnnotationEvent,
    PushAnnotationEvent,
    StreamEvent,
    TextEvent,
)
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

logger = logging.getLogger(__name__)

_POP_MARKER = object()


class TreeBuilder:
    """Stack of open annotation regions, each collecting its children."""

    def __init__(self) -> None:
        self._stack: list[tuple[object, list[Tree]]] = []
        self._roots: list[Tree] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def leaf(self, tree: Tree) -> None:
        self._push_element(tree)

    def open_annotation(self, annotation: object) -> None:
        self._stack.append((annotation, []))

    def close_annotation(self, position: int | None = None) -> None:
        if not self._stack:
            raise MalformedStreamError.from_spec(STREAM_UNMATCHED_POP, position=position)

        annotation, children = self._stack.pop()
        self._push_element(TreeAnnotated(annotation=annotation, child=_concat(children)))

    def finish(self, position: int | None = None) -> Tree:
        if self._stack:
            raise MalformedStreamError.from_spec(
                STREAM_UNCLOSED_ANNOTATION,
                detail=f"{len(self._stack)} region(s) still open.",
                position=position,
            )
        return _concat(self._roots)

    def finish_failed(self) -> Tree:
        """Close every open region around a trailing `TreeFail`."""
        self._push_element(TreeFail())
        while self._stack:
            self.close_annotation()
        return _concat(self._roots)

    def _push_element(self, element: Tree) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)


def tree_form(stream: Iterable[StreamEvent]) -> Tree:
    """
    Pair every push with its pop to nest annotated regions.

    Raises `MalformedStreamError` on a pop without a push, or when the stream
    ends with regions still open. A fail event ends construction; regions open
    at that point are closed around it.
    """
    builder = TreeBuilder()
    position = 0
    for position, event in enumerate(stream):
        if isinstance(event, CharEvent):
            builder.leaf(TreeChar(event.char))
        elif isinstance(event, TextEvent):
            builder.leaf(TreeText(event.text))
        elif isinstance(event, LineEvent):
            builder.leaf(TreeLine(event.indent))
        elif isinstance(event, PushAnnotationEvent):
            builder.open_annotation(event.annotation)
        elif isinstance(event, PopAnnotationEvent):
            if builder.depth == 0:
                logger.debug("Unmatched annotation pop at stream position %d", position)
            builder.close_annotation(position)
        else:
            return builder.finish_failed()
    return builder.finish(position)


def tree_events(tree: Tree) -> Iterator[StreamEvent]:
    """Flatten a tree back into stream events, depth-first and left to right."""
    stack: list[Tree | object] = [tree]
    while stack:
        node = stack.pop()

        if node is _POP_MARKER:
            yield PopAnnotationEvent()
            continue

        if isinstance(node, TreeFail):
            yield FailEvent()
            return

        if isinstance(node, TreeEmpty):
            continue

        if isinstance(node, TreeChar):
            yield CharEvent(node.char)
        elif isinstance(node, TreeText):
            yield TextEvent(node.text)
        elif isinstance(node, TreeLine):
            yield LineEvent(node.indent)
        elif isinstance(node, TreeConcat):
            stack.extend(reversed(node.children))
        elif isinstance(node, TreeAnnotated):
            yield PushAnnotationEvent(node.annotation)
            stack.append(_POP_MARKER)
            stack.append(node.child)


def _concat(children: list[Tree]) -> Tree:
    if not children:
        return TreeEmpty()
    if len(children) == 1:
        return children[0]
    return TreeConcat(tuple(children))
