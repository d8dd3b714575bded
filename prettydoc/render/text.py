"""Plain-text renderer over a stream."""

from __future__ import annotations

from collections.abc import Iterable

from prettydoc.diagnostics import (
    RENDER_FAILED_DOCUMENT,
    STREAM_UNCLOSED_ANNOTATION,
    STREAM_UNMATCHED_POP,
    LayoutFailedError,
    MalformedStreamError,
)
from prettydoc.doc.model import Doc
from prettydoc.layout.engine import layout
from prettydoc.layout.options import LayoutOptions
from prettydoc.stream.events import (
    CharEvent,
    FailEvent,
    LineEvent,
    PopAnnotationEvent,
    PushAnnotationEvent,
    StreamEvent,
    TextEvent,
)


def render_text(stream: Iterable[StreamEvent]) -> str:
    """Render events verbatim; annotations are skipped but must balance."""
    out: list[str] = []
    depth = 0
    position = 0

    for position, event in enumerate(stream):
        if isinstance(event, CharEvent):
            out.append(event.char)
        elif isinstance(event, TextEvent):
            out.append(event.text)
        elif isinstance(event, LineEvent):
            out.append("\n")
            out.append(" " * event.indent)
        elif isinstance(event, PushAnnotationEvent):
            depth += 1
        elif isinstance(event, PopAnnotationEvent):
            depth -= 1
            if depth < 0:
                raise MalformedStreamError.from_spec(STREAM_UNMATCHED_POP, position=position)
        elif isinstance(event, FailEvent):
            raise LayoutFailedError.from_spec(RENDER_FAILED_DOCUMENT, position=position)

    if depth > 0:
        raise MalformedStreamError.from_spec(
            STREAM_UNCLOSED_ANNOTATION,
            detail=f"{depth} region(s) still open.",
            position=position,
        )
    return "".join(out)


def render_doc(doc: Doc, options: LayoutOptions | None = None) -> str:
    """Lay `doc` out and render it as plain text."""
    return render_text(layout(doc, options))
