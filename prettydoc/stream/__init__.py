"""Stream representation: the contract between the layout engine and renderers."""

from prettydoc.stream.events import (
    CharEvent,
    FailEvent,
    LineEvent,
    PopAnnotationEvent,
    PushAnnotationEvent,
    Stream,
    StreamEvent,
    TextEvent,
)
from prettydoc.stream.transforms import (
    alter_annotations_stream,
    re_annotate_stream,
    un_annotate_stream,
)

__all__ = [
    "CharEvent",
    "FailEvent",
    "LineEvent",
    "PopAnnotationEvent",
    "PushAnnotationEvent",
    "Stream",
    "StreamEvent",
    "TextEvent",
    "alter_annotations_stream",
    "re_annotate_stream",
    "un_annotate_stream",
]
