"""Stream events produced by the layout engine."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharEvent:
    char: str


@dataclass(frozen=True, slots=True)
class TextEvent:
    text: str


@dataclass(frozen=True, slots=True)
class LineEvent:
    """Line terminator followed by `indent` spaces."""

    indent: int


@dataclass(frozen=True, slots=True)
class PushAnnotationEvent:
    annotation: object


@dataclass(frozen=True, slots=True)
class PopAnnotationEvent:
    pass


@dataclass(frozen=True, slots=True)
class FailEvent:
    """Layout reached `Fail`; always the last event of its stream."""

    pass


type StreamEvent = (
    CharEvent | TextEvent | LineEvent | PushAnnotationEvent | PopAnnotationEvent | FailEvent
)

type Stream = Iterator[StreamEvent]
