"""Annotation rewrites over an already laid-out stream."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from prettydoc.stream.events import PopAnnotationEvent, PushAnnotationEvent, StreamEvent


def un_annotate_stream(stream: Iterable[StreamEvent]) -> Iterator[StreamEvent]:
    """Drop every annotation event."""
    for event in stream:
        if isinstance(event, (PushAnnotationEvent, PopAnnotationEvent)):
            continue
        yield event


def re_annotate_stream(
    fn: Callable[[object], object],
    stream: Iterable[StreamEvent],
) -> Iterator[StreamEvent]:
    """Map every annotation through `fn`; structure is unchanged."""
    for event in stream:
        if isinstance(event, PushAnnotationEvent):
            yield PushAnnotationEvent(fn(event.annotation))
        else:
            yield event


def alter_annotations_stream(
    fn: Callable[[object], Iterable[object]],
    stream: Iterable[StreamEvent],
) -> Iterator[StreamEvent]:
    """
    Replace each annotation by the annotations `fn` returns for it.

    An empty result removes the annotation together with its matching pop.
    """
    pushed_counts: list[int] = []
    for event in stream:
        if isinstance(event, PushAnnotationEvent):
            replacements = list(fn(event.annotation))
            pushed_counts.append(len(replacements))
            for annotation in replacements:
                yield PushAnnotationEvent(annotation)
            continue
        if isinstance(event, PopAnnotationEvent):
            # unmatched pops pass through; tree_form reports them
            count = pushed_counts.pop() if pushed_counts else 1
            for _ in range(count):
                yield PopAnnotationEvent()
            continue
        yield event
