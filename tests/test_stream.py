from prettydoc.doc import annotate, text
from prettydoc.layout import layout
from prettydoc.stream import (
    CharEvent,
    PopAnnotationEvent,
    PushAnnotationEvent,
    StreamEvent,
    TextEvent,
    alter_annotations_stream,
    re_annotate_stream,
    un_annotate_stream,
)
from tests._debug import debug_dump_stream


def _annotated_events() -> list[StreamEvent]:
    doc = annotate("outer", text("ab") + annotate("inner", text("c")))
    events = list(layout(doc))
    debug_dump_stream("annotated", events)
    return events


def test_layout_brackets_annotated_regions() -> None:
    assert _annotated_events() == [
        PushAnnotationEvent("outer"),
        TextEvent("ab"),
        PushAnnotationEvent("inner"),
        CharEvent("c"),
        PopAnnotationEvent(),
        PopAnnotationEvent(),
    ]


def test_un_annotate_stream_keeps_only_content() -> None:
    assert list(un_annotate_stream(_annotated_events())) == [TextEvent("ab"), CharEvent("c")]


def test_re_annotate_stream_maps_each_push() -> None:
    events = list(re_annotate_stream(str.upper, _annotated_events()))
    assert events[0] == PushAnnotationEvent("OUTER")
    assert events[2] == PushAnnotationEvent("INNER")
    assert events.count(PopAnnotationEvent()) == 2


def test_alter_annotations_stream_drops_balanced_pairs() -> None:
    events = list(
        alter_annotations_stream(
            lambda ann: [] if ann == "outer" else [ann, f"{ann}!"],
            _annotated_events(),
        )
    )
    assert events == [
        TextEvent("ab"),
        PushAnnotationEvent("inner"),
        PushAnnotationEvent("inner!"),
        CharEvent("c"),
        PopAnnotationEvent(),
        PopAnnotationEvent(),
    ]


def test_stream_transforms_are_lazy() -> None:
    def events():
        yield TextEvent("ok")
        raise AssertionError("read past the first event")

    assert next(un_annotate_stream(events())) == TextEvent("ok")
