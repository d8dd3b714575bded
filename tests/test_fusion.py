import pytest

from prettydoc.doc import (
    LINE,
    Annotated,
    Cat,
    Char,
    Column,
    Empty,
    Nest,
    Text,
    Union,
    annotate,
    column,
    group,
    nest,
    text,
)
from prettydoc.fusion import FusionDepth, fuse
from prettydoc.layout import Bounded, LayoutAlgorithm, LayoutOptions, Unbounded
from prettydoc.render import render_doc
from tests._shared_cases import DOC_CASES, DocCase, case_id


def test_shallow_merges_adjacent_literals_and_drops_empty() -> None:
    doc = text("ab") + text("cd") + Char("e") + Empty()
    assert fuse(doc) == Text("abcde")
    assert fuse(Empty() + Char("x")) == Char("x")
    assert fuse(Empty() + Empty()) == Empty()


def test_shallow_stops_at_structure() -> None:
    nested = Nest(2, text("ab") + text("cd"))
    assert fuse(nested) == nested
    assert fuse(text("a") + nested + text("b") + text("c")) == Cat(
        Cat(Char("a"), nested),
        Text("bc"),
    )


def test_deep_fuses_inside_nesting_and_drops_needless_nests() -> None:
    assert fuse(Nest(2, text("ab") + text("cd")), FusionDepth.DEEP) == Text("abcd")
    assert fuse(text("a") + Nest(2, text("bc")), FusionDepth.DEEP) == Text("abc")
    assert fuse(Nest(0, text("a") + LINE), FusionDepth.DEEP) == Cat(Char("a"), LINE)
    assert fuse(Nest(1, Nest(2, text("a") + LINE)), FusionDepth.DEEP) == Nest(
        3,
        Cat(Char("a"), LINE),
    )


def test_deep_keeps_union_pairing() -> None:
    grouped = group(text("ab") + LINE + text("cd"))
    fused = fuse(grouped, FusionDepth.DEEP)
    assert isinstance(fused, Union)
    assert fused.flat == Text("ab cd")
    assert fused.broken == Cat(Cat(Text("ab"), LINE), Text("cd"))


def test_fusion_never_merges_across_annotations() -> None:
    doc = text("a") + annotate("k", text("b") + text("c")) + text("d")
    assert fuse(doc, FusionDepth.DEEP) == Cat(
        Cat(Char("a"), Annotated("k", Text("bc"))),
        Char("d"),
    )


def test_deep_fuses_deferred_documents_when_evaluated() -> None:
    fused = fuse(column(lambda col: text("a") + text(str(col))), FusionDepth.DEEP)
    assert isinstance(fused, Column)
    assert fused.fn(7) == Text("a7")


@pytest.mark.parametrize("case", DOC_CASES, ids=case_id)
@pytest.mark.parametrize("depth", list(FusionDepth))
@pytest.mark.parametrize("algorithm", list(LayoutAlgorithm))
def test_fusion_preserves_rendered_output(
    case: DocCase,
    depth: FusionDepth,
    algorithm: LayoutAlgorithm,
) -> None:
    doc = case.build()
    fused = fuse(doc, depth)
    for page_width in (Bounded(case.min_width), Bounded(80), Unbounded()):
        options = LayoutOptions(page_width=page_width, algorithm=algorithm)
        assert render_doc(fused, options) == render_doc(doc, options)


def test_deep_fusion_handles_deeply_nested_documents() -> None:
    doc = text("x")
    for _ in range(400):
        doc = group(text("f(") + nest(2, LINE + doc) + text(")"))

    options = LayoutOptions(page_width=Bounded(40))
    assert render_doc(fuse(doc, FusionDepth.DEEP), options) == render_doc(doc, options)
