import pytest

from prettydoc.diagnostics import InvalidTextError
from prettydoc.doc import (
    COMMA,
    HARDLINE,
    LINE,
    LINE_,
    SOFTLINE,
    Annotated,
    Cat,
    Char,
    Empty,
    Fail,
    FlatAlt,
    FlattenOutcome,
    Line,
    Nest,
    Text,
    Union,
    alter_annotations,
    annotate,
    changes_upon_flattening,
    flatten,
    group,
    plural,
    pretty,
    re_annotate,
    spaces,
    text,
    un_annotate,
)


def test_text_picks_the_smallest_leaf() -> None:
    assert text("") == Empty()
    assert text("a") == Char("a")
    assert text("ab") == Text("ab")


@pytest.mark.parametrize("source", ["a\nb", "\n", "line\r"])
def test_text_rejects_line_breaks(source: str) -> None:
    with pytest.raises(InvalidTextError) as excinfo:
        text(source)
    assert excinfo.value.code == "DOC_TEXT_CONTAINS_NEWLINE"


def test_raw_leaves_validate_their_invariants() -> None:
    with pytest.raises(InvalidTextError) as empty_error:
        Text("")
    assert empty_error.value.code == "DOC_TEXT_EMPTY"

    with pytest.raises(InvalidTextError) as newline_error:
        Text("a\nb")
    assert newline_error.value.code == "DOC_TEXT_CONTAINS_NEWLINE"

    with pytest.raises(InvalidTextError) as char_error:
        Char("ab")
    assert char_error.value.code == "DOC_CHAR_INVALID"

    # still a ValueError for callers that do not know the package errors
    with pytest.raises(ValueError):
        Char("\n")


def test_plus_concatenates_documents_only() -> None:
    assert text("a") + text("bc") == Cat(Char("a"), Text("bc"))
    with pytest.raises(TypeError):
        text("a") + "b"  # type: ignore[operator]


def test_spaces_and_plural() -> None:
    assert spaces(0) == Empty()
    assert spaces(-3) == Empty()
    assert spaces(1) == Char(" ")
    assert spaces(3) == Text("   ")
    assert plural(text("tree"), text("trees"), 1) == Text("tree")
    assert plural(text("tree"), text("trees"), 2) == Text("trees")


def test_pretty_splits_on_newlines() -> None:
    assert pretty(42) == Text("42")
    assert pretty("a\nb") == Cat(Cat(Char("a"), LINE), Char("b"))


def test_flatten_replaces_breaks() -> None:
    assert flatten(LINE) == Char(" ")
    assert flatten(LINE_) == Empty()
    assert flatten(Line()) == Char(" ")
    assert flatten(HARDLINE) == Fail()
    assert flatten(Union(text("flat"), text("broken"))) == Text("flat")
    assert flatten(Nest(2, LINE)) == Nest(2, Char(" "))
    assert flatten(annotate("k", LINE)) == Annotated("k", Char(" "))


def test_changes_upon_flattening_outcomes() -> None:
    assert changes_upon_flattening(text("abc")).outcome is FlattenOutcome.ALREADY_FLAT
    assert changes_upon_flattening(text("a") + HARDLINE).outcome is FlattenOutcome.NEVER_FLAT

    result = changes_upon_flattening(text("ab") + LINE + text("cd"))
    assert result.outcome is FlattenOutcome.FLATTENED
    assert result.doc == Cat(Cat(Text("ab"), Char(" ")), Text("cd"))


def test_group_builds_union_only_when_useful() -> None:
    plain = text("abc") + text("def")
    assert group(plain) is plain

    hard = text("a") + HARDLINE + text("b")
    assert group(hard) is hard

    assert group(SOFTLINE) is SOFTLINE

    grouped = group(text("ab") + LINE + text("cd"))
    assert isinstance(grouped, Union)
    assert grouped.flat == Cat(Cat(Text("ab"), Char(" ")), Text("cd"))
    assert grouped.broken == text("ab") + LINE + text("cd")


def test_group_of_flat_alt_prefers_flat_branch() -> None:
    assert group(FlatAlt(text("long"), text("s"))) == Union(Char("s"), Text("long"))
    assert group(FlatAlt(text("x"), LINE)) == Union(Char(" "), Char("x"))

    never = FlatAlt(text("x"), HARDLINE)
    assert group(never) is never.when_broken


def test_group_flattens_through_nesting() -> None:
    grouped = group(Nest(1, text("a") + LINE))
    assert isinstance(grouped, Union)
    assert grouped.flat == Nest(1, Cat(Char("a"), Char(" ")))


def test_annotation_rewrites() -> None:
    doc = annotate("k", text("xy")) + COMMA

    assert un_annotate(doc) == Cat(Text("xy"), Char(","))
    assert re_annotate(str.upper, doc) == Cat(Annotated("K", Text("xy")), Char(","))
    assert alter_annotations(lambda ann: [ann, f"{ann}2"], doc) == Cat(
        Annotated("k", Annotated("k2", Text("xy"))),
        Char(","),
    )
