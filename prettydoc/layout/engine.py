"""Layout engine: turns a document into a lazy stream of render events."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
from typing import Literal

from prettydoc.doc.flatten import FlattenOutcome, changes_upon_flattening
from prettydoc.doc.model import (
    Annotated,
    Cat,
    Char,
    Column,
    Doc,
    Empty,
    Fail,
    FlatAlt,
    Line,
    Nest,
    Nesting,
    Text,
    Union,
    WithPageWidth,
)
from prettydoc.layout.options import (
    DEFAULT_PAGE_WIDTH,
    Bounded,
    LayoutAlgorithm,
    LayoutOptions,
    PageWidth,
    Unbounded,
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

logger = logging.getLogger(__name__)

type Mode = Literal["flat", "break"]


@dataclass(frozen=True, slots=True)
class _Frame:
    indent: int
    mode: Mode
    doc: Doc


@dataclass(frozen=True, slots=True)
class _PopFrame:
    """Closes the annotation opened when its `Annotated` frame was expanded."""

    pass


type _Work = _Frame | _PopFrame

_POP = _PopFrame()


def layout(doc: Doc, options: LayoutOptions | None = None) -> Iterator[StreamEvent]:
    """Lay `doc` out with the algorithm and page width named by `options`."""
    if options is None:
        options = LayoutOptions.default()
    if options.algorithm == LayoutAlgorithm.COMPACT:
        return layout_compact(doc)
    if options.algorithm == LayoutAlgorithm.SMART:
        return layout_smart(doc, options.page_width)
    return layout_pretty(doc, options.page_width)


def layout_pretty(doc: Doc, page_width: PageWidth = DEFAULT_PAGE_WIDTH) -> Iterator[StreamEvent]:
    """Greedy layout; a group is flattened if it fits up to the next possible break."""
    return _layout_wadler_leijen(doc, page_width, smart=False)


def layout_smart(doc: Doc, page_width: PageWidth = DEFAULT_PAGE_WIDTH) -> Iterator[StreamEvent]:
    """
    Like `layout_pretty`, with a longer lookahead.

    Breaks that the rest of the document takes deeper than the indentation of
    the current line do not end the fits check: the following lines must fit
    too. The check ends at the first break back at or below that level.
    """
    return _layout_wadler_leijen(doc, page_width, smart=True)


def layout_compact(doc: Doc) -> Iterator[StreamEvent]:
    """
    Layout without any fitting: groups always break and indentation is ignored.

    Annotations are kept so that structured renderers still see them.
    """
    col = 0
    stack: list[Doc | _PopFrame] = [doc]

    while stack:
        d = stack.pop()

        if isinstance(d, _PopFrame):
            yield PopAnnotationEvent()
            continue

        if isinstance(d, Fail):
            logger.debug("Compact layout reached Fail at column %d", col)
            yield FailEvent()
            return

        if isinstance(d, Empty):
            continue

        if isinstance(d, Char):
            yield CharEvent(d.c)
            col += 1
            continue

        if isinstance(d, Text):
            yield TextEvent(d.s)
            col += len(d.s)
            continue

        if isinstance(d, Line):
            yield LineEvent(0)
            col = 0
            continue

        if isinstance(d, FlatAlt):
            stack.append(d.when_broken)
            continue

        if isinstance(d, Cat):
            stack.append(d.right)
            stack.append(d.left)
            continue

        if isinstance(d, Nest):
            stack.append(d.doc)
            continue

        if isinstance(d, Union):
            stack.append(d.broken)
            continue

        if isinstance(d, Column):
            stack.append(d.fn(col))
            continue

        if isinstance(d, Nesting):
            stack.append(d.fn(0))
            continue

        if isinstance(d, WithPageWidth):
            stack.append(d.fn(Unbounded()))
            continue

        # Annotated
        yield PushAnnotationEvent(d.annotation)
        stack.append(_POP)
        stack.append(d.doc)


def _layout_wadler_leijen(doc: Doc, page_width: PageWidth, *, smart: bool) -> Iterator[StreamEvent]:
    logger.debug("Laying out document (smart=%s, page_width=%r)", smart, page_width)

    # Without a width limit only hard breaks are taken.
    root_mode: Mode = "flat" if isinstance(page_width, Unbounded) else "break"
    col = 0
    line_indent = 0
    stack: list[_Work] = [_Frame(indent=0, mode=root_mode, doc=doc)]

    while stack:
        work = stack.pop()

        if isinstance(work, _PopFrame):
            yield PopAnnotationEvent()
            continue

        ind, mode, d = work.indent, work.mode, work.doc

        if isinstance(d, Fail):
            logger.debug("Layout reached Fail at column %d", col)
            yield FailEvent()
            return

        if isinstance(d, Empty):
            continue

        if isinstance(d, Char):
            yield CharEvent(d.c)
            col += 1
            continue

        if isinstance(d, Text):
            yield TextEvent(d.s)
            col += len(d.s)
            continue

        if isinstance(d, Line):
            if mode == "flat" and not d.hard:
                yield CharEvent(" ")
                col += 1
            else:
                yield LineEvent(ind)
                col = ind
                line_indent = ind
            continue

        if isinstance(d, FlatAlt):
            branch = _flat_branch(d) if mode == "flat" else d.when_broken
            stack.append(_Frame(ind, mode, branch))
            continue

        if isinstance(d, Cat):
            # push in reverse so left is processed first
            stack.append(_Frame(ind, mode, d.right))
            stack.append(_Frame(ind, mode, d.left))
            continue

        if isinstance(d, Nest):
            stack.append(_Frame(ind + d.delta, mode, d.doc))
            continue

        if isinstance(d, Union):
            if mode == "flat":
                if _reaches_fail(d.flat, ind, col, page_width):
                    stack.append(_Frame(ind, "flat", d.broken))
                else:
                    stack.append(_Frame(ind, "flat", d.flat))
                continue

            flat_frame = _Frame(ind, "flat", d.flat)
            if _fits(flat_frame, stack, col, line_indent, page_width, smart=smart):
                stack.append(flat_frame)
            else:
                stack.append(_Frame(ind, "break", d.broken))
            continue

        if isinstance(d, Column):
            stack.append(_Frame(ind, mode, d.fn(col)))
            continue

        if isinstance(d, Nesting):
            stack.append(_Frame(ind, mode, d.fn(ind)))
            continue

        if isinstance(d, WithPageWidth):
            stack.append(_Frame(ind, mode, d.fn(page_width)))
            continue

        # Annotated
        yield PushAnnotationEvent(d.annotation)
        stack.append(_POP)
        stack.append(_Frame(ind, mode, d.doc))


def _fits(
    first: _Frame,
    stack: list[_Work],
    col: int,
    line_indent: int,
    page_width: PageWidth,
    *,
    smart: bool,
) -> bool:
    """
    Lookahead: simulate `first` followed by the pending work, without output, until:
    - the column passes the limit or `Fail` is reached => doesn't fit
    - a break is taken (smart: one at or below the current line's indentation)
      or work runs out => fits.

    The ribbon is measured from `line_indent`, where the current line starts,
    not from the nesting of the group being tested.

    Pending frames are read in place from the end of `stack`. A group met in
    break mode is taken broken, so only text that cannot move to a later line
    counts against the current one.
    """
    limit: int | None = None
    if isinstance(page_width, Bounded):
        limit = col + page_width.remaining_width(line_indent, col)
    min_nesting = min(line_indent, col)

    probe: list[_Work] = [first]
    rest_idx = len(stack) - 1
    scan_col = col

    while True:
        if limit is not None and scan_col > limit:
            return False

        if probe:
            work = probe.pop()
        elif rest_idx >= 0:
            work = stack[rest_idx]
            rest_idx -= 1
        else:
            return True

        if isinstance(work, _PopFrame):
            continue

        ind, mode, d = work.indent, work.mode, work.doc

        if isinstance(d, Fail):
            return False

        if isinstance(d, Empty):
            continue

        if isinstance(d, Char):
            scan_col += 1
            continue

        if isinstance(d, Text):
            scan_col += len(d.s)
            continue

        if isinstance(d, Line):
            if mode == "flat" and not d.hard:
                scan_col += 1
                continue
            if smart and isinstance(page_width, Bounded) and ind > min_nesting:
                scan_col = ind
                limit = page_width.max_width
                continue
            return True

        if isinstance(d, FlatAlt):
            branch = _flat_branch(d) if mode == "flat" else d.when_broken
            probe.append(_Frame(ind, mode, branch))
            continue

        if isinstance(d, Cat):
            probe.append(_Frame(ind, mode, d.right))
            probe.append(_Frame(ind, mode, d.left))
            continue

        if isinstance(d, Nest):
            probe.append(_Frame(ind + d.delta, mode, d.doc))
            continue

        if isinstance(d, Union):
            branch = d.flat if mode == "flat" else d.broken
            probe.append(_Frame(ind, mode, branch))
            continue

        if isinstance(d, Column):
            probe.append(_Frame(ind, mode, d.fn(scan_col)))
            continue

        if isinstance(d, Nesting):
            probe.append(_Frame(ind, mode, d.fn(ind)))
            continue

        if isinstance(d, WithPageWidth):
            probe.append(_Frame(ind, mode, d.fn(page_width)))
            continue

        # Annotated
        probe.append(_Frame(ind, mode, d.doc))


def _reaches_fail(doc: Doc, indent: int, col: int, page_width: PageWidth) -> bool:
    """Whether rendering `doc` flat, on its own, runs into `Fail`."""
    probe: list[_Frame] = [_Frame(indent, "flat", doc)]
    scan_col = col

    while probe:
        fr = probe.pop()
        ind, d = fr.indent, fr.doc

        if isinstance(d, Fail):
            return True

        if isinstance(d, Char):
            scan_col += 1
        elif isinstance(d, Text):
            scan_col += len(d.s)
        elif isinstance(d, Line):
            scan_col = ind if d.hard else scan_col + 1
        elif isinstance(d, FlatAlt):
            probe.append(_Frame(ind, "flat", _flat_branch(d)))
        elif isinstance(d, Cat):
            probe.append(_Frame(ind, "flat", d.right))
            probe.append(_Frame(ind, "flat", d.left))
        elif isinstance(d, Nest):
            probe.append(_Frame(ind + d.delta, "flat", d.doc))
        elif isinstance(d, Union):
            # nested alternatives are resolved when they are reached
            continue
        elif isinstance(d, Column):
            probe.append(_Frame(ind, "flat", d.fn(scan_col)))
        elif isinstance(d, Nesting):
            probe.append(_Frame(ind, "flat", d.fn(ind)))
        elif isinstance(d, WithPageWidth):
            probe.append(_Frame(ind, "flat", d.fn(page_width)))
        elif isinstance(d, Annotated):
            probe.append(_Frame(ind, "flat", d.doc))

    return False


def _flat_branch(doc: FlatAlt) -> Doc:
    """Branch taken in flat mode; a flat side that can never be flat is skipped, like `group`."""
    if changes_upon_flattening(doc.when_flat).outcome is FlattenOutcome.NEVER_FLAT:
        return doc.when_broken
    return doc.when_flat
