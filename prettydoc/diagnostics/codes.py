"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


DOC_TEXT_EMPTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_TEXT_EMPTY",
    message="Text leaf must not be empty.",
    hint="Use `text(\"\")` or `Empty()` for zero-width content.",
    severity="error",
    category="doc",
)

DOC_TEXT_CONTAINS_NEWLINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_TEXT_CONTAINS_NEWLINE",
    message="Text leaf must not contain line breaks.",
    hint="Split the text yourself or use `pretty(...)`, which joins lines with `line`.",
    severity="error",
    category="doc",
)

DOC_CHAR_INVALID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_CHAR_INVALID",
    message="Char leaf must hold exactly one non-newline character.",
    severity="error",
    category="doc",
)

OPTIONS_INVALID_WIDTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="OPTIONS_INVALID_WIDTH",
    message="Page width must be a positive integer.",
    hint="Use `Unbounded()` when no width limit is wanted.",
    severity="error",
    category="options",
)

OPTIONS_INVALID_RIBBON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="OPTIONS_INVALID_RIBBON",
    message="Ribbon fraction must be in the interval (0, 1].",
    severity="error",
    category="options",
)

STREAM_UNMATCHED_POP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STREAM_UNMATCHED_POP",
    message="Annotation pop without a matching push.",
    hint="Streams produced by the layout engine are balanced; check stream rewrites.",
    severity="error",
    category="stream",
)

STREAM_UNCLOSED_ANNOTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STREAM_UNCLOSED_ANNOTATION",
    message="Stream ended with unclosed annotations.",
    hint="Streams produced by the layout engine are balanced; check stream rewrites.",
    severity="error",
    category="stream",
)

RENDER_FAILED_DOCUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_FAILED_DOCUMENT",
    message="Document cannot be rendered under these layout options.",
    hint="A `Fail` node was reached on the only viable layout path.",
    severity="error",
    category="render",
)
