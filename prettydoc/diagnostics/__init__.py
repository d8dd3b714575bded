"""Diagnostics."""

from prettydoc.diagnostics.codes import (
    DOC_CHAR_INVALID,
    DOC_TEXT_CONTAINS_NEWLINE,
    DOC_TEXT_EMPTY,
    OPTIONS_INVALID_RIBBON,
    OPTIONS_INVALID_WIDTH,
    RENDER_FAILED_DOCUMENT,
    STREAM_UNCLOSED_ANNOTATION,
    STREAM_UNMATCHED_POP,
    DiagnosticSpec,
    Severity,
)
from prettydoc.diagnostics.diagnostic import Diagnostic
from prettydoc.diagnostics.errors import (
    InvalidLayoutOptionsError,
    InvalidTextError,
    LayoutFailedError,
    MalformedStreamError,
    PrettyDocError,
)

__all__ = [
    "DOC_CHAR_INVALID",
    "DOC_TEXT_CONTAINS_NEWLINE",
    "DOC_TEXT_EMPTY",
    "OPTIONS_INVALID_RIBBON",
    "OPTIONS_INVALID_WIDTH",
    "RENDER_FAILED_DOCUMENT",
    "STREAM_UNCLOSED_ANNOTATION",
    "STREAM_UNMATCHED_POP",
    "Diagnostic",
    "DiagnosticSpec",
    "InvalidLayoutOptionsError",
    "InvalidTextError",
    "LayoutFailedError",
    "MalformedStreamError",
    "PrettyDocError",
    "Severity",
]
