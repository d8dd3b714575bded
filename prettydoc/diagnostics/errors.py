"""Exception types carrying structured diagnostics."""

from __future__ import annotations

from prettydoc.diagnostics.codes import DiagnosticSpec
from prettydoc.diagnostics.diagnostic import Diagnostic


class PrettyDocError(Exception):
    """Base error; wraps a `Diagnostic`."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        *,
        detail: str | None = None,
        position: int | None = None,
    ) -> PrettyDocError:
        return cls(Diagnostic.from_spec(spec, detail=detail, position=position))


class InvalidTextError(PrettyDocError, ValueError):
    """Raised when a literal leaf violates the no-newline / non-empty invariant."""


class InvalidLayoutOptionsError(PrettyDocError, ValueError):
    """Raised when layout options are constructed with out-of-range values."""


class MalformedStreamError(PrettyDocError, ValueError):
    """Raised when a stream's annotation events do not balance."""


class LayoutFailedError(PrettyDocError, RuntimeError):
    """Raised by renderers when the stream ends in a fail event."""
