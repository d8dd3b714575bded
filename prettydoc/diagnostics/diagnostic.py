"""Diagnostics core types."""

from dataclasses import dataclass

from prettydoc.diagnostics.codes import DiagnosticSpec, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic attached to errors raised by the engine and its consumers."""

    code: str
    message: str
    position: int | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        *,
        detail: str | None = None,
        position: int | None = None,
    ) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            position=position,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
