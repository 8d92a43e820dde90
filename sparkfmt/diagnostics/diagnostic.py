"""Diagnostics core types."""

from dataclasses import dataclass

from sparkfmt.diagnostics.codes import DiagnosticSpec, Severity
from sparkfmt.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, formatter and parameter resolver."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
