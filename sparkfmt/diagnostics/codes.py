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


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with its opening quote character.",
    severity="warning",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="warning",
    category="lexer",
)

FORMAT_UNMATCHED_CLOSE_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_UNMATCHED_CLOSE_PAREN",
    message="Closing parenthesis has no matching opening parenthesis.",
    hint="Remove the extra `)` / `END` or add the missing opener.",
    severity="warning",
    category="formatter",
)

FORMAT_UNCLOSED_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_UNCLOSED_PAREN",
    message="Opening parenthesis is never closed.",
    hint="Add the missing `)` / `END`.",
    severity="warning",
    category="formatter",
)

PARAMS_MISSING_POSITIONAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARAMS_MISSING_POSITIONAL",
    message="Not enough positional parameter values; placeholder replaced with an empty string.",
    hint="Pass one value per positional placeholder.",
    severity="warning",
    category="params",
)

PARAMS_MISSING_NAMED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARAMS_MISSING_NAMED",
    message="No value supplied for named placeholder; placeholder replaced with an empty string.",
    hint="Add the placeholder key to the params mapping.",
    severity="warning",
    category="params",
)
