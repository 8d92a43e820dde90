"""Diagnostics."""

from sparkfmt.diagnostics.codes import (
    FORMAT_UNCLOSED_PAREN,
    FORMAT_UNMATCHED_CLOSE_PAREN,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARAMS_MISSING_NAMED,
    PARAMS_MISSING_POSITIONAL,
    DiagnosticSpec,
    Severity,
)
from sparkfmt.diagnostics.diagnostic import Diagnostic
from sparkfmt.diagnostics.report import collect_diagnostics, has_errors, render_diagnostic

__all__ = [
    "FORMAT_UNCLOSED_PAREN",
    "FORMAT_UNMATCHED_CLOSE_PAREN",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARAMS_MISSING_NAMED",
    "PARAMS_MISSING_POSITIONAL",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
]
