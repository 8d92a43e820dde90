"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from sparkfmt.diagnostics import Diagnostic
from sparkfmt.lexer.tokens import Token


@dataclass(frozen=True, slots=True)
class LexRunResult:
    """Result of tokenizing one source text."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting one source text."""

    source_text: str
    formatted_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]
    changed: bool
