"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from sparkfmt.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Merge diagnostic groups, ordered by source position."""
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    diagnostics.sort(key=lambda d: d.range.as_tuple())
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(diagnostic: Diagnostic, origin: str = "<stdin>") -> str:
    start, end = diagnostic.range.as_tuple()
    return f"{origin}:{start}-{end}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
