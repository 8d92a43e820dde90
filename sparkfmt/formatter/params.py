"""Placeholder value resolution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from sparkfmt.diagnostics import (
    PARAMS_MISSING_NAMED,
    PARAMS_MISSING_POSITIONAL,
    Diagnostic,
    DiagnosticSpec,
)
from sparkfmt.lexer.tokens import Token

ParamValues: TypeAlias = Mapping[str, object] | Sequence[object]


class Params:
    """Resolves placeholder tokens against caller-supplied values.

    With no values every placeholder is kept verbatim. Keyed placeholders
    (`:name`, `?1`) look up their key; bare `?` placeholders consume values in
    order. A missing value becomes an empty string and records a warning
    diagnostic instead of failing the format run. Named placeholders are kept
    verbatim when the values are positional.
    """

    def __init__(self, values: ParamValues | None = None) -> None:
        if isinstance(values, str):
            raise TypeError("params must be a mapping or a sequence of values, not a string")
        self.values = values
        self.index = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def get(self, token: Token) -> str:
        if self.values is None:
            return token.value
        if token.key:
            return self._get_keyed(token)
        return self._get_positional(token)

    def _get_keyed(self, token: Token) -> str:
        key = token.key or ""
        values = self.values
        if isinstance(values, Mapping):
            if key in values:
                return str(values[key])
            if key.isdigit() and int(key) in values:
                return str(values[int(key)])
        elif not key.isdigit():
            # Positional values never answer a name.
            return token.value
        elif int(key) < len(values):
            return str(values[int(key)])

        spec = PARAMS_MISSING_POSITIONAL if key.isdigit() else PARAMS_MISSING_NAMED
        self._report(spec, token)
        return ""

    def _get_positional(self, token: Token) -> str:
        position = self.index
        self.index += 1
        values = self.values
        if isinstance(values, Mapping):
            for key in (position, str(position)):
                if key in values:
                    return str(values[key])
        elif position < len(values):
            return str(values[position])

        self._report(PARAMS_MISSING_POSITIONAL, token)
        return ""

    def _report(self, spec: DiagnosticSpec, token: Token) -> None:
        message = f"{spec.message} (placeholder {token.value!r})"
        self._diagnostics.append(Diagnostic.from_spec(spec, token.range, message=message))
