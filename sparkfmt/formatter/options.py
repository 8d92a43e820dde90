"""Formatting options."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Final

from sparkfmt.dialects import SPARK_SQL, SqlDialect, get_dialect
from sparkfmt.formatter.params import ParamValues

DEFAULT_INDENT: Final = "  "


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Caller-facing configuration of one format run.

    `params` is a mapping for named placeholders or a sequence for positional
    ones; `None` keeps placeholders verbatim. `dialect` also accepts a
    registered dialect name.
    """

    indent: str = DEFAULT_INDENT
    params: ParamValues | None = None
    dialect: SqlDialect = SPARK_SQL

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str) or not self.indent:
            raise ValueError("indent must be a non-empty string")
        if self.indent.strip(" \t"):
            raise ValueError(f"indent may only contain spaces and tabs, got {self.indent!r}")
        if self.params is not None and (
            isinstance(self.params, str) or not isinstance(self.params, (Mapping, Sequence))
        ):
            raise ValueError("params must be a mapping or a sequence of values")
        if isinstance(self.dialect, str):
            object.__setattr__(self, "dialect", get_dialect(self.dialect))
        if not isinstance(self.dialect, SqlDialect):
            raise ValueError(f"dialect must be a SqlDialect, got {type(self.dialect).__name__}")

    def with_overrides(self, **overrides: object) -> "FormatOptions":
        return replace(self, **overrides)  # type: ignore[arg-type]
