"""Dialect registry."""

from __future__ import annotations

from typing import Final

from sparkfmt.dialects.dialect import SqlDialect
from sparkfmt.dialects.spark import SPARK_SQL, SPARK_SQL_TOKENIZER_CONFIG

DIALECTS: Final[dict[str, SqlDialect]] = {
    SPARK_SQL.name: SPARK_SQL,
    "sparksql": SPARK_SQL,
}


def get_dialect(name: str) -> SqlDialect:
    dialect = DIALECTS.get(name.strip().lower())
    if dialect is None:
        known = ", ".join(sorted(DIALECTS))
        raise KeyError(f"Unknown SQL dialect {name!r}; known dialects: {known}")
    return dialect


__all__ = [
    "DIALECTS",
    "SPARK_SQL",
    "SPARK_SQL_TOKENIZER_CONFIG",
    "SqlDialect",
    "get_dialect",
]
