"""Spark SQL formatter."""

from sparkfmt.dialects import DIALECTS, SPARK_SQL, SqlDialect, get_dialect
from sparkfmt.formatter import FormatOptions, Formatter
from sparkfmt.lexer import Token, TokenKind, Tokenizer, TokenizerCache, TokenizerConfig
from sparkfmt.pipeline import FormatRunResult, LexRunResult, run_format, run_lex

__version__ = "0.1.0"


def format(query: str, options: FormatOptions | None = None, **overrides: object) -> str:
    """Format a SQL string.

    Keyword overrides (`indent=`, `params=`, `dialect=`) are applied on top of
    `options`, or of the defaults when no options are given.
    """
    resolved = options if options is not None else FormatOptions()
    if overrides:
        resolved = resolved.with_overrides(**overrides)
    return run_format(query, resolved).formatted_text


__all__ = [
    "DIALECTS",
    "SPARK_SQL",
    "FormatOptions",
    "FormatRunResult",
    "Formatter",
    "LexRunResult",
    "SqlDialect",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TokenizerCache",
    "TokenizerConfig",
    "format",
    "get_dialect",
    "run_format",
    "run_lex",
]
