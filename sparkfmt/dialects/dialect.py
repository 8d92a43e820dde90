"""SQL dialect profiles."""

from __future__ import annotations

from dataclasses import dataclass

from sparkfmt.lexer.config import TokenizerConfig


@dataclass(frozen=True, slots=True)
class SqlDialect:
    """Named keyword/lexing profile the formatter engine is driven by."""

    name: str
    tokenizer_config: TokenizerConfig
