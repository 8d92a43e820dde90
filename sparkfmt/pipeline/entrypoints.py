"""Unified entrypoints that run lexing and formatting over one source text."""

from __future__ import annotations

import logging

from sparkfmt.diagnostics import collect_diagnostics
from sparkfmt.formatter import FormatOptions, Formatter
from sparkfmt.lexer import DEFAULT_TOKENIZER_CACHE, Tokenizer, TokenizerCache
from sparkfmt.pipeline.results import FormatRunResult, LexRunResult

logger = logging.getLogger(__name__)


def run_lex(
    text: str,
    options: FormatOptions | None = None,
    *,
    cache: TokenizerCache | None = None,
) -> LexRunResult:
    """Tokenize text with the dialect of `options`."""
    tokenizer = _resolve_tokenizer(options, cache)
    lexed = tokenizer.lex(text)
    return LexRunResult(source_text=text, tokens=lexed.tokens, diagnostics=lexed.diagnostics)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    cache: TokenizerCache | None = None,
) -> FormatRunResult:
    """Format text; never raises for malformed SQL (problems become diagnostics)."""
    resolved_options = options if options is not None else FormatOptions()
    tokenizer = _resolve_tokenizer(resolved_options, cache)
    lexed = tokenizer.lex(text)

    formatter = Formatter(tokenizer, resolved_options)
    formatted_text = formatter.format_tokens(lexed.tokens)
    diagnostics = collect_diagnostics(lexed.diagnostics, formatter.diagnostics)
    logger.debug(
        "run_format: %d chars -> %d chars, %d diagnostics",
        len(text),
        len(formatted_text),
        len(diagnostics),
    )

    return FormatRunResult(
        source_text=text,
        formatted_text=formatted_text,
        tokens=lexed.tokens,
        diagnostics=diagnostics,
        changed=formatted_text != text,
    )


def _resolve_tokenizer(options: FormatOptions | None, cache: TokenizerCache | None) -> Tokenizer:
    resolved_options = options if options is not None else FormatOptions()
    resolved_cache = cache if cache is not None else DEFAULT_TOKENIZER_CACHE
    return resolved_cache.get(resolved_options.dialect.tokenizer_config)
