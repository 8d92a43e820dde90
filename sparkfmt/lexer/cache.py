"""Explicit tokenizer memo keyed by configuration."""

from __future__ import annotations

import logging

from sparkfmt.lexer.config import TokenizerConfig
from sparkfmt.lexer.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class TokenizerCache:
    """Builds one `Tokenizer` per distinct `TokenizerConfig` and reuses it.

    Tokenizers are immutable once built, so a cached instance is safe to share
    between format runs. `clear()` is the only way to drop compiled cascades.
    """

    def __init__(self) -> None:
        self._tokenizers: dict[TokenizerConfig, Tokenizer] = {}

    def get(self, config: TokenizerConfig) -> Tokenizer:
        tokenizer = self._tokenizers.get(config)
        if tokenizer is None:
            tokenizer = Tokenizer(config)
            self._tokenizers[config] = tokenizer
            logger.debug("Compiled tokenizer cascade with %d rules", len(tokenizer.rules))
        return tokenizer

    def clear(self) -> None:
        self._tokenizers.clear()

    def __len__(self) -> int:
        return len(self._tokenizers)

    def __contains__(self, config: object) -> bool:
        return config in self._tokenizers


DEFAULT_TOKENIZER_CACHE = TokenizerCache()


def get_tokenizer(config: TokenizerConfig) -> Tokenizer:
    return DEFAULT_TOKENIZER_CACHE.get(config)
