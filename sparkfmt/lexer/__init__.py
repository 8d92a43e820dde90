"""Lexer: tokens, configuration and the regex-cascade tokenizer."""

from sparkfmt.lexer.cache import DEFAULT_TOKENIZER_CACHE, TokenizerCache, get_tokenizer
from sparkfmt.lexer.config import SUPPORTED_STRING_TYPES, TokenizerConfig
from sparkfmt.lexer.tokenizer import (
    LexResult,
    Tokenizer,
    TokenRule,
    dump_tokens,
    token_text,
    unterminated_token_diagnostics,
)
from sparkfmt.lexer.tokens import Token, TokenKind

__all__ = [
    "DEFAULT_TOKENIZER_CACHE",
    "SUPPORTED_STRING_TYPES",
    "LexResult",
    "Token",
    "TokenKind",
    "TokenRule",
    "Tokenizer",
    "TokenizerCache",
    "TokenizerConfig",
    "dump_tokens",
    "get_tokenizer",
    "token_text",
    "unterminated_token_diagnostics",
]
