"""Tokenizer configuration."""

from dataclasses import dataclass, fields
from typing import Final

SUPPORTED_STRING_TYPES: Final[frozenset[str]] = frozenset({"``", "[]", '""', "''", "N''"})


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Keyword tables and lexical switches for one SQL dialect.

    All fields are tuples so a config is hashable and can key the tokenizer
    cache. Multi-word keywords use single spaces; any run of whitespace in the
    source matches them.
    """

    reserved_words: tuple[str, ...] = ()
    reserved_toplevel_words: tuple[str, ...] = ()
    reserved_newline_words: tuple[str, ...] = ()
    reserved_toplevel_inline_words: tuple[str, ...] = ()
    union_words: tuple[str, ...] = ()
    string_types: tuple[str, ...] = ('""', "''")
    open_parens: tuple[str, ...] = ("(",)
    close_parens: tuple[str, ...] = (")",)
    indexed_placeholder_types: tuple[str, ...] = ()
    named_placeholder_types: tuple[str, ...] = ()
    line_comment_types: tuple[str, ...] = ("--",)
    special_word_chars: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, str):
                raise ValueError(f"{field.name} must be a sequence of strings, not a string")
            if not isinstance(value, tuple):
                object.__setattr__(self, field.name, tuple(value))

        unknown = [t for t in self.string_types if t not in SUPPORTED_STRING_TYPES]
        if unknown:
            supported = ", ".join(sorted(SUPPORTED_STRING_TYPES))
            raise ValueError(f"Unsupported string types {unknown!r}; expected any of: {supported}")
        if not self.open_parens or not self.close_parens:
            raise ValueError("open_parens and close_parens must not be empty")
