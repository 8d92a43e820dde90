"""Lexer tokens."""

from dataclasses import dataclass
from enum import StrEnum

from sparkfmt.text import TextRange


class TokenKind(StrEnum):
    # -------------------------
    # Trivia (dropped by the formatter)
    # -------------------------
    WHITESPACE = "whitespace"

    # -------------------------
    # Identifiers / literals
    # -------------------------
    WORD = "word"
    STRING = "string"
    NUMBER = "number"
    PLACEHOLDER = "placeholder"

    # -------------------------
    # Keywords, by layout behavior
    # -------------------------
    RESERVED = "reserved"
    RESERVED_TOPLEVEL = "reserved-toplevel"
    RESERVED_TOPLEVEL_INLINE = "reserved-toplevel-inline"
    RESERVED_NEWLINE = "reserved-newline"
    UNION_WORDS = "union-words"

    # -------------------------
    # Punctuation / comments
    # -------------------------
    OPERATOR = "operator"
    OPEN_PAREN = "open-paren"
    CLOSE_PAREN = "close-paren"
    LINE_COMMENT = "line-comment"
    BLOCK_COMMENT = "block-comment"

    @property
    def is_reserved(self) -> bool:
        return self in (
            TokenKind.RESERVED,
            TokenKind.RESERVED_TOPLEVEL,
            TokenKind.RESERVED_TOPLEVEL_INLINE,
            TokenKind.RESERVED_NEWLINE,
            TokenKind.UNION_WORDS,
        )

    @property
    def is_comment(self) -> bool:
        return self in (TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `key` is only set for placeholders: the name or index used to look up a
    parameter value (empty for a bare positional `?`).
    """

    kind: TokenKind
    value: str
    key: str | None = None
    range: TextRange = TextRange(0, 0)
