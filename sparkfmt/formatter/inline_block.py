"""Inline parenthesized block detection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from sparkfmt.lexer.tokens import Token, TokenKind

INLINE_MAX_LENGTH: Final = 200

_FORBIDDEN_KINDS: Final = frozenset(
    {
        TokenKind.RESERVED_TOPLEVEL,
        TokenKind.RESERVED_NEWLINE,
        TokenKind.LINE_COMMENT,
        TokenKind.BLOCK_COMMENT,
    }
)


class InlineBlock:
    """Bookkeeper for parenthesized regions rendered on a single line.

    Examples are `now()`, `count(*)`, `decimal(7, 2)` and short `IN (...)` lists.
    Once a block is inline, every paren nested in it is inline too.
    """

    def __init__(self) -> None:
        self.level = 0

    def begin_if_possible(self, tokens: Sequence[Token], index: int) -> None:
        if self.level == 0 and self._is_inline_block(tokens, index):
            self.level = 1
        elif self.level > 0:
            self.level += 1

    def end(self) -> None:
        if self.level > 0:
            self.level -= 1

    def is_active(self) -> bool:
        return self.level > 0

    def _is_inline_block(self, tokens: Sequence[Token], index: int) -> bool:
        length = 0
        depth = 0
        for token in tokens[index:]:
            length += len(token.value)
            if length > INLINE_MAX_LENGTH:
                return False

            if token.kind == TokenKind.OPEN_PAREN:
                depth += 1
            elif token.kind == TokenKind.CLOSE_PAREN:
                depth -= 1
                if depth == 0:
                    return True

            if _is_forbidden(token):
                return False
        return False


def _is_forbidden(token: Token) -> bool:
    return token.kind in _FORBIDDEN_KINDS or token.value == ";"
