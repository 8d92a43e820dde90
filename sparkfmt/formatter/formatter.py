"""Token-stream pretty printer."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Final

from sparkfmt.diagnostics import (
    FORMAT_UNCLOSED_PAREN,
    FORMAT_UNMATCHED_CLOSE_PAREN,
    Diagnostic,
    collect_diagnostics,
)
from sparkfmt.formatter.indentation import Indentation
from sparkfmt.formatter.inline_block import InlineBlock
from sparkfmt.formatter.options import FormatOptions
from sparkfmt.formatter.params import Params
from sparkfmt.lexer.tokenizer import Tokenizer
from sparkfmt.lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_WHITESPACE_RUN: Final = re.compile(r"\s+")
_BLOCK_COMMENT_MARKER: Final = "/*"

# Previous raw tokens after which an open paren keeps the space in front of it.
_KEEP_SPACE_BEFORE_PAREN: Final = frozenset({TokenKind.WHITESPACE, TokenKind.OPEN_PAREN, TokenKind.LINE_COMMENT})


class Formatter:
    """Re-flows a token stream into indented SQL text.

    A formatter walks the tokens once, left to right, and rebuilds all spacing
    from scratch. The token list is owned by the run: a line comment followed by
    a comma swaps places with it so the comment ends up after the comma.

    Malformed input never raises; unbalanced parens and missing parameter
    values are reported through `diagnostics` after the run.
    """

    def __init__(self, tokenizer: Tokenizer, options: FormatOptions | None = None) -> None:
        self.tokenizer = tokenizer
        self.options = options if options is not None else FormatOptions()
        markers = (*tokenizer.config.line_comment_types, _BLOCK_COMMENT_MARKER)
        self._comment_markers = sorted(set(markers), key=lambda m: (-len(m), m))
        self._reset()

    def _reset(self) -> None:
        self.indentation = Indentation(self.options.indent)
        self.inline_block = InlineBlock()
        self.params = Params(self.options.params)
        self.tokens: list[Token] = []
        self.index = 0
        self._previous_reserved: Token | None = None
        self._open_parens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics of the most recent run, ordered by source position."""
        return collect_diagnostics(self._diagnostics, self.params.diagnostics)

    def format(self, text: str) -> str:
        return self.format_tokens(self.tokenizer.tokenize(text))

    def format_tokens(self, tokens: Iterable[Token]) -> str:
        self._reset()
        self.tokens = list(tokens)

        query = ""
        for index in range(len(self.tokens)):
            self.index = index
            query = self._format_token(self.tokens[index], query)

        for token in self._open_parens:
            self._diagnostics.append(Diagnostic.from_spec(FORMAT_UNCLOSED_PAREN, token.range))

        logger.debug("Formatted %d tokens with %d diagnostics", len(self.tokens), len(self.diagnostics))
        return query.strip()

    # -------------------------
    # Dispatch
    # -------------------------

    def _format_token(self, token: Token, query: str) -> str:
        match token.kind:
            case TokenKind.WHITESPACE:
                return query
            case TokenKind.LINE_COMMENT:
                return self._format_line_comment(token, query)
            case TokenKind.BLOCK_COMMENT:
                return self._format_block_comment(token, query)
            case TokenKind.RESERVED_TOPLEVEL:
                query = self._format_toplevel_reserved_word(token, query)
            case TokenKind.RESERVED_NEWLINE:
                query = self._format_newline_reserved_word(token, query)
                if _normalize_keyword(token.value).startswith(("add jar", "set")):
                    self.indentation.set_whitespace(False)
            case TokenKind.RESERVED_TOPLEVEL_INLINE:
                query = self._format_toplevel_inline_reserved_word(token, query)
            case TokenKind.UNION_WORDS:
                query = self._format_union_words(token, query)
            case TokenKind.RESERVED:
                if _normalize_keyword(token.value) == "between":
                    self.indentation.suppress_next_newline()
                query = self._format_reserved_word(token, query)
            case TokenKind.OPEN_PAREN:
                return self._format_opening_paren(token, query)
            case TokenKind.CLOSE_PAREN:
                return self._format_closing_paren(token, query)
            case TokenKind.PLACEHOLDER:
                return query + self.params.get(token) + " "
            case _:
                return self._format_punctuation(token, query)

        self._previous_reserved = token
        return query

    def _format_punctuation(self, token: Token, query: str) -> str:
        match token.value:
            case ",":
                return self._format_comma(token, query)
            case ":" | "." | "{":
                return self._trim_trailing_whitespace(query) + token.value
            case "$":
                return query + token.value
            case "}":
                return self._trim_trailing_whitespace(query) + token.value + " "
            case ";":
                self.indentation.set_whitespace(True)
                return self._end_statement(token, query)
            case _:
                return self._format_with_spaces(token, query)

    # -------------------------
    # Comments
    # -------------------------

    def _format_line_comment(self, token: Token, query: str) -> str:
        follow = self._next_non_whitespace_index()
        if follow is not None and self.tokens[follow].value == ",":
            comma = self.tokens[follow]
            self.tokens[follow] = token
            self.tokens[self.index] = comma
            return self._format_comma(comma, query)

        comment = self._normalize_comment(token.value.rstrip())
        previous = self._previous_non_whitespace()
        if previous is not None and previous.kind == TokenKind.UNION_WORDS:
            self.indentation.suppress_trim_end()
            return query.rstrip() + " " + comment + "\n"
        if previous is None or (previous.value != ";" and previous.kind != TokenKind.LINE_COMMENT):
            return query.rstrip() + " " + self._add_newline(comment)
        return self._add_newline(query) + self._add_newline(comment)

    def _format_block_comment(self, token: Token, query: str) -> str:
        comment = self._indent_comment(self._normalize_comment(token.value))
        return self._add_newline(self._add_newline(query) + comment)

    def _normalize_comment(self, comment: str) -> str:
        """Insert one space after the comment marker (`--x` -> `-- x`)."""
        for marker in self._comment_markers:
            if not comment.startswith(marker):
                continue
            rest = comment[len(marker) :]
            if not rest or rest[0].isspace() or rest[0] in marker:
                return comment
            return f"{marker} {rest}"
        return comment

    def _indent_comment(self, comment: str) -> str:
        indent = self.indentation.get_indent()
        first, *continuation = comment.split("\n")
        lines = [first]
        for line in continuation:
            line = line.strip()
            if line.startswith("*"):
                line = " " + line
            lines.append(indent + line if line else "")
        return "\n".join(lines)

    # -------------------------
    # Reserved words
    # -------------------------

    def _format_toplevel_reserved_word(self, token: Token, query: str) -> str:
        self.indentation.decrease_top_level()
        previous = self._previous_non_whitespace()
        if previous is not None and previous.kind == TokenKind.OPEN_PAREN:
            query = query.rstrip() + " "
        else:
            query = self._add_newline(query)
        self.indentation.increase_top_level()

        query += _normalize_keyword(token.value)
        return self._add_newline(query)

    def _format_toplevel_inline_reserved_word(self, token: Token, query: str) -> str:
        self.indentation.decrease_top_level()
        query = self._add_newline(query)
        self.indentation.increase_top_level()

        return query + _normalize_keyword(token.value) + " "

    def _format_newline_reserved_word(self, token: Token, query: str) -> str:
        keyword = _normalize_keyword(token.value)
        if self.indentation.should_start_newline():
            return self._add_newline(query) + keyword + " "
        return query + keyword + " "

    def _format_union_words(self, token: Token, query: str) -> str:
        self.indentation.decrease_top_level()
        query = query.rstrip() + "\n\n" + self.indentation.get_indent() + _normalize_keyword(token.value) + "\n"
        self.indentation.suppress_trim_end()
        return query

    def _format_reserved_word(self, token: Token, query: str) -> str:
        keyword = _normalize_keyword(token.value)
        if self.indentation.whitespace_enabled or query.endswith(" "):
            return query + keyword + " "
        return query + " " + keyword + " "

    # -------------------------
    # Parens
    # -------------------------

    def _format_opening_paren(self, token: Token, query: str) -> str:
        self._open_parens.append(token)
        paren = _paren_text(token)
        # `CASE b` must not run into its operand.
        word_gap = " " if _is_word_paren(token) else ""
        previous = self._previous_non_whitespace()
        if not self.inline_block.is_active() and previous is not None:
            after_comma_case = previous.value == "," and paren == "case"
            if previous.kind == TokenKind.RESERVED_TOPLEVEL_INLINE or after_comma_case:
                query = self._add_newline(query) + paren + word_gap
                self.indentation.increase_block_level()
                return query

        previous_raw = self._previous_token()
        if previous_raw is None or previous_raw.kind not in _KEEP_SPACE_BEFORE_PAREN:
            query = query.rstrip()
        query += paren

        self.inline_block.begin_if_possible(self.tokens, self.index)
        if self.inline_block.is_active():
            return query + word_gap
        self.indentation.increase_block_level()
        return self._add_newline(query)

    def _format_closing_paren(self, token: Token, query: str) -> str:
        if self._open_parens:
            self._open_parens.pop()
        else:
            self._diagnostics.append(Diagnostic.from_spec(FORMAT_UNMATCHED_CLOSE_PAREN, token.range))

        paren = _paren_text(token)
        if self.inline_block.is_active():
            self.inline_block.end()
            query = self._trim_trailing_whitespace(query)
            if _is_word_paren(token):
                query += " "
            return query + paren + " "

        self.indentation.decrease_block_level()
        query = self._add_newline(query) + paren
        return query + " " if self.indentation.whitespace_enabled else query

    # -------------------------
    # Punctuation
    # -------------------------

    def _format_comma(self, token: Token, query: str) -> str:
        query = self._trim_trailing_whitespace(query) + token.value + " "
        if self.inline_block.is_active():
            return query
        if self._previous_reserved is not None and _normalize_keyword(self._previous_reserved.value) == "limit":
            return query
        return self._add_newline(query)

    def _end_statement(self, token: Token, query: str) -> str:
        query = self._trim_trailing_whitespace(query) + token.value + "\n"
        self.indentation.suppress_trim_end()
        self.indentation.decrease_block_level()
        return query

    def _format_with_spaces(self, token: Token, query: str) -> str:
        if self.indentation.whitespace_enabled:
            return query + token.value + " "
        return query + token.value

    def _add_newline(self, query: str) -> str:
        if self.indentation.should_trim_end():
            query = query.rstrip()
        return query + "\n" + self.indentation.get_indent()

    def _trim_trailing_whitespace(self, query: str) -> str:
        previous = self._previous_non_whitespace()
        if previous is not None and previous.kind == TokenKind.LINE_COMMENT:
            # The comment runs to end of line; keep the next token off it.
            return query.rstrip() + "\n" + self.indentation.get_indent()
        return query.rstrip()

    # -------------------------
    # Token lookaround
    # -------------------------

    def _previous_token(self, offset: int = 1) -> Token | None:
        position = self.index - offset
        return self.tokens[position] if position >= 0 else None

    def _previous_non_whitespace(self) -> Token | None:
        for position in range(self.index - 1, -1, -1):
            token = self.tokens[position]
            if token.kind != TokenKind.WHITESPACE:
                return token
        return None

    def _next_non_whitespace_index(self) -> int | None:
        for position in range(self.index + 1, len(self.tokens)):
            if self.tokens[position].kind != TokenKind.WHITESPACE:
                return position
        return None


def _normalize_keyword(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value.lower())


def _is_word_paren(token: Token) -> bool:
    return token.value.isalpha()


def _paren_text(token: Token) -> str:
    return token.value.lower() if _is_word_paren(token) else token.value
