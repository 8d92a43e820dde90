"""Regex-cascade tokenizer."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final

from sparkfmt.diagnostics import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
)
from sparkfmt.lexer.config import TokenizerConfig
from sparkfmt.lexer.tokens import Token, TokenKind
from sparkfmt.text import TextRange

WHITESPACE_PATTERN: Final = re.compile(r"\s+")
NUMBER_PATTERN: Final = re.compile(r"(?:(?:-\s*)?[0-9]+(?:\.[0-9]+)?|0x[0-9a-fA-F]+|0b[01]+)\b")
BLOCK_COMMENT_PATTERN: Final = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
# Multi-character operators first; `.` is the single-character catch-all.
OPERATOR_PATTERN: Final = re.compile(
    r"!=|<>|==|<=|>=|!<|!>|\|\||::|->>|->|~~\*|~~|!~~\*|!~~|~\*|!~\*|!~|.",
    re.DOTALL,
)

# Each style matches to end of input when the closing quote is missing.
STRING_PATTERNS: Final[dict[str, str]] = {
    "``": r"(?:`[^`]*(?:`|\Z))+",
    "[]": r"(?:\[[^\]]*(?:\]|\Z))(?:\][^\]]*(?:\]|\Z))*",
    '""': r'(?:"[^"\\]*(?:\\.[^"\\]*)*(?:"|\Z))+',
    "''": r"(?:'[^'\\]*(?:\\.[^'\\]*)*(?:'|\Z))+",
    "N''": r"(?:N'[^'\\]*(?:\\.[^'\\]*)*(?:'|\Z))+",
}

_CLOSING_QUOTES: Final[dict[str, str]] = {"`": "`", "[": "]", '"': '"', "'": "'"}
_ESCAPED_CHAR: Final = re.compile(r"\\.", re.DOTALL)
_WORD_END: Final = re.compile(r"\w\Z")

KeyParser = Callable[[re.Match[str]], str]


@dataclass(frozen=True, slots=True)
class TokenRule:
    """One step of the recognizer cascade."""

    kind: TokenKind
    pattern: re.Pattern[str]
    parse_key: KeyParser | None = None
    # Reserved words never directly follow a `.` (`mytable.from` is an identifier).
    reserved: bool = False
    # Named placeholders never directly follow a word (`${hivevar:dt}` is a variable).
    named: bool = False


@dataclass(frozen=True, slots=True)
class LexResult:
    tokens: list[Token]
    diagnostics: list[Diagnostic]


class Tokenizer:
    """Splits SQL text into tokens using a fixed-priority cascade of anchored regexes.

    The cascade is built once from a `TokenizerConfig` and never changes, so a
    tokenizer can be shared between any number of format runs. Tokenizing is
    total: anything unrecognized becomes a one-character operator token.
    """

    def __init__(self, config: TokenizerConfig) -> None:
        self._config = config
        self._rules = tuple(_build_cascade(config))

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    @property
    def rules(self) -> tuple[TokenRule, ...]:
        return self._rules

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        position = 0
        previous: Token | None = None
        while position < len(text):
            token = self._next_token(text, position, previous)
            tokens.append(token)
            position = token.range.end
            previous = token
        return tokens

    def lex(self, text: str) -> LexResult:
        """Tokenize and report lexical problems (the tokens are produced either way)."""
        tokens = self.tokenize(text)
        return LexResult(tokens=tokens, diagnostics=unterminated_token_diagnostics(tokens))

    def _next_token(self, text: str, position: int, previous: Token | None) -> Token:
        after_dot = previous is not None and previous.value == "."
        after_word = previous is not None and _WORD_END.search(previous.value) is not None
        for rule in self._rules:
            if (rule.reserved and after_dot) or (rule.named and after_word):
                continue
            match = rule.pattern.match(text, position)
            if match is None or match.end() == position:
                continue
            key = rule.parse_key(match) if rule.parse_key is not None else None
            return Token(rule.kind, match.group(0), key=key, range=TextRange(position, match.end()))
        return Token(TokenKind.OPERATOR, text[position], range=TextRange.at(position, 1))


def _build_cascade(config: TokenizerConfig) -> Iterable[TokenRule]:
    yield TokenRule(TokenKind.WHITESPACE, WHITESPACE_PATTERN)

    if config.line_comment_types:
        yield TokenRule(TokenKind.LINE_COMMENT, _line_comment_pattern(config.line_comment_types))
    yield TokenRule(TokenKind.BLOCK_COMMENT, BLOCK_COMMENT_PATTERN)

    if config.string_types:
        yield TokenRule(TokenKind.STRING, re.compile(_string_pattern(config.string_types), re.DOTALL))

    yield TokenRule(TokenKind.OPEN_PAREN, _paren_pattern(config.open_parens))
    yield TokenRule(TokenKind.CLOSE_PAREN, _paren_pattern(config.close_parens))

    if config.named_placeholder_types:
        yield TokenRule(
            TokenKind.PLACEHOLDER,
            _placeholder_pattern(config.named_placeholder_types, r"[a-zA-Z0-9._$]+"),
            parse_key=lambda m: m.group("body"),
            named=True,
        )
        if config.string_types:
            yield TokenRule(
                TokenKind.PLACEHOLDER,
                _placeholder_pattern(config.named_placeholder_types, _string_pattern(config.string_types)),
                parse_key=_quoted_placeholder_key,
                named=True,
            )
    if config.indexed_placeholder_types:
        yield TokenRule(
            TokenKind.PLACEHOLDER,
            _placeholder_pattern(config.indexed_placeholder_types, r"[0-9]*"),
            parse_key=lambda m: m.group("body"),
        )

    yield TokenRule(TokenKind.NUMBER, NUMBER_PATTERN)

    reserved_families = (
        (TokenKind.RESERVED_TOPLEVEL, config.reserved_toplevel_words),
        (TokenKind.RESERVED_TOPLEVEL_INLINE, config.reserved_toplevel_inline_words),
        (TokenKind.RESERVED_NEWLINE, config.reserved_newline_words),
        (TokenKind.RESERVED, config.reserved_words),
        (TokenKind.UNION_WORDS, config.union_words),
    )
    for kind, words in reserved_families:
        if words:
            yield TokenRule(kind, _reserved_word_pattern(words), reserved=True)

    yield TokenRule(TokenKind.WORD, _word_pattern(config.special_word_chars))
    yield TokenRule(TokenKind.OPERATOR, OPERATOR_PATTERN)


def _line_comment_pattern(markers: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(m) for m in _longest_first(markers))
    return re.compile(rf"(?:{alternatives}).*?(?:\n|\Z)")


def _string_pattern(string_types: tuple[str, ...]) -> str:
    return "|".join(STRING_PATTERNS[t] for t in string_types)


def _paren_pattern(parens: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = [re.escape(p) if len(p) == 1 else rf"\b{re.escape(p)}\b" for p in parens]
    return re.compile("|".join(alternatives), re.IGNORECASE)


def _placeholder_pattern(prefixes: tuple[str, ...], body: str) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(p) for p in _longest_first(prefixes))
    return re.compile(rf"(?P<prefix>{alternatives})(?P<body>{body})", re.DOTALL)


def _reserved_word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in _longest_first(words))
    return re.compile(rf"(?:{alternatives})\b", re.IGNORECASE)


def _word_pattern(special_chars: tuple[str, ...]) -> re.Pattern[str]:
    extra = "".join(re.escape(c) for c in special_chars)
    return re.compile(rf"[\w{extra}]+")


def _longest_first(values: tuple[str, ...]) -> list[str]:
    return sorted(set(values), key=lambda v: (-len(v), v))


def _quoted_placeholder_key(match: re.Match[str]) -> str:
    body = match.group("body")
    opener = 2 if body.startswith("N'") else 1
    quote = _CLOSING_QUOTES[body[opener - 1]]
    inner = body[opener:] if _is_unterminated_string(body) else body[opener:-1]
    return inner.replace("\\" + quote, quote)


def unterminated_token_diagnostics(tokens: Iterable[Token]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        if token.kind == TokenKind.STRING and _is_unterminated_string(token.value):
            diagnostics.append(Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, token.range))
        elif token.kind == TokenKind.BLOCK_COMMENT and (len(token.value) < 4 or not token.value.endswith("*/")):
            diagnostics.append(Diagnostic.from_spec(LEXER_UNTERMINATED_BLOCK_COMMENT, token.range))
    return diagnostics


def _is_unterminated_string(value: str) -> bool:
    if value.startswith("N'"):
        value = value[1:]
    closing = _CLOSING_QUOTES.get(value[0])
    if closing is None or len(value) < 2 or not value.endswith(closing):
        return True
    if closing == "]":
        return False
    # Quotes pair up once backslash escapes are removed; doubled quotes count twice.
    if closing != "`":
        value = _ESCAPED_CHAR.sub("", value)
    return value.count(closing) % 2 == 1


def token_text(tokens: Iterable[Token]) -> str:
    """Reconstruct source text from tokens (lexing is lossless)."""
    return "".join(token.value for token in tokens)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, key and text for debugging."""
    for i, tok in enumerate(tokens):
        key = f" key={tok.key!r}" if tok.key is not None else ""
        print(f"{i:03d} {tok.kind.name:<26} range={tok.range.as_tuple()}{key} text={tok.value!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
