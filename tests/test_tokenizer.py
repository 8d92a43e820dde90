import textwrap

import pytest

from sparkfmt.dialects import SPARK_SQL_TOKENIZER_CONFIG
from sparkfmt.lexer import Token, TokenKind, Tokenizer, TokenizerConfig, token_text
from sparkfmt.text import slice_text_range


def lex(text: str) -> list[Token]:
    return Tokenizer(SPARK_SQL_TOKENIZER_CONFIG).tokenize(text)


def significant(tokens: list[Token]) -> list[Token]:
    return [tok for tok in tokens if tok.kind != TokenKind.WHITESPACE]


def kinds(text: str) -> list[TokenKind]:
    return [tok.kind for tok in significant(lex(text))]


def test_simple_select_token_kinds() -> None:
    assert kinds("SELECT a FROM t") == [
        TokenKind.RESERVED_TOPLEVEL,
        TokenKind.WORD,
        TokenKind.RESERVED_TOPLEVEL_INLINE,
        TokenKind.WORD,
    ]


def test_whitespace_tokens_are_kept_and_ranges_are_contiguous() -> None:
    src = "SELECT  a,\n\tb FROM t"
    tokens = lex(src)

    assert token_text(tokens) == src
    assert tokens[0].range.start == 0
    assert tokens[-1].range.end == len(src)
    for left, right in zip(tokens, tokens[1:]):
        assert left.range.end == right.range.start
    for tok in tokens:
        assert slice_text_range(src, tok.range) == tok.value


def test_multi_word_keyword_matches_any_whitespace_run() -> None:
    tokens = significant(lex("SELECT a FROM t GROUP \n  BY a"))

    group_by = tokens[4]
    assert group_by.kind == TokenKind.RESERVED_TOPLEVEL
    assert group_by.value == "GROUP \n  BY"


def test_longest_keyword_wins_within_a_family() -> None:
    tokens = significant(lex("a LEFT OUTER JOIN b"))

    assert tokens[1].kind == TokenKind.RESERVED_TOPLEVEL_INLINE
    assert tokens[1].value == "LEFT OUTER JOIN"


@pytest.mark.parametrize(
    ("word", "kind"),
    [
        ("select", TokenKind.RESERVED_TOPLEVEL),
        ("use", TokenKind.RESERVED_TOPLEVEL_INLINE),
        ("when", TokenKind.RESERVED_NEWLINE),
        ("modify", TokenKind.RESERVED_TOPLEVEL),
        ("like", TokenKind.RESERVED),
        ("union", TokenKind.UNION_WORDS),
        ("using", TokenKind.RESERVED),
        ("selected", TokenKind.WORD),
    ],
)
def test_reserved_family_priority(word: str, kind: TokenKind) -> None:
    assert kinds(word) == [kind]


def test_keywords_are_case_insensitive() -> None:
    assert kinds("SeLeCt") == [TokenKind.RESERVED_TOPLEVEL]


def test_reserved_word_after_dot_is_a_plain_word() -> None:
    tokens = significant(lex("mytable.from"))

    assert [tok.kind for tok in tokens] == [TokenKind.WORD, TokenKind.OPERATOR, TokenKind.WORD]
    assert tokens[2].value == "from"


@pytest.mark.parametrize("number", ["42", "3.14", "-7", "- 7", "0xFF", "0b1011"])
def test_number_literals(number: str) -> None:
    tokens = lex(number)

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.NUMBER
    assert tokens[0].value == number


@pytest.mark.parametrize(
    "literal",
    [
        "'plain'",
        "'it''s'",
        "'say \\'hi\\''",
        '"double"',
        '"a\\"b"',
        "`back tick`",
        "[bracket]",
        "N'national'",
        "'multi\nline'",
    ],
)
def test_string_literals(literal: str) -> None:
    tokens = lex(literal)

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].value == literal


def test_unterminated_string_runs_to_end_of_input() -> None:
    result = Tokenizer(SPARK_SQL_TOKENIZER_CONFIG).lex("SELECT 'abc FROM t")
    tokens = significant(result.tokens)

    assert tokens[-1].kind == TokenKind.STRING
    assert tokens[-1].value == "'abc FROM t"
    assert [d.code for d in result.diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert result.diagnostics[0].severity == "warning"


def test_terminated_strings_report_nothing() -> None:
    result = Tokenizer(SPARK_SQL_TOKENIZER_CONFIG).lex("SELECT 'it''s', \"a\\\"b\", `c`, [d]")

    assert result.diagnostics == []


def test_line_comments_include_their_newline() -> None:
    tokens = lex("# hash\n-- dashes\nSELECT")

    assert tokens[0].kind == TokenKind.LINE_COMMENT
    assert tokens[0].value == "# hash\n"
    assert tokens[1].kind == TokenKind.LINE_COMMENT
    assert tokens[1].value == "-- dashes\n"
    assert tokens[2].kind == TokenKind.RESERVED_TOPLEVEL


def test_block_comment_spans_lines() -> None:
    src = textwrap.dedent(
        """
        /* one
           two */ SELECT
        """
    ).strip()
    tokens = lex(src)

    assert tokens[0].kind == TokenKind.BLOCK_COMMENT
    assert tokens[0].value == "/* one\n   two */"


def test_unterminated_block_comment_is_reported() -> None:
    result = Tokenizer(SPARK_SQL_TOKENIZER_CONFIG).lex("SELECT 1 /* never closed")

    assert result.tokens[-1].kind == TokenKind.BLOCK_COMMENT
    assert [d.code for d in result.diagnostics] == ["LEXER_UNTERMINATED_BLOCK_COMMENT"]


def test_word_parens_case_and_end() -> None:
    tokens = significant(lex("case when a then b end"))

    assert tokens[0].kind == TokenKind.OPEN_PAREN
    assert tokens[-1].kind == TokenKind.CLOSE_PAREN
    assert kinds("ending") == [TokenKind.WORD]


@pytest.mark.parametrize(
    ("src", "key"),
    [
        (":name", "name"),
        (":a.b", "a.b"),
        (":'my key'", "my key"),
        (":'it\\'s'", "it's"),
        ("?", ""),
        ("?12", "12"),
    ],
)
def test_placeholders_extract_keys(src: str, key: str) -> None:
    tokens = lex(src)

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.PLACEHOLDER
    assert tokens[0].key == key


def test_double_colon_cast_is_an_operator() -> None:
    tokens = significant(lex("x::int"))

    assert [tok.value for tok in tokens] == ["x", "::", "int"]
    assert tokens[1].kind == TokenKind.OPERATOR


def test_multi_character_operators() -> None:
    tokens = significant(lex("a != b <> c >= d || e"))

    assert [tok.value for tok in tokens if tok.kind == TokenKind.OPERATOR] == ["!=", "<>", ">=", "||"]


def test_unknown_character_falls_through_to_operator() -> None:
    tokens = lex("a@b")

    assert [(tok.kind, tok.value) for tok in tokens] == [
        (TokenKind.WORD, "a"),
        (TokenKind.OPERATOR, "@"),
        (TokenKind.WORD, "b"),
    ]


def test_special_word_chars_extend_words() -> None:
    tokenizer = Tokenizer(TokenizerConfig(special_word_chars=("@",)))

    tokens = tokenizer.tokenize("@var")

    assert [(tok.kind, tok.value) for tok in tokens] == [(TokenKind.WORD, "@var")]


def test_empty_keyword_tables_never_match_empty_input() -> None:
    tokenizer = Tokenizer(TokenizerConfig())

    assert tokenizer.tokenize("") == []
    assert [tok.kind for tok in tokenizer.tokenize("select x")] == [
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
    ]


def test_config_coerces_lists_to_tuples() -> None:
    config = TokenizerConfig(reserved_words=["as", "in"])  # type: ignore[arg-type]

    assert config.reserved_words == ("as", "in")
    assert hash(config) == hash(TokenizerConfig(reserved_words=("as", "in")))


def test_config_rejects_bare_string_and_unknown_string_type() -> None:
    with pytest.raises(ValueError):
        TokenizerConfig(reserved_words="select")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        TokenizerConfig(string_types=("<>",))


def test_colon_after_word_is_not_a_named_placeholder() -> None:
    tokens = significant(lex("${hivevar:dt}"))

    assert [(tok.kind, tok.value) for tok in tokens] == [
        (TokenKind.OPERATOR, "$"),
        (TokenKind.OPERATOR, "{"),
        (TokenKind.WORD, "hivevar"),
        (TokenKind.OPERATOR, ":"),
        (TokenKind.WORD, "dt"),
        (TokenKind.OPERATOR, "}"),
    ]
    assert kinds("a = :dt") == [TokenKind.WORD, TokenKind.OPERATOR, TokenKind.PLACEHOLDER]


def test_unterminated_quoted_placeholder_keeps_whole_key() -> None:
    tokens = lex(":'abc")

    assert tokens[0].kind == TokenKind.PLACEHOLDER
    assert tokens[0].key == "abc"
