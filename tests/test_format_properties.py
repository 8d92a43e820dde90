import re

import pytest

import sparkfmt
from sparkfmt.dialects import SPARK_SQL_TOKENIZER_CONFIG
from sparkfmt.formatter import INLINE_MAX_LENGTH
from sparkfmt.lexer import TokenKind, Tokenizer
from tests._shared_cases import FORMAT_CASES, SqlCase

EXTRA_SOURCES: tuple[str, ...] = (
    "select a,b,c from t where a in (select x from y where z = 1) and b = 2",
    "SELECT DISTINCT a FROM t LEFT OUTER JOIN u ON t.id = u.id WHERE u.x IS NULL ORDER BY a",
    "INSERT OVERWRITE TABLE t PARTITION (dt = '2024-01-01') SELECT * FROM s",
    "CREATE TABLE t (a INT, b STRING) STORED AS PARQUET",
    "SELECT CASE WHEN a THEN (1 + 2) ELSE f(x, y) END FROM t -- trailing",
    "/* a\n * b\n */\nSELECT 1; SELECT 2 UNION ALL SELECT 3",
)

ALL_SOURCES = tuple(case.source for case in FORMAT_CASES) + EXTRA_SOURCES


def paren_counts(text: str) -> tuple[int, int]:
    tokens = Tokenizer(SPARK_SQL_TOKENIZER_CONFIG).tokenize(text)
    opens = sum(1 for tok in tokens if tok.kind == TokenKind.OPEN_PAREN)
    closes = sum(1 for tok in tokens if tok.kind == TokenKind.CLOSE_PAREN)
    return opens, closes


@pytest.mark.parametrize("src", ALL_SOURCES)
def test_formatting_is_idempotent(src: str) -> None:
    once = sparkfmt.format(src)

    assert sparkfmt.format(once) == once


@pytest.mark.parametrize(
    "case",
    [case for case in FORMAT_CASES if not case.whitespace_sensitive],
    ids=lambda case: case.name,
)
def test_collapsing_whitespace_does_not_change_output(case: SqlCase) -> None:
    collapsed = re.sub(r"\s+", " ", case.source)

    assert sparkfmt.format(collapsed) == sparkfmt.format(case.source)


def test_spread_out_source_formats_like_compact_source() -> None:
    spread = "SELECT\n\n    a ,\n\tb\nFROM   t\n\n WHERE x   =  1"
    compact = "SELECT a , b FROM t WHERE x = 1"

    assert sparkfmt.format(spread) == sparkfmt.format(compact)


@pytest.mark.parametrize("src", ALL_SOURCES + ("SELECT (a", "SELECT a)", "f((x)"))
def test_paren_balance_is_preserved(src: str) -> None:
    opens, closes = paren_counts(src)
    out_opens, out_closes = paren_counts(sparkfmt.format(src))

    assert (opens == closes) == (out_opens == out_closes)
    assert (opens, closes) == (out_opens, out_closes)


def test_region_over_inline_bound_is_multi_line() -> None:
    items = ", ".join(f"c{i:03d}" for i in range(60))
    region = f"({items})"
    assert len(region) > INLINE_MAX_LENGTH

    formatted = sparkfmt.format(f"SELECT f{region} FROM t")

    assert region not in formatted
    assert "  f(\n" in formatted


def test_region_under_inline_bound_is_single_line() -> None:
    items = ", ".join(f"c{i:03d}" for i in range(10))

    formatted = sparkfmt.format(f"SELECT f({items}) FROM t")

    assert f"f({items})" in formatted


def test_comma_breaks_select_list_but_not_limit() -> None:
    assert sparkfmt.format("SELECT a, b, c") == "select\n  a,\n  b,\n  c"
    assert sparkfmt.format("SELECT a, b, c LIMIT 10, 20").endswith("\nlimit 10, 20")
