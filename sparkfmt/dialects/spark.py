"""Spark SQL keyword tables."""

from __future__ import annotations

from typing import Final

from sparkfmt.dialects.dialect import SqlDialect
from sparkfmt.lexer.config import TokenizerConfig

RESERVED_WORDS: Final[tuple[str, ...]] = (
    "as", "asc", "auto_increment",
    "between",
    "case", "character set", "charset",
    "comment", "contains",
    "current_timestamp", "current_date", "count", "coalesce",
    "database", "databases", "default", "delete", "desc", "describe",
    "distinct",
    "else", "end", "engine", "exists", "explain",
    "fields", "file", "foreign", "full", "function",
    "global", "grant", "grants", "group_concat",
    "hour",
    "identified", "if", "ifnull", "in", "index", "indexes", "infile", "insert", "interval",
    "into", "invoker", "is",
    "key", "keys", "kill",
    "like",
    "match",
    "minute", "min", "max",
    "modify", "month",
    "names", "now", "null",
    "partition", "partitions",
    "regexp",
    "rename", "replace", "replication", "reset", "rlike",
    "row", "rows", "row_format",
    "second",
    "storage", "string", "sum",
    "table", "tables", "temporary", "terminated", "then", "to", "true", "truncate", "type", "types",
    "uncommitted", "unique", "unsigned", "usage", "use", "using",
    "variables", "view", "when", "with",
)  # fmt: skip

RESERVED_TOPLEVEL_WORDS: Final[tuple[str, ...]] = (
    "delete from",
    "except",
    "group by",
    "order by",
    "having",
    "intersect",
    "modify",
    "select",
    "update",
    "values",
)

UNION_WORDS: Final[tuple[str, ...]] = (
    "union all",
    "union",
)

RESERVED_TOPLEVEL_INLINE_WORDS: Final[tuple[str, ...]] = (
    "use", "drop table", "create table", "from", "where", "limit", "create",
    "insert overwrite", "insert into",
    "inner join",
    "full join",
    "full outer join",
    "join",
    "left join", "left outer join",
    "outer join",
    "right join", "right outer join", "on",
)  # fmt: skip

RESERVED_NEWLINE_WORDS: Final[tuple[str, ...]] = (
    "and", "or",
    "partitioned by", "row format", "fields terminated by", "lines terminated by", "stored as", "tblproperties",
    "alter table", "add jar", "after", "alter column",
    "cross apply", "cross join", "set",
    "when", "else",
)  # fmt: skip

SPARK_SQL_TOKENIZER_CONFIG: Final = TokenizerConfig(
    reserved_words=RESERVED_WORDS,
    reserved_toplevel_words=RESERVED_TOPLEVEL_WORDS,
    reserved_newline_words=RESERVED_NEWLINE_WORDS,
    reserved_toplevel_inline_words=RESERVED_TOPLEVEL_INLINE_WORDS,
    union_words=UNION_WORDS,
    string_types=('""', "N''", "''", "``", "[]"),
    open_parens=("(", "CASE"),
    close_parens=(")", "END"),
    indexed_placeholder_types=("?",),
    named_placeholder_types=(":",),
    line_comment_types=("#", "--"),
)

SPARK_SQL: Final = SqlDialect(name="spark", tokenizer_config=SPARK_SQL_TOKENIZER_CONFIG)
