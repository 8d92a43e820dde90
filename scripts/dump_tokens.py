#!/usr/bin/env python
"""Print the token stream of a SQL file."""

from __future__ import annotations

import argparse
from pathlib import Path

from sparkfmt.dialects import get_dialect
from sparkfmt.lexer import dump_tokens, get_tokenizer
from sparkfmt.lexer.tokens import Token


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} range=({token.range.start},{token.range.end}) value={token.value!r}"
    if token.key is not None:
        return base + f" key={token.key!r}"
    return base


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump sparkfmt tokens for a SQL file.")
    parser.add_argument("path", type=Path, help="SQL file to tokenize.")
    parser.add_argument("--dialect", default="spark", help="SQL dialect (default: spark).")
    parser.add_argument("--out", type=Path, default=None, help="Write the dump here instead of stdout.")
    args = parser.parse_args(argv)

    text = args.path.read_text(encoding="utf-8")
    tokenizer = get_tokenizer(get_dialect(args.dialect).tokenizer_config)
    lexed = tokenizer.lex(text)

    if args.out is None:
        dump_tokens(lexed.tokens, lexed.diagnostics)
        return 0

    lines = [format_token(idx, token) for idx, token in enumerate(lexed.tokens)]
    for diagnostic in lexed.diagnostics:
        lines.append(f"{diagnostic.severity.upper()} {diagnostic.code} range={diagnostic.range.as_tuple()}")

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {len(lexed.tokens)} tokens to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
