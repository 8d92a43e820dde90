"""Command line entry point: `sparkfmt [paths...]`."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from sparkfmt.diagnostics import render_diagnostic
from sparkfmt.dialects import DIALECTS, get_dialect
from sparkfmt.formatter import DEFAULT_INDENT, FormatOptions
from sparkfmt.pipeline import FormatRunResult, run_format

logger = logging.getLogger(__name__)

STDIN_PATH = "-"

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sparkfmt", description="Format Spark SQL files.")
    parser.add_argument(
        "paths",
        nargs="*",
        default=[STDIN_PATH],
        help="SQL files to format; `-` or no path reads stdin and writes stdout.",
    )
    parser.add_argument("--indent", default=DEFAULT_INDENT, help="Indent unit (default: two spaces).")
    parser.add_argument("--tabs", action="store_true", help="Indent with one tab per level.")
    parser.add_argument(
        "--params",
        default=None,
        help="Placeholder values as JSON: an object for named, an array for positional placeholders.",
    )
    parser.add_argument(
        "--dialect",
        default="spark",
        help=f"SQL dialect (known: {', '.join(sorted(DIALECTS))}).",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-w", "--write", action="store_true", help="Rewrite files in place.")
    mode.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 when any input would be reformatted.",
    )
    parser.add_argument("--progress", action="store_true", help="Show a tqdm progress bar over files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = _build_options(parser, args)
    paths: list[str] = args.paths or [STDIN_PATH]

    exit_code = EXIT_OK
    for path in tqdm(paths, desc="sparkfmt", unit="file", disable=not args.progress):
        try:
            source = _read_source(path)
        except OSError as exc:
            logger.error("Cannot read %s: %s", path, exc)
            exit_code = EXIT_USAGE
            continue

        result = run_format(source, options)
        _report_diagnostics(path, result)
        rendered = _render(result)

        if args.check:
            if rendered != source:
                print(f"would reformat {_display_name(path)}")
                exit_code = max(exit_code, EXIT_CHECK_FAILED)
        elif args.write and path != STDIN_PATH:
            if rendered != source:
                Path(path).write_text(rendered, encoding="utf-8")
                logger.info("reformatted %s", path)
        else:
            sys.stdout.write(rendered)

    return exit_code


def _build_options(parser: argparse.ArgumentParser, args: argparse.Namespace) -> FormatOptions:
    params = None
    if args.params is not None:
        try:
            params = json.loads(args.params)
        except json.JSONDecodeError as exc:
            parser.error(f"--params is not valid JSON: {exc}")
        if not isinstance(params, (dict, list)):
            parser.error("--params must be a JSON object or array")

    try:
        dialect = get_dialect(args.dialect)
    except KeyError as exc:
        parser.error(str(exc.args[0]))

    indent = "\t" if args.tabs else args.indent
    try:
        return FormatOptions(indent=indent, params=params, dialect=dialect)
    except ValueError as exc:
        parser.error(str(exc))


def _read_source(path: str) -> str:
    if path == STDIN_PATH:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _render(result: FormatRunResult) -> str:
    if not result.formatted_text:
        return ""
    return result.formatted_text + "\n"


def _report_diagnostics(path: str, result: FormatRunResult) -> None:
    origin = _display_name(path)
    for diagnostic in result.diagnostics:
        logger.warning(render_diagnostic(diagnostic, origin))


def _display_name(path: str) -> str:
    return "<stdin>" if path == STDIN_PATH else path
