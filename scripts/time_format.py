#!/usr/bin/env python3
"""Quick perf benchmark for SQL formatting."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from sparkfmt.formatter import FormatOptions
from sparkfmt.pipeline import run_format


def _collect_sql_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.sql")) if path.is_file()]


def _run_once(
    sources: list[str],
    options: FormatOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        result = run_format(source, options)
        total_tokens += len(result.tokens)
        total_diagnostics += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_tokens, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark SQL formatting throughput")
    parser.add_argument("--sql-root", type=Path, required=True, help="Directory searched for .sql files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    sql_root: Path = args.sql_root
    if not sql_root.is_dir():
        raise SystemExit(f"Invalid --sql-root: {sql_root}")

    files = _collect_sql_files(sql_root)
    if not files:
        raise SystemExit(f"No .sql files found under {sql_root}")
    sources = [path.read_text(encoding="utf-8") for path in files]

    options = FormatOptions()
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        warmups = max(args.warmups, 0)
        for warmup_idx in range(warmups):
            _run_once(sources, options, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        tokens_count = 0
        diagnostics_count = 0
        runs = max(args.runs, 1)
        for run_idx in range(runs):
            duration, tokens_count, diagnostics_count = _run_once(
                sources,
                options,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tokens_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tokens_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tokens_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {sql_root}")
    print(f"Files: {len(files)}")
    print(f"Tokens: {tokens_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):  {len(files) / mean:.1f}")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
