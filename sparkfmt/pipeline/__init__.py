"""Pipeline entrypoints and run result carriers."""

from sparkfmt.pipeline.entrypoints import run_format, run_lex
from sparkfmt.pipeline.results import FormatRunResult, LexRunResult

__all__ = [
    "FormatRunResult",
    "LexRunResult",
    "run_format",
    "run_lex",
]
