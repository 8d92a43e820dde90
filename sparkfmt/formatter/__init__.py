"""Formatting engine: indentation state, inline blocks, params and the formatter."""

from sparkfmt.formatter.flags import OneShotFlag
from sparkfmt.formatter.formatter import Formatter
from sparkfmt.formatter.indentation import Indentation, IndentKind
from sparkfmt.formatter.inline_block import INLINE_MAX_LENGTH, InlineBlock
from sparkfmt.formatter.options import DEFAULT_INDENT, FormatOptions
from sparkfmt.formatter.params import Params, ParamValues

__all__ = [
    "DEFAULT_INDENT",
    "INLINE_MAX_LENGTH",
    "FormatOptions",
    "Formatter",
    "IndentKind",
    "Indentation",
    "InlineBlock",
    "OneShotFlag",
    "ParamValues",
    "Params",
]
