"""Indentation stack for the formatter."""

from __future__ import annotations

from enum import StrEnum

from sparkfmt.formatter.flags import OneShotFlag


class IndentKind(StrEnum):
    TOP_LEVEL = "top-level"
    BLOCK_LEVEL = "block-level"


class Indentation:
    """Tracks indent levels and the formatter's layout switches.

    Top-level indents are pushed by clause keywords (`SELECT`, `FROM`, ...),
    block-level indents by open parens. Closing a block also closes every
    clause opened inside it.

    Layout switches:
    - trim-end suppression: the next newline keeps trailing whitespace (one use)
    - newline suppression: the next newline-keyword stays on its line (one use)
    - whitespace emission: persistent; off while raw `SET`/`ADD JAR` text is copied
    """

    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent
        self._kinds: list[IndentKind] = []
        self._no_trim_end = OneShotFlag()
        self._no_newline = OneShotFlag()
        self._whitespace = True

    def get_indent(self) -> str:
        return self.indent * len(self._kinds)

    @property
    def depth(self) -> int:
        return len(self._kinds)

    @property
    def kinds(self) -> tuple[IndentKind, ...]:
        return tuple(self._kinds)

    def increase_top_level(self) -> None:
        self._kinds.append(IndentKind.TOP_LEVEL)

    def increase_block_level(self) -> None:
        self._kinds.append(IndentKind.BLOCK_LEVEL)

    def decrease_top_level(self) -> None:
        """Pop one top-level indent; no-op when the innermost indent is a block."""
        if self._kinds and self._kinds[-1] == IndentKind.TOP_LEVEL:
            self._kinds.pop()

    def decrease_block_level(self) -> None:
        """Pop the innermost block indent together with any top-level indents above it."""
        while self._kinds:
            if self._kinds.pop() != IndentKind.TOP_LEVEL:
                break

    def suppress_trim_end(self) -> None:
        self._no_trim_end.arm_once()

    def should_trim_end(self) -> bool:
        return not self._no_trim_end.consume()

    def suppress_next_newline(self) -> None:
        self._no_newline.arm_once()

    def should_start_newline(self) -> bool:
        return not self._no_newline.consume()

    @property
    def whitespace_enabled(self) -> bool:
        return self._whitespace

    def set_whitespace(self, enabled: bool) -> None:
        self._whitespace = enabled
