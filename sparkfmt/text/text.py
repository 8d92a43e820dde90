from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets into the source text.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Source text covered by a range; offsets are plain `str` indices."""
    return source[range.start : range.end]
