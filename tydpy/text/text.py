from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """Line/column coordinate in source text.

    Both fields are 0-indexed. The column resets to 0 after every newline.
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("TextPosition cannot be negative")

    def as_tuple(self) -> tuple[int, int]:
        """Get the position as a tuple of (line, column) integers."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


ZERO_POSITION: Final[TextPosition] = TextPosition(0, 0)
"""Position of the first character of any text."""


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets in text.

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
    def new(start: int, end: int) -> "TextRange":
        """Create a TextRange from start and end offsets."""
        return TextRange(start, end)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self.start, self.end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Offsets are python string indices so this is a plain slice.
    """
    return source[range.start : range.end]
