"""Source span tracking for tag mappings.

Provides LineSpan, the half-open extent of one logical line within the
source text. Offsets are Python string indices.

Thread Safety:
LineSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Half-open span [start, end) of a logical line.

    The span covers leading whitespace, label, mapping and any trailing
    whitespace, but never the line break that ends the line.

    Attributes:
        start: Offset of the first character of the line
        end: Offset just past the last character of the line

    Examples:
            >>> span = LineSpan(0, 5)
            >>> span.slice("a b c\\n")
            'a b c'
            >>> len(span)
            5

    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    def slice(self, source: str) -> str:
        """Return the line's text from the source it was parsed from."""
        return source[self.start : self.end]
