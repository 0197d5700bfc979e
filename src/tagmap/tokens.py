"""Token and TokenTag definitions for the tagmap lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token carries a tag and half-open offsets into the source text; the
text itself is never copied into the token.

Stream contract (what the parser relies on):
- every token is non-empty (start < end)
- tokens are contiguous: token[i].end == token[i + 1].start
- the first token starts at 0, the last ends at len(source)
- no two adjacent WHITESPACE tokens, no two adjacent CONTENT tokens
- LINE_BREAK tokens have length 1, except "\\r\\n" which has length 2

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenTag is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto


class TokenTag(Enum):
    """Token categories produced by the lexer."""

    LINE_BREAK = auto()  # \r\n or a single newline code point
    WHITESPACE = auto()  # maximal run of non-newline White_Space
    CONTENT = auto()  # maximal run of anything else


@dataclass(frozen=True, slots=True)
class Token:
    """A tagged span of source text.

    Attributes:
        tag: The token category
        start: Start offset in source (inclusive)
        end: End offset in source (exclusive)

    """

    tag: TokenTag
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.tag.name}, {self.start}:{self.end})"

    def text(self, source: str) -> str:
        """Slice this token's text out of the source it was lexed from."""
        return source[self.start : self.end]


# Any iterable of tokens; the parser only iterates it once
TokenStream = Iterable[Token]
