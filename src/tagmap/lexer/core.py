"""Whitespace-only lexer with O(n) guaranteed performance.

Partitions source text into LINE_BREAK, WHITESPACE and CONTENT tokens.
Classification is total: every code point belongs to exactly one class,
so the lexer never fails, whatever the input (control characters and
lone surrogates included).

No regex in the hot path. Scanning is a single left-to-right pass with no
lookback beyond pairing a CR with a following LF.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tagmap.lexer.classes import CR, LF, NEWLINES, WHITE_SPACE, WHITESPACE
from tagmap.tokens import Token, TokenTag


class Lexer:
    """Single-pass scanner producing a lazy token stream.

    Each step matches the longest alternative at the current position,
    tried in order: line break (CR+LF first), whitespace run, content run.

    Usage:
            >>> lexer = Lexer("a b\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(CONTENT, 0:1)
        Token(WHITESPACE, 1:2)
        Token(CONTENT, 2:3)
        Token(LINE_BREAK, 3:4)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to tokenize
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        source_len = self._source_len
        while self._pos < source_len:
            start = self._pos
            char = self._source[start]
            if char in NEWLINES:
                tag = TokenTag.LINE_BREAK
                end = self._scan_line_break(start)
            elif char in WHITESPACE:
                tag = TokenTag.WHITESPACE
                end = self._scan_whitespace(start)
            else:
                tag = TokenTag.CONTENT
                end = self._scan_content(start)
            self._pos = end
            yield Token(tag, start, end)

    # =========================================================================
    # Scanners (each returns the exclusive end of the match at start)
    # =========================================================================

    def _scan_line_break(self, start: int) -> int:
        """A CR immediately followed by LF is one break; anything else is one code point."""
        end = start + 1
        if self._source[start] == CR and end < self._source_len and self._source[end] == LF:
            return end + 1
        return end

    def _scan_whitespace(self, start: int) -> int:
        source = self._source
        source_len = self._source_len
        pos = start + 1
        while pos < source_len and source[pos] in WHITESPACE:
            pos += 1
        return pos

    def _scan_content(self, start: int) -> int:
        source = self._source
        source_len = self._source_len
        pos = start + 1
        while pos < source_len and source[pos] not in WHITE_SPACE:
            pos += 1
        return pos


def tokenize(source: str) -> Iterator[Token]:
    """Tokenize text into LINE_BREAK / WHITESPACE / CONTENT tokens.

    Pure and deterministic; never raises. The returned iterator is lazy and
    single-pass: call again to rescan.

    Example:
        >>> [t.tag.name for t in tokenize("a\\r\\n")]
        ['CONTENT', 'LINE_BREAK']

    """
    return Lexer(source).tokenize()
