"""Whitespace prefix stack for indentation-based nesting.

Each open nesting level is represented by the leading whitespace of the
line that opened it. Entry 0 is always the empty top-level prefix, and
every entry is a strict prefix of the one above it.

Entries are stored as (start, end) spans into the source rather than as
copied strings; the stack is only ever pushed, truncated, or reset.

Usage:
    stack = WhitespaceStack(source)
    stack.reset()                    # new top-level line
    nesting = stack.resolve(s, e)    # leading whitespace of an indented line
    if nesting is None:
        ...                          # inconsistent dedent
"""

from __future__ import annotations

# Span of the empty top-level prefix
_TOP_LEVEL = (0, 0)


class WhitespaceStack:
    """Stack of leading-whitespace prefixes, one per open nesting level.

    A fresh stack is *unset*: no top-level line has been seen, so no
    indented line can be resolved against it.

    Thread Safety:
        Not thread-safe. Owned by a single parse() call.

    """

    __slots__ = ("_source", "_spans")

    def __init__(self, source: str) -> None:
        self._source = source
        self._spans: list[tuple[int, int]] = []

    @property
    def is_set(self) -> bool:
        """True once a top-level line has been seen."""
        return bool(self._spans)

    @property
    def depth(self) -> int:
        """Number of entries, the top-level entry included."""
        return len(self._spans)

    def prefixes(self) -> list[str]:
        """Current prefixes, bottom first (for debugging and tests)."""
        return [self._source[s:e] for s, e in self._spans]

    def reset(self) -> None:
        """Start over from the top level."""
        self._spans.clear()
        self._spans.append(_TOP_LEVEL)

    def resolve(self, start: int, end: int) -> int | None:
        """Resolve the nesting level of leading whitespace source[start:end].

        - extends the top prefix: push, one level deeper
        - equals the top prefix: same level
        - otherwise: pop back to the level it equals

        Returns:
            The nesting level (depth - 1), or None if the whitespace matches
            no open level. The stack must be set.
        """
        source = self._source
        spans = self._spans
        ws = source[start:end]
        top_start, top_end = spans[-1]
        top = source[top_start:top_end]

        if ws.startswith(top):
            if len(ws) > len(top):
                spans.append((start, end))
            return len(spans) - 1

        while ws != top:
            # Every entry below is shorter than top, hence shorter than ws.
            # Stops at the latest on the empty top-level entry.
            if len(ws) >= len(top):
                return None
            spans.pop()
            top_start, top_end = spans[-1]
            top = source[top_start:top_end]
        return len(spans) - 1
