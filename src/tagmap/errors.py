"""Exception classes for tagmap.

Provides standardized exceptions for error handling throughout tagmap.
The lexer never raises; every failure comes from the parser.
"""

from __future__ import annotations


class TagmapError(Exception):
    """Base exception for all tagmap errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(TagmapError):
    """Error while parsing a tag file.

    Raised when the parser meets input it cannot turn into tag mappings.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        excerpt: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            excerpt: Source text from the start of the line to the failure point
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.excerpt = excerpt
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        detail = f": {excerpt!r}" if excerpt is not None else ""
        super().__init__(f"{location}{message}{detail}")


class TagIndentationError(ParseError):
    """Leading whitespace does not match any open nesting level.

    Raised when the first non-blank line is indented, or when a later line
    dedents to a prefix that was never opened. Always fatal: guessing a
    nesting level would yield a structurally wrong tree.
    """

    @property
    def linum(self) -> int | None:
        """Line number of the offending line (same as ``lineno``)."""
        return self.lineno


class TokenStreamError(TagmapError):
    """A caller-supplied token stream broke the lexer contract.

    Only detected on impossible state transitions, or on every token when
    ``ParseConfig.validate_tokens`` is set.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize token stream error.

        Args:
            message: Description of the violated invariant
            offset: Start offset of the offending token (optional)
        """
        self.offset = offset

        location = f" (offset {offset})" if offset is not None else ""
        super().__init__(f"Invalid token stream{location}: {message}")
