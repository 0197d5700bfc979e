"""Opt-in checks of the lexer token-stream contract.

The parser trusts its token stream. When a caller supplies tokens from
somewhere other than tagmap's own lexer, enabling
``ParseConfig.validate_tokens`` runs every token through TokenValidator
before the parser sees it.
"""

from __future__ import annotations

from tagmap.errors import TokenStreamError
from tagmap.lexer.classes import CRLF
from tagmap.tokens import Token, TokenTag
from tagmap.utils.logger import get_logger

logger = get_logger(__name__)

# Tags that may not appear twice in a row (maximal munch)
_NO_REPEAT = frozenset({TokenTag.WHITESPACE, TokenTag.CONTENT})


class TokenValidator:
    """Incremental validator: call check() per token, then finish()."""

    __slots__ = ("_source", "_previous")

    def __init__(self, source: str) -> None:
        self._source = source
        self._previous: Token | None = None

    def check(self, token: Token) -> None:
        """Validate one token against the previous one.

        Raises:
            TokenStreamError: If the token breaks the contract
        """
        previous = self._previous
        expected_start = 0 if previous is None else previous.end

        if token.start != expected_start:
            self._fail(f"token starts at {token.start}, expected {expected_start}", token)
        if token.end <= token.start:
            self._fail("empty token", token)
        if token.end > len(self._source):
            self._fail(f"token ends past end of source ({len(self._source)})", token)
        if previous is not None and token.tag is previous.tag and token.tag in _NO_REPEAT:
            self._fail(f"adjacent {token.tag.name} tokens", token)
        if token.tag is TokenTag.LINE_BREAK and len(token) != 1:
            if token.text(self._source) != CRLF:
                self._fail("line break longer than one character is not CRLF", token)

        self._previous = token

    def finish(self) -> None:
        """Check that the stream covered the whole source."""
        end = 0 if self._previous is None else self._previous.end
        if end != len(self._source):
            self._fail(f"stream ends at {end}, source length is {len(self._source)}", self._previous)

    def _fail(self, message: str, token: Token | None) -> None:
        offset = None if token is None else token.start
        logger.debug("Token stream rejected at offset %s: %s", offset, message)
        raise TokenStreamError(message, offset=offset)
