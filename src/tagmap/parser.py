"""Single-pass tag parser producing TagMapping records.

Consumes the source text together with a token stream (see tagmap.tokens
for the contract) and yields one TagMapping per non-blank line.

Architecture:
- A per-line state machine (tagmap.parsing.states) decides, token by token,
  where the label and mapping of the current line begin and end.
- A WhitespaceStack (tagmap.parsing.indent) resolves the leading whitespace
  of each indented line to a nesting level.

Line rules:
- lines holding only whitespace are skipped (they still count for linum)
- the first content run is the label
- the span from the second content run to the last is the mapping
- trailing whitespace is never part of the mapping
- the first non-blank line must be top-level, and every indented line must
  extend or return to an open level, else TagIndentationError

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local) when iteration starts
- Yielded TagMapping records are immutable

"""

from __future__ import annotations

from collections.abc import Iterator

from tagmap.config import ParseConfig, get_parse_config
from tagmap.errors import TagIndentationError, TokenStreamError
from tagmap.lexer import tokenize
from tagmap.location import LineSpan
from tagmap.nodes import TagMapping
from tagmap.parsing.indent import WhitespaceStack
from tagmap.parsing.states import (
    Label,
    LabeledState,
    LabelWs,
    LeadingWs,
    LineStart,
    LineState,
    Mapping,
    MappingWs,
)
from tagmap.parsing.validation import TokenValidator
from tagmap.profiling import get_parse_accumulator
from tagmap.tokens import Token, TokenStream, TokenTag
from tagmap.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Line-oriented parser for indented tag files.

    Usage:
            >>> from tagmap.lexer import tokenize
            >>> source = "a\\n  b x\\n"
            >>> for m in Parser(source, tokenize(source)).parse():
            ...     print(m.linum, m.nesting, m.label, m.mapping)
        1 0 a None
        2 1 b x

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation.

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_config",
    )

    def __init__(self, source: str, tokens: TokenStream) -> None:
        """Initialize parser.

        Args:
            source: The text the tokens were produced from
            tokens: Token stream over source; consumed lazily, once
        """
        self._source = source
        self._tokens = tokens
        self._config: ParseConfig | None = None

    def parse(self) -> Iterator[TagMapping]:
        """Yield one TagMapping per non-blank line.

        Work is done only as records are pulled. Once an error is raised
        the iterator is finished.

        Raises:
            TagIndentationError: Leading whitespace matches no open level
            TokenStreamError: The token stream breaks the lexer contract
        """
        config = self._config = get_parse_config()
        source = self._source
        validator = TokenValidator(source) if config.validate_tokens else None
        # Unset until the first top-level line
        stack = WhitespaceStack(source)

        linum = 1
        line_start = 0
        mapping_count = 0
        max_nesting = 0
        state: LineState = LineStart()

        for token in self._tokens:
            if validator is not None:
                validator.check(token)
            start = token.start
            end = token.end

            match token.tag:
                case TokenTag.LINE_BREAK:
                    if isinstance(state, LabeledState):
                        mapping_count += 1
                        yield self._marshal(state, linum, line_start, start)
                    linum += 1
                    line_start = end
                    state = LineStart()

                case TokenTag.WHITESPACE:
                    match state:
                        case LineStart():
                            # Nesting is deferred until the line proves non-blank
                            state = LeadingWs()
                        case Label(nesting=nesting, label=label):
                            state = LabelWs(nesting, label, end)
                        case Mapping(nesting=nesting, label=label, mapping_start=ms, mapping_end=me):
                            # Possibly trailing; kept out of mapping_end for now
                            state = MappingWs(nesting, label, ms, me)
                        case _:
                            raise self._unexpected(token, state)

                case TokenTag.CONTENT:
                    match state:
                        case LineStart():
                            # New top-level line
                            stack.reset()
                            state = Label(0, source[start:end])
                        case LeadingWs():
                            nesting = self._compute_nesting(stack, linum, line_start, start, end)
                            max_nesting = max(max_nesting, nesting)
                            state = Label(nesting, source[start:end])
                        case LabelWs(nesting=nesting, label=label, mapping_start=ms) | MappingWs(
                            nesting=nesting, label=label, mapping_start=ms
                        ):
                            state = Mapping(nesting, label, ms, end)
                        case _:
                            raise self._unexpected(token, state)

                case _:
                    raise self._unexpected(token, state)

        if validator is not None:
            validator.finish()

        if isinstance(state, LabeledState):
            mapping_count += 1
            yield self._marshal(state, linum, line_start, len(source))

        acc = get_parse_accumulator()
        if acc is not None:
            line_count = linum - 1 + (1 if line_start < len(source) else 0)
            acc.record_parse(len(source), line_count, mapping_count, max_nesting)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _marshal(self, state: LabeledState, linum: int, line_start: int, line_end: int) -> TagMapping:
        mapping = None
        if isinstance(state, (Mapping, MappingWs)):
            mapping = self._source[state.mapping_start : state.mapping_end]
        return TagMapping(
            linum=linum,
            line=LineSpan(line_start, line_end),
            nesting=state.nesting,
            label=state.label,
            mapping=mapping,
        )

    def _compute_nesting(
        self,
        stack: WhitespaceStack,
        linum: int,
        line_start: int,
        content_start: int,
        content_end: int,
    ) -> int:
        """Resolve the nesting level of the line whose first content is at content_start.

        The leading whitespace is taken verbatim from the source, from the
        start of the line up to the content.
        """
        if not stack.is_set:
            raise self._indentation_error(
                "First non-blank line must be top-level (no leading whitespace)",
                linum,
                line_start,
                content_end,
            )

        nesting = stack.resolve(line_start, content_start)
        if nesting is None:
            raise self._indentation_error(
                f"Inconsistent whitespace at nesting level {stack.depth}",
                linum,
                line_start,
                content_end,
            )
        return nesting

    def _indentation_error(
        self, message: str, linum: int, line_start: int, end: int
    ) -> TagIndentationError:
        config = self._config or get_parse_config()
        excerpt = self._source[line_start:end]
        limit = config.max_excerpt_length
        if limit and len(excerpt) > limit:
            excerpt = excerpt[:limit] + "..."
        logger.debug("Indentation error at line %d: %s", linum, message)
        return TagIndentationError(
            message,
            lineno=linum,
            excerpt=excerpt,
            source_file=config.source_file,
        )

    def _unexpected(self, token: Token, state: LineState) -> TokenStreamError:
        message = f"unexpected {token.tag.name} token in state {type(state).__name__}"
        logger.debug("Token stream rejected at offset %d: %s", token.start, message)
        return TokenStreamError(message, offset=token.start)


def parse(source: str, tokens: TokenStream) -> Iterator[TagMapping]:
    """Parse a token stream over source into TagMapping records.

    Args:
        source: The text the tokens were produced from
        tokens: Any iterable of tokens satisfying the lexer contract

    Returns:
        Lazy iterator of TagMapping, one per non-blank line

    """
    return Parser(source, tokens).parse()


def parse_default(source: str) -> Iterator[TagMapping]:
    """Tokenize and parse source with the built-in lexer.

    Example:
        >>> [(m.label, m.mapping, m.nesting) for m in parse_default("a b c\\n")]
        [('a', 'b c', 0)]

    """
    return parse(source, tokenize(source))
