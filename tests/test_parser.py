"""Tests for the tag parser.

Covers the reference scenarios, line and mapping extraction details,
nesting resolution, laziness, and parsing of caller-supplied token streams.
"""

from __future__ import annotations

import pytest

from tagmap import (
    LineSpan,
    Parser,
    TagIndentationError,
    TagMapping,
    Token,
    TokenStreamError,
    TokenTag,
    parse,
    parse_default,
    tokenize,
)


def _summary(source: str) -> list[tuple[int, str, str | None, int]]:
    return [(m.linum, m.label, m.mapping, m.nesting) for m in parse_default(source)]


class TestScenarios:
    """Reference inputs and their exact outputs."""

    def test_nested_then_dedent(self) -> None:
        assert _summary("a\n  b\nc\n") == [
            (1, "a", None, 0),
            (2, "b", None, 1),
            (3, "c", None, 0),
        ]

    def test_label_and_mapping(self) -> None:
        assert _summary("a b c\n") == [(1, "a", "b c", 0)]

    def test_indented_first_line_raises(self) -> None:
        with pytest.raises(TagIndentationError) as exc_info:
            list(parse_default("  a\n"))
        assert exc_info.value.linum == 1

    def test_inconsistent_dedent_raises(self) -> None:
        with pytest.raises(TagIndentationError) as exc_info:
            list(parse_default("a\n  b\n c\n"))
        assert exc_info.value.linum == 3

    def test_empty_input(self) -> None:
        assert list(tokenize("")) == []
        assert list(parse_default("")) == []


class TestLineExtraction:
    """Labels, mappings, and line spans."""

    def test_full_record(self) -> None:
        [mapping] = parse_default("a b c\n")
        assert mapping == TagMapping(linum=1, line=LineSpan(0, 5), nesting=0, label="a", mapping="b c")

    def test_line_span_excludes_break(self) -> None:
        source = "key value\r\nnext\n"
        first, second = parse_default(source)
        assert first.line.slice(source) == "key value"
        assert second.line == LineSpan(11, 15)

    def test_line_span_includes_leading_and_trailing_whitespace(self) -> None:
        source = "a\n  b c  \n"
        _, child = parse_default(source)
        assert child.line.slice(source) == "  b c  "
        assert child.mapping == "c"

    def test_trailing_whitespace_not_in_mapping(self) -> None:
        assert _summary("a b \t\n") == [(1, "a", "b", 0)]

    def test_trailing_whitespace_after_label_only(self) -> None:
        assert _summary("a   \n") == [(1, "a", None, 0)]

    def test_interior_whitespace_kept_verbatim(self) -> None:
        assert _summary("a b \t c\td\n") == [(1, "a", "b \t c\td", 0)]

    def test_no_trailing_break(self) -> None:
        source = "a\n  b c"
        mappings = list(parse_default(source))
        assert mappings[-1].line == LineSpan(2, 7)
        assert mappings[-1].mapping == "c"

    def test_no_trailing_break_with_trailing_whitespace(self) -> None:
        assert _summary("a b  ") == [(1, "a", "b", 0)]

    def test_unicode_whitespace_separates(self) -> None:
        assert _summary("a\u3000b\xa0c\n") == [(1, "a", "b\xa0c", 0)]

    def test_label_may_hold_any_non_space(self) -> None:
        assert _summary("key=value:x\n") == [(1, "key=value:x", None, 0)]


class TestLineNumbers:
    """linum counts physical lines, blank ones included."""

    def test_blank_lines_advance_linum(self) -> None:
        assert [m.linum for m in parse_default("\n\na\n\n  \nb\n")] == [3, 6]

    def test_crlf_counts_once(self) -> None:
        assert [m.linum for m in parse_default("a\r\nb\r\nc")] == [1, 2, 3]

    def test_lone_cr_and_unicode_breaks(self) -> None:
        source = "a\rb\x85c\u2028d\u2029e\x0cf"
        assert [(m.linum, m.label) for m in parse_default(source)] == [
            (1, "a"),
            (2, "b"),
            (3, "c"),
            (4, "d"),
            (5, "e"),
            (6, "f"),
        ]

    def test_whitespace_only_input(self) -> None:
        assert list(parse_default("   \n\t\n  ")) == []


class TestNesting:
    """Nesting levels from leading whitespace."""

    def test_deep_nesting_and_multi_level_dedent(self) -> None:
        source = "a\n b\n  c\n   d\n e\nf\n"
        assert [m.nesting for m in parse_default(source)] == [0, 1, 2, 3, 1, 0]

    def test_siblings_share_level(self) -> None:
        source = "a\n\tb\n\tc\n\t\td\n\te\n"
        assert [m.nesting for m in parse_default(source)] == [0, 1, 1, 2, 1]

    def test_indent_step_need_not_be_uniform(self) -> None:
        source = "a\n b\n     c\n b2\n"
        assert [m.nesting for m in parse_default(source)] == [0, 1, 2, 1]

    def test_big_jump_is_one_level(self) -> None:
        assert [m.nesting for m in parse_default("a\n        b\n")] == [0, 1]

    def test_blank_lines_do_not_touch_levels(self) -> None:
        source = "a\n  b\n\n      \n  c\n"
        assert [m.nesting for m in parse_default(source)] == [0, 1, 1]

    def test_new_top_level_resets_levels(self) -> None:
        # After "c", the four-space prefix is forgotten; "  d" opens a new level
        source = "a\n    b\nc\n  d\n    e\n"
        assert [m.nesting for m in parse_default(source)] == [0, 1, 0, 1, 2]

    def test_tabs_and_spaces_are_distinct(self) -> None:
        with pytest.raises(TagIndentationError):
            list(parse_default("a\n\tb\n  c\n"))

    def test_blank_first_lines_with_whitespace_allowed(self) -> None:
        assert _summary("   \n\na\n") == [(3, "a", None, 0)]

    def test_indented_line_after_blank_start_raises(self) -> None:
        with pytest.raises(TagIndentationError) as exc_info:
            list(parse_default("\n\n  a\n"))
        assert exc_info.value.linum == 3

    def test_dedent_between_levels_raises(self) -> None:
        with pytest.raises(TagIndentationError):
            list(parse_default("a\n  b\n    c\n   d\n"))

    def test_longer_but_diverging_prefix_raises(self) -> None:
        # " \t" is longer than "\t" but does not extend it
        with pytest.raises(TagIndentationError):
            list(parse_default("a\n\tb\n \tc\n"))

    def test_diverging_prefix_after_deeper_level_raises(self) -> None:
        with pytest.raises(TagIndentationError):
            list(parse_default("a\n  b\n  \tc\n     d\n"))


class TestLaziness:
    """Work happens only as records are pulled."""

    def test_returns_iterator(self) -> None:
        result = parse_default("a\n")
        assert iter(result) is result

    def test_error_surfaces_only_when_reached(self) -> None:
        stream = parse_default("a\nb\n  c\n d\n")
        assert next(stream).label == "a"
        assert next(stream).label == "b"
        assert next(stream).label == "c"
        with pytest.raises(TagIndentationError):
            next(stream)

    def test_iterator_finished_after_error(self) -> None:
        stream = parse_default("  a\nb\n")
        with pytest.raises(TagIndentationError):
            next(stream)
        with pytest.raises(StopIteration):
            next(stream)

    def test_token_stream_pulled_incrementally(self) -> None:
        pulled: list[Token] = []
        source = "a\nb\nc\n"

        def tracking():
            for token in tokenize(source):
                pulled.append(token)
                yield token

        stream = parse(source, tracking())
        first = next(stream)
        assert first.label == "a"
        # Only "a" and its line break have been read
        assert len(pulled) == 2

    def test_early_stop(self) -> None:
        source = "a\n" * 10_000
        stream = parse_default(source)
        assert next(stream).linum == 1
        stream.close()


class TestCustomTokenStreams:
    """The parser reads tags, never characters."""

    def test_synthetic_tags(self) -> None:
        # ";" as whitespace and "|" as a line break
        source = "x;y;z|;w"
        tokens = [
            Token(TokenTag.CONTENT, 0, 1),
            Token(TokenTag.WHITESPACE, 1, 2),
            Token(TokenTag.CONTENT, 2, 3),
            Token(TokenTag.WHITESPACE, 3, 4),
            Token(TokenTag.CONTENT, 4, 5),
            Token(TokenTag.LINE_BREAK, 5, 6),
            Token(TokenTag.WHITESPACE, 6, 7),
            Token(TokenTag.CONTENT, 7, 8),
        ]
        assert [(m.linum, m.label, m.mapping, m.nesting) for m in parse(source, tokens)] == [
            (1, "x", "y;z", 0),
            (2, "w", None, 1),
        ]

    def test_parser_class(self) -> None:
        source = "a\n b\n"
        mappings = list(Parser(source, tokenize(source)).parse())
        assert [m.nesting for m in mappings] == [0, 1]

    def test_accepts_list_of_tokens(self) -> None:
        source = "a b\n"
        tokens = list(tokenize(source))
        assert list(parse(source, tokens)) == list(parse(source, tokens))

    def test_impossible_transition_raises(self) -> None:
        # Two WHITESPACE tokens in a row cannot come from the lexer
        source = "  a"
        tokens = [
            Token(TokenTag.WHITESPACE, 0, 1),
            Token(TokenTag.WHITESPACE, 1, 2),
            Token(TokenTag.CONTENT, 2, 3),
        ]
        with pytest.raises(TokenStreamError, match="WHITESPACE"):
            list(parse(source, tokens))

    def test_adjacent_content_raises(self) -> None:
        source = "ab"
        tokens = [Token(TokenTag.CONTENT, 0, 1), Token(TokenTag.CONTENT, 1, 2)]
        with pytest.raises(TokenStreamError, match="CONTENT"):
            list(parse(source, tokens))
