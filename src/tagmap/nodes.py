"""Output records for tagmap.

The parser emits one TagMapping per logical (non-blank) line. Records are
flat; the hierarchy is carried by ``nesting`` alone, so a consumer can build
whatever tree shape it needs from the sequence.

Thread Safety:
TagMapping is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

from tagmap.location import LineSpan


@dataclass(frozen=True, slots=True)
class TagMapping:
    """One logical line of a tag file.

    Attributes:
        linum: 1-based physical line number (blank lines are counted)
        line: Span of the whole line, excluding its line break
        nesting: Indentation depth, 0 for top-level lines
        label: Text of the first content run on the line
        mapping: Text from the second content run to the last one,
            or None when the line holds a single content run

    """

    linum: int
    line: LineSpan
    nesting: int
    label: str
    mapping: str | None = None

    @property
    def has_mapping(self) -> bool:
        return self.mapping is not None
