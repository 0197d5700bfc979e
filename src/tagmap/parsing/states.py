"""Per-line state variants for the tag parser.

The parser tracks what it has seen on the current line as one of six
variants. Each variant carries only the fields that are meaningful in that
state, so a match on the variant type tells the parser exactly which data
it holds.

LineStart ──ws──▶ LeadingWs ──content──▶ Label ──ws──▶ LabelWs
    │                                      ▲              │
    └──────────────content─────────────────┘           content
                                                          ▼
                              MappingWs ◀──ws── Mapping ◀─┘
                                  └──────content──▶┘

Any line break returns to LineStart, emitting a mapping first when the
state has a label.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineStart:
    """At the start of a line; nothing consumed yet."""


@dataclass(frozen=True, slots=True)
class LeadingWs:
    """Leading whitespace consumed; the line may still turn out blank."""


@dataclass(frozen=True, slots=True)
class Label:
    """First content run consumed; it is the label, nesting is resolved."""

    nesting: int
    label: str


@dataclass(frozen=True, slots=True)
class LabelWs:
    """Whitespace after the label; a mapping would start at mapping_start."""

    nesting: int
    label: str
    mapping_start: int


@dataclass(frozen=True, slots=True)
class Mapping:
    """Second or later content run consumed.

    mapping_end is the end of the last content run, before any whitespace.
    """

    nesting: int
    label: str
    mapping_start: int
    mapping_end: int


@dataclass(frozen=True, slots=True)
class MappingWs:
    """Whitespace after mapping content; trailing unless more content follows."""

    nesting: int
    label: str
    mapping_start: int
    mapping_end: int


LineState = LineStart | LeadingWs | Label | LabelWs | Mapping | MappingWs

# States in which the line has produced a label and will emit a mapping
LabeledState = Label | LabelWs | Mapping | MappingWs
