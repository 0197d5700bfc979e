"""Parsing building blocks for tagmap.

Provides:
- states: per-line state variants
- indent: WhitespaceStack for nesting resolution
- validation: TokenValidator for untrusted token streams
"""

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

__all__ = [
    "Label",
    "LabelWs",
    "LabeledState",
    "LeadingWs",
    "LineStart",
    "LineState",
    "Mapping",
    "MappingWs",
    "TokenValidator",
    "WhitespaceStack",
]
