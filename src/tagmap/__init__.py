"""
tagmap: parser for indentation-sensitive tag files

Turns line-oriented text into a flat sequence of tag mappings: one record
per non-blank line with its nesting depth (from leading whitespace), its
label (first word) and its mapping (the rest of the line, trimmed).

Quick Start:
    >>> from tagmap import parse_default
    >>> for m in parse_default("server web01\\n  port 8080\\n"):
    ...     print(m.nesting, m.label, m.mapping)
    0 server web01
    1 port 8080

Custom token streams:
    from tagmap import parse, tokenize

    # Any stream satisfying the token contract works in place of tokenize()
    mappings = list(parse(source, tokenize(source)))

Installation:
    pip install tagmap              # zero runtime dependencies
"""

from tagmap.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagmap.errors import ParseError, TagIndentationError, TagmapError, TokenStreamError
from tagmap.lexer import Lexer, tokenize
from tagmap.location import LineSpan
from tagmap.nodes import TagMapping
from tagmap.parser import Parser, parse, parse_default
from tagmap.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from tagmap.serialization import from_dict, from_json, to_dict, to_json
from tagmap.tokens import Token, TokenStream, TokenTag

__version__ = "0.1.0"

__all__ = [
    # Core API
    "parse",
    "parse_default",
    "tokenize",
    "Lexer",
    "Parser",
    # Records
    "LineSpan",
    "TagMapping",
    "Token",
    "TokenStream",
    "TokenTag",
    # Errors
    "ParseError",
    "TagIndentationError",
    "TagmapError",
    "TokenStreamError",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
