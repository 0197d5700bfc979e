"""Whitespace-only lexer for tagmap.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (single-pass scanner)
└── classes.py           # Newline / whitespace character classes

Usage:
    >>> from tagmap.lexer import tokenize
    >>> [t.tag.name for t in tokenize("key value\\n")]
    ['CONTENT', 'WHITESPACE', 'CONTENT', 'LINE_BREAK']

"""

from tagmap.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
