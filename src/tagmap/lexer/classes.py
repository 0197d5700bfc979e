"""Character classes for the whitespace-only lexer.

Newlines follow Unicode §5.8 (recommended newline functions); whitespace is
the Unicode White_Space property with the newlines removed. VT (U+000B) is
White_Space but not a newline, so it lands in WHITESPACE.

str.isspace() is not used: it also accepts the information
separators U+001C..U+001F, which are not White_Space.
"""

from __future__ import annotations

CR = "\r"
LF = "\n"
CRLF = CR + LF

NEWLINES = frozenset(
    {
        "\n",  # LF
        "\x0c",  # FF
        "\r",  # CR
        "\x85",  # NEL
        "\u2028",  # LS
        "\u2029",  # PS
    }
)

WHITESPACE = frozenset(
    {
        "\t",
        "\x0b",  # VT
        " ",
        "\xa0",  # NO-BREAK SPACE
        "\u1680",  # OGHAM SPACE MARK
        *(chr(cp) for cp in range(0x2000, 0x200B)),  # EN QUAD .. HAIR SPACE
        "\u202f",  # NARROW NO-BREAK SPACE
        "\u205f",  # MEDIUM MATHEMATICAL SPACE
        "\u3000",  # IDEOGRAPHIC SPACE
    }
)

# Full White_Space property; CONTENT runs stop at any of these
WHITE_SPACE = NEWLINES | WHITESPACE
