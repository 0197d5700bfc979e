"""Loggers under the "tagmap" namespace.

tagmap only logs at DEBUG, right before raising a parse or token stream
error. Nothing is configured here; handlers and levels belong to the
application. Enable with:

    logging.getLogger("tagmap").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "tagmap"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under "tagmap.".

    Names already inside the namespace are kept; "tagmap_other" is not
    inside it and becomes "tagmap.tagmap_other".
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
