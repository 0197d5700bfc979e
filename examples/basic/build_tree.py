"""Rebuild a nested dict from the flat mapping sequence."""

import json
import sys

from tagmap import TagIndentationError, parse_default

SOURCE = """\
server web01
  port 8080
  health
    path /status
client
  retry 3
"""


def build(source: str) -> list[dict]:
    roots: list[dict] = []
    open_nodes: list[dict] = []
    for m in parse_default(source):
        node = {"label": m.label, "value": m.mapping, "children": []}
        del open_nodes[m.nesting :]
        siblings = open_nodes[-1]["children"] if open_nodes else roots
        siblings.append(node)
        open_nodes.append(node)
    return roots


try:
    print(json.dumps(build(SOURCE), indent=2))
    build("a\n  b\n c\n")
except TagIndentationError as err:
    print(f"error: {err}", file=sys.stderr)
