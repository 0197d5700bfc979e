"""JSON round-trip for tag mappings.

Converts TagMapping records to/from JSON-compatible dicts. Useful for:
- Caching parsed tag files
- Handing parse results to non-Python consumers
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from tagmap import parse_default
    from tagmap.serialization import to_json, from_json

    mappings = list(parse_default("a\\n  b c\\n"))
    assert from_json(to_json(mappings)) == mappings

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from tagmap.location import LineSpan
from tagmap.nodes import TagMapping


def to_dict(mapping: TagMapping) -> dict[str, Any]:
    """Convert a TagMapping to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        mapping: A parsed TagMapping.

    Returns:
        Dict with ``_type`` and all record fields.

    """
    return {
        "_type": "TagMapping",
        "linum": mapping.linum,
        "line": {"start": mapping.line.start, "end": mapping.line.end},
        "nesting": mapping.nesting,
        "label": mapping.label,
        "mapping": mapping.mapping,
    }


def from_dict(data: dict[str, Any]) -> TagMapping:
    """Reconstruct a TagMapping from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or not TagMapping.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized mapping"
        raise ValueError(msg)
    if type_name != "TagMapping":
        msg = f"Unknown record type: {type_name!r}"
        raise ValueError(msg)

    line = data["line"]
    return TagMapping(
        linum=data["linum"],
        line=LineSpan(line["start"], line["end"]),
        nesting=data["nesting"],
        label=data["label"],
        mapping=data.get("mapping"),
    )


def to_json(mappings: Iterable[TagMapping], *, indent: int | None = None) -> str:
    """Serialize tag mappings to a JSON array.

    Consumes the iterable, so a lazy parse result can be passed directly
    (parse errors propagate).

    Args:
        mappings: Records to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(m) for m in mappings], sort_keys=True, indent=indent)


def from_json(data: str) -> list[TagMapping]:
    """Deserialize tag mappings from a JSON string produced by to_json.

    Raises:
        ValueError: If the JSON is not an array of serialized mappings.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
