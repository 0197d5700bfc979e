"""Opt-in parse metrics.

Inside a ``profiled_parse()`` block every parse that runs to completion
adds its numbers to one shared ParseAccumulator. Outside such a block
the parser finds no accumulator and records nothing.

Example:
    from tagmap import parse_default
    from tagmap.profiling import profiled_parse

    with profiled_parse() as metrics:
        for path in paths:
            list(parse_default(path.read_text()))

    print(metrics.summary())
    # {"total_ms": 3.2, "parse_calls": 12, "line_count": 840, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Running totals over completed parse calls.

    Generators that are abandoned or raise are not counted.

    Attributes:
        start_time: perf_counter() value when profiling began
        parse_calls: Completed parse() calls
        source_length: Sum of source lengths, in code points
        line_count: Physical lines seen, blank lines included
        mapping_count: TagMapping records yielded
        max_nesting: Deepest nesting level yielded by any call

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    source_length: int = 0
    line_count: int = 0
    mapping_count: int = 0
    max_nesting: int = 0

    def record_parse(
        self, source_length: int, line_count: int, mapping_count: int, max_nesting: int = 0
    ) -> None:
        self.parse_calls += 1
        self.source_length += source_length
        self.line_count += line_count
        self.mapping_count += mapping_count
        self.max_nesting = max(self.max_nesting, max_nesting)

    @property
    def total_duration_ms(self) -> float:
        """Wall time since the accumulator was created."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "source_length": self.source_length,
            "line_count": self.line_count,
            "mapping_count": self.mapping_count,
            "max_nesting": self.max_nesting,
        }


_active: ContextVar[ParseAccumulator | None] = ContextVar("tagmap_parse_accumulator", default=None)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Accumulator of the enclosing profiled_parse() block, if any."""
    return _active.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect metrics for parses completed inside the with block."""
    acc = ParseAccumulator()
    reset_token = _active.set(acc)
    try:
        yield acc
    finally:
        _active.reset(reset_token)
