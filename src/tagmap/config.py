"""Per-context parse settings for tagmap.

Settings live in a ContextVar, so every thread (and every asyncio task)
sees its own value without locking. The parser takes a snapshot when
iteration starts; changing the config mid-parse has no effect on a
generator that is already running.

Usage:
    from tagmap import parse_default
    from tagmap.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(source_file="hosts.tags")):
        mappings = list(parse_default(source))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Settings that affect error reporting and input checking.

    Attributes:
        max_excerpt_length: Longest error excerpt kept before it is cut and
            suffixed with "..."; 0 means never cut
        validate_tokens: Run each incoming token through TokenValidator;
            meant for token streams that do not come from tagmap's lexer
        source_file: Path reported in raised errors

    """

    max_excerpt_length: int = 80
    validate_tokens: bool = False
    source_file: str | None = None

    def __post_init__(self) -> None:
        if self.max_excerpt_length < 0:
            msg = f"max_excerpt_length must be >= 0, got {self.max_excerpt_length}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "ParseConfig":
        """Build a config from a mapping, e.g. a loaded settings file.

        Keys that are not ParseConfig fields are dropped, so a larger
        application config can be passed as is.

        Example:
            >>> ParseConfig.from_dict({"source_file": "a.tags", "theme": "dark"})
            ParseConfig(max_excerpt_length=80, validate_tokens=False, source_file='a.tags')

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})


_DEFAULT_CONFIG = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar("tagmap_parse_config", default=_DEFAULT_CONFIG)


def get_parse_config() -> ParseConfig:
    """Return the config active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Make config active in the current context until changed or reset."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Activate config for the body of a with block.

    The config in effect before the block is restored on exit, also when
    the body raises. A parse generator must be started inside the block
    to pick the config up.
    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
