"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large tag file (~200KB)."""
    sections = []
    for i in range(1000):
        sections.append(f"""server web{i:04d}
  address 10.0.{i % 256}.{i // 256}
  port {8000 + i}
  tags frontend   public\tcache
  health
    path /status
    interval 30s

""")
    return "".join(sections)


@pytest.fixture
def unicode_document() -> str:
    """Tag file using non-ASCII whitespace and line breaks."""
    line = "ключ\u3000значение\xa0далее   вложенный ✓\u2028"
    return line * 2000
