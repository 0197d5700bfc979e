"""Benchmark tokenizing and parsing of tag files.

Run with:
    pytest benchmarks/benchmark_parse.py -v --benchmark-only
"""

try:
    import pytest

    from tagmap import parse, parse_default, tokenize

    @pytest.mark.benchmark(group="tagmap")
    def test_benchmark_tokenize(benchmark, large_document):
        """Lexer alone."""
        benchmark(lambda: sum(1 for _ in tokenize(large_document)))

    @pytest.mark.benchmark(group="tagmap")
    def test_benchmark_parse_default(benchmark, large_document):
        """Lexer and parser together."""
        benchmark(lambda: list(parse_default(large_document)))

    @pytest.mark.benchmark(group="tagmap")
    def test_benchmark_parse_pretokenized(benchmark, large_document):
        """Parser alone, over a materialized token list."""
        tokens = list(tokenize(large_document))
        benchmark(lambda: list(parse(large_document, tokens)))

    @pytest.mark.benchmark(group="tagmap-unicode")
    def test_benchmark_unicode(benchmark, unicode_document):
        benchmark(lambda: list(parse_default(unicode_document)))

except ImportError:
    pass  # pytest not available
