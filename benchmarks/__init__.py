"""
Benchmark suite for rdjson parsing and serialization.

Compares rdjson against:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Run with ``pytest benchmarks --benchmark-only``.
"""
