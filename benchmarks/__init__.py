"""
Benchmark suite for rdjson JSON parsing performance.

Compares rdjson against standard JSON libraries including:
- Python standard library json
- orjson
- ujson

Measures parsing speed and memory usage across different data types.
"""
