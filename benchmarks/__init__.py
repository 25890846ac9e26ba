"""
Benchmark suite for typedjson parsing performance.

Compares typedjson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different data shapes, plus
the cost of binding documents onto classes.
"""
