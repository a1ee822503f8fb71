"""Performance benchmarks for hexutf8.

Benchmarks use pytest-benchmark to measure the parse and encode paths.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
