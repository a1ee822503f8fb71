"""Fuzz testing infrastructure for hexutf8.

This package contains intensive property tests excluded from normal runs:
- test_encoding_utf8_property: exhaustive and differential checks of the encoder

Run them via: pytest -m fuzz

Python 3.13+.
"""
