"""Hypothesis strategies for hexutf8 property-based testing.

Usage:
    from tests.strategies import valid_code_points, hex_strings_for
    from tests.strategies.hexcodes import malformed_hex_strings
"""

from .hexcodes import (
    code_points_in_plane,
    hex_digits,
    hex_strings,
    hex_strings_for,
    malformed_hex_strings,
    non_hex_characters,
    surrogate_code_points,
    valid_code_points,
)

__all__ = [
    "code_points_in_plane",
    "hex_digits",
    "hex_strings",
    "hex_strings_for",
    "malformed_hex_strings",
    "non_hex_characters",
    "surrogate_code_points",
    "valid_code_points",
]
