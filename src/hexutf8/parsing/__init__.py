"""Hex string parsing: hexadecimal text to fixed-width integers.

- Functions NEVER raise for bad input - errors are returned in tuple
- None result on failure, never a default of 0

Public API:
    Parsing Functions:
        hex_digit_value - Returns int | None for one character
        parse_hex - Returns tuple[int | None, tuple[HexParseError, ...]]

    Width Configuration:
        IntegerWidth - Frozen (bits, signed) target type description
        UINT8, UINT16, UINT32, UINT64, INT8, INT16, INT32, INT64 - Presets

    Type Guards:
        is_valid_code_point - TypeIs guard for encodable int (not None)
        is_utf8_sequence - TypeIs guard for encoded bytes (not None)

Example:
    >>> from hexutf8.parsing import parse_hex, is_valid_code_point
    >>> result, errors = parse_hex("4e2d")
    >>> if is_valid_code_point(result):
    ...     print(chr(result))
    中

Python 3.13+.
"""

from .guards import is_utf8_sequence, is_valid_code_point
from .hex import hex_digit_value, parse_hex
from .width import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerWidth,
)

__all__ = [
    # Width presets
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Width configuration
    "IntegerWidth",
    # Parsing functions
    "hex_digit_value",
    # Type guards
    "is_utf8_sequence",
    "is_valid_code_point",
    "parse_hex",
]
