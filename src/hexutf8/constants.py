"""Shared constants for hexutf8.

Centralized range bounds and bit patterns used by the parsing and
encoding packages. Placing them here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Code point ranges: Unicode scalar value bounds and UTF-8 plane limits
- UTF-8 prefixes: Lead and continuation byte markers
- Parsing defaults: Default target integer width

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code point ranges
    "MAX_CODE_POINT",
    "SURROGATE_MIN",
    "SURROGATE_MAX",
    "ASCII_MAX",
    "LATIN_MAX",
    "MULTILINGUAL_MAX",
    # UTF-8 prefixes
    "UTF8_CONT_PREFIX",
    "UTF8_CONT_MASK",
    "UTF8_LATIN_PREFIX",
    "UTF8_MULTILINGUAL_PREFIX",
    "UTF8_EXTENDED_PREFIX",
    # Parsing defaults
    "BITS_PER_HEX_DIGIT",
    "DEFAULT_WIDTH_BITS",
]

# ============================================================================
# CODE POINT RANGES
# ============================================================================
#
# UTF-8 byte length is a function of the code point's magnitude:
#
#   First code point | Last code point | Bytes
#   U+0000           | U+007F          | 1
#   U+0080           | U+07FF          | 2
#   U+0800           | U+FFFF          | 3  (minus U+D800..U+DFFF)
#   U+010000         | U+10FFFF        | 4
#
# The surrogate block is reserved for UTF-16 pairs. RFC 3629 prohibits
# encoding those values in UTF-8.
#
# ============================================================================

# Largest Unicode code point.
MAX_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate block (inclusive on both ends).
SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF

# Inclusive upper bounds for the 1, 2 and 3 byte planes.
ASCII_MAX: int = 0x7F
LATIN_MAX: int = 0x7FF
MULTILINGUAL_MAX: int = 0xFFFF

# ============================================================================
# UTF-8 PREFIXES
# ============================================================================

# Continuation byte: 10xxxxxx
UTF8_CONT_PREFIX: int = 0x80
UTF8_CONT_MASK: int = 0x3F

# Lead bytes for the 2, 3 and 4 byte forms.
UTF8_LATIN_PREFIX: int = 0xC0  # 110xxxxx
UTF8_MULTILINGUAL_PREFIX: int = 0xE0  # 1110xxxx
UTF8_EXTENDED_PREFIX: int = 0xF0  # 11110xxx

# ============================================================================
# PARSING DEFAULTS
# ============================================================================

BITS_PER_HEX_DIGIT: int = 4

# Target width used when no IntegerWidth is given. Two hex digits per byte,
# so 32 bits accepts at most 8 digits.
DEFAULT_WIDTH_BITS: int = 32
