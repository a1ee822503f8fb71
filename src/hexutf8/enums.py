"""Enumerations for hexutf8 type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CodePointPlane(StrEnum):
    """UTF-8 byte-length class of a code point.

    Not to be confused with the official Unicode planes: a "plane" here is
    one of the four UTF-8 encoding forms, plus INVALID for values that have
    no UTF-8 representation.

    StrEnum provides automatic string conversion: str(CodePointPlane.ASCII) == "ascii"
    """

    ASCII = "ascii"
    """U+0000..U+007F, one byte: 0xxxxxxx"""

    LATIN = "latin"
    """U+0080..U+07FF, two bytes: 110xxxxx 10xxxxxx"""

    MULTILINGUAL = "multilingual"
    """U+0800..U+FFFF minus surrogates, three bytes: 1110xxxx 10xxxxxx 10xxxxxx"""

    EXTENDED = "extended"
    """U+010000..U+10FFFF, four bytes: 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx"""

    INVALID = "invalid"
    """Surrogates, negative values and anything above U+10FFFF"""


__all__ = [
    "CodePointPlane",
]
