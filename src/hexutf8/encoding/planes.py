"""Code point plane classification.

Maps any integer to the UTF-8 byte-length class it encodes to. The
classification is total: every int gets exactly one CodePointPlane, with
CodePointPlane.INVALID covering surrogates and out-of-range values.

Python 3.13+. Zero external dependencies.
"""

from hexutf8.constants import (
    ASCII_MAX,
    LATIN_MAX,
    MAX_CODE_POINT,
    MULTILINGUAL_MAX,
    SURROGATE_MAX,
    SURROGATE_MIN,
)
from hexutf8.enums import CodePointPlane

__all__ = ["classify_code_point", "utf8_length"]

_UTF8_LENGTHS: dict[CodePointPlane, int] = {
    CodePointPlane.ASCII: 1,
    CodePointPlane.LATIN: 2,
    CodePointPlane.MULTILINGUAL: 3,
    CodePointPlane.EXTENDED: 4,
}


def classify_code_point(code_point: int) -> CodePointPlane:
    """Return the UTF-8 plane of ``code_point``.

    Range tests are ordered and mutually exclusive:

        ASCII          0x000000..0x00007F
        LATIN          0x000080..0x0007FF
        MULTILINGUAL   0x000800..0x00D7FF, 0x00E000..0x00FFFF
        EXTENDED       0x010000..0x10FFFF
        INVALID        everything else

    Args:
        code_point: Any integer (negative values are allowed and INVALID)

    Returns:
        Exactly one CodePointPlane; never raises for int input.
    """
    if code_point < 0:
        return CodePointPlane.INVALID
    if code_point <= ASCII_MAX:
        return CodePointPlane.ASCII
    if code_point <= LATIN_MAX:
        return CodePointPlane.LATIN
    if code_point <= MULTILINGUAL_MAX:
        # RFC 3629 prohibits encoding U+D800..U+DFFF
        if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
            return CodePointPlane.INVALID
        return CodePointPlane.MULTILINGUAL
    if code_point <= MAX_CODE_POINT:
        return CodePointPlane.EXTENDED
    return CodePointPlane.INVALID


def utf8_length(plane: CodePointPlane) -> int | None:
    """Number of UTF-8 bytes for ``plane``, or None for INVALID."""
    return _UTF8_LENGTHS.get(plane)
