"""UTF-8 encoding of code points given as integers or hex strings.

- encode_code_point() returns tuple[bytes | None, tuple[CodePointError, ...]]
- hex_to_utf8() returns tuple[bytes | None, tuple[HexUtf8Error, ...]]
- Errors returned in tuple, never raised for bad input

Bit layout, with the code point written as 00000000 000uvvvv wwwwxxxx yyyyzzzz
(each letter a 4-bit group, u a single bit):

    Plane         | Byte 1   | Byte 2   | Byte 3   | Byte 4
    ASCII         | 0yyyzzzz |          |          |
    LATIN         | 110xxxyy | 10yyzzzz |          |
    MULTILINGUAL  | 1110wwww | 10xxxxyy | 10yyzzzz |
    EXTENDED      | 11110uvv | 10vvwwww | 10xxxxyy | 10yyzzzz

All groups are taken from the integer by shifting and masking, so the
length of the input hex string does not matter ("e9" and "00e9" encode
the same way).

Thread-safe. No global state.

Python 3.13+.
"""

import logging

from hexutf8.constants import (
    SURROGATE_MAX,
    SURROGATE_MIN,
    UTF8_CONT_MASK,
    UTF8_CONT_PREFIX,
    UTF8_EXTENDED_PREFIX,
    UTF8_LATIN_PREFIX,
    UTF8_MULTILINGUAL_PREFIX,
)
from hexutf8.diagnostics import CodePointError, HexUtf8Error
from hexutf8.diagnostics.templates import ErrorTemplate
from hexutf8.enums import CodePointPlane
from hexutf8.parsing.hex import parse_hex
from hexutf8.parsing.width import INT32

from .planes import classify_code_point, utf8_length

__all__ = ["encode_code_point", "hex_to_utf8"]

logger = logging.getLogger(__name__)

# Lead byte prefix and payload mask per multi-byte plane.
_LEAD_BYTES: dict[CodePointPlane, tuple[int, int]] = {
    CodePointPlane.LATIN: (UTF8_LATIN_PREFIX, 0x1F),
    CodePointPlane.MULTILINGUAL: (UTF8_MULTILINGUAL_PREFIX, 0x0F),
    CodePointPlane.EXTENDED: (UTF8_EXTENDED_PREFIX, 0x07),
}


def _pack(code_point: int, plane: CodePointPlane) -> bytes:
    if plane is CodePointPlane.ASCII:
        return bytes((code_point,))

    length = utf8_length(plane)
    assert length is not None  # Type narrowing: INVALID handled by caller
    prefix, mask = _LEAD_BYTES[plane]

    # Six payload bits per continuation byte, lowest bits last.
    continuation_count = length - 1
    lead = prefix | ((code_point >> (6 * continuation_count)) & mask)
    tail = (
        UTF8_CONT_PREFIX | ((code_point >> (6 * shift)) & UTF8_CONT_MASK)
        for shift in range(continuation_count - 1, -1, -1)
    )
    return bytes((lead, *tail))


def encode_code_point(code_point: int) -> tuple[bytes | None, tuple[CodePointError, ...]]:
    """Encode an integer code point as UTF-8.

    Args:
        code_point: Candidate code point (any int)

    Returns:
        Tuple of (result, errors):
        - result: 1 to 4 UTF-8 bytes, or None if the value has no encoding
        - errors: Tuple of CodePointError (empty tuple on success)

    Examples:
        >>> encode_code_point(0x4E2D)
        (b'\\xe4\\xb8\\xad', ())

        >>> result, errors = encode_code_point(0xD800)
        >>> result is None, errors[0].diagnostic.code.name
        (True, 'CODE_POINT_SURROGATE')
    """
    plane = classify_code_point(code_point)
    if plane is not CodePointPlane.INVALID:
        return (_pack(code_point, plane), ())

    if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        diagnostic = ErrorTemplate.code_point_surrogate(code_point)
    else:
        diagnostic = ErrorTemplate.code_point_out_of_range(code_point)
    logger.debug("Rejected code point %d: %s", code_point, diagnostic)
    return (None, (CodePointError(diagnostic, code_point=code_point, plane=plane),))


def hex_to_utf8(value: str) -> tuple[bytes | None, tuple[HexUtf8Error, ...]]:
    """Convert a hex code point string such as "0048" to UTF-8 bytes.

    The string is parsed as a signed 32-bit integer, then classified and
    encoded. Inputs are conventionally 2, 4 or 6 digits; any even length up
    to 8 is accepted.

    Args:
        value: Hex digits, case-insensitive

    Returns:
        Tuple of (result, errors):
        - result: UTF-8 bytes, or None on any failure
        - errors: HexParseError for malformed input, CodePointError for
          values without a UTF-8 encoding (empty tuple on success)

    Examples:
        >>> hex_to_utf8("0048")
        (b'H', ())

        >>> hex_to_utf8("01F600")
        (b'\\xf0\\x9f\\x98\\x80', ())

        >>> result, errors = hex_to_utf8("ZZ")
        >>> result is None
        True
    """
    code_point, parse_errors = parse_hex(value, INT32)
    if code_point is None:
        return (None, parse_errors)
    return encode_code_point(code_point)
