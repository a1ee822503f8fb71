"""Hexadecimal string parsing.

- parse_hex() returns tuple[int | None, tuple[HexParseError, ...]]
- Parse errors returned in tuple, never raised
- None on failure, so a failed parse is never confused with a parsed zero

Only the ASCII alphabet [0-9a-fA-F] is accepted. str.isdigit() and int(x, 16)
are not used because both accept non-ASCII digits and other forms ("0x",
"_", whitespace, signs) this parser must reject.

Thread-safe. No global state.

Python 3.13+.
"""

import logging

from hexutf8.constants import BITS_PER_HEX_DIGIT
from hexutf8.diagnostics import Diagnostic, HexParseError
from hexutf8.diagnostics.templates import ErrorTemplate

from .width import UINT32, IntegerWidth

__all__ = ["hex_digit_value", "parse_hex"]

logger = logging.getLogger(__name__)


def hex_digit_value(char: str) -> int | None:
    """Convert one hex digit to its 4-bit value.

    Args:
        char: A single character

    Returns:
        0-15 for a valid digit (case-insensitive), None otherwise.
        Strings that are not exactly one character long return None.

    Examples:
        >>> hex_digit_value("A")
        10
        >>> hex_digit_value("g") is None
        True
    """
    if len(char) != 1:
        return None
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return None


def _reject(
    diagnostic: Diagnostic,
    value: object,
    width: IntegerWidth,
) -> tuple[None, tuple[HexParseError, ...]]:
    error = HexParseError(
        diagnostic,
        input_value=value if isinstance(value, str) else repr(value),
        width_bits=width.bits,
    )
    logger.debug("Rejected hex input %r: %s", value, error.diagnostic)
    return (None, (error,))


def parse_hex(
    value: str,
    width: IntegerWidth = UINT32,
) -> tuple[int | None, tuple[HexParseError, ...]]:
    """Parse a hex string into an integer of the given width.

    Each byte is written as exactly two digits, so the input must have even
    length and at most ``width.max_digits`` characters.

    Args:
        value: Hex digits, most significant first (e.g. "0048")
        width: Target integer type (default: unsigned 32-bit)

    Returns:
        Tuple of (result, errors):
        - result: Parsed integer, or None if parsing failed
        - errors: Tuple of HexParseError (empty tuple on success)

    Raises:
        TypeError: If width is not an IntegerWidth (programming error)

    Examples:
        >>> parse_hex("0048")
        (72, ())

        >>> parse_hex("FFFF", INT16)
        (-1, ())

        >>> result, errors = parse_hex("1")
        >>> result is None, errors[0].diagnostic.code.name
        (True, 'HEX_ODD_LENGTH')
    """
    if not isinstance(width, IntegerWidth):
        msg = f"width must be IntegerWidth, got {type(width).__name__}"
        raise TypeError(msg)

    if not isinstance(value, str):
        return _reject(ErrorTemplate.hex_invalid_type(value), value, width)
    if not value:
        return _reject(ErrorTemplate.hex_empty(), value, width)
    if len(value) % 2:
        return _reject(ErrorTemplate.hex_odd_length(value), value, width)
    if len(value) > width.max_digits:
        return _reject(
            ErrorTemplate.hex_too_long(value, width.max_digits, width.bits), value, width
        )

    result = 0
    for position, char in enumerate(value):
        digit = hex_digit_value(char)
        if digit is None:
            return _reject(ErrorTemplate.hex_invalid_digit(char, position), value, width)
        result = (result << BITS_PER_HEX_DIGIT) | digit

    return (width.reinterpret(result), ())
