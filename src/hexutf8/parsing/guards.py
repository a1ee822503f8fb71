"""Type guard functions for conversion result type narrowing.

All conversion functions return tuple[result, tuple[error, ...]].
Type guards check the result component to narrow types for mypy.

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_utf8_sequence(result)` to just `if is_utf8_sequence(result)`.

Example:
    >>> from hexutf8 import hex_to_utf8
    >>> from hexutf8.parsing.guards import is_utf8_sequence
    >>> result, errors = hex_to_utf8("00e9")
    >>> if is_utf8_sequence(result):
    ...     # mypy knows result is bytes
    ...     text = result.decode("utf-8")
"""

from typing import TypeIs

from hexutf8.constants import MAX_CODE_POINT, SURROGATE_MAX, SURROGATE_MIN

__all__ = [
    "is_utf8_sequence",
    "is_valid_code_point",
]


def is_valid_code_point(value: int | None) -> TypeIs[int]:
    """Type guard: Check if a parsed value is an encodable code point.

    Safe to call directly on parse_hex() result without checking errors first.
    Returns False for None, negative values, surrogates and values above
    U+10FFFF.

    Args:
        value: Integer from parse_hex() result tuple (may be None on error)

    Returns:
        True if value has a UTF-8 representation, False otherwise

    Example:
        >>> result, errors = parse_hex("D800")
        >>> is_valid_code_point(result)
        False
    """
    return (
        value is not None
        and 0 <= value <= MAX_CODE_POINT
        and not SURROGATE_MIN <= value <= SURROGATE_MAX
    )


def is_utf8_sequence(value: bytes | None) -> TypeIs[bytes]:
    """Type guard: Check if an encoder result holds one encoded character.

    Args:
        value: Bytes from hex_to_utf8() or encode_code_point() (may be None)

    Returns:
        True if value is 1 to 4 bytes long, False otherwise
    """
    return value is not None and 1 <= len(value) <= 4
