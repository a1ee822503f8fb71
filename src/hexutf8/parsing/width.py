"""Target integer width for hex parsing.

Provides a single frozen dataclass describing the integer type a hex string
is parsed into. The width bounds the accepted digit count and, for signed
widths, selects two's-complement reinterpretation of the top bit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexutf8.constants import BITS_PER_HEX_DIGIT, DEFAULT_WIDTH_BITS

__all__ = [
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "IntegerWidth",
]


@dataclass(frozen=True, slots=True)
class IntegerWidth:
    """Immutable description of a fixed-width integer type.

    Attributes:
        bits: Total bit count; a positive multiple of 8 (default: 32).
        signed: Reinterpret values with the top bit set as negative
            two's-complement numbers (default: False).

    Example:
        >>> IntegerWidth().max_digits
        8
        >>> IntegerWidth(16, signed=True).min_value
        -32768
    """

    bits: int = DEFAULT_WIDTH_BITS
    signed: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If bits is not an int.
            ValueError: If bits is not a positive multiple of 8.
        """
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            msg = f"bits must be int, got {type(self.bits).__name__}"
            raise TypeError(msg)
        if self.bits <= 0 or self.bits % 8:
            msg = f"bits must be a positive multiple of 8, got {self.bits}"
            raise ValueError(msg)

    @property
    def byte_width(self) -> int:
        """Number of bytes in the integer type."""
        return self.bits // 8

    @property
    def max_digits(self) -> int:
        """Largest hex digit count that fits the type (two per byte)."""
        return self.bits // BITS_PER_HEX_DIGIT

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def reinterpret(self, raw: int) -> int:
        """Map an unsigned bit pattern of this width onto the type's range.

        Args:
            raw: Value in ``[0, 2**bits)``

        Returns:
            ``raw`` for unsigned widths; the two's-complement value otherwise.
        """
        if self.signed and raw >> (self.bits - 1):
            return raw - (1 << self.bits)
        return raw


UINT8 = IntegerWidth(8)
UINT16 = IntegerWidth(16)
UINT32 = IntegerWidth(32)
UINT64 = IntegerWidth(64)
INT8 = IntegerWidth(8, signed=True)
INT16 = IntegerWidth(16, signed=True)
INT32 = IntegerWidth(32, signed=True)
INT64 = IntegerWidth(64, signed=True)
