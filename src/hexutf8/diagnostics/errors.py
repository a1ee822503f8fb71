"""hexutf8 exception hierarchy with structured diagnostics.

Errors are returned from conversion functions inside a tuple, never raised
for bad input. They are still Exception subclasses so callers may raise them
if their own control flow prefers exceptions.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from hexutf8.enums import CodePointPlane

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "CodePointError",
    "HexParseError",
    "HexUtf8Error",
]


class HexUtf8Error(Exception):
    """Base exception for all hexutf8 errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category of the concrete subclass
    """

    category: ClassVar[ErrorCategory]

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize HexUtf8Error.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class HexParseError(HexUtf8Error):
    """Hex string could not be parsed into an integer.

    Attributes:
        input_value: The value that failed to parse (repr for non-strings)
        width_bits: Bit width of the requested target integer

    Example:
        >>> result, errors = parse_hex("ZZ")
        >>> errors[0].diagnostic.code
        <DiagnosticCode.HEX_INVALID_DIGIT: 1004>
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        width_bits: int = 0,
    ) -> None:
        """Initialize HexParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The value that failed to parse
            width_bits: Bit width of the target integer
        """
        super().__init__(message)
        self.input_value = input_value
        self.width_bits = width_bits


class CodePointError(HexUtf8Error):
    """Integer has no UTF-8 representation.

    Raised (returned) for surrogates, negative values and values above
    U+10FFFF.

    Attributes:
        code_point: The rejected integer
        plane: Always CodePointPlane.INVALID; kept for symmetry with results
    """

    category = ErrorCategory.ENCODING

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        code_point: int,
        plane: CodePointPlane = CodePointPlane.INVALID,
    ) -> None:
        super().__init__(message)
        self.code_point = code_point
        self.plane = plane
