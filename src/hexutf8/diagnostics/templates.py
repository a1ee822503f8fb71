"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from hexutf8.constants import MAX_CODE_POINT, SURROGATE_MAX, SURROGATE_MIN

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    _RFC_3629 = "https://www.rfc-editor.org/rfc/rfc3629"

    @staticmethod
    def hex_invalid_type(value: object) -> Diagnostic:
        """Input is not a string.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for HEX_INVALID_TYPE
        """
        msg = f"Hex input must be str, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.HEX_INVALID_TYPE,
            message=msg,
            hint="Pass the code point as a string such as '0048'",
        )

    @staticmethod
    def hex_empty() -> Diagnostic:
        """Input string is empty.

        Returns:
            Diagnostic for HEX_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.HEX_EMPTY,
            message="Hex input is empty",
            hint="Provide at least two hex digits",
        )

    @staticmethod
    def hex_odd_length(value: str) -> Diagnostic:
        """Input has an odd number of characters.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for HEX_ODD_LENGTH
        """
        msg = f"Hex input '{value}' has odd length {len(value)}"
        return Diagnostic(
            code=DiagnosticCode.HEX_ODD_LENGTH,
            message=msg,
            hint=f"Each byte takes two digits; try '0{value}'",
        )

    @staticmethod
    def hex_too_long(value: str, max_digits: int, width_bits: int) -> Diagnostic:
        """Input has more digits than the target integer can hold.

        Args:
            value: The rejected input
            max_digits: Maximum digit count for the target width
            width_bits: Bit width of the target integer

        Returns:
            Diagnostic for HEX_TOO_LONG
        """
        msg = (
            f"Hex input has {len(value)} digits, "
            f"a {width_bits}-bit value holds at most {max_digits}"
        )
        return Diagnostic(
            code=DiagnosticCode.HEX_TOO_LONG,
            message=msg,
            hint="Remove leading zeros or use a wider IntegerWidth",
        )

    @staticmethod
    def hex_invalid_digit(char: str, position: int) -> Diagnostic:
        """Input contains a character outside [0-9a-fA-F].

        Args:
            char: The offending character
            position: Zero-based offset of the character

        Returns:
            Diagnostic for HEX_INVALID_DIGIT
        """
        msg = f"Invalid hex digit {char!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.HEX_INVALID_DIGIT,
            message=msg,
            span=SourceSpan.at(position),
            hint="Use only the characters 0-9, a-f and A-F",
        )

    @staticmethod
    def code_point_surrogate(code_point: int) -> Diagnostic:
        """Value lies in the UTF-16 surrogate block.

        Args:
            code_point: The rejected value

        Returns:
            Diagnostic for CODE_POINT_SURROGATE
        """
        msg = f"U+{code_point:04X} is a UTF-16 surrogate and cannot be encoded as UTF-8"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_SURROGATE,
            message=msg,
            hint=f"Values U+{SURROGATE_MIN:04X}..U+{SURROGATE_MAX:04X} are reserved",
            help_url=f"{ErrorTemplate._RFC_3629}#section-3",
        )

    @staticmethod
    def code_point_out_of_range(code_point: int) -> Diagnostic:
        """Value is negative or above U+10FFFF.

        Args:
            code_point: The rejected value

        Returns:
            Diagnostic for CODE_POINT_OUT_OF_RANGE
        """
        shown = f"-0x{-code_point:X}" if code_point < 0 else f"0x{code_point:X}"
        msg = f"Value {shown} is outside the Unicode range"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUT_OF_RANGE,
            message=msg,
            hint=f"Code points must be between U+0000 and U+{MAX_CODE_POINT:X}",
            help_url=f"{ErrorTemplate._RFC_3629}#section-3",
        )
