"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for HexUtf8Error.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: Malformed hex input (empty, odd length, too long, bad digit)
        ENCODING: Parsed value has no UTF-8 representation
    """

    PARSE = "parse"
    ENCODING = "encoding"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Hex parsing errors
        2000-2999: Code point encoding errors
    """

    # Hex parsing errors (1000-1999)
    HEX_INVALID_TYPE = 1000
    HEX_EMPTY = 1001
    HEX_ODD_LENGTH = 1002
    HEX_TOO_LONG = 1003
    HEX_INVALID_DIGIT = 1004

    # Code point encoding errors (2000-2999)
    CODE_POINT_SURROGATE = 2001
    CODE_POINT_OUT_OF_RANGE = 2002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of an offending character inside the hex input.

    Hex input is always a single line, but line and column are kept so the
    formatter output matches other compiler-style tools.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line
                or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, offset: int) -> "SourceSpan":
        """Span covering the single character at ``offset`` on line 1."""
        return cls(start=offset, end=offset + 1, line=1, column=offset + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending character location (None when not tied to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[HEX_INVALID_DIGIT]: Invalid hex digit 'Z' at position 0
              --> line 1, column 1
              = help: Use only the characters 0-9, a-f and A-F

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
