"""Property-based tests for diagnostics/templates.py: ErrorTemplate.

Each factory is tested for:
- Code assignment (correct DiagnosticCode)
- Message content (relevant values appear in message)
- No crashes on arbitrary valid inputs
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from hexutf8.diagnostics.codes import DiagnosticCode
from hexutf8.diagnostics.templates import ErrorTemplate


class TestParseTemplates:
    """Hex parsing templates."""

    @given(value=st.one_of(st.integers(), st.none(), st.binary(), st.floats()))
    def test_invalid_type_names_type(self, value: object) -> None:
        diagnostic = ErrorTemplate.hex_invalid_type(value)
        assert diagnostic.code == DiagnosticCode.HEX_INVALID_TYPE
        assert type(value).__name__ in diagnostic.message

    def test_empty(self) -> None:
        diagnostic = ErrorTemplate.hex_empty()
        assert diagnostic.code == DiagnosticCode.HEX_EMPTY
        assert diagnostic.hint is not None

    @given(value=st.text(alphabet="0123456789abcdef", min_size=1, max_size=9))
    def test_odd_length_mentions_input(self, value: str) -> None:
        diagnostic = ErrorTemplate.hex_odd_length(value)
        assert diagnostic.code == DiagnosticCode.HEX_ODD_LENGTH
        assert value in diagnostic.message
        assert str(len(value)) in diagnostic.message

    def test_too_long(self) -> None:
        diagnostic = ErrorTemplate.hex_too_long("0123456789", 8, 32)
        assert diagnostic.code == DiagnosticCode.HEX_TOO_LONG
        assert "10 digits" in diagnostic.message
        assert "32-bit" in diagnostic.message

    @given(char=st.characters(), position=st.integers(min_value=0, max_value=100))
    def test_invalid_digit_has_span(self, char: str, position: int) -> None:
        diagnostic = ErrorTemplate.hex_invalid_digit(char, position)
        assert diagnostic.code == DiagnosticCode.HEX_INVALID_DIGIT
        assert diagnostic.span is not None
        assert diagnostic.span.start == position
        assert diagnostic.span.end == position + 1
        assert diagnostic.span.line == 1


class TestEncodingTemplates:
    """Code point templates."""

    @given(code_point=st.integers(min_value=0xD800, max_value=0xDFFF))
    def test_surrogate(self, code_point: int) -> None:
        diagnostic = ErrorTemplate.code_point_surrogate(code_point)
        assert diagnostic.code == DiagnosticCode.CODE_POINT_SURROGATE
        assert f"U+{code_point:04X}" in diagnostic.message
        assert diagnostic.help_url is not None
        assert "rfc3629" in diagnostic.help_url

    @given(code_point=st.integers(min_value=0x110000))
    def test_out_of_range_positive(self, code_point: int) -> None:
        diagnostic = ErrorTemplate.code_point_out_of_range(code_point)
        assert diagnostic.code == DiagnosticCode.CODE_POINT_OUT_OF_RANGE
        assert f"0x{code_point:X}" in diagnostic.message

    @given(code_point=st.integers(max_value=-1))
    def test_out_of_range_negative(self, code_point: int) -> None:
        diagnostic = ErrorTemplate.code_point_out_of_range(code_point)
        assert f"-0x{-code_point:X}" in diagnostic.message
