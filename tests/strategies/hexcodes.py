"""Strategies for hex strings and code points.

Event-emitting strategies report which plane or defect they produced so
Hypothesis statistics show coverage across the input space.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from hexutf8 import CodePointPlane

HEX_ALPHABET = "0123456789abcdefABCDEF"

_PLANE_RANGES: dict[CodePointPlane, tuple[tuple[int, int], ...]] = {
    CodePointPlane.ASCII: ((0x00, 0x7F),),
    CodePointPlane.LATIN: ((0x80, 0x7FF),),
    CodePointPlane.MULTILINGUAL: ((0x800, 0xD7FF), (0xE000, 0xFFFF)),
    CodePointPlane.EXTENDED: ((0x10000, 0x10FFFF),),
}

hex_digits = st.sampled_from(HEX_ALPHABET)

non_hex_characters = st.characters().filter(lambda c: c not in HEX_ALPHABET)

surrogate_code_points = st.integers(min_value=0xD800, max_value=0xDFFF)


def code_points_in_plane(plane: CodePointPlane) -> st.SearchStrategy[int]:
    """Integers classified as ``plane`` (not INVALID)."""
    return st.one_of(
        *(st.integers(min_value=low, max_value=high) for low, high in _PLANE_RANGES[plane])
    )


@st.composite
def valid_code_points(draw: st.DrawFn) -> int:
    """Any encodable code point, spread evenly across the four planes."""
    plane = draw(st.sampled_from(list(_PLANE_RANGES)))
    event(f"plane={plane}")
    return draw(code_points_in_plane(plane))


@st.composite
def hex_strings_for(draw: st.DrawFn, value: int, min_digits: int = 2) -> str:
    """Even-length hex spelling of a non-negative ``value`` with random case."""
    digits = max(min_digits, len(f"{value:x}"))
    digits += digits % 2
    text = f"{value:0{digits}x}"
    upper = draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
    return "".join(c.upper() if u else c for c, u in zip(text, upper, strict=True))


hex_strings = st.integers(min_value=1, max_value=4).flatmap(
    lambda n: st.text(alphabet=HEX_ALPHABET, min_size=2 * n, max_size=2 * n)
)


@st.composite
def malformed_hex_strings(draw: st.DrawFn) -> str:
    """Strings parse_hex must reject for a 32-bit width."""
    kind = draw(st.sampled_from(["empty", "odd", "too_long", "bad_digit"]))
    event(f"malformed={kind}")
    match kind:
        case "empty":
            return ""
        case "odd":
            n = draw(st.integers(min_value=0, max_value=4))
            return draw(st.text(alphabet=HEX_ALPHABET, min_size=2 * n + 1, max_size=2 * n + 1))
        case "too_long":
            n = draw(st.integers(min_value=5, max_value=16))
            return draw(st.text(alphabet=HEX_ALPHABET, min_size=2 * n, max_size=2 * n))
        case _:
            n = draw(st.integers(min_value=1, max_value=4))
            text = draw(st.text(alphabet=HEX_ALPHABET, min_size=2 * n - 1, max_size=2 * n - 1))
            position = draw(st.integers(min_value=0, max_value=len(text)))
            bad = draw(non_hex_characters)
            return text[:position] + bad + text[position:]
