"""UTF-8 encoding of code points.

Public API:
    classify_code_point - Total int -> CodePointPlane classification
    utf8_length - Byte count for a plane (None for INVALID)
    encode_code_point - Returns tuple[bytes | None, tuple[CodePointError, ...]]
    hex_to_utf8 - Returns tuple[bytes | None, tuple[HexUtf8Error, ...]]

Python 3.13+.
"""

from .planes import classify_code_point, utf8_length
from .utf8 import encode_code_point, hex_to_utf8

__all__ = [
    "classify_code_point",
    "encode_code_point",
    "hex_to_utf8",
    "utf8_length",
]
