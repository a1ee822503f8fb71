"""hexutf8 - Hex code point strings to UTF-8 bytes.

Parses a hexadecimal code point such as "0048" or "01F600" and encodes it as
the corresponding 1 to 4 byte UTF-8 sequence. Pure, stateless and
thread-safe; failures are returned as (None, errors), never raised.

Public API:
    hex_to_utf8 - Hex string to UTF-8 bytes
    encode_code_point - Integer code point to UTF-8 bytes
    classify_code_point - Integer to CodePointPlane
    parse_hex - Hex string to fixed-width integer
    hex_digit_value - One hex character to 0-15
    CodePointPlane - UTF-8 byte-length class enum
    IntegerWidth - Target integer type for parse_hex

Exceptions:
    HexUtf8Error - Base exception class
    HexParseError - Malformed hex input
    CodePointError - Value has no UTF-8 encoding

Submodules:
    hexutf8.parsing - Hex parsing, width presets and type guards
    hexutf8.encoding - Plane classification and UTF-8 packing
    hexutf8.diagnostics - Error codes, templates and formatter
    hexutf8.constants - Code point bounds and UTF-8 prefixes
"""

from .diagnostics import CodePointError, HexParseError, HexUtf8Error
from .encoding import classify_code_point, encode_code_point, hex_to_utf8
from .enums import CodePointPlane
from .parsing import IntegerWidth, hex_digit_value, parse_hex

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("hexutf8")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

# Encoding scheme conformance
__utf8_rfc__ = "RFC 3629"

__all__ = [
    "CodePointError",
    "CodePointPlane",
    "HexParseError",
    "HexUtf8Error",
    "IntegerWidth",
    "__utf8_rfc__",
    "__version__",
    "classify_code_point",
    "encode_code_point",
    "hex_digit_value",
    "hex_to_utf8",
    "parse_hex",
]
