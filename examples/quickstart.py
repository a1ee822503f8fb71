"""Quickstart example for hexutf8.

This example demonstrates converting hex code points to UTF-8 and handling
the (result, errors) return value.
"""

from hexutf8 import CodePointPlane, classify_code_point, hex_to_utf8, parse_hex
from hexutf8.diagnostics import DiagnosticFormatter, OutputFormat
from hexutf8.parsing import UINT64

# Example 1: One character per plane
print("=" * 50)
print("Example 1: Encoding")
print("=" * 50)

for hex_code in ("0048", "00e9", "4e2d", "01F600"):
    result, errors = hex_to_utf8(hex_code)
    if result is not None:
        print(f"U+{hex_code.upper():>6} -> {result.hex(' ')} ({result.decode('utf-8')})")
# Output:
# U+  0048 -> 48 (H)
# U+  00E9 -> c3 a9 (é)
# U+  4E2D -> e4 b8 ad (中)
# U+01F600 -> f0 9f 98 80 (😀)

# Example 2: Plane classification
print("\n" + "=" * 50)
print("Example 2: Classification")
print("=" * 50)

for code_point in (0x41, 0x3A9, 0xD800, 0x1F600, 0x110000):
    plane = classify_code_point(code_point)
    marker = "" if plane is not CodePointPlane.INVALID else "  <- no UTF-8 form"
    print(f"0x{code_point:06X}: {plane}{marker}")

# Example 3: Errors
print("\n" + "=" * 50)
print("Example 3: Diagnostics")
print("=" * 50)

for bad in ("", "1", "ZZ", "D800", "0011000000"):
    result, errors = hex_to_utf8(bad)
    assert result is None
    for error in errors:
        print(error)
        print()

json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
_, errors = hex_to_utf8("00G0")
if errors[0].diagnostic is not None:
    print(json_formatter.format(errors[0].diagnostic))

# Example 4: Wider targets
print("\n" + "=" * 50)
print("Example 4: parse_hex with a 64-bit width")
print("=" * 50)

value, _ = parse_hex("0011000000", UINT64)
print(value)
# Output: 285212672
