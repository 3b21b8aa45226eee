"""Hexadecimal rendering of code points and code units.

Two flavors are deliberately kept apart:
    - Shortest form (to_hex, to_hex_upper): no padding, as used in
      diagnostics and ScalarValue.hex.
    - Escape form (unicode_escape): always four upper-case digits, as
      required inside a \\u escape sequence.

Thread Safety:
    Pure functions, safe for concurrent use.
"""

from __future__ import annotations

from unicodescalar.constants import INT32_MASK, INT32_MIN

__all__ = [
    "hex_literal",
    "to_hex",
    "to_hex_upper",
    "unicode_escape",
]


def to_hex(value: int) -> str:
    """Shortest lower-case hex digits for value.

    Negative values within the signed 32-bit range render in two's
    complement; anything below it keeps its sign.

    Example:
        >>> to_hex(0x41)
        '41'
        >>> to_hex(-1)
        'ffffffff'
        >>> to_hex(-(2**32))
        '-100000000'
    """
    if value < INT32_MIN:
        return "-" + format(-value, "x")
    if value < 0:
        value &= INT32_MASK
    return format(value, "x")


def to_hex_upper(value: int) -> str:
    """Shortest upper-case hex digits for value.

    Example:
        >>> to_hex_upper(0x1F600)
        '1F600'
    """
    return to_hex(value).upper()


def unicode_escape(unit: int) -> str:
    """Render a single 16-bit code unit as a \\u escape.

    Example:
        >>> unicode_escape(0x85)
        '\\\\u0085'
    """
    return f"\\u{unit:04X}"


def hex_literal(value: int) -> str:
    """Upper-case hex literal with a 0x prefix, as used in error messages.

    The sign of values below the signed 32-bit range goes in front of
    the prefix.

    Example:
        >>> hex_literal(0xD800)
        '0xD800'
        >>> hex_literal(-10)
        '0xFFFFFFF6'
        >>> hex_literal(-(2**32))
        '-0x100000000'
    """
    digits = to_hex_upper(value)
    if digits.startswith("-"):
        return "-0x" + digits[1:]
    return "0x" + digits
