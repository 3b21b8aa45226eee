"""Shared constants for unicodescalar.

Centralizes the numeric bounds of the Unicode code space and the UTF-16
encoding form. Placing them here avoids circular imports between the core
helpers, the value types and the diagnostics layer.

Constants are grouped by domain:
- Code space: Valid scalar value bounds
- UTF-16: Surrogate ranges and code unit width
- Sentinels: Named values with a special meaning for text readers

Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code space
    "MIN_CODE_POINT",
    "MAX_CODE_POINT",
    "MIN_SUPPLEMENTARY_CODE_POINT",
    # UTF-16
    "MAX_CODE_UNIT",
    "MIN_HIGH_SURROGATE",
    "MAX_HIGH_SURROGATE",
    "MIN_LOW_SURROGATE",
    "MAX_LOW_SURROGATE",
    "MIN_SURROGATE",
    "MAX_SURROGATE",
    "SURROGATE_BLOCK_SIZE",
    # Sentinels
    "EOF_VALUE",
    "EOF_ESCAPE",
    "BOM_VALUE",
    "NEL_VALUE",
    "INT32_MASK",
    "INT32_MIN",
    "INT32_MAX",
]

# ============================================================================
# CODE SPACE
# ============================================================================

MIN_CODE_POINT: int = 0x0000
MAX_CODE_POINT: int = 0x10FFFF

# First code point outside the Basic Multilingual Plane.
# Everything from here up needs a surrogate pair in UTF-16.
MIN_SUPPLEMENTARY_CODE_POINT: int = 0x10000

# ============================================================================
# UTF-16
# ============================================================================

MAX_CODE_UNIT: int = 0xFFFF

MIN_HIGH_SURROGATE: int = 0xD800
MAX_HIGH_SURROGATE: int = 0xDBFF
MIN_LOW_SURROGATE: int = 0xDC00
MAX_LOW_SURROGATE: int = 0xDFFF

MIN_SURROGATE: int = MIN_HIGH_SURROGATE
MAX_SURROGATE: int = MAX_LOW_SURROGATE

# Each surrogate half carries 10 bits.
SURROGATE_BLOCK_SIZE: int = 0x400

# ============================================================================
# SENTINELS
# ============================================================================

# End of input. Not a Unicode code point; readers return it once the
# source is exhausted.
EOF_VALUE: int = -1

# Escape rendering for EOF: the noncharacter U+FFFF, which is what a
# 16-bit reader sees when it truncates -1.
EOF_ESCAPE: str = "\\uFFFF"

# ZERO WIDTH NO-BREAK SPACE, used as byte order mark at the start of a file.
BOM_VALUE: int = 0xFEFF

# NEXT LINE, the C1 line break.
NEL_VALUE: int = 0x0085

# Hex rendering treats values as signed 32-bit integers, so negatives
# print in two's complement (-1 -> ffffffff).
INT32_MASK: int = 0xFFFFFFFF

# Signed 32-bit range. Numeric literals outside it are rejected, and only
# negatives within it are rendered in two's complement.
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
