"""Core utilities shared by the value types and the diagnostics layer.

This package holds the low-level helpers that both ScalarValue and the
error templates depend on. Keeping them here maintains a clean dependency
graph:

    core <- diagnostics <- scalar/range <- text

Exports:
    iter_code_points: Shared UTF-16 decode routine (folds surrogate pairs)
    character_name: Unicode name lookup with control character names
    to_hex: Shortest hex rendering (32-bit two's complement for negatives)
"""

from .formatting import hex_literal, to_hex, to_hex_upper, unicode_escape
from .names import UNNAMED, character_name
from .utf16 import (
    high_surrogate,
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
    is_surrogate_pair,
    iter_code_points,
    low_surrogate,
    to_code_point,
)

__all__ = [
    "UNNAMED",
    "character_name",
    "hex_literal",
    "high_surrogate",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_surrogate",
    "is_surrogate_pair",
    "iter_code_points",
    "low_surrogate",
    "to_code_point",
    "to_hex",
    "to_hex_upper",
    "unicode_escape",
]
