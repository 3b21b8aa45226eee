"""UTF-16 code unit primitives.

Python strings are sequences of code points, but text that crossed a
UTF-16 boundary (JSON escapes, surrogatepass decoding, Java/JS interop)
can still carry surrogate pairs as two separate characters. This module
is the single place that knows how to fold such pairs back into one
code point, so every caller decodes them identically.

Surrogate Layout:
    high: D800-DBFF  (carries the upper 10 bits of value - 0x10000)
    low:  DC00-DFFF  (carries the lower 10 bits)

Thread Safety:
    Pure functions with no shared state.
"""

from __future__ import annotations

from collections.abc import Iterator

from unicodescalar.constants import (
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
    SURROGATE_BLOCK_SIZE,
)

__all__ = [
    "high_surrogate",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_surrogate",
    "is_surrogate_pair",
    "iter_code_points",
    "low_surrogate",
    "to_code_point",
]


def is_high_surrogate(unit: int) -> bool:
    """Check if unit is a high (leading) surrogate."""
    return MIN_HIGH_SURROGATE <= unit <= MAX_HIGH_SURROGATE


def is_low_surrogate(unit: int) -> bool:
    """Check if unit is a low (trailing) surrogate."""
    return MIN_LOW_SURROGATE <= unit <= MAX_LOW_SURROGATE


def is_surrogate(unit: int) -> bool:
    """Check if unit lies anywhere in the surrogate block."""
    return MIN_HIGH_SURROGATE <= unit <= MAX_LOW_SURROGATE


def is_surrogate_pair(high: int, low: int) -> bool:
    """Check if high and low together form a valid surrogate pair."""
    return is_high_surrogate(high) and is_low_surrogate(low)


def to_code_point(high: int, low: int) -> int:
    """Combine a surrogate pair into its supplementary code point.

    The caller is responsible for checking is_surrogate_pair() first.

    Example:
        >>> hex(to_code_point(0xD83D, 0xDE00))
        '0x1f600'
    """
    return (
        (high - MIN_HIGH_SURROGATE) * SURROGATE_BLOCK_SIZE
        + (low - MIN_LOW_SURROGATE)
        + MIN_SUPPLEMENTARY_CODE_POINT
    )


def high_surrogate(code_point: int) -> int:
    """Leading surrogate of a supplementary code point.

    Example:
        >>> hex(high_surrogate(0x1F600))
        '0xd83d'
    """
    return MIN_HIGH_SURROGATE + ((code_point - MIN_SUPPLEMENTARY_CODE_POINT) >> 10)


def low_surrogate(code_point: int) -> int:
    """Trailing surrogate of a supplementary code point.

    Example:
        >>> hex(low_surrogate(0x1F600))
        '0xde00'
    """
    return MIN_LOW_SURROGATE + ((code_point - MIN_SUPPLEMENTARY_CODE_POINT) & 0x3FF)


def iter_code_points(text: str) -> Iterator[tuple[int, int]]:
    """Decode text into code points, folding surrogate pairs.

    A high surrogate character immediately followed by a low surrogate
    character yields one supplementary code point. Every other character,
    including an unpaired surrogate, yields its own ordinal unchanged;
    rejecting lone surrogates is left to the caller.

    Args:
        text: Text to decode

    Yields:
        (offset, code_point) pairs, offset being the index of the first
        character of the code point in text

    Example:
        >>> [cp for _, cp in iter_code_points("A\\ud83d\\ude00")]
        [65, 128512]
    """
    pos = 0
    length = len(text)
    while pos < length:
        unit = ord(text[pos])
        if is_high_surrogate(unit) and pos + 1 < length:
            low = ord(text[pos + 1])
            if is_low_surrogate(low):
                yield pos, to_code_point(unit, low)
                pos += 2
                continue
        yield pos, unit
        pos += 1
