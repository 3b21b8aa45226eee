"""Closed intervals of scalar values.

ScalarRange is what character-class tests in a lexer are built from:
"is this a digit between 0 and 9", "is this a Latin letter". Both
endpoints are inclusive. No ordering is enforced between them; a range
whose start lies above its end is simply empty.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from unicodescalar.constants import MAX_SURROGATE, MIN_SURROGATE
from unicodescalar.scalar import ScalarValue

__all__ = ["ScalarRange"]


@dataclass(frozen=True, slots=True)
class ScalarRange:
    """Closed interval [start, end_inclusive] of scalar values.

    Attributes:
        start: First scalar value in the range
        end_inclusive: Last scalar value in the range

    Example:
        >>> a, c = ScalarValue.of_string("A"), ScalarValue.of_string("C")
        >>> ScalarValue.of_string("C") in a.range_to(c)
        True
        >>> ScalarValue.of_string("C") in a.until(c)
        False
    """

    start: ScalarValue
    end_inclusive: ScalarValue

    @classmethod
    def of_code_units(cls, start: int | str, end_inclusive: int | str) -> ScalarRange:
        """Build a range from two UTF-16 code units, e.g. ("a", "z").

        Both endpoints go through ScalarValue.of_code_unit().

        Raises:
            ScalarValueError: If either endpoint is a lone surrogate
        """
        return cls(ScalarValue.of_code_unit(start), ScalarValue.of_code_unit(end_inclusive))

    def contains(self, value: ScalarValue) -> bool:
        """Check if start <= value <= end_inclusive."""
        return self.start <= value <= self.end_inclusive

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, ScalarValue):
            return False
        return self.contains(value)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end_inclusive

    def __iter__(self) -> Iterator[ScalarValue]:
        """Iterate the scalar values in order, skipping the surrogate block."""
        value = self.start.value
        last = self.end_inclusive.value
        while value <= last:
            if MIN_SURROGATE <= value <= MAX_SURROGATE:
                value = MAX_SURROGATE + 1
                continue
            yield ScalarValue(value)
            value += 1

    def __str__(self) -> str:
        return f"0x{self.start.hex_upper}..0x{self.end_inclusive.hex_upper}"
