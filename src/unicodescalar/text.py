"""Whole-string helpers built on ScalarValue.

Lexers and formatting code rarely look at a single character in
isolation. These helpers apply the scalar value operations to a whole
string while sharing the same surrogate-pair decoding as
ScalarValue.all_of():

    code_point_count - Number of code points (surrogate pairs count once)
    escape           - String literal rendering of a whole string
    describe         - Per-character diagnostics with source offsets
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from unicodescalar.core import iter_code_points
from unicodescalar.scalar import ScalarValue

__all__ = ["ScalarInfo", "code_point_count", "describe", "escape"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScalarInfo:
    """A scalar value together with its position in the source text.

    Attributes:
        offset: Index of the scalar's first character in the source string
        scalar: The scalar value found there
    """

    offset: int
    scalar: ScalarValue

    @property
    def info(self) -> str:
        return self.scalar.info

    def __str__(self) -> str:
        return f"{self.offset}: {self.scalar.info}"


def code_point_count(text: str) -> int:
    """Count code points, treating a surrogate pair as one.

    Example:
        >>> code_point_count("ABC\\U0001F600")
        4
        >>> code_point_count("\\ud83d\\ude00")
        1
    """
    return sum(1 for _ in iter_code_points(text))


def escape(text: str) -> str:
    """Render text for use inside a quoted string literal.

    Every scalar value is replaced by its ScalarValue.escaped form.

    Example:
        >>> print(escape('say "hi"\\t'))
        say \\"hi\\"\\t

    Raises:
        ScalarValueError: If text contains an unpaired surrogate
    """
    return "".join(scalar.escaped for scalar in ScalarValue.all_of(text))


def describe(text: str) -> tuple[ScalarInfo, ...]:
    """Describe every scalar value of text with its offset.

    Useful when reporting unexpected characters: the offsets index into
    the original string, so a surrogate pair advances the next offset by
    two.

    Args:
        text: Text to describe

    Returns:
        One ScalarInfo per scalar value, in order

    Raises:
        ScalarValueError: If text contains an unpaired surrogate
    """
    described = tuple(
        ScalarInfo(offset, ScalarValue(code_point))
        for offset, code_point in iter_code_points(text)
    )
    logger.debug("Described %d scalar values in %d characters", len(described), len(text))
    return described
