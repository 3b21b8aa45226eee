"""Hypothesis strategies for unicodescalar property-based testing.

Usage:
    from tests.strategies import scalar_ints, invalid_ints
    from tests.strategies.scalars import high_surrogates, low_surrogates
"""

from .scalars import (
    bmp_scalar_ints,
    high_surrogates,
    invalid_ints,
    low_surrogates,
    non_pairs,
    scalar_ints,
    scalar_text,
    supplementary_ints,
    surrogate_ints,
)

__all__ = [
    "bmp_scalar_ints",
    "high_surrogates",
    "invalid_ints",
    "low_surrogates",
    "non_pairs",
    "scalar_ints",
    "scalar_text",
    "supplementary_ints",
    "surrogate_ints",
]
