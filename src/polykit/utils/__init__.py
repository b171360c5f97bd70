"""Utility functions for PolyKit package."""

from .numerics import (
    align_lowest_term,
    as_1d_float_array,
    horner_eval,
    strip_leading_zeros,
)

__all__ = [
    "as_1d_float_array",
    "strip_leading_zeros",
    "align_lowest_term",
    "horner_eval",
]
