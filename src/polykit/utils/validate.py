"""Validation utilities for PolyKit."""

from __future__ import annotations

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike

from polykit.utils.numerics import as_1d_float_array
from polykit.utils.types import FloatArray

__all__ = [
    "validate_coefficients",
    "validate_precision",
    "validate_scalar",
    "validate_exponent",
]


def validate_coefficients(coefficients: ArrayLike | None) -> FloatArray:
    """Validates a coefficient sequence and converts it into a NumPy array.

    Requirements:
      - ``coefficients`` is present (not ``None``).
      - It is 1D and non-empty.
      - Every entry is a finite real number.

    Args:
        coefficients: Coefficients ordered highest degree first.

    Returns:
        An independently owned float64 array.

    Raises:
        ValueError: If any requirement is violated.
    """
    if coefficients is None:
        raise ValueError("coefficients must not be None.")
    arr = as_1d_float_array(coefficients, name="coefficients")
    if arr.size == 0:
        raise ValueError("coefficients must not be empty.")
    if not np.all(np.isfinite(arr)):
        raise ValueError("coefficients must be finite.")
    return arr


def validate_precision(precision: float) -> float:
    """Validates a comparison precision: a finite, non-negative float."""
    try:
        value = float(precision)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"precision must be a real number; got {precision!r}.") from exc
    if not np.isfinite(value) or value < 0.0:
        raise ValueError(f"precision must be finite and non-negative; got {value!r}.")
    return value


def validate_scalar(value: float, *, name: str = "value") -> float:
    """Validates a real, finite scalar factor.

    Args:
        value: Candidate scalar.
        name: Name used in error messages.

    Returns:
        ``value`` as a Python float.

    Raises:
        ValueError: If ``value`` is ``None``, not real, or not finite.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a real number; got {value!r}.")
    out = float(value)
    if not np.isfinite(out):
        raise ValueError(f"{name} must be finite; got {out!r}.")
    return out


def validate_exponent(exponent: int, degree: int) -> int:
    """Checks that ``exponent`` addresses a stored coefficient.

    Args:
        exponent: Requested power of x.
        degree: Degree of the polynomial.

    Returns:
        The exponent as a plain int.

    Raises:
        TypeError: If ``exponent`` is not an integer.
        IndexError: If ``exponent`` is outside ``[0, degree]``.
    """
    if isinstance(exponent, bool):
        raise TypeError("exponent must be an integer, not bool.")
    j = operator.index(exponent)
    if j < 0 or j > degree:
        raise IndexError(f"exponent {j} out of range for polynomial of degree {degree}")
    return j
