"""Numerical utilities for coefficient sequences.

All helpers here work on plain 1D float arrays stored highest degree
first, the same layout used by :class:`polykit.polynomial.Polynomial`.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from polykit.logger import polykit_logger
from polykit.utils.types import FloatArray

__all__ = [
    "as_1d_float_array",
    "strip_leading_zeros",
    "align_lowest_term",
    "horner_eval",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> FloatArray:
    """Convert input to a 1D float array.

    This performs a minimal shape check (must be 1D) and ensures a float
    dtype. The result never aliases ``x``.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the converted array is not 1D or the values are not real numbers.
    """
    try:
        raw = np.asarray(x)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must contain real numbers.") from exc
    # Strings and objects would be parsed as text, complex values truncated.
    if raw.dtype.kind in "USOc":
        raise ValueError(f"{name} must contain real numbers, got dtype {raw.dtype}.")
    arr = np.array(raw, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr


def strip_leading_zeros(coeffs: FloatArray, tol: float) -> FloatArray:
    """Drops leading coefficients whose magnitude is within ``tol`` of zero.

    Coefficients are ordered highest degree first, so "leading" means the
    front of the array. If every coefficient is within tolerance the
    result is the single-term zero sequence ``[0.0]``.

    Args:
        coeffs: 1D coefficient array, highest degree first.
        tol: Non-negative absolute tolerance.

    Returns:
        A new array holding the minimal representation.
    """
    significant = np.flatnonzero(np.abs(coeffs) > tol)
    if significant.size == 0:
        if coeffs.size > 1:
            polykit_logger.debug(
                "All %d coefficients within %g of zero; using the zero polynomial.",
                coeffs.size,
                tol,
            )
        return np.zeros(1, dtype=np.float64)

    first = int(significant[0])
    if first > 0:
        polykit_logger.debug(
            "Dropped %d leading coefficient(s) within %g of zero.", first, tol
        )
    return coeffs[first:].copy()


def align_lowest_term(a: FloatArray, b: FloatArray) -> tuple[FloatArray, FloatArray]:
    """Pads two coefficient arrays to a common length, aligned at the x^0 term.

    The shorter array receives implicit zero coefficients in front (its
    missing high-degree terms).

    Args:
        a: First coefficient array, highest degree first.
        b: Second coefficient array, highest degree first.

    Returns:
        Tuple ``(a_padded, b_padded)`` of equal length.
    """
    n = max(a.size, b.size)
    a_pad = np.pad(a, (n - a.size, 0))
    b_pad = np.pad(b, (n - b.size, 0))
    return a_pad, b_pad


def horner_eval(coeffs: FloatArray, x: ArrayLike) -> float | FloatArray:
    """Evaluates a polynomial with Horner's rule.

    Args:
        coeffs: 1D coefficient array, highest degree first.
        x: Scalar or array-like evaluation point(s).

    Returns:
        A float for scalar ``x``, otherwise an array with the shape of ``x``.
    """
    xs = np.asarray(x, dtype=np.float64)
    acc = np.zeros_like(xs)
    for c in coeffs:
        acc = acc * xs + c
    if acc.ndim == 0:
        return float(acc)
    return acc
