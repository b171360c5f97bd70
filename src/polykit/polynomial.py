"""Immutable single-variable polynomials with real coefficients.

A :class:`Polynomial` stores its coefficients highest degree first, so
``Polynomial([3, 0, 1])`` is ``3*x^2 + 1``. Coefficients are canonicalized
on construction: leading terms whose magnitude does not exceed the
comparison precision are dropped, and an all-zero sequence becomes the
zero polynomial ``[0.0]`` of degree 0.

Every operation returns a new instance. The named functions
(:func:`add`, :func:`subtract`, :func:`multiply`, ...) and the operators
(``+``, ``-``, ``*``, ``==``) share the same semantics; the named
functions additionally accept ``None`` operands where noted.

Example:
    >>> from polykit import Polynomial
    >>> p = Polynomial([3, 0, 1])
    >>> q = Polynomial([3])
    >>> (p + q).to_list()
    [3.0, 0.0, 4.0]
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike

from polykit.config import get_default_config
from polykit.utils.numerics import (
    align_lowest_term,
    horner_eval,
    strip_leading_zeros,
)
from polykit.utils.types import FloatArray
from polykit.utils.validate import (
    validate_coefficients,
    validate_exponent,
    validate_precision,
    validate_scalar,
)

__all__ = [
    "Polynomial",
    "equals",
    "add",
    "negate",
    "subtract",
    "scale",
    "multiply",
    "render",
    "clone",
]


class Polynomial:
    """A polynomial ``sum(c_i * x**i)`` with float64 coefficients."""

    __slots__ = ("_coeffs", "_precision")

    # Keep NumPy scalars from broadcasting over a Polynomial; defer to our
    # reflected operators instead.
    __array_ufunc__ = None

    def __init__(self, coefficients: ArrayLike, *, precision: float | None = None):
        """Initializes a polynomial.

        Args:
            coefficients: Non-empty 1D sequence of finite reals, highest
                degree first.
            precision: Comparison precision for this instance. ``None``
                uses :func:`polykit.config.get_default_config`.

        Raises:
            ValueError: If ``coefficients`` is ``None``, empty, not 1D or
                not finite, or if ``precision`` is invalid.
        """
        arr = validate_coefficients(coefficients)
        if precision is None:
            tol = get_default_config().comparison_precision
        else:
            tol = validate_precision(precision)

        # +0.0 folds any -0.0 produced by negation into 0.0
        canon = strip_leading_zeros(arr, tol) + 0.0
        canon.flags.writeable = False
        self._coeffs = canon
        self._precision = tol

    @classmethod
    def zero(cls, *, precision: float | None = None) -> Polynomial:
        """Returns the zero polynomial."""
        return cls([0.0], precision=precision)

    @property
    def degree(self) -> int:
        """Highest exponent with a stored coefficient."""
        return self._coeffs.size - 1

    @property
    def coefficients(self) -> FloatArray:
        """Read-only coefficient array, highest degree first."""
        # A view of a read-only base cannot be flipped back to writeable.
        view = self._coeffs.view()
        view.flags.writeable = False
        return view

    @property
    def precision(self) -> float:
        """Comparison precision this instance was built with."""
        return self._precision

    def at(self, exponent: int) -> float:
        """Returns the coefficient of ``x**exponent``.

        Args:
            exponent: Integer in ``[0, degree]``.

        Returns:
            The stored coefficient as a float.

        Raises:
            TypeError: If ``exponent`` is not an integer.
            IndexError: If ``exponent`` is outside ``[0, degree]``.
        """
        j = validate_exponent(exponent, self.degree)
        return float(self._coeffs[self.degree - j])

    def __getitem__(self, exponent: int) -> float:
        return self.at(exponent)

    def to_list(self) -> list[float]:
        """Returns the coefficients as floats, highest degree first."""
        return [float(c) for c in self._coeffs]

    def terms(self) -> Iterator[tuple[float, int]]:
        """Yields ``(coefficient, exponent)`` pairs, highest degree first."""
        for i, c in enumerate(self._coeffs):
            yield float(c), self.degree - i

    def __call__(self, x: ArrayLike) -> float | FloatArray:
        """Evaluates the polynomial at ``x`` (scalar or array-like)."""
        return horner_eval(self._coeffs, x)

    def clone(self) -> Polynomial:
        """Returns a value-equal copy with independently owned storage."""
        return Polynomial(self._coeffs, precision=self._precision)

    def __copy__(self) -> Polynomial:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Polynomial:
        return self.clone()

    def _coerce(self, other: Any) -> Polynomial | None:
        """Lifts a real scalar to a constant polynomial sharing our precision."""
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return Polynomial([validate_scalar(other, name="other")], precision=self._precision)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return equals(self, other)

    def __hash__(self) -> int:
        # Tolerance equality is not transitive over values, so only the
        # degree can feed the hash.
        return hash((Polynomial, self.degree))

    def __add__(self, other: Any) -> Polynomial:
        if other is None:
            return add(self, other)
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: Any) -> Polynomial:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __neg__(self) -> Polynomial:
        return negate(self)

    def __pos__(self) -> Polynomial:
        return self.clone()

    def __sub__(self, other: Any) -> Polynomial:
        if other is None:
            return subtract(self, other)
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return subtract(self, rhs)

    def __rsub__(self, other: Any) -> Polynomial:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return subtract(lhs, self)

    def __mul__(self, other: Any) -> Polynomial:
        if other is None:
            return multiply(self, other)
        if isinstance(other, Polynomial):
            return multiply(self, other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Polynomial:
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return scale(self, other)
        return NotImplemented

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Polynomial({self.to_list()!r})"


def _require(polynomial: Polynomial | None, name: str) -> Polynomial:
    if polynomial is None:
        raise ValueError(f"{name} must not be None.")
    if not isinstance(polynomial, Polynomial):
        raise ValueError(f"{name} must be a Polynomial; got {type(polynomial).__name__}.")
    return polynomial


def _from_result(values: FloatArray, precision: float, operation: str) -> Polynomial:
    """Wraps the coefficients computed by ``operation`` in a new polynomial.

    Raises:
        OverflowError: If finite operands produced a non-finite coefficient.
    """
    if not np.all(np.isfinite(values)):
        raise OverflowError(f"{operation} overflowed the float64 coefficient range.")
    return Polynomial(values, precision=precision)


def equals(a: Polynomial | None, b: Polynomial | None) -> bool:
    """Compares two polynomials coefficient-wise within a shared tolerance.

    Two ``None`` values are equal; ``None`` never equals a polynomial.
    Degrees must match exactly, and every one of the ``degree + 1``
    coefficients must differ by no more than the larger of the two
    precisions, so ``equals(a, b) == equals(b, a)``.

    Args:
        a: First polynomial or ``None``.
        b: Second polynomial or ``None``.

    Returns:
        Whether the two are equal.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if a is b:
        return True
    if a.degree != b.degree:
        return False
    diff = np.abs(a.coefficients - b.coefficients)
    return bool(np.all(diff <= max(a.precision, b.precision)))


def add(a: Polynomial, b: Polynomial) -> Polynomial:
    """Returns ``a + b``, aligning the operands at the constant term.

    Raises:
        ValueError: If either operand is ``None``.
        OverflowError: If a result coefficient overflows float64.
    """
    a = _require(a, "a")
    b = _require(b, "b")
    lhs, rhs = align_lowest_term(a.coefficients, b.coefficients)
    with np.errstate(over="ignore"):
        total = lhs + rhs
    return _from_result(total, a.precision, "add")


def negate(a: Polynomial) -> Polynomial:
    """Returns ``-a``.

    Raises:
        ValueError: If ``a`` is ``None``.
    """
    a = _require(a, "a")
    return Polynomial(-a.coefficients, precision=a.precision)


def subtract(a: Polynomial, b: Polynomial) -> Polynomial:
    """Returns ``a - b`` as ``add(a, negate(b))``.

    Raises:
        ValueError: If either operand is ``None``.
        OverflowError: If a result coefficient overflows float64.
    """
    a = _require(a, "a")
    return add(a, negate(_require(b, "b")))


def scale(a: Polynomial, k: float) -> Polynomial:
    """Returns ``k * a``. A zero factor gives the zero polynomial.

    Raises:
        ValueError: If ``a`` is ``None`` or ``k`` is not a finite real.
        OverflowError: If a result coefficient overflows float64.
    """
    a = _require(a, "a")
    factor = validate_scalar(k, name="k")
    with np.errstate(over="ignore"):
        scaled = a.coefficients * factor
    return _from_result(scaled, a.precision, "scale")


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    """Returns the product ``a * b``.

    The result is the full convolution of the coefficient sequences, of
    degree ``a.degree + b.degree`` before canonicalization.

    Raises:
        ValueError: If either operand is ``None``.
        OverflowError: If a result coefficient overflows float64.
    """
    a = _require(a, "a")
    b = _require(b, "b")
    with np.errstate(over="ignore", invalid="ignore"):
        product = np.convolve(a.coefficients, b.coefficients)
    return _from_result(product, a.precision, "multiply")


def render(a: Polynomial) -> str:
    """Renders ``a`` as ``"c*x^e"`` terms joined by ``" + "``, highest degree first."""
    a = _require(a, "a")
    return " + ".join(f"{c:g}*x^{e}" for c, e in a.terms())


def clone(a: Polynomial) -> Polynomial:
    """Returns an independently owned copy of ``a``.

    Raises:
        ValueError: If ``a`` is ``None``.
    """
    return _require(a, "a").clone()
