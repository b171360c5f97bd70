"""Tests for polykit.utils.validate."""

import numpy as np
import pytest

from polykit.utils.validate import (
    validate_coefficients,
    validate_exponent,
    validate_precision,
    validate_scalar,
)


def test_validate_coefficients_accepts_sequences_and_arrays():
    """Tests that lists, tuples and arrays are converted to float64."""
    for src in ([1, 2], (1.0, 2.0), np.array([1, 2])):
        out = validate_coefficients(src)
        assert out.dtype == np.float64
        assert out.tolist() == [1.0, 2.0]


@pytest.mark.parametrize(
    "bad, match",
    [
        (None, "None"),
        ([], "empty"),
        (np.zeros((0,)), "empty"),
        ([1.0, np.nan], "finite"),
    ],
)
def test_validate_coefficients_rejects_invalid(bad, match):
    """Tests the rejection messages for invalid coefficient input."""
    with pytest.raises(ValueError, match=match):
        validate_coefficients(bad)


def test_validate_precision_accepts_zero():
    """Tests that zero precision means exact comparison."""
    assert validate_precision(0) == 0.0


def test_validate_scalar_rejects_bool():
    """Tests that booleans are not accepted as scale factors."""
    with pytest.raises(ValueError):
        validate_scalar(True)


def test_validate_exponent_bounds():
    """Tests inclusive bounds of the exponent check."""
    assert validate_exponent(0, 3) == 0
    assert validate_exponent(3, 3) == 3
    with pytest.raises(IndexError, match="out of range"):
        validate_exponent(4, 3)
    with pytest.raises(IndexError):
        validate_exponent(-1, 3)
