"""
Numerical precision constants and utilities.

Provides the singularity threshold, default element types, and
tolerance-based comparisons used across the vector, matrix and
linear-algebra layers.
"""

import numpy as np
from numpy.typing import ArrayLike
from typing import Any

from pyalgebra.core.exceptions import DimensionError


# Threshold below which a determinant, pivot or norm is treated as zero
EPSILON: float = 1e-9

# Laplace expansion is factorial in the order; warn above this order
DET_EXPANSION_WARN_ORDER: int = 8

# Element types deduced for Python int / float literals
DEFAULT_INT_DTYPE: np.dtype = np.dtype(np.int64)
DEFAULT_FLOAT_DTYPE: np.dtype = np.dtype(np.float64)


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given floating dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def is_zero(value: Any, eps: float = EPSILON) -> bool:
    """True if |value| is below the zero threshold."""
    return bool(abs(value) < eps)


def allclose(a: ArrayLike, b: ArrayLike, atol: float = EPSILON) -> bool:
    """
    Compare two same-shape values elementwise within an absolute tolerance.

    Accepts Vector, Matrix, numpy arrays or nested sequences.

    Args:
        a: First operand
        b: Second operand
        atol: Absolute tolerance per element

    Returns:
        True if every |a_i - b_i| <= atol

    Raises:
        DimensionError: If the operands have different shapes
    """
    a_arr = np.asarray(a)
    b_arr = np.asarray(b)
    if a_arr.shape != b_arr.shape:
        raise DimensionError(
            f"allclose: shapes differ, {a_arr.shape} vs {b_arr.shape}"
        )
    return bool(np.allclose(a_arr, b_arr, rtol=0.0, atol=atol))
