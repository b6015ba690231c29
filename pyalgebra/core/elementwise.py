"""
Elementwise arithmetic kernel shared by Vector and Matrix.

Operands are cast to the promoted result dtype before the operation, so
the result dtype is exactly the one chosen by promote(). Division of an
integer result dtype truncates toward zero, matching fixed-type integer
arithmetic; integer division by zero raises instead of producing numpy's
silent 0.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.exceptions import ValidationError

OPERATIONS = ("add", "sub", "mul", "div")


def _truncating_divide(lhs: NDArray[Any], rhs: NDArray[Any]) -> NDArray[Any]:
    if np.any(rhs == 0):
        raise ZeroDivisionError("integer division by zero")
    quotient = np.abs(lhs) // np.abs(rhs)
    negative = (lhs < 0) != (rhs < 0)
    return np.where(negative, -quotient, quotient).astype(lhs.dtype)


def apply(op: str, lhs: Any, rhs: Any, dtype: np.dtype) -> NDArray[Any]:
    """
    Apply one elementwise operation in the given result dtype.

    Args:
        op: One of 'add', 'sub', 'mul', 'div'
        lhs: Left operand (array or scalar)
        rhs: Right operand (array or scalar), broadcast against lhs
        dtype: Promoted result dtype

    Returns:
        New array of dtype `dtype`

    Raises:
        ValidationError: If op is unknown
        ZeroDivisionError: On integer division by zero
    """
    if op not in OPERATIONS:
        raise ValidationError(f"op must be one of {OPERATIONS}, got {op!r}")

    lhs = np.asarray(lhs).astype(dtype)
    rhs = np.asarray(rhs).astype(dtype)

    if op == "add":
        return np.add(lhs, rhs, dtype=dtype)
    if op == "sub":
        return np.subtract(lhs, rhs, dtype=dtype)
    if op == "mul":
        return np.multiply(lhs, rhs, dtype=dtype)

    if np.issubdtype(dtype, np.integer):
        lhs, rhs = np.broadcast_arrays(lhs, rhs)
        return _truncating_divide(lhs, rhs)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.divide(lhs, rhs, dtype=dtype)
