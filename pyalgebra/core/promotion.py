"""
Numeric constraint and element-type promotion.

Every arithmetic and algorithm operation fixes its result element type
by calling promote() exactly once over its operands. The table is
numpy's type-promotion lattice, applied to explicit dtypes:

    integer widening        int8 -> int16 -> int32 -> int64
                            uint8 + int8 -> int16, uint32 + int32 -> int64
    integer -> float        int8 + float16 -> float16
                            int16 + float16 -> float32
                            int32/int64 + any float -> float64
    float widening          float16 -> float32 -> float64

Python literals are not "weak": an int literal is int64 and a float
literal is float64, so Vector(int32) + 1 is int64.
"""

from __future__ import annotations

from functools import reduce
from typing import Any

import numpy as np

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.precision import DEFAULT_INT_DTYPE, DEFAULT_FLOAT_DTYPE
from pyalgebra.core.validation import check_numeric_dtype


def is_numeric_scalar(value: Any) -> bool:
    """True for int/float Python or numpy scalars; bool is excluded."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def dtype_of(value: Any, name: str = "operand") -> np.dtype:
    """
    Element dtype of a scalar, dtype, array, Vector or Matrix operand.

    Args:
        value: Operand or dtype-like
        name: Parameter name for error messages

    Returns:
        A numeric numpy dtype

    Raises:
        ValidationError: If the operand is not integer or floating point
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: bool is not a numeric element type")
    if isinstance(value, int):
        return DEFAULT_INT_DTYPE
    if isinstance(value, float):
        return DEFAULT_FLOAT_DTYPE
    if isinstance(value, (np.dtype, type, str)):
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValidationError(f"{name}: not a dtype: {value!r}") from e
    elif hasattr(value, 'dtype'):
        dtype = np.dtype(value.dtype)
    else:
        raise ValidationError(
            f"{name}: expected a number, Vector or Matrix, got {type(value).__name__}"
        )
    check_numeric_dtype(dtype, name)
    return dtype


def promote(*operands: Any) -> np.dtype:
    """
    Common result dtype of one or more operands.

    Args:
        *operands: Scalars, dtypes, arrays, Vectors or Matrices

    Returns:
        The promoted numeric dtype

    Raises:
        ValidationError: If no operands are given or one is non-numeric
    """
    if not operands:
        raise ValidationError("promote: requires at least one operand")
    dtypes = [dtype_of(op, f"operand {i}") for i, op in enumerate(operands)]
    return reduce(np.promote_types, dtypes)


def floating_dtype(dtype: Any) -> np.dtype:
    """The dtype itself if floating, otherwise float64."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return dtype
    return DEFAULT_FLOAT_DTYPE
