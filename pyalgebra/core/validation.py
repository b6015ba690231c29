"""
Input validation utilities for pyalgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. They run before any element
of an operand is read or any receiver is mutated.

Design principles:
    - No silent type coercion beyond np.asarray on array-likes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    RowCountMismatchError,
    SizeMismatchError,
    ValidationError,
)


def check_numeric_dtype(dtype: Any, name: str) -> None:
    """
    Verify a dtype is an integer or floating-point type.

    Args:
        dtype: dtype to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If dtype is bool, complex, object, string, etc.
    """
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-numeric dtype {dtype}, expected an integer or floating type"
        )


def check_array(
    values: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array (always a copy).

    Args:
        values: Input to validate
        name: Parameter name for error messages
        dtype: Target dtype, or None to keep the deduced one

    Returns:
        numpy.ndarray with integer or floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(values, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    check_numeric_dtype(result.dtype, name)
    return result


def check_size(actual: int, expected: int, name: str) -> None:
    """
    Verify a collection length equals a fixed element count.

    Raises:
        SizeMismatchError: If the lengths differ
    """
    if actual != expected:
        raise SizeMismatchError(
            f"{name}: size mismatch, expected {expected} elements, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_row_count(actual: int, expected: int, name: str) -> None:
    """
    Verify a list of rows has the fixed row count.

    Raises:
        RowCountMismatchError: If the counts differ
    """
    if actual != expected:
        raise RowCountMismatchError(
            f"{name}: row count mismatch, expected {expected} rows, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_min_operands(operands: Sequence[Any], minimum: int, name: str) -> None:
    """
    Verify a variadic operation received enough operands.

    Raises:
        ValidationError: If fewer than `minimum` operands were given
    """
    if len(operands) < minimum:
        raise ValidationError(
            f"{name}: requires at least {minimum} operands, got {len(operands)}"
        )


def check_same_shape(
    shapes: Sequence[tuple[int, ...]],
    name: str,
) -> None:
    """
    Verify all operands share one shape.

    Args:
        shapes: Operand shapes, in argument order
        name: Operation name for error messages

    Raises:
        DimensionError: If any shape differs from the first
    """
    if len(set(shapes)) > 1:
        details = ", ".join(f"arg{i}={shape}" for i, shape in enumerate(shapes))
        raise DimensionError(f"{name}: operands must have the same shape: {details}")


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(f"{name}: requires a square matrix, got {rows}x{cols}")


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index is an integer inside [0, bound).

    Negative indices are rejected; they are not wrapped around.

    Args:
        index: Index to check
        bound: Exclusive upper bound of the axis
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If the index is not an integer
        IndexOutOfRangeError: If the index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__}"
        )
    index = int(index)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for size {bound}",
            index=index,
            bound=bound,
        )
    return index
