"""
Structural matrix operations: transpose, trace, minor.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pyalgebra.core.exceptions import DimensionError, ValidationError
from pyalgebra.core.validation import check_index, check_square
from pyalgebra.matrix import Matrix


def check_matrices(operands: Sequence[Any], name: str) -> None:
    """Verify every operand is a Matrix."""
    for i, operand in enumerate(operands):
        if not isinstance(operand, Matrix):
            raise ValidationError(
                f"{name}: argument {i} must be a Matrix, got {type(operand).__name__}"
            )


def transpose(mat: Matrix) -> Matrix:
    """Rows x Cols -> Cols x Rows, element (r, c) moved to (c, r)."""
    check_matrices([mat], "transpose")
    return Matrix._wrap(np.ascontiguousarray(mat.to_numpy().T))


def trace(mat: Matrix) -> Any:
    """
    Sum of the diagonal elements, in the matrix dtype.

    Raises:
        DimensionError: If the matrix is not square
    """
    check_matrices([mat], "trace")
    check_square(mat.shape, "trace")
    return np.trace(mat.to_numpy(), dtype=mat.dtype)


def minor_matrix(mat: Matrix, r: int, c: int) -> Matrix:
    """
    The (Rows-1) x (Cols-1) matrix obtained by omitting row r and column c.

    Raises:
        DimensionError: If the matrix has a single row or column
        IndexOutOfRangeError: If r or c is outside the matrix
    """
    check_matrices([mat], "minor_matrix")
    if mat.rows < 2 or mat.cols < 2:
        raise DimensionError(
            f"minor_matrix: requires at least 2 rows and 2 cols, got {mat.rows}x{mat.cols}"
        )
    r = check_index(r, mat.rows, "minor_matrix row")
    c = check_index(c, mat.cols, "minor_matrix col")
    data = np.delete(np.delete(mat.to_numpy(), r, axis=0), c, axis=1)
    return Matrix._wrap(data)
