"""
Products over vectors and matrices.

Public API:
    hadamard(*operands)        elementwise product of same-shape vectors or matrices
    matmul(a, b)               matrix product; also matrix-vector and vector-matrix
    kronecker_product(a, b)    block product, (R1*R2) x (C1*C2)
    kronecker(*matrices)       right-to-left reduction of kronecker_product
"""

from __future__ import annotations

from functools import reduce
from typing import Any

import numpy as np

from pyalgebra.core.exceptions import DimensionError, ValidationError
from pyalgebra.core.promotion import promote
from pyalgebra.core.validation import check_min_operands, check_same_shape
from pyalgebra.linalg.transform import check_matrices
from pyalgebra.matrix import Matrix
from pyalgebra.vector import Vector


def hadamard(*operands: Any) -> Any:
    """
    Elementwise product of two or more same-shape operands.

    Operands must be all Vectors or all Matrices; the result has the same
    kind and shape, with the promoted element type.

    Raises:
        ValidationError: Fewer than two operands, or mixed/unsupported kinds
        DimensionError: Shapes differ
    """
    check_min_operands(operands, 2, "hadamard")
    kind = type(operands[0])
    if kind not in (Vector, Matrix) or any(type(op) is not kind for op in operands):
        names = ", ".join(type(op).__name__ for op in operands)
        raise ValidationError(
            f"hadamard: operands must be all Vectors or all Matrices, got ({names})"
        )
    check_same_shape([op.shape for op in operands], "hadamard")
    dtype = promote(*operands)
    product = reduce(np.multiply, (op.to_numpy().astype(dtype) for op in operands))
    return kind._wrap(product.astype(dtype))


def matmul(a: Any, b: Any) -> Any:
    """
    Matrix product with the standard accumulation rule.

    Supported operand pairs:
        Matrix (R x C) @ Matrix (C x K) -> Matrix (R x K)
        Matrix (R x C) @ Vector (C)     -> Vector (R), vector as a column
        Vector (R)     @ Matrix (R x C) -> Vector (C), vector as a row

    Raises:
        ValidationError: Unsupported operand kinds
        DimensionError: Inner dimensions differ
    """
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        inner_a, inner_b = a.cols, b.rows
        wrap = Matrix._wrap
    elif isinstance(a, Matrix) and isinstance(b, Vector):
        inner_a, inner_b = a.cols, b.size
        wrap = Vector._wrap
    elif isinstance(a, Vector) and isinstance(b, Matrix):
        inner_a, inner_b = a.size, b.rows
        wrap = Vector._wrap
    else:
        raise ValidationError(
            f"matmul: unsupported operands {type(a).__name__} and {type(b).__name__}"
        )

    if inner_a != inner_b:
        raise DimensionError(
            f"matmul: inner dimensions differ, {a.shape} @ {b.shape}"
        )

    dtype = promote(a, b)
    lhs = a.to_numpy().astype(dtype)
    rhs = b.to_numpy().astype(dtype)
    return wrap(np.matmul(lhs, rhs).astype(dtype))


def kronecker_product(a: Matrix, b: Matrix) -> Matrix:
    """
    Kronecker product of an R1 x C1 and an R2 x C2 matrix.

    The result is (R1*R2) x (C1*C2); block (i, j) is b scaled by a[i, j].
    """
    check_matrices([a, b], "kronecker_product")
    dtype = promote(a, b)
    lhs = a.to_numpy().astype(dtype)
    rhs = b.to_numpy().astype(dtype)
    return Matrix._wrap(np.kron(lhs, rhs).astype(dtype))


def kronecker(*matrices: Matrix) -> Matrix:
    """
    Kronecker product of one or more matrices, in argument order.

    Reduced right to left: kronecker(A, B, C) = A (x) (B (x) C). The
    product is associative but not commutative, so the order of the
    arguments is preserved.
    """
    check_min_operands(matrices, 1, "kronecker")
    check_matrices(matrices, "kronecker")
    result = matrices[-1].copy()
    for mat in reversed(matrices[:-1]):
        result = kronecker_product(mat, result)
    return result
