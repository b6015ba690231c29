"""
Determinant family: det, cofactor, adjoint (adjugate), inverse.

The determinant is computed by recursive Laplace (cofactor) expansion
along the first row:

    det([a])            = a
    det([[a, b], [c, d]]) = a*d - b*c
    det(A)              = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

This is exact for integer matrices and needs no pivoting, but costs
O(n!) operations. It is intended for the small fixed orders this
library targets; a RuntimeWarning is emitted above
DET_EXPANSION_WARN_ORDER.

The inverse is adjoint(A) scaled by 1/det(A), computed in floating point
(float64 for integer matrices).
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.exceptions import SingularMatrixError
from pyalgebra.core.precision import DET_EXPANSION_WARN_ORDER, EPSILON
from pyalgebra.core.promotion import floating_dtype
from pyalgebra.core.validation import check_index, check_square
from pyalgebra.linalg.transform import check_matrices
from pyalgebra.matrix import Matrix


def _minor(a: NDArray[Any], r: int, c: int) -> NDArray[Any]:
    return np.delete(np.delete(a, r, axis=0), c, axis=1)


def _laplace(a: NDArray[Any]) -> Any:
    """Laplace expansion along the first row; a is square."""
    n = a.shape[0]
    if n == 0:
        # Empty product convention, so that 1x1 cofactors come out as 1
        return a.dtype.type(1)
    if n == 1:
        return a[0, 0]
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]

    total = a.dtype.type(0)
    for j in range(n):
        if a[0, j] == 0:
            continue
        term = a[0, j] * _laplace(_minor(a, 0, j))
        total = total + term if j % 2 == 0 else total - term
    return a.dtype.type(total)


def _warn_if_large(n: int, stacklevel: int) -> None:
    # stacklevel is relative to the caller of the public function
    if n > DET_EXPANSION_WARN_ORDER:
        warnings.warn(
            f"Laplace expansion on a {n}x{n} matrix is factorial-time "
            f"({n}! terms); this may be very slow.",
            RuntimeWarning,
            stacklevel=stacklevel + 2,
        )


def det(mat: Matrix, stacklevel: int = 1) -> Any:
    """
    Determinant by recursive Laplace expansion.

    Args:
        mat: Square matrix
        stacklevel: Frame the large-order RuntimeWarning is attributed to;
            1 is the caller of this function

    Returns:
        Scalar in the matrix dtype

    Raises:
        DimensionError: If the matrix is not square
    """
    check_matrices([mat], "det")
    check_square(mat.shape, "det")
    _warn_if_large(mat.rows, stacklevel)
    return _laplace(mat.to_numpy())


def cofactor(mat: Matrix, r: int, c: int, stacklevel: int = 1) -> Any:
    """
    Signed minor determinant, (-1)^(r+c) * det(minor(mat, r, c)).

    For a 1x1 matrix the cofactor of (0, 0) is 1.

    Raises:
        DimensionError: If the matrix is not square
        IndexOutOfRangeError: If r or c is outside the matrix
    """
    check_matrices([mat], "cofactor")
    check_square(mat.shape, "cofactor")
    r = check_index(r, mat.rows, "cofactor row")
    c = check_index(c, mat.cols, "cofactor col")
    _warn_if_large(mat.rows - 1, stacklevel)
    minor_det = _laplace(_minor(mat.to_numpy(), r, c))
    return minor_det if (r + c) % 2 == 0 else -minor_det


def _adjoint_array(a: NDArray[Any]) -> NDArray[Any]:
    n = a.shape[0]
    adj = np.empty_like(a)
    for r in range(n):
        for c in range(n):
            minor_det = _laplace(_minor(a, r, c))
            adj[c, r] = minor_det if (r + c) % 2 == 0 else -minor_det
    return adj


def adjoint(mat: Matrix, stacklevel: int = 1) -> Matrix:
    """
    Adjugate: the transposed cofactor matrix, adj[c, r] = cofactor(r, c).

    The adjugate of a 1x1 matrix is [[1]].

    Raises:
        DimensionError: If the matrix is not square
    """
    check_matrices([mat], "adjoint")
    check_square(mat.shape, "adjoint")
    _warn_if_large(mat.rows - 1, stacklevel)
    return Matrix._wrap(_adjoint_array(mat.to_numpy()))


def inverse(mat: Matrix, eps: float = EPSILON, stacklevel: int = 1) -> Matrix:
    """
    Inverse via the adjugate, adjoint(mat) * (1 / det(mat)).

    The whole computation runs in floating point (float64 for integer
    matrices), so narrow integer element types cannot overflow or wrap
    in the intermediate cofactors.

    Args:
        mat: Square matrix
        eps: Singularity threshold on |det(mat)|
        stacklevel: Frame the large-order RuntimeWarning is attributed to

    Returns:
        Inverse in floating point

    Raises:
        DimensionError: If the matrix is not square
        SingularMatrixError: If |det(mat)| < eps
    """
    check_matrices([mat], "inverse")
    check_square(mat.shape, "inverse")
    n = mat.rows
    _warn_if_large(n, stacklevel)

    dtype = floating_dtype(mat.dtype)
    a = mat.to_numpy().astype(dtype)
    determinant = _laplace(a)
    if abs(determinant) < eps:
        raise SingularMatrixError(
            f"Matrix is singular: |det| = {abs(float(determinant)):.3g} is below "
            f"the threshold {eps:g}",
            matrix_name=f"{n}x{n} matrix",
            determinant=float(determinant),
            expected_rank=n,
        )

    return Matrix._wrap(_adjoint_array(a) * (dtype.type(1) / determinant))
