"""
Matrix rank by Gaussian elimination.
"""

from __future__ import annotations

import numpy as np

from pyalgebra.core.precision import EPSILON
from pyalgebra.core.promotion import floating_dtype
from pyalgebra.linalg.transform import check_matrices
from pyalgebra.matrix import Matrix


def rank(mat: Matrix, eps: float = EPSILON) -> int:
    """
    Number of linearly independent rows, by pivoted elimination.

    For each column in turn, the unused row with the largest entry in
    that column becomes the pivot, provided its magnitude exceeds eps;
    the column is then eliminated from every other unused row. The rank
    is the number of pivots found. Works for any shape.

    Args:
        mat: Matrix of any shape
        eps: Magnitude at or below which an entry counts as zero

    Returns:
        The rank, 0 <= rank <= min(rows, cols)
    """
    check_matrices([mat], "rank")
    work = mat.to_numpy().astype(floating_dtype(mat.dtype))
    n_rows, n_cols = work.shape
    unused = np.ones(n_rows, dtype=bool)
    pivots = 0

    for col in range(n_cols):
        candidates = np.flatnonzero(unused)
        if len(candidates) == 0:
            break
        magnitudes = np.abs(work[candidates, col])
        best = int(np.argmax(magnitudes))
        if magnitudes[best] <= eps:
            continue

        pivot = candidates[best]
        unused[pivot] = False
        pivots += 1
        for row in np.flatnonzero(unused):
            factor = work[row, col] / work[pivot, col]
            work[row, col:] -= factor * work[pivot, col:]

    return pivots
