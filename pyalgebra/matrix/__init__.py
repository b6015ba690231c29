"""
Fixed-shape numeric matrices.

Public API:
    Matrix  - the matrix type (row-major, rows x cols fixed at construction)

Algorithms over matrices (det, inverse, rank, Kronecker, ...) are in
pyalgebra.linalg and are also reachable as Matrix methods.
"""

from pyalgebra.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
