"""
Linear-algebra algorithms over Matrix (and Vector, for products).

All functions validate their operands first and return new values;
inputs are never mutated.

Submodules:
    transform: transpose, trace, minor_matrix
    determinant: det, cofactor, adjoint, inverse
    elimination: rank
    products: hadamard, matmul, kronecker_product, kronecker
"""

from pyalgebra.linalg.transform import transpose, trace, minor_matrix
from pyalgebra.linalg.determinant import det, cofactor, adjoint, inverse
from pyalgebra.linalg.elimination import rank
from pyalgebra.linalg.products import (
    hadamard,
    matmul,
    kronecker_product,
    kronecker,
)

__all__ = [
    # Structure
    "transpose",
    "trace",
    "minor_matrix",
    # Determinant family
    "det",
    "cofactor",
    "adjoint",
    "inverse",
    # Elimination
    "rank",
    # Products
    "hadamard",
    "matmul",
    "kronecker_product",
    "kronecker",
]
