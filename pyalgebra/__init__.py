"""
pyalgebra: fixed-dimension vector and matrix algebra on numpy.

Value types for N-element vectors and Rows x Cols matrices over any
integer or floating-point element type, with explicit type promotion,
bounds-checked range slicing, and classical linear-algebra algorithms.

Submodules:
    core: exceptions, validation, promotion, tolerances
    ranges: Range, StaticRange, Index
    vector: Vector and vector operations
    matrix: Matrix
    linalg: transpose, determinant family, rank, products
"""

__version__ = "0.1.0"

from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    RowCountMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)
from pyalgebra.core.precision import EPSILON, allclose
from pyalgebra.core.promotion import promote
from pyalgebra.ranges import Range, StaticRange, Index
from pyalgebra.vector import (
    Vector,
    length,
    normalize,
    cross,
    dot,
    cat,
    distance,
    lerp,
    project,
    reflect,
)
from pyalgebra.matrix import Matrix
from pyalgebra.linalg import (
    transpose,
    trace,
    minor_matrix,
    det,
    cofactor,
    adjoint,
    inverse,
    rank,
    hadamard,
    matmul,
    kronecker_product,
    kronecker,
)

__all__ = [
    "__version__",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "RowCountMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    # Configuration / promotion
    "EPSILON",
    "allclose",
    "promote",
    # Ranges
    "Range",
    "StaticRange",
    "Index",
    # Vector
    "Vector",
    "length",
    "normalize",
    "cross",
    "dot",
    "cat",
    "distance",
    "lerp",
    "project",
    "reflect",
    # Matrix and algorithms
    "Matrix",
    "transpose",
    "trace",
    "minor_matrix",
    "det",
    "cofactor",
    "adjoint",
    "inverse",
    "rank",
    "hadamard",
    "matmul",
    "kronecker_product",
    "kronecker",
]
