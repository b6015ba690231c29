"""
Core infrastructure for pyalgebra.

This module provides the shared pieces used by the vector, matrix and
linear-algebra layers.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    promotion: Numeric constraint and element-type promotion table
    precision: Tolerance constants and tolerance-based comparison
    elementwise: Elementwise arithmetic kernel
    formatting: Text rendering
"""

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

__all__ = [
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "RowCountMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
]
