"""
Matrix: fixed-shape numeric matrix stored row-major.

The shape (rows, cols) is fixed when the matrix is constructed. Element
(r, c) lives at flat index r * cols + c. Elementwise operators promote
their operands once through promote(); `@` is the matrix product
(R x C @ C x K -> R x K) and also applies to vectors on either side.
Square matrices additionally support in-place composition (`@=`),
determinant, adjugate, inverse and trace.

Construction:
    Matrix([[1, 2], [3, 4]])                list of rows
    Matrix(rows, shape=(2, 2))              row count / row length checked
    Matrix([1, 2, 3, 4], shape=(2, 2))      flat row-major literal
    Matrix.from_flat(values, 2, 2)          flat row-major sequence
    Matrix(np_array_2d), Matrix(other)      conversion, optional dtype
    Matrix.filled(2, 3, 0.5), Matrix.identity(3)
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core import elementwise
from pyalgebra.core.exceptions import DimensionError, ValidationError
from pyalgebra.core.formatting import render_matrix
from pyalgebra.core.precision import DEFAULT_INT_DTYPE, EPSILON
from pyalgebra.core.promotion import is_numeric_scalar, promote
from pyalgebra.core.validation import (
    check_array,
    check_index,
    check_numeric_dtype,
    check_row_count,
    check_same_shape,
    check_size,
    check_square,
)
from pyalgebra.ranges import Index, Range
from pyalgebra.vector import Vector


def _as_row(row: Any) -> Any:
    return row.to_list() if isinstance(row, Vector) else row


class Matrix:
    """
    Rows x Cols grid of numeric elements.

    Args:
        values: List of rows, flat list (with `shape`), 2-D numpy array,
            or another Matrix
        dtype: Element type; deduced by promotion when None
        shape: Required (rows, cols), checked when given

    Raises:
        ValidationError: Non-numeric elements or an empty matrix
        RowCountMismatchError: Number of rows differs from shape[0]
        SizeMismatchError: A row length differs from the column count, or
            a flat literal differs from rows * cols
        DimensionError: An array source whose shape differs from `shape`
    """

    __slots__ = ('_data',)

    __array_ufunc__ = None

    def __init__(
        self,
        values: Any,
        dtype: Any = None,
        shape: tuple[int, int] | None = None,
    ):
        if dtype is not None:
            check_numeric_dtype(dtype, "dtype")

        if isinstance(values, Matrix):
            source = values._data
        elif isinstance(values, np.ndarray):
            source = values
        else:
            values = [_as_row(row) for row in values]
            if shape is not None and values and all(is_numeric_scalar(v) for v in values):
                rows, cols = shape
                check_size(len(values), rows * cols, "Matrix")
                source = np.reshape(check_array(values, "Matrix", dtype=dtype), (rows, cols))
            else:
                if shape is not None:
                    check_row_count(len(values), shape[0], "Matrix")
                for i, row in enumerate(values):
                    if is_numeric_scalar(row):
                        raise ValidationError(
                            f"Matrix: expected a list of rows, element {i} is a scalar"
                        )
                    expected = shape[1] if shape is not None else len(values[0])
                    check_size(len(row), expected, f"Matrix row {i}")
                source = values

        data = check_array(source, "Matrix", dtype=dtype)
        if data.ndim != 2:
            raise DimensionError(
                f"Matrix: expected 2D values, got {data.ndim}D with shape {data.shape}"
            )
        if shape is not None and data.shape != tuple(shape):
            raise DimensionError(
                f"Matrix: expected shape {tuple(shape)}, got {data.shape}"
            )
        if data.size == 0:
            raise ValidationError(f"Matrix: requires at least one element, got shape {data.shape}")
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt an already-validated 2-D array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_flat(cls, values: Any, rows: int, cols: int, dtype: Any = None) -> Matrix:
        """
        Build from a flat row-major sequence of rows * cols elements.

        Raises:
            SizeMismatchError: If the sequence length is not rows * cols
        """
        if isinstance(values, Vector):
            values = values.to_numpy()
        data = check_array(values, "Matrix.from_flat", dtype=dtype)
        if data.ndim != 1:
            raise DimensionError(
                f"Matrix.from_flat: expected 1D values, got {data.ndim}D"
            )
        check_size(data.shape[0], rows * cols, "Matrix.from_flat")
        return cls(data.reshape(rows, cols))

    @classmethod
    def filled(cls, rows: int, cols: int, value: Any, dtype: Any = None) -> Matrix:
        """Rows x Cols matrix with every element equal to `value`."""
        if not is_numeric_scalar(value):
            raise ValidationError(f"Matrix.filled: value is not a number: {value!r}")
        dtype = promote(value) if dtype is None else dtype
        return cls(np.full((rows, cols), value, dtype=dtype))

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: Any = DEFAULT_INT_DTYPE) -> Matrix:
        return cls.filled(rows, cols, 0, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype: Any = DEFAULT_INT_DTYPE) -> Matrix:
        """n x n identity matrix; identity matrices are square by construction."""
        check_numeric_dtype(dtype, "dtype")
        return cls(np.eye(n, dtype=dtype))

    # --- Queries ---

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def size(self) -> int:
        """Total number of elements, rows * cols."""
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def nbytes(self) -> int:
        return self._data.nbytes

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __len__(self) -> int:
        """Number of rows, matching iteration."""
        return self.rows

    def __iter__(self) -> Iterator[Vector]:
        for r in range(self.rows):
            yield self.row(r)

    # --- Conversion ---

    def astype(self, dtype: Any) -> Matrix:
        check_numeric_dtype(dtype, "dtype")
        return Matrix._wrap(self._data.astype(dtype))

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    def to_list(self) -> list[list[Any]]:
        """Elements as a list of rows."""
        return self._data.tolist()

    def to_flat_list(self) -> list[Any]:
        """Elements in row-major order."""
        return self._data.ravel().tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        return np.array(self._data, dtype=dtype)

    # --- Access ---

    def _axis_position(self, key: Any, bound: int, name: str) -> int:
        if isinstance(key, Index):
            return key.resolve(bound, name)
        return check_index(key, bound, name)

    def _cell(self, key: Any) -> tuple[int, int]:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValidationError(
                    f"Matrix: expected (row, col) index, got {len(key)} components"
                )
            return (
                self._axis_position(key[0], self.rows, "Matrix row"),
                self._axis_position(key[1], self.cols, "Matrix col"),
            )
        flat = self._axis_position(key, self.size, "Matrix")
        return divmod(flat, self.cols)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple) and len(key) == 2 and (
            isinstance(key[0], Range) or isinstance(key[1], Range)
        ):
            return self.slice(key[0], key[1])
        return self._data[self._cell(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        cell = self._cell(key)
        if not is_numeric_scalar(value):
            raise ValidationError(f"Matrix: assigned value is not a number: {value!r}")
        self._data[cell] = value

    def slice(self, row_range: Range, col_range: Range) -> Matrix:
        """
        Strided sub-matrix selected by one range per axis.

        Both ranges are bounds-checked against their axis before any
        element is read. The result is an independent copy whose shape is
        (row_range.size, col_range.size).

        Raises:
            ValidationError: If either argument is not a Range
            IndexOutOfRangeError: If either range leaves its axis
        """
        for label, rng in (("row range", row_range), ("col range", col_range)):
            if not isinstance(rng, Range):
                raise ValidationError(
                    f"Matrix.slice: {label} must be a Range, got {type(rng).__name__}"
                )
        row_idx = row_range.indices(self.rows, "Matrix rows")
        col_idx = col_range.indices(self.cols, "Matrix cols")
        return Matrix._wrap(self._data[np.ix_(row_idx, col_idx)])

    def get_row(self, r: Any) -> Matrix:
        """Row r as a 1 x cols matrix."""
        r = self._axis_position(r, self.rows, "Matrix.get_row")
        return Matrix._wrap(self._data[r:r + 1, :].copy())

    def get_col(self, c: Any) -> Matrix:
        """Column c as a rows x 1 matrix."""
        c = self._axis_position(c, self.cols, "Matrix.get_col")
        return Matrix._wrap(self._data[:, c:c + 1].copy())

    def row(self, r: Any) -> Vector:
        r = self._axis_position(r, self.rows, "Matrix.row")
        return Vector._wrap(self._data[r, :].copy())

    def col(self, c: Any) -> Vector:
        c = self._axis_position(c, self.cols, "Matrix.col")
        return Vector._wrap(self._data[:, c].copy())

    def fill(self, value: Any) -> None:
        """Overwrite every element with `value`."""
        if not is_numeric_scalar(value):
            raise ValidationError(f"Matrix.fill: value is not a number: {value!r}")
        self._data.fill(value)

    # --- Arithmetic ---

    def _binary(self, other: Any, op: str, reflected: bool = False) -> Any:
        if isinstance(other, Matrix):
            check_same_shape([self.shape, other.shape], f"Matrix {op}")
            rhs = other._data
        elif is_numeric_scalar(other):
            rhs = other
        else:
            return NotImplemented
        dtype = promote(self, other)
        lhs = self._data
        if reflected:
            lhs, rhs = rhs, lhs
        return Matrix._wrap(elementwise.apply(op, lhs, rhs, dtype))

    def _inplace(self, other: Any, op: str) -> Any:
        result = self._binary(other, op)
        if result is NotImplemented:
            return NotImplemented
        self._data[...] = result._data.astype(self.dtype)
        return self

    def __add__(self, other: Any) -> Matrix:
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> Matrix:
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> Matrix:
        return self._binary(other, "sub")

    def __rsub__(self, other: Any) -> Matrix:
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other: Any) -> Matrix:
        # Elementwise (Hadamard); the matrix product is `@`
        return self._binary(other, "mul")

    def __rmul__(self, other: Any) -> Matrix:
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other: Any) -> Matrix:
        return self._binary(other, "div")

    def __rtruediv__(self, other: Any) -> Matrix:
        return self._binary(other, "div", reflected=True)

    def __iadd__(self, other: Any) -> Matrix:
        return self._inplace(other, "add")

    def __isub__(self, other: Any) -> Matrix:
        return self._inplace(other, "sub")

    def __imul__(self, other: Any) -> Matrix:
        return self._inplace(other, "mul")

    def __itruediv__(self, other: Any) -> Matrix:
        return self._inplace(other, "div")

    def __neg__(self) -> Matrix:
        return Matrix._wrap(np.negative(self._data))

    def __pos__(self) -> Matrix:
        return self.copy()

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        from pyalgebra.linalg.products import matmul
        return matmul(self, other)

    def __rmatmul__(self, other: Any) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        from pyalgebra.linalg.products import matmul
        return matmul(other, self)

    def __imatmul__(self, other: Any) -> Matrix:
        """
        In-place composition, self = self @ other.

        Raises:
            DimensionError: Unless both matrices are square of the same order
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        check_square(self.shape, "Matrix @=")
        check_same_shape([self.shape, other.shape], "Matrix @=")
        from pyalgebra.linalg.products import matmul
        self._data[...] = matmul(self, other)._data.astype(self.dtype)
        return self

    # --- Linear algebra shortcuts ---

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def transpose(self) -> Matrix:
        from pyalgebra.linalg.transform import transpose
        return transpose(self)

    def trace(self) -> Any:
        from pyalgebra.linalg.transform import trace
        return trace(self)

    def minor(self, r: int, c: int) -> Matrix:
        from pyalgebra.linalg.transform import minor_matrix
        return minor_matrix(self, r, c)

    def det(self) -> Any:
        from pyalgebra.linalg.determinant import det
        return det(self, stacklevel=2)

    def cofactor(self, r: int, c: int) -> Any:
        from pyalgebra.linalg.determinant import cofactor
        return cofactor(self, r, c, stacklevel=2)

    def adjoint(self) -> Matrix:
        from pyalgebra.linalg.determinant import adjoint
        return adjoint(self, stacklevel=2)

    def inverse(self, eps: float = EPSILON) -> Matrix:
        from pyalgebra.linalg.determinant import inverse
        return inverse(self, eps=eps, stacklevel=2)

    def rank(self, eps: float = EPSILON) -> int:
        from pyalgebra.linalg.elimination import rank
        return rank(self, eps=eps)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def _ordering_keys(self, other: Any, op: str) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape([self.shape, other.shape], f"Matrix {op}")
        return tuple(self.to_flat_list()), tuple(other.to_flat_list())

    def __lt__(self, other: Any) -> bool:
        keys = self._ordering_keys(other, "<")
        return keys if keys is NotImplemented else keys[0] < keys[1]

    def __le__(self, other: Any) -> bool:
        keys = self._ordering_keys(other, "<=")
        return keys if keys is NotImplemented else keys[0] <= keys[1]

    def __gt__(self, other: Any) -> bool:
        keys = self._ordering_keys(other, ">")
        return keys if keys is NotImplemented else keys[0] > keys[1]

    def __ge__(self, other: Any) -> bool:
        keys = self._ordering_keys(other, ">=")
        return keys if keys is NotImplemented else keys[0] >= keys[1]

    # --- Rendering ---

    def __str__(self) -> str:
        return render_matrix(self._data)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()}, dtype={self.dtype})"
