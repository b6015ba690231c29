"""
Vector: fixed-size numeric vector.

The size of a Vector is fixed when it is constructed; no operation
resizes it. Element type is any numpy integer or floating dtype.
Binary operations promote their operands once through promote() and
return a new Vector; in-place operators compute the full result before
writing it back into the receiver in the receiver's dtype.

Construction:
    Vector(1, 2, 3)                     explicit elements, dtype deduced
    Vector([1, 2, 3], dtype=np.float32) any 1-D sequence or array
    Vector(values, size=3)              length-checked (SizeMismatchError)
    Vector(other_vector, dtype=...)     elementwise conversion
    Vector.filled(3, 0.5)               fill value
    v[Range(0, 3, 2)]                   slice of another vector
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core import elementwise
from pyalgebra.core.exceptions import DimensionError, ValidationError
from pyalgebra.core.formatting import render_vector
from pyalgebra.core.precision import DEFAULT_INT_DTYPE
from pyalgebra.core.promotion import is_numeric_scalar, promote
from pyalgebra.core.validation import (
    check_array,
    check_index,
    check_numeric_dtype,
    check_same_shape,
    check_size,
)
from pyalgebra.ranges import Index, Range

_COMPONENTS = ('x', 'y', 'z', 'w')


class Vector:
    """
    Ordered, fixed-size container of numeric elements.

    Args:
        *values: Either the elements themselves, or a single sequence,
            numpy array, Range or Vector to copy from
        dtype: Element type; deduced by promotion when None
        size: Required number of elements, checked when given

    Raises:
        ValidationError: Non-numeric elements or an empty vector
        DimensionError: A source array that is not 1-D
        SizeMismatchError: Length differs from `size`
    """

    __slots__ = ('_data',)

    # Make numpy defer to our reflected operators instead of broadcasting.
    __array_ufunc__ = None

    def __init__(self, *values: Any, dtype: Any = None, size: int | None = None):
        if dtype is not None:
            check_numeric_dtype(dtype, "dtype")

        if len(values) == 1 and not is_numeric_scalar(values[0]):
            source = values[0]
            if isinstance(source, Vector):
                source = source._data
            elif isinstance(source, Range):
                source = source.to_numpy()
        else:
            for i, value in enumerate(values):
                if not is_numeric_scalar(value):
                    raise ValidationError(
                        f"Vector: element {i} is not a number: {value!r}"
                    )
            if dtype is None and values:
                dtype = promote(*values)
            source = values

        data = check_array(source, "Vector", dtype=dtype)
        if data.ndim != 1:
            raise DimensionError(
                f"Vector: expected 1D values, got {data.ndim}D with shape {data.shape}"
            )
        if size is not None:
            check_size(data.shape[0], size, "Vector")
        if data.shape[0] == 0:
            raise ValidationError("Vector: requires at least one element")
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Vector:
        """Adopt an already-validated 1-D array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def filled(cls, size: int, value: Any, dtype: Any = None) -> Vector:
        """Vector of `size` copies of `value`."""
        if not is_numeric_scalar(value):
            raise ValidationError(f"Vector.filled: value is not a number: {value!r}")
        dtype = promote(value) if dtype is None else dtype
        return cls([value] * size, dtype=dtype)

    @classmethod
    def zeros(cls, size: int, dtype: Any = DEFAULT_INT_DTYPE) -> Vector:
        return cls.filled(size, 0, dtype=dtype)

    # --- Queries ---

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int]:
        return (self.size,)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def nbytes(self) -> int:
        """Size of the element buffer in bytes."""
        return self._data.nbytes

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.copy())

    # --- Conversion ---

    def astype(self, dtype: Any) -> Vector:
        """Elementwise conversion to another numeric dtype (may narrow)."""
        check_numeric_dtype(dtype, "dtype")
        return Vector._wrap(self._data.astype(dtype))

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    def to_list(self) -> list[Any]:
        return self._data.tolist()

    def to_tuple(self) -> tuple[Any, ...]:
        return tuple(self._data.tolist())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a 1-D numpy array."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        return np.array(self._data, dtype=dtype)

    # --- Access ---

    def _position(self, key: Any) -> int:
        if isinstance(key, Index):
            return key.resolve(self.size, "Vector")
        return check_index(key, self.size, "Vector")

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, Range):
            return Vector._wrap(self._data[key.indices(self.size, "Vector")])
        return self._data[self._position(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        position = self._position(key)
        if not is_numeric_scalar(value):
            raise ValidationError(f"Vector: assigned value is not a number: {value!r}")
        self._data[position] = value

    def _component_position(self, position: int) -> int:
        return check_index(position, self.size, f"Vector.{_COMPONENTS[position]}")

    @property
    def x(self) -> Any:
        return self._data[self._component_position(0)]

    @x.setter
    def x(self, value: Any) -> None:
        self[self._component_position(0)] = value

    @property
    def y(self) -> Any:
        return self._data[self._component_position(1)]

    @y.setter
    def y(self, value: Any) -> None:
        self[self._component_position(1)] = value

    @property
    def z(self) -> Any:
        return self._data[self._component_position(2)]

    @z.setter
    def z(self, value: Any) -> None:
        self[self._component_position(2)] = value

    @property
    def w(self) -> Any:
        return self._data[self._component_position(3)]

    @w.setter
    def w(self, value: Any) -> None:
        self[self._component_position(3)] = value

    def fill(self, value: Any) -> None:
        """Overwrite every element with `value`."""
        if not is_numeric_scalar(value):
            raise ValidationError(f"Vector.fill: value is not a number: {value!r}")
        self._data.fill(value)

    # --- Arithmetic ---

    def _binary(self, other: Any, op: str, reflected: bool = False) -> Any:
        if isinstance(other, Vector):
            check_same_shape([self.shape, other.shape], f"Vector {op}")
            rhs = other._data
        elif is_numeric_scalar(other):
            rhs = other
        else:
            return NotImplemented
        dtype = promote(self, other)
        lhs = self._data
        if reflected:
            lhs, rhs = rhs, lhs
        return Vector._wrap(elementwise.apply(op, lhs, rhs, dtype))

    def _inplace(self, other: Any, op: str) -> Any:
        result = self._binary(other, op)
        if result is NotImplemented:
            return NotImplemented
        self._data[...] = result._data.astype(self.dtype)
        return self

    def __add__(self, other: Any) -> Vector:
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> Vector:
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> Vector:
        return self._binary(other, "sub")

    def __rsub__(self, other: Any) -> Vector:
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other: Any) -> Vector:
        return self._binary(other, "mul")

    def __rmul__(self, other: Any) -> Vector:
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other: Any) -> Vector:
        return self._binary(other, "div")

    def __rtruediv__(self, other: Any) -> Vector:
        return self._binary(other, "div", reflected=True)

    def __iadd__(self, other: Any) -> Vector:
        return self._inplace(other, "add")

    def __isub__(self, other: Any) -> Vector:
        return self._inplace(other, "sub")

    def __imul__(self, other: Any) -> Vector:
        return self._inplace(other, "mul")

    def __itruediv__(self, other: Any) -> Vector:
        return self._inplace(other, "div")

    def __neg__(self) -> Vector:
        return Vector._wrap(np.negative(self._data))

    def __pos__(self) -> Vector:
        return self.copy()

    def __xor__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        from pyalgebra.vector.operations import cross
        return cross(self, other)

    def __matmul__(self, other: Any) -> Any:
        # Vector @ Matrix is handled by Matrix.__rmatmul__
        if not isinstance(other, Vector):
            return NotImplemented
        from pyalgebra.vector.operations import dot
        return dot(self, other)

    # --- Geometry shortcuts ---

    def length(self) -> Any:
        from pyalgebra.vector.operations import length
        return length(self)

    def normalized(self) -> Vector:
        from pyalgebra.vector.operations import normalize
        return normalize(self)

    def dot(self, *others: Vector) -> Any:
        from pyalgebra.vector.operations import dot
        return dot(self, *others)

    def cross(self, other: Vector) -> Vector:
        from pyalgebra.vector.operations import cross
        return cross(self, other)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def _ordering_keys(self, other: Any, op: str) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape([self.shape, other.shape], f"Vector {op}")
        return self.to_tuple(), other.to_tuple()

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
        return render_vector(self._data)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()}, dtype={self.dtype})"
