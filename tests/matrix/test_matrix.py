"""
Tests for the Matrix type: construction, access, slicing, arithmetic,
matrix product operators, comparison and rendering.
"""

import numpy as np
import pytest

from pyalgebra import Index, Matrix, Range, StaticRange, Vector
from pyalgebra.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    RowCountMismatchError,
    SizeMismatchError,
    ValidationError,
)


@pytest.fixture
def m23():
    return Matrix([[1, 2, 3], [4, 5, 6]])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_list_of_rows(self, m23):
        assert m23.shape == (2, 3)
        assert m23.rows == 2
        assert m23.cols == 3
        assert m23.size == 6
        assert m23.dtype == np.int64

    def test_rows_as_vectors(self):
        m = Matrix([Vector(1, 2), Vector(3, 4)])
        assert m.to_list() == [[1, 2], [3, 4]]

    def test_flat_literal_with_shape(self):
        m = Matrix([1, 2, 3, 4, 5, 6], shape=(2, 3))
        assert m.to_list() == [[1, 2, 3], [4, 5, 6]]

    def test_flat_literal_wrong_count(self):
        with pytest.raises(SizeMismatchError) as exc_info:
            Matrix([1, 2, 3], shape=(2, 2))
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_from_flat(self):
        m = Matrix.from_flat(range(6), 3, 2)
        assert m.to_list() == [[0, 1], [2, 3], [4, 5]]

    def test_from_flat_wrong_count(self):
        with pytest.raises(SizeMismatchError):
            Matrix.from_flat([1, 2, 3, 4, 5], 2, 3)

    def test_row_count_mismatch(self):
        with pytest.raises(RowCountMismatchError) as exc_info:
            Matrix([[1, 2], [3, 4], [5, 6]], shape=(2, 2))
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_row_length_mismatch(self):
        with pytest.raises(SizeMismatchError, match="Matrix row 1"):
            Matrix([[1, 2, 3], [4, 5]])

    def test_row_length_against_shape(self):
        with pytest.raises(SizeMismatchError):
            Matrix([[1, 2], [3, 4]], shape=(2, 3))

    def test_scalar_in_row_list_rejected(self):
        with pytest.raises(ValidationError, match="list of rows"):
            Matrix([1, 2, 3])

    def test_from_numpy_is_copy(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
        m = Matrix(arr)
        assert m.dtype == np.float32
        arr[0, 0] = 100.0
        assert m[0, 0] == 1.0

    def test_numpy_shape_checked(self):
        with pytest.raises(DimensionError, match="expected shape"):
            Matrix(np.zeros((2, 3)), shape=(3, 2))

    def test_conversion(self, m23):
        m = Matrix(m23, dtype=np.float32)
        assert m.dtype == np.float32
        assert m == m23

    def test_filled_zeros_identity(self):
        assert Matrix.filled(2, 2, 1.5).to_list() == [[1.5, 1.5], [1.5, 1.5]]
        assert Matrix.zeros(1, 3).to_list() == [[0, 0, 0]]
        ident = Matrix.identity(3)
        assert ident.dtype == np.int64
        assert ident.to_list() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([["a", "b"], ["c", "d"]])


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_row_col_index(self, m23):
        assert m23[0, 2] == 3
        assert m23[1, 0] == 4

    def test_flat_index_is_row_major(self, m23):
        assert [m23[i] for i in range(6)] == [1, 2, 3, 4, 5, 6]
        assert m23[4] == m23[1, 1]

    def test_setitem(self, m23):
        m23[1, 2] = 60
        m23[0] = 10
        assert m23.to_list() == [[10, 2, 3], [4, 5, 60]]

    def test_out_of_range(self, m23):
        with pytest.raises(IndexOutOfRangeError):
            m23[2, 0]
        with pytest.raises(IndexOutOfRangeError):
            m23[0, 3]
        with pytest.raises(IndexOutOfRangeError):
            m23[6]
        with pytest.raises(IndexOutOfRangeError):
            m23[0, 3] = 1

    def test_checked_index(self, m23):
        assert m23[Index(1, 2), Index(2, 3)] == 6
        with pytest.raises(IndexOutOfRangeError):
            m23[Index(0, 3), 0]

    def test_wrong_index_arity(self, m23):
        with pytest.raises(ValidationError, match="3 components"):
            m23[0, 0, 0]

    def test_get_row_get_col(self, m23):
        row = m23.get_row(1)
        col = m23.get_col(2)
        assert row.shape == (1, 3)
        assert row.to_list() == [[4, 5, 6]]
        assert col.shape == (2, 1)
        assert col.to_list() == [[3], [6]]

    def test_row_col_vectors(self, m23):
        assert m23.row(0) == Vector(1, 2, 3)
        assert m23.col(1) == Vector(2, 5)

    def test_get_row_is_copy(self, m23):
        row = m23.get_row(0)
        row[0, 0] = 99
        assert m23[0, 0] == 1

    def test_iteration_yields_rows(self, m23):
        assert len(m23) == 2
        assert list(m23) == [Vector(1, 2, 3), Vector(4, 5, 6)]

    def test_fill(self, m23):
        m23.fill(0)
        assert m23 == Matrix.zeros(2, 3)


class TestSlicing:

    def test_leading_block_of_identity(self):
        ident = Matrix.identity(3)
        block = ident.slice(Range(0, 2), Range(0, 2))
        assert block == Matrix.identity(2)

    def test_subscript_form(self):
        m = Matrix.from_flat(range(16), 4, 4)
        assert m[Range(0, 4, 2), Range(1, 4, 2)].to_list() == [[1, 3], [9, 11]]

    def test_reverse_rows(self, m23):
        flipped = m23.slice(Range(1, -1, -1), StaticRange(0, 3))
        assert flipped.to_list() == [[4, 5, 6], [1, 2, 3]]

    def test_shape_matches_range_sizes(self):
        m = Matrix.from_flat(range(30), 5, 6)
        rows, cols = Range(0, 5, 2), Range(1, 6, 3)
        assert m.slice(rows, cols).shape == (rows.size, cols.size)

    def test_out_of_bounds(self, m23):
        with pytest.raises(IndexOutOfRangeError, match="Matrix cols"):
            m23.slice(Range(0, 2), Range(0, 4))

    def test_non_range_rejected(self, m23):
        with pytest.raises(ValidationError, match="must be a Range"):
            m23.slice(Range(0, 1), 2)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[10, 20], [30, 40]])
        assert a + b == Matrix([[11, 22], [33, 44]])
        assert b - a == Matrix([[9, 18], [27, 36]])

    def test_star_is_elementwise(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a * a == Matrix([[1, 4], [9, 16]])

    def test_scalar_both_sides(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a * 2 == 2 * a == Matrix([[2, 4], [6, 8]])
        assert 10 - a == Matrix([[9, 8], [7, 6]])

    def test_integer_division_truncates(self):
        a = Matrix([[7, -7]])
        assert (a / 2).to_list() == [[3, -3]]

    def test_integer_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Matrix([[1, 2]]) / Matrix([[1, 0]])

    def test_promotion(self):
        a = Matrix([[1, 2]], dtype=np.int8)
        b = Matrix([[0.5, 0.5]], dtype=np.float16)
        assert (a + b).dtype == np.float16
        assert (a + 1).dtype == np.int64

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2]]) + Matrix([[1], [2]])

    def test_inplace(self):
        a = Matrix([[1, 2], [3, 4]])
        alias = a
        a += 1
        a *= Matrix([[2, 2], [2, 2]])
        assert a is alias
        assert a == Matrix([[4, 6], [8, 10]])

    def test_inplace_keeps_dtype(self):
        a = Matrix([[1, 2]])
        a /= 0.5
        assert a.dtype == np.int64
        assert a.to_list() == [[2, 4]]

    def test_negation(self):
        assert -Matrix([[1, -2]]) == Matrix([[-1, 2]])


class TestMatrixProduct:

    def test_matrix_matrix(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        assert a @ b == Matrix([[19, 22], [43, 50]])

    def test_rectangular(self, m23):
        result = m23 @ m23.T
        assert result.shape == (2, 2)
        assert result == Matrix([[14, 32], [32, 77]])

    def test_matrix_vector(self, m23):
        result = m23 @ Vector(1, 0, 1)
        assert isinstance(result, Vector)
        assert result == Vector(4, 10)

    def test_vector_matrix(self, m23):
        result = Vector(1, 1) @ m23
        assert isinstance(result, Vector)
        assert result == Vector(5, 7, 9)

    def test_inner_dimension_mismatch(self, m23):
        with pytest.raises(DimensionError, match="inner dimensions"):
            m23 @ m23

    def test_identity_is_neutral(self):
        a = Matrix([[2.0, -1.0], [0.5, 3.0]])
        assert a @ Matrix.identity(2) == a
        assert Matrix.identity(2) @ a == a

    def test_inplace_composition(self):
        a = Matrix([[1, 2], [3, 4]])
        alias = a
        a @= Matrix([[0, 1], [1, 0]])
        assert a is alias
        assert a == Matrix([[2, 1], [4, 3]])

    def test_inplace_composition_requires_square(self, m23):
        with pytest.raises(DimensionError, match="square"):
            m23 @= Matrix.identity(3)


# ═══════════════════════════════════════════════════════════════════════
# Comparison, conversion, rendering
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_equality(self):
        assert Matrix([[1, 2]]) == Matrix([[1.0, 2.0]])
        assert Matrix([[1, 2]]) != Matrix([[2, 1]])
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_ordering_is_row_major_lexicographic(self):
        assert Matrix([[1, 2], [3, 4]]) < Matrix([[1, 2], [4, 0]])
        assert Matrix([[2, 0]]) > Matrix([[1, 9]])
        assert Matrix([[1, 1]]) <= Matrix([[1, 1]])

    def test_ordering_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix([[1, 2]]) < Matrix([[1], [2]])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix([[1]]))


class TestConversionAndRendering:

    def test_flat_list(self, m23):
        assert m23.to_flat_list() == [1, 2, 3, 4, 5, 6]

    def test_nbytes(self, m23):
        assert m23.nbytes == 48
        assert m23.astype(np.int16).nbytes == 12

    def test_is_square(self, m23):
        assert not m23.is_square
        assert Matrix.identity(2).is_square

    def test_numpy_interop(self, m23):
        np.testing.assert_array_equal(np.asarray(m23), [[1, 2, 3], [4, 5, 6]])

    def test_str(self):
        assert str(Matrix([[1, 2], [3, 4]])) == "[1, 2,\n 3, 4]"
        assert str(Matrix([[1.5, 2.0]])) == "[1.5, 2.0]"

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1, 2]], dtype=int64)"
