"""
Tests for Range, StaticRange and Index.

Size is analytic: zero for a zero step or misordered bounds, otherwise
ceil(|end - start| / |step|). Bounds are validated before any access.
"""

import numpy as np
import pytest

from pyalgebra.core.exceptions import IndexOutOfRangeError, ValidationError
from pyalgebra.ranges import Index, Range, StaticRange


# ═══════════════════════════════════════════════════════════════════════
# Range
# ═══════════════════════════════════════════════════════════════════════


class TestRangeSize:

    @pytest.mark.parametrize("start, end, step, expected", [
        (0, 5, 1, 5),
        (0, 5, 2, 3),
        (0, 6, 2, 3),
        (5, 0, -1, 5),
        (5, 0, -2, 3),
        (0, 5, 0, 0),
        (5, 0, 1, 0),
        (0, 5, -1, 0),
        (3, 3, 1, 0),
        (0.0, 1.0, 0.25, 4),
        (0.0, 1.0, 0.3, 4),
    ])
    def test_analytic_size(self, start, end, step, expected):
        rng = Range(start, end, step)
        assert rng.size == expected
        assert len(rng) == expected

    def test_size_matches_enumeration(self):
        for start, end, step in [(0, 10, 3), (10, -3, -4), (2, 2, 1), (1, 9, 0)]:
            rng = Range(start, end, step)
            assert len(list(rng)) == rng.size

    def test_narrow_numpy_endpoints_do_not_wrap(self):
        rng = Range(np.int8(100), np.int8(-100), np.int8(-1))
        assert rng.size == 200
        assert rng.last == -99
        assert type(rng.start) is int

    def test_numpy_float_endpoints(self):
        rng = Range(np.float16(0), np.float16(1), np.float16(0.25))
        assert rng.size == 4
        assert type(rng.step) is float

    def test_default_step(self):
        assert Range(2, 5).to_list() == [2, 3, 4]


class TestRangeEnumeration:

    def test_negative_step(self):
        assert list(Range(5, 0, -2)) == [5, 3, 1]

    def test_float_values(self):
        np.testing.assert_allclose(Range(0.0, 1.0, 0.25).to_numpy(), [0.0, 0.25, 0.5, 0.75])

    def test_lazy_iteration(self):
        it = iter(Range(0, 10**12))
        assert next(it) == 0
        assert next(it) == 1

    def test_first_last(self):
        rng = Range(1, 10, 4)
        assert rng.first == 1
        assert rng.last == 9
        assert Range(0, 0).first is None
        assert Range(0, 0).last is None

    def test_value_type_and_bytes(self):
        assert Range(0, 4).value_type == np.int64
        assert Range(0, 1, 0.5).value_type == np.float64
        assert Range(0, 4).nbytes() == 32
        assert Range(0, 4).nbytes(np.int16) == 8

    def test_to_list_dtype(self):
        assert Range(0, 3).to_list(np.float32) == [0.0, 1.0, 2.0]

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="Range.end"):
            Range(0, "5")


class TestRangeBounds:

    def test_in_bounds(self):
        np.testing.assert_array_equal(Range(0, 3).indices(3), [0, 1, 2])

    def test_last_index_out_of_bounds(self):
        with pytest.raises(IndexOutOfRangeError, match="last index 3") as exc_info:
            Range(0, 4).check_bounds(3)
        assert exc_info.value.bound == 3

    def test_negative_start(self):
        with pytest.raises(IndexOutOfRangeError, match="start -1"):
            Range(-1, 2).check_bounds(3)

    def test_reverse_range_start_out_of_bounds(self):
        with pytest.raises(IndexOutOfRangeError):
            Range(5, 0, -1).check_bounds(3)

    def test_empty_range_always_valid(self):
        Range(10, 0, 1).check_bounds(3)
        assert Range(10, 0, 1).indices(3).size == 0

    def test_float_range_cannot_slice(self):
        with pytest.raises(ValidationError, match="integer"):
            Range(0.0, 2.0, 1.0).check_bounds(3)

    def test_float_end_with_integer_start_and_step(self):
        np.testing.assert_array_equal(Range(0, 2.5).indices(4), [0, 1, 2])
        with pytest.raises(IndexOutOfRangeError):
            Range(0, 3.5).check_bounds(3)


# ═══════════════════════════════════════════════════════════════════════
# StaticRange
# ═══════════════════════════════════════════════════════════════════════


class TestStaticRange:

    def test_size(self):
        assert StaticRange(0, 2).size == 2
        assert StaticRange(4, -1, -2).size == 3

    def test_zero_step_rejected_at_construction(self):
        with pytest.raises(ValidationError, match="step cannot be zero"):
            StaticRange(0, 3, 0)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be integers"):
            StaticRange(0, 2.5)

    def test_declared_bound_checked_at_construction(self):
        StaticRange(0, 3, 1, bound=3)
        with pytest.raises(IndexOutOfRangeError):
            StaticRange(0, 4, 1, bound=3)

    def test_is_a_range(self):
        assert isinstance(StaticRange(0, 1), Range)

    def test_immutable(self):
        rng = StaticRange(0, 2)
        with pytest.raises(AttributeError):
            rng.start = 1


# ═══════════════════════════════════════════════════════════════════════
# Index
# ═══════════════════════════════════════════════════════════════════════


class TestIndex:

    def test_valid(self):
        idx = Index(2, 3)
        assert idx.value == 2
        assert idx.resolve(3) == 2

    def test_out_of_range_at_creation(self):
        with pytest.raises(IndexOutOfRangeError):
            Index(3, 3)

    def test_wrong_container_size(self):
        with pytest.raises(IndexOutOfRangeError, match="declared for size 3"):
            Index(1, 3).resolve(4)

    def test_usable_as_python_index(self):
        assert [10, 20, 30][Index(1, 3)] == 20
