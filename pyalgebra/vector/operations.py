"""
Free functions over one or more vectors.

Every function validates all of its operands before computing anything
and returns a new value; no input is mutated.

Public API:
    length(v)            Euclidean norm
    normalize(v)         unit vector (zero vector returned unchanged)
    cross(a, b)          3-D cross product
    dot(*vectors)        n-ary dot product, sum_i prod_k v_k[i]
    cat(*vectors)        concatenation in argument order
    distance(a, b)       length(a - b)
    lerp(a, b, t)        a * (1 - t) + b * t
    project(a, b)        b * (dot(a, b) / dot(b, b))
    reflect(a, n)        a - n * 2 * dot(a, n)
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Sequence

import numpy as np

from pyalgebra.core.exceptions import DimensionError, NumericalError, ValidationError
from pyalgebra.core.promotion import floating_dtype, is_numeric_scalar, promote
from pyalgebra.core.validation import check_min_operands, check_same_shape
from pyalgebra.vector.vector import Vector


def check_vectors(operands: Sequence[Any], name: str) -> None:
    """Verify every operand is a Vector."""
    for i, operand in enumerate(operands):
        if not isinstance(operand, Vector):
            raise ValidationError(
                f"{name}: argument {i} must be a Vector, got {type(operand).__name__}"
            )


def length(v: Vector) -> np.floating:
    """
    Euclidean norm, sqrt(sum(v_i^2)).

    Integer vectors are measured in float64; floating vectors keep their dtype.
    """
    check_vectors([v], "length")
    data = v.to_numpy().astype(floating_dtype(v.dtype))
    return np.sqrt(np.sum(data * data))


def normalize(v: Vector) -> Vector:
    """
    Unit vector in the direction of v.

    A zero-length vector is returned unchanged (as a copy) rather than
    dividing by zero.
    """
    norm = length(v)
    if norm == 0:
        return v.copy()
    data = v.to_numpy().astype(norm.dtype)
    return Vector._wrap(data / norm)


def cross(a: Vector, b: Vector) -> Vector:
    """
    Standard 3-D cross product.

    Raises:
        DimensionError: If either vector does not have exactly 3 elements
    """
    check_vectors([a, b], "cross")
    if a.size != 3 or b.size != 3:
        raise DimensionError(
            f"cross: defined only for 3-element vectors, got sizes {a.size} and {b.size}"
        )
    dtype = promote(a, b)
    u = a.to_numpy().astype(dtype)
    v = b.to_numpy().astype(dtype)
    return Vector._wrap(np.array([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ], dtype=dtype))


def dot(*vectors: Vector) -> Any:
    """
    n-ary dot product: the sum over i of the product of every vector's i-th element.

    Args:
        *vectors: Two or more vectors of the same size

    Returns:
        Scalar of the promoted element type

    Raises:
        ValidationError: Fewer than two operands, or a non-Vector operand
        DimensionError: Sizes differ
    """
    check_min_operands(vectors, 2, "dot")
    check_vectors(vectors, "dot")
    check_same_shape([v.shape for v in vectors], "dot")
    dtype = promote(*vectors)
    products = reduce(np.multiply, (v.to_numpy().astype(dtype) for v in vectors))
    return np.sum(products, dtype=dtype)


def cat(*vectors: Vector) -> Vector:
    """
    Concatenate vectors of any sizes and element types, preserving order.

    The result size is the sum of the input sizes; its element type is the
    promotion of all input element types.
    """
    check_min_operands(vectors, 1, "cat")
    check_vectors(vectors, "cat")
    dtype = promote(*vectors)
    return Vector._wrap(np.concatenate([v.to_numpy().astype(dtype) for v in vectors]))


def distance(a: Vector, b: Vector) -> np.floating:
    """Euclidean distance, length(a - b)."""
    check_vectors([a, b], "distance")
    return length(a - b)


def lerp(a: Vector, b: Vector, t: Any) -> Vector:
    """
    Linear interpolation a * (1 - t) + b * t.

    The result element type also absorbs the type of t, so integer
    endpoints with a float parameter interpolate in floating point.
    """
    check_vectors([a, b], "lerp")
    check_same_shape([a.shape, b.shape], "lerp")
    if not is_numeric_scalar(t):
        raise ValidationError(f"lerp: t must be a number, got {type(t).__name__}")
    dtype = promote(a, b, t)
    t = dtype.type(t)
    lhs = a.to_numpy().astype(dtype)
    rhs = b.to_numpy().astype(dtype)
    return Vector._wrap((lhs * (dtype.type(1) - t) + rhs * t).astype(dtype))


def project(a: Vector, b: Vector) -> Vector:
    """
    Projection of a onto b, b * (dot(a, b) / dot(b, b)).

    The scale factor is a true (floating) quotient even for integer
    vectors, so the result is floating point. This differs from Vector `/`,
    which truncates on integer element types.

    Raises:
        NumericalError: If b is the zero vector
    """
    check_vectors([a, b], "project")
    denominator = dot(b, b)
    if denominator == 0:
        raise NumericalError("project: cannot project onto a zero vector")
    return b * (dot(a, b) / denominator)


def reflect(a: Vector, n: Vector) -> Vector:
    """Reflection of a about the plane with unit normal n, a - n * 2 * dot(a, n)."""
    check_vectors([a, n], "reflect")
    return a - n * (2 * dot(a, n))
