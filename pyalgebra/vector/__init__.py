"""
Fixed-size numeric vectors.

Public API:
    Vector          - the vector type
    length(v)       - Euclidean norm
    normalize(v)    - unit vector
    cross(a, b)     - 3-D cross product (also a ^ b)
    dot(*vs)        - n-ary dot product (also a @ b)
    cat(*vs)        - concatenation
    distance(a, b)  - Euclidean distance
    lerp(a, b, t)   - linear interpolation
    project(a, b)   - projection of a onto b
    reflect(a, n)   - reflection about unit normal n

The n-ary Hadamard product lives in pyalgebra.linalg since it also
applies to matrices.
"""

from pyalgebra.vector.vector import Vector
from pyalgebra.vector.operations import (
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

__all__ = [
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
]
