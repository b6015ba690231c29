"""
Range descriptors and checked indices.

Public API:
    Range        - runtime (start, end, step) sequence, any numeric type
    StaticRange  - integer range validated at construction
    Index        - integer index validated against a declared bound
"""

from pyalgebra.ranges.range import Range, StaticRange
from pyalgebra.ranges.index import Index

__all__ = [
    "Range",
    "StaticRange",
    "Index",
]
