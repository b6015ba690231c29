"""
Range descriptors for slicing vectors and matrices.

Range describes a (start, end, step) sequence over any numeric type and
enumerates it lazily. StaticRange is the integer-only variant meant for
literal slice bounds: a zero step and, when a bound is declared, an
out-of-bound first or last index are rejected when the range is created.

Both compute size analytically, without materializing the sequence:

    size = 0                            if step == 0
    size = 0                            if sign(end - start) != sign(step)
    size = ceil(|end - start| / |step|) otherwise

Slicing never trusts a range: check_bounds() runs against the axis
length of the container before any element is read.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.exceptions import IndexOutOfRangeError, ValidationError
from pyalgebra.core.promotion import is_numeric_scalar, promote


def _is_integral(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


@dataclass(frozen=True)
class Range:
    """
    Runtime (start, end, step) index sequence; end is exclusive.

    Attributes:
        start: First produced value
        end: Exclusive limit
        step: Increment, may be negative; zero yields an empty range
    """
    start: Any
    end: Any
    step: Any = 1

    def __post_init__(self) -> None:
        for field_name in ('start', 'end', 'step'):
            value = getattr(self, field_name)
            if not is_numeric_scalar(value):
                raise ValidationError(
                    f"{type(self).__name__}.{field_name}: expected a number, "
                    f"got {type(value).__name__}"
                )
            if isinstance(value, np.generic):
                # Python scalars, so endpoint arithmetic cannot wrap
                object.__setattr__(self, field_name, value.item())

    @property
    def is_integral(self) -> bool:
        """True if start, end and step are all integers."""
        return all(_is_integral(v) for v in (self.start, self.end, self.step))

    @property
    def size(self) -> int:
        if self.step == 0:
            return 0
        if self.step > 0 and self.start >= self.end:
            return 0
        if self.step < 0 and self.start <= self.end:
            return 0
        diff = abs(self.end - self.start)
        abs_step = abs(self.step)
        if self.is_integral:
            return int((diff + abs_step - 1) // abs_step)
        return int(math.ceil(diff / abs_step))

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        for k in range(self.size):
            yield self.start + k * self.step

    @property
    def first(self) -> Any:
        """First produced value, or None for an empty range."""
        return self.start if self.size > 0 else None

    @property
    def last(self) -> Any:
        """Last produced value, or None for an empty range."""
        n = self.size
        return self.start + (n - 1) * self.step if n > 0 else None

    @property
    def value_type(self) -> np.dtype:
        """Promoted element type of start, end and step."""
        return promote(self.start, self.end, self.step)

    def nbytes(self, dtype: Any = None) -> int:
        """Size in bytes of the materialized sequence."""
        dtype = self.value_type if dtype is None else np.dtype(dtype)
        return dtype.itemsize * self.size

    def to_list(self, dtype: Any = None) -> list[Any]:
        return self.to_numpy(dtype).tolist()

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        dtype = self.value_type if dtype is None else dtype
        return np.fromiter(iter(self), dtype=dtype, count=self.size)

    def check_bounds(self, limit: int, name: str = "range") -> None:
        """
        Verify every produced index lies inside [0, limit).

        The sequence is monotone, so only the first and last indices
        are checked. An empty range is always valid.

        Args:
            limit: Axis length of the container being sliced
            name: Axis name for error messages

        Raises:
            ValidationError: If a non-empty range has a non-integer start or step
            IndexOutOfRangeError: If the first or last index is out of bounds
        """
        if self.size == 0:
            return
        if not (_is_integral(self.start) and _is_integral(self.step)):
            raise ValidationError(
                f"{name}: slicing requires integer start and step, got {self!r}"
            )
        for label, index in (('start', self.first), ('last index', self.last)):
            if index < 0 or index >= limit:
                raise IndexOutOfRangeError(
                    f"{name}: {type(self).__name__} {label} {index} out of bounds "
                    f"for size {limit}",
                    index=int(index),
                    bound=limit,
                )

    def indices(self, limit: int, name: str = "range") -> NDArray[np.intp]:
        """Bounds-checked index array for fancy indexing."""
        self.check_bounds(limit, name)
        return np.fromiter(iter(self), dtype=np.intp, count=self.size)


@dataclass(frozen=True)
class StaticRange(Range):
    """
    Integer range with construction-time validation.

    Attributes:
        bound: Optional axis length the range is declared for. When
            given, an out-of-bound first or last index is rejected here,
            before the range can reach any container.
    """
    bound: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.is_integral:
            raise ValidationError(
                f"StaticRange: start, end and step must be integers, got "
                f"({self.start!r}, {self.end!r}, {self.step!r})"
            )
        if self.step == 0:
            raise ValidationError("StaticRange: step cannot be zero")
        if self.bound is not None:
            self.check_bounds(self.bound, "StaticRange")
