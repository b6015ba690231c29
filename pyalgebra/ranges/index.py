"""
Pre-validated index into a container of known size.

An Index is checked against its bound when it is created, so an
out-of-range literal fails at the line that writes it rather than at
the access. Containers re-check the bound against their own size.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyalgebra.core.exceptions import IndexOutOfRangeError
from pyalgebra.core.validation import check_index


@dataclass(frozen=True)
class Index:
    """
    Integer index validated against an exclusive bound.

    Attributes:
        value: Position, 0 <= value < bound
        bound: Size of the container the index is meant for
    """
    value: int
    bound: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'value', check_index(self.value, self.bound, "Index"))

    def __index__(self) -> int:
        return self.value

    def resolve(self, size: int, name: str = "index") -> int:
        """
        Position of this index in a container of the given size.

        Raises:
            IndexOutOfRangeError: If the container size differs from the bound
        """
        if size != self.bound:
            raise IndexOutOfRangeError(
                f"{name}: Index declared for size {self.bound}, used on size {size}",
                index=self.value,
                bound=size,
            )
        return self.value
