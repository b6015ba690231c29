"""
Human-readable text rendering for vectors and matrices.

Vector: [1, 2, 3]
Matrix: [1, 2,
         3, 4]   (continuation rows are indented by one space)
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def format_element(value: Any) -> str:
    """Render one element as its Python scalar."""
    if isinstance(value, np.generic):
        value = value.item()
    return str(value)


def format_row(values: NDArray[Any]) -> str:
    return ", ".join(format_element(v) for v in values)


def render_vector(data: NDArray[Any]) -> str:
    """Bracketed, comma-separated elements."""
    return f"[{format_row(data)}]"


def render_matrix(data: NDArray[Any]) -> str:
    """Bracketed rows, separated by a comma and newline."""
    rows = [format_row(row) for row in data]
    return "[" + ",\n ".join(rows) + "]"
