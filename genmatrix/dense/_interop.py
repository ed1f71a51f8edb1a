"""
numpy conversion helpers for the dense Matrix.

Conversion goes through ndarray.tolist(), so a Matrix built from an
array holds plain Python scalars (int, float, complex, bool) rather
than numpy scalar objects. Object arrays pass their elements through
untouched.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from genmatrix.core.exceptions import ValidationError


def array_to_rows(
    array: ArrayLike,
    name: str = "array",
) -> tuple[list[list[Any]], tuple[int, int]]:
    """
    Convert a 2D array-like into nested row lists.

    Args:
        array: numpy array or anything np.asarray accepts
        name: Parameter name for error messages

    Returns:
        (rows, shape): list of rows of Python scalars, and the array shape.
        The shape is needed because an empty row list loses the column count.

    Raises:
        ValidationError: If the input cannot be converted or is not 2D
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.ndim != 2:
        raise ValidationError(
            f"{name}: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.dtype.kind in ('U', 'S', 'M', 'm', 'V'):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
        )
    return arr.tolist(), (int(arr.shape[0]), int(arr.shape[1]))


def rows_to_array(rows: list[list[Any]], shape: tuple[int, int]) -> NDArray[Any]:
    """Build an ndarray with exactly the given shape, even when empty."""
    if shape[0] == 0 or shape[1] == 0:
        return np.empty(shape)
    return np.array(rows)
