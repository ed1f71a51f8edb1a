"""
Input validation utilities for genmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (integer-like indices such as numpy.int64
      are normalized to int)
    - No negative-index wrap-around
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from collections.abc import Sequence
from typing import Any

from genmatrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    ShapeError,
    ValidationError,
)
from genmatrix.core.protocols import REQUIRED_OPERATIONS, Element


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_index(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_count(value: Any, name: str) -> int:
    """
    Verify a single dimension is a non-negative integer.

    Zero is accepted: a matrix may have no rows or no columns.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The value, unchanged

    Raises:
        InvalidDimensionError: If value is not a non-negative int
    """
    if not _is_count(value):
        raise InvalidDimensionError(
            f"{name}: expected a non-negative integer, got {value!r}",
            dimension=value,
        )
    return value


def check_dimension(dimension: Any, name: str = "dimension") -> tuple[int, int]:
    """
    Verify a (rows, columns) pair.

    Args:
        dimension: Candidate pair
        name: Parameter name for error messages

    Returns:
        The pair as a tuple of two ints

    Raises:
        InvalidDimensionError: If dimension is not a pair of non-negative ints
    """
    if not isinstance(dimension, tuple) or len(dimension) != 2:
        raise InvalidDimensionError(
            f"{name}: expected a (rows, columns) tuple, got {dimension!r}",
            dimension=dimension,
        )
    rows, columns = dimension
    if not (_is_count(rows) and _is_count(columns)):
        raise InvalidDimensionError(
            f"{name}: expected non-negative integers, got {dimension!r}",
            dimension=dimension,
        )
    return rows, columns


def check_rectangular(data: Any, name: str = "data") -> tuple[int, int]:
    """
    Verify nested data forms a rectangular grid.

    Args:
        data: Outer sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (rows, columns); columns is 0 when there are no rows

    Raises:
        ValidationError: If data or any row is not a sequence
        ShapeError: If rows have inconsistent lengths
    """
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )
    if len(data) == 0:
        return 0, 0

    expected = None
    for i, row in enumerate(data):
        if not isinstance(row, Sequence) or isinstance(row, (str, bytes)):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence"
            )
        if expected is None:
            expected = len(row)
        elif len(row) != expected:
            raise ShapeError(
                f"{name}: row {i} has {len(row)} columns, expected {expected}",
                row=i,
                expected_columns=expected,
                actual_columns=len(row),
            )
    return len(data), expected


def check_element(value: Any, name: str) -> None:
    """
    Verify a value supports the arithmetic a matrix needs.

    Args:
        value: Candidate element
        name: Description for error messages (e.g. "data[1][2]")

    Raises:
        ValidationError: If value lacks any of __add__, __sub__, __mul__
    """
    if not isinstance(value, Element):
        missing = [op for op in REQUIRED_OPERATIONS if not hasattr(value, op)]
        raise ValidationError(
            f"{name}: {type(value).__name__} does not support {', '.join(missing)}"
        )


def check_index(
    index: Any,
    shape: tuple[int, int],
) -> tuple[int, int]:
    """
    Verify a (row, column) index lies inside a matrix of the given shape.

    Negative indices are out of bounds; there is no wrap-around.

    Args:
        index: Candidate (row, column) pair
        shape: (rows, columns) of the matrix being indexed

    Returns:
        The index as a tuple of two Python ints

    Raises:
        ValidationError: If index is not a pair of integers (bool rejected)
        IndexOutOfBoundsError: If either component is outside its dimension
    """
    if not isinstance(index, tuple) or len(index) != 2:
        raise ValidationError(f"index: expected a (row, column) tuple, got {index!r}")
    if not (_is_index(index[0]) and _is_index(index[1])):
        raise ValidationError(f"index: expected integers, got {index!r}")
    i, j = int(index[0]), int(index[1])

    rows, columns = shape
    if not (0 <= i < rows and 0 <= j < columns):
        raise IndexOutOfBoundsError(
            f"index ({i}, {j}) out of bounds for matrix of shape {rows}x{columns}",
            index=(i, j),
            shape=shape,
        )
    return i, j


def check_axis_index(
    value: Any,
    size: int,
    name: str,
    shape: tuple[int, int],
) -> int:
    """
    Verify a single row or column index.

    Args:
        value: Candidate index
        size: Length of the axis being indexed
        name: 'row' or 'column', for error messages
        shape: Full matrix shape, attached to the raised error

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If value is not an int
        IndexOutOfBoundsError: If value is negative or >= size
    """
    if not _is_index(value):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    value = int(value)
    if not 0 <= value < size:
        raise IndexOutOfBoundsError(
            f"{name} {value} out of bounds for matrix of shape {shape[0]}x{shape[1]}",
            shape=shape,
        )
    return value


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operands must have the same shape, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = "multiply",
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If left columns != right rows
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions differ, "
            f"{left[0]}x{left[1]} has {left[1]} columns but "
            f"{right[0]}x{right[1]} has {right[0]} rows",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
