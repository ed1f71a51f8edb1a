"""
Row-major kernels for the dense Matrix.

Every function here works on flat tuples laid out row-major (row index
varies slowest) and returns a new tuple. Shapes are assumed already
validated by the caller; these functions do no checking of their own.

Intentionally naive: no blocking, no Strassen, no vectorization.
"""

from __future__ import annotations

import copy
import operator
from typing import Any, Callable

from genmatrix.core.protocols import ElementFactory


def fill(rows: int, columns: int, value: Any) -> tuple[Any, ...]:
    """rows*columns independent copies of value."""
    return tuple(copy.copy(value) for _ in range(rows * columns))


def fill_default(rows: int, columns: int, element_type: ElementFactory) -> tuple[Any, ...]:
    """rows*columns fresh default values."""
    return tuple(element_type() for _ in range(rows * columns))


def diagonal(
    rows: int,
    columns: int,
    value: Any,
    element_type: ElementFactory,
) -> tuple[Any, ...]:
    """Copies of value on (i, i) for i < min(rows, columns), default elsewhere."""
    return tuple(
        copy.copy(value) if i == j else element_type()
        for i in range(rows)
        for j in range(columns)
    )


def flatten(data: Any) -> tuple[Any, ...]:
    """Row-major flattening of a rectangular nested sequence."""
    return tuple(copy.copy(x) for row in data for x in row)


def transpose(data: tuple[Any, ...], rows: int, columns: int) -> tuple[Any, ...]:
    """
    Transpose an rows x columns buffer into a columns x rows buffer.

    Output position (j, i) takes input position (i, j).
    """
    return tuple(
        copy.copy(data[i * columns + j])
        for j in range(columns)
        for i in range(rows)
    )


def elementwise(
    left: tuple[Any, ...],
    right: tuple[Any, ...],
    op: Callable[[Any, Any], Any],
) -> tuple[Any, ...]:
    """op(left[k], right[k]) for every k, keeping left-then-right order."""
    return tuple(op(a, b) for a, b in zip(left, right))


def add(left: tuple[Any, ...], right: tuple[Any, ...]) -> tuple[Any, ...]:
    return elementwise(left, right, operator.add)


def subtract(left: tuple[Any, ...], right: tuple[Any, ...]) -> tuple[Any, ...]:
    return elementwise(left, right, operator.sub)


def matmul(
    left: tuple[Any, ...],
    right: tuple[Any, ...],
    rows: int,
    inner: int,
    columns: int,
    element_type: ElementFactory,
) -> tuple[Any, ...]:
    """
    Naive triple-loop product of (rows x inner) and (inner x columns).

    Each output entry starts from element_type() and accumulates
    left[i, k] * right[k, j] for k in [0, inner). When inner is 0 the
    result is all default values.

    Args:
        left: Row-major buffer of the left operand
        right: Row-major buffer of the right operand
        rows: Left operand row count
        inner: Shared inner dimension
        columns: Right operand column count
        element_type: Factory for the summation's starting value

    Returns:
        Row-major buffer of the rows x columns product
    """
    out = []
    for i in range(rows):
        base = i * inner
        for j in range(columns):
            acc = element_type()
            for k in range(inner):
                acc = acc + left[base + k] * right[k * columns + j]
            out.append(acc)
    return tuple(out)
