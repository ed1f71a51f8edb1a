"""
Text rendering for the dense Matrix.

str(matrix) gives a bracketed grid with right-aligned columns. Matrices
with more than 2 * EDGE_ITEMS rows or columns show only the leading and
trailing EDGE_ITEMS of each, with "..." in between.
"""

from __future__ import annotations

from typing import Any

import numpy as np

# Rows/columns shown at each end before eliding the middle with "..."
EDGE_ITEMS = 4


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(EDGE_ITEMS))
    tail = list(range(length - EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def matrix_str(matrix: Any) -> str:
    """Bracketed grid, columns right-aligned, large matrices elided."""
    rows, columns = matrix.shape
    if rows == 0 or columns == 0:
        return "[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(columns)

    def cells(i: int) -> list[str]:
        out = [_format_value(matrix.get(i, j)) for j in col_head]
        if cols_truncated:
            out.append("...")
        out.extend(_format_value(matrix.get(i, j)) for j in col_tail)
        return out

    grid = [cells(i) for i in row_head]
    if rows_truncated:
        grid.append(["..."] * len(grid[0]))
    grid.extend(cells(i) for i in row_tail)

    widths = [max(len(line[c]) for line in grid) for c in range(len(grid[0]))]
    lines = [
        "[" + " ".join(cell.rjust(w) for cell, w in zip(line, widths)) + "]"
        for line in grid
    ]
    return "[" + "\n ".join(lines) + "]"
